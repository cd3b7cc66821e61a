"""Email channel implementation using a pluggable mail transport."""

from email.message import EmailMessage
from email.utils import formataddr
from typing import Optional

from structlog.stdlib import BoundLogger

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.exceptions import MailTransportError
from infrastructure.notifications.mail.base import Mailer
from infrastructure.notifications.models import (
    Notification,
    NotificationResult,
    Recipient,
)
from infrastructure.notifications.templates import TemplateRenderer


class EmailChannel(NotificationChannel):
    """Email notification channel.

    Renders the HTML body through the template renderer when one is
    available (raw content otherwise) and hands the message to the mailer.
    The channel is configured as soon as a sender address is set.
    """

    def __init__(
        self,
        mailer: Mailer,
        from_address: str,
        from_name: str = "",
        template_renderer: Optional[TemplateRenderer] = None,
        logger: Optional[BoundLogger] = None,
    ):
        super().__init__(logger)
        self.mailer = mailer
        self.from_address = from_address
        self.from_name = from_name
        self.template_renderer = template_renderer

    @property
    def name(self) -> str:
        return "email"

    @property
    def retry_priority(self) -> int:
        return 100

    def is_configured(self) -> bool:
        return bool(self.from_address)

    @property
    def sender(self) -> str:
        """From header value, ``Name <address>`` when a display name is set."""
        if self.from_name:
            return formataddr((self.from_name, self.from_address))
        return self.from_address

    def _render_body(self, notification: Notification) -> str:
        if self.template_renderer is not None and self.template_renderer.is_available():
            return self.template_renderer.render(notification, "html")
        return notification.content

    def _do_send(
        self, notification: Notification, recipient: Recipient
    ) -> NotificationResult:
        if not recipient.email:
            return NotificationResult.failed(
                channel=self.name,
                message="Recipient has no email address",
            )

        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = recipient.email
        message["Subject"] = notification.title
        message.set_content(self._render_body(notification), subtype="html")

        try:
            self.mailer.send(message)
        except MailTransportError as e:
            self.logger.error(
                "email_send_failed",
                recipient=recipient.email,
                error=str(e),
            )
            return NotificationResult.failed(
                channel=self.name,
                message=f"Failed to send email: {e}",
                metadata={"exception": type(e).__name__},
            )

        self.logger.info(
            "email_sent",
            recipient=recipient.email,
            subject=notification.title,
        )
        return NotificationResult.success(
            channel=self.name,
            message=f"Email sent to {recipient.email}",
        )
