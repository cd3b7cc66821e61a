"""SMTP mail transport built on smtplib."""

import smtplib
from email.message import EmailMessage
from typing import Optional

from structlog.stdlib import BoundLogger

from infrastructure.configuration import EmailSettings
from infrastructure.logging import get_module_logger
from infrastructure.notifications.exceptions import MailTransportError


class SmtpMailer:
    """Deliver email messages through an SMTP relay.

    A new connection is opened for every message; STARTTLS is issued when
    enabled and the login only happens when both a username and a password
    are set.

    Usage:
        mailer = SmtpMailer.from_settings(settings.email)
        mailer.send(message)
    """

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = True,
        timeout: float = 10.0,
        logger: Optional[BoundLogger] = None,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout
        self.logger = logger if logger is not None else get_module_logger()

    @classmethod
    def from_settings(
        cls, settings: EmailSettings, logger: Optional[BoundLogger] = None
    ) -> "SmtpMailer":
        return cls(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.SMTP_USERNAME,
            password=settings.SMTP_PASSWORD,
            use_tls=settings.SMTP_USE_TLS,
            timeout=settings.SMTP_TIMEOUT,
            logger=logger,
        )

    def send(self, message: EmailMessage) -> None:
        """Send one message.

        Raises:
            MailTransportError: If no host is configured, or the SMTP
                conversation or the socket fails.
        """
        if not self.host:
            raise MailTransportError("SMTP host is not configured")

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                if self.use_tls:
                    server.starttls()
                if self.username and self.password:
                    server.login(self.username, self.password)
                server.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            self.logger.error(
                "smtp_send_failed",
                host=self.host,
                port=self.port,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise MailTransportError(str(e)) from e

        self.logger.debug("smtp_message_sent", host=self.host, to=message["To"])
