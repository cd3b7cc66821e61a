"""Mail transports used by the email channel."""

from infrastructure.notifications.mail.base import Mailer
from infrastructure.notifications.mail.smtp import SmtpMailer

__all__ = ["Mailer", "SmtpMailer"]
