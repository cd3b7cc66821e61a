"""Mail transport interface."""

from email.message import EmailMessage
from typing import Protocol, runtime_checkable


@runtime_checkable
class Mailer(Protocol):
    """Hands a fully built email message to a delivery backend.

    Implementations raise MailTransportError when the message could not be
    handed off; any other exception is treated as an unexpected fault by
    the email channel's error boundary.
    """

    def send(self, message: EmailMessage) -> None: ...
