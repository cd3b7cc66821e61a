"""Email channel and SMTP transport settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class EmailSettings(IntegrationSettings):
    """Email channel configuration.

    Environment Variables:
        EMAIL_ENABLED: Register the email channel at startup
        EMAIL_FROM: Sender address; the channel is unconfigured while empty
        EMAIL_FROM_NAME: Optional display name for the sender
        SMTP_HOST: SMTP server host name
        SMTP_PORT: SMTP server port (default: 587)
        SMTP_USERNAME: Optional SMTP login
        SMTP_PASSWORD: Optional SMTP password
        SMTP_USE_TLS: Issue STARTTLS before login (default: True)
        SMTP_TIMEOUT: Socket timeout in seconds (default: 10)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        sender = settings.email.EMAIL_FROM
        host = settings.email.SMTP_HOST
        ```
    """

    EMAIL_ENABLED: bool = False
    EMAIL_FROM: str = ""
    EMAIL_FROM_NAME: str = ""
    SMTP_HOST: str = ""
    SMTP_PORT: int = 587
    SMTP_USERNAME: str | None = None
    SMTP_PASSWORD: str | None = None
    SMTP_USE_TLS: bool = True
    SMTP_TIMEOUT: float = Field(default=10.0, gt=0)
