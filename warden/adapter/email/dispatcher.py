"""Verification email dispatch over SMTP."""

import asyncio
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import logfire

from warden.adapter.error import EmailDeliveryError
from warden.config import EmailSettings
from warden.domain.service.verification_service import EmailDispatcher

VERIFICATION_SUBJECT = "Confirm your email address"

VERIFICATION_TEXT = """Hello,

Please confirm your email address by opening the link below:
{verification_link}

If you did not create an account, you can ignore this email.

-- {from_name}
"""

VERIFICATION_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; }}
        .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
        .button {{ display: inline-block; padding: 12px 24px; background: #2563eb; color: white; text-decoration: none; border-radius: 6px; }}
        .footer {{ margin-top: 30px; color: #6b7280; font-size: 14px; }}
    </style>
</head>
<body>
    <div class="container">
        <h2>Confirm your email address</h2>
        <p>Click the button below to finish setting up your account.</p>
        <p style="margin: 30px 0;">
            <a href="{verification_link}" class="button">Confirm email</a>
        </p>
        <p>Or copy and paste this link into your browser:</p>
        <p style="word-break: break-all; color: #6b7280;">{verification_link}</p>
        <div class="footer">
            <p>If you did not create an account, you can ignore this email.</p>
            <p>-- {from_name}</p>
        </div>
    </div>
</body>
</html>
"""


class VerificationEmailDispatcher(EmailDispatcher):
    """Base class for verification email dispatchers.

    Provides type distinction for dependency injection.
    """

    pass


class SmtpEmailDispatcher(VerificationEmailDispatcher):
    """Sends verification emails through an SMTP server.

    smtplib is blocking, so each send runs in a worker thread.
    """

    def __init__(self, settings: EmailSettings) -> None:
        """Initialize SMTP dispatcher.

        Args:
            settings: SMTP server, sender and link configuration
        """
        self.settings = settings

    def verification_link(self, token: str) -> str:
        """Build the link a recipient follows to confirm their email."""
        return self.settings.verification_url_template.format(token=token)

    def _create_message(self, to_email: str, token: str) -> MIMEMultipart:
        link = self.verification_link(token)
        msg = MIMEMultipart("alternative")
        msg["Subject"] = VERIFICATION_SUBJECT
        msg["From"] = f"{self.settings.from_name} <{self.settings.from_email}>"
        msg["To"] = to_email

        msg.attach(
            MIMEText(
                VERIFICATION_TEXT.format(
                    verification_link=link, from_name=self.settings.from_name
                ),
                "plain",
            )
        )
        msg.attach(
            MIMEText(
                VERIFICATION_HTML.format(
                    verification_link=link, from_name=self.settings.from_name
                ),
                "html",
            )
        )
        return msg

    def _send(self, message: MIMEMultipart) -> None:
        settings = self.settings
        password = (
            settings.smtp_password.get_secret_value() if settings.smtp_password else ""
        )

        if settings.smtp_security == "tls":
            # Implicit TLS (port 465)
            with smtplib.SMTP_SSL(
                settings.smtp_host,
                settings.smtp_port,
                context=ssl.create_default_context(),
                timeout=settings.timeout_seconds,
            ) as server:
                if settings.smtp_user:
                    server.login(settings.smtp_user, password)
                server.send_message(message)
            return

        with smtplib.SMTP(
            settings.smtp_host, settings.smtp_port, timeout=settings.timeout_seconds
        ) as server:
            if settings.smtp_security == "starttls":
                server.starttls(context=ssl.create_default_context())
            if settings.smtp_user:
                server.login(settings.smtp_user, password)
            server.send_message(message)

    async def send_verification(self, email: str, token: str) -> None:
        """Send the verification email.

        Args:
            email: Recipient address
            token: Verification token to embed in the link

        Raises:
            EmailDeliveryError: If the SMTP exchange fails
        """
        if not self.settings.enabled:
            logfire.warn("Email disabled, verification email not sent", email=email)
            return

        message = self._create_message(email, token)
        with logfire.span("smtp.send_verification", email=email):
            try:
                await asyncio.to_thread(self._send, message)
            except (smtplib.SMTPException, OSError) as e:
                logfire.error(
                    "Verification email delivery failed", email=email, error=str(e)
                )
                raise EmailDeliveryError(f"Could not send email to {email}") from e

        logfire.info("Verification email sent", email=email)


class MockEmailDispatcher(VerificationEmailDispatcher):
    """Mock dispatcher for testing.

    Records every message instead of sending it. Set ``fail`` to make the
    next sends raise.
    """

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []
        self.fail = False

    async def send_verification(self, email: str, token: str) -> None:
        """Record the message, or fail if configured to."""
        if self.fail:
            raise EmailDeliveryError(f"Could not send email to {email}")
        self.sent.append((email, token))

    def last_token_for(self, email: str) -> str | None:
        """Return the most recent token sent to an address."""
        for recipient, token in reversed(self.sent):
            if recipient == email:
                return token
        return None
