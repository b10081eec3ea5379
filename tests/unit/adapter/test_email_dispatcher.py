"""Unit tests for the SMTP verification email dispatcher."""

import smtplib
from unittest.mock import MagicMock, patch

import pytest

from warden.adapter.email import SmtpEmailDispatcher
from warden.adapter.error import EmailDeliveryError
from warden.config import EmailSettings
from warden.domain.error import UpstreamError


def enabled_settings(**overrides) -> EmailSettings:
    data = {
        "enabled": True,
        "smtp_host": "smtp.example.com",
        "smtp_security": "plain",
        "from_email": "no-reply@example.com",
        "verification_url_template": "https://app.example.com/verify/{token}",
    }
    data.update(overrides)
    return EmailSettings(**data)


class TestSmtpEmailDispatcher:
    def test_message_embeds_verification_link(self):
        dispatcher = SmtpEmailDispatcher(enabled_settings())

        message = dispatcher._create_message("alice@x.com", "tok-123")
        parts = [part.get_payload(decode=True).decode() for part in message.get_payload()]

        assert message["To"] == "alice@x.com"
        assert message["From"] == "Warden <no-reply@example.com>"
        assert len(parts) == 2
        assert all("https://app.example.com/verify/tok-123" in part for part in parts)

    @pytest.mark.asyncio
    async def test_disabled_dispatcher_sends_nothing(self):
        dispatcher = SmtpEmailDispatcher(EmailSettings(enabled=False))

        with patch("warden.adapter.email.dispatcher.smtplib.SMTP") as smtp:
            await dispatcher.send_verification("alice@x.com", "tok-123")

        smtp.assert_not_called()

    @pytest.mark.asyncio
    async def test_sends_through_smtp(self):
        dispatcher = SmtpEmailDispatcher(enabled_settings(smtp_user="mailer"))
        server = MagicMock()

        with patch("warden.adapter.email.dispatcher.smtplib.SMTP") as smtp:
            smtp.return_value.__enter__.return_value = server
            await dispatcher.send_verification("alice@x.com", "tok-123")

        server.login.assert_called_once_with("mailer", "")
        server.send_message.assert_called_once()
        server.starttls.assert_not_called()

    @pytest.mark.asyncio
    async def test_smtp_failure_is_an_upstream_error(self):
        dispatcher = SmtpEmailDispatcher(enabled_settings())

        with patch(
            "warden.adapter.email.dispatcher.smtplib.SMTP",
            side_effect=smtplib.SMTPConnectError(421, "unavailable"),
        ):
            with pytest.raises(EmailDeliveryError) as exc_info:
                await dispatcher.send_verification("alice@x.com", "tok-123")

        assert isinstance(exc_info.value, UpstreamError)

    @pytest.mark.asyncio
    async def test_connection_refused_is_an_upstream_error(self):
        dispatcher = SmtpEmailDispatcher(enabled_settings())

        with patch(
            "warden.adapter.email.dispatcher.smtplib.SMTP",
            side_effect=ConnectionRefusedError(),
        ):
            with pytest.raises(UpstreamError):
                await dispatcher.send_verification("alice@x.com", "tok-123")
