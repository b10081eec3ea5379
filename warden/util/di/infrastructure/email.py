"""Email infrastructure providers."""

from dishka import Scope, provide

from warden.adapter.email import SmtpEmailDispatcher
from warden.config import EmailSettings
from warden.domain.service import EmailDispatcher
from warden.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_dispatcher(self, email_settings: EmailSettings) -> EmailDispatcher:
        """Provide SMTP verification email dispatcher."""
        return SmtpEmailDispatcher(settings=email_settings)
