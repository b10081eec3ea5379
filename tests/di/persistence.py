"""Mock persistence providers for testing."""

from dishka import Scope, provide

from warden.domain.repository import IdentityRepository
from warden.persistence.repository.inmemory import InMemoryIdentityRepository
from warden.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_identity_repository(self) -> IdentityRepository:
        """Provide in-memory identity repository."""
        return InMemoryIdentityRepository()
