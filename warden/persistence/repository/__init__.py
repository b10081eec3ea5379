"""PostgreSQL repository implementations."""

from warden.persistence.repository.identity import PostgresIdentityRepository

__all__ = ["PostgresIdentityRepository"]
