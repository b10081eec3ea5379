"""PostgreSQL implementation of Identity repository."""

from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from warden.domain.model import Identity
from warden.domain.repository import IdentityRepository
from warden.domain.value import AuthProvider, IdentityId
from warden.persistence.mappers import (
    identity_to_dict,
    identity_to_link_dicts,
    row_to_identity,
)
from warden.persistence.tables import identities_table, identity_provider_links_table


class PostgresIdentityRepository(IdentityRepository):
    """PostgreSQL implementation of IdentityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *criteria) -> Optional[Identity]:
        """Load one identity row matching ``criteria`` together with its links."""
        stmt = select(identities_table).where(*criteria)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        links_stmt = (
            select(identity_provider_links_table)
            .where(identity_provider_links_table.c.identity_id == row["id"])
            .order_by(identity_provider_links_table.c.created_at)
        )
        links = await self.session.execute(links_stmt)
        return row_to_identity(dict(row), [dict(link) for link in links.mappings()])

    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find an identity by ID."""
        return await self._find_one(identities_table.c.id == identity_id)

    async def find_by_email(self, email: str) -> Optional[Identity]:
        """Find an identity by its (normalized) email."""
        return await self._find_one(identities_table.c.email == email)

    async def find_by_verification_token(self, token: str) -> Optional[Identity]:
        """Find an identity by outstanding or already-confirmed token."""
        return await self._find_one(
            or_(
                identities_table.c.verification_token == token,
                identities_table.c.confirmed_verification_token == token,
            )
        )

    async def find_by_refresh_token(self, token: str) -> Optional[Identity]:
        """Find the identity holding a live refresh token."""
        return await self._find_one(identities_table.c.refresh_token == token)

    async def find_by_provider_link(
        self, provider: AuthProvider, provider_id: str
    ) -> Optional[Identity]:
        """Find the identity linked to a provider account.

        Args:
            provider: The authentication provider
            provider_id: The account ID on that provider

        Returns:
            Identity if found, None otherwise
        """
        owner = (
            select(identity_provider_links_table.c.identity_id)
            .where(identity_provider_links_table.c.provider_name == provider.value)
            .where(identity_provider_links_table.c.provider_id == provider_id)
            .scalar_subquery()
        )
        return await self._find_one(identities_table.c.id == owner)

    async def save(self, identity: Identity) -> Identity:
        """Save an identity (create or update) and replace its links.

        Args:
            identity: Identity to save

        Returns:
            Saved identity
        """
        exists = await self.session.scalar(
            select(identities_table.c.id).where(identities_table.c.id == identity.id)
        )

        identity_dict = identity_to_dict(identity)

        if exists:
            # Update
            stmt = (
                identities_table.update()
                .where(identities_table.c.id == identity.id)
                .values(**identity_dict)
            )
            await self.session.execute(stmt)
        else:
            # Insert
            stmt = identities_table.insert().values(**identity_dict)
            await self.session.execute(stmt)

        # Links are a small set owned by the identity; rewrite them wholesale
        await self.session.execute(
            identity_provider_links_table.delete().where(
                identity_provider_links_table.c.identity_id == identity.id
            )
        )
        link_dicts = identity_to_link_dicts(identity)
        if link_dicts:
            await self.session.execute(
                identity_provider_links_table.insert(), link_dicts
            )

        await self.session.flush()
        return identity
