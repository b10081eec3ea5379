"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from warden.domain.model import Identity, ProviderLink, RefreshRecord
from warden.domain.value import AuthProvider, IdentityId, Theme


def row_to_identity(
    row: Dict[str, Any], link_rows: Iterable[Dict[str, Any]] = ()
) -> Identity:
    """Convert database rows to an Identity domain model.

    Args:
        row: Identity row as dict
        link_rows: Provider link rows belonging to the identity

    Returns:
        Identity domain model
    """
    refresh_record = None
    if row.get("refresh_token"):
        refresh_record = RefreshRecord(
            token=row["refresh_token"],
            created_at=row["refresh_token_created_at"],
            expires_at=row["refresh_token_expires_at"],
        )

    return Identity(
        id=IdentityId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        username=row["username"],
        email=row.get("email"),
        password_hash=row["password_hash"],
        verified=row["verified"],
        verification_token=row.get("verification_token"),
        confirmed_verification_token=row.get("confirmed_verification_token"),
        access_token=row.get("access_token"),
        refresh_record=refresh_record,
        provider_links=[
            ProviderLink(
                provider_name=AuthProvider(link["provider_name"]),
                provider_id=link["provider_id"],
            )
            for link in link_rows
        ],
        theme=Theme(row["theme"]),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def identity_to_dict(identity: Identity) -> Dict[str, Any]:
    """Convert Identity domain model to an identities table dict.

    Provider links are stored separately; see :func:`identity_to_link_dicts`.
    """
    record = identity.refresh_record
    return {
        "id": identity.id,
        "username": identity.username,
        "email": identity.email,
        "password_hash": identity.password_hash,
        "verified": identity.verified,
        "verification_token": identity.verification_token,
        "confirmed_verification_token": identity.confirmed_verification_token,
        "access_token": identity.access_token,
        "refresh_token": record.token if record else None,
        "refresh_token_created_at": record.created_at if record else None,
        "refresh_token_expires_at": record.expires_at if record else None,
        "theme": identity.theme.value,
        "avatar_url": identity.avatar_url,
        "created_at": identity.created_at,
        "updated_at": identity.updated_at,
    }


def identity_to_link_dicts(identity: Identity) -> list[Dict[str, Any]]:
    """Convert an identity's provider links to link table dicts."""
    return [
        {
            "identity_id": identity.id,
            "provider_name": link.provider_name.value,
            "provider_id": link.provider_id,
        }
        for link in identity.provider_links
    ]
