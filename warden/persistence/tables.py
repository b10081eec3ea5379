"""SQLAlchemy table definitions for Warden.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# IDENTITIES TABLE
# ============================================================================
identities_table = Table(
    "identities",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(255), nullable=False),
    Column("email", String(255), nullable=True),  # Null for provider-only accounts
    Column("password_hash", Text, nullable=False),
    Column("verified", Boolean, nullable=False, server_default="false"),
    Column("verification_token", String(255), nullable=True),
    Column("confirmed_verification_token", String(255), nullable=True),
    Column("access_token", Text, nullable=True),
    Column("refresh_token", String(255), nullable=True),
    Column("refresh_token_created_at", TIMESTAMP(timezone=True), nullable=True),
    Column("refresh_token_expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column("theme", String(16), nullable=False, server_default="light"),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name="uq_identities_email"),
    UniqueConstraint("verification_token", name="uq_identities_verification_token"),
    UniqueConstraint(
        "confirmed_verification_token",
        name="uq_identities_confirmed_verification_token",
    ),
    UniqueConstraint("refresh_token", name="uq_identities_refresh_token"),
    CheckConstraint("theme IN ('light', 'dark')", name="ck_identities_theme"),
    CheckConstraint(
        "refresh_token_expires_at > refresh_token_created_at",
        name="ck_identities_refresh_window",
    ),
    CheckConstraint(
        "verified OR (access_token IS NULL AND refresh_token IS NULL)",
        name="ck_identities_tokens_require_verification",
    ),
)

# ============================================================================
# PROVIDER LINKS TABLE
# ============================================================================
identity_provider_links_table = Table(
    "identity_provider_links",
    metadata,
    Column(
        "identity_id",
        UUID,
        ForeignKey("identities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("provider_name", String(50), nullable=False),  # 'google', 'facebook'
    Column("provider_id", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # A provider account resolves to exactly one identity
    PrimaryKeyConstraint("provider_name", "provider_id", name="pk_provider_links"),
    # At most one link per provider on an identity
    UniqueConstraint(
        "identity_id", "provider_name", name="uq_provider_links_identity_provider"
    ),
)

Index(
    "idx_provider_links_identity_id", identity_provider_links_table.c.identity_id
)
