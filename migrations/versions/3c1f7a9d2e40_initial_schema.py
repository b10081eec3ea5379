"""initial_schema

Create the identity schema for Warden:
- Identities (credentials, verification state, current session tokens)
- Provider links (external OAuth accounts attached to an identity)

Revision ID: 3c1f7a9d2e40
Revises:
Create Date: 2026-10-19 10:12:44.318402

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f7a9d2e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # IDENTITIES table
    # ========================================================================
    op.create_table(
        "identities",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("verified", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("verification_token", sa.String(255), nullable=True),
        sa.Column("confirmed_verification_token", sa.String(255), nullable=True),
        sa.Column("access_token", sa.Text(), nullable=True),
        sa.Column("refresh_token", sa.String(255), nullable=True),
        sa.Column(
            "refresh_token_created_at", sa.TIMESTAMP(timezone=True), nullable=True
        ),
        sa.Column(
            "refresh_token_expires_at", sa.TIMESTAMP(timezone=True), nullable=True
        ),
        sa.Column("theme", sa.String(16), nullable=False, server_default="light"),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_identities_email"),
        sa.UniqueConstraint(
            "verification_token", name="uq_identities_verification_token"
        ),
        sa.UniqueConstraint(
            "confirmed_verification_token",
            name="uq_identities_confirmed_verification_token",
        ),
        sa.UniqueConstraint("refresh_token", name="uq_identities_refresh_token"),
        sa.CheckConstraint("theme IN ('light', 'dark')", name="ck_identities_theme"),
        sa.CheckConstraint(
            "refresh_token_expires_at > refresh_token_created_at",
            name="ck_identities_refresh_window",
        ),
        sa.CheckConstraint(
            "verified OR (access_token IS NULL AND refresh_token IS NULL)",
            name="ck_identities_tokens_require_verification",
        ),
    )

    # ========================================================================
    # IDENTITY_PROVIDER_LINKS table
    # ========================================================================
    op.create_table(
        "identity_provider_links",
        sa.Column("identity_id", sa.UUID(), nullable=False),
        sa.Column("provider_name", sa.String(50), nullable=False),
        sa.Column("provider_id", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["identity_id"], ["identities.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint(
            "provider_name", "provider_id", name="pk_provider_links"
        ),
        sa.UniqueConstraint(
            "identity_id",
            "provider_name",
            name="uq_provider_links_identity_provider",
        ),
    )
    op.create_index(
        "idx_provider_links_identity_id", "identity_provider_links", ["identity_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_provider_links_identity_id", "identity_provider_links")
    op.drop_table("identity_provider_links")
    op.drop_table("identities")
