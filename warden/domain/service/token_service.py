"""Session token domain service.

Mints the short-lived signed access token and the long-lived opaque
refresh token, and rotates the refresh token on every use.
"""

import secrets
from datetime import datetime, timedelta, timezone
from uuid import UUID

import logfire

from warden.config import AuthSettings
from warden.domain.error import (
    ExpiredRefreshTokenError,
    InvalidAccessTokenError,
    InvalidRefreshTokenError,
    ValidationError,
)
from warden.domain.model import Identity, RefreshRecord
from warden.domain.repository import IdentityRepository
from warden.domain.value import AccessTokenPayload, IdentityId
from warden.util.jwt import JWTError, create_token, verify_token

from .base import Service


class TokenService(Service):
    """Domain service for access/refresh token operations."""

    def __init__(
        self, identity_repository: IdentityRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize token service.

        Args:
            identity_repository: Identity repository
            auth_settings: Signing secret and expiry windows
        """
        self.identity_repository = identity_repository
        self.auth_settings = auth_settings

    def _mint(self, identity: Identity) -> Identity:
        """Return a copy of the identity carrying a fresh token pair."""
        now = datetime.now(timezone.utc)
        access_token = create_token(
            identity_id=str(identity.id),
            username=identity.username,
            email=identity.email,
            settings=self.auth_settings,
            now=now,
        )
        refresh_record = RefreshRecord(
            token=secrets.token_hex(self.auth_settings.refresh_token_bytes),
            created_at=now,
            expires_at=now + timedelta(days=self.auth_settings.refresh_token_expiry_days),
        )
        return identity.evolve(access_token=access_token, refresh_record=refresh_record)

    async def issue_session(self, identity: Identity) -> Identity:
        """Issue an access/refresh token pair and persist it.

        Unverified identities never receive tokens: they are returned
        unchanged and nothing is persisted.

        Args:
            identity: Identity to issue tokens for

        Returns:
            The persisted identity carrying the new tokens, or the input
            identity untouched when it is not verified
        """
        with logfire.span("token_service.issue_session", identity_id=str(identity.id)):
            if not identity.verified:
                logfire.info(
                    "Token issuance skipped for unverified identity",
                    identity_id=str(identity.id),
                )
                return identity

            saved = await self.identity_repository.save(self._mint(identity))
            logfire.info("Session issued", identity_id=str(saved.id))
            return saved

    async def rotate(self, refresh_token: str) -> Identity:
        """Exchange a refresh token for a brand-new token pair.

        The presented token is invalidated immediately; there is no overlap
        window during which it could be replayed.

        Args:
            refresh_token: Refresh token previously issued

        Returns:
            The persisted identity carrying the new tokens

        Raises:
            ValidationError: If no token was supplied
            InvalidRefreshTokenError: If no identity holds the token
            ExpiredRefreshTokenError: If the token has expired
        """
        if not refresh_token:
            raise ValidationError("Refresh token required")

        with logfire.span("token_service.rotate"):
            identity = await self.identity_repository.find_by_refresh_token(
                refresh_token
            )
            if identity is None or identity.refresh_record is None:
                logfire.warn("Refresh rejected - unknown token")
                raise InvalidRefreshTokenError()

            if identity.refresh_record.is_expired():
                logfire.warn(
                    "Refresh rejected - token expired",
                    identity_id=str(identity.id),
                    expired_at=identity.refresh_record.expires_at.isoformat(),
                )
                raise ExpiredRefreshTokenError()

            saved = await self.identity_repository.save(self._mint(identity))
            logfire.info("Refresh token rotated", identity_id=str(saved.id))
            return saved

    def verify_access_token(self, token: str) -> AccessTokenPayload:
        """Verify an access token's signature and expiry.

        Args:
            token: Access token string

        Returns:
            Decoded token payload

        Raises:
            InvalidAccessTokenError: If the token is invalid or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.debug("Access token verification failed", error=str(e))
            raise InvalidAccessTokenError(str(e)) from e

    async def authenticate(self, token: str) -> Identity:
        """Resolve the identity an access token was issued to.

        The token must also be the identity's current access token, so a
        token revoked by logout or superseded by rotation is rejected.

        Args:
            token: Access token string

        Returns:
            The authenticated identity

        Raises:
            InvalidAccessTokenError: If the token is invalid, expired or revoked
        """
        with logfire.span("token_service.authenticate"):
            if not token:
                raise InvalidAccessTokenError("Access token required")
            payload = self.verify_access_token(token)

            try:
                identity_id = IdentityId(UUID(payload.id))
            except ValueError as e:
                raise InvalidAccessTokenError("Invalid token subject") from e

            identity = await self.identity_repository.find_by_id(identity_id)
            if identity is None or identity.access_token != token:
                logfire.warn(
                    "Access token rejected - revoked or unknown identity",
                    identity_id=payload.id,
                )
                raise InvalidAccessTokenError("Access token has been revoked")

            logfire.info("Access token authenticated", identity_id=str(identity.id))
            return identity

    async def revoke(self, identity: Identity) -> Identity:
        """Clear the access token and refresh record unconditionally.

        Args:
            identity: Identity to sign out

        Returns:
            The persisted identity without session tokens
        """
        with logfire.span("token_service.revoke", identity_id=str(identity.id)):
            saved = await self.identity_repository.save(
                identity.evolve(access_token=None, refresh_record=None)
            )
            logfire.info("Session revoked", identity_id=str(saved.id))
            return saved
