"""Authentication use cases."""

from .authenticate import AuthenticateRequest, AuthenticateUseCase
from .login import LoginRequest, LoginUseCase
from .logout import LogoutRequest, LogoutUseCase
from .oauth_login import OAuthLoginRequest, OAuthLoginUseCase
from .refresh import RefreshRequest, RefreshUseCase
from .register import RegisterRequest, RegisterUseCase

__all__ = [
    "AuthenticateRequest",
    "AuthenticateUseCase",
    "LoginRequest",
    "LoginUseCase",
    "LogoutRequest",
    "LogoutUseCase",
    "OAuthLoginRequest",
    "OAuthLoginUseCase",
    "RefreshRequest",
    "RefreshUseCase",
    "RegisterRequest",
    "RegisterUseCase",
]
