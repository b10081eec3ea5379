"""Email verification use cases."""

from .confirm_email import ConfirmEmailRequest, ConfirmEmailUseCase
from .request_verification import (
    RequestVerificationRequest,
    RequestVerificationResponse,
    RequestVerificationUseCase,
)

__all__ = [
    "ConfirmEmailRequest",
    "ConfirmEmailUseCase",
    "RequestVerificationRequest",
    "RequestVerificationResponse",
    "RequestVerificationUseCase",
]
