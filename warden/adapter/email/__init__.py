"""Email adapter."""

from .dispatcher import (
    MockEmailDispatcher,
    SmtpEmailDispatcher,
    VerificationEmailDispatcher,
)

__all__ = ["MockEmailDispatcher", "SmtpEmailDispatcher", "VerificationEmailDispatcher"]
