"""Repository interfaces for the Warden domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from warden.domain.repository.identity import IdentityRepository

__all__ = [
    "IdentityRepository",
]
