"""Infrastructure layer errors."""

from warden.domain.error import UpstreamError


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class EmailDeliveryError(AdapterError, UpstreamError):
    """Raised when an outbound email cannot be handed to the mail server."""

    pass
