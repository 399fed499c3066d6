"""Error taxonomy for the fare booking engine."""

from typing import Any, Dict, Optional


class FareBookingError(Exception):
    """Base class for all booking engine errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class RouteUnknownError(FareBookingError):
    """Raised when the distance table has no entry for an origin/destination pair."""

    def __init__(self, origin, destination):
        super().__init__(
            f"No known route from {origin} to {destination}",
            {"origin": origin, "destination": destination},
        )
        self.origin = origin
        self.destination = destination


class StrategyNotSetError(FareBookingError):
    """Signals a booking attempt on a context with no fare strategy."""

    def __init__(self, message: str = "Transport strategy not set."):
        super().__init__(message)


class UnsupportedTransportModeError(FareBookingError, ValueError):
    """Raised when a value cannot be parsed into a TransportMode."""

    def __init__(self, value: Any):
        super().__init__(f"Unsupported transport mode: {value!r}", {"value": value})
        self.value = value


class UnsupportedLocationError(FareBookingError, ValueError):
    """Raised when a value cannot be parsed into a Location."""

    def __init__(self, value: Any):
        super().__init__(f"Unsupported location: {value!r}", {"value": value})
        self.value = value


class ValidationError(FareBookingError, ValueError):
    """Raised when booking input is rejected before any ledger mutation."""


class UnsupportedPaymentMethodError(FareBookingError, ValueError):
    """Raised when a value cannot be parsed into a PaymentMethod."""

    def __init__(self, value: Any):
        super().__init__(f"Unsupported payment method: {value!r}", {"value": value})
        self.value = value
