"""FareBook: fare pricing and ticket booking by transport mode."""

from .config import settings, configure_logging
from .distances import DistanceTable, get_distance_table
from .exceptions import (
    FareBookingError,
    RouteUnknownError,
    StrategyNotSetError,
    UnsupportedLocationError,
    UnsupportedPaymentMethodError,
    UnsupportedTransportModeError,
    ValidationError,
)
from .models import Location, TransportMode, Ticket, SearchResult, BookingEvent, BookingEventKind
from .services import BookingContext, ReservationLedger, book, get_fare_strategy, price_for

__version__ = settings.VERSION

__all__ = [
    'settings',
    'configure_logging',
    'DistanceTable',
    'get_distance_table',
    'FareBookingError',
    'RouteUnknownError',
    'StrategyNotSetError',
    'UnsupportedLocationError',
    'UnsupportedPaymentMethodError',
    'UnsupportedTransportModeError',
    'ValidationError',
    'Location',
    'TransportMode',
    'Ticket',
    'SearchResult',
    'BookingEvent',
    'BookingEventKind',
    'BookingContext',
    'ReservationLedger',
    'book',
    'get_fare_strategy',
    'price_for',
]
