"""Services package for the fare booking engine."""

from .fare_strategy import (
    get_fare_strategy,
    price_for,
    book,
    FareStrategyInterface,
    BaseFareStrategy,
    AirplaneFareStrategy,
    TrainFareStrategy,
    BusFareStrategy,
)
from .booking_context import BookingContext
from .ledger import ReservationLedger
from .payment import (
    get_payment_strategy,
    PaymentProcessor,
    PaymentStrategy,
    CreditCardPayment,
    DebitCardPayment,
    PixPayment,
    CashPayment,
)

__all__ = [
    'get_fare_strategy',
    'price_for',
    'book',
    'FareStrategyInterface',
    'BaseFareStrategy',
    'AirplaneFareStrategy',
    'TrainFareStrategy',
    'BusFareStrategy',
    'BookingContext',
    'ReservationLedger',
    'get_payment_strategy',
    'PaymentProcessor',
    'PaymentStrategy',
    'CreditCardPayment',
    'DebitCardPayment',
    'PixPayment',
    'CashPayment',
]
