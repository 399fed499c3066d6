"""Fare strategies: one pricing and booking algorithm per transport mode."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Protocol, runtime_checkable

from pydantic import ValidationError as PydanticValidationError

from farebook.config import settings
from farebook.distances import DistanceTable, get_distance_table
from farebook.exceptions import ValidationError
from farebook.models import Location, Ticket, TransportMode

logger = logging.getLogger(__name__)


def price_for(mode, distance: Optional[float]) -> float:
    """
    Price a trip of the given distance with the constants of a transport mode.

    Args:
        mode: TransportMode or anything TransportMode.parse accepts
        distance: Trip distance, or None when no route is known

    Returns:
        distance * rate + surcharge, or 0.0 when distance is None
    """
    if distance is None:
        return 0.0
    params = settings.get_fare_parameters(mode)
    return distance * params.rate + params.surcharge


def build_ticket(
    mode: TransportMode,
    ticket_id: str,
    passenger_name: str,
    origin: Location,
    destination: Location,
    price: float,
) -> Ticket:
    """Construct a Ticket, reporting bad input as a booking ValidationError."""
    try:
        return Ticket(
            ticket_id=ticket_id,
            passenger_name=passenger_name,
            origin=origin,
            destination=destination,
            transport_mode=mode,
            price=price,
        )
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid ticket {ticket_id!r}: {e.errors()[0]['msg']}",
            {"errors": e.errors()},
        ) from e


@runtime_checkable
class FareStrategyInterface(Protocol):
    """Contract every fare strategy follows."""

    mode: TransportMode

    def compute_price(self, origin, destination) -> float:
        """Price a trip between two locations."""
        ...

    def book(self, ticket_id: str, passenger_name: str, origin, destination) -> Ticket:
        """Price a trip and issue a ticket for it."""
        ...


class BaseFareStrategy(ABC):
    """
    Shared pricing and booking for distance-based strategies.
    Subclasses only declare which transport mode they price.
    """

    def __init__(self, distance_table: Optional[DistanceTable] = None):
        self.distance_table = distance_table if distance_table is not None else get_distance_table()

    @property
    @abstractmethod
    def mode(self) -> TransportMode:
        """Transport mode this strategy prices."""
        pass

    @property
    def rate(self) -> float:
        return settings.get_fare_parameters(self.mode).rate

    @property
    def surcharge(self) -> float:
        return settings.get_fare_parameters(self.mode).surcharge

    def compute_price(self, origin, destination) -> float:
        """
        Price a trip between two locations.

        Args:
            origin: Departure location
            destination: Arrival location

        Returns:
            distance * rate + surcharge, or 0.0 if the route is unknown
        """
        origin = Location.parse(origin)
        destination = Location.parse(destination)
        distance = self.distance_table.lookup(origin, destination)
        if distance is None:
            logger.warning(
                "Unknown route %s -> %s for %s, pricing at 0.0",
                origin, destination, self.mode,
            )
        return price_for(self.mode, distance)

    def book(self, ticket_id: str, passenger_name: str, origin, destination) -> Ticket:
        """
        Price a trip and issue a ticket tagged with this strategy's mode.
        Ticket id uniqueness is the ledger's concern, not checked here.
        """
        origin = Location.parse(origin)
        destination = Location.parse(destination)
        price = self.compute_price(origin, destination)
        return build_ticket(self.mode, ticket_id, passenger_name, origin, destination, price)

    def __repr__(self):
        return f"<{self.__class__.__name__}(rate={self.rate}, surcharge={self.surcharge})>"


class AirplaneFareStrategy(BaseFareStrategy):
    mode = TransportMode.AIRPLANE


class TrainFareStrategy(BaseFareStrategy):
    mode = TransportMode.TRAIN


class BusFareStrategy(BaseFareStrategy):
    mode = TransportMode.BUS


STRATEGY_CLASSES = {
    TransportMode.AIRPLANE: AirplaneFareStrategy,
    TransportMode.TRAIN: TrainFareStrategy,
    TransportMode.BUS: BusFareStrategy,
}

# Shared instances bound to the default distance table
_default_strategies: Dict[TransportMode, FareStrategyInterface] = {}


def get_fare_strategy(mode, distance_table: Optional[DistanceTable] = None) -> FareStrategyInterface:
    """
    Get the fare strategy for a transport mode.

    Args:
        mode: TransportMode or anything TransportMode.parse accepts
        distance_table: Table to price against; the shared default when omitted

    Returns:
        Strategy instance implementing FareStrategyInterface

    Raises:
        UnsupportedTransportModeError: If mode is not a known transport mode
    """
    mode = TransportMode.parse(mode)
    if distance_table is not None:
        return STRATEGY_CLASSES[mode](distance_table)
    if mode not in _default_strategies:
        _default_strategies[mode] = STRATEGY_CLASSES[mode]()
    return _default_strategies[mode]


def book(
    mode,
    ticket_id: str,
    passenger_name: str,
    origin,
    destination,
    distance_table: Optional[DistanceTable] = None,
) -> Ticket:
    """
    Book a ticket without a BookingContext, taking the mode explicitly.
    Holds no state, so it is safe to call from concurrent callers.
    """
    strategy = get_fare_strategy(mode, distance_table)
    return strategy.book(ticket_id, passenger_name, origin, destination)
