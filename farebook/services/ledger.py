"""Reservation ledger: append-only ticket store partitioned by transport mode."""

import logging
from typing import Callable, Dict, Iterator, List, Optional, Set, Tuple

from farebook.config import settings
from farebook.distances import DistanceTable, get_distance_table
from farebook.exceptions import RouteUnknownError, ValidationError
from farebook.models import (
    BookingEvent,
    BookingEventKind,
    Location,
    SearchResult,
    Ticket,
    TransportMode,
)
from farebook.services.booking_context import BookingContext
from farebook.services.fare_strategy import FareStrategyInterface, get_fare_strategy

logger = logging.getLogger(__name__)

BookingListener = Callable[[BookingEvent], None]


class ReservationListing:
    """Lazy, re-iterable view over the ledger's per-mode ticket lists."""

    def __init__(self, reservations: Dict[TransportMode, List[Ticket]]):
        self._reservations = reservations

    def __iter__(self) -> Iterator[Tuple[TransportMode, Ticket]]:
        for mode in TransportMode:
            for ticket in self._reservations[mode]:
                yield mode, ticket

    def __len__(self) -> int:
        return sum(len(tickets) for tickets in self._reservations.values())


class ReservationLedger:
    """
    Stores booked tickets per transport mode in booking order.

    Entries are never edited or removed. Bookings go through a BookingContext
    whose strategy is swapped to match the requested mode on every call.
    """

    def __init__(
        self,
        distance_table: Optional[DistanceTable] = None,
        context: Optional[BookingContext] = None,
        reject_unknown_routes: Optional[bool] = None,
        enforce_unique_ids: Optional[bool] = None,
    ):
        """
        Initialize an empty ledger.

        Args:
            distance_table: Table used for pricing (shared default when omitted)
            context: Booking context to drive (a fresh one when omitted)
            reject_unknown_routes: Override settings.REJECT_UNKNOWN_ROUTES
            enforce_unique_ids: Override settings.ENFORCE_UNIQUE_TICKET_IDS
        """
        self.distance_table = distance_table if distance_table is not None else get_distance_table()
        self.context = context if context is not None else BookingContext()
        self.reject_unknown_routes = (
            settings.REJECT_UNKNOWN_ROUTES if reject_unknown_routes is None else reject_unknown_routes
        )
        self.enforce_unique_ids = (
            settings.ENFORCE_UNIQUE_TICKET_IDS if enforce_unique_ids is None else enforce_unique_ids
        )

        self._strategies: Dict[TransportMode, FareStrategyInterface] = {
            mode: get_fare_strategy(mode, self.distance_table) for mode in TransportMode
        }
        self._reservations: Dict[TransportMode, List[Ticket]] = {mode: [] for mode in TransportMode}
        self._ticket_ids: Set[str] = set()
        self._listeners: List[BookingListener] = []

    def subscribe(self, listener: BookingListener) -> None:
        """Register a callable that receives a BookingEvent after every booking attempt."""
        self._listeners.append(listener)

    def _notify(self, event: BookingEvent) -> None:
        for listener in self._listeners:
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "Booking listener %r failed on %s event for %s",
                    listener, event.kind.value, event.ticket_id,
                )

    def _validate(self, ticket_id: str, passenger_name: str, origin: Location, destination: Location):
        if not isinstance(ticket_id, str) or not ticket_id.strip():
            raise ValidationError("Ticket id must not be empty")
        if not isinstance(passenger_name, str) or not passenger_name.strip():
            raise ValidationError(
                f"Passenger name must not be empty for ticket {ticket_id}",
                {"ticket_id": ticket_id},
            )
        if self.enforce_unique_ids and ticket_id in self._ticket_ids:
            raise ValidationError(
                f"Ticket id {ticket_id} is already booked",
                {"ticket_id": ticket_id},
            )
        if self.reject_unknown_routes and not self.distance_table.has_route(origin, destination):
            raise RouteUnknownError(origin, destination)

    def add_reservation(
        self, mode, ticket_id: str, passenger_name: str, origin, destination
    ) -> None:
        """
        Book a ticket under a transport mode and record it.

        The outcome is observable through list_all/search and through the
        BookingEvent delivered to subscribed listeners.

        Raises:
            UnsupportedTransportModeError: If mode is not a known transport mode
            UnsupportedLocationError: If origin or destination is unknown
            ValidationError: If the passenger name or ticket id is rejected
            RouteUnknownError: If the route is unknown and rejection is enabled
        """
        mode = TransportMode.parse(mode)
        origin = Location.parse(origin)
        destination = Location.parse(destination)
        self._validate(ticket_id, passenger_name, origin, destination)

        self.context.set_strategy(self._strategies[mode])
        ticket = self.context.execute_booking(ticket_id, passenger_name, origin, destination)

        if ticket is None:
            self._notify(BookingEvent(
                kind=BookingEventKind.STRATEGY_NOT_SET,
                transport_mode=mode,
                ticket_id=ticket_id,
                message=str(self.context.last_error),
            ))
            return

        self._reservations[mode].append(ticket)
        self._ticket_ids.add(ticket.ticket_id)
        logger.info(
            "Booked %s for %s: %s -> %s by %s, price %.2f",
            ticket.ticket_id, ticket.passenger_name, origin, destination, mode, ticket.price,
        )
        self._notify(BookingEvent(
            kind=BookingEventKind.BOOKED,
            transport_mode=mode,
            ticket_id=ticket.ticket_id,
            ticket=ticket,
            message=ticket.success_message,
        ))

    def list_all(self) -> ReservationListing:
        """
        Every reservation as (mode, ticket).

        Modes come in declaration order, tickets in booking order within a
        mode. The returned listing is lazy and can be iterated any number of
        times.
        """
        return ReservationListing(self._reservations)

    def search(self, mode) -> SearchResult:
        """
        Get the tickets booked under a transport mode.

        Returns:
            SearchResult whose found flag is False if the mode was never booked

        Raises:
            UnsupportedTransportModeError: If mode is not a known transport mode
        """
        mode = TransportMode.parse(mode)
        tickets = list(self._reservations[mode])
        return SearchResult(transport_mode=mode, tickets=tickets, total=len(tickets))

    def get_ticket(self, ticket_id: str) -> Optional[Ticket]:
        """First ticket booked with this id, or None."""
        for _, ticket in self.list_all():
            if ticket.ticket_id == ticket_id:
                return ticket
        return None

    def total_revenue(self, mode=None) -> float:
        """Sum of ticket prices, for one mode or across all of them."""
        if mode is not None:
            return round(sum(t.price for t in self._reservations[TransportMode.parse(mode)]), 2)
        return round(sum(t.price for _, t in self.list_all()), 2)

    def __len__(self) -> int:
        return len(self.list_all())
