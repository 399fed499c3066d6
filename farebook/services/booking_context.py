"""Booking context holding the active fare strategy."""

import logging
from typing import Optional

from farebook.exceptions import StrategyNotSetError
from farebook.models import Ticket
from farebook.services.fare_strategy import FareStrategyInterface

logger = logging.getLogger(__name__)


class BookingContext:
    """
    Delegates bookings to whichever fare strategy was set last.

    Starts unconfigured; the first set_strategy call configures it and there
    is no way back. Not meant to be shared between concurrent callers, use
    fare_strategy.book for that.
    """

    def __init__(self):
        self._strategy: Optional[FareStrategyInterface] = None
        self.last_error: Optional[StrategyNotSetError] = None

    @property
    def strategy(self) -> Optional[FareStrategyInterface]:
        return self._strategy

    @property
    def is_configured(self) -> bool:
        return self._strategy is not None

    def set_strategy(self, strategy: FareStrategyInterface) -> None:
        """Replace the active strategy."""
        if not isinstance(strategy, FareStrategyInterface):
            raise TypeError(
                f"{strategy.__class__.__name__} does not implement FareStrategyInterface"
            )
        logger.debug("Booking context strategy set to %r", strategy)
        self._strategy = strategy

    def execute_booking(
        self, ticket_id: str, passenger_name: str, origin, destination
    ) -> Optional[Ticket]:
        """
        Book through the active strategy.

        Returns:
            The issued Ticket, or None when no strategy is set. In that case
            the StrategyNotSetError condition is logged and kept in last_error
            instead of being raised.
        """
        if self._strategy is None:
            self.last_error = StrategyNotSetError()
            logger.warning("Booking %s skipped: %s", ticket_id, self.last_error)
            return None

        self.last_error = None
        return self._strategy.book(ticket_id, passenger_name, origin, destination)
