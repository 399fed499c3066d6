"""Models for the fare booking engine."""

import unicodedata
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from farebook.exceptions import (
    UnsupportedLocationError,
    UnsupportedPaymentMethodError,
    UnsupportedTransportModeError,
)


def _normalize(value: str) -> str:
    """Fold case, accents and separators so 'SAO_PAULO' matches 'São Paulo'."""
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return " ".join(stripped.replace("_", " ").replace("-", " ").lower().split())


class TransportMode(str, Enum):
    """Closed set of supported transport modes."""
    AIRPLANE = "Airplane"
    TRAIN = "Train"
    BUS = "Bus"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value) -> "TransportMode":
        """
        Parse a member, its name or its value into a TransportMode.

        Raises:
            UnsupportedTransportModeError: If the value is not a known mode
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = _normalize(value)
            for mode in cls:
                if key in (_normalize(mode.name), _normalize(mode.value)):
                    return mode
        raise UnsupportedTransportModeError(value)


class Location(str, Enum):
    """Supported places. The member name is the code, the value the display name."""
    ALAGOAS = "Alagoas"
    BAHIA = "Bahia"
    CEARA = "Ceará"
    ESPIRITO_SANTO = "Espírito Santo"
    MARANHAO = "Maranhão"
    PARAIBA = "Paraíba"
    PERNAMBUCO = "Pernambuco"
    PIAUI = "Piauí"
    RIO_DE_JANEIRO = "Rio de Janeiro"
    RIO_GRANDE_DO_NORTE = "Rio Grande do Norte"
    SAO_PAULO = "São Paulo"
    SERGIPE = "Sergipe"
    MINAS_GERAIS = "Minas Gerais"

    def __str__(self) -> str:
        return self.value

    @property
    def code(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value) -> "Location":
        """
        Parse a member, its code or its display name into a Location.
        Matching ignores case and accents.

        Raises:
            UnsupportedLocationError: If the value is not a known location
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = _normalize(value)
            for location in cls:
                if key in (_normalize(location.name), _normalize(location.value)):
                    return location
        raise UnsupportedLocationError(value)


class FareParameters(BaseModel):
    """Pricing constants of one transport mode."""
    model_config = ConfigDict(frozen=True)

    rate: float = Field(..., gt=0, description="Price per distance unit")
    surcharge: float = Field(..., ge=0, description="Fixed amount added to every fare")


class Ticket(BaseModel):
    """A booked ticket. Created once at booking time and never mutated."""
    model_config = ConfigDict(frozen=True)

    ticket_id: str = Field(..., min_length=1, description="Caller-supplied ticket identifier")
    passenger_name: str = Field(..., min_length=1, description="Passenger full name")
    origin: Location = Field(..., description="Departure location")
    destination: Location = Field(..., description="Arrival location")
    transport_mode: TransportMode = Field(..., description="Mode the ticket was priced with")
    price: float = Field(..., ge=0, description="Computed fare")

    @field_validator("ticket_id", "passenger_name")
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    def _describe(self) -> str:
        return (
            f"Id: {self.ticket_id}\n"
            f"Origin: {self.origin.value}\n"
            f"Destination: {self.destination.value}\n"
            f"Transport: {self.transport_mode.value}\n"
            f"Passenger: {self.passenger_name}\n"
            f"Total price: {self.price:.2f}"
        )

    @property
    def success_message(self) -> str:
        """Confirmation text shown right after booking."""
        return f"Ticket booked successfully.\n{self._describe()}"

    @property
    def info(self) -> str:
        """Ticket details as shown in listings."""
        return f"Ticket information:\n{self._describe()}"


class SearchResult(BaseModel):
    """Result of searching the ledger for one transport mode."""
    transport_mode: TransportMode = Field(..., description="Mode that was searched")
    tickets: List[Ticket] = Field(default_factory=list, description="Tickets in booking order")
    total: int = Field(0, description="Number of tickets found")

    @property
    def found(self) -> bool:
        """False means the mode has never been booked."""
        return self.total > 0

    @property
    def message(self) -> str:
        if not self.found:
            return f"No reservations found for {self.transport_mode.value}."
        return f"{self.transport_mode.value} reservations: {self.total}"


class BookingEventKind(str, Enum):
    BOOKED = "booked"
    STRATEGY_NOT_SET = "strategy_not_set"


class BookingEvent(BaseModel):
    """Out-of-band notification emitted by the ledger after each booking attempt."""
    model_config = ConfigDict(frozen=True)

    kind: BookingEventKind
    transport_mode: Optional[TransportMode] = None
    ticket_id: str
    ticket: Optional[Ticket] = None
    message: str


class PaymentMethod(str, Enum):
    CREDIT_CARD = "Credit card"
    DEBIT_CARD = "Debit card"
    PIX = "Pix"
    CASH = "Cash"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value) -> "PaymentMethod":
        """
        Parse a member, its name or its value into a PaymentMethod.

        Raises:
            UnsupportedPaymentMethodError: If the value is not a known method
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = _normalize(value)
            for method in cls:
                if key in (_normalize(method.name), _normalize(method.value)):
                    return method
        raise UnsupportedPaymentMethodError(value)


class PaymentReceipt(BaseModel):
    """Outcome of a processed payment."""
    model_config = ConfigDict(frozen=True)

    method: PaymentMethod
    amount: float = Field(..., ge=0)
    message: str
    ticket_id: Optional[str] = None
