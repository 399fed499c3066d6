"""Payment strategies for settling booked tickets."""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Protocol, runtime_checkable

from farebook.exceptions import ValidationError
from farebook.models import PaymentMethod, PaymentReceipt, Ticket

logger = logging.getLogger(__name__)


@runtime_checkable
class PaymentStrategy(Protocol):
    """Contract every payment method follows."""

    method: PaymentMethod

    def process_payment(self, amount: float, ticket_id: Optional[str] = None) -> PaymentReceipt:
        ...


class BasePayment(ABC):
    """Validates the amount and issues a receipt; subclasses pick the method."""

    @property
    @abstractmethod
    def method(self) -> PaymentMethod:
        pass

    def process_payment(self, amount: float, ticket_id: Optional[str] = None) -> PaymentReceipt:
        """
        Charge an amount with this payment method.

        Raises:
            ValidationError: If amount is negative
        """
        if amount < 0:
            raise ValidationError(
                f"Payment amount must not be negative, got {amount}",
                {"amount": amount, "method": self.method.value},
            )
        message = f"Processing {self.method.value.lower()} payment of amount: R${amount:.2f}"
        logger.info(message)
        return PaymentReceipt(
            method=self.method,
            amount=amount,
            message=message,
            ticket_id=ticket_id,
        )


class CreditCardPayment(BasePayment):
    method = PaymentMethod.CREDIT_CARD


class DebitCardPayment(BasePayment):
    method = PaymentMethod.DEBIT_CARD


class PixPayment(BasePayment):
    method = PaymentMethod.PIX


class CashPayment(BasePayment):
    method = PaymentMethod.CASH


PAYMENT_CLASSES = {
    PaymentMethod.CREDIT_CARD: CreditCardPayment,
    PaymentMethod.DEBIT_CARD: DebitCardPayment,
    PaymentMethod.PIX: PixPayment,
    PaymentMethod.CASH: CashPayment,
}


def get_payment_strategy(method) -> PaymentStrategy:
    """
    Get the payment strategy for a payment method.

    Args:
        method: PaymentMethod or anything PaymentMethod.parse accepts

    Returns:
        Strategy instance implementing PaymentStrategy

    Raises:
        UnsupportedPaymentMethodError: If method is not a known payment method
    """
    return PAYMENT_CLASSES[PaymentMethod.parse(method)]()


class PaymentProcessor:
    """Runs payments through the strategy it was built with."""

    def __init__(self, strategy: PaymentStrategy):
        self.strategy = strategy

    def process_payment(self, amount: float) -> PaymentReceipt:
        return self.strategy.process_payment(amount)

    def pay_ticket(self, ticket: Ticket) -> PaymentReceipt:
        """Charge the full price of a booked ticket."""
        return self.strategy.process_payment(ticket.price, ticket_id=ticket.ticket_id)
