"""STK push payment state machine.

    idle --handle_payment--> processing --accepted--> initiated
    initiated --poll--> success | failed
    processing --rejected--> failed
    failed --retry--> idle

An invalid phone number leaves the flow in ``idle`` with ``error`` set.
"""

import logging
import time
from collections.abc import Callable
from decimal import Decimal
from enum import Enum

from core.domain.errors import PaymentGatewayError
from donations.payments.gateways import PaymentGateway, StkPushRequest
from donations.payments.phone import validate_phone_number

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 3.0
POLL_TIMEOUT_SECONDS = 300.0

INVALID_PHONE_MESSAGE = "Please enter a valid Kenyan phone number (e.g., 0712345678 or 254712345678)"
CANCELLED_CODES = frozenset({"1", "1032"})

STATUS_MESSAGES = {
    "0": "Payment successful",
    "1": "Payment cancelled by user",
    "1032": "Request cancelled by user",
    "1037": "Timeout in completing transaction",
    "2001": "Wrong PIN entered",
    "2002": "Wrong PIN entered",
    "2003": "Wrong PIN entered",
    "2004": "Wrong PIN entered",
    "2005": "Wrong PIN entered",
    "2006": "Wrong PIN entered",
}
DEFAULT_FAILURE_MESSAGE = "Payment failed. Please try again."


def payment_status_message(result_code: str) -> str:
    return STATUS_MESSAGES.get(str(result_code), DEFAULT_FAILURE_MESSAGE)


class PaymentStatus(str, Enum):
    IDLE = "idle"
    PROCESSING = "processing"
    INITIATED = "initiated"
    SUCCESS = "success"
    FAILED = "failed"

    @property
    def settled(self) -> bool:
        return self in (PaymentStatus.SUCCESS, PaymentStatus.FAILED)


TRANSITIONS = {
    PaymentStatus.IDLE: {PaymentStatus.PROCESSING},
    PaymentStatus.PROCESSING: {PaymentStatus.INITIATED, PaymentStatus.FAILED},
    PaymentStatus.INITIATED: {PaymentStatus.SUCCESS, PaymentStatus.FAILED},
    PaymentStatus.FAILED: {PaymentStatus.IDLE},
    PaymentStatus.SUCCESS: set(),
}


class InvalidTransitionError(ValueError):
    pass


class PaymentFlow:
    """One payer's attempt to pay ``amount`` through a gateway."""

    def __init__(
        self,
        gateway: PaymentGateway,
        amount: Decimal,
        account_reference: str,
        transaction_description: str,
        clock: Callable[[], float] = time.monotonic,
        poll_timeout: float = POLL_TIMEOUT_SECONDS,
    ) -> None:
        self.gateway = gateway
        self.amount = amount
        self.account_reference = account_reference
        self.transaction_description = transaction_description
        self._clock = clock
        self._poll_timeout = poll_timeout

        self.status = PaymentStatus.IDLE
        self.history: list[PaymentStatus] = [PaymentStatus.IDLE]
        self.phone_number = ""
        self.error = ""
        self.status_message = ""
        self.checkout_request_id = ""
        self.receipt_number: str | None = None
        self._initiated_at: float | None = None
        self.updated_at = clock()

    def _transition(self, target: PaymentStatus) -> None:
        if target not in TRANSITIONS[self.status]:
            raise InvalidTransitionError(f"cannot go from {self.status.value} to {target.value}")
        logger.debug("payment %s: %s -> %s", self.checkout_request_id or "-", self.status.value, target.value)
        self.status = target
        self.history.append(target)
        self.updated_at = self._clock()

    def _fail(self, message: str) -> None:
        self._transition(PaymentStatus.FAILED)
        self.status_message = message
        self.error = message

    def handle_payment(self, phone_number: str) -> PaymentStatus:
        """Validate the number and push the payment prompt."""
        if not validate_phone_number(phone_number):
            self.error = INVALID_PHONE_MESSAGE
            return self.status

        self.phone_number = phone_number
        self.error = ""
        self._transition(PaymentStatus.PROCESSING)
        request = StkPushRequest(
            phone_number=phone_number,
            amount=self.amount,
            account_reference=self.account_reference,
            transaction_description=self.transaction_description,
        )
        try:
            response = self.gateway.initiate(request)
        except PaymentGatewayError as exc:
            self._fail(exc.message)
            return self.status

        if response.response_code != "0":
            self._fail(response.response_description or DEFAULT_FAILURE_MESSAGE)
            return self.status

        self.checkout_request_id = response.checkout_request_id
        self._initiated_at = self._clock()
        self._transition(PaymentStatus.INITIATED)
        self.status_message = (
            "Payment request sent to your phone. Please check your M-Pesa app and enter your PIN."
        )
        return self.status

    def poll(self) -> PaymentStatus:
        """Query the gateway once; only meaningful while ``initiated``."""
        if self.status is not PaymentStatus.INITIATED:
            return self.status
        if self._clock() - self._initiated_at >= self._poll_timeout:
            self._fail("Payment timeout. Please try again.")
            return self.status

        try:
            result = self.gateway.query(self.checkout_request_id)
        except PaymentGatewayError:
            logger.warning("status query for %s failed, will retry", self.checkout_request_id, exc_info=True)
            return self.status

        if result.result_code is None:
            return self.status
        if result.result_code == "0":
            self._transition(PaymentStatus.SUCCESS)
            self.receipt_number = result.receipt_number
            self.status_message = "Payment completed successfully!"
        elif result.result_code in CANCELLED_CODES:
            self._fail("Payment was cancelled")
        else:
            self._fail(payment_status_message(result.result_code))
        return self.status

    def wait_for_result(self, sleep: Callable[[float], None] = time.sleep) -> PaymentStatus:
        """Poll every few seconds until the payment settles or times out."""
        while self.status is PaymentStatus.INITIATED:
            sleep(POLL_INTERVAL_SECONDS)
            self.poll()
        return self.status

    def retry(self) -> PaymentStatus:
        """Return a failed flow to ``idle`` so the payer can try again."""
        self._transition(PaymentStatus.IDLE)
        self.error = ""
        self.status_message = ""
        self.checkout_request_id = ""
        self.receipt_number = None
        self._initiated_at = None
        return self.status

    def as_dict(self) -> dict:
        return {
            "status": self.status.value,
            "phone_number": self.phone_number,
            "amount": str(self.amount),
            "checkout_request_id": self.checkout_request_id,
            "receipt_number": self.receipt_number,
            "status_message": self.status_message,
            "error": self.error,
        }
