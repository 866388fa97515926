"""Keeps in-flight payment flows reachable by checkout request id.

Settled flows stay readable for ``retention`` seconds after their last
status change so a payer can read the outcome; flows nobody has touched
for that long are forgotten on the next call.
"""

import logging
import threading
import time
from collections.abc import Callable
from decimal import Decimal

from core.domain.errors import PaymentNotFoundError
from donations.payments.flow import POLL_TIMEOUT_SECONDS, PaymentFlow, PaymentStatus
from donations.payments.gateways import PaymentGateway

logger = logging.getLogger(__name__)

FLOW_RETENTION_SECONDS = 2 * POLL_TIMEOUT_SECONDS


class PaymentService:
    def __init__(
        self,
        gateway: PaymentGateway,
        clock: Callable[[], float] = time.monotonic,
        retention: float = FLOW_RETENTION_SECONDS,
    ) -> None:
        self.gateway = gateway
        self._clock = clock
        self._retention = retention
        self._flows: dict[str, PaymentFlow] = {}
        self._lock = threading.Lock()

    def _prune(self) -> None:
        cutoff = self._clock() - self._retention
        with self._lock:
            expired = [key for key, flow in self._flows.items() if flow.updated_at <= cutoff]
            for key in expired:
                del self._flows[key]
        if expired:
            logger.debug("forgot %d stale payment flows", len(expired))

    def start(
        self,
        phone_number: str,
        amount: Decimal,
        account_reference: str,
        transaction_description: str,
    ) -> PaymentFlow:
        """Create a flow and push the prompt. Only initiated flows are kept."""
        self._prune()
        flow = PaymentFlow(
            self.gateway,
            amount,
            account_reference,
            transaction_description,
            clock=self._clock,
        )
        flow.handle_payment(phone_number)
        if flow.status is PaymentStatus.INITIATED:
            with self._lock:
                self._flows[flow.checkout_request_id] = flow
            logger.info("payment %s initiated for %s", flow.checkout_request_id, account_reference)
        return flow

    def _flow(self, checkout_request_id: str) -> PaymentFlow:
        self._prune()
        with self._lock:
            flow = self._flows.get(checkout_request_id)
        if flow is None:
            raise PaymentNotFoundError(checkout_request_id)
        return flow

    def poll(self, checkout_request_id: str) -> PaymentFlow:
        flow = self._flow(checkout_request_id)
        flow.poll()
        if flow.status.settled:
            logger.info("payment %s settled as %s", checkout_request_id, flow.status.value)
        return flow

    def retry(self, checkout_request_id: str) -> PaymentFlow:
        """Reset a failed flow and forget it; the payer starts over."""
        flow = self._flow(checkout_request_id)
        flow.retry()
        self.dismiss(checkout_request_id)
        return flow

    def dismiss(self, checkout_request_id: str) -> None:
        """Forget a flow once the payer has seen its outcome."""
        with self._lock:
            self._flows.pop(checkout_request_id, None)

    @property
    def tracked_count(self) -> int:
        with self._lock:
            return len(self._flows)
