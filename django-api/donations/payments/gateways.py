"""Mobile-money gateways (M-Pesa STK push).

``PaymentGateway`` is the strategy interface; ``SimulatedGateway`` stands in
for development and tests, ``DarajaGateway`` talks to Safaricom's API.
"""

import base64
import logging
import secrets
import string
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

import httpx

from core.domain.errors import PaymentGatewayError
from donations.payments.phone import format_phone_number

logger = logging.getLogger(__name__)

SANDBOX_BASE_URL = "https://sandbox.safaricom.co.ke"
SIMULATED_CONFIRMATION_SECONDS = 3.0
SIMULATED_RETENTION_SECONDS = 600.0


@dataclass(frozen=True)
class StkPushRequest:
    phone_number: str
    amount: Decimal
    account_reference: str
    transaction_description: str
    callback_url: str | None = None


@dataclass(frozen=True)
class StkPushResponse:
    merchant_request_id: str
    checkout_request_id: str
    response_code: str
    response_description: str
    customer_message: str


@dataclass(frozen=True)
class StkQueryResult:
    """Outcome of a status query. ``result_code`` is None while pending."""

    result_code: str | None
    result_description: str = ""
    receipt_number: str | None = None


class PaymentGateway(ABC):
    """Interface for STK push initiation and status queries."""

    @abstractmethod
    def initiate(self, request: StkPushRequest) -> StkPushResponse:
        """Push a payment prompt to the payer's phone."""
        ...

    @abstractmethod
    def query(self, checkout_request_id: str) -> StkQueryResult:
        """Return the current status of a pushed payment."""
        ...


class SimulatedGateway(PaymentGateway):
    """Accepts every push and confirms it after a fixed delay.

    A checkout is forgotten once its result has been reported, or when it
    was never queried within ``retention`` seconds.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        confirmation_delay: float = SIMULATED_CONFIRMATION_SECONDS,
        retention: float = SIMULATED_RETENTION_SECONDS,
    ) -> None:
        self._clock = clock
        self._delay = confirmation_delay
        self._retention = retention
        self._started: dict[str, float] = {}
        self._lock = threading.Lock()

    def initiate(self, request: StkPushRequest) -> StkPushResponse:
        millis = int(self._clock() * 1000)
        suffix = "".join(secrets.choice(string.ascii_lowercase + string.digits) for _ in range(9))
        checkout_request_id = f"ws_CO_{millis}_{suffix}"
        now = self._clock()
        with self._lock:
            for stale in [key for key, started in self._started.items() if now - started > self._retention]:
                del self._started[stale]
            self._started[checkout_request_id] = now
        logger.info("simulated STK push of %s to %s", request.amount, request.phone_number)
        return StkPushResponse(
            merchant_request_id=f"ws_CO_{millis}",
            checkout_request_id=checkout_request_id,
            response_code="0",
            response_description="Success. Request accepted for processing",
            customer_message="Success. Request accepted for processing",
        )

    def query(self, checkout_request_id: str) -> StkQueryResult:
        now = self._clock()
        with self._lock:
            started = self._started.get(checkout_request_id)
            if started is None:
                raise PaymentGatewayError("Unknown checkout request")
            if now - started < self._delay:
                return StkQueryResult(result_code=None, result_description="The transaction is being processed")
            del self._started[checkout_request_id]
        return StkQueryResult(
            result_code="0",
            result_description="The service request is processed successfully. (Simulated)",
            receipt_number=f"MP{int(now * 1000)}",
        )

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._started)


class DarajaGateway(PaymentGateway):
    """Safaricom Daraja STK push client."""

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        short_code: str,
        passkey: str,
        callback_url: str,
        base_url: str = SANDBOX_BASE_URL,
        client: httpx.Client | None = None,
    ) -> None:
        self._consumer_key = consumer_key
        self._consumer_secret = consumer_secret
        self._short_code = short_code
        self._passkey = passkey
        self._callback_url = callback_url
        self._client = client or httpx.Client(base_url=base_url, timeout=30.0)

    def _timestamp(self) -> str:
        return datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")

    def _password(self, timestamp: str) -> str:
        raw = f"{self._short_code}{self._passkey}{timestamp}".encode()
        return base64.b64encode(raw).decode("ascii")

    def _access_token(self) -> str:
        try:
            r = self._client.get(
                "/oauth/v1/generate",
                params={"grant_type": "client_credentials"},
                auth=(self._consumer_key, self._consumer_secret),
            )
            r.raise_for_status()
            return r.json()["access_token"]
        except (httpx.HTTPError, KeyError, ValueError) as exc:
            logger.exception("M-Pesa access token request failed")
            raise PaymentGatewayError("Failed to get M-Pesa access token") from exc

    def _post(self, path: str, payload: dict) -> dict:
        token = self._access_token()
        try:
            r = self._client.post(path, json=payload, headers={"Authorization": f"Bearer {token}"})
        except httpx.HTTPError as exc:
            logger.exception("M-Pesa request to %s failed", path)
            raise PaymentGatewayError() from exc
        if r.is_error:
            try:
                message = r.json().get("errorMessage")
            except ValueError:
                message = None
            raise PaymentGatewayError(message or "STK Push request failed")
        return r.json()

    def initiate(self, request: StkPushRequest) -> StkPushResponse:
        timestamp = self._timestamp()
        phone = format_phone_number(request.phone_number)
        data = self._post(
            "/mpesa/stkpush/v1/processrequest",
            {
                "BusinessShortCode": self._short_code,
                "Password": self._password(timestamp),
                "Timestamp": timestamp,
                "TransactionType": "CustomerPayBillOnline",
                "Amount": int(request.amount),
                "PartyA": phone,
                "PartyB": self._short_code,
                "PhoneNumber": phone,
                "CallBackURL": request.callback_url or self._callback_url,
                "AccountReference": request.account_reference,
                "TransactionDesc": request.transaction_description,
            },
        )
        return StkPushResponse(
            merchant_request_id=data.get("MerchantRequestID", ""),
            checkout_request_id=data.get("CheckoutRequestID", ""),
            response_code=str(data.get("ResponseCode", "")),
            response_description=data.get("ResponseDescription", ""),
            customer_message=data.get("CustomerMessage", ""),
        )

    def query(self, checkout_request_id: str) -> StkQueryResult:
        timestamp = self._timestamp()
        data = self._post(
            "/mpesa/stkpushquery/v1/query",
            {
                "BusinessShortCode": self._short_code,
                "Password": self._password(timestamp),
                "Timestamp": timestamp,
                "CheckoutRequestID": checkout_request_id,
            },
        )
        code = data.get("ResultCode")
        return StkQueryResult(
            result_code=str(code) if code is not None else None,
            result_description=data.get("ResultDesc", ""),
            receipt_number=data.get("MpesaReceiptNumber"),
        )
