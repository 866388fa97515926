from donations.payments.flow import PaymentFlow, PaymentStatus, payment_status_message
from donations.payments.gateways import DarajaGateway, PaymentGateway, SimulatedGateway
from donations.payments.phone import format_phone_number, validate_phone_number
from donations.payments.service import PaymentService

__all__ = [
    "PaymentFlow",
    "PaymentStatus",
    "PaymentService",
    "PaymentGateway",
    "SimulatedGateway",
    "DarajaGateway",
    "payment_status_message",
    "validate_phone_number",
    "format_phone_number",
]
