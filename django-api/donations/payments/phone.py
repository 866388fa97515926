"""Kenyan MSISDN validation and normalisation."""

import re

_NON_DIGITS = re.compile(r"\D")


def _digits(phone_number: str) -> str:
    return _NON_DIGITS.sub("", phone_number or "")


def validate_phone_number(phone_number: str) -> bool:
    """Accept 07XXXXXXXX / 01XXXXXXXX, 2547XXXXXXXX and bare 7XXXXXXXX / 1XXXXXXXX."""
    cleaned = _digits(phone_number)
    if cleaned.startswith("254"):
        return len(cleaned) == 12
    if cleaned.startswith("0"):
        return len(cleaned) == 10
    if cleaned.startswith(("7", "1")):
        return len(cleaned) == 9
    return False


def format_phone_number(phone_number: str) -> str:
    """Return the ``254XXXXXXXXX`` form expected by the STK push API."""
    cleaned = _digits(phone_number)
    if cleaned.startswith("254"):
        return cleaned
    if cleaned.startswith("0"):
        return "254" + cleaned[1:]
    if cleaned.startswith(("7", "1")):
        return "254" + cleaned
    return cleaned
