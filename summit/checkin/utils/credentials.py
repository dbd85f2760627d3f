# ─────────────────────────────────────────────────────────────
# checkin/utils/credentials.py
# ─────────────────────────────────────────────────────────────
"""
PIN / ticket number format checks and generators.

Format checks are pure and run before any database access.
"""
import re
import secrets
import string
from typing import Optional

from django.utils import timezone

PIN_LENGTH = 6
TICKET_SUFFIX_LENGTH = 8
TICKET_ALPHABET = string.ascii_uppercase + string.digits

_PIN_RE = re.compile(r"[0-9]{6}")
_TICKET_RE = re.compile(r"[A-Z]+-[0-9]{4}-[A-Z0-9]{8}")


def validate_pin_format(value) -> bool:
    return isinstance(value, str) and _PIN_RE.fullmatch(value) is not None


def validate_ticket_number_format(value) -> bool:
    return isinstance(value, str) and _TICKET_RE.fullmatch(value) is not None


def normalize_ticket_number(value) -> str:
    return (value or "").strip().upper()


def generate_secure_pin() -> str:
    return "".join(secrets.choice(string.digits) for _ in range(PIN_LENGTH))


def generate_ticket_number(prefix: str = "HCS", year: Optional[int] = None) -> str:
    prefix = (prefix or "").strip().upper()
    if not prefix.isalpha() or not prefix.isascii():
        raise ValueError("Ticket prefix must be ASCII letters only.")
    year = year or timezone.now().year
    if not 1000 <= int(year) <= 9999:
        raise ValueError("Ticket year must have 4 digits.")
    suffix = "".join(secrets.choice(TICKET_ALPHABET) for _ in range(TICKET_SUFFIX_LENGTH))
    return f"{prefix}-{int(year)}-{suffix}"
