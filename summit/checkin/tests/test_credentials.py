import re
import pytest

from checkin.utils.credentials import (
    validate_pin_format, validate_ticket_number_format, normalize_ticket_number,
    generate_secure_pin, generate_ticket_number,
)


@pytest.mark.parametrize("value", ["123456", "000000", "999999"])
def test_pin_six_digits_ok(value):
    assert validate_pin_format(value) is True


@pytest.mark.parametrize("value", ["", "12345", "1234567", "12a456", " 123456", "123456\n", "１２３４５６", "١٢٣٤٥٦", None, 123456])
def test_pin_rejects_everything_else(value):
    assert validate_pin_format(value) is False


@pytest.mark.parametrize("value", ["HCS-2024-ABCDEFGH", "HCS-2024-12345678", "A-1999-A1B2C3D4", "SUMMIT-2025-ZZZZ0000"])
def test_ticket_format_ok(value):
    assert validate_ticket_number_format(value) is True


@pytest.mark.parametrize("value", [
    "",
    "HCS-2024",
    "HCS-24-ABCDEFGH",
    "HCS-2024-ABCDEFG",
    "HCS-2024-ABCDEFGHI",
    "hcs-2024-ABCDEFGH",
    "HCS-2024-abcdefgh",
    "2024-ABCDEFGH",
    "HCS_2024_ABCDEFGH",
    "HCS-2024-ABCDEFGH ",
    None,
])
def test_ticket_format_rejects_malformed(value):
    assert validate_ticket_number_format(value) is False


def test_normalize_ticket_number():
    assert normalize_ticket_number("  hcs-2024-abcdefgh ") == "HCS-2024-ABCDEFGH"
    assert normalize_ticket_number(None) == ""


def test_generated_credentials_pass_their_own_checks():
    for _ in range(50):
        assert validate_pin_format(generate_secure_pin())
        ticket = generate_ticket_number("HCS", 2024)
        assert validate_ticket_number_format(ticket)
        assert re.match(r"^HCS-2024-", ticket)


def test_generate_ticket_number_rejects_bad_prefix_or_year():
    with pytest.raises(ValueError):
        generate_ticket_number("HC5", 2024)
    with pytest.raises(ValueError):
        generate_ticket_number("HCS", 24)
