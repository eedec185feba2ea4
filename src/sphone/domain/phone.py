"""Phone number cleaning, validation, and display formatting (10-digit numbers)."""

from sphone.domain.errors import InvalidPhoneNumber

# Canonical (cleaned) phone numbers are exactly this many ASCII digits.
PHONE_NUMBER_LENGTH = 10

_STRIP_CHARS = str.maketrans("", "", " -()")


def clean_phone(raw: str | None) -> str:
    """Return the number with spaces, dashes, and parentheses removed.

    Never fails; None or whitespace-only input gives "". Idempotent.
    """
    if not raw or not str(raw).strip():
        return ""
    return str(raw).translate(_STRIP_CHARS)


def _all_ascii_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def is_valid_phone(raw: str | None) -> bool:
    """True iff the cleaned form is exactly 10 ASCII digits."""
    cleaned = clean_phone(raw)
    return len(cleaned) == PHONE_NUMBER_LENGTH and _all_ascii_digits(cleaned)


def validate_phone(raw: str | None) -> str:
    """Return the cleaned number, or raise InvalidPhoneNumber with the reason."""
    if not raw or not str(raw).strip():
        raise InvalidPhoneNumber("Phone number cannot be empty!")
    cleaned = clean_phone(raw)
    if len(cleaned) != PHONE_NUMBER_LENGTH:
        raise InvalidPhoneNumber(
            f"Invalid phone number! Please enter exactly {PHONE_NUMBER_LENGTH} digits."
        )
    if not _all_ascii_digits(cleaned):
        raise InvalidPhoneNumber("Phone number must contain only digits!")
    return cleaned


def format_phone(raw: str) -> str:
    """Render as (XXX) XXX-XXXX when the cleaned form has 10 characters; else return raw unchanged."""
    cleaned = clean_phone(raw)
    if len(cleaned) != PHONE_NUMBER_LENGTH:
        return raw
    return f"({cleaned[:3]}) {cleaned[3:6]}-{cleaned[6:]}"
