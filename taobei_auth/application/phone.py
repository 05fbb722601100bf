import re
from typing import Optional

# Mainland China mobile number: 11 ASCII digits starting with 1.
PHONE_PATTERN = re.compile(r"^1[0-9]{10}$")


def is_valid_phone(phone: Optional[str]) -> bool:
    if not isinstance(phone, str):
        return False
    return PHONE_PATTERN.match(phone.strip()) is not None


def normalize_phone(phone: str) -> str:
    """Canonical storage key for a phone that already passed is_valid_phone."""
    return phone.strip()
