# restaurant/domain/validators.py
import re

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# numer komorkowy, 10 cyfr, pierwsza 6-9
PHONE_RE = re.compile(r"^[6-9]\d{9}$")

PASSWORD_MIN_LENGTH = 8
NAME_MIN_LENGTH = 3
MESSAGE_MIN_LENGTH = 10


def is_valid_email(value: str | None) -> bool:
    return bool(value) and EMAIL_RE.fullmatch(value) is not None


def is_valid_phone(value: str | None) -> bool:
    return bool(value) and PHONE_RE.fullmatch(value) is not None


def is_positive_id(value: int | None) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
