from __future__ import annotations

import re
from typing import Final


# Letters, periods, hyphens and whitespace; at least one character.
_NAME: Final[re.Pattern[str]] = re.compile(r"[A-Za-z.\-\s]+", re.ASCII)

# A leading zero followed by exactly six digits.
_EMPLOYEE_ID: Final[re.Pattern[str]] = re.compile(r"0\d{6}", re.ASCII)

# Deliberately narrow: alphanumeric local part, a single letters-only domain
# label and a letters-only TLD. "a.b@c.com" and "a@b.co.uk" do not match.
_EMAIL: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9]+@[A-Za-z]+\.[A-Za-z]+")


def _matches(pattern: re.Pattern[str], value: object) -> bool:
    """
    Whole-string match. None (or anything that is not a str) is invalid.
    """
    if not isinstance(value, str):
        return False
    return pattern.fullmatch(value) is not None


def is_valid_name(name: str | None) -> bool:
    return _matches(_NAME, name)


def is_valid_id(employee_id: str | None) -> bool:
    return _matches(_EMPLOYEE_ID, employee_id)


def is_valid_email(email: str | None) -> bool:
    return _matches(_EMAIL, email)
