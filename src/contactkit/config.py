"""
Configuration for contactkit.
"""

import re
from typing import Final

# --- Postal Validation ---
VALID_STATE_CODES: Final[frozenset[str]] = frozenset(
    {
        "AK", "AL", "AR", "AZ", "CA", "CO", "CT", "DC", "DE", "FL", "GA",
        "HI", "IA", "ID", "IL", "IN", "KS", "KY", "LA", "MA", "MD", "ME",
        "MI", "MN", "MO", "MS", "MT", "NC", "ND", "NE", "NH", "NJ", "NM",
        "NV", "NY", "OH", "OK", "OR", "PA", "RI", "SC", "SD", "TN", "TX",
        "UT", "VA", "VT", "WA", "WI", "WV", "WY",
    }
)
ZIP_CODE_LENGTH: Final[int] = 5
ZIP_CODE_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

# --- Name Validation ---
MIDDLE_INITIAL_LENGTH: Final[int] = 1

# --- Phone Validation ---
PHONE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\+?[0-9 ().-]+")
PHONE_MIN_DIGITS: Final[int] = 7

# --- Reporting ---
REPORT_TITLE: Final[str] = "Contact methods"

# --- Runtime Type Checking ---
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = "CONTACTKIT_BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = "CONTACTKIT_BEARTYPE_ALL"

# --- SSoT Enforcement ---
__all__ = [
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "MIDDLE_INITIAL_LENGTH",
    "PHONE_MIN_DIGITS",
    "PHONE_PATTERN",
    "REPORT_TITLE",
    "VALID_STATE_CODES",
    "ZIP_CODE_DIGITS",
    "ZIP_CODE_LENGTH",
]
