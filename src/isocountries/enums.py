"""Enumerations for isocountries type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so KeyField.ALPHA2 == "alpha2".

Python 3.13+.
"""

from enum import StrEnum


class KeyField(StrEnum):
    """Record field usable as a lookup or enumeration key.

    Declaration order is the order reported in diagnostics.

    StrEnum provides automatic string conversion: str(KeyField.ALPHA2) == "alpha2"
    """

    ALPHA2 = "alpha2"
    """ISO 3166-1 alpha-2 code: US"""

    ALPHA3 = "alpha3"
    """ISO 3166-1 alpha-3 code: USA"""

    NUMERIC = "numeric"
    """ISO 3166-1 numeric code: 840"""

    NAME = "name"
    """Full official designation: United States of America"""


__all__ = [
    "KeyField",
]
