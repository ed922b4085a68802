"""Country record value type.

CountryRecord is the single data type held by a Registry. It is immutable,
hashable and slotted, so records are safe to share across threads and to use
as dict keys or set members.

Serialization contract:
    as_dict() emits a mapping with exactly the keys
    name, short_name, alpha2, alpha3, numeric, currency
    where currency is a list of ISO 4217 codes in curated order. This is the
    shape consumers expect when records are written out as JSON.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from isocountries.constants import (
    KEY_ALPHA2,
    KEY_ALPHA3,
    KEY_CURRENCY,
    KEY_NAME,
    KEY_NUMERIC,
    KEY_SHORT_NAME,
    RECORD_KEYS,
)
from isocountries.errors import InvalidArgumentError, LookupContext

__all__ = [
    "Alpha2Code",
    "Alpha3Code",
    "CountryRecord",
    "CurrencyCode",
    "NumericCode",
]


# ============================================================================
# TYPE ALIASES (PEP 695)
# ============================================================================

type Alpha2Code = str
"""ISO 3166-1 alpha-2 code (e.g., 'US', 'LV', 'DE')."""

type Alpha3Code = str
"""ISO 3166-1 alpha-3 code (e.g., 'USA', 'LVA', 'DEU')."""

type NumericCode = str
"""ISO 3166-1 numeric code, zero-padded (e.g., '840', '004')."""

type CurrencyCode = str
"""ISO 4217 currency code (e.g., 'USD', 'EUR', 'GBP')."""


# ============================================================================
# DATA CLASS
# ============================================================================


@dataclass(frozen=True, slots=True)
class CountryRecord:
    """ISO 3166-1 country entry with associated currencies.

    Immutable, thread-safe, hashable. Safe for use as dict key or set member.

    Attributes:
        name: Full official designation (e.g., 'United States of America').
        short_name: Common designation (e.g., 'United States').
        alpha2: ISO 3166-1 alpha-2 code (e.g., 'US').
        alpha3: ISO 3166-1 alpha-3 code (e.g., 'USA').
        numeric: ISO 3166-1 numeric code, zero-padded (e.g., '840').
        currencies: ISO 4217 codes in curated order. Territories using several
            currencies (historical or transitional) list all of them; the
            order is not alphabetical by contract.
    """

    name: str
    short_name: str
    alpha2: Alpha2Code
    alpha3: Alpha3Code
    numeric: NumericCode
    currencies: tuple[CurrencyCode, ...]

    def as_dict(self) -> dict[str, Any]:
        """Return the record in its serialization shape.

        Returns:
            New dict with keys name, short_name, alpha2, alpha3, numeric and
            currency (a fresh list, safe for the caller to mutate).
        """
        return {
            KEY_NAME: self.name,
            KEY_SHORT_NAME: self.short_name,
            KEY_ALPHA2: self.alpha2,
            KEY_ALPHA3: self.alpha3,
            KEY_NUMERIC: self.numeric,
            KEY_CURRENCY: list(self.currencies),
        }

    def __getitem__(self, key: str) -> Any:
        """Mapping-style access by serialization key.

        Lets code written against the mapping shape (record["alpha2"],
        record["currency"]) read CountryRecord instances unchanged.

        Raises:
            KeyError: If key is not part of the serialization contract
        """
        match key:
            case "name":
                return self.name
            case "short_name":
                return self.short_name
            case "alpha2":
                return self.alpha2
            case "alpha3":
                return self.alpha3
            case "numeric":
                return self.numeric
            case "currency":
                return self.currencies
            case _:
                raise KeyError(key)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CountryRecord:
        """Build a record from a mapping in serialization shape.

        Field values are taken as given; shape checking is left to
        isocountries.validation.check_records.

        Args:
            data: Mapping with keys name, short_name, alpha2, alpha3, numeric
                and currency. Extra keys are ignored.

        Returns:
            New CountryRecord.

        Raises:
            InvalidArgumentError: If required keys are missing, or currency is
                a bare string instead of a sequence of codes.
        """
        missing = [key for key in RECORD_KEYS if key not in data]
        if missing:
            msg = f"Country mapping is missing keys: {', '.join(missing)}"
            raise InvalidArgumentError(
                msg,
                LookupContext(field="record", value=dict(data), expected=", ".join(RECORD_KEYS)),
            )

        currencies: Iterable[str] = data[KEY_CURRENCY]
        if isinstance(currencies, str):
            msg = f"Expected $currency to be a sequence of codes, got: {currencies!r}"
            raise InvalidArgumentError(
                msg,
                LookupContext(
                    field=KEY_CURRENCY, value=currencies, expected="a sequence of codes"
                ),
            )

        return cls(
            name=data[KEY_NAME],
            short_name=data[KEY_SHORT_NAME],
            alpha2=data[KEY_ALPHA2],
            alpha3=data[KEY_ALPHA3],
            numeric=data[KEY_NUMERIC],
            currencies=tuple(currencies),
        )
