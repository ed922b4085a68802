"""Consistency checks for country datasets.

Registry accepts replacement datasets without inspecting them. Callers who
want stricter handling run check_records() first and decide what to do with
the findings; nothing here raises on bad data.

Checks, per record:
    - name and short_name are non-empty strings
    - alpha2 is 2 uppercase ASCII letters, alpha3 is 3, numeric is 3 digits
    - every currency is 3 uppercase ASCII letters
And across the collection:
    - alpha2, alpha3 and numeric values are unique

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from isocountries.constants import (
    ALPHA2_LENGTH,
    ALPHA3_LENGTH,
    CURRENCY_CODE_LENGTH,
    KEY_CURRENCY,
    NUMERIC_LENGTH,
)
from isocountries.enums import KeyField
from isocountries.guards import ascii_casefold, is_numeric_shaped
from isocountries.record import CountryRecord

__all__ = [
    "DatasetIssue",
    "check_records",
]


@dataclass(frozen=True, slots=True)
class DatasetIssue:
    """Single problem found in a dataset.

    Attributes:
        index: Position of the offending record (0-indexed)
        field: Record field the problem concerns
        code: Issue kind ("malformed-field", "empty-field", "duplicate-key",
            "malformed-currency")
        message: Human-readable description
    """

    index: int
    field: str
    code: str
    message: str

    def format(self) -> str:
        """Format issue as a single report line."""
        return f"[{self.code}] record {self.index} ({self.field}): {self.message}"


def _is_upper_letters(value: object, length: int) -> bool:
    return (
        isinstance(value, str)
        and len(value) == length
        and value.isascii()
        and value.isalpha()
        and value.isupper()
    )


def _check_record(index: int, record: CountryRecord) -> list[DatasetIssue]:
    issues: list[DatasetIssue] = []

    for field in ("name", "short_name"):
        value = getattr(record, field)
        if not isinstance(value, str) or not value:
            issues.append(
                DatasetIssue(
                    index, field, "empty-field", f"expected non-empty string, got {value!r}"
                )
            )

    shapes = (
        (KeyField.ALPHA2, ALPHA2_LENGTH),
        (KeyField.ALPHA3, ALPHA3_LENGTH),
    )
    for field, length in shapes:
        value = getattr(record, field)
        if not _is_upper_letters(value, length):
            issues.append(
                DatasetIssue(
                    index,
                    field,
                    "malformed-field",
                    f"expected {length} uppercase ASCII letters, got {value!r}",
                )
            )

    if not is_numeric_shaped(record.numeric):
        issues.append(
            DatasetIssue(
                index,
                KeyField.NUMERIC,
                "malformed-field",
                f"expected {NUMERIC_LENGTH} ASCII digits, got {record.numeric!r}",
            )
        )

    for currency in record.currencies:
        if not _is_upper_letters(currency, CURRENCY_CODE_LENGTH):
            issues.append(
                DatasetIssue(
                    index,
                    KEY_CURRENCY,
                    "malformed-currency",
                    f"expected {CURRENCY_CODE_LENGTH} uppercase ASCII letters, got {currency!r}",
                )
            )

    return issues


def check_records(records: Iterable[CountryRecord]) -> tuple[DatasetIssue, ...]:
    """Report shape and uniqueness problems in a dataset.

    Duplicate codes are compared case-insensitively, the same way lookups
    match them; each later duplicate is reported against the first record
    carrying the value.

    Args:
        records: Records in collection order

    Returns:
        Issues in record order. Empty tuple if the dataset is consistent.

    Example:
        >>> from isocountries import default_records
        >>> check_records(default_records())
        ()
    """
    issues: list[DatasetIssue] = []
    seen: dict[KeyField, dict[str, int]] = {
        KeyField.ALPHA2: {},
        KeyField.ALPHA3: {},
        KeyField.NUMERIC: {},
    }

    for index, record in enumerate(records):
        issues.extend(_check_record(index, record))

        for field, first_seen in seen.items():
            value = getattr(record, field)
            if not isinstance(value, str):
                continue
            folded = ascii_casefold(value)
            if folded in first_seen:
                issues.append(
                    DatasetIssue(
                        index,
                        field,
                        "duplicate-key",
                        f"{value!r} already used by record {first_seen[folded]}",
                    )
                )
            else:
                first_seen[folded] = index

    return tuple(issues)
