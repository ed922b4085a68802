"""Registry - Immutable ISO 3166-1 record collection with keyed lookups.

A Registry holds an ordered tuple of CountryRecord instances and answers
field-keyed lookups and enumeration requests against it. Every operation is a
pure read: the collection is fixed at construction and never modified, so a
single instance may be shared by any number of threads without locking.

Lookup semantics:
    1. The query is shape-checked first (see isocountries.guards). Malformed
       input raises InvalidArgumentError before any record is scanned.
    2. Records are scanned in collection order, comparing the requested field
       case-insensitively (ASCII only, exact match).
    3. The first match is returned. No match raises NotFoundError.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from isocountries.dataset import default_records
from isocountries.enums import KeyField
from isocountries.errors import LookupContext, NotFoundError
from isocountries.guards import (
    ascii_casefold,
    guard_alpha2,
    guard_alpha3,
    guard_key_field,
    guard_name,
    guard_numeric,
)
from isocountries.record import CountryRecord

__all__ = ["Registry"]

logger = logging.getLogger(__name__)

_GUARDS: dict[KeyField, Callable[[object], str]] = {
    KeyField.NAME: guard_name,
    KeyField.ALPHA2: guard_alpha2,
    KeyField.ALPHA3: guard_alpha3,
    KeyField.NUMERIC: guard_numeric,
}


def _coerce(item: CountryRecord | Mapping[str, Any]) -> CountryRecord:
    if isinstance(item, CountryRecord):
        return item
    return CountryRecord.from_mapping(item)


class Registry:
    """Ordered, immutable collection of country records.

    Sized and iterable: len(registry) is the record count and iterating
    yields records in collection order.

    Args:
        records: Replacement dataset. None (or an empty iterable) selects the
            bundled default dataset. Otherwise the given records become the
            entire held set, with no merge. Items may be CountryRecord
            instances or mappings in serialization shape. Uniqueness of codes
            is not checked here; lookups report the first match in order.

    Example:
        >>> registry = Registry()
        >>> registry.lookup_by_alpha2("us").alpha3
        'USA'
        >>> [key for key, _ in registry.enumerate("alpha3")][:2]
        ['AFG', 'ALA']
    """

    __slots__ = ("_records",)

    _records: tuple[CountryRecord, ...]

    def __init__(
        self,
        records: Iterable[CountryRecord | Mapping[str, Any]] | None = None,
    ) -> None:
        supplied = tuple(_coerce(item) for item in records) if records is not None else ()
        if supplied:
            self._records = supplied
            logger.debug(
                "Registry initialized with custom dataset: %d records", len(supplied)
            )
        else:
            self._records = default_records()
            logger.debug(
                "Registry initialized with default dataset: %d records", len(self._records)
            )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def lookup_by_name(self, name: str) -> CountryRecord:
        """Look up a record by full official name.

        Args:
            name: Full name (e.g., 'United States of America'). ASCII
                case-insensitive; short names do not match.

        Raises:
            InvalidArgumentError: If name is not a non-empty string
            NotFoundError: If no record has this name
        """
        return self.lookup(KeyField.NAME, name)

    def lookup_by_alpha2(self, code: str) -> CountryRecord:
        """Look up a record by ISO 3166-1 alpha-2 code.

        Args:
            code: Two ASCII letters (e.g., 'US', 'us'). Case-insensitive.

        Raises:
            InvalidArgumentError: If code is not exactly 2 ASCII letters
            NotFoundError: If no record has this code
        """
        return self.lookup(KeyField.ALPHA2, code)

    def lookup_by_alpha3(self, code: str) -> CountryRecord:
        """Look up a record by ISO 3166-1 alpha-3 code.

        Raises:
            InvalidArgumentError: If code is not exactly 3 ASCII letters
            NotFoundError: If no record has this code
        """
        return self.lookup(KeyField.ALPHA3, code)

    def lookup_by_numeric(self, code: str) -> CountryRecord:
        """Look up a record by zero-padded ISO 3166-1 numeric code.

        Raises:
            InvalidArgumentError: If code is not exactly 3 ASCII digits
            NotFoundError: If no record has this code
        """
        return self.lookup(KeyField.NUMERIC, code)

    def lookup(self, key: KeyField | str, value: str) -> CountryRecord:
        """Look up a record by any key field.

        Args:
            key: Field to match against (KeyField or its string value).
            value: Query value, shape-checked for that field.

        Returns:
            First record in collection order whose field matches value.

        Raises:
            InvalidArgumentError: If key is not a recognized field, or value
                fails the field's shape rule
            NotFoundError: If no record matches
        """
        field = guard_key_field(key)
        query = _GUARDS[field](value)
        folded = ascii_casefold(query)

        for record in self._records:
            if ascii_casefold(getattr(record, field)) == folded:
                return record

        logger.debug("No %s match for %r among %d records", field, query, len(self._records))
        msg = f'No "{field}" key found matching: {query}'
        raise NotFoundError(msg, LookupContext(field=field, value=query))

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    def all(self) -> tuple[CountryRecord, ...]:
        """Return every record in collection order.

        The tuple is the registry's own storage; it is immutable, so returning
        it directly cannot let callers alter the registry.
        """
        return self._records

    def count(self) -> int:
        """Return the number of records held."""
        return len(self._records)

    def enumerate(
        self, key: KeyField | str = KeyField.ALPHA2
    ) -> Iterator[tuple[str, CountryRecord]]:
        """Iterate (key, record) pairs in collection order.

        Each call returns an independent iterator starting at the first
        record. The key field is validated immediately, not on first next().

        Args:
            key: Field supplying the pair key (default: alpha2).

        Raises:
            InvalidArgumentError: If key is not one of name, alpha2, alpha3,
                numeric
        """
        field = guard_key_field(key)
        return ((getattr(record, field), record) for record in self._records)

    def iter_records(self) -> Iterator[CountryRecord]:
        """Iterate records in collection order, without keys."""
        return iter(self._records)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CountryRecord]:
        return iter(self._records)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, CountryRecord) and item in self._records

    def __repr__(self) -> str:
        return f"Registry(records={len(self._records)})"
