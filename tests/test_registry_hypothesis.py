"""Hypothesis property-based tests for Registry.

Tests invariants that must hold across all records and inputs.
Uses strategies from tests.strategies.iso for generating test data.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from isocountries import (
    CountryRecord,
    InvalidArgumentError,
    KeyField,
    NotFoundError,
    Registry,
    default_records,
)
from isocountries.guards import ascii_casefold
from tests.strategies.iso import (
    all_alpha2_codes,
    ascii_case_variant,
    custom_datasets,
    default_country_records,
    key_fields,
    malformed_by_kind,
    record_by_currency_count,
)

_REGISTRY = Registry()
_KNOWN_ALPHA2 = {r.alpha2 for r in default_records()}

# ============================================================================
# LOOKUP PROPERTIES
# ============================================================================


class TestLookupProperties:
    """Every bundled record is reachable through every key."""

    @given(record=default_country_records)
    def test_every_key_finds_its_record(self, record: CountryRecord) -> None:
        assert _REGISTRY.lookup_by_alpha2(record.alpha2) == record
        assert _REGISTRY.lookup_by_alpha3(record.alpha3) == record
        assert _REGISTRY.lookup_by_numeric(record.numeric) == record
        assert _REGISTRY.lookup_by_name(record.name) == record

    @given(record=default_country_records)
    def test_lowercase_queries_find_record(self, record: CountryRecord) -> None:
        assert _REGISTRY.lookup_by_alpha2(record.alpha2.lower()) == record
        assert _REGISTRY.lookup_by_alpha3(record.alpha3.lower()) == record
        assert _REGISTRY.lookup_by_name(ascii_casefold(record.name)) == record

    @given(data=st.data())
    def test_case_insensitivity_invariant(self, data: st.DataObject) -> None:
        """Upper, lower and mixed ASCII case all return the same record."""
        record = data.draw(default_country_records)
        alpha2 = data.draw(ascii_case_variant(record.alpha2))
        alpha3 = data.draw(ascii_case_variant(record.alpha3))
        name = data.draw(ascii_case_variant(record.name))

        assert _REGISTRY.lookup_by_alpha2(alpha2) is record
        assert _REGISTRY.lookup_by_alpha3(alpha3) is record
        assert _REGISTRY.lookup_by_name(name) is record

    @given(record=default_country_records, key=key_fields)
    def test_generic_lookup_matches_specific(self, record: CountryRecord, key: KeyField) -> None:
        assert _REGISTRY.lookup(key, getattr(record, key)) is record

    @given(code=all_alpha2_codes)
    def test_well_formed_alpha2_is_found_or_not_found(self, code: str) -> None:
        """Well-formed codes never raise InvalidArgumentError."""
        if code.upper() in _KNOWN_ALPHA2:
            assert _REGISTRY.lookup_by_alpha2(code).alpha2 == code.upper()
        else:
            with pytest.raises(NotFoundError):
                _REGISTRY.lookup_by_alpha2(code)

    @given(case=malformed_by_kind())
    def test_malformed_input_is_invalid_argument(self, case: tuple[KeyField, object]) -> None:
        """Malformed input raises InvalidArgumentError, never NotFoundError."""
        key, value = case
        with pytest.raises(InvalidArgumentError):
            _REGISTRY.lookup(key, value)  # type: ignore[arg-type]

    @given(record=record_by_currency_count())
    def test_currencies_are_well_formed(self, record: CountryRecord) -> None:
        assert record.currencies
        assert all(len(code) == 3 and code.isupper() for code in record.currencies)


# ============================================================================
# ENUMERATION PROPERTIES
# ============================================================================


class TestEnumerationProperties:
    """enumerate() mirrors all() for every key field."""

    @given(key=key_fields)
    def test_enumerate_mirrors_all(self, key: KeyField) -> None:
        pairs = list(_REGISTRY.enumerate(key))
        assert len(pairs) == _REGISTRY.count()
        assert tuple(record for _, record in pairs) == _REGISTRY.all()
        assert all(pair_key == getattr(record, key) for pair_key, record in pairs)

    @given(key=st.text().filter(lambda s: s not in set(KeyField)))
    def test_unknown_key_rejected(self, key: str) -> None:
        with pytest.raises(InvalidArgumentError):
            _REGISTRY.enumerate(key)


# ============================================================================
# UNIQUENESS
# ============================================================================


class TestDefaultDatasetUniqueness:
    """No two bundled records share a key."""

    @pytest.mark.parametrize("key", [KeyField.ALPHA2, KeyField.ALPHA3, KeyField.NUMERIC])
    def test_codes_unique(self, key: KeyField) -> None:
        values = [getattr(record, key) for record in default_records()]
        assert len(values) == len(set(values))

    def test_names_unique_under_lookup_folding(self) -> None:
        names = [ascii_casefold(record.name) for record in default_records()]
        assert len(names) == len(set(names))


# ============================================================================
# REPLACEMENT DATASET PROPERTIES
# ============================================================================


class TestCustomDatasetProperties:
    """Lookups on replacement datasets see only the supplied records."""

    @given(records=custom_datasets)
    def test_lookups_operate_on_supplied_records(self, records: list[CountryRecord]) -> None:
        registry = Registry(records)
        assert registry.all() == tuple(records)
        for record in records:
            assert registry.lookup_by_alpha2(record.alpha2) is record
            assert registry.lookup_by_alpha3(record.alpha3) is record
            assert registry.lookup_by_numeric(record.numeric) is record
            assert registry.lookup_by_name(record.name) is record

    @given(records=custom_datasets)
    def test_currency_order_preserved(self, records: list[CountryRecord]) -> None:
        registry = Registry(records)
        for original, held in zip(records, registry.iter_records(), strict=True):
            assert held.currencies == original.currencies

    @given(records=custom_datasets, code=all_alpha2_codes)
    def test_absent_code_not_found(self, records: list[CountryRecord], code: str) -> None:
        registry = Registry(records)
        if code.upper() in {r.alpha2 for r in records}:
            return
        with pytest.raises(NotFoundError):
            registry.lookup_by_alpha2(code)

    @given(records=custom_datasets)
    def test_mapping_input_equivalent(self, records: list[CountryRecord]) -> None:
        assert Registry([r.as_dict() for r in records]).all() == Registry(records).all()
