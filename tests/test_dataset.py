"""Tests for the bundled ISO 3166-1 dataset.

Tests cover:
- default_records() caching and immutability
- Entries consumers depend on
- Dataset-wide shape and consistency
"""

from __future__ import annotations

import pytest

from isocountries import CountryRecord, default_records
from isocountries.validation import check_records


class TestDefaultRecords:
    """Tests for default_records()."""

    def test_returns_tuple_of_records(self) -> None:
        records = default_records()
        assert isinstance(records, tuple)
        assert all(isinstance(r, CountryRecord) for r in records)

    def test_built_once(self) -> None:
        assert default_records() is default_records()

    def test_size(self) -> None:
        assert len(default_records()) == 249

    def test_passes_consistency_checks(self) -> None:
        assert check_records(default_records()) == ()


class TestCompatibilityEntries:
    """Entries whose exact values are part of the public surface."""

    @pytest.mark.parametrize(
        ("alpha2", "alpha3", "numeric", "name", "short_name"),
        [
            ("US", "USA", "840", "United States of America", "United States"),
            ("AQ", "ATA", "010", "Antarctica", "Antarctica"),
            ("AX", "ALA", "248", "Åland Islands", "Åland Islands"),
            ("CI", "CIV", "384", "Côte d'Ivoire", "Côte d'Ivoire"),
            ("KP", "PRK", "408", "Korea (Democratic People's Republic of)", "North Korea"),
            ("TW", "TWN", "158", "Taiwan (Province of China)", "Taiwan"),
            ("GB", "GBR", "826", "United Kingdom of Great Britain and Northern Ireland",
             "United Kingdom"),
        ],
    )
    def test_entry(
        self, alpha2: str, alpha3: str, numeric: str, name: str, short_name: str
    ) -> None:
        by_alpha2 = {r.alpha2: r for r in default_records()}
        record = by_alpha2[alpha2]
        assert (record.alpha3, record.numeric, record.name, record.short_name) == (
            alpha3, numeric, name, short_name,
        )

    def test_multi_currency_entries(self) -> None:
        by_alpha2 = {r.alpha2: r for r in default_records()}
        assert by_alpha2["ZW"].currencies == ("BWP", "EUR", "GBP", "USD", "ZAR")
        assert by_alpha2["CU"].currencies == ("CUC", "CUP")
        assert len(by_alpha2["AQ"].currencies) == 25

    def test_every_record_has_currency(self) -> None:
        assert all(r.currencies for r in default_records())

    def test_source_order(self) -> None:
        names = [r.name for r in default_records()]
        assert names[:3] == ["Afghanistan", "Åland Islands", "Albania"]
        assert names[-1] == "Zimbabwe"
