"""Hypothesis strategies for isocountries property-based testing.

Usage:
    from tests.strategies import default_country_records, ascii_case_variant
    from tests.strategies.iso import malformed_alpha2, custom_datasets

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - record_by_currency_count, malformed_by_kind
"""

from .iso import (
    all_alpha2_codes,
    all_alpha3_codes,
    all_numeric_codes,
    ascii_case_variant,
    country_records,
    custom_datasets,
    default_country_records,
    key_fields,
    locale_codes,
    malformed_alpha2,
    malformed_alpha3,
    malformed_by_kind,
    malformed_numeric,
    record_by_currency_count,
)

__all__ = [
    "all_alpha2_codes",
    "all_alpha3_codes",
    "all_numeric_codes",
    "ascii_case_variant",
    "country_records",
    "custom_datasets",
    "default_country_records",
    "key_fields",
    "locale_codes",
    "malformed_alpha2",
    "malformed_alpha3",
    "malformed_by_kind",
    "malformed_numeric",
    "record_by_currency_count",
]
