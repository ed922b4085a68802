"""Shared constants for isocountries.

Centralized configuration constants used across the record, guard, registry
and CLDR modules. Placing constants here avoids circular imports and provides
a single source of truth.

Constants are grouped by domain:
- Record keys: Field names of the record serialization contract
- Code shapes: Fixed lengths of ISO 3166-1 and ISO 4217 codes
- Cache limits: Memory bounds for CLDR display-name caching

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Record keys
    "KEY_NAME",
    "KEY_SHORT_NAME",
    "KEY_ALPHA2",
    "KEY_ALPHA3",
    "KEY_NUMERIC",
    "KEY_CURRENCY",
    "RECORD_KEYS",
    # Code shapes
    "ALPHA2_LENGTH",
    "ALPHA3_LENGTH",
    "NUMERIC_LENGTH",
    "CURRENCY_CODE_LENGTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# RECORD KEYS
# ============================================================================

KEY_NAME: str = "name"
KEY_SHORT_NAME: str = "short_name"
KEY_ALPHA2: str = "alpha2"
KEY_ALPHA3: str = "alpha3"
KEY_NUMERIC: str = "numeric"
KEY_CURRENCY: str = "currency"

# Serialization contract for a record, in emission order.
# Consumers of as_dict() output depend on this exact key set.
RECORD_KEYS: tuple[str, ...] = (
    KEY_NAME,
    KEY_SHORT_NAME,
    KEY_ALPHA2,
    KEY_ALPHA3,
    KEY_NUMERIC,
    KEY_CURRENCY,
)

# ============================================================================
# CODE SHAPES
# ============================================================================

ALPHA2_LENGTH: int = 2
ALPHA3_LENGTH: int = 3
NUMERIC_LENGTH: int = 3

# ISO 4217 alphabetic currency codes (e.g., USD, EUR)
CURRENCY_CODE_LENGTH: int = 3

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached (code, locale) display-name lookups per CLDR function.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128
