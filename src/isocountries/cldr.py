"""Localized display names via Babel CLDR data.

The embedded dataset carries English designations only. This module looks up
country and currency names in other languages from the Unicode CLDR data
shipped with Babel. It is presentation only: Registry lookups never consult
it, and matching stays ASCII case-insensitive on the embedded names.

Requires Babel installation:
    pip install isocountries[babel]

Without Babel, functions raise BabelImportError with installation guidance.
Importing this module never imports Babel; the import happens on first call.

Python 3.13+. Babel is optional dependency.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from isocountries.constants import MAX_LOCALE_CACHE_SIZE
from isocountries.guards import guard_alpha2

if TYPE_CHECKING:
    from babel import Locale

    from isocountries.record import CountryRecord, CurrencyCode

__all__ = [
    "BabelImportError",
    "clear_cldr_cache",
    "get_currency_names",
    "get_display_name",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


# ============================================================================
# EXCEPTIONS
# ============================================================================


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides installation guidance to users.
    """

    def __init__(self) -> None:
        super().__init__(
            "Babel is required for localized display names. "
            "Install with: pip install isocountries[babel]"
        )


# ============================================================================
# BABEL INTERFACE (LAZY IMPORT)
# ============================================================================


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _get_babel_locale(locale_norm: str) -> Locale | None:
    """Parse a normalized locale, returning None if CLDR does not know it.

    Raises:
        BabelImportError: If Babel not installed.
    """
    try:
        from babel import Locale  # noqa: PLC0415
        from babel.core import UnknownLocaleError  # noqa: PLC0415
    except ImportError as e:
        raise BabelImportError from e
    try:
        return Locale.parse(locale_norm)
    except (ValueError, LookupError, UnknownLocaleError):
        # ValueError for malformed identifiers, UnknownLocaleError for
        # well-formed locales missing from CLDR.
        logger.debug("Locale not available in CLDR data: %s", locale_norm)
        return None


# ============================================================================
# CACHED LOOKUP FUNCTIONS
# ============================================================================


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _get_display_name_impl(code_upper: str, locale_norm: str) -> str | None:
    """Internal cached implementation for get_display_name.

    Args:
        code_upper: Pre-uppercased ISO 3166-1 alpha-2 code.
        locale_norm: Pre-normalized locale string.
    """
    locale = _get_babel_locale(locale_norm)
    if locale is None:
        return None
    name: str | None = locale.territories.get(code_upper)
    return name


def get_display_name(alpha2: str, locale: str = "en") -> str | None:
    """Localized country name for an alpha-2 code.

    Args:
        alpha2: ISO 3166-1 alpha-2 code (e.g., 'DE'). Case-insensitive.
        locale: Locale for the name (default: 'en'). Accepts BCP-47 (de-AT)
            or POSIX (de_AT) formats; normalized internally.

    Returns:
        CLDR display name, or None if the locale or territory is unknown to
        CLDR.

    Raises:
        InvalidArgumentError: If alpha2 is not exactly 2 ASCII letters
        BabelImportError: If Babel not installed.

    Thread-safe. Results cached per normalized (code, locale) pair.

    Example:
        >>> get_display_name("DE", "de")
        'Deutschland'
    """
    code = guard_alpha2(alpha2)
    return _get_display_name_impl(code.upper(), normalize_locale(locale))


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _get_currency_names_impl(
    codes: tuple[CurrencyCode, ...],
    locale_norm: str,
) -> tuple[tuple[CurrencyCode, str], ...]:
    """Internal cached implementation for get_currency_names.

    Args:
        codes: Currency codes in curated order.
        locale_norm: Pre-normalized locale string.
    """
    locale = _get_babel_locale(locale_norm)
    names: dict[str, str] = locale.currencies if locale is not None else {}
    return tuple((code, names.get(code, code)) for code in codes)


def get_currency_names(
    record: CountryRecord,
    locale: str = "en",
) -> tuple[tuple[CurrencyCode, str], ...]:
    """Localized names of a record's currencies.

    Args:
        record: Country whose currencies to name.
        locale: Locale for the names (default: 'en'). Accepts BCP-47 or POSIX.

    Returns:
        (code, name) pairs in the record's curated currency order. Codes CLDR
        does not know, and every code when the locale is unknown, are paired
        with themselves.

    Raises:
        BabelImportError: If Babel not installed.

    Thread-safe. Results cached per normalized (currencies, locale) pair.
    """
    return _get_currency_names_impl(record.currencies, normalize_locale(locale))


# ============================================================================
# CACHE MANAGEMENT
# ============================================================================


def clear_cldr_cache() -> None:
    """Clear all CLDR display-name caches.

    Call this if you need to free memory. Thread-safe.
    """
    _get_babel_locale.cache_clear()
    _get_display_name_impl.cache_clear()
    _get_currency_names_impl.cache_clear()
