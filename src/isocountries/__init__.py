"""isocountries - ISO 3166-1 country lookups over an embedded dataset.

A static reference-data library: a bundled table of every assigned ISO 3166-1
country or territory, with its codes and currencies, behind a small read-only
Registry. Lookups are exact and ASCII case-insensitive; malformed queries and
absent codes raise distinct exceptions.

Public API:
    Registry - Immutable record collection with keyed lookups and iteration
    CountryRecord - Frozen country entry (names, codes, currencies)
    KeyField - Lookup/enumeration key fields (alpha2, alpha3, numeric, name)
    default_records - The bundled dataset as a tuple of CountryRecord

Exceptions:
    ISO3166Error - Base exception class
    InvalidArgumentError - Query failed shape validation
    NotFoundError - Well-formed query matched no record

Submodules:
    isocountries.guards - Shape guards and TypeIs predicates
    isocountries.validation - Opt-in dataset consistency checks
    isocountries.cldr - Localized display names (requires Babel)

Example:
    >>> from isocountries import Registry
    >>> Registry().lookup_by_alpha2("us").name
    'United States of America'
"""

from .dataset import default_records
from .enums import KeyField
from .errors import InvalidArgumentError, ISO3166Error, NotFoundError
from .record import CountryRecord
from .registry import Registry

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("isocountries")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CountryRecord",
    "ISO3166Error",
    "InvalidArgumentError",
    "KeyField",
    "NotFoundError",
    "Registry",
    "__version__",
    "default_records",
]
