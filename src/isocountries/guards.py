"""Input shape guards for registry lookups.

Two flavours are provided:

- guard_* functions raise InvalidArgumentError when the input does not have
  the shape required for its field. Registry lookups call these before any
  record is scanned, so a malformed key never reaches the dataset.
- is_*_shaped functions are TypeIs-based predicates returning False instead of
  raising. They accept any object, which makes them safe on untrusted input.

Shape is independent of dataset contents: "ZZ" is a well-formed alpha-2 code
even though no country uses it.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from isocountries.guards import is_alpha2_shaped
    >>> is_alpha2_shaped("us")
    True
    >>> is_alpha2_shaped("U1")
    False
"""

from typing import TypeIs

from isocountries.constants import ALPHA2_LENGTH, ALPHA3_LENGTH, NUMERIC_LENGTH
from isocountries.enums import KeyField
from isocountries.errors import InvalidArgumentError, LookupContext

__all__ = [
    "ascii_casefold",
    "guard_alpha2",
    "guard_alpha3",
    "guard_key_field",
    "guard_name",
    "guard_numeric",
    "is_alpha2_shaped",
    "is_alpha3_shaped",
    "is_numeric_shaped",
]


# str.lower() folds non-ASCII letters too ("Å" -> "å"); matching is ASCII-only.
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def ascii_casefold(value: str) -> str:
    """Lowercase ASCII letters only, leaving every other character as is.

    Lookups compare keys through this function, so "us" matches "US" while
    "åland islands" does not match "Åland Islands".
    """
    return value.translate(_ASCII_LOWER)


def _is_ascii_letters(value: str, length: int) -> bool:
    return len(value) == length and value.isascii() and value.isalpha()


def _is_ascii_digits(value: str, length: int) -> bool:
    return len(value) == length and value.isascii() and value.isdigit()


# ============================================================================
# PREDICATES
# ============================================================================


def is_alpha2_shaped(value: object) -> TypeIs[str]:
    """Type guard: Check if value is two ASCII letters (any case).

    Args:
        value: Object to check

    Returns:
        True if value is a str of exactly 2 ASCII letters
    """
    return isinstance(value, str) and _is_ascii_letters(value, ALPHA2_LENGTH)


def is_alpha3_shaped(value: object) -> TypeIs[str]:
    """Type guard: Check if value is three ASCII letters (any case)."""
    return isinstance(value, str) and _is_ascii_letters(value, ALPHA3_LENGTH)


def is_numeric_shaped(value: object) -> TypeIs[str]:
    """Type guard: Check if value is three ASCII digits.

    Integers are rejected: numeric codes are zero-padded strings ("004"),
    and 4 carries no padding information.
    """
    return isinstance(value, str) and _is_ascii_digits(value, NUMERIC_LENGTH)


# ============================================================================
# RAISING GUARDS
# ============================================================================


def _reject(field: str, value: object, expected: str) -> InvalidArgumentError:
    msg = f"Expected ${field} to be {expected}, got: {value!r}"
    return InvalidArgumentError(msg, LookupContext(field=field, value=value, expected=expected))


def _require_str(field: str, value: object, expected: str) -> str:
    if not isinstance(value, str):
        raise _reject(field, value, expected)
    return value


def guard_name(value: object) -> str:
    """Validate a country name query.

    Raises:
        InvalidArgumentError: If value is not a non-empty string
    """
    expected = "a non-empty string"
    name = _require_str(KeyField.NAME, value, expected)
    if not name:
        raise _reject(KeyField.NAME, value, expected)
    return name


def guard_alpha2(value: object) -> str:
    """Validate an alpha-2 code query.

    Raises:
        InvalidArgumentError: If value is not exactly 2 ASCII letters
    """
    expected = f"a string of {ALPHA2_LENGTH} ASCII letters"
    code = _require_str(KeyField.ALPHA2, value, expected)
    if not _is_ascii_letters(code, ALPHA2_LENGTH):
        raise _reject(KeyField.ALPHA2, value, expected)
    return code


def guard_alpha3(value: object) -> str:
    """Validate an alpha-3 code query.

    Raises:
        InvalidArgumentError: If value is not exactly 3 ASCII letters
    """
    expected = f"a string of {ALPHA3_LENGTH} ASCII letters"
    code = _require_str(KeyField.ALPHA3, value, expected)
    if not _is_ascii_letters(code, ALPHA3_LENGTH):
        raise _reject(KeyField.ALPHA3, value, expected)
    return code


def guard_numeric(value: object) -> str:
    """Validate a numeric code query.

    Raises:
        InvalidArgumentError: If value is not exactly 3 ASCII digits
    """
    expected = f"a string of {NUMERIC_LENGTH} ASCII digits"
    code = _require_str(KeyField.NUMERIC, value, expected)
    if not _is_ascii_digits(code, NUMERIC_LENGTH):
        raise _reject(KeyField.NUMERIC, value, expected)
    return code


def guard_key_field(value: object) -> KeyField:
    """Resolve a key field name to KeyField.

    Accepts KeyField members and their string values ("alpha2", ...).

    Raises:
        InvalidArgumentError: If value is not a recognized key field. The
            message lists every accepted value.
    """
    if isinstance(value, str) and value in KeyField:
        return KeyField(value)
    accepted = ", ".join(KeyField)
    msg = f'Invalid value for key, got "{value}", expected one of: {accepted}'
    raise InvalidArgumentError(
        msg, LookupContext(field="key", value=value, expected=accepted)
    )
