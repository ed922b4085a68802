"""Exception hierarchy for registry lookups.

Two failure kinds are kept apart so callers can tell "you asked wrong" from
"not in this dataset":

    ISO3166Error (base)
    ├─ InvalidArgumentError (input shape rejected before any scan)
    └─ NotFoundError (well-formed key absent from the held records)

InvalidArgumentError is also a ValueError and NotFoundError is also a
LookupError, so generic handlers keep working.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

__all__ = [
    "ISO3166Error",
    "InvalidArgumentError",
    "LookupContext",
    "NotFoundError",
]


@dataclass(frozen=True, slots=True)
class LookupContext:
    """Structured context for a failed lookup or enumeration.

    Attributes:
        field: Record field involved (alpha2, alpha3, numeric, name, key)
        value: Value supplied by the caller, as received
        expected: Description of the accepted shape (optional)
    """

    field: str
    value: object
    expected: str | None = None


class ISO3166Error(Exception):
    """Base exception for all isocountries errors.

    Attributes:
        context: Structured diagnostic context (optional)
    """

    def __init__(self, message: str, context: LookupContext | None = None) -> None:
        """Initialize ISO3166Error.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
        """
        super().__init__(message)
        self.context = context

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.args[0]!r}, context={self.context!r})"


@final
class InvalidArgumentError(ISO3166Error, ValueError):
    """Input does not meet the shape rules for its field.

    Raised synchronously before any record is scanned. The message names the
    field, the rule that failed and the value received.
    """


@final
class NotFoundError(ISO3166Error, LookupError):
    """Well-formed key has no matching record in the held collection."""
