"""Tests for the isocountries exception hierarchy."""

from __future__ import annotations

import pytest

from isocountries import InvalidArgumentError, ISO3166Error, NotFoundError
from isocountries.errors import LookupContext


class TestHierarchy:
    """Both failure kinds derive from ISO3166Error and a builtin."""

    def test_invalid_argument_is_value_error(self) -> None:
        assert issubclass(InvalidArgumentError, ISO3166Error)
        assert issubclass(InvalidArgumentError, ValueError)

    def test_not_found_is_lookup_error(self) -> None:
        assert issubclass(NotFoundError, ISO3166Error)
        assert issubclass(NotFoundError, LookupError)

    def test_kinds_are_disjoint(self) -> None:
        assert not issubclass(InvalidArgumentError, LookupError)
        assert not issubclass(NotFoundError, ValueError)

    def test_builtin_handlers_catch(self) -> None:
        with pytest.raises(ValueError, match="bad"):
            raise InvalidArgumentError("bad")
        with pytest.raises(LookupError, match="missing"):
            raise NotFoundError("missing")


class TestContext:
    """ISO3166Error carries optional structured context."""

    def test_context_defaults_to_none(self) -> None:
        assert ISO3166Error("oops").context is None

    def test_context_kept(self) -> None:
        context = LookupContext(field="alpha2", value="ZZ")
        error = NotFoundError("missing", context)
        assert error.context is context
        assert context.expected is None

    def test_message_is_str(self) -> None:
        assert str(InvalidArgumentError("Expected $alpha2 ...")) == "Expected $alpha2 ..."

    def test_repr_includes_context(self) -> None:
        error = NotFoundError("missing", LookupContext("numeric", "999"))
        text = repr(error)
        assert text.startswith("NotFoundError('missing', context=LookupContext(")
        assert "'999'" in text

    def test_context_frozen(self) -> None:
        context = LookupContext("name", "")
        with pytest.raises(AttributeError):
            context.field = "alpha2"  # type: ignore[misc]
