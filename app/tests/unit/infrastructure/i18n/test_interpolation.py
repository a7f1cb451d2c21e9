"""Tests for infrastructure.i18n.interpolation module."""

from enum import Enum

import pytest

from infrastructure.i18n.interpolation import interpolate, render_value


class Kind(Enum):
    MIN = "min"


@pytest.mark.unit
class TestInterpolate:
    """Tests for %{name} placeholder substitution."""

    def test_integer_binding(self):
        """Integers render as decimal."""
        assert (
            interpolate("should be at least %{count} character(s)", {"count": 2})
            == "should be at least 2 character(s)"
        )

    def test_string_binding(self):
        """Strings render verbatim."""
        assert interpolate("is %{state}", {"state": "closed"}) == "is closed"

    def test_enum_binding_renders_value(self):
        """Enum members render as their value."""
        assert interpolate("kind %{kind}", {"kind": Kind.MIN}) == "kind min"

    def test_multiple_placeholders(self):
        """Every placeholder occurrence is substituted."""
        result = interpolate(
            "between %{min} and %{max}, not %{min}", {"min": 1, "max": 9}
        )
        assert result == "between 1 and 9, not 1"

    def test_missing_binding_left_literal(self):
        """Placeholders without a binding stay as literal text."""
        assert (
            interpolate("must be greater than %{number}", {"count": 1})
            == "must be greater than %{number}"
        )

    def test_empty_bindings(self):
        """No bindings leaves the template unchanged."""
        assert interpolate("can't be blank %{x}", {}) == "can't be blank %{x}"

    def test_extra_bindings_ignored(self):
        """Bindings without a placeholder are ignored."""
        assert (
            interpolate("can't be blank", {"validation": "required"})
            == "can't be blank"
        )

    def test_other_brace_syntaxes_untouched(self):
        """Only %{name} is a placeholder."""
        assert interpolate("{count} {{count}}", {"count": 3}) == "{count} {{count}}"

    def test_render_value_zero(self):
        """Zero is rendered, not dropped."""
        assert render_value(0) == "0"
