"""Tests for infrastructure.resolution.models module."""

import pytest

from infrastructure.resolution import Resolution, ResolutionState
from tests.factories.validation import make_post_node


@pytest.mark.unit
class TestResolutionState:
    def test_values(self):
        assert ResolutionState.UNRESOLVED.value == "unresolved"
        assert ResolutionState.RESOLVED.value == "resolved"


@pytest.mark.unit
class TestResolution:
    """Tests for Resolution."""

    def test_defaults(self):
        resolution = Resolution()
        assert resolution.value is None
        assert resolution.errors == []
        assert resolution.state == ResolutionState.UNRESOLVED
        assert resolution.context == {}
        assert not resolution.has_errors

    def test_put_result_ok(self):
        resolution = Resolution().put_result(("ok", {"id": 1}))
        assert resolution.value == {"id": 1}
        assert resolution.errors == []
        assert resolution.state == ResolutionState.RESOLVED

    def test_put_result_error(self):
        node = make_post_node()
        resolution = Resolution().put_result(("error", node))
        assert resolution.errors == [node]
        assert resolution.has_errors
        assert resolution.state == ResolutionState.RESOLVED

    def test_put_result_error_list(self):
        resolution = Resolution(errors=["first"])
        resolution.put_result(("error", ["second", "third"]))
        assert resolution.errors == ["first", "second", "third"]

    def test_put_result_unknown_tag(self):
        with pytest.raises(ValueError):
            Resolution().put_result(("maybe", None))
