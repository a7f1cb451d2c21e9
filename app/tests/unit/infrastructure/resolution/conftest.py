"""Fixtures for infrastructure.resolution tests."""

import pytest

from infrastructure.resolution import Resolution, ResolutionState


@pytest.fixture
def build_resolution():
    """Build a resolved Resolution carrying the given errors and context."""

    def _build(errors, context=None, value=None):
        if not isinstance(errors, list):
            errors = [errors]
        return Resolution(
            value=value,
            errors=errors,
            state=ResolutionState.RESOLVED,
            context=context if context is not None else {},
        )

    return _build
