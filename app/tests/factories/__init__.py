"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog_translator,
    make_translation_catalog,
    make_translation_key,
)
from tests.factories.validation import (
    make_comment_node,
    make_like_node,
    make_post_node,
    make_user_node,
)

__all__ = [
    "make_catalog_translator",
    "make_translation_catalog",
    "make_translation_key",
    "make_comment_node",
    "make_like_node",
    "make_post_node",
    "make_user_node",
]
