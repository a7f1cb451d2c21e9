"""TranslateErrors middleware.

Turns the raw errors of a resolution into a sorted list of human-readable,
optionally localized strings. Free-standing messages are translated as-is;
validation trees are flattened and every field error is rendered.
"""

import dataclasses
from typing import Any, List, Optional

from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.translator import IdentityTranslator, Translator
from infrastructure.logging import get_module_logger
from infrastructure.resolution.models import Resolution
from infrastructure.validation.exceptions import MalformedValidationTreeError
from infrastructure.validation.flattener import flatten
from infrastructure.validation.formatter import (
    ERRORS_DOMAIN,
    SCHEMA_FIELDS_DOMAIN,
    format_error_leaf,
    format_message,
)
from infrastructure.validation.models import Message, RawError, Tree, ValidationNode

logger = get_module_logger()


def to_raw_error(entry: Any) -> RawError:
    """Tag a resolution error entry as Message or Tree.

    Plain strings become Message, ValidationNode becomes Tree; Message and
    Tree pass through.

    Raises:
        MalformedValidationTreeError: For any other entry type.
    """
    match entry:
        case Message() | Tree():
            return entry
        case str():
            return Message(entry)
        case ValidationNode():
            return Tree(entry)
        case _:
            raise MalformedValidationTreeError(
                f"Error entry must be a message or a validation tree, "
                f"got {type(entry).__name__}"
            )


class TranslateErrors:
    """Middleware that renders resolution errors into sorted strings.

    The translator comes from ``context["translator"]`` when present,
    otherwise from the middleware, otherwise IdentityTranslator. The locale
    comes from ``context["locale"]``, otherwise the default locale.

    Only ``errors`` is replaced; ``value``, ``state`` and ``context`` are
    carried over as-is.

    Usage:
        middleware = TranslateErrors(translator=create_translator())
        resolution = middleware.call(resolution)
    """

    def __init__(
        self,
        translator: Optional[Translator] = None,
        default_locale: Optional[str] = None,
        errors_domain: Optional[str] = None,
        schema_fields_domain: Optional[str] = None,
    ):
        """Initialize the middleware.

        Args:
            translator: Default translator capability (default: identity).
            default_locale: Locale used when the context has none (default: "en").
            errors_domain: Catalog domain for message bodies.
            schema_fields_domain: Catalog domain for field names.
        """
        self.translator: Translator = translator or IdentityTranslator()
        self.locale_resolver = LocaleResolver(default_locale=default_locale or "en")
        self.errors_domain = errors_domain or ERRORS_DOMAIN
        self.schema_fields_domain = schema_fields_domain or SCHEMA_FIELDS_DOMAIN

    @property
    def default_locale(self) -> str:
        return self.locale_resolver.default_locale

    def call(self, resolution: Resolution) -> Resolution:
        """Render ``resolution.errors``; pass through when there are none."""
        if not resolution.errors:
            return resolution

        context = resolution.context or {}
        locale = self.locale_resolver.resolve_from_context(context)
        translator = context.get("translator") or self.translator

        messages = self.render_errors(resolution.errors, locale, translator)

        logger.debug(
            "translated_resolution_errors",
            locale=locale,
            entry_count=len(resolution.errors),
            message_count=len(messages),
        )
        return dataclasses.replace(resolution, errors=messages)

    process = call

    def render_errors(
        self, entries: List[Any], locale: str, translator: Translator
    ) -> List[str]:
        """Render every error entry and sort the result.

        Sorting is by code point and stable, so equal strings keep their
        input order.
        """
        messages: List[str] = []
        for entry in entries:
            match to_raw_error(entry):
                case Message(text=text):
                    messages.append(
                        format_message(
                            text, locale, translator, domain=self.errors_domain
                        )
                    )
                case Tree(node=node):
                    messages.extend(
                        format_error_leaf(
                            leaf,
                            locale,
                            translator,
                            errors_domain=self.errors_domain,
                            schema_fields_domain=self.schema_fields_domain,
                        )
                        for leaf in flatten(node)
                    )
        return sorted(messages)
