"""Rendering of error leaves and free-standing messages into strings.

Field names and message bodies are looked up in two separate catalog
domains so nouns and predicates can be localized independently. The
output reads ``"<field> <message>"``, or ``"<prefix>: <field> <message>"``
inside an association.
"""

from typing import Any, Mapping, Optional

from infrastructure.i18n.interpolation import interpolate
from infrastructure.i18n.translator import Translator
from infrastructure.validation.flattener import ErrorLeaf

ERRORS_DOMAIN = "errors"
SCHEMA_FIELDS_DOMAIN = "schema_fields"


def _lookup(translator: Translator, domain: str, key: str, locale: str) -> str:
    translated = translator.translate(domain, key, locale)
    return key if translated is None else translated


def format_message(
    message: str,
    locale: str,
    translator: Translator,
    domain: str = ERRORS_DOMAIN,
) -> str:
    """Translate a free-standing message.

    No interpolation is applied: free-standing messages carry no bindings.

    Args:
        message: Untranslated message, also the catalog key.
        locale: Locale tag to translate to.
        translator: Translator capability.
        domain: Catalog domain (default: "errors").

    Returns:
        The catalog entry, or ``message`` unchanged when there is none.
    """
    return _lookup(translator, domain, message, locale)


def format_leaf(
    prefix: Optional[str],
    field: str,
    template: str,
    bindings: Mapping[str, Any],
    locale: str,
    translator: Translator,
    errors_domain: str = ERRORS_DOMAIN,
    schema_fields_domain: str = SCHEMA_FIELDS_DOMAIN,
) -> str:
    """Render one field error.

    Args:
        prefix: Enclosing association name, or None/"" at the root.
        field: Field name, also the ``schema_fields`` catalog key.
        template: Message template, also the ``errors`` catalog key.
        bindings: Placeholder values for the template.
        locale: Locale tag to translate to.
        translator: Translator capability.

    Returns:
        ``"<field> <message>"`` or ``"<prefix>: <field> <message>"``.

    Example:
        >>> format_leaf(None, "username", "should be at least %{count} character(s)",
        ...             {"count": 2}, "en", IdentityTranslator())
        'username should be at least 2 character(s)'
    """
    localized_template = _lookup(translator, errors_domain, template, locale)
    rendered = interpolate(localized_template, bindings)
    localized_field = _lookup(translator, schema_fields_domain, field, locale)

    if not prefix:
        return f"{localized_field} {rendered}"
    return f"{prefix}: {localized_field} {rendered}"


def format_error_leaf(
    leaf: ErrorLeaf,
    locale: str,
    translator: Translator,
    errors_domain: str = ERRORS_DOMAIN,
    schema_fields_domain: str = SCHEMA_FIELDS_DOMAIN,
) -> str:
    """Render an ErrorLeaf produced by ``flatten``."""
    return format_leaf(
        leaf.prefix,
        leaf.field,
        leaf.template,
        leaf.bindings,
        locale,
        translator,
        errors_domain=errors_domain,
        schema_fields_domain=schema_fields_domain,
    )
