"""Locale resolution logic for determining the caller's preferred language.

Provides strategies for resolving the appropriate locale from various sources
(resolution context, HTTP headers, defaults).
"""

from typing import Any, Mapping, Optional, Sequence

from infrastructure.logging import get_module_logger

logger = get_module_logger()


def split_locale(locale: str) -> tuple[str, str]:
    """Split a locale tag into (language, region).

    Both ``-`` and ``_`` are accepted as separators, so ``pt_BR`` and
    ``pt-BR`` both give ``("pt", "BR")``.
    """
    normalized = locale.replace("_", "-")
    language, _, region = normalized.partition("-")
    return language, region.split("-")[0] if region else ""


class LanguageNegotiator:
    """Performs language negotiation for multilingual content.

    Implements RFC 4647 style range matching for the common case where
    the caller asks for "pt" but only "pt_BR" is available, or the
    other way round.
    """

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "pt-BR").
            available: Available language tag (e.g., "pt_BR" or "pt").
            strict: If True, requires same language and region. If False,
                allows language-only match.

        Returns:
            True if languages match.
        """
        requested_lang, requested_region = split_locale(requested)
        available_lang, available_region = split_locale(available)

        if requested_lang.lower() != available_lang.lower():
            return False

        if strict:
            return requested_region.lower() == available_region.lower()

        return True

    @staticmethod
    def find_best_match(
        requested: Sequence[str],
        available: Sequence[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find best matching language from available options.

        Args:
            requested: Requested language tags in preference order.
            available: Available language tags.
            default: Default if no match found.

        Returns:
            Best matching language from available, or default if no match.
        """
        for req_lang in requested:
            # Exact match first
            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=True
                ):
                    return avail_lang

            # Language-only match
            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=False
                ):
                    return avail_lang

        return default


class LocaleResolver:
    """Resolves the caller's locale from various context sources.

    Fallback chain:
    1. Explicit ``locale`` in the resolution context
    2. Accept-Language header (if web context)
    3. Default locale
    """

    def __init__(self, default_locale: str = "en"):
        """Initialize locale resolver.

        Args:
            default_locale: Fallback locale when no preference found.
        """
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale)

    def resolve_from_context(self, context: Optional[Mapping[str, Any]]) -> str:
        """Resolve locale from a resolution context mapping.

        Args:
            context: Mapping that may carry a ``locale`` entry.

        Returns:
            The context locale when it is a non-empty string, else the default.
        """
        locale = (context or {}).get("locale")
        if isinstance(locale, str) and locale.strip():
            return locale.strip()
        return self.default_locale

    def resolve_from_header(
        self,
        accept_language: Optional[str],
        supported_locales: Optional[Sequence[str]] = None,
    ) -> str:
        """Resolve locale from HTTP Accept-Language header.

        Parses header and returns first supported locale from preference order.

        Args:
            accept_language: Accept-Language header value.
            supported_locales: Locale tags that can be served. Defaults to
                the default locale only.

        Returns:
            Resolved locale, or default if none match.
        """
        if not accept_language:
            return self.default_locale

        supported = list(supported_locales or [self.default_locale])

        # "pt-BR,pt;q=0.9,en;q=0.8" -> [("pt-BR", 1.0), ("pt", 0.9), ("en", 0.8)]
        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            if not lang_range or lang_range == "*":
                continue
            quality = 1.0

            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0

            preferences.append((lang_range, quality))

        ordered = [
            lang_range
            for lang_range, _ in sorted(preferences, key=lambda x: x[1], reverse=True)
        ]
        match = LanguageNegotiator.find_best_match(ordered, supported)
        if match is not None:
            self.log.debug("resolved_from_header", locale=match)
            return match

        self.log.debug("no_matching_locale_in_header", header=accept_language)
        return self.default_locale
