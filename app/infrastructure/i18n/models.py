"""Translation models for i18n system.

Defines core data structures for managing message catalogs.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TranslationKey:
    """Identifies one message inside a catalog.

    Catalogs are partitioned into domains so that field names and message
    bodies can be localized independently (e.g. "schema_fields" and
    "errors"). The message id is the untranslated source text itself.
    Frozen to ensure immutability and hashability for caching.

    Attributes:
        domain: Catalog partition (e.g., "errors", "schema_fields").
        msgid: Untranslated message text (e.g., "can't be blank").
    """

    domain: str
    msgid: str

    def __str__(self) -> str:
        """Return the key in ``domain:msgid`` form.

        Returns:
            Full key (e.g., "errors:can't be blank").
        """
        return f"{self.domain}:{self.msgid}"


@dataclass
class TranslationCatalog:
    """Container for translations in a specific locale.

    Stores all translation messages for a single locale, organized by domain.
    Message templates use the ``%{name}`` placeholder syntax.

    Attributes:
        locale: Locale tag this catalog is for (e.g., "pt_BR").
        messages: Nested dict structure {domain: {msgid: msgstr}}.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    locale: str
    messages: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Retrieve a translation message by key.

        Args:
            key: TranslationKey with domain and msgid.

        Returns:
            Translated message string, or None if not found.
        """
        message = self.get_domain(key.domain).get(key.msgid)
        if message is None:
            return None
        return str(message)

    def set_message(self, key: TranslationKey, message: str) -> None:
        """Set a translation message.

        Args:
            key: TranslationKey with domain and msgid.
            message: Translated message string.
        """
        if key.domain not in self.messages:
            self.messages[key.domain] = {}
        self.messages[key.domain][key.msgid] = message

    def has_message(self, key: TranslationKey) -> bool:
        """Check if translation exists for given key.

        Args:
            key: TranslationKey to check.

        Returns:
            True if message exists, False otherwise.
        """
        return key.msgid in self.get_domain(key.domain)

    def get_domain(self, domain: str) -> Dict[str, Any]:
        """Get all messages for a specific domain.

        Args:
            domain: Domain identifier (e.g., "errors").

        Returns:
            Dictionary of all messages in domain.
        """
        return self.messages.get(domain, {})

    def merge(self, other: "TranslationCatalog") -> None:
        """Merge another catalog into this one.

        Later entries override earlier ones.

        Args:
            other: TranslationCatalog to merge.
        """
        for domain, messages in other.messages.items():
            if domain not in self.messages:
                self.messages[domain] = {}
            self.messages[domain].update(messages)
