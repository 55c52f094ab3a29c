"""In-memory translation store.

Holds every translation entry as locale -> namespace -> key -> value. The
store performs no I/O; loaders push data into it with load().
"""

from threading import Lock
from typing import Dict, List, Mapping, Optional

from locale_master.core.logging import get_module_logger

logger = get_module_logger()

GLOBAL_NAMESPACE = ""


class TranslationStore:
    """Cache of raw translation strings.

    Each (locale, namespace) pair owns one mapping, replaced wholesale on
    load(). Writes go through a lock so concurrent loader tasks targeting
    distinct pairs cannot corrupt each other.

    Attributes:
        known_locales: Locales that received at least one load, in first-load order.
    """

    def __init__(self):
        self._entries: Dict[str, Dict[str, Dict[str, str]]] = {}
        self._known_locales: List[str] = []
        self._lock = Lock()

    def load(self, namespace: str, locale: str, entries: Mapping[str, str]) -> None:
        """Replace all entries of a (locale, namespace) pair.

        Args:
            namespace: Namespace name, "" for the global namespace.
            locale: Locale code (e.g., "en").
            entries: Mapping of key to raw message.
        """
        with self._lock:
            self._entries.setdefault(locale, {})[namespace] = dict(entries)
            if locale not in self._known_locales:
                self._known_locales.append(locale)

        logger.debug(
            "namespace_loaded",
            locale=locale,
            namespace=namespace,
            entry_count=len(entries),
        )

    def set_entry(self, locale: str, namespace: str, key: str, value: str) -> None:
        """Write a single entry without touching the rest of its namespace."""
        with self._lock:
            self._entries.setdefault(locale, {}).setdefault(namespace, {})[key] = value

    def lookup(
        self, key: str, locale: str, namespace: str = GLOBAL_NAMESPACE
    ) -> Optional[str]:
        """Exact-match lookup, no fallback.

        Args:
            key: Translation key.
            locale: Locale code.
            namespace: Namespace name.

        Returns:
            Raw message, or None if absent.
        """
        return self._entries.get(locale, {}).get(namespace, {}).get(key)

    def clear(self) -> None:
        """Drop every entry and forget all known locales."""
        with self._lock:
            self._entries.clear()
            self._known_locales.clear()
        logger.info("translation_store_cleared")

    def known_locales(self) -> List[str]:
        return list(self._known_locales)

    def is_locale_cached(self, locale: str) -> bool:
        return locale in self._entries

    def get_locale_translations(
        self, locale: str
    ) -> Optional[Dict[str, Dict[str, str]]]:
        """Get a copy of all namespaces for a locale.

        Args:
            locale: Locale code.

        Returns:
            Dict of namespace -> key -> message, or None if the locale is unknown.
        """
        namespaces = self._entries.get(locale)
        if namespaces is None:
            return None
        return {ns: dict(messages) for ns, messages in namespaces.items()}
