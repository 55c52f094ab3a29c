"""Translation resolution: lookup with fallbacks, pluralization, substitution.

Core component of the i18n engine. Every operation degrades to a safe value
(the key itself, False or None) instead of raising, so a half-translated
application still renders.
"""

from typing import Any, Dict, List, Mapping, Optional

from locale_master.core.logging import get_module_logger
from locale_master.i18n.loader import TranslationLoader
from locale_master.i18n.models import DEFAULT_LOCALE_CODE, ParameterValue
from locale_master.i18n.pluralization import PluralizationResolver
from locale_master.i18n.replacer import ParameterReplacer, Replacer
from locale_master.i18n.store import GLOBAL_NAMESPACE, TranslationStore

logger = get_module_logger()

FIELDS_NAMESPACE = "fields"


class Translator:
    """Resolves translation keys to display strings.

    Lookup order for a key, stopping at the first hit:
    1. requested namespace in the effective locale
    2. global namespace in the effective locale
    3. requested namespace in the fallback locale
    4. global namespace in the fallback locale
    Steps 3 and 4 are skipped when the effective locale is the fallback.
    translate() and pluralize() return the key itself when nothing matches.

    Attributes:
        store: TranslationStore holding raw messages.
        replacer: ParameterReplacer used for ``:name`` placeholders.
        pluralizer: PluralizationResolver used by pluralize().
        fields_namespace: Namespace used by field() when none is given.
        loader: Optional TranslationLoader used by load_locale().
    """

    def __init__(
        self,
        store: Optional[TranslationStore] = None,
        replacer: Optional[ParameterReplacer] = None,
        pluralizer: Optional[PluralizationResolver] = None,
        locale: str = DEFAULT_LOCALE_CODE,
        fallback_locale: str = DEFAULT_LOCALE_CODE,
        fields_namespace: str = FIELDS_NAMESPACE,
        loader: Optional[TranslationLoader] = None,
    ):
        """Initialize Translator.

        Args:
            store: Store to read from (default: new empty store).
            replacer: Parameter replacer (default: new ParameterReplacer).
            pluralizer: Plural resolver (default: new PluralizationResolver).
            locale: Current locale code (default: en).
            fallback_locale: Locale consulted on misses (default: en).
            fields_namespace: Namespace for field() lookups (default: fields).
            loader: Loader writing into store, needed for lazy loading.
        """
        self.store = store if store is not None else TranslationStore()
        self.replacer = replacer if replacer is not None else ParameterReplacer()
        self.pluralizer = (
            pluralizer if pluralizer is not None else PluralizationResolver()
        )
        self.fields_namespace = fields_namespace
        self.loader = loader
        self._locale = locale
        self._fallback_locale = fallback_locale
        logger.info(
            "initialized_translator",
            locale=locale,
            fallback_locale=fallback_locale,
        )

    # Locale state

    def set_locale(self, locale: str) -> None:
        self._locale = locale

    def get_locale(self) -> str:
        return self._locale

    def set_fallback_locale(self, locale: str) -> None:
        self._fallback_locale = locale

    def get_fallback_locale(self) -> str:
        return self._fallback_locale

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def fallback_locale(self) -> str:
        return self._fallback_locale

    # Lookup

    def get(
        self,
        key: str,
        locale: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> Optional[str]:
        """Retrieve the raw message for a key without substitution.

        Args:
            key: Translation key.
            locale: Locale override (default: current locale).
            namespace: Namespace to search first (default: global).

        Returns:
            Raw message, or None if not found in any tier.
        """
        effective_locale = locale or self._locale
        effective_namespace = namespace or GLOBAL_NAMESPACE

        message = self._lookup_in_locale(key, effective_locale, effective_namespace)
        if message is None and effective_locale != self._fallback_locale:
            message = self._lookup_in_locale(
                key, self._fallback_locale, effective_namespace
            )
            if message is not None:
                logger.debug(
                    "used_fallback_translation",
                    key=key,
                    requested_locale=effective_locale,
                    fallback_locale=self._fallback_locale,
                )
        return message

    def exists(
        self,
        key: str,
        locale: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> bool:
        """Check whether any lookup tier holds the key."""
        return self.get(key, locale=locale, namespace=namespace) is not None

    has = exists

    def translate(
        self,
        key: str,
        parameters: Optional[Mapping[str, ParameterValue]] = None,
        locale: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> str:
        """Resolve a key and substitute parameters.

        Args:
            key: Translation key.
            parameters: Optional ``:name`` substitutions.
            locale: Locale override (default: current locale).
            namespace: Namespace to search first (default: global).

        Returns:
            Translated message, or the key itself when no translation exists.
        """
        message = self._resolve(key, locale, namespace)
        if parameters is not None:
            message = self.replacer.substitute(message, parameters)
        return message

    t = translate

    def pluralize(
        self,
        key: str,
        count: int,
        parameters: Optional[Mapping[str, ParameterValue]] = None,
        locale: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> str:
        """Resolve a key, pick the plural form for count and substitute.

        ``count`` is always available as the ``:count`` placeholder and
        overrides a ``count`` entry in parameters.

        Args:
            key: Translation key.
            count: Quantity deciding the plural form.
            parameters: Optional ``:name`` substitutions.
            locale: Locale override (default: current locale).
            namespace: Namespace to search first (default: global).

        Returns:
            Translated message for count.
        """
        message = self._resolve(key, locale, namespace)
        message = self.pluralizer.resolve(message, count)

        merged: Dict[str, Any] = dict(parameters or {})
        merged["count"] = count
        return self.replacer.substitute(message, merged)

    choice = pluralize

    def field(
        self,
        key: str,
        locale: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> str:
        """Translate a form field label, searching the fields namespace first."""
        return self.translate(
            key,
            locale=locale,
            namespace=namespace if namespace is not None else self.fields_namespace,
        )

    # Store management

    def load_namespace(
        self, namespace: str, locale: str, entries: Mapping[str, str]
    ) -> None:
        self.store.load(namespace, locale, entries)

    async def load_locale(self, locale: str) -> None:
        """Load a locale through the wired loader.

        Args:
            locale: Locale code (e.g., "fr").
        """
        if self.loader is None:
            logger.warning("load_locale_without_loader", locale=locale)
            return
        await self.loader.load_locale(locale)

    def clear_cache(self) -> None:
        self.store.clear()

    def get_available_locales(self) -> List[str]:
        """Get locales present in the store.

        Returns:
            Locale codes in first-load order, or ["en"] when none are loaded.
        """
        locales = self.store.known_locales()
        return locales if locales else [DEFAULT_LOCALE_CODE]

    def add_parameter_replacer(self, replacer: Replacer) -> None:
        self.replacer.add_replacer(replacer)

    def _lookup_in_locale(self, key: str, locale: str, namespace: str) -> Optional[str]:
        message = self.store.lookup(key, locale, namespace)
        if message is None and namespace != GLOBAL_NAMESPACE:
            message = self.store.lookup(key, locale, GLOBAL_NAMESPACE)
        return message

    def _resolve(
        self, key: str, locale: Optional[str], namespace: Optional[str]
    ) -> str:
        message = self.get(key, locale=locale, namespace=namespace)
        if message is None:
            logger.debug(
                "translation_missing",
                key=key,
                locale=locale or self._locale,
                namespace=namespace or GLOBAL_NAMESPACE,
            )
            return key
        return message
