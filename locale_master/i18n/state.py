"""Locale state with change notification.

LocaleController owns the current and fallback locale, keeps a wired
Translator in sync, and notifies subscribers synchronously after every
change. UI layers adapt the plain subscribe/notify protocol to their own
re-render mechanism.
"""

from typing import Callable, List, Optional

from locale_master.core.logging import get_module_logger
from locale_master.i18n.errors import InvalidLocaleError
from locale_master.i18n.models import DEFAULT_LOCALE_CODE, Locale, TextDirection
from locale_master.i18n.translator import Translator
from locale_master.i18n.validator import LocaleValidator

logger = get_module_logger()

Listener = Callable[[], None]

# Upper bound on coalesced rounds when listeners keep changing the locale.
MAX_NOTIFICATION_ROUNDS = 10


class LocaleController:
    """Tracks the active and fallback locale and notifies listeners.

    Setting a locale equal to the current one is a no-op and does not
    notify. A listener that changes the locale while being notified does not
    trigger a nested notification; the change is announced in one extra
    round once the current round finishes.

    Attributes:
        translator: Optional Translator kept in sync with this controller.
        validator: LocaleValidator used by the string based setters.
    """

    def __init__(
        self,
        translator: Optional[Translator] = None,
        initial_locale: Optional[Locale] = None,
        fallback_locale: Optional[Locale] = None,
        supported_locales: Optional[List[Locale]] = None,
        validator: Optional[LocaleValidator] = None,
    ):
        """Initialize LocaleController.

        Args:
            translator: Translator to synchronise on every change.
            initial_locale: Starting locale (default: en).
            fallback_locale: Fallback locale (default: en).
            supported_locales: Explicit supported locales; when omitted the
                translator's available locales are reported.
            validator: Validator for string input (default: LocaleValidator()).
        """
        self.translator = translator
        self.validator = validator or LocaleValidator()
        self._locale = initial_locale or Locale.default()
        self._fallback_locale = fallback_locale or Locale.default()
        self._supported_locales = (
            list(supported_locales) if supported_locales is not None else None
        )
        self._listeners: List[Listener] = []
        self._notifying = False
        self._pending_notification = False

        if self.translator is not None:
            self.translator.set_locale(self.locale_string)
            self.translator.set_fallback_locale(self.fallback_locale_string)

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def fallback_locale(self) -> Locale:
        return self._fallback_locale

    @property
    def locale_string(self) -> str:
        """Language code handed to the translator (e.g., "en")."""
        return self._locale.language_code

    @property
    def fallback_locale_string(self) -> str:
        return self._fallback_locale.language_code

    @property
    def text_direction(self) -> TextDirection:
        return self._locale.text_direction

    @property
    def is_rtl(self) -> bool:
        return self._locale.is_rtl

    def set_locale(self, locale: Locale) -> None:
        """Change the active locale and notify listeners if it differs.

        Args:
            locale: New locale.
        """
        if locale == self._locale:
            return
        previous = self._locale
        self._locale = locale
        if self.translator is not None:
            self.translator.set_locale(self.locale_string)
        logger.info("locale_changed", previous=str(previous), locale=str(locale))
        self.notify()

    def set_fallback_locale(self, locale: Locale) -> None:
        """Change the fallback locale and notify listeners if it differs.

        Args:
            locale: New fallback locale.
        """
        if locale == self._fallback_locale:
            return
        previous = self._fallback_locale
        self._fallback_locale = locale
        if self.translator is not None:
            self.translator.set_fallback_locale(self.fallback_locale_string)
        logger.info(
            "fallback_locale_changed", previous=str(previous), locale=str(locale)
        )
        self.notify()

    def set_locale_from_string(
        self, language_code: str, country_code: Optional[str] = None
    ) -> bool:
        """Parse and apply a locale string.

        Args:
            language_code: Language code or full tag (e.g., "fr", "pt_BR").
            country_code: Optional region appended to language_code.

        Returns:
            True if the string was valid, False if the previous locale was kept.
        """
        locale = self._parse(language_code, country_code)
        if locale is None:
            return False
        self.set_locale(locale)
        return True

    def set_fallback_locale_from_string(
        self, language_code: str, country_code: Optional[str] = None
    ) -> bool:
        locale = self._parse(language_code, country_code)
        if locale is None:
            return False
        self.set_fallback_locale(locale)
        return True

    def toggle_locale(self, first: Locale, second: Locale) -> None:
        self.set_locale(second if self._locale == first else first)

    def is_current_locale(self, locale: Locale) -> bool:
        return self._locale == locale

    def is_current_language(self, language_code: str) -> bool:
        return self._locale.language_code == language_code

    def get_supported_locales(self) -> List[str]:
        """Get supported locale codes.

        Returns:
            Configured locales if any, else the translator's available
            locales, else ["en"].
        """
        if self._supported_locales is not None:
            return [locale.language_code for locale in self._supported_locales]
        if self.translator is not None:
            return self.translator.get_available_locales()
        return [DEFAULT_LOCALE_CODE]

    # Observer

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a zero-argument change listener.

        Args:
            listener: Called after every locale or fallback change.

        Returns:
            Callable that unsubscribes the listener.
        """
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def notify(self) -> None:
        """Call every listener once; re-entrant calls are coalesced."""
        if self._notifying:
            self._pending_notification = True
            return

        self._notifying = True
        try:
            rounds = 0
            while True:
                rounds += 1
                self._pending_notification = False
                for listener in list(self._listeners):
                    try:
                        listener()
                    except Exception as e:
                        logger.error(
                            "locale_listener_failed",
                            listener=getattr(listener, "__name__", "unknown"),
                            error=str(e),
                        )
                if not self._pending_notification:
                    break
                if rounds >= MAX_NOTIFICATION_ROUNDS:
                    logger.warning("locale_notification_rounds_exceeded", rounds=rounds)
                    break
        finally:
            self._notifying = False

    def _parse(
        self, language_code: str, country_code: Optional[str]
    ) -> Optional[Locale]:
        raw = f"{language_code}-{country_code}" if country_code else language_code
        try:
            return self.validator.parse_locale(raw)
        except InvalidLocaleError:
            logger.warning("kept_previous_locale", requested=raw, locale=str(self._locale))
            return None
