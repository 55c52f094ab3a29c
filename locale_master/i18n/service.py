"""LocaleMaster facade for the outermost composition point.

Wires store, translator, loader and locale controller together and exposes
the small API an application needs.
"""

from pathlib import Path
from typing import Callable, List, Mapping, Optional, Union

from locale_master.core.config import settings
from locale_master.core.logging import get_module_logger
from locale_master.i18n.errors import InvalidLocaleError
from locale_master.i18n.factory import create_loader
from locale_master.i18n.loader import TranslationLoader
from locale_master.i18n.models import Locale, ParameterValue
from locale_master.i18n.state import Listener, LocaleController
from locale_master.i18n.store import TranslationStore
from locale_master.i18n.translator import Translator
from locale_master.i18n.validator import LocaleValidator

logger = get_module_logger()

LocaleLike = Union[Locale, str]


def _as_locale(
    value: Optional[LocaleLike], validator: LocaleValidator
) -> Optional[Locale]:
    """Convert a locale or locale string, returning None for invalid strings."""
    if value is None or isinstance(value, Locale):
        return value
    try:
        return validator.parse_locale(value)
    except InvalidLocaleError:
        logger.warning("ignored_invalid_locale", requested=value)
        return None


class LocaleMaster:
    """Class-based facade over the i18n engine.

    Thin wrapper: lookups go to the Translator, locale changes go through
    the LocaleController so subscribers are notified and the translator
    stays in sync.

    Usage:
        master = await LocaleMaster.create(base_path=Path("lang"))
        master.tr("greeting", {"name": "John"})
        master.plural("item_count", 3)
        master.set_locale(Locale("ar"))
    """

    def __init__(
        self,
        translator: Translator,
        controller: LocaleController,
        loader: Optional[TranslationLoader] = None,
        initial_locale: Optional[Locale] = None,
    ):
        self._translator = translator
        self._controller = controller
        self._loader = loader
        self._initial_locale = initial_locale

    @classmethod
    async def create(
        cls,
        base_path: Optional[Path] = None,
        initial_locale: Optional[LocaleLike] = None,
        fallback_locale: Optional[LocaleLike] = None,
        supported_locales: Optional[List[LocaleLike]] = None,
        loader: Optional[TranslationLoader] = None,
    ) -> "LocaleMaster":
        """Build and initialize a LocaleMaster.

        Args:
            base_path: Translation root (default: settings.i18n.base_path).
                Ignored when loader is given.
            initial_locale: Starting locale (default: settings.i18n.default_locale).
            fallback_locale: Fallback locale (default: settings.i18n.fallback_locale).
            supported_locales: Explicit supported locales (default:
                settings.i18n.supported_locales, then discovered locales).
            loader: Pre-built loader; its ``store`` backs the translator.

        Returns:
            Initialized LocaleMaster.
        """
        if loader is not None:
            store = loader.store
        else:
            store = TranslationStore()
            loader = create_loader(store, base_path)

        translator = Translator(
            store=store,
            fields_namespace=settings.i18n.fields_namespace,
            loader=loader,
        )
        await loader.initialize()

        validator = LocaleValidator()
        start_locale = _as_locale(initial_locale, validator) or Locale.parse(
            settings.i18n.default_locale
        )
        fallback = _as_locale(fallback_locale, validator) or Locale.parse(
            settings.i18n.fallback_locale
        )
        configured = supported_locales
        if configured is None and settings.i18n.supported_locales:
            configured = list(settings.i18n.supported_locales)

        controller = LocaleController(
            translator=translator,
            fallback_locale=fallback,
            supported_locales=(
                [
                    locale
                    for locale in (_as_locale(code, validator) for code in configured)
                    if locale is not None
                ]
                if configured is not None
                else None
            ),
            validator=validator,
        )
        controller.set_locale(start_locale)

        logger.info(
            "locale_master_initialized",
            locale=str(start_locale),
            fallback_locale=str(fallback),
            available_locales=translator.get_available_locales(),
        )
        return cls(
            translator=translator,
            controller=controller,
            loader=loader,
            initial_locale=start_locale,
        )

    @property
    def translator(self) -> Translator:
        return self._translator

    @property
    def controller(self) -> LocaleController:
        return self._controller

    @property
    def loader(self) -> Optional[TranslationLoader]:
        return self._loader

    def tr(
        self,
        key: str,
        parameters: Optional[Mapping[str, ParameterValue]] = None,
        namespace: Optional[str] = None,
    ) -> str:
        return self._translator.translate(key, parameters, namespace=namespace)

    def plural(
        self,
        key: str,
        count: int,
        parameters: Optional[Mapping[str, ParameterValue]] = None,
        namespace: Optional[str] = None,
    ) -> str:
        return self._translator.pluralize(key, count, parameters, namespace=namespace)

    def field(self, key: str, namespace: Optional[str] = None) -> str:
        return self._translator.field(key, namespace=namespace)

    def exists(self, key: str, namespace: Optional[str] = None) -> bool:
        return self._translator.exists(key, namespace=namespace)

    def get(self, key: str, namespace: Optional[str] = None) -> Optional[str]:
        return self._translator.get(key, namespace=namespace)

    def set_locale(self, locale: LocaleLike) -> bool:
        """Switch the active locale.

        Invalid locale strings are logged and ignored; the current locale is
        kept and no listener is notified.

        Returns:
            False if locale was an invalid string, True otherwise.
        """
        parsed = self._to_locale(locale)
        if parsed is None:
            return False
        self._controller.set_locale(parsed)
        return True

    @property
    def current_locale(self) -> Locale:
        return self._controller.locale

    @property
    def supported_locales(self) -> List[Locale]:
        return [Locale.parse(code) for code in self._controller.get_supported_locales()]

    def is_locale_supported(self, locale: LocaleLike) -> bool:
        parsed = self._to_locale(locale)
        return parsed is not None and parsed in self.supported_locales

    def reset(self) -> None:
        """Return to the locale the facade started with."""
        if self._initial_locale is not None:
            self.set_locale(self._initial_locale)

    def toggle_locale(self, first: LocaleLike, second: LocaleLike) -> None:
        first_locale = self._to_locale(first)
        second_locale = self._to_locale(second)
        if first_locale is None or second_locale is None:
            return
        self._controller.toggle_locale(first_locale, second_locale)

    def is_current_locale(self, locale: LocaleLike) -> bool:
        parsed = self._to_locale(locale)
        return parsed is not None and self._controller.is_current_locale(parsed)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._controller.subscribe(listener)

    def _to_locale(self, locale: LocaleLike) -> Optional[Locale]:
        return _as_locale(locale, self._controller.validator)

    async def reload(self) -> None:
        """Reload every translation through the loader."""
        if self._loader is None:
            logger.warning("reload_without_loader")
            return
        await self._loader.reload()
