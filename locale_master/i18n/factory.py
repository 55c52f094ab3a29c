"""Factory functions for creating i18n components.

Provides convenience functions for building translators with defaults taken
from settings.
"""

from pathlib import Path
from typing import Optional

from locale_master.core.config import settings
from locale_master.core.logging import get_module_logger
from locale_master.i18n.loader import FileTranslationLoader
from locale_master.i18n.store import TranslationStore
from locale_master.i18n.translator import Translator

logger = get_module_logger()


def create_loader(
    store: TranslationStore,
    base_path: Optional[Path] = None,
) -> FileTranslationLoader:
    """Create a file loader bound to store.

    Args:
        store: Store that receives loaded namespaces.
        base_path: Translation root (default: settings.i18n.base_path).

    Returns:
        FileTranslationLoader instance (not yet initialized).
    """
    if base_path is None:
        base_path = Path(settings.i18n.base_path)
    return FileTranslationLoader(store=store, base_path=base_path)


async def create_translator(
    base_path: Optional[Path] = None,
    locale: Optional[str] = None,
    fallback_locale: Optional[str] = None,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator backed by translation files.

    Args:
        base_path: Translation root (default: settings.i18n.base_path)
        locale: Current locale (default: settings.i18n.default_locale)
        fallback_locale: Fallback locale (default: settings.i18n.fallback_locale)
        preload: Whether to load all locales immediately (default: True)

    Returns:
        Translator: Configured translator instance

    Usage:
        translator = await create_translator(base_path=Path("lang"))
        translator.translate("hello")

        lazy = await create_translator(preload=False)
        await lazy.load_locale("fr")
    """
    store = TranslationStore()
    loader = create_loader(store, base_path)
    translator = Translator(
        store=store,
        locale=locale or settings.i18n.default_locale,
        fallback_locale=fallback_locale or settings.i18n.fallback_locale,
        fields_namespace=settings.i18n.fields_namespace,
        loader=loader,
    )

    if preload:
        await loader.initialize()
        logger.info(
            "translator_created_with_preload",
            base_path=str(loader.base_path),
            locale_count=len(store.known_locales()),
        )
    else:
        logger.info("translator_created_lazy", base_path=str(loader.base_path))

    return translator
