"""Translation loading interface and file based implementation.

Loaders read raw translation sources and push them into a TranslationStore,
one (locale, namespace) pair at a time.
"""

import asyncio
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from locale_master.core.logging import get_module_logger
from locale_master.i18n.models import to_display_string
from locale_master.i18n.store import GLOBAL_NAMESPACE, TranslationStore

logger = get_module_logger()

DEFAULT_NAMESPACE_FILE = "messages.json"


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations discover translation sources and call
    ``TranslationStore.load`` for every (locale, namespace) they read.
    Failures must be logged and swallowed: a missing file only means
    missing translations.

    Attributes:
        store: TranslationStore the loader writes into.
    """

    store: TranslationStore

    @abstractmethod
    async def initialize(self) -> None:
        """Discover sources and load every available locale."""
        pass

    @abstractmethod
    async def load_locale(self, locale: str) -> None:
        """Load all namespaces of a single locale.

        Args:
            locale: Locale code (e.g., "en").
        """
        pass

    @abstractmethod
    async def reload(self) -> None:
        """Drop loaded data and load everything again."""
        pass


class FileTranslationLoader(TranslationLoader):
    """Loader for ``<base_path>/<locale>/<namespace>.json`` trees.

    YAML files (``.yml``/``.yaml``) are read the same way. Each file holds a
    flat mapping of key to message. The file named after its own locale
    (``en/en.json``) feeds the global namespace.

    Attributes:
        store: TranslationStore receiving the entries.
        base_path: Root directory of the translation tree.
        locale_files: Discovered files per locale.
    """

    SUPPORTED_SUFFIXES = (".json", ".yml", ".yaml")

    def __init__(self, store: TranslationStore, base_path: Path):
        """Initialize file translation loader.

        Args:
            store: Store that receives loaded namespaces.
            base_path: Root directory containing one folder per locale.
        """
        self.store = store
        self.base_path = Path(base_path)
        self.locale_files: Dict[str, List[Path]] = {}

    async def initialize(self) -> None:
        """Scan the tree and load all discovered locales concurrently."""
        self.locale_files = await asyncio.to_thread(self._discover)
        logger.info(
            "discovered_translation_files",
            base_path=str(self.base_path),
            locale_count=len(self.locale_files),
            file_count=sum(len(files) for files in self.locale_files.values()),
        )
        await asyncio.gather(
            *(self.load_locale(locale) for locale in self.locale_files)
        )

    async def load_locale(self, locale: str) -> None:
        """Load every namespace file of a locale.

        Does nothing when the locale is already present in the store. Locales
        missing from the last scan have their folder scanned now; when it holds
        no translation files, ``messages.json`` is tried.

        Args:
            locale: Locale code.
        """
        if self.store.is_locale_cached(locale):
            return

        files = self.locale_files.get(locale)
        if not files:
            files = await asyncio.to_thread(
                self._locale_dir_files, self.base_path / locale
            )
            if files:
                self.locale_files[locale] = files
            else:
                files = [self.base_path / locale / DEFAULT_NAMESPACE_FILE]
        await asyncio.gather(*(self._load_file(locale, path) for path in files))
        logger.info("loaded_locale_translations", locale=locale, file_count=len(files))

    async def reload(self) -> None:
        self.store.clear()
        self.locale_files = {}
        await self.initialize()
        logger.info("reloaded_all_translations")

    def _discover(self) -> Dict[str, List[Path]]:
        if not self.base_path.is_dir():
            logger.warning(
                "translations_directory_not_found", base_path=str(self.base_path)
            )
            return {}

        found: Dict[str, List[Path]] = {}
        for locale_dir in sorted(self.base_path.iterdir()):
            if not locale_dir.is_dir():
                continue
            files = self._locale_dir_files(locale_dir)
            if files:
                found[locale_dir.name] = files
        return found

    def _locale_dir_files(self, locale_dir: Path) -> List[Path]:
        if not locale_dir.is_dir():
            return []
        return [
            path
            for path in sorted(locale_dir.iterdir())
            if path.is_file() and path.suffix.lower() in self.SUPPORTED_SUFFIXES
        ]

    async def _load_file(self, locale: str, path: Path) -> None:
        try:
            data = await asyncio.to_thread(self._read_file, path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            # json.JSONDecodeError is a ValueError
            logger.warning(
                "translation_file_load_failed",
                locale=locale,
                file=str(path),
                error=str(e),
            )
            return

        if not isinstance(data, dict):
            logger.warning(
                "invalid_translation_file_format", file=str(path), expected="dict"
            )
            return

        namespace = path.stem
        if namespace == locale:
            namespace = GLOBAL_NAMESPACE

        self.store.load(namespace, locale, self._to_entries(data, path))

    @staticmethod
    def _read_file(path: Path) -> Optional[Any]:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    @staticmethod
    def _to_entries(data: Dict[Any, Any], source_file: Path) -> Dict[str, str]:
        entries: Dict[str, str] = {}
        for key, value in data.items():
            if isinstance(value, (dict, list)):
                logger.warning(
                    "skipped_nested_translation_value",
                    file=str(source_file),
                    key=str(key),
                )
                continue
            entries[str(key)] = to_display_string(value)
        return entries
