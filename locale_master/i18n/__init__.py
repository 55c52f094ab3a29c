"""i18n engine - translation resolution for GUI applications.

Loads translations keyed by locale and namespace, resolves keys with
namespace and locale fallback, substitutes ``:name`` parameters, selects
plural forms, and notifies subscribers when the locale changes.

Main components:
- models: Locale, TextDirection, ParameterValue
- store: TranslationStore
- replacer: ParameterReplacer
- pluralization: PluralizationResolver
- translator: Translator (lookup/fallback orchestration)
- loader: TranslationLoader and FileTranslationLoader
- state: LocaleController (locale state and change notification)
- service: LocaleMaster facade
- registry: optional default instance and string helpers
"""

from locale_master.i18n.errors import (
    I18nError,
    InvalidLocaleError,
    NotInitializedError,
)
from locale_master.i18n.factory import create_loader, create_translator
from locale_master.i18n.loader import FileTranslationLoader, TranslationLoader
from locale_master.i18n.models import (
    Locale,
    ParameterValue,
    TextDirection,
    to_display_string,
)
from locale_master.i18n.pluralization import PluralizationResolver
from locale_master.i18n.replacer import ParameterReplacer, Replacer
from locale_master.i18n.service import LocaleMaster
from locale_master.i18n.state import LocaleController
from locale_master.i18n.store import GLOBAL_NAMESPACE, TranslationStore
from locale_master.i18n.translator import Translator
from locale_master.i18n.validator import LocaleValidator

__all__ = [
    "Locale",
    "TextDirection",
    "ParameterValue",
    "to_display_string",
    "I18nError",
    "InvalidLocaleError",
    "NotInitializedError",
    "TranslationStore",
    "GLOBAL_NAMESPACE",
    "ParameterReplacer",
    "Replacer",
    "PluralizationResolver",
    "Translator",
    "TranslationLoader",
    "FileTranslationLoader",
    "LocaleValidator",
    "LocaleController",
    "LocaleMaster",
    "create_loader",
    "create_translator",
]
