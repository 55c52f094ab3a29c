"""Locale string validation and conversion."""

import re

from locale_master.core.logging import get_module_logger
from locale_master.i18n.errors import InvalidLocaleError
from locale_master.i18n.models import Locale

logger = get_module_logger()

_LOCALE_PATTERN = re.compile(r"^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,3})?$")


class LocaleValidator:
    """Validates, parses and formats locale strings.

    Accepted forms: "en", "en-US", "en_US". The language subtag must be two
    or three letters.
    """

    def is_valid_locale(self, locale_str: str) -> bool:
        if not isinstance(locale_str, str):
            return False
        return bool(_LOCALE_PATTERN.match(locale_str.strip()))

    def parse_locale(self, locale_str: str) -> Locale:
        """Convert a locale string to a Locale.

        Args:
            locale_str: Locale string (e.g., "en", "pt_BR").

        Returns:
            Parsed Locale.

        Raises:
            InvalidLocaleError: If the string is not a valid locale.
        """
        if not self.is_valid_locale(locale_str):
            logger.warning("invalid_locale_string", locale_str=locale_str)
            raise InvalidLocaleError(f"Invalid locale: {locale_str!r}")
        return Locale.parse(locale_str)

    def format_locale(self, locale: Locale) -> str:
        return str(locale)
