"""Locale models for the i18n engine.

Defines the locale identifier, text direction, and the value types accepted
as translation parameters.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

# Languages written right-to-left, keyed by primary subtag.
RTL_LANGUAGES = frozenset(
    {"ar", "ckb", "dv", "fa", "he", "ku", "ps", "sd", "ug", "ur", "yi"}
)

DEFAULT_LOCALE_CODE = "en"

# Parameters may be any value; these are the ones with a defined rendering.
ParameterValue = Union[str, int, float, bool, None, Any]


class TextDirection(str, Enum):
    """Layout direction of a script."""

    LTR = "ltr"
    RTL = "rtl"


@dataclass(frozen=True)
class Locale:
    """Locale identifier made of a language subtag and an optional region.

    Frozen so that equality is value based and locales can be used as
    dictionary keys. A locale is replaced wholesale on change, never mutated.

    Attributes:
        language_code: Primary subtag (e.g., "en", "ar").
        country_code: Optional region subtag (e.g., "US").
    """

    language_code: str
    country_code: Optional[str] = None

    def __str__(self) -> str:
        """Return the BCP 47 style tag.

        Returns:
            "en" or "en-US".
        """
        if self.country_code:
            return f"{self.language_code}-{self.country_code}"
        return self.language_code

    @classmethod
    def parse(cls, locale_str: str) -> "Locale":
        """Build a Locale from "en", "en-US" or "en_US".

        The language is lower-cased and the region upper-cased. No validation
        is performed here, see LocaleValidator for that.

        Args:
            locale_str: Locale string.

        Returns:
            Locale instance.
        """
        parts = locale_str.strip().replace("_", "-").split("-")
        language_code = parts[0].lower()
        if len(parts) > 1 and parts[1]:
            return cls(language_code, parts[1].upper())
        return cls(language_code)

    @classmethod
    def default(cls) -> "Locale":
        """Baseline locale used whenever none is configured."""
        return cls(DEFAULT_LOCALE_CODE)

    @property
    def is_rtl(self) -> bool:
        return self.language_code.lower() in RTL_LANGUAGES

    @property
    def text_direction(self) -> TextDirection:
        return TextDirection.RTL if self.is_rtl else TextDirection.LTR


def to_display_string(value: ParameterValue) -> str:
    """Convert a parameter value to the text shown to the user.

    Args:
        value: Any parameter value.

    Returns:
        "" for None, "true"/"false" for booleans, str(value) otherwise.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
