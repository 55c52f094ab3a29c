"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_locale,
    make_locale_controller,
    make_translation_data,
    make_translation_store,
    make_translator,
)

__all__ = [
    "make_locale",
    "make_locale_controller",
    "make_translation_data",
    "make_translation_store",
    "make_translator",
]
