"""Tests for locale_master.i18n.validator module."""

import pytest

from locale_master.i18n import InvalidLocaleError, Locale, LocaleValidator


@pytest.fixture
def validator():
    return LocaleValidator()


@pytest.mark.parametrize("value", ["en", "fil", "en-US", "en_US", "es-419"])
def test_valid_locales(validator, value):
    assert validator.is_valid_locale(value)


@pytest.mark.parametrize("value", ["", "e", "english", "en-", "en-US-x", "12", "en US"])
def test_invalid_locales(validator, value):
    assert not validator.is_valid_locale(value)


def test_non_string_is_invalid(validator):
    assert not validator.is_valid_locale(None)


def test_parse_locale(validator):
    assert validator.parse_locale("pt_br") == Locale("pt", "BR")


def test_parse_invalid_raises(validator):
    with pytest.raises(InvalidLocaleError):
        validator.parse_locale("not a locale")


def test_invalid_locale_error_is_value_error(validator):
    with pytest.raises(ValueError):
        validator.parse_locale("")


def test_format_locale(validator):
    assert validator.format_locale(Locale("en", "US")) == "en-US"
    assert validator.format_locale(Locale("ar")) == "ar"
