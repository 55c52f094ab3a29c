"""Feature-level fixtures for i18n system tests."""

import json

import pytest
import yaml

from locale_master.i18n import FileTranslationLoader, TranslationStore
from tests.factories.i18n import make_translation_store, make_translator


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create a temporary translation tree.

    Returns a directory structure like:
    - en/en.json          (global namespace)
    - en/fields.json
    - en/validation.yml
    - ar/ar.json
    - ar/fields.json
    """
    en_dir = tmp_path / "en"
    ar_dir = tmp_path / "ar"
    en_dir.mkdir()
    ar_dir.mkdir()

    en_global = {
        "hello": "Hello",
        "greeting": "Hello :name!",
        "item_count": "no items | :count item | :count items",
        "max_items": 10,
    }
    with open(en_dir / "en.json", "w", encoding="utf-8") as f:
        json.dump(en_global, f)

    with open(en_dir / "fields.json", "w", encoding="utf-8") as f:
        json.dump({"email": "Email Address", "password": "Password"}, f)

    with open(en_dir / "validation.yml", "w", encoding="utf-8") as f:
        yaml.dump({"required": "The :attribute field is required."}, f)

    with open(ar_dir / "ar.json", "w", encoding="utf-8") as f:
        json.dump({"hello": "مرحبا", "greeting": "مرحبا :name!"}, f, ensure_ascii=False)

    with open(ar_dir / "fields.json", "w", encoding="utf-8") as f:
        json.dump({"email": "البريد الإلكتروني"}, f, ensure_ascii=False)

    return tmp_path


@pytest.fixture
def store():
    """Empty TranslationStore."""
    return TranslationStore()


@pytest.fixture
def file_loader(temp_translations_dir, store):
    """FileTranslationLoader for the temporary translation tree."""
    return FileTranslationLoader(store=store, base_path=temp_translations_dir)


@pytest.fixture
def sample_store():
    """TranslationStore populated with sample namespaces."""
    return make_translation_store()


@pytest.fixture
def translator(sample_store):
    """Translator over the sample store, current and fallback locale en."""
    return make_translator(store=sample_store)
