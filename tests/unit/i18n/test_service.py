"""Tests for locale_master.i18n.service and factory modules."""

import pytest
import pytest_asyncio

from locale_master.i18n import (
    FileTranslationLoader,
    Locale,
    LocaleController,
    LocaleMaster,
    TranslationStore,
    Translator,
    create_translator,
)


@pytest_asyncio.fixture
async def master(temp_translations_dir):
    return await LocaleMaster.create(
        base_path=temp_translations_dir,
        initial_locale="en",
        fallback_locale="en",
    )


class TestLocaleMasterCreate:
    """Tests for LocaleMaster.create()."""

    @pytest.mark.asyncio
    async def test_create_loads_translations(self, master):
        assert master.tr("hello") == "Hello"
        assert master.current_locale == Locale("en")

    @pytest.mark.asyncio
    async def test_create_with_initial_locale(self, temp_translations_dir):
        master = await LocaleMaster.create(
            base_path=temp_translations_dir, initial_locale=Locale("ar")
        )
        assert master.tr("hello") == "مرحبا"
        assert master.controller.is_rtl

    @pytest.mark.asyncio
    async def test_create_with_loader(self, temp_translations_dir):
        store = TranslationStore()
        loader = FileTranslationLoader(store=store, base_path=temp_translations_dir)
        master = await LocaleMaster.create(loader=loader)
        assert master.loader is loader
        assert master.translator.store is store
        assert master.tr("hello") == "Hello"

    @pytest.mark.asyncio
    async def test_create_with_missing_directory(self, tmp_path):
        master = await LocaleMaster.create(base_path=tmp_path / "missing")
        assert master.tr("hello") == "hello"
        assert master.supported_locales == [Locale("en")]


class TestLocaleMasterOperations:
    """Tests for facade operations."""

    @pytest.mark.asyncio
    async def test_tr_with_parameters(self, master):
        assert master.tr("greeting", {"name": "John"}) == "Hello John!"

    @pytest.mark.asyncio
    async def test_tr_namespace(self, master):
        assert (
            master.tr("required", {"attribute": "email"}, namespace="validation")
            == "The email field is required."
        )

    @pytest.mark.asyncio
    async def test_plural(self, master):
        assert master.plural("item_count", 0) == "no items"
        assert master.plural("item_count", 1) == "1 item"
        assert master.plural("item_count", 7) == "7 items"

    @pytest.mark.asyncio
    async def test_field(self, master):
        assert master.field("email") == "Email Address"

    @pytest.mark.asyncio
    async def test_exists_and_get(self, master):
        assert master.exists("hello")
        assert not master.exists("nonexistent")
        assert master.get("greeting") == "Hello :name!"
        assert master.get("nonexistent") is None

    @pytest.mark.asyncio
    async def test_set_locale_updates_translations(self, master):
        master.set_locale(Locale("ar"))
        assert master.tr("hello") == "مرحبا"
        assert master.field("email") == "البريد الإلكتروني"
        assert master.field("password") == "Password"

    @pytest.mark.asyncio
    async def test_set_locale_accepts_strings(self, master):
        assert master.set_locale("ar") is True
        assert master.current_locale == Locale("ar")

    @pytest.mark.asyncio
    async def test_set_invalid_locale_string_keeps_current(self, master):
        calls = []
        master.subscribe(lambda: calls.append(1))

        assert master.set_locale("!!bogus") is False

        assert master.current_locale == Locale("en")
        assert master.translator.get_locale() == "en"
        assert calls == []

    @pytest.mark.asyncio
    async def test_invalid_locale_strings_in_queries(self, master):
        assert master.is_locale_supported("!!bogus") is False
        assert master.is_current_locale("!!bogus") is False

    @pytest.mark.asyncio
    async def test_toggle_with_invalid_locale_is_ignored(self, master):
        master.toggle_locale("en", "!!bogus")
        assert master.current_locale == Locale("en")

    @pytest.mark.asyncio
    async def test_create_with_invalid_initial_locale(self, temp_translations_dir):
        master = await LocaleMaster.create(
            base_path=temp_translations_dir,
            initial_locale="!!bogus",
            supported_locales=["en", "??", "ar"],
        )
        assert str(master.current_locale) != "!!bogus"
        assert master.supported_locales == [Locale("en"), Locale("ar")]

    @pytest.mark.asyncio
    async def test_subscribe(self, master):
        calls = []
        master.subscribe(lambda: calls.append(master.current_locale))
        master.set_locale("ar")
        master.set_locale("ar")
        assert calls == [Locale("ar")]

    @pytest.mark.asyncio
    async def test_supported_locales(self, master):
        assert set(master.supported_locales) == {Locale("en"), Locale("ar")}
        assert master.is_locale_supported("ar")
        assert not master.is_locale_supported(Locale("de"))

    @pytest.mark.asyncio
    async def test_configured_supported_locales(self, temp_translations_dir):
        master = await LocaleMaster.create(
            base_path=temp_translations_dir, supported_locales=["en", "fr"]
        )
        assert master.supported_locales == [Locale("en"), Locale("fr")]

    @pytest.mark.asyncio
    async def test_reset(self, master):
        master.set_locale("ar")
        master.reset()
        assert master.current_locale == Locale("en")

    @pytest.mark.asyncio
    async def test_reset_without_initial_locale(self, temp_translations_dir):
        """reset() returns to the configured default when none was given."""
        master = await LocaleMaster.create(base_path=temp_translations_dir)
        started = master.current_locale
        master.set_locale("ar" if started != Locale("ar") else "en")
        master.reset()
        assert master.current_locale == started

    @pytest.mark.asyncio
    async def test_toggle_and_is_current(self, master):
        master.toggle_locale("en", "ar")
        assert master.is_current_locale("ar")
        master.toggle_locale("en", "ar")
        assert master.is_current_locale(Locale("en"))

    @pytest.mark.asyncio
    async def test_reload(self, master, temp_translations_dir):
        (temp_translations_dir / "en" / "en.json").write_text(
            '{"hello": "Hi there"}', encoding="utf-8"
        )
        await master.reload()
        assert master.tr("hello") == "Hi there"

    @pytest.mark.asyncio
    async def test_reload_without_loader(self):
        master = LocaleMaster(
            translator=Translator(),
            controller=LocaleController(),
        )
        await master.reload()
        assert master.loader is None


class TestCreateTranslator:
    """Tests for the create_translator() factory."""

    @pytest.mark.asyncio
    async def test_preload(self, temp_translations_dir):
        translator = await create_translator(base_path=temp_translations_dir)
        assert translator.translate("hello") == "Hello"
        assert sorted(translator.get_available_locales()) == ["ar", "en"]

    @pytest.mark.asyncio
    async def test_lazy_translator_loads_on_demand(self, temp_translations_dir):
        """A lazy translator loads a locale when asked to."""
        translator = await create_translator(
            base_path=temp_translations_dir, preload=False
        )
        assert translator.translate("hello") == "hello"
        assert translator.loader is not None

        await translator.load_locale("en")

        assert translator.translate("hello") == "Hello"
        assert translator.field("email") == "Email Address"
        assert translator.get_available_locales() == ["en"]

    @pytest.mark.asyncio
    async def test_locale_arguments(self, temp_translations_dir):
        translator = await create_translator(
            base_path=temp_translations_dir, locale="ar", fallback_locale="en"
        )
        assert translator.get_locale() == "ar"
        assert translator.translate("hello") == "مرحبا"
