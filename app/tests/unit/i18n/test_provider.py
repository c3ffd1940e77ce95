"""Tests for localeforge.i18n.provider module."""

# pylint: disable=protected-access

import pytest
import yaml

from localeforge.i18n import (
    CatalogMessageProvider,
    ModuleManifest,
    TranslationSource,
    YAMLTranslationLoader,
)
from localeforge.i18n.provider import _as_number


@pytest.mark.unit
class TestCatalogMessageProviderTranslate:
    """Tests for CatalogMessageProvider.translate()."""

    def test_translate_current_locale(self, provider):
        assert provider.translate("Member.FIRSTNAME", "First name", {}) == "Given name"

    def test_translate_interpolates(self, provider):
        message = provider.translate("Page.TITLE", "Page", {"title": "About us"})
        assert message == "Page About us"

    def test_translate_missing_uses_default(self, provider):
        message = provider.translate("Member.EMAIL", "Hello {name}", {"name": "Ana"})
        assert message == "Hello Ana"

    def test_translate_missing_without_default_returns_entity(self, provider):
        assert provider.translate("Member.EMAIL", None, {}) == "Member.EMAIL"

    def test_translate_invalid_key_uses_default(self, provider):
        assert provider.translate("EMAIL", "Email", {}) == "Email"

    def test_translate_leaves_unknown_placeholders(self, provider):
        message = provider.translate("Member.EMAIL", "Hi {name}, {unknown}", {"name": "Ana"})
        assert message == "Hi Ana, {unknown}"

    def test_translate_regional_locale(self, provider, locale_context):
        locale_context.set_locale("de_AT")
        assert provider.translate("Member.FIRSTNAME", "First name", {}) == "Vorname (AT)"

    def test_translate_falls_back_to_default_locale(self, provider, locale_context):
        """Entities missing in the current locale come from the fallback locale."""
        locale_context.set_locale("de_AT")
        assert provider.translate("Member.SURNAME", "Last name", {}) == "Surname"

    def test_translate_locale_without_files(self, provider, locale_context):
        locale_context.set_locale("ja_JP")
        assert provider.translate("Member.FIRSTNAME", "First name", {}) == "Given name"
        assert "ja_JP" in provider._missing_locales

    def test_translate_plural_message_without_count(self, provider):
        """Plural messages collapse to their "other" form."""
        assert provider.translate("Cart.ITEMS", "Items", {}) == "{count} items"

    def test_translate_plural_message_without_other(self, tmp_path, resolver, locale_context):
        lang_dir = tmp_path / "mod" / "lang"
        lang_dir.mkdir(parents=True)
        with open(lang_dir / "en.yml", "w", encoding="utf-8") as f:
            yaml.dump({"Cart": {"ITEMS": {"one": "One item", "few": "A few"}}}, f)
        source = TranslationSource(
            manifest=ModuleManifest({"mod": tmp_path / "mod"}), resolver=resolver
        )
        provider = CatalogMessageProvider(
            YAMLTranslationLoader(source), locale_context
        )

        assert provider.translate("Cart.ITEMS", None, {}) == "One item|A few"


@pytest.mark.unit
class TestCatalogMessageProviderPluralise:
    """Tests for CatalogMessageProvider.pluralise()."""

    @pytest.mark.parametrize(
        "count, expected",
        [(1, "One item"), (0, "0 items"), (4, "4 items")],
    )
    def test_pluralise_stored_forms(self, provider, count, expected):
        assert provider.pluralise("Cart.ITEMS", None, {}, count) == expected

    @pytest.mark.parametrize(
        "count, expected",
        [(1, "1 товар"), (2, "2 товара"), (5, "5 товаров"), (21, "21 товар")],
    )
    def test_pluralise_locale_rules(self, provider, locale_context, count, expected):
        locale_context.set_locale("ru_RU")
        assert provider.pluralise("Cart.ITEMS", None, {}, count) == expected

    def test_pluralise_other_locale(self, provider, locale_context):
        locale_context.set_locale("de_DE")
        assert provider.pluralise("Cart.ITEMS", None, {}, 1) == "Ein Artikel"
        assert provider.pluralise("Cart.ITEMS", None, {}, 3) == "3 Artikel"

    def test_pluralise_default_template(self, provider):
        default = "one apple|{count} apples"
        assert provider.pluralise("Fruit.APPLES", default, {}, 1) == "one apple"
        assert provider.pluralise("Fruit.APPLES", default, {}, 3) == "3 apples"

    def test_pluralise_default_uses_default_locale_rules(self, provider, locale_context):
        """Default templates are written in the default locale."""
        locale_context.set_locale("ru_RU")
        default = "one apple|{count} apples"
        assert provider.pluralise("Fruit.APPLES", default, {}, 5) == "5 apples"

    def test_pluralise_interpolates_other_values(self, provider):
        default = "{name} has one apple|{name} has {count} apples"
        message = provider.pluralise("Fruit.APPLES", default, {"name": "Ana"}, 2)
        assert message == "Ana has 2 apples"

    def test_pluralise_numeric_string_count(self, provider):
        assert provider.pluralise("Cart.ITEMS", None, {}, "1") == "One item"

    def test_pluralise_non_plural_message(self, provider):
        """Stored messages without plural forms are rendered as-is."""
        message = provider.pluralise("Member.FIRSTNAME", "First name", {}, 2)
        assert message == "Given name"

    def test_pluralise_missing_without_default(self, provider):
        assert provider.pluralise("Fruit.APPLES", None, {}, 2) == "Fruit.APPLES"


@pytest.mark.unit
class TestCatalogMessageProviderReload:
    """Tests for CatalogMessageProvider.reload()."""

    def test_reload_reads_files_again(self, provider, site_dir):
        assert provider.translate("Member.FIRSTNAME", None, {}) == "Given name"

        with open(site_dir / "app" / "lang" / "en.yml", "w", encoding="utf-8") as f:
            yaml.dump({"en": {"Member": {"FIRSTNAME": "Forename"}}}, f)

        assert provider.translate("Member.FIRSTNAME", None, {}) == "Given name"
        provider.reload()
        assert provider.translate("Member.FIRSTNAME", None, {}) == "Forename"

    def test_reload_forgets_missing_locales(self, provider, locale_context):
        locale_context.set_locale("ja_JP")
        provider.translate("Member.FIRSTNAME", None, {})

        provider.reload()

        assert provider._missing_locales == set()


@pytest.mark.unit
class TestAsNumber:
    """Tests for count coercion."""

    @pytest.mark.parametrize(
        "value, expected",
        [(3, 3), (2.5, 2.5), ("3", 3), ("1.0", 1), ("2.5", 2.5), ("abc", 0), (None, 0)],
    )
    def test_as_number(self, value, expected):
        assert _as_number(value) == expected

    def test_integral_string_becomes_int(self):
        assert isinstance(_as_number("1.0"), int)
