"""Tests for localeforge.i18n.loader module."""

# pylint: disable=protected-access

import pytest

from localeforge.i18n import (
    ModuleManifest,
    TranslationKey,
    TranslationSource,
    YAMLTranslationLoader,
)


def _key(key_string):
    return TranslationKey.from_string(key_string)


@pytest.fixture
def single_module_source(tmp_path, resolver):
    """TranslationSource over one module at tmp_path/mod."""
    (tmp_path / "mod" / "lang").mkdir(parents=True)
    return TranslationSource(
        manifest=ModuleManifest({"mod": tmp_path / "mod"}),
        resolver=resolver,
    )


@pytest.mark.unit
class TestYAMLTranslationLoader:
    """Tests for YAMLTranslationLoader."""

    def test_load_merges_modules_by_priority(self, yaml_loader):
        """Higher priority modules override lower ones."""
        catalog = yaml_loader.load("en_US")

        assert catalog.locale == "en_US"
        assert catalog.get_message(_key("Member.FIRSTNAME")) == "Given name"
        assert catalog.get_message(_key("Member.SURNAME")) == "Surname"
        assert catalog.get_message(_key("Page.TITLE")) == "Page {title}"
        assert catalog.get_message(_key("Cart.ITEMS")) == {
            "one": "One item",
            "other": "{count} items",
        }

    def test_load_sets_loaded_at(self, yaml_loader):
        catalog = yaml_loader.load("en_US")
        assert catalog.loaded_at is not None
        assert "T" in catalog.loaded_at

    def test_load_language_file(self, yaml_loader):
        """de.yml provides the de_DE catalog."""
        catalog = yaml_loader.load("de_DE")
        assert catalog.get_message(_key("Member.FIRSTNAME")) == "Vorname"

    def test_load_theme_translations(self, yaml_loader):
        catalog = yaml_loader.load("fr_FR")
        assert catalog.get_message(_key("Member.FIRSTNAME")) == "Prénom"

    def test_load_missing_locale(self, yaml_loader):
        with pytest.raises(FileNotFoundError):
            yaml_loader.load("ja_JP")

    def test_load_invalid_yaml(self, single_module_source, tmp_path):
        (tmp_path / "mod" / "lang" / "en.yml").write_text("en: [unclosed\n")
        loader = YAMLTranslationLoader(single_module_source, use_cache=False)

        with pytest.raises(ValueError):
            loader.load("en_US")

    def test_load_ignores_non_mapping_files(self, single_module_source, tmp_path):
        (tmp_path / "mod" / "lang" / "en.yml").write_text("- one\n- two\n")
        loader = YAMLTranslationLoader(single_module_source, use_cache=False)

        catalog = loader.load("en_US")

        assert catalog.messages == {}

    def test_load_ignores_non_mapping_namespaces(self, single_module_source, tmp_path):
        (tmp_path / "mod" / "lang" / "en.yml").write_text(
            "Member:\n  FIRSTNAME: First\nBroken: just a string\n"
        )
        loader = YAMLTranslationLoader(single_module_source, use_cache=False)

        catalog = loader.load("en_US")

        assert catalog.get_message(_key("Member.FIRSTNAME")) == "First"
        assert "Broken" not in catalog.messages

    def test_norwegian_header_read_as_boolean_is_stripped(
        self, single_module_source, tmp_path
    ):
        """An unquoted "no:" header parses as False and is still unwrapped."""
        (tmp_path / "mod" / "lang" / "no.yml").write_text(
            "no:\n  Member:\n    FIRSTNAME: Fornavn\n"
        )
        loader = YAMLTranslationLoader(single_module_source, use_cache=False)

        catalog = loader.load("no_NO")

        assert catalog.get_message(_key("Member.FIRSTNAME")) == "Fornavn"
        assert "False" not in catalog.messages

    def test_boolean_namespace_kept_when_not_matching_file(
        self, single_module_source, tmp_path
    ):
        (tmp_path / "mod" / "lang" / "en.yml").write_text(
            "no:\n  Member:\n    FIRSTNAME: Fornavn\n"
        )
        loader = YAMLTranslationLoader(single_module_source, use_cache=False)

        catalog = loader.load("en_US")

        assert catalog.get_message(_key("Member.FIRSTNAME")) is None
        assert "False" in catalog.messages

    def test_header_only_stripped_when_matching_file(
        self, single_module_source, tmp_path
    ):
        """A single namespace that is not the locale header is kept."""
        (tmp_path / "mod" / "lang" / "en.yml").write_text("Member:\n  FIRSTNAME: First\n")
        loader = YAMLTranslationLoader(single_module_source, use_cache=False)

        catalog = loader.load("en_US")

        assert catalog.get_message(_key("Member.FIRSTNAME")) == "First"

    def test_cache_enabled(self, yaml_loader_with_cache):
        """Cached loader returns the same catalog object."""
        first = yaml_loader_with_cache.load("en_US")
        second = yaml_loader_with_cache.load("en_US")
        assert first is second
        assert "en_US" in yaml_loader_with_cache.cache

    def test_cache_disabled(self, yaml_loader):
        first = yaml_loader.load("en_US")
        second = yaml_loader.load("en_US")
        assert first is not second
        assert yaml_loader.cache == {}

    def test_clear_cache(self, yaml_loader_with_cache):
        yaml_loader_with_cache.load("en_US")
        yaml_loader_with_cache.clear_cache()
        assert yaml_loader_with_cache.cache == {}

    def test_load_all(self, yaml_loader):
        catalogs = yaml_loader.load_all()
        assert set(catalogs) == {"en_US", "fr_FR", "de_AT", "de_DE", "ru_RU"}
