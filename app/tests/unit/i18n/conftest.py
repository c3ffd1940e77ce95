"""Feature-level fixtures for i18n system tests.

Provides a small site with modules and themes shipping YAML translations,
plus the components wired on top of it.
"""

import pytest
import yaml

from localeforge.i18n import (
    CatalogMessageProvider,
    LocaleContext,
    LocaleResolver,
    ModuleManifest,
    TranslationSource,
    YAMLTranslationLoader,
    load_locale_table,
)


def write_yaml(path, data):
    """Write data as YAML, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, allow_unicode=True)


@pytest.fixture
def site_dir(tmp_path):
    """Create a site directory with modules and a theme.

    Returns a directory structure like:
    - app/lang/en.yml, app/lang/de_AT.yml
    - cms/lang/en.yml (no locale header)
    - framework/lang/en.yml, de.yml, ru.yml, README.md
    - themes/simple/lang/fr.yml
    - .git/ (hidden, not a module)
    """
    root = tmp_path / "site"

    write_yaml(
        root / "app" / "lang" / "en.yml",
        {
            "en": {
                "Member": {"FIRSTNAME": "Given name"},
                "Legacy": {"GREETING": "Hello %s"},
            }
        },
    )
    write_yaml(
        root / "app" / "lang" / "de_AT.yml",
        {"de_AT": {"Member": {"FIRSTNAME": "Vorname (AT)"}}},
    )

    write_yaml(
        root / "cms" / "lang" / "en.yml",
        {
            "Member": {"SURNAME": "Last name"},
            "Page": {"TITLE": "Page {title}"},
        },
    )

    write_yaml(
        root / "framework" / "lang" / "en.yml",
        {
            "en": {
                "Member": {"FIRSTNAME": "First Name", "SURNAME": "Surname"},
                "Cart": {"ITEMS": {"one": "One item", "other": "{count} items"}},
            }
        },
    )
    write_yaml(
        root / "framework" / "lang" / "de.yml",
        {
            "de": {
                "Member": {"FIRSTNAME": "Vorname"},
                "Cart": {"ITEMS": {"one": "Ein Artikel", "other": "{count} Artikel"}},
            }
        },
    )
    write_yaml(
        root / "framework" / "lang" / "ru.yml",
        {
            "ru": {
                "Cart": {
                    "ITEMS": {
                        "one": "{count} товар",
                        "few": "{count} товара",
                        "many": "{count} товаров",
                        "other": "{count} товара",
                    }
                }
            }
        },
    )
    (root / "framework" / "lang" / "README.md").write_text("Translations\n")

    write_yaml(
        root / "themes" / "simple" / "lang" / "fr.yml",
        {"fr": {"Member": {"FIRSTNAME": "Prénom"}}},
    )

    (root / ".git").mkdir()

    return root


@pytest.fixture
def locale_table():
    """Bundled locale reference data."""
    return load_locale_table()


@pytest.fixture
def resolver(locale_table):
    """LocaleResolver over the bundled locale table."""
    return LocaleResolver(locale_table)


@pytest.fixture
def manifest(site_dir):
    """Modules of the test site."""
    return ModuleManifest.from_directory(site_dir, exclude=("themes",))


@pytest.fixture
def translation_source(site_dir, manifest, resolver):
    """TranslationSource over the test site, with the "simple" theme."""
    return TranslationSource(
        manifest=manifest,
        resolver=resolver,
        project_module="app",
        themes=["simple", "$default"],
        themes_dir=site_dir / "themes",
    )


@pytest.fixture
def yaml_loader(translation_source):
    """Create YAMLTranslationLoader without caching."""
    return YAMLTranslationLoader(translation_source, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(translation_source):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(translation_source, use_cache=True)


@pytest.fixture
def locale_context():
    """LocaleContext defaulting to en_US."""
    return LocaleContext(default_locale="en_US")


@pytest.fixture
def provider(yaml_loader_with_cache, locale_context):
    """CatalogMessageProvider over the test site."""
    return CatalogMessageProvider(yaml_loader_with_cache, locale_context)
