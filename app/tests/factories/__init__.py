"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_locale_table,
    make_translation_catalog,
    make_translation_key,
)

__all__ = [
    "make_locale_table",
    "make_translation_catalog",
    "make_translation_key",
]
