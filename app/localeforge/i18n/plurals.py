"""Plural message templates.

A plural template is a "|"-delimited string with a "{count}" placeholder,
e.g. "one apple|{count} apples". The codec converts such strings to and from
mappings of CLDR plural category to text. Plural category selection for a
count uses Babel's CLDR plural rules.
"""

from functools import lru_cache
from typing import Collection, Dict, Mapping, Optional, Sequence, Union

from babel.core import Locale as BabelLocale
from babel.core import UnknownLocaleError

from localeforge.i18n.models import PluralForm
from localeforge.i18n.tables import LocaleTable
from localeforge.logging import get_module_logger

logger = get_module_logger()

COUNT_PLACEHOLDER = "{count}"
DELIMITER = "|"

Number = Union[int, float]


class PluralCodec:
    """Converts between pipe-delimited templates and plural form mappings.

    Parsing only knows the default locale's plural scheme ("one|other"):
    the segments of a template are matched positionally against the default
    plural forms. Locales with more plural forms author their messages as
    mappings instead. Encoding supports every canonical plural form.

    Attributes:
        plural_forms: Canonical plural form order.
        default_plural_forms: Plural forms of the default locale.
    """

    def __init__(
        self,
        plural_forms: Sequence[str] = tuple(form.value for form in PluralForm),
        default_plural_forms: Sequence[str] = (
            PluralForm.ONE.value,
            PluralForm.OTHER.value,
        ),
    ):
        self.plural_forms = tuple(plural_forms)
        self.default_plural_forms = tuple(default_plural_forms)

    @classmethod
    def from_table(cls, table: LocaleTable) -> "PluralCodec":
        """Create a codec using the plural forms of a locale table."""
        return cls(
            plural_forms=table.plural_forms,
            default_plural_forms=table.default_plural_forms,
        )

    def parse(self, template: Optional[str]) -> Dict[str, str]:
        """Split a plural template into a plural form mapping.

        Args:
            template: Message template (e.g. "one apple|{count} apples").

        Returns:
            Mapping of plural form to text, or an empty dict if the template
            is not a plural template.
        """
        if not template:
            return {}
        if DELIMITER not in template or COUNT_PLACEHOLDER not in template:
            return {}

        values = template.split(DELIMITER)
        if len(values) != len(self.default_plural_forms):
            logger.debug(
                "plural_segment_mismatch",
                segments=len(values),
                expected=len(self.default_plural_forms),
            )
            return {}
        return dict(zip(self.default_plural_forms, values))

    def encode(self, plurals: Mapping[str, str]) -> Optional[str]:
        """Join a plural form mapping into a pipe-delimited string.

        Unknown keys are dropped and the canonical plural order wins over
        the order of the mapping.

        Args:
            plurals: Mapping of plural form to text.

        Returns:
            Delimited string, or None if no recognized plural forms remain.
        """
        values = [plurals[form] for form in self.plural_forms if form in plurals]
        if not values:
            return None
        return DELIMITER.join(values)


@lru_cache(maxsize=128)
def _babel_locale(locale: str) -> Optional[BabelLocale]:
    """Babel locale for a locale code, falling back to its language."""
    identifier = locale.replace("-", "_")
    candidates = [identifier]
    language = identifier.split("_", 1)[0]
    if language and language != identifier:
        candidates.append(language)

    for candidate in candidates:
        try:
            return BabelLocale.parse(candidate)
        except (UnknownLocaleError, ValueError):
            continue
    return None


def select_plural_form(
    count: Number,
    locale: str,
    available: Optional[Collection[str]] = None,
) -> str:
    """Select the CLDR plural category of a count in a locale.

    Args:
        count: Number being counted.
        locale: Locale code (e.g. "ru_RU").
        available: Optional plural forms the message provides. If the
            selected category is not among them, "other" is used.

    Returns:
        Plural category ("zero", "one", "two", "few", "many" or "other").
    """
    babel_locale = _babel_locale(locale)
    if babel_locale is None:
        logger.debug("unknown_plural_locale", locale=locale)
        form = PluralForm.ONE.value if abs(count) == 1 else PluralForm.OTHER.value
    else:
        form = babel_locale.plural_form(count)

    if available is not None and form not in available:
        return PluralForm.OTHER.value
    return form
