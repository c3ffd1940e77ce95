"""Translation models for the i18n system.

Defines core data structures for managing translations, locales and the
arguments injected into messages.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Union


class PluralForm(str, Enum):
    """CLDR plural categories, in canonical order (fewest to most)."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class TextDirection(str, Enum):
    """Script direction, compatible with the HTML "dir" attribute."""

    LTR = "ltr"
    RTL = "rtl"


@dataclass(frozen=True)
class TranslationKey:
    """Identifies one logical message.

    Keys are written as "Namespace.Entity", where the namespace groups the
    messages of one owning component (e.g. "Member.FIRSTNAME").

    Attributes:
        namespace: Owning component (e.g. "Member").
        entity: Message identifier inside the namespace (e.g. "FIRSTNAME").
    """

    namespace: str
    entity: str

    def __str__(self) -> str:
        """Return full dot-separated key path.

        Returns:
            Full key (e.g., "Member.FIRSTNAME").
        """
        return f"{self.namespace}.{self.entity}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Only the first dot separates namespace from entity, so
        "Form.Field.LABEL" has namespace "Form" and entity "Field.LABEL".

        Args:
            key_string: Dot-separated key (e.g., "Member.FIRSTNAME").

        Returns:
            TranslationKey instance.

        Raises:
            ValueError: If key_string does not contain a dot.
        """
        parts = key_string.split(".", 1)
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise ValueError(
                f"Translation key must be in format 'Namespace.Entity': {key_string}"
            )
        return cls(namespace=parts[0], entity=parts[1])


@dataclass(frozen=True)
class Module:
    """A module or theme that may ship its own translation data.

    Attributes:
        name: Identifier used in priority and theme configuration.
        path: Root directory of the component.
    """

    name: str
    path: Path

    @property
    def lang_dir(self) -> Path:
        """Directory holding the module's translation files."""
        return self.path / "lang"


@dataclass
class TranslationCatalog:
    """Container for translations in a specific locale.

    Stores all translation messages for a single locale, organized by
    namespace. A message is either a plain string or a mapping of plural
    form to text.

    Attributes:
        locale: The locale this catalog is for (e.g. "de_DE").
        messages: Nested dict structure {namespace: {entity: message}}.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    locale: str
    messages: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_message(self, key: TranslationKey) -> Optional[Any]:
        """Retrieve a translation message by key.

        Args:
            key: TranslationKey with namespace and entity.

        Returns:
            Message string or plural mapping, or None if not found.
        """
        return self.get_namespace(key.namespace).get(key.entity)

    def get_namespace(self, namespace: str) -> Dict[str, Any]:
        """Get all messages for a specific namespace.

        Args:
            namespace: Namespace identifier (e.g., "Member").

        Returns:
            Dictionary of all messages in namespace.
        """
        return self.messages.get(namespace, {})

    def merge(self, other: "TranslationCatalog") -> None:
        """Merge another catalog into this one.

        Entries of the other catalog override existing ones.

        Args:
            other: TranslationCatalog to merge.
        """
        for namespace, messages in other.messages.items():
            self.messages.setdefault(namespace, {}).update(messages)


@dataclass(frozen=True)
class NamedArgs:
    """Keyed values substituted into "{name}" placeholders.

    A "count" value switches a message into plural mode.
    """

    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __bool__(self) -> bool:
        return bool(self.values)


@dataclass(frozen=True)
class PositionalArgs:
    """Ordered values substituted into legacy "%s" / "%d" placeholders."""

    values: Sequence[Any] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def __bool__(self) -> bool:
        return bool(self.values)


Injection = Union[NamedArgs, PositionalArgs]
