"""Translation service resolving one message per call.

The Translator decides how a message is rendered: whether the call is a
plural lookup, whether legacy positional ("%s", "%d") formatting applies,
and which backend lookup to dispatch to.
"""

import os
import re
import warnings
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from localeforge.i18n.exceptions import InvalidInjectionError
from localeforge.i18n.models import Injection, NamedArgs, PositionalArgs
from localeforge.i18n.plurals import PluralCodec
from localeforge.i18n.provider import MessageProvider
from localeforge.logging import get_module_logger

logger = get_module_logger()

TOKEN_PATTERN = re.compile(r"\{\w*\}")
LEGACY_PATTERN = re.compile(r"%[sd]")
LEGACY_FORMAT_PATTERN = re.compile(r"%(?:(\d+)\$)?([-+ 0]*)(\d*)(?:\.(\d+))?([%sdf])")

# Warnings are attributed to the first caller outside the package
PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


class Translator:
    """Resolves entity keys to rendered messages.

    Usage:
        translator = Translator(backend=provider)

        translator.translate("Member.GREETING", "Hello {name}", {"name": "Ana"})
        translator.translate("Cart.ITEMS", "one item|{count} items", {"count": 3})

        # Explicit argument variants
        translator.render("Cart.ITEMS", "one item|{count} items", NamedArgs({"count": 3}))

    Attributes:
        backend: MessageProvider performing the lookups.
        codec: PluralCodec used to recognize plural default templates.
        missing_default_warning: Warn when a message has no default.
    """

    def __init__(
        self,
        backend: MessageProvider,
        codec: Optional[PluralCodec] = None,
        missing_default_warning: bool = True,
    ):
        self.backend = backend
        self.codec = codec or PluralCodec()
        self.missing_default_warning = missing_default_warning
        logger.info(
            "initialized_translator",
            backend=type(backend).__name__,
            missing_default_warning=missing_default_warning,
        )

    def translate(self, entity: str, *args: Any) -> str:
        """Translate an entity, classifying loosely typed arguments.

        The first mapping, list or tuple is the injection; the first other
        non-empty argument is the default template. Remaining arguments,
        such as context strings for translators, are ignored. Lists, tuples
        and mappings keyed 0..n-1 are positional (legacy) injections.

        Args:
            entity: Entity key ("Namespace.Entity").
            *args: Default template, injection and context, in any order.

        Returns:
            Rendered message.

        Raises:
            InvalidInjectionError: If positional values are passed for a
                message without positional placeholders.
        """
        default, injection = self.classify_arguments(args)
        return self.render(entity, default, injection)

    @staticmethod
    def classify_arguments(
        args: Iterable[Any],
    ) -> Tuple[Optional[str], Optional[Injection]]:
        """Split loosely typed arguments into default and injection.

        Args:
            args: Arguments following the entity key.

        Returns:
            Tuple of (default template or None, injection or None).
        """
        default = None
        injection = None
        for arg in args:
            if _is_array(arg):
                if injection is None:
                    injection = _as_injection(arg)
            elif default is None and arg:
                default = str(arg)
        return default, injection

    def render(
        self,
        entity: str,
        default: Optional[str] = None,
        injection: Optional[Injection] = None,
    ) -> str:
        """Translate an entity.

        Args:
            entity: Entity key ("Namespace.Entity").
            default: Default template, "|"-delimited with "{count}" for plurals.
            injection: NamedArgs for "{name}" placeholders, or
                PositionalArgs for legacy "%s" / "%d" placeholders. Plain
                mappings, lists and tuples are converted as translate() does.

        Returns:
            Rendered message.

        Raises:
            InvalidInjectionError: If positional values are passed for a
                message without positional placeholders.
            TypeError: If injection is not a mapping or sequence of values.
        """
        if injection is not None:
            if not _is_array(injection):
                raise TypeError(
                    "Injection must be a mapping, list or tuple, not "
                    f"{type(injection).__name__}"
                )
            injection = _as_injection(injection)

        named = dict(injection.values) if isinstance(injection, NamedArgs) else {}
        positional = (
            list(injection.values) if isinstance(injection, PositionalArgs) else []
        )

        if not default and self.missing_default_warning:
            warnings.warn(
                f"Missing default for localisation key {entity}",
                UserWarning,
                skip_file_prefixes=(PACKAGE_DIR,),
            )
            logger.warning("missing_default", key=entity)

        sprintf_args: List[Any] = []
        fail_unless_sprintf = False
        if default and _is_legacy_format(default):
            _legacy_format_notice(entity)
            sprintf_args = list(named.values()) or positional
            named = {}
        elif positional:
            # Resolved only if the translated message turns out to be legacy format
            fail_unless_sprintf = True
            sprintf_args = positional

        is_plural = "count" in named
        if is_plural and default and not self.codec.parse(default):
            is_plural = False

        if is_plural:
            result = self.backend.pluralise(entity, default, named, named["count"])
        else:
            result = self.backend.translate(entity, default, named)

        if not default and _is_legacy_format(result):
            _legacy_format_notice(entity)
            if named:
                sprintf_args = list(named.values())
        elif fail_unless_sprintf:
            logger.error("injection_not_keyed", key=entity)
            raise InvalidInjectionError("Injection must be an associative array")

        if sprintf_args:
            return format_legacy(result, sprintf_args)

        return result


def format_legacy(template: str, args: Sequence[Any]) -> str:
    """Substitute positional "%s", "%d" and "%f" placeholders.

    Placeholders follow printf syntax: an optional argument number
    ("%2$s"), flags ("-", "+", " ", "0"), width and precision ("%05d",
    "%.2f"). "%%" renders a literal percent sign. Placeholders without a
    matching value are left untouched.

    Args:
        template: Message with legacy placeholders.
        args: Values in placeholder order.

    Returns:
        Formatted message.
    """
    position = 0

    def replace(match: "re.Match[str]") -> str:
        nonlocal position
        argnum, flags, width, precision, conversion = match.groups()
        if conversion == "%":
            return "%"

        if argnum:
            index = int(argnum) - 1
        else:
            index = position
            position += 1
        if not 0 <= index < len(args):
            return match.group(0)

        value = args[index]
        if conversion == "d":
            value = _to_int(value)
        elif conversion == "f":
            value = _to_float(value)
        else:
            value = str(value)

        precision = f".{precision}" if precision is not None else ""
        return f"%{flags}{width}{precision}{conversion}" % value

    return LEGACY_FORMAT_PATTERN.sub(replace, template)


def _is_legacy_format(message: str) -> bool:
    return not TOKEN_PATTERN.search(message) and bool(LEGACY_PATTERN.search(message))


def _legacy_format_notice(entity: str) -> None:
    warnings.warn(
        "sprintf style localisation variables are deprecated",
        DeprecationWarning,
        skip_file_prefixes=(PACKAGE_DIR,),
    )
    logger.info("legacy_format_message", key=entity)


def _is_array(arg: Any) -> bool:
    return isinstance(arg, (NamedArgs, PositionalArgs, Mapping, list, tuple))


def _as_injection(arg: Any) -> Injection:
    if isinstance(arg, (NamedArgs, PositionalArgs)):
        return arg
    if isinstance(arg, (list, tuple)):
        return PositionalArgs(arg)
    if arg and list(arg.keys()) == list(range(len(arg))):
        return PositionalArgs(list(arg.values()))
    return NamedArgs(arg)


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        try:
            return int(float(value))
        except (TypeError, ValueError):
            return 0


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0
