"""Custom exceptions for the i18n system."""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            translator.translate("Form.GREETING", "Hello %s", ["Ana"])
        except I18nError as e:
            logger.error("translation_error", error=str(e))
    """

    pass


class InvalidInjectionError(I18nError, ValueError):
    """Raised when positional injection values are passed for a message
    that has no positional (%s / %d) placeholders.

    Example:
        >>> translator.translate("Form.GREETING", "Hello {name}", ["Ana"])
        Traceback (most recent call last):
        ...
        InvalidInjectionError: Injection must be an associative array
    """

    pass
