"""Custom exceptions for the i18n engine.

Lookups never raise for missing data; these exceptions cover the few
places where a caller must be told something went wrong.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            master = registry.get_default()
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class NotInitializedError(I18nError):
    """Raised when the default LocaleMaster is used before initialization.

    Example:
        >>> registry.get_default()
        Traceback (most recent call last):
        ...
        NotInitializedError: LocaleMaster not initialized. Call initialize() first.
    """

    pass


class InvalidLocaleError(I18nError, ValueError):
    """Raised when a locale string cannot be parsed.

    Example:
        >>> validator.parse_locale("")
        Traceback (most recent call last):
        ...
        InvalidLocaleError: Invalid locale: ''
    """

    pass
