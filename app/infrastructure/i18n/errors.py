"""Exceptions for the i18n system.

Startup errors (``LocaleLoadError`` and subclasses) are fatal and propagate
to the caller. Formatting errors (``FormatError`` and subclasses) are never
raised by the bundle: they are returned next to the rendered text so a single
broken message cannot fail a whole page.
"""

from pathlib import Path
from typing import Iterable, Optional


class LocaleLoadError(Exception):
    """Base exception for fatal errors while loading translation resources.

    Example:
        try:
            result = loader.load(locales_dir)
        except LocaleLoadError as e:
            logger.error("locale_load_failed", error=str(e))
            raise
    """

    pass


class DirectoryUnreadableError(LocaleLoadError):
    """Raised when the locales base directory cannot be enumerated."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not read locales directory {self.path}: {reason}")


class MissingDefaultLocaleError(LocaleLoadError):
    """Raised when the default locale is absent after loading.

    The application cannot serve requests without a fallback language, so
    this is a configuration error rather than a warning.
    """

    def __init__(self, default_locale, loaded: Iterable = ()):
        self.default_locale = default_locale
        self.loaded = tuple(loaded)
        available = ", ".join(str(locale) for locale in self.loaded) or "none"
        super().__init__(
            f"Default locale {default_locale} was not loaded (available: {available})"
        )


class InvalidLocaleError(ValueError):
    """Raised when a string is not a well-formed language tag."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid locale identifier: {value!r}")


class ResourceParseError(ValueError):
    """Raised when translation resource content cannot be parsed."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{message}")


class FormatError(Exception):
    """Base class for problems found while formatting a single message.

    Attributes:
        message_id: Id of the message being formatted.
    """

    def __init__(self, message_id: str, detail: str):
        self.message_id = message_id
        self.detail = detail
        super().__init__(f"{message_id}: {detail}")


class MessageNotFoundError(FormatError):
    """The requested message id does not exist in the bundle."""

    def __init__(self, message_id: str):
        super().__init__(message_id, "message not found")


class MissingArgumentError(FormatError):
    """A placeholder in the pattern has no matching argument."""

    def __init__(self, message_id: str, argument: str):
        self.argument = argument
        super().__init__(message_id, f"missing argument {argument!r}")


class InvalidArgumentError(FormatError):
    """An argument value has a type that cannot be rendered."""

    def __init__(self, message_id: str, argument: str, value_type: type):
        self.argument = argument
        self.value_type = value_type
        super().__init__(
            message_id,
            f"argument {argument!r} has unsupported type {value_type.__name__}",
        )


class BuilderConsumedError(RuntimeError):
    """Raised when a TextMapBuilder is used after build()."""

    pass
