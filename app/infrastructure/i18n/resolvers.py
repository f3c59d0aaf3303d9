"""Locale resolution logic for determining a request's language.

Each fallback level is a separate total function:
- preferred_locale(): header value -> LocaleIdentifier (default if unusable)
- LocaleStore.resolve(): LocaleIdentifier -> loaded LocaleIdentifier
- TranslationBundle.format(): message id -> text (degraded if broken)
"""

from typing import Optional

from infrastructure.i18n.errors import InvalidLocaleError
from infrastructure.i18n.models import LocaleIdentifier, RequestLocaleContext
from infrastructure.i18n.store import LocaleStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LocaleResolver:
    """Resolves the locale to serve from a language preference header.

    The header value is treated as a single language tag. Weighted lists
    ("fr,en;q=0.8") are not negotiated and resolve to the default locale.
    """

    def __init__(self, store: LocaleStore):
        """Initialize locale resolver.

        Args:
            store: Loaded LocaleStore; its default locale is the fallback.
        """
        self.store = store
        self.default_locale = store.default_locale
        self.log = logger.bind(default_locale=str(self.default_locale))

    def preferred_locale(self, header_value: Optional[str]) -> LocaleIdentifier:
        """Parse a header value into a locale, or the default locale.

        Args:
            header_value: Accept-Language header value, or None if absent.

        Returns:
            Parsed LocaleIdentifier, or the default if absent or malformed.
        """
        if not header_value or not header_value.strip():
            return self.default_locale

        try:
            return LocaleIdentifier.parse(header_value)
        except InvalidLocaleError:
            self.log.debug("unparseable_language_header", header=header_value)
            return self.default_locale

    def resolve(self, header_value: Optional[str]) -> RequestLocaleContext:
        """Pick the bundle to serve for a header value.

        Never fails: unknown or malformed preferences resolve to the
        default locale's bundle.

        Args:
            header_value: Accept-Language header value, or None if absent.

        Returns:
            RequestLocaleContext with the chosen locale and shared bundle.
        """
        preferred = self.preferred_locale(header_value)
        locale = self.store.resolve(preferred)
        if locale != preferred:
            self.log.debug("locale_not_available", requested=str(preferred))

        self.log.debug("resolved_from_header", locale=str(locale))
        return RequestLocaleContext(locale=locale, bundle=self.store[locale])
