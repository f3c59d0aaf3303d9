"""Read-only store of translation bundles keyed by locale."""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from infrastructure.i18n.bundle import TranslationBundle
from infrastructure.i18n.errors import MissingDefaultLocaleError
from infrastructure.i18n.models import DEFAULT_LOCALE, LocaleIdentifier


class LocaleStore(Mapping[LocaleIdentifier, TranslationBundle]):
    """Immutable mapping from LocaleIdentifier to shared TranslationBundle.

    Built once at startup and then only read, so it can be shared by all
    concurrent requests without locking. Iteration is in sorted locale order.

    Attributes:
        default_locale: Locale used whenever a preference cannot be served.
    """

    def __init__(
        self,
        bundles: Mapping[LocaleIdentifier, TranslationBundle],
        default_locale: LocaleIdentifier = DEFAULT_LOCALE,
    ):
        """Freeze a mapping of bundles.

        Args:
            bundles: Bundles keyed by locale. Copied on construction.
            default_locale: Fallback locale, which must be present.

        Raises:
            MissingDefaultLocaleError: If default_locale has no bundle.
        """
        if default_locale not in bundles:
            raise MissingDefaultLocaleError(default_locale, loaded=sorted(bundles))

        self.default_locale = default_locale
        self._bundles = MappingProxyType(dict(sorted(bundles.items())))

    def __getitem__(self, locale: LocaleIdentifier) -> TranslationBundle:
        return self._bundles[locale]

    def __iter__(self) -> Iterator[LocaleIdentifier]:
        return iter(self._bundles)

    def __len__(self) -> int:
        return len(self._bundles)

    @property
    def default_bundle(self) -> TranslationBundle:
        return self._bundles[self.default_locale]

    @property
    def locales(self) -> Tuple[LocaleIdentifier, ...]:
        return tuple(self._bundles)

    def resolve(self, locale: Optional[LocaleIdentifier]) -> LocaleIdentifier:
        """Return locale if it is loaded, otherwise the default locale."""
        if locale is not None and locale in self._bundles:
            return locale
        return self.default_locale

    def bundle_for(self, locale: Optional[LocaleIdentifier]) -> TranslationBundle:
        """Return the bundle for locale, falling back to the default bundle."""
        return self._bundles[self.resolve(locale)]

    def __repr__(self) -> str:
        locales = ", ".join(str(locale) for locale in self._bundles)
        return f"LocaleStore(default={self.default_locale}, locales=[{locales}])"
