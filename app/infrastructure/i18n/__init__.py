"""i18n system - internationalization and localization framework.

Loads per-locale translation resources at startup, resolves the locale to
serve for each request and renders translated texts for responses.

Main components:
- models: LocaleIdentifier, LoadWarning, RequestLocaleContext
- bundle: TranslationBundle, compiled messages for one locale
- loader: TranslationLoader and YAMLTranslationLoader
- store: LocaleStore, frozen locale -> bundle mapping
- resolvers: LocaleResolver for header-based locale selection
- text_map: TextMapBuilder and TextMap for batch rendering
"""

from infrastructure.i18n.bundle import TranslationBundle
from infrastructure.i18n.errors import (
    BuilderConsumedError,
    DirectoryUnreadableError,
    FormatError,
    InvalidArgumentError,
    InvalidLocaleError,
    LocaleLoadError,
    MessageNotFoundError,
    MissingArgumentError,
    MissingDefaultLocaleError,
    ResourceParseError,
)
from infrastructure.i18n.loader import (
    DEFAULT_RESOURCE_FILENAME,
    LoadResult,
    TranslationLoader,
    YAMLTranslationLoader,
    load_locale_store,
)
from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    LoadWarning,
    LocaleIdentifier,
    RequestLocaleContext,
)
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.store import LocaleStore
from infrastructure.i18n.text_map import TextMap, TextMapBuilder

__all__ = [
    "DEFAULT_LOCALE",
    "DEFAULT_RESOURCE_FILENAME",
    "LocaleIdentifier",
    "LoadWarning",
    "RequestLocaleContext",
    "TranslationBundle",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "LoadResult",
    "load_locale_store",
    "LocaleStore",
    "LocaleResolver",
    "TextMap",
    "TextMapBuilder",
    "LocaleLoadError",
    "DirectoryUnreadableError",
    "MissingDefaultLocaleError",
    "InvalidLocaleError",
    "ResourceParseError",
    "FormatError",
    "MessageNotFoundError",
    "MissingArgumentError",
    "InvalidArgumentError",
    "BuilderConsumedError",
]
