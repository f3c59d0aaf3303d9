"""Translation loading interface and implementations.

Loads one resource file per locale from a directory layout of:

    <base_directory>/<locale-tag>/<resource-filename>

Individual bad entries are skipped with a warning. Only an unreadable base
directory or a missing default locale abort the load.
"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from infrastructure.i18n.bundle import TranslationBundle
from infrastructure.i18n.errors import (
    DirectoryUnreadableError,
    InvalidLocaleError,
    MissingDefaultLocaleError,
    ResourceParseError,
)
from infrastructure.i18n.models import DEFAULT_LOCALE, LoadWarning, LocaleIdentifier
from infrastructure.i18n.store import LocaleStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_RESOURCE_FILENAME = "send.yml"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of a successful load.

    Attributes:
        store: The frozen LocaleStore.
        warnings: One entry per skipped directory or resource.
    """

    store: LocaleStore
    warnings: Tuple[LoadWarning, ...] = ()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implements the directory scan and failure tolerance; subclasses define
    how a single resource file is parsed into a bundle.
    """

    def __init__(
        self,
        resource_filename: str = DEFAULT_RESOURCE_FILENAME,
        default_locale: LocaleIdentifier = DEFAULT_LOCALE,
    ):
        """Initialize loader.

        Args:
            resource_filename: File name expected inside each locale directory.
            default_locale: Locale that must be loaded for the load to succeed.
        """
        self.resource_filename = resource_filename
        self.default_locale = default_locale

    @abstractmethod
    def parse(
        self, locale: LocaleIdentifier, content: str, source: Optional[str] = None
    ) -> TranslationBundle:
        """Compile resource content into a bundle for locale.

        Raises:
            ResourceParseError: If content is not a valid resource.
        """
        pass

    def load(self, base_directory: Union[str, Path]) -> LoadResult:
        """Load every locale found under base_directory.

        Entries are processed in sorted name order. If two directory names
        normalize to the same locale, the first one wins.

        Args:
            base_directory: Directory with one subdirectory per locale.

        Returns:
            LoadResult with the frozen store and the collected warnings.

        Raises:
            DirectoryUnreadableError: If base_directory cannot be enumerated.
            MissingDefaultLocaleError: If the default locale failed to load.
        """
        base = Path(base_directory)
        try:
            with os.scandir(base) as iterator:
                entries = sorted(iterator, key=lambda entry: entry.name)
        except OSError as e:
            logger.error("locales_directory_unreadable", path=str(base), error=str(e))
            raise DirectoryUnreadableError(base, str(e)) from e

        bundles: Dict[LocaleIdentifier, TranslationBundle] = {}
        warnings: List[LoadWarning] = []

        for entry in entries:
            entry_path = Path(entry.path)
            try:
                is_dir = entry.is_dir()
            except OSError as e:
                warnings.append(self._warn(entry_path, "unreadable_entry", str(e)))
                continue
            if not is_dir:
                logger.debug("ignored_non_directory_entry", path=str(entry_path))
                continue

            try:
                locale = LocaleIdentifier.parse(entry.name)
            except InvalidLocaleError as e:
                warnings.append(self._warn(entry_path, "invalid_locale_name", str(e)))
                continue

            if locale in bundles:
                warnings.append(
                    self._warn(
                        entry_path,
                        "duplicate_locale",
                        f"locale {locale} already loaded",
                    )
                )
                continue

            resource_path = entry_path / self.resource_filename
            try:
                content = resource_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                warnings.append(self._warn(resource_path, "unreadable_resource", str(e)))
                continue

            try:
                bundle = self.parse(locale, content, source=str(resource_path))
            except ResourceParseError as e:
                warnings.append(self._warn(resource_path, "invalid_resource", str(e)))
                continue

            bundles[locale] = bundle
            logger.info(
                "locale_loaded",
                locale=str(locale),
                message_count=len(bundle),
                path=str(resource_path),
            )

        try:
            store = LocaleStore(bundles, default_locale=self.default_locale)
        except MissingDefaultLocaleError:
            logger.error(
                "default_locale_missing",
                default_locale=str(self.default_locale),
                loaded=[str(locale) for locale in sorted(bundles)],
            )
            raise

        logger.info(
            "locales_loaded",
            path=str(base),
            locales=[str(locale) for locale in store],
            warning_count=len(warnings),
        )
        return LoadResult(store=store, warnings=tuple(warnings))

    @staticmethod
    def _warn(path: Path, reason: str, detail: str) -> LoadWarning:
        logger.warning("locale_skipped", path=str(path), reason=reason, detail=detail)
        return LoadWarning(path=path, reason=reason, detail=detail)


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation resources.

    Each locale directory holds one YAML file mapping message ids to
    patterns (see infrastructure.i18n.bundle for the format).
    """

    def parse(
        self, locale: LocaleIdentifier, content: str, source: Optional[str] = None
    ) -> TranslationBundle:
        return TranslationBundle.from_yaml(locale, content, source=source)


def load_locale_store(
    base_directory: Union[str, Path],
    resource_filename: str = DEFAULT_RESOURCE_FILENAME,
    default_locale: LocaleIdentifier = DEFAULT_LOCALE,
) -> LocaleStore:
    """Load YAML resources from base_directory and return the store.

    Warnings are logged by the loader and otherwise discarded.

    Raises:
        LocaleLoadError: On an unreadable directory or missing default locale.
    """
    loader = YAMLTranslationLoader(
        resource_filename=resource_filename,
        default_locale=default_locale,
    )
    return loader.load(base_directory).store
