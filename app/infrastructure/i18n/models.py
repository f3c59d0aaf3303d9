"""Core data structures for the i18n system.

Defines locale identifiers, loader warnings and the per-request locale
context attached by the locale middleware.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Tuple

from infrastructure.i18n.errors import InvalidLocaleError

if TYPE_CHECKING:
    from infrastructure.i18n.bundle import TranslationBundle


_LOCALE_PATTERN = re.compile(
    r"""
    ^(?P<language>[a-z]{2,3}|[a-z]{5,8})
    (?:[-_](?P<script>[a-z]{4}))?
    (?:[-_](?P<region>[a-z]{2}|[0-9]{3}))?
    (?P<variants>(?:[-_](?:[a-z0-9]{5,8}|[0-9][a-z0-9]{3}))*)$
    """,
    re.IGNORECASE | re.VERBOSE,
)


@dataclass(frozen=True, order=True)
class LocaleIdentifier:
    """Normalized language tag (IETF BCP 47 subset, e.g. "en-US").

    Frozen and ordered so identifiers can be used as mapping keys and
    iterated deterministically.

    Attributes:
        language: Lowercase language subtag (e.g. "en").
        script: Titlecase script subtag (e.g. "Hant"), or "".
        region: Uppercase region subtag (e.g. "US", "419"), or "".
        variants: Lowercase variant subtags.
    """

    language: str
    script: str = ""
    region: str = ""
    variants: Tuple[str, ...] = field(default=())

    @classmethod
    def parse(cls, value: str) -> "LocaleIdentifier":
        """Parse and normalize a language tag.

        Args:
            value: Tag such as "en-US", "en_us" or "zh-hant-TW".

        Returns:
            Normalized LocaleIdentifier.

        Raises:
            InvalidLocaleError: If value is not a well-formed tag.
        """
        if not isinstance(value, str):
            raise InvalidLocaleError(repr(value))

        match = _LOCALE_PATTERN.match(value.strip())
        if match is None:
            raise InvalidLocaleError(value)

        variants = tuple(
            part.lower() for part in re.split(r"[-_]", match["variants"]) if part
        )
        return cls(
            language=match["language"].lower(),
            script=(match["script"] or "").title(),
            region=(match["region"] or "").upper(),
            variants=variants,
        )

    def __str__(self) -> str:
        parts = [self.language, self.script, self.region, *self.variants]
        return "-".join(part for part in parts if part)


DEFAULT_LOCALE = LocaleIdentifier.parse("en-US")


@dataclass(frozen=True)
class LoadWarning:
    """A locale directory entry skipped while loading.

    Attributes:
        path: Directory or file that was skipped.
        reason: Machine-readable reason (e.g. "invalid_locale_name").
        detail: Human-readable description of the problem.
    """

    path: Path
    reason: str
    detail: str = ""


@dataclass(frozen=True)
class RequestLocaleContext:
    """Locale chosen for a single request.

    Holds the shared bundle by reference; created by the locale middleware
    and discarded with the request.
    """

    locale: LocaleIdentifier
    bundle: "TranslationBundle"

    @property
    def lang(self) -> str:
        """Canonical tag string, for embedding in rendered pages."""
        return str(self.locale)
