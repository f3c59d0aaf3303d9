"""Batch rendering of the texts a response needs.

Usage:
    texts = (
        TextMapBuilder(bundle)
        .add("page.title")
        .add("greeting", {"name": user.name})
        .build()
    )
    if texts.errors:
        logger.warning("degraded_translations", errors=[str(e) for e in texts.errors])
    context = {**texts.as_context(), "lang": str(texts.locale)}
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from infrastructure.i18n.bundle import TranslationBundle
from infrastructure.i18n.errors import BuilderConsumedError, FormatError
from infrastructure.i18n.models import LocaleIdentifier


@dataclass
class TextMap:
    """Rendered texts for one response.

    Attributes:
        locale: Locale the texts were rendered in.
        texts: Text id -> rendered string, one entry per declared id.
        errors: Formatting problems; empty when every text rendered cleanly.
    """

    locale: LocaleIdentifier
    texts: Dict[str, str] = field(default_factory=dict)
    errors: List[FormatError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def as_context(self) -> Dict[str, str]:
        """Copy of the texts, for merging into a template context."""
        return dict(self.texts)

    def __getitem__(self, text_id: str) -> str:
        return self.texts[text_id]


class TextMapBuilder:
    """Collects text requests and renders them in one pass.

    A builder is single use: after build() it refuses further calls.
    """

    def __init__(self, bundle: TranslationBundle):
        self.bundle = bundle
        self._requests: List[Tuple[str, Dict[str, Any]]] = []
        self._built = False

    def add(
        self, text_id: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> "TextMapBuilder":
        """Declare a text to render. Rendering is deferred to build().

        Adding the same text id twice is allowed; the later request wins.

        Raises:
            BuilderConsumedError: If build() was already called.
        """
        self._check_not_built()
        self._requests.append((text_id, dict(arguments or {})))
        return self

    def build(self) -> TextMap:
        """Render every declared text.

        Formatting problems never abort the build: the degraded text is
        stored and the error is collected in TextMap.errors.

        Raises:
            BuilderConsumedError: If build() was already called.
        """
        self._check_not_built()
        self._built = True

        result = TextMap(locale=self.bundle.locale)
        for text_id, arguments in self._requests:
            text, errors = self.bundle.format(text_id, arguments)
            result.texts[text_id] = text
            result.errors.extend(errors)
        return result

    @property
    def text_ids(self) -> Tuple[str, ...]:
        """Declared text ids in declaration order, duplicates included."""
        return tuple(text_id for text_id, _ in self._requests)

    def _check_not_built(self) -> None:
        if self._built:
            raise BuilderConsumedError("TextMapBuilder has already been built")
