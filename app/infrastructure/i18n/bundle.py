"""Compiled translation bundles.

A bundle holds every message of one locale with its pattern already split
into literal and placeholder segments. Bundles are immutable after
construction and keep no caches, so one instance can be shared by all
concurrent requests served in that locale.

Resource format (YAML, one file per locale):

    greeting: "Hello, {name}!"
    upload:
      title: "Upload a file"      # message id "upload.title"
      limit: "Up to {{size}} MB"
"""

import re
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Tuple

import yaml

from infrastructure.i18n.errors import (
    FormatError,
    InvalidArgumentError,
    MessageNotFoundError,
    MissingArgumentError,
    ResourceParseError,
)
from infrastructure.i18n.models import LocaleIdentifier

_PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}|\{(\w+)\}")

_SUPPORTED_ARGUMENT_TYPES = (str, int, float, Decimal, date)


class Segment(NamedTuple):
    """Piece of a compiled pattern: literal text or a placeholder name."""

    value: str
    placeholder: bool = False


def parse_resource(content: str, source: Optional[str] = None) -> Dict[str, str]:
    """Parse YAML resource content into a flat message-id -> pattern dict.

    Nested mappings are flattened into dot-separated ids. An empty document
    is a valid, empty resource.

    Args:
        content: UTF-8 decoded YAML text.
        source: Optional file name, used in error messages.

    Returns:
        Dict of message id to raw pattern.

    Raises:
        ResourceParseError: If the YAML is invalid or not a mapping of strings.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ResourceParseError(f"invalid YAML: {e}", source=source) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ResourceParseError(
            f"expected a mapping of message ids, got {type(data).__name__}",
            source=source,
        )

    messages: Dict[str, str] = {}
    _flatten(data, "", messages, source)
    return messages


def _flatten(
    data: Dict[Any, Any], prefix: str, into: Dict[str, str], source: Optional[str]
) -> None:
    for key, value in data.items():
        message_id = f"{prefix}{key}"
        if message_id in into:
            raise ResourceParseError(
                f"message {message_id!r} is defined more than once", source=source
            )
        if isinstance(value, dict):
            _flatten(value, f"{message_id}.", into, source)
        elif isinstance(value, str):
            into[message_id] = value
        else:
            raise ResourceParseError(
                f"message {message_id!r} must be a string, got {type(value).__name__}",
                source=source,
            )


def compile_pattern(message_id: str, pattern: str) -> Tuple[Segment, ...]:
    """Split a pattern into literal and placeholder segments.

    Supports both ``{name}`` and ``{{name}}`` placeholders.

    Raises:
        ResourceParseError: If the pattern contains a stray brace.
    """
    segments: List[Segment] = []
    position = 0
    for match in _PLACEHOLDER_PATTERN.finditer(pattern):
        literal = pattern[position : match.start()]
        _check_literal(message_id, literal)
        if literal:
            segments.append(Segment(literal))
        segments.append(Segment(match.group(1) or match.group(2), placeholder=True))
        position = match.end()

    tail = pattern[position:]
    _check_literal(message_id, tail)
    if tail:
        segments.append(Segment(tail))
    return tuple(segments)


def _check_literal(message_id: str, literal: str) -> None:
    if "{" in literal or "}" in literal:
        raise ResourceParseError(f"message {message_id!r} has an unbalanced brace")


def _render_argument(value: Any) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


class TranslationBundle:
    """Queryable, immutable set of compiled messages for one locale.

    Attributes:
        locale: The LocaleIdentifier this bundle serves.
    """

    def __init__(self, locale: LocaleIdentifier, messages: Mapping[str, str]):
        """Compile messages for a locale.

        Args:
            locale: Locale the messages belong to.
            messages: Flat mapping of message id to pattern.

        Raises:
            ResourceParseError: If any pattern is malformed.
        """
        self.locale = locale
        self._patterns = MappingProxyType(
            {
                message_id: compile_pattern(message_id, pattern)
                for message_id, pattern in messages.items()
            }
        )

    @classmethod
    def from_yaml(
        cls, locale: LocaleIdentifier, content: str, source: Optional[str] = None
    ) -> "TranslationBundle":
        """Parse YAML resource content and compile it into a bundle.

        Raises:
            ResourceParseError: If the content is not a valid resource.
        """
        messages = parse_resource(content, source=source)
        try:
            return cls(locale, messages)
        except ResourceParseError as e:
            if source and e.source is None:
                raise ResourceParseError(str(e), source=source) from e
            raise

    def format(
        self, message_id: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> Tuple[str, List[FormatError]]:
        """Render a message with named arguments.

        Never raises for formatting problems. Missing or unusable arguments
        are rendered as ``{name}`` and an unknown id renders as the id itself.

        Args:
            message_id: Id of the message to render.
            arguments: Optional mapping of placeholder name to value.

        Returns:
            Tuple of (rendered text, list of FormatError).
        """
        segments = self._patterns.get(message_id)
        if segments is None:
            return message_id, [MessageNotFoundError(message_id)]

        arguments = arguments or {}
        errors: List[FormatError] = []
        parts: List[str] = []
        for segment in segments:
            if not segment.placeholder:
                parts.append(segment.value)
                continue

            name = segment.value
            if name not in arguments:
                errors.append(MissingArgumentError(message_id, name))
                parts.append(f"{{{name}}}")
                continue

            value = arguments[name]
            if not isinstance(value, _SUPPORTED_ARGUMENT_TYPES):
                errors.append(InvalidArgumentError(message_id, name, type(value)))
                parts.append(f"{{{name}}}")
                continue

            parts.append(_render_argument(value))

        return "".join(parts), errors

    def has_message(self, message_id: str) -> bool:
        return message_id in self._patterns

    def placeholders(self, message_id: str) -> Tuple[str, ...]:
        """Placeholder names used by a message, in order of appearance."""
        segments = self._patterns.get(message_id, ())
        return tuple(segment.value for segment in segments if segment.placeholder)

    @property
    def message_ids(self) -> Tuple[str, ...]:
        return tuple(sorted(self._patterns))

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"TranslationBundle(locale={str(self.locale)!r}, messages={len(self)})"
