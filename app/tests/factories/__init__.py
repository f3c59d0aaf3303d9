"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    EN_US_MESSAGES,
    FR_MESSAGES,
    make_bundle,
    make_locale,
    make_store,
    write_locale,
)

__all__ = [
    "EN_US_MESSAGES",
    "FR_MESSAGES",
    "make_bundle",
    "make_locale",
    "make_store",
    "write_locale",
]
