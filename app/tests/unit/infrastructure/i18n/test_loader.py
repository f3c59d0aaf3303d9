"""Tests for infrastructure.i18n.loader module."""

import pytest

from infrastructure.i18n import (
    DirectoryUnreadableError,
    LocaleLoadError,
    LocaleStore,
    MissingDefaultLocaleError,
    YAMLTranslationLoader,
    load_locale_store,
)
from tests.factories.i18n import make_locale, write_locale


def _reasons(result):
    return sorted(warning.reason for warning in result.warnings)


@pytest.mark.unit
class TestYAMLTranslationLoader:
    """Tests for YAMLTranslationLoader.load()."""

    def test_loads_valid_locales_and_skips_bad_name(self, locales_dir):
        """Valid locales load; a malformed directory name is skipped."""
        result = YAMLTranslationLoader().load(locales_dir)

        assert isinstance(result.store, LocaleStore)
        assert [str(locale) for locale in result.store] == ["en-US", "fr"]
        assert _reasons(result) == ["invalid_locale_name"]
        assert result.warnings[0].path == locales_dir / "xx-BOGUS!!"

    def test_store_key_matches_directory_name(self, tmp_path):
        """Each loaded locale is keyed by its directory name."""
        write_locale(tmp_path, "en-US", {"greeting": "Hello"})
        write_locale(tmp_path, "pt-BR", {"greeting": "Olá"})

        store = YAMLTranslationLoader().load(tmp_path).store

        bundle = store[make_locale("pt-BR")]
        assert str(bundle.locale) == "pt-BR"
        assert bundle.format("greeting")[0] == "Olá"

    def test_bundle_contents(self, locales_dir):
        """Loaded bundles format their messages."""
        store = YAMLTranslationLoader().load(locales_dir).store

        text, errors = store[make_locale("fr")].format("greeting", {"name": "Ann"})
        assert text == "Bonjour, Ann !"
        assert errors == []

    def test_missing_resource_file_is_skipped(self, tmp_path):
        """A locale directory without the resource file is skipped."""
        write_locale(tmp_path, "en-US", {"greeting": "Hello"})
        write_locale(tmp_path, "de", None)

        result = YAMLTranslationLoader().load(tmp_path)

        assert make_locale("de") not in result.store
        assert _reasons(result) == ["unreadable_resource"]

    def test_invalid_yaml_is_skipped(self, tmp_path):
        """A locale whose resource is not valid YAML is skipped."""
        write_locale(tmp_path, "en-US", {"greeting": "Hello"})
        write_locale(tmp_path, "fr", "greeting: [unclosed\n")

        result = YAMLTranslationLoader().load(tmp_path)

        assert make_locale("fr") not in result.store
        assert _reasons(result) == ["invalid_resource"]

    def test_malformed_pattern_is_skipped(self, tmp_path):
        """A locale with a malformed pattern is skipped."""
        write_locale(tmp_path, "en-US", {"greeting": "Hello"})
        write_locale(tmp_path, "fr", {"greeting": "Bonjour {name"})

        result = YAMLTranslationLoader().load(tmp_path)

        assert list(result.store) == [make_locale("en-US")]
        assert _reasons(result) == ["invalid_resource"]

    def test_non_utf8_resource_is_skipped(self, tmp_path):
        """A resource that is not UTF-8 is skipped."""
        write_locale(tmp_path, "en-US", {"greeting": "Hello"})
        locale_dir = write_locale(tmp_path, "fr", None)
        (locale_dir / "send.yml").write_bytes(b"greeting: \xff\xfe\n")

        result = YAMLTranslationLoader().load(tmp_path)

        assert make_locale("fr") not in result.store
        assert _reasons(result) == ["unreadable_resource"]

    def test_files_in_base_directory_are_ignored(self, tmp_path):
        """Plain files next to the locale directories are not warnings."""
        write_locale(tmp_path, "en-US", {"greeting": "Hello"})
        (tmp_path / "README.md").write_text("locales", encoding="utf-8")

        result = YAMLTranslationLoader().load(tmp_path)

        assert len(result.store) == 1
        assert result.warnings == ()

    def test_duplicate_locale_first_wins(self, tmp_path):
        """Directories normalizing to the same locale keep the first in sorted order."""
        write_locale(tmp_path, "en-US", {"greeting": "Hello"})
        write_locale(tmp_path, "en-us", {"greeting": "Howdy"})

        result = YAMLTranslationLoader().load(tmp_path)

        assert len(result.store) == 1
        assert result.store.default_bundle.format("greeting")[0] == "Hello"
        assert _reasons(result) == ["duplicate_locale"]

    def test_custom_resource_filename(self, tmp_path):
        """The resource file name is configurable."""
        write_locale(tmp_path, "en-US", {"greeting": "Hello"}, filename="messages.yml")

        result = YAMLTranslationLoader(resource_filename="messages.yml").load(tmp_path)

        assert make_locale("en-US") in result.store

    def test_custom_default_locale(self, tmp_path):
        """A different default locale can be required."""
        write_locale(tmp_path, "fr", {"greeting": "Bonjour"})

        result = YAMLTranslationLoader(default_locale=make_locale("fr")).load(tmp_path)

        assert result.store.default_locale == make_locale("fr")

    def test_missing_default_locale_is_fatal(self, tmp_path):
        """Loading fails when the default locale is absent."""
        write_locale(tmp_path, "fr", {"greeting": "Bonjour"})

        with pytest.raises(MissingDefaultLocaleError) as exc_info:
            YAMLTranslationLoader().load(tmp_path)

        assert exc_info.value.default_locale == make_locale("en-US")
        assert exc_info.value.loaded == (make_locale("fr"),)

    def test_broken_default_locale_is_fatal(self, tmp_path):
        """Loading fails when the default locale's own resource is broken."""
        write_locale(tmp_path, "en-US", "- not\n- a mapping\n")
        write_locale(tmp_path, "fr", {"greeting": "Bonjour"})

        with pytest.raises(MissingDefaultLocaleError):
            YAMLTranslationLoader().load(tmp_path)

    def test_empty_directory_is_fatal(self, tmp_path):
        """An empty locales directory has no default locale."""
        with pytest.raises(MissingDefaultLocaleError):
            YAMLTranslationLoader().load(tmp_path)

    def test_missing_base_directory(self, tmp_path):
        """A nonexistent base directory raises DirectoryUnreadableError."""
        missing = tmp_path / "missing"

        with pytest.raises(DirectoryUnreadableError) as exc_info:
            YAMLTranslationLoader().load(missing)

        assert exc_info.value.path == missing
        assert isinstance(exc_info.value, LocaleLoadError)

    def test_base_directory_is_a_file(self, tmp_path):
        """A file given as base directory raises DirectoryUnreadableError."""
        not_a_dir = tmp_path / "locales.txt"
        not_a_dir.write_text("", encoding="utf-8")

        with pytest.raises(DirectoryUnreadableError):
            YAMLTranslationLoader().load(not_a_dir)

    def test_accepts_string_path(self, locales_dir):
        """load() accepts a string path."""
        result = YAMLTranslationLoader().load(str(locales_dir))
        assert len(result.store) == 2


@pytest.mark.unit
def test_load_locale_store(locales_dir):
    """load_locale_store() returns only the store."""
    store = load_locale_store(locales_dir)
    assert isinstance(store, LocaleStore)
    assert [str(locale) for locale in store] == ["en-US", "fr"]
