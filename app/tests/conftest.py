"""Shared fixtures for the test suite."""

import pytest

from tests.factories.i18n import write_locale

SETTINGS_ENV_VARS = (
    "PREFIX",
    "LOG_LEVEL",
    "GIT_SHA",
    "SERVERNAME",
    "LISTEN_ADDRESS",
    "LOCALES_DIR",
    "LOCALE_RESOURCE_FILENAME",
    "DEFAULT_LOCALE",
)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep the host environment out of Settings during tests."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def locales_dir(tmp_path):
    """Locales directory with valid en-US and fr resources and one bad name.

    Layout:
    - en-US/send.yml
    - fr/send.yml
    - xx-BOGUS!!/send.yml
    """
    base = tmp_path / "locales"
    write_locale(
        base,
        "en-US",
        {
            "greeting": "Hello, {name}!",
            "page": {
                "title": "Send",
                "heading": "Simple, private file sharing",
                "intro": "Share files with anyone using {servername}.",
                "footer": "© {year} Send",
            },
            "upload": {"hint": "Select files to upload."},
        },
    )
    write_locale(
        base,
        "fr",
        {
            "greeting": "Bonjour, {name} !",
            "page": {
                "title": "Send",
                "heading": "Partage de fichiers simple et privé",
                "intro": "Partagez des fichiers grâce à {servername}.",
                "footer": "© {year} Send",
            },
            "upload": {"hint": "Sélectionnez des fichiers à envoyer."},
        },
    )
    write_locale(base, "xx-BOGUS!!", {"greeting": "???"})
    return base
