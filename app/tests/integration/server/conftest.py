"""Fixtures for server integration tests."""

import pytest
from fastapi.testclient import TestClient

from infrastructure.configuration import Settings
from infrastructure.configuration.infrastructure import I18nSettings, ServerSettings
from server.server import create_app


@pytest.fixture
def settings(locales_dir):
    """Settings pointing at the temporary locales directory."""
    return Settings(
        GIT_SHA="abc123",
        server=ServerSettings(SERVERNAME="send.test"),
        i18n=I18nSettings(LOCALES_DIR=locales_dir),
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)
