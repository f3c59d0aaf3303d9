"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from api.router import api_router
from infrastructure.configuration import ConfigurationError, Settings
from infrastructure.i18n import (
    InvalidLocaleError,
    LocaleIdentifier,
    LocaleStore,
    load_locale_store,
)
from infrastructure.logging import get_module_logger
from infrastructure.services import get_settings
from server.assets import STATIC_DIR, STATIC_URL
from server.locale_middleware import LocaleMiddleware
from server.templating import PageRenderer

logger = get_module_logger()


def load_store(settings: Settings) -> LocaleStore:
    """Load the LocaleStore described by settings.

    Raises:
        ConfigurationError: If DEFAULT_LOCALE is not a valid language tag.
        LocaleLoadError: If the locales cannot be loaded.
    """
    try:
        default_locale = LocaleIdentifier.parse(settings.i18n.DEFAULT_LOCALE)
    except InvalidLocaleError as e:
        raise ConfigurationError(f"Invalid DEFAULT_LOCALE: {e}") from e

    return load_locale_store(
        settings.i18n.LOCALES_DIR,
        resource_filename=settings.i18n.RESOURCE_FILENAME,
        default_locale=default_locale,
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[LocaleStore] = None,
    renderer: Optional[PageRenderer] = None,
) -> FastAPI:
    """Build the application.

    The LocaleStore is fully loaded before the application is returned, so
    no request can observe a partially loaded store.

    Args:
        settings: Settings to use; defaults to the process-wide settings.
        store: Preloaded LocaleStore; loaded from settings when omitted.
        renderer: Page renderer; defaults to the bundled templates.

    Raises:
        ConfigurationError: If the i18n configuration is invalid.
        LocaleLoadError: If the locales cannot be loaded.
    """
    settings = settings or get_settings()
    store = store if store is not None else load_store(settings)

    handler = FastAPI(title="send-server")
    handler.state.settings = settings
    handler.state.locale_store = store
    handler.state.renderer = renderer or PageRenderer()

    handler.add_middleware(LocaleMiddleware, store=store)
    handler.include_router(api_router)
    handler.mount(STATIC_URL, StaticFiles(directory=STATIC_DIR), name="static")

    logger.info(
        "application_created",
        servername=settings.server.SERVERNAME,
        locales=[str(locale) for locale in store],
        default_locale=str(store.default_locale),
    )
    return handler
