"""Middleware attaching the resolved locale to every request."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from structlog.contextvars import bound_contextvars

from infrastructure.i18n import (
    LocaleIdentifier,
    LocaleResolver,
    LocaleStore,
    RequestLocaleContext,
    TranslationBundle,
)

LANGUAGE_HEADER = "accept-language"


class LocaleMiddleware(BaseHTTPMiddleware):
    """Resolves the request locale and stores it on ``request.state``.

    The downstream handler's response and exceptions pass through unchanged.
    """

    def __init__(self, app, store: LocaleStore):
        super().__init__(app)
        self.store = store
        self.resolver = LocaleResolver(store)

    async def dispatch(self, request, call_next):
        context = self.resolver.resolve(request.headers.get(LANGUAGE_HEADER))
        request.state.locale_context = context
        with bound_contextvars(locale=context.lang):
            response = await call_next(request)
        return response


def get_locale_context(request: Request) -> RequestLocaleContext:
    """Return the locale context attached by LocaleMiddleware.

    Raises:
        RuntimeError: If the middleware did not run for this request.
    """
    context = getattr(request.state, "locale_context", None)
    if not isinstance(context, RequestLocaleContext):
        raise RuntimeError("LocaleMiddleware is not installed")
    return context


def get_current_bundle(request: Request) -> TranslationBundle:
    return get_locale_context(request).bundle


def get_current_locale(request: Request) -> LocaleIdentifier:
    return get_locale_context(request).locale
