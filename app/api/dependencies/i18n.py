"""FastAPI dependencies for the request locale."""

from typing import Annotated

from fastapi import Depends

from infrastructure.i18n import RequestLocaleContext, TranslationBundle
from server.locale_middleware import get_current_bundle, get_locale_context

# Locale context attached by LocaleMiddleware
LocaleContextDep = Annotated[RequestLocaleContext, Depends(get_locale_context)]

# Shared bundle for the request locale
BundleDep = Annotated[TranslationBundle, Depends(get_current_bundle)]

__all__ = ["LocaleContextDep", "BundleDep"]
