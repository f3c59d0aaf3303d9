"""Page routes.

Each page declares the texts it needs, renders them in the request locale
and hands the result to the page renderer.
"""

from datetime import date

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from api.dependencies.i18n import LocaleContextDep
from infrastructure.i18n import TextMapBuilder
from infrastructure.logging import get_module_logger
from infrastructure.services import SettingsDep
from server.assets import ASSETS
from server.templating import PageRenderError

logger = get_module_logger()

router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse)
def index(request: Request, locale: LocaleContextDep, settings: SettingsDep):
    """Render the landing page in the request locale."""
    servername = settings.server.SERVERNAME
    texts = (
        TextMapBuilder(locale.bundle)
        .add("page.title")
        .add("page.heading")
        .add("page.intro", {"servername": servername})
        .add("upload.hint")
        .add("page.footer", {"year": date.today().year})
        .build()
    )
    if not texts.ok:
        logger.warning(
            "degraded_translations",
            page="index",
            locale=locale.lang,
            errors=[str(error) for error in texts.errors],
        )

    context = {
        "texts": texts.as_context(),
        "lang": locale.lang,
        "servername": servername,
        "assets": ASSETS,
    }

    try:
        body = request.app.state.renderer.render("index.html", context)
    except PageRenderError:
        return PlainTextResponse("Internal Server Error", status_code=500)
    return HTMLResponse(body)
