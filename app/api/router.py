from fastapi import APIRouter

from api.routes.pages import router as pages_router
from api.routes.system import router as system_router

api_router = APIRouter()

api_router.include_router(pages_router)
api_router.include_router(system_router)
