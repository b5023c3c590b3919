from fastapi import APIRouter

from app.api.routes.discovery_call import router as discovery_call_router
from app.api.routes.health import router as health_router

api_router = APIRouter()
v1_router = APIRouter(prefix="/v1")

api_router.include_router(health_router)

# Unversioned path kept for the existing booking widget.
api_router.include_router(discovery_call_router)

# Versioned routes for long-term API evolution.
v1_router.include_router(discovery_call_router)
api_router.include_router(v1_router)
