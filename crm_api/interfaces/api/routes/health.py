"""Rutas públicas de estado del servicio."""

from fastapi import APIRouter

from crm_api.config import get_settings
from crm_api.interfaces.api.schemas import HealthResponse
from crm_api.utils import now_in_app_timezone

router = APIRouter(tags=["health"])

ENDPOINTS = {
    "auth": "/auth",
    "users": "/users",
    "leads": "/leads",
    "campaigns": "/campaigns",
    "social_networks": "/social-networks",
    "notifications": "/notifications",
    "notifications_ws": "/notifications/ws",
    "dashboard": "/dashboard",
    "health": "/health",
}


@router.get("/health", response_model=HealthResponse)
def health_check():
    return HealthResponse(message="Servidor funcionando", timestamp=now_in_app_timezone())


@router.get("/")
def index():
    """Describe el servicio y sus grupos de endpoints."""

    return {
        "success": True,
        "message": f"{get_settings().app_name} API",
        "endpoints": ENDPOINTS,
    }
