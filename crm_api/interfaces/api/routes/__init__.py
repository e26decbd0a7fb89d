from fastapi import FastAPI

from .auth import router as auth_router
from .campaigns import router as campaigns_router
from .dashboard import router as dashboard_router
from .health import router as health_router
from .leads import router as leads_router
from .notifications import router as notifications_router
from .social_networks import router as social_networks_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(leads_router)
    app.include_router(campaigns_router)
    app.include_router(social_networks_router)
    app.include_router(notifications_router)
    app.include_router(dashboard_router)
