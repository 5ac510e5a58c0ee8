"""API route modules."""

from rainbowroad.api.routes.health import router as health_router
from rainbowroad.api.routes.stars import router as stars_router

__all__ = [
    "health_router",
    "stars_router",
]
