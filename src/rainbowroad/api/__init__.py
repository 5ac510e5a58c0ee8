"""FastAPI application and routes.

Run with ``uvicorn --factory rainbowroad.api:create_app`` or ``rainbowroad-server``.
"""

from rainbowroad.api.app import create_app

__all__ = [
    "create_app",
]
