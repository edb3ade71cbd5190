"""
API route modules.
"""

from api.routes.health import router as health_router
from api.routes.info import router as info_router

__all__ = ["health_router", "info_router"]
