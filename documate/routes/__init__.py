"""FastAPI routes package."""

from documate.routes.debug import router as debug_router
from documate.routes.health import router as health_router
from documate.routes.questions import router as questions_router

__all__ = ["debug_router", "health_router", "questions_router"]
