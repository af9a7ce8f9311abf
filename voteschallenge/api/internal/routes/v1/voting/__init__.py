from .associate_routes import router as associate_router
from .ruling_routes import router as ruling_router
from .session_routes import router as session_router
from .vote_routes import router as vote_router

__all__ = ["associate_router", "ruling_router", "session_router", "vote_router"]
