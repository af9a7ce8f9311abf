# Local application imports
from voteschallenge.api.internal.main import router as internal_router

__all__ = ["internal_router"]
