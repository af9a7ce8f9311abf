# Third-party imports
from fastapi import APIRouter

# Local application imports
from voteschallenge.api.internal.routes.v1.voting import (
    associate_router,
    ruling_router,
    session_router,
    vote_router,
)

router = APIRouter()

# Include all internal v1 routers
router.include_router(ruling_router)
router.include_router(session_router)
router.include_router(associate_router)
router.include_router(vote_router)
