"""API v1 router aggregator.

All v1 endpoint routers are included here; the app mounts this router at
/api/v1.
"""

from fastapi import APIRouter

from careerai.api.v1 import (
    chat,
    dashboard,
    interview,
    onboarding,
    resume,
    roadmap,
    shell,
)

router = APIRouter()

# =============================================================================
# Navigation
# =============================================================================

router.include_router(onboarding.router, prefix="/onboarding", tags=["onboarding"])
router.include_router(shell.router, prefix="/shell", tags=["shell"])

# =============================================================================
# Screens
# =============================================================================

router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
router.include_router(roadmap.router, prefix="/roadmap", tags=["roadmap"])
router.include_router(chat.router, prefix="/chat", tags=["chat"])
router.include_router(resume.router, prefix="/resume", tags=["resume"])
router.include_router(interview.router, prefix="/interview", tags=["interview"])
