"""
API router.

Aggregates all /api endpoints.
"""

from fastapi import APIRouter

from . import system, content, projects

router = APIRouter()

# Include all route modules
router.include_router(system.router, tags=["System"])
router.include_router(content.router, tags=["Content"])
router.include_router(projects.router, tags=["Projects"])
