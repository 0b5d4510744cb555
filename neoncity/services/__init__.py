"""
Services layer for the Neon City portfolio API.

This module provides the logic behind each endpoint as reusable services
that the HTTP layer (or any other interface) can consume.
"""

from .base import BaseService, ServiceContext
from .status_service import StatusService, StatusReport, MissionLog
from .cv_service import CvService
from .project_service import ProjectService, ProjectSummary, ProjectFetchError

__all__ = [
    # Base
    "BaseService",
    "ServiceContext",
    # Services
    "StatusService",
    "CvService",
    "ProjectService",
    # Data classes
    "StatusReport",
    "MissionLog",
    "ProjectSummary",
    "ProjectFetchError",
]


def create_services(context: ServiceContext = None):
    """
    Factory function to create all services with proper dependencies.

    Args:
        context: Optional ServiceContext (creates one if not provided)

    Returns:
        Tuple of (context, status, cv, projects)
    """
    if context is None:
        context = ServiceContext.create()

    status_service = StatusService(context)
    cv_service = CvService(context)
    project_service = ProjectService(context)

    return (
        context,
        status_service,
        cv_service,
        project_service
    )
