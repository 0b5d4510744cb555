"""
API dependencies.

Provides dependency injection for the shared services container.
"""

import logging
import threading
from typing import Optional, Annotated
from dataclasses import dataclass

from fastapi import Depends

from neoncity.config import load_config, Config
from neoncity.services import (
    ServiceContext,
    StatusService,
    CvService,
    ProjectService,
    create_services,
)

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Container for all services."""
    config: Config
    context: ServiceContext
    status: StatusService
    cv: CvService
    projects: ProjectService


# Global services instance (singleton)
_services: Optional[Services] = None
_services_lock = threading.Lock()


def get_services() -> Services:
    """
    Get or create the services singleton.

    This initializes all services on first call.
    """
    global _services

    if _services is None:
        with _services_lock:
            if _services is None:
                logger.info("Initializing services...")

                config = load_config()
                context = ServiceContext.create(config=config)
                context, status, cv, projects = create_services(context)

                _services = Services(
                    config=config,
                    context=context,
                    status=status,
                    cv=cv,
                    projects=projects
                )

                logger.info("Services initialized successfully")

    return _services


def close_services():
    """Close and cleanup services."""
    global _services
    if _services:
        _services.context.close()
        _services = None
        logger.info("Services closed")


# Dependency for getting services
def services_dep() -> Services:
    """FastAPI dependency for services."""
    return get_services()


ServicesDep = Annotated[Services, Depends(services_dep)]
