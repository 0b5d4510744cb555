"""
Projects endpoints.

Proxies the configured account's GitHub repositories.
"""

from dataclasses import asdict
from typing import List, Dict

from fastapi import APIRouter

from ..deps import ServicesDep

router = APIRouter()


@router.get("/projects")
def get_github_projects(services: ServicesDep) -> List[Dict[str, str]]:
    """
    List GitHub projects, most recently updated first.

    When GitHub cannot be read the list holds a single entry with
    `status: OFFLINE` instead; the response is still 200.
    """
    projects = services.projects.get_github_projects()
    return [asdict(p) for p in projects]
