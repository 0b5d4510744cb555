"""
System endpoints.

Mock system status and mission log.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from ..deps import ServicesDep

router = APIRouter()


# Response models

class StatusResponse(BaseModel):
    """System status response."""
    status: str
    version: str
    last_update: str
    server_load: str
    message: str


class MissionResponse(BaseModel):
    """Mission log response."""
    mission_id: str
    objective: str
    status: str
    priority: str
    agent: str
    deadline: str


# Endpoints

@router.get("/status", response_model=StatusResponse)
def get_system_status(services: ServicesDep):
    """
    Current system status.

    `server_load` and `last_update` change on every call.
    """
    report = services.status.get_system_status()

    return StatusResponse(
        status=report.status,
        version=report.version,
        last_update=report.last_update,
        server_load=report.server_load,
        message=report.message
    )


@router.get("/mission", response_model=MissionResponse)
def get_mission_log(services: ServicesDep):
    """Fixed mission log."""
    mission = services.status.get_mission_log()

    return MissionResponse(
        mission_id=mission.mission_id,
        objective=mission.objective,
        status=mission.status,
        priority=mission.priority,
        agent=mission.agent,
        deadline=mission.deadline
    )
