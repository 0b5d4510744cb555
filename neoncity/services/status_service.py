"""
Status Service.

Produces the system status report and the mission log shown on the site.
"""

import random
import logging
from datetime import datetime
from typing import Callable
from dataclasses import dataclass

from .base import BaseService, ServiceContext

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
STATUS_VERSION = "2.1.0-beta"
STATUS_MESSAGE = "Neural network operational. Data streams flowing."


@dataclass(frozen=True)
class StatusReport:
    """Snapshot of the (mock) system status."""
    status: str
    version: str
    last_update: str
    server_load: str
    message: str


@dataclass(frozen=True)
class MissionLog:
    """Fictional mission log entry."""
    mission_id: str
    objective: str
    status: str
    priority: str
    agent: str
    deadline: str


MISSION_LOG = MissionLog(
    mission_id="MX-7B-9",
    objective="Retrieve encrypted data from Sector 7G.",
    status="PENDING",
    priority="HIGH",
    agent="GhostRunner",
    deadline="2077-07-25 03:00:00",
)


class StatusService(BaseService):
    """
    Service for the status and mission endpoints.

    The clock and random source can be swapped out so tests can pin them.
    """

    def __init__(
        self,
        context: ServiceContext,
        clock: Callable[[], datetime] = datetime.now,
        load_source: Callable[[], float] = random.random
    ):
        super().__init__(context)
        self._clock = clock
        self._load_source = load_source

    def get_system_status(self) -> StatusReport:
        """Build a fresh status report with the current time and a random load."""
        # Truncate to hundredths so rounding never reports 100.00%
        load = int(self._load_source() * 10000) / 100

        return StatusReport(
            status="ONLINE",
            version=STATUS_VERSION,
            last_update=self._clock().strftime(TIMESTAMP_FORMAT),
            server_load=f"{load:.2f}%",
            message=STATUS_MESSAGE,
        )

    def get_mission_log(self) -> MissionLog:
        """Return the fixed mission log."""
        return MISSION_LOG
