"""
Pytest configuration and shared fixtures.

This module provides common fixtures for testing:
- Configuration and bundled CV file
- Stubbed GitHub upstream
- Service mocking
- API client
"""

import os
import sys
from pathlib import Path
from typing import Callable, Generator
from unittest.mock import MagicMock

import pytest
import httpx
from fastapi.testclient import TestClient

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set test environment variables before imports
os.environ["GITHUB_USERNAME"] = "DomiTe"

from neoncity.config import Config, GitHubConfig
from neoncity.github_api import GitHubAPI
from neoncity.services import (
    ServiceContext,
    StatusService,
    CvService,
    ProjectService,
    StatusReport,
    MissionLog,
    ProjectSummary,
)


# =============================================================================
# Configuration
# =============================================================================

@pytest.fixture
def cv_file(tmp_path) -> Path:
    """A CV file containing 'Hello World'."""
    path = tmp_path / "cv.txt"
    path.write_text("Hello World", encoding="utf-8")
    return path


@pytest.fixture
def app_config(cv_file) -> Config:
    """Configuration pointing at the temporary CV file."""
    return Config(
        github=GitHubConfig(username="DomiTe", api_base_url="https://api.github.com"),
        app_version="2.1.0-beta",
        cv_path=cv_file,
    )


# =============================================================================
# GitHub Upstream Fixtures
# =============================================================================

@pytest.fixture
def sample_repos() -> list:
    """Two repositories as GitHub returns them; the first has no description."""
    return [
        {
            "name": "neon-city",
            "html_url": "https://github.com/DomiTe/neon-city",
            "language": "Java",
            "updated_at": "2025-06-30T18:42:07Z",
        },
        {
            "name": "digital-rain",
            "description": "Three.js falling code background",
            "html_url": "https://github.com/DomiTe/digital-rain",
            "language": None,
            "updated_at": "2025-06-12T09:15:33Z",
        },
    ]


@pytest.fixture
def make_github() -> Generator[Callable, None, None]:
    """Build GitHubAPI clients backed by an in-process handler."""
    clients = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> GitHubAPI:
        client = GitHubAPI(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def github_ok(make_github, sample_repos) -> GitHubAPI:
    """GitHub client whose upstream answers with the sample repositories."""
    return make_github(lambda request: httpx.Response(200, json=sample_repos))


@pytest.fixture
def github_500(make_github) -> GitHubAPI:
    """GitHub client whose upstream answers HTTP 500."""
    return make_github(lambda request: httpx.Response(500, json={"message": "Server Error"}))


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def service_context(app_config, github_ok) -> ServiceContext:
    """Service context with the sample upstream."""
    return ServiceContext.create(config=app_config, github=github_ok)


@pytest.fixture
def mock_services():
    """Create mock services container."""
    services = MagicMock()

    services.status = MagicMock()
    services.status.get_system_status = MagicMock(return_value=StatusReport(
        status="ONLINE",
        version="2.1.0-beta",
        last_update="2077-07-24 22:00:00",
        server_load="42.17%",
        message="Neural network operational. Data streams flowing.",
    ))
    services.status.get_mission_log = MagicMock(return_value=MissionLog(
        mission_id="MX-7B-9",
        objective="Retrieve encrypted data from Sector 7G.",
        status="PENDING",
        priority="HIGH",
        agent="GhostRunner",
        deadline="2077-07-25 03:00:00",
    ))

    services.cv = MagicMock()
    services.cv.get_cv_content = MagicMock(return_value="Hello World")

    services.projects = MagicMock()
    services.projects.get_github_projects = MagicMock(return_value=[
        ProjectSummary(
            title="neon-city",
            description="No description available.",
            url="https://github.com/DomiTe/neon-city",
            language="Java",
            last_updated="2025-06-30T18:42:07Z",
        )
    ])

    return services


@pytest.fixture
def real_services():
    """Build a real services container around a given context."""
    from api.deps import Services

    def _build(context: ServiceContext) -> Services:
        return Services(
            config=context.config,
            context=context,
            status=StatusService(context),
            cv=CvService(context),
            projects=ProjectService(context),
        )

    return _build


# =============================================================================
# API Client Fixtures
# =============================================================================

@pytest.fixture
def api_app():
    """Create FastAPI app for testing."""
    from api.main import app
    return app


@pytest.fixture
def api_client(api_app) -> TestClient:
    """Create synchronous test client for API."""
    return TestClient(api_app)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
    config.addinivalue_line(
        "markers", "api: mark test as API endpoint test"
    )
