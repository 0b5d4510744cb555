"""
Project Service.

Proxies the GitHub repository listing of the configured account and
reduces each repository to the fields the portfolio shows.
"""

import logging
from typing import List, Union, Any, Dict
from dataclasses import dataclass

from .base import BaseService

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description available."
NO_LANGUAGE = "N/A"


@dataclass(frozen=True)
class ProjectSummary:
    """One GitHub repository as shown on the site."""
    title: str
    description: str
    url: str
    language: str
    last_updated: str


@dataclass(frozen=True)
class ProjectFetchError:
    """Single entry returned in place of the list when GitHub cannot be read."""
    title: str = "Error Fetching Projects"
    status: str = "OFFLINE"
    description: str = "Could not retrieve projects from GitHub. Check backend logs for details."
    url: str = "#"


ProjectEntry = Union[ProjectSummary, ProjectFetchError]


def _as_text(repo: Dict[str, Any], key: str, default: str = "") -> str:
    """
    Read a field as text, falling back to default when missing or null.

    Nested objects and arrays have no text form and read as "".
    """
    value = repo.get(key)
    if value is None:
        return default
    if isinstance(value, (dict, list)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_project_summary(repo: Any) -> ProjectSummary:
    """Project a raw GitHub repository object into a ProjectSummary."""
    if not isinstance(repo, dict):
        repo = {}

    return ProjectSummary(
        title=_as_text(repo, "name"),
        description=_as_text(repo, "description", NO_DESCRIPTION),
        url=_as_text(repo, "html_url"),
        language=_as_text(repo, "language", NO_LANGUAGE),
        last_updated=_as_text(repo, "updated_at"),
    )


class ProjectService(BaseService):
    """Service for the projects endpoint."""

    @property
    def username(self) -> str:
        return self.config.github.username

    def get_github_projects(self) -> List[ProjectEntry]:
        """
        List the account's repositories, most recently updated first.

        Any failure collapses the whole result into a single ProjectFetchError.
        """
        try:
            data = self.github.list_user_repos(self.username)

            if not isinstance(data, list):
                logger.warning(f"Unexpected GitHub response for {self.username}: expected a list")
                return []

            projects = [to_project_summary(repo) for repo in data]
            logger.info(f"Fetched {len(projects)} projects for {self.username}")
            return projects

        except Exception:
            logger.exception(f"Failed to fetch GitHub projects for {self.username}")
            return [ProjectFetchError()]
