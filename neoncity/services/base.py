"""
Base service classes and shared context.

The ServiceContext holds the read-only handles that services share:
the configuration and the GitHub HTTP client.
"""

import logging
from typing import Optional
from dataclasses import dataclass

from ..config import Config, load_config
from ..github_api import GitHubAPI

logger = logging.getLogger(__name__)


@dataclass
class ServiceContext:
    """
    Shared context for all services.

    Built once at startup and passed into every service. Nothing in it is
    mutated per request.
    """
    config: Config
    github: GitHubAPI

    @classmethod
    def create(
        cls,
        config: Optional[Config] = None,
        github: Optional[GitHubAPI] = None
    ) -> "ServiceContext":
        """
        Factory method to create a ServiceContext with all dependencies.

        Args:
            config: Optional config (loads from env if not provided)
            github: Optional GitHub client (built from config if not provided)

        Returns:
            Configured ServiceContext
        """
        cfg = config or load_config()
        github_api = github or GitHubAPI(
            cfg.github.api_base_url,
            timeout=cfg.github.timeout_seconds
        )

        return cls(config=cfg, github=github_api)

    def close(self):
        """Clean up resources."""
        self.github.close()


class BaseService:
    """
    Base class for all services.

    Each service receives the shared context and provides focused functionality.
    """

    def __init__(self, context: ServiceContext):
        self.context = context

    @property
    def config(self) -> Config:
        return self.context.config

    @property
    def github(self) -> GitHubAPI:
        return self.context.github
