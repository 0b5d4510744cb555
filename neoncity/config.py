"""Configuration module for the Neon City portfolio API."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CV_PATH = Path(__file__).parent / "resources" / "cv.txt"


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None


@dataclass
class GitHubConfig:
    """GitHub REST API settings."""
    username: str = field(default_factory=lambda: os.getenv("GITHUB_USERNAME", "DomiTe"))
    api_base_url: str = field(default_factory=lambda: os.getenv("GITHUB_API_BASE_URL", "https://api.github.com"))
    # None keeps the httpx default timeout
    timeout_seconds: Optional[float] = field(default_factory=lambda: _optional_float("GITHUB_TIMEOUT_SECONDS"))


@dataclass
class ServerConfig:
    """HTTP server settings."""
    host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8080")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())


@dataclass
class Config:
    """Main configuration container."""
    github: GitHubConfig = field(default_factory=GitHubConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    app_version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "2.1.0-beta"))
    cv_path: Path = field(default_factory=lambda: Path(os.getenv("CV_PATH", str(DEFAULT_CV_PATH))))


def load_config() -> Config:
    """Load configuration from environment variables."""
    return Config()
