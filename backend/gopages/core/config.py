"""
GoPages — Configuration
Loads .env automatically, then reads all settings from environment variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from gopages.errors import ConfigurationError

_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(_env_path)


@dataclass(frozen=True)
class GitHubConfig:
    """GitHub REST API access."""
    api_url: str
    token: str
    timeout: float


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""
    github: GitHubConfig
    pages_dir: str
    change_type: str


def load_config() -> AppConfig:
    return AppConfig(
        github=GitHubConfig(
            api_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
            token=os.getenv("GITHUB_TOKEN", ""),
            timeout=float(os.getenv("GOPAGES_HTTP_TIMEOUT", "30.0")),
        ),
        pages_dir=os.getenv("GOPAGES_PAGES_DIR", "."),
        change_type=os.getenv("GOPAGES_CHANGE_TYPE", "commit"),
    )


def validate_config(cfg: AppConfig) -> None:
    """Fail fast if the GitHub token is missing."""
    missing: list[str] = []
    if not cfg.github.token:
        missing.append("GITHUB_TOKEN")
    if missing:
        raise ConfigurationError(
            f"Missing configuration: {', '.join(missing)}",
            suggestion="Export the variables or put them in backend/.env.",
        )


settings = load_config()
