"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration
used by the deployment script and the submission helper.

Configuration can be overridden via environment variables:
- RECHARGE_DEPLOY_BUILD_COMMAND="npm run build"
- RECHARGE_DEPLOY_BRANCH=gh-pages
- PUBLIC_SUBMISSION_ENDPOINT=https://example.com/submit
- RECHARGE_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import shlex
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DeployConfig(BaseSettings):
    """Static site deployment configuration.

    Environment variables prefixed with RECHARGE_DEPLOY_.
    Relative directories are resolved against ``project_root``.
    """

    model_config = SettingsConfigDict(env_prefix="RECHARGE_DEPLOY_")

    build_command: str = "npm run build"
    build_dir: Path = Path("build")
    workspace_dir: Path = Path("gh-pages")
    branch: str = "gh-pages"
    remote: str = "origin"
    site_url: Optional[str] = "https://thelittlewonder.github.io/recharge/"
    project_root: Path = Field(default_factory=Path.cwd)
    command_timeout_seconds: Optional[float] = None

    @property
    def build_args(self) -> list[str]:
        """Build command split into an argument vector."""
        return shlex.split(self.build_command)

    @property
    def build_path(self) -> Path:
        """Full path to the build output directory."""
        return self.project_root / self.build_dir

    @property
    def workspace_path(self) -> Path:
        """Full path to the publish workspace."""
        return self.project_root / self.workspace_dir


class SubmissionConfig(BaseSettings):
    """Form submission configuration.

    The endpoint keeps the public variable name the front end uses.
    """

    model_config = SettingsConfigDict(
        env_prefix="RECHARGE_SUBMISSION_", populate_by_name=True
    )

    endpoint: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "PUBLIC_SUBMISSION_ENDPOINT", "RECHARGE_SUBMISSION_ENDPOINT"
        ),
    )
    timeout_seconds: float = 10.0


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with RECHARGE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RECHARGE_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.deploy.branch)
        print(config.submission.endpoint)

    Environment variables prefixed with RECHARGE_.
    """

    model_config = SettingsConfigDict(env_prefix="RECHARGE_")

    deploy: DeployConfig = Field(default_factory=DeployConfig)
    submission: SubmissionConfig = Field(default_factory=SubmissionConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    # Prefix for image references, mirrors the site's base path.
    base_path: str = ""


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
