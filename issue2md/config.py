"""Configuration loading from YAML and environment.

The GitHub token is taken from the config file, the GITHUB_TOKEN environment
variable, or a file named by GITHUB_TOKEN_FILE (Docker secrets). Never put
real tokens in config files committed to a repo.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from issue2md.errors import ConfigError

# Injected by load_config so token resolution can read env/file
_current_env: dict[str, str] = {}


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    env = _current_env or os.environ
    value = env.get(env_key)
    if value:
        return value.strip()
    file_path = env.get(file_env_key)
    if file_path and Path(file_path).is_file():
        return Path(file_path).read_text().strip()
    return None


class GitHubConfig(BaseSettings):
    """GitHub REST and GraphQL API settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="REST API base URL")
    graphql_url: str = Field(default="https://api.github.com/graphql", description="GraphQL endpoint")
    timeout: int = Field(default=30, ge=1, description="Request timeout in seconds")
    user_agent: str = Field(default="issue2md", description="User-Agent header")
    per_page: int = Field(default=100, ge=1, le=100, description="Page size for comment listing")


class OutputConfig(BaseSettings):
    """Markdown conversion options."""

    model_config = SettingsConfigDict(env_prefix="OUTPUT_", extra="ignore")

    enable_reactions: bool = Field(default=False, description="Include reaction counts")
    enable_user_links: bool = Field(default=False, description="Render @user as profile links")
    output_file: str | None = Field(default=None, description="Output path; stdout when unset")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from config, env or Docker secret file."""
        t = self.github.token
        if t and not t.startswith("$"):
            return t.strip()
        return _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")

    def with_cli_overrides(
        self,
        enable_reactions: bool = False,
        enable_user_links: bool = False,
        output_file: str | None = None,
    ) -> "AppConfig":
        """Return a copy with CLI flags applied (flags only switch features on)."""
        output = self.output.model_copy(
            update={
                "enable_reactions": self.output.enable_reactions or enable_reactions,
                "enable_user_links": self.output.enable_user_links or enable_user_links,
                "output_file": output_file or self.output.output_file,
            }
        )
        return self.model_copy(update={"output": output})


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    A missing file yields defaults (plus env). Raises ConfigError when the
    file is not valid YAML, is not a mapping, or has invalid values.
    """
    global _current_env
    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    try:
        raw = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"config root must be a mapping: {path}")
    raw = _substitute_env(raw)

    try:
        return AppConfig(
            github=GitHubConfig(**(raw.get("github") or {})),
            output=OutputConfig(**(raw.get("output") or {})),
            logging=LoggingConfig(**(raw.get("logging") or {})),
        )
    except ValidationError as e:
        raise ConfigError(f"invalid config {path}: {e}") from e
