"""Client configuration loaded from keyword arguments, the environment or YAML."""

import os
from pathlib import Path
from typing import Any, Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for config loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, Field, ValidationError

from lever_data import __version__
from lever_data.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_TIMEOUT,
    ENV_USER_AGENT,
)
from lever_data.errors import ConfigurationError

DEFAULT_USER_AGENT = f"lever-data-api-python/{__version__}"


class ClientConfig(BaseModel):
    """Settings for LeverClient."""

    base_url: str = Field(default=DEFAULT_BASE_URL, description="API root, without trailing endpoint path")
    api_key: str = Field(default="", description="Sent as the Basic auth username with an empty password")
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Seconds")
    headers: dict[str, str] = Field(default_factory=dict, description="Extra headers sent on every request")

    @classmethod
    def _env_values(cls, environ: Optional[dict[str, str]] = None) -> dict[str, Any]:
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        if env.get(ENV_API_KEY):
            values["api_key"] = env[ENV_API_KEY]
        if env.get(ENV_BASE_URL):
            values["base_url"] = env[ENV_BASE_URL]
        if env.get(ENV_USER_AGENT):
            values["user_agent"] = env[ENV_USER_AGENT]
        if env.get(ENV_TIMEOUT):
            values["timeout"] = env[ENV_TIMEOUT]
        return values

    @classmethod
    def _build(cls, values: dict[str, Any], source: str) -> "ClientConfig":
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid client configuration from {source}: {e}") from e

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "ClientConfig":
        """Load from LEVER_API_KEY, LEVER_BASE_URL, LEVER_USER_AGENT and LEVER_TIMEOUT."""
        return cls._build(cls._env_values(environ), "environment")

    @classmethod
    def from_yaml(cls, path: str | Path, environ: Optional[dict[str, str]] = None) -> "ClientConfig":
        """
        Load from a YAML file. Supports keys nested under `lever:` or a flat structure.
        Keys missing from the file fall back to the environment.
        """
        try:
            data = yaml.safe_load(Path(path).read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path}: expected a mapping at top level")
        section = data.get("lever", data)
        if not isinstance(section, dict):
            raise ConfigurationError(f"{path}: 'lever' must be a mapping")

        values = cls._env_values(environ)
        for key in ("base_url", "api_key", "user_agent", "timeout", "headers"):
            if section.get(key) is not None:
                values[key] = section[key]
        return cls._build(values, str(path))
