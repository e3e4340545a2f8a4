"""Project configuration discovery.

Looks for a ``client.json`` in the workspace (falling back to
``default.json``) and reads the API base URL and key from it.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from swagger_interfaces.errors import ConfigError

CONFIG_NAMES = ("client.json", "default.json")
EXCLUDED_DIRS = {"node_modules"}
DEFAULT_DOCS_PATH = "/swagger/docs/v1?flatten=true"
DEFAULT_OUTPUT = Path("front-end") / "interfaces" / "Swagger.ts"


class ProjectConfig(BaseModel):
    """Keys read from the project's client configuration file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    base_url: str = Field(alias="baseURL")
    api_key: str | None = Field(default=None, alias="apiKey")
    api_url: str | None = Field(default=None, alias="apiURL")
    base_name: str | None = Field(default=None, alias="baseName")
    title: str | None = None

    def swagger_url(self, docs_path: str = DEFAULT_DOCS_PATH) -> str:
        return self.base_url.rstrip("/") + docs_path


def find_config(root: Path) -> Path | None:
    """Return the first config file under root, preferring client.json."""
    for name in CONFIG_NAMES:
        candidates = [
            p for p in sorted(root.rglob(name))
            if not EXCLUDED_DIRS.intersection(p.relative_to(root).parts)
        ]
        if candidates:
            return candidates[0]
    return None


def load_config(path: Path | None = None, root: Path | None = None) -> ProjectConfig:
    """Load the project configuration from path, or discover it under root."""
    if path is None:
        path = find_config(root or Path.cwd())
        if path is None:
            raise ConfigError(f"No {' or '.join(CONFIG_NAMES)} found under {root or Path.cwd()}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    try:
        return ProjectConfig(**data)
    except (TypeError, ValidationError) as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e
