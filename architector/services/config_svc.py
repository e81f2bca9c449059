# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from defaults, YAML, env vars and explicit overrides
#  - Caches composed config; reload() recomposes
#  - Builds the fixed StoragePaths handed to the DocumentStore
# ======================================================================

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from architector.persistence.storage_paths import StoragePaths

# ======================================================================
# Internal Constants (Not User-Configurable)
# ======================================================================
DEFAULT_BASE_DIR = "~/.mcp-architector"
DEFAULT_PROJECT_ID = "default-project"
CONFIG_FILENAME = "config.yaml"

# Environment variable -> config key
ENV_OVERRIDES: dict[str, str] = {
    "ARCHITECTOR_BASE_DIR": "base_dir",
    "MCP_PROJECT_ID": "project_id",
    "ARCHITECTOR_LOG_LEVEL": "log_level",
}


class ConfigService:
    """
    Service for loading and caching application configuration.

    Loads config from multiple sources (defaults → YAML → env → overrides)
    and caches the result. The storage base directory is read once per
    composition and handed out as an immutable StoragePaths.

    Args:
        overrides: Values that win over every other source (used by tests
            and embedding callers to isolate the storage root)
        environ: Environment mapping (defaults to os.environ)
    """

    def __init__(
        self,
        overrides: dict[str, Any] | None = None,
        environ: dict[str, str] | None = None,
    ) -> None:
        self._overrides = dict(overrides or {})
        self._environ = environ if environ is not None else dict(os.environ)
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value, or default when missing or None."""
        value = self.get_config().get(key)
        return default if value is None else value

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def storage_paths(self) -> StoragePaths:
        """Build the path resolver for the configured base directory."""
        return StoragePaths(Path(self.get("base_dir", DEFAULT_BASE_DIR)))

    def default_project_id(self) -> str:
        """Project id used when a caller supplies none: MCP_PROJECT_ID, else the literal fallback."""
        return str(self.get("project_id") or self.get("default_project_id", DEFAULT_PROJECT_ID))

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) $ARCHITECTOR_CONFIG, else <base_dir>/config.yaml (if present)
          3) Environment variables
          4) Overrides passed to the constructor
        """
        cfg = self._default_config()

        env_path = self._environ.get("ARCHITECTOR_CONFIG")
        if env_path:
            cfg.update(self._load_yaml(env_path))
        else:
            base_dir = self._overrides.get("base_dir") or self._environ.get("ARCHITECTOR_BASE_DIR") or cfg["base_dir"]
            cfg.update(self._load_yaml(str(Path(base_dir).expanduser() / CONFIG_FILENAME)))

        for env_key, cfg_key in ENV_OVERRIDES.items():
            value = self._environ.get(env_key)
            if value:
                cfg[cfg_key] = value

        cfg.update(self._overrides)

        self._logger.debug(f"[ConfigService] Composed config; base_dir={cfg.get('base_dir')}")
        return cfg

    def _default_config(self) -> dict[str, Any]:
        return {
            "base_dir": DEFAULT_BASE_DIR,
            "project_id": None,  # From MCP_PROJECT_ID when the server is started per workspace
            "default_project_id": DEFAULT_PROJECT_ID,
            "log_level": "WARNING",
        }

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML mapping; returns {} if the file is absent or unusable.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"[ConfigService] Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"[ConfigService] Ignoring config file {path}: top level is not a mapping")
            return {}
        return data
