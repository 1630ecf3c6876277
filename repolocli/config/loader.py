"""
Configuration loading for repolocli.

The configuration is a single YAML document read once at process start.
It is small on purpose: where to find the repology API and which
repositories the user cares about.

Configuration File
------------------
Default location: ``$XDG_CONFIG_HOME/repolocli/config.yaml`` (falling back
to ``~/.config/repolocli/config.yaml``). Overridden with ``--config``.

    repology_url: "https://repology.org/api/v1"
    allowlist:
      - debian_unstable
    denylist:
      - debian_unstable
      - freebsd

Every key is optional. A missing default file is not an error (built-in
defaults are used); a missing file given explicitly is.

Functions
---------
load_config : function
    Load and validate the configuration (main public API).
default_config_path : function
    Location of the per-user configuration file.
default_database_path : function
    Location of the per-user version database.

Private Helpers
---------------
_load_yaml_file : Load YAML with error handling
_string_list : Validate an allowlist/denylist entry
_validate_url : Validate the repology_url entry

Error Handling
--------------
- ConfigError for a missing explicit file, YAML parse errors, a non-mapping
  top level, or values of the wrong type
- All errors are chained with "from err"

Examples
--------
    >>> from repolocli.config import load_config
    >>> cfg = load_config()
    >>> cfg.repology_url
    'https://repology.org/api/v1'
    >>> cfg.denylist
    ()
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml

from repolocli.exceptions import ConfigError
from repolocli.logging import get_global_logger

DEFAULT_REPOLOGY_URL = "https://repology.org/api/v1"

# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class Configuration:
    """
    Effective configuration, immutable for the lifetime of the process.

    The lists are stored as tuples so that a loaded configuration cannot be
    modified by accident after the filter has been built from it.
    """

    repology_url: str = DEFAULT_REPOLOGY_URL
    allowlist: tuple[str, ...] = ()
    denylist: tuple[str, ...] = ()
    source_path: Path | None = None


# -------------------------------
# Default locations
# -------------------------------


def _xdg_dir(env_var: str, fallback: str) -> Path:
    value = os.environ.get(env_var)
    if value:
        return Path(value)
    return Path.home() / fallback


def default_config_path() -> Path:
    """Return the per-user configuration file path."""
    return _xdg_dir("XDG_CONFIG_HOME", ".config") / "repolocli" / "config.yaml"


def default_database_path() -> Path:
    """Return the per-user version database path."""
    return _xdg_dir("XDG_DATA_HOME", ".local/share") / "repolocli" / "versions.json"


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """
    Load a YAML file and return the parsed Python object.

    Raises:
      ConfigError - when the file cannot be read or is not valid YAML
    """
    try:
        with p.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    except OSError as err:
        raise ConfigError(f"Cannot read configuration file {p}: {err}") from err


# -------------------------------
# Validation
# -------------------------------


def _string_list(cfg: dict[str, Any], key: str, path: Path) -> tuple[str, ...]:
    value = cfg.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{path}: '{key}' must be a list of repository names")
    return tuple(value)


def _validate_url(cfg: dict[str, Any], path: Path) -> str:
    url = cfg.get("repology_url", DEFAULT_REPOLOGY_URL)
    if not isinstance(url, str) or not url.strip():
        raise ConfigError(f"{path}: 'repology_url' must be a non-empty string")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"{path}: 'repology_url' is not an http(s) URL: {url!r}")
    return url.rstrip("/")


# -------------------------------
# Public API
# -------------------------------


def load_config(path: Path | None = None) -> Configuration:
    """
    Load the effective configuration.

    Steps
      1) Use 'path' when given, else the default per-user location.
      2) Missing default file -> built-in defaults. Missing explicit file
         -> ConfigError.
      3) Read YAML; an empty document counts as an empty mapping.
      4) Validate repology_url, allowlist and denylist.

    Returns
      A frozen Configuration.

    Raises
      ConfigError on a missing explicit file, YAML errors or invalid values.
    """
    logger = get_global_logger()

    explicit = path is not None
    config_path = path if path is not None else default_config_path()

    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Configuration file not found: {config_path}")
        logger.verbose("CONFIG", f"No configuration at {config_path}, using defaults")
        return Configuration()

    logger.verbose("CONFIG", f"Loading configuration: {config_path}")
    data = _load_yaml_file(config_path)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Top-level YAML must be a mapping (dict): {config_path}")

    config = Configuration(
        repology_url=_validate_url(data, config_path),
        allowlist=_string_list(data, "allowlist", config_path),
        denylist=_string_list(data, "denylist", config_path),
        source_path=config_path,
    )
    logger.debug(
        "CONFIG",
        f"url={config.repology_url} allowlist={list(config.allowlist)} "
        f"denylist={list(config.denylist)}",
    )
    return config
