# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration loading for repolocli.

Public API:

- Configuration: Frozen configuration (repology URL, allow/deny lists)
- load_config: Load and validate the YAML configuration file
- default_config_path / default_database_path: Per-user file locations

Example:
    Basic usage:

        from pathlib import Path
        from repolocli.config import load_config

        config = load_config(Path("~/.config/repolocli/config.yaml").expanduser())
        print(config.repology_url)

"""

from .loader import (
    DEFAULT_REPOLOGY_URL,
    Configuration,
    default_config_path,
    default_database_path,
    load_config,
)

__all__ = [
    "DEFAULT_REPOLOGY_URL",
    "Configuration",
    "default_config_path",
    "default_database_path",
    "load_config",
]
