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

"""Compare a local package list with distribution repositories.

The list names packages and the versions the user ships, and is read from
JSON or CSV depending on the file extension:

- JSON: a list of objects ``{"name": "...", "version": "...", "comment": "..."}``
- CSV: ``;``-delimited with the header ``name;version;comment``

The comment is optional in both formats.

For every entry the project is fetched from the metadata source and one
comparison row is produced per package found in one of the requested
repositories. Entries the requested repositories do not package produce
no rows. A failed fetch aborts the comparison.

Example:
    Compare against Debian and Arch:
        ```python
        from pathlib import Path
        from repolocli.compare import compare_packages, load_compare_list

        entries = load_compare_list(Path("shipped.csv"))
        rows = compare_packages(entries, ["debian_12", "arch"], source)
        outdated = [row for row in rows if row.differs]
        ```
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
import json
from pathlib import Path
from typing import Any

from repolocli.backend.base import MetadataSource
from repolocli.exceptions import ConfigError
from repolocli.logging import get_global_logger
from repolocli.results import ComparisonEntry


@dataclass(frozen=True)
class LocalPackage:
    """One entry of the local package list."""

    name: str
    version: str
    comment: str = ""


def _entry_from_dict(data: Any, path: Path) -> LocalPackage:
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: every entry must be an object, got {data!r}")
    name = data.get("name")
    version = data.get("version")
    if not isinstance(name, str) or not name:
        raise ConfigError(f"{path}: entry without a name: {data!r}")
    if not isinstance(version, str) or not version:
        raise ConfigError(f"{path}: entry {name!r} has no version")
    comment = data.get("comment") or ""
    return LocalPackage(name=name, version=version, comment=str(comment))


def _load_json_list(path: Path) -> list[LocalPackage]:
    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as err:
            raise ConfigError(f"Invalid JSON in compare list {path}: {err}") from err
    if not isinstance(data, list):
        raise ConfigError(f"{path}: compare list must be a JSON list")
    return [_entry_from_dict(item, path) for item in data]


def _load_csv_list(path: Path) -> list[LocalPackage]:
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f, delimiter=";")
        fields = reader.fieldnames or []
        if "name" not in fields or "version" not in fields:
            raise ConfigError(
                f"{path}: CSV header must be 'name;version;comment', got {fields!r}"
            )
        try:
            return [_entry_from_dict(row, path) for row in reader]
        except csv.Error as err:
            raise ConfigError(f"Invalid CSV in compare list {path}: {err}") from err


def load_compare_list(path: Path) -> list[LocalPackage]:
    """Load the local package list from a .json or .csv file.

    Args:
        path: Path to the list.

    Returns:
        The entries in file order.

    Raises:
        ConfigError: If the extension is not supported, the file cannot be
            read, or an entry is malformed.

    """
    suffix = path.suffix.lower()
    loaders = {".json": _load_json_list, ".csv": _load_csv_list}
    if suffix not in loaders:
        raise ConfigError(
            f"Unsupported compare list format {suffix or '(none)'!r}: "
            f"expected .json or .csv"
        )
    try:
        return loaders[suffix](path)
    except OSError as err:
        raise ConfigError(f"Cannot read compare list {path}: {err}") from err


def compare_packages(
    entries: list[LocalPackage],
    distros: list[str],
    source: MetadataSource,
) -> list[ComparisonEntry]:
    """Compare local entries with the packages of the given repositories.

    Args:
        entries: Local package list.
        distros: Repository names to compare against.
        source: Metadata source to fetch projects from.

    Returns:
        One row per (entry, matching package), in entry order.

    """
    logger = get_global_logger()
    wanted = set(distros)
    rows: list[ComparisonEntry] = []

    for index, entry in enumerate(entries, start=1):
        logger.step(index, len(entries), f"Comparing {entry.name}")
        matches = [pkg for pkg in source.project(entry.name) if pkg.repo in wanted]
        if not matches:
            logger.verbose("COMPARE", f"{entry.name}: not packaged in {sorted(wanted)}")
        rows.extend(
            ComparisonEntry(
                name=entry.name,
                local_version=entry.version,
                repo=pkg.repo,
                upstream_version=pkg.version,
                status=pkg.status,
                comment=entry.comment,
            )
            for pkg in matches
        )
    return rows
