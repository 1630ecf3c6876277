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

"""Version database implementation for repolocli.

This module implements the persistence layer that remembers which versions
of each tracked project have already been seen, and the reconciliation of
that record against a metadata source.

File Format:
    A JSON object mapping project name to a sorted list of distinct version
    strings, written with 2-space indentation, sorted keys and a trailing
    newline:

        {
          "curl": [
            "8.4.0",
            "8.5.0"
          ]
        }

    The whole document is read at open time and the whole document is
    replaced on save. There is no schema version and no partial update.

Key Features:

- Versions are held as sets in memory: a project never lists a version twice
- Versions are compared for exact string equality (no semantic ordering)
- Dry run by default: reconcile only writes when commit=True
- Fail-fast: a failing project aborts reconcile before anything is written
- Single writer: one VersionStore owns the file for the process lifetime

Example:
    High-level API with VersionStore:
        ```python
        from pathlib import Path
        from repolocli.store import VersionStore

        store = VersionStore.open(Path("versions.json"))
        store.add_project("curl", source)
        result = store.reconcile(source, frontend, commit=True)
        ```

    Low-level API with functions:
        ```python
        from pathlib import Path
        from repolocli.store import load_store, save_store

        versions = load_store(Path("versions.json"))
        versions["curl"].add("8.6.0")
        save_store(versions, Path("versions.json"))
        ```

"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from repolocli.backend.base import MetadataSource
from repolocli.exceptions import NotFoundError, ParseError, StoreError
from repolocli.frontend.base import Frontend
from repolocli.logging import get_global_logger
from repolocli.models import Package
from repolocli.results import AddResult, ReconcileResult, distinct_versions

VersionMap = dict[str, set[str]]


class VersionStore:
    """Owns the tracked-project version record and its backing file.

    Attributes:
        path: Path to the JSON version database.
        versions: In-memory mapping of project name to known version set.

    Example:
        Dry run, then commit:
            ```python
            store = VersionStore.open(Path("versions.json"))
            store.reconcile(source, frontend)               # report only
            store.reconcile(source, frontend, commit=True)  # report and save
            ```

    """

    def __init__(self, path: Path):
        """Initialize the store without touching the filesystem.

        Args:
            path: Path to the JSON version database. Created by load() if
                it doesn't exist.

        """
        self.path = path
        self.versions: VersionMap = {}

    @classmethod
    def open(cls, path: Path) -> VersionStore:
        """Create a store for path and load it.

        Raises:
            ParseError: If the file exists but is not a valid database.
            StoreError: If the file cannot be read or created.

        """
        store = cls(path)
        store.load()
        return store

    def load(self) -> VersionMap:
        """Load the database from disk.

        Creates an empty database (and parent directories) if the file
        doesn't exist yet.

        Returns:
            The loaded mapping.

        Raises:
            ParseError: If the file exists but cannot be decoded. The file
                is left untouched.
            StoreError: If the file cannot be read or created.

        """
        logger = get_global_logger()
        try:
            self.versions = load_store(self.path)
        except FileNotFoundError:
            logger.verbose("STORE", f"Creating new version database: {self.path}")
            self.versions = {}
            self.save()
        else:
            logger.verbose(
                "STORE",
                f"Loaded {len(self.versions)} tracked project(s) from {self.path}",
            )
        return self.versions

    def save(self) -> None:
        """Write the whole mapping to disk.

        Raises:
            StoreError: If the file cannot be written.

        """
        save_store(self.versions, self.path)
        get_global_logger().debug("STORE", f"Saved version database: {self.path}")

    def _replace(self, versions: VersionMap) -> None:
        """Write versions to disk, then adopt them as the in-memory mapping.

        The mapping is only replaced once the write succeeded.
        """
        save_store(versions, self.path)
        self.versions = versions
        get_global_logger().debug("STORE", f"Saved version database: {self.path}")

    @property
    def projects(self) -> list[str]:
        """Tracked project names, sorted."""
        return sorted(self.versions)

    def known_versions(self, name: str) -> frozenset[str]:
        """Return the stored versions of a project (empty if untracked)."""
        return frozenset(self.versions.get(name, ()))

    def reconcile(
        self,
        source: MetadataSource,
        sink: Frontend,
        *,
        commit: bool = False,
    ) -> ReconcileResult:
        """Report versions that are new compared to the database.

        The tracked names are fixed when the call starts. For each project
        the packages are fetched, those whose version string is not yet
        known form the project's new result, and that result is reported
        to the sink right away as (project, distinct new versions).

        With commit=True every fetched version is merged into a working
        copy of the mapping. The working copy replaces the store's mapping
        and is written to disk once, after every project succeeded. Any
        failure aborts the call and leaves both the file and the in-memory
        mapping exactly as they were. With commit=False nothing is written.

        Args:
            source: Metadata source to fetch packages from.
            sink: Frontend receiving one list_versions() call per project.
            commit: If True, merge and persist the fetched versions.

        Returns:
            Summary of the run.

        Raises:
            RepoloError: Whatever the source or the save raised, unchanged.

        """
        logger = get_global_logger()
        names = list(self.versions)
        working: VersionMap = {name: set(known) for name, known in self.versions.items()}
        new_packages: dict[str, list[Package]] = {}

        for index, name in enumerate(names, start=1):
            logger.step(index, len(names), f"Checking {name}")
            known = working.get(name, set())

            packages = source.project(name)
            new = [pkg for pkg in packages if pkg.version not in known]
            logger.verbose(
                "STORE",
                f"{name}: {len(packages)} package(s), {len(new)} with a new version",
            )

            if commit:
                known.update(pkg.version for pkg in packages)
                working[name] = known

            new_packages[name] = new
            sink.list_versions(name, distinct_versions(new))

        if commit:
            # Replace only after every project succeeded
            self._replace(working)
            logger.verbose("STORE", "Committed new versions to the database")
        else:
            logger.verbose("STORE", "Dry run, database left unchanged")

        return ReconcileResult(
            projects=tuple(names), new_packages=new_packages, committed=commit
        )

    def show(self, source: MetadataSource, sink: Frontend) -> list[Package]:
        """Report the current upstream packages of every tracked project.

        The stored versions are ignored and nothing is modified. All
        projects are fetched before anything is reported, so a failure
        produces no output.

        Returns:
            The packages that were reported.

        """
        logger = get_global_logger()
        names = self.projects
        packages: list[Package] = []
        for index, name in enumerate(names, start=1):
            logger.step(index, len(names), f"Fetching {name}")
            packages.extend(source.project(name))
        sink.list_packages(packages)
        return packages

    def show_local(self, sink: Frontend) -> None:
        """Report the stored versions of every tracked project, offline."""
        for name in self.projects:
            sink.list_versions(name, sorted(self.versions[name]))

    def add_project(self, name: str, source: MetadataSource) -> AddResult:
        """Start tracking a project with its currently published versions.

        Any previous entry for the name is replaced. The database is
        written immediately; there is no dry-run form.

        Args:
            name: Project name to track.
            source: Metadata source to fetch the initial versions from.

        Returns:
            The stored project and versions.

        Raises:
            NotFoundError: If the source knows no packages for the project.
            RepoloError: Whatever the source or the save raised.

        """
        packages = source.project(name)
        if not packages:
            raise NotFoundError(f"No packages found for project {name!r}")

        versions = {pkg.version for pkg in packages}
        get_global_logger().debug(
            "STORE", f"Adding versions for {name}: {sorted(versions)}"
        )

        self._replace({**self.versions, name: versions})
        return AddResult(project=name, versions=tuple(sorted(versions)))


def load_store(path: Path) -> VersionMap:
    """Load the version database from a JSON file.

    Args:
        path: Path to the database.

    Returns:
        Mapping of project name to version set. Duplicate entries in a
        hand-edited file collapse.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ParseError: If the content is not a JSON object of string lists.
        StoreError: If the file cannot be read.

    """
    try:
        with open(path, encoding="utf-8") as f:
            data: Any = json.load(f)
    except FileNotFoundError:
        raise
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        raise ParseError(f"Corrupted version database {path}: {err}") from err
    except OSError as err:
        raise StoreError(f"Cannot read version database {path}: {err}") from err

    if not isinstance(data, dict):
        raise ParseError(f"Version database {path} must contain a JSON object")

    versions: VersionMap = {}
    for name, entries in data.items():
        if not isinstance(entries, list) or not all(isinstance(v, str) for v in entries):
            raise ParseError(
                f"Version database {path}: entry {name!r} must be a list of strings"
            )
        versions[name] = set(entries)
    return versions


def save_store(versions: VersionMap, path: Path) -> None:
    """Write the version database as JSON, replacing the whole file.

    Uses 2-space indentation, sorted keys and sorted version lists so the
    file diffs cleanly, plus a trailing newline.

    Raises:
        StoreError: If the file or its parent directory cannot be written.

    """
    document = {name: sorted(known) for name, known in versions.items()}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2, sort_keys=True)
            f.write("\n")
    except OSError as err:
        raise StoreError(f"Cannot write version database {path}: {err}") from err
