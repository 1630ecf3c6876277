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

"""Public API return types for repolocli.

These dataclasses describe the outcome of the version store operations.
Results are also streamed to a frontend while an operation runs; these
types are for programmatic callers that want the full picture afterwards.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Example:
    Using result types:
        ```python
        from repolocli.results import ReconcileResult

        result: ReconcileResult = store.reconcile(source, frontend)
        for project, versions in result.new_versions.items():
            print(project, versions)
        ```
"""

from __future__ import annotations

from dataclasses import dataclass

from repolocli.models import Package, PackageStatus


def distinct_versions(packages: list[Package]) -> list[str]:
    """Return the version strings of packages, deduplicated, first-seen order."""
    return list(dict.fromkeys(pkg.version for pkg in packages))


@dataclass(frozen=True)
class ReconcileResult:
    """Result of reconciling the store against a metadata source.

    Attributes:
        projects: Tracked project names visited, in visiting order.
        new_packages: Per project, the fetched packages whose version was
            not known before the call.
        committed: True if the merged versions were written to disk.
    """

    projects: tuple[str, ...]
    new_packages: dict[str, list[Package]]
    committed: bool

    @property
    def new_versions(self) -> dict[str, list[str]]:
        """Per project, the distinct new version strings."""
        return {
            name: distinct_versions(packages)
            for name, packages in self.new_packages.items()
        }

    @property
    def has_updates(self) -> bool:
        """True if any project has at least one new version."""
        return any(self.new_packages.values())


@dataclass(frozen=True)
class AddResult:
    """Result of adding a project to the store.

    Attributes:
        project: Project name that was added (or replaced).
        versions: Distinct versions stored for it, sorted.
    """

    project: str
    versions: tuple[str, ...]


@dataclass(frozen=True)
class ComparisonEntry:
    """One row of a comparison between a local package list and a repository.

    Attributes:
        name: Project name from the local list.
        local_version: Version from the local list.
        repo: Repository the upstream package was found in.
        upstream_version: Version packaged in that repository.
        status: Repology classification of the upstream package, if any.
        comment: Free-text comment from the local list.
    """

    name: str
    local_version: str
    repo: str
    upstream_version: str
    status: PackageStatus | None
    comment: str

    @property
    def differs(self) -> bool:
        """True if the repository packages another version string."""
        return self.local_version != self.upstream_version
