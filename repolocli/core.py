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

"""Query orchestration for repolocli.

This module ties a metadata source to the repository policy filter for the
read-only commands (``project`` and ``problems``). The version database
operations live in repolocli.store.

Design Principles:

- Fetch, then filter by repository, then sort; rendering is left to the caller
- Sorting is by plain string comparison; versions have no semantic order here
- Errors from the source propagate unchanged

Example:
    Programmatic usage:
        ```python
        from repolocli.backend import RemoteSource
        from repolocli.core import query_project
        from repolocli.filter import repo_filter

        source = RemoteSource("https://repology.org/api/v1")
        packages = query_project(
            source, "curl", repo_filter(["arch"], ["freebsd"]), sort_by="repo"
        )
        ```

"""

from __future__ import annotations

from typing import Literal

from repolocli.backend.base import MetadataSource
from repolocli.exceptions import ConfigError
from repolocli.filter import RepoPredicate, filter_packages, filter_problems
from repolocli.logging import get_global_logger
from repolocli.models import Package, Problem

PackageSort = Literal["version", "repo"]
ProblemSort = Literal["maintainer", "repo"]


def query_project(
    source: MetadataSource,
    name: str,
    predicate: RepoPredicate,
    sort_by: PackageSort | None = None,
) -> list[Package]:
    """Fetch a project's packages restricted to accepted repositories.

    Args:
        source: Metadata source to query.
        name: Project name.
        predicate: Repository policy (see repolocli.filter.repo_filter).
        sort_by: "version" or "repo" to sort the result, None to keep the
            source order.

    Returns:
        The accepted packages.

    """
    logger = get_global_logger()
    packages = source.project(name)
    accepted = filter_packages(packages, predicate)
    logger.verbose(
        "QUERY",
        f"{name}: {len(packages)} package(s), {len(accepted)} after repo filter",
    )

    if sort_by == "version":
        accepted.sort(key=lambda pkg: pkg.version)
    elif sort_by == "repo":
        accepted.sort(key=lambda pkg: pkg.repo)
    return accepted


def query_problems(
    source: MetadataSource,
    predicate: RepoPredicate,
    *,
    repo: str | None = None,
    maintainer: str | None = None,
    sort_by: ProblemSort | None = None,
) -> list[Problem]:
    """Fetch problems for a repository or a maintainer.

    Exactly one of repo and maintainer must be given.

    Raises:
        ConfigError: If neither or both of repo and maintainer are given.

    """
    if (repo is None) == (maintainer is None):
        raise ConfigError("Specify exactly one of repository or maintainer")

    if repo is not None:
        problems = source.problems_for_repo(repo)
    else:
        problems = source.problems_for_maintainer(maintainer)

    accepted = filter_problems(problems, predicate)
    get_global_logger().verbose(
        "QUERY", f"{len(problems)} problem(s), {len(accepted)} after repo filter"
    )

    if sort_by == "maintainer":
        accepted.sort(key=lambda p: p.maintainer)
    elif sort_by == "repo":
        accepted.sort(key=lambda p: p.repo)
    return accepted
