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

"""Repository allow/deny policy for repolocli.

A repository name is accepted when it is absent from the deny-list, or
when it passes the allow-list. An empty allow-list passes every name, so a
deny-list only takes effect together with a non-empty allow-list; the
allow-list then re-admits the denied names it lists.

    denylist = ["a", "b"], allowlist = ["b"]

    name | denied | allowed | accepted
    -----+--------+---------+---------
    a    | yes    | no      | no
    b    | yes    | yes     | yes
    c    | no     | no      | yes

    denylist = ["a"], allowlist = []

    name | denied | allowed | accepted
    -----+--------+---------+---------
    a    | yes    | (empty) | yes

Names are compared for exact equality. The functions here are pure: no
I/O, and the lists are never modified.

Example:
    Restrict CLI output to the configured repositories:
        ```python
        from repolocli.filter import filter_packages, repo_filter

        accept = repo_filter(config.allowlist, config.denylist)
        packages = filter_packages(source.project("curl"), accept)
        ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from repolocli.models import Package, Problem

RepoPredicate = Callable[[str], bool]


def is_repo_allowed(
    name: str, allowlist: Sequence[str], denylist: Sequence[str]
) -> bool:
    """Return True if the repository passes the allow/deny policy."""
    if not allowlist:
        return True
    return name not in denylist or name in allowlist


def repo_filter(allowlist: Iterable[str], denylist: Iterable[str]) -> RepoPredicate:
    """Build the repository predicate from the two lists.

    Args:
        allowlist: Repository names that are always accepted. When empty,
            every name is accepted.
        denylist: Repository names that are rejected unless allow-listed.

    Returns:
        A function mapping a repository name to True (accept) or False.
    """
    allow = tuple(allowlist)
    deny = tuple(denylist)

    def accept(name: str) -> bool:
        return is_repo_allowed(name, allow, deny)

    return accept


def filter_packages(
    packages: Iterable[Package], predicate: RepoPredicate
) -> list[Package]:
    """Keep packages whose repository the predicate accepts."""
    return [pkg for pkg in packages if predicate(pkg.repo)]


def filter_problems(
    problems: Iterable[Problem], predicate: RepoPredicate
) -> list[Problem]:
    """Keep problems whose repository the predicate accepts."""
    return [problem for problem in problems if predicate(problem.repo)]
