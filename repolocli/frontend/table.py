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

"""Table output.

Renders bordered tables with a title row:

    +------+---------+------+-----------+---------------------+
    | Name | Version | Repo | Status    | URL                 |
    +------+---------+------+-----------+---------------------+
    | curl | 8.5.0   | arch | newest    | https://curl.se/    |
    +------+---------+------+-----------+---------------------+

Packages without a status show "No status"; only the first homepage URL
is shown. A project without versions produces no table.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from repolocli.models import Package, Problem
from repolocli.results import ComparisonEntry

from .base import register_frontend


def render_table(titles: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Format titles and rows as a bordered table (no trailing newline)."""
    widths = [len(title) for title in titles]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    separator = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def fmt(cells: Sequence[str]) -> str:
        return "|" + "|".join(f" {c:<{w}} " for c, w in zip(cells, widths)) + "|"

    lines = [separator, fmt(titles), separator]
    lines.extend(fmt(row) for row in rows)
    lines.append(separator)
    return "\n".join(lines)


class TableFrontend:
    """Render results as bordered text tables."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def _print(self, titles: Sequence[str], rows: list[list[str]]) -> None:
        print(render_table(titles, rows), file=self.stream)

    def list_packages(self, packages: list[Package]) -> None:
        rows = [
            [
                pkg.name,
                pkg.version,
                pkg.repo,
                str(pkg.status) if pkg.status else "No status",
                pkg.www[0] if pkg.www else "",
            ]
            for pkg in packages
        ]
        self._print(["Name", "Version", "Repo", "Status", "URL"], rows)

    def list_problems(self, problems: list[Problem]) -> None:
        rows = [
            [p.repo, p.name, p.effname, p.maintainer, p.description]
            for p in problems
        ]
        self._print(["Repo", "Name", "EffName", "Maintainer", "Description"], rows)

    def list_versions(self, project: str, versions: list[str]) -> None:
        if not versions:
            return
        self._print(["Project", "Version"], [[project, v] for v in versions])

    def list_comparisons(self, entries: list[ComparisonEntry]) -> None:
        rows = [
            [
                e.name,
                e.local_version,
                e.repo,
                e.upstream_version,
                str(e.status) if e.status else "No status",
                e.comment,
            ]
            for e in entries
        ]
        self._print(
            ["Name", "Local", "Repo", "Upstream", "Status", "Comment"], rows
        )


register_frontend("table", TableFrontend)
