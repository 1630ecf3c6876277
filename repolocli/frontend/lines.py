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

"""Line-oriented output, the default format.

One record per line, fields separated by a single space, so the output
can be consumed with grep, cut or awk. Missing values are written as "-".
"""

from __future__ import annotations

from typing import TextIO

from repolocli.models import Package, Problem
from repolocli.results import ComparisonEntry

from .base import register_frontend


class LinesFrontend:
    """Render results as plain lines."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def _line(self, *fields: str) -> None:
        print(" ".join(fields), file=self.stream)

    def list_packages(self, packages: list[Package]) -> None:
        for pkg in packages:
            status = str(pkg.status) if pkg.status else "-"
            url = pkg.www[0] if pkg.www else "-"
            self._line(pkg.name, pkg.version, pkg.repo, status, url)

    def list_problems(self, problems: list[Problem]) -> None:
        for problem in problems:
            self._line(
                problem.repo,
                problem.name,
                problem.effname,
                problem.maintainer,
                problem.description,
            )

    def list_versions(self, project: str, versions: list[str]) -> None:
        for version in versions:
            self._line(project, version)

    def list_comparisons(self, entries: list[ComparisonEntry]) -> None:
        for entry in entries:
            self._line(
                entry.name,
                entry.local_version,
                entry.repo,
                entry.upstream_version,
                str(entry.status) if entry.status else "-",
            )


register_frontend("lines", LinesFrontend)
