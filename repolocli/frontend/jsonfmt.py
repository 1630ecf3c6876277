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

"""JSON output.

Every call writes one complete JSON document followed by a newline. A
reconcile run therefore produces one document per tracked project (JSON
lines), which tools like ``jq`` read without further setup.
"""

from __future__ import annotations

import json
from typing import Any, TextIO

from repolocli.models import Package, Problem
from repolocli.results import ComparisonEntry

from .base import register_frontend


class JsonFrontend:
    """Render results as JSON documents."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def _dump(self, document: Any) -> None:
        json.dump(document, self.stream, indent=2)
        self.stream.write("\n")

    def list_packages(self, packages: list[Package]) -> None:
        self._dump([pkg.to_dict() for pkg in packages])

    def list_problems(self, problems: list[Problem]) -> None:
        self._dump([problem.to_dict() for problem in problems])

    def list_versions(self, project: str, versions: list[str]) -> None:
        self._dump({"project": project, "versions": versions})

    def list_comparisons(self, entries: list[ComparisonEntry]) -> None:
        self._dump(
            [
                {
                    "name": entry.name,
                    "local_version": entry.local_version,
                    "repo": entry.repo,
                    "upstream_version": entry.upstream_version,
                    "status": entry.status.value if entry.status else None,
                    "comment": entry.comment,
                }
                for entry in entries
            ]
        )


register_frontend("json", JsonFrontend)
