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

"""Replay metadata source for repolocli.

Postprocess repology data that was already fetched by other means, e.g.:

    $ curl -s https://repology.org/api/v1/project/curl | repolocli --stdin project curl

The input stream is read completely when the source is constructed and is
never touched again. The JSON document is decoded on first use and the
outcome is cached: later calls return the same records, and a document that
failed to decode fails every later call with the same error.

Accepted Documents:

- A list of package records: the response of ``/project/<name>``. It is
  returned for whatever project name is asked for.
- A mapping of project name to package list: lets one snapshot cover
  several tracked projects (``db update --stdin``). Unknown names yield an
  empty list.
- A list of problem records: the response of a problems endpoint, filtered
  here by repository or maintainer.

"""

from __future__ import annotations

import json
from typing import IO, Any

from repolocli.exceptions import ParseError
from repolocli.logging import get_global_logger
from repolocli.models import Package, Problem, parse_packages, parse_problems


class ReplaySource:
    """Metadata source backed by a single pre-fetched JSON document."""

    def __init__(self, stream: IO[bytes] | IO[str]):
        """Read the whole stream.

        Args:
            stream: Binary or text stream holding one JSON document.

        Raises:
            ParseError: If the stream cannot be read.

        """
        try:
            self._raw = stream.read()
        except OSError as err:
            raise ParseError(f"Cannot read replay input: {err}") from err
        self._document: Any = None
        self._error: ParseError | None = None
        self._decoded = False

    def _load(self) -> Any:
        if not self._decoded:
            self._decoded = True
            try:
                self._document = json.loads(self._raw)
            except (ValueError, TypeError) as err:
                self._error = ParseError(f"Cannot decode replayed JSON document: {err}")
                self._error.__cause__ = err
            else:
                get_global_logger().debug(
                    "REPLAY", f"Decoded document ({type(self._document).__name__})"
                )
        if self._error is not None:
            raise self._error
        return self._document

    def project(self, name: str) -> list[Package]:
        document = self._load()
        if isinstance(document, dict):
            return parse_packages(document.get(name, []), project=name)
        return parse_packages(document, project=name)

    def problems_for_repo(self, repo: str) -> list[Problem]:
        return [p for p in parse_problems(self._load()) if p.repo == repo]

    def problems_for_maintainer(self, maintainer: str) -> list[Problem]:
        return [
            p for p in parse_problems(self._load()) if p.maintainer == maintainer
        ]
