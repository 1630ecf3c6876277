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

"""Metadata source protocol and backend selection for repolocli.

This module defines the interface every metadata source implements and the
factory the CLI uses to pick one:

- MetadataSource protocol: project / problems_for_repo / problems_for_maintainer
- new_backend(): choose between the replay and remote variants

Two variants exist:

- replay: a pre-fetched JSON document read once (usually from stdin)
- remote: live queries against the repology.org API v1

Design Philosophy:
    - Sources are Protocol classes (structural subtyping, not inheritance)
    - The version store only ever sees a MetadataSource, never a variant
    - Sources hold no state beyond their input (a document or an endpoint)
    - Every failure is raised; partial results are never synthesized

Example:
    Implementing a custom source for tests:
        ```python
        from repolocli.models import Package

        class FixedSource:
            def __init__(self, data):
                self.data = data

            def project(self, name):
                return self.data.get(name, [])

            def problems_for_repo(self, repo):
                return []

            def problems_for_maintainer(self, maintainer):
                return []
        ```

"""

from __future__ import annotations

import sys
from typing import BinaryIO, Protocol

from repolocli.config import Configuration
from repolocli.logging import get_global_logger
from repolocli.models import Package, Problem


class MetadataSource(Protocol):
    """Protocol for package metadata sources.

    Implementations return fully decoded records or raise a RepoloError
    subclass (NetworkError, ParseError). They never return partial data.
    """

    def project(self, name: str) -> list[Package]:
        """Return every known package of a project across all repositories.

        Args:
            name: Project name (e.g., "firefox").

        Returns:
            Package records, possibly empty for an unknown project.

        Raises:
            NetworkError: On transport failures (remote only).
            ParseError: If the payload does not have the expected shape.

        """
        ...

    def problems_for_repo(self, repo: str) -> list[Problem]:
        """Return the problems reported for one repository."""
        ...

    def problems_for_maintainer(self, maintainer: str) -> list[Problem]:
        """Return the problems reported for one maintainer."""
        ...


def new_backend(
    config: Configuration,
    use_stdin: bool = False,
    stream: BinaryIO | None = None,
) -> MetadataSource:
    """Select the metadata source for this run.

    Args:
        config: Effective configuration (provides repology_url).
        use_stdin: If True, replay a JSON document instead of querying the
            remote API.
        stream: Byte stream to replay. Defaults to sys.stdin.buffer.

    Returns:
        A ReplaySource or a RemoteSource.

    Note:
        The replay stream is consumed immediately, so this should be called
        once per process.

    """
    from .remote import RemoteSource
    from .replay import ReplaySource

    logger = get_global_logger()
    if use_stdin:
        logger.verbose("BACKEND", "Replaying metadata from stdin")
        return ReplaySource(stream if stream is not None else sys.stdin.buffer)

    logger.verbose("BACKEND", "Constructing remote backend")
    logger.debug("BACKEND", f"url = {config.repology_url}")
    return RemoteSource(config.repology_url)
