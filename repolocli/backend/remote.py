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

"""Remote metadata source for repolocli (repology.org API v1).

Every call issues one live HTTP GET and decodes the answer; nothing is
cached between calls.

Endpoints (relative to the configured repology_url):

- ``project/<name>``: all packages of a project
- ``repository/<repo>/problems``: problems reported for a repository
- ``maintainer/<maintainer>/problems``: problems reported for a maintainer

Path segments are percent-encoded, so project names containing "/" or
spaces are safe.

Error Handling:

- NetworkError: connection failures and any non-2xx status
- ParseError: response body is not JSON or not the expected list shape
- Errors are chained with 'from err'
- No retries; a transient failure is surfaced immediately

Example:
    Query a project:
        ```python
        from repolocli.backend.remote import RemoteSource

        source = RemoteSource("https://repology.org/api/v1")
        for pkg in source.project("curl"):
            print(pkg.repo, pkg.version)
        ```

Note:
    No timeout is applied unless one is passed to the constructor; callers
    that need one should set it there.

"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import requests

from repolocli import __version__
from repolocli.exceptions import NetworkError, ParseError
from repolocli.logging import get_global_logger
from repolocli.models import Package, Problem, parse_packages, parse_problems


class RemoteSource:
    """Metadata source querying a repology-compatible HTTP API."""

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        """Initialize the remote source.

        Args:
            base_url: API root, e.g. "https://repology.org/api/v1".
            session: Optional requests session to reuse connections.
            timeout: Optional per-request timeout in seconds.

        """
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.headers = {
            "Accept": "application/json",
            "User-Agent": f"repolocli/{__version__}",
        }

    def _url(self, *segments: str) -> str:
        return "/".join([self.base_url, *(quote(s, safe="") for s in segments)])

    def _get_json(self, url: str) -> Any:
        logger = get_global_logger()
        logger.debug("HTTP", f"GET {url}")

        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as err:
            raise NetworkError(
                f"Request to {url} failed: {response.status_code} {response.reason}"
            ) from err
        except requests.exceptions.RequestException as err:
            raise NetworkError(f"Failed to query {url}: {err}") from err

        logger.debug("HTTP", f"Response: {response.status_code}")

        try:
            return response.json()
        except ValueError as err:
            raise ParseError(
                f"Invalid JSON response from {url}. Response: {response.text[:200]}"
            ) from err

    def project(self, name: str) -> list[Package]:
        payload = self._get_json(self._url("project", name))
        return parse_packages(payload, project=name)

    def problems_for_repo(self, repo: str) -> list[Problem]:
        payload = self._get_json(self._url("repository", repo, "problems"))
        return parse_problems(payload)

    def problems_for_maintainer(self, maintainer: str) -> list[Problem]:
        payload = self._get_json(self._url("maintainer", maintainer, "problems"))
        return parse_problems(payload)
