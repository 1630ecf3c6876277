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

"""Exception hierarchy for repolocli.

This module defines the exceptions raised by the library so callers can
tell the different failure kinds apart:

- ConfigError: Configuration problems (YAML parse, wrong types, bad URL)
- NetworkError: Transport failures and non-success HTTP responses
- ParseError: Malformed version database or metadata payload
- StoreError: Version database cannot be read, created or written
- NotFoundError: A project yields no packages where at least one is required

All exceptions inherit from RepoloError, so the CLI (or any other caller)
can catch every repolocli failure with a single except clause.

Example:
    Catching specific error types:
        ```python
        from repolocli.exceptions import NetworkError, NotFoundError

        try:
            store.add_project("firefox", source)
        except NotFoundError as e:
            print(f"Unknown project: {e}")
        except NetworkError as e:
            print(f"Network error: {e}")
        ```

    Catching all repolocli errors:
        ```python
        from repolocli.exceptions import RepoloError

        try:
            store.reconcile(source, frontend, commit=True)
        except RepoloError as e:
            print(f"Error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "RepoloError",
    "ConfigError",
    "NetworkError",
    "ParseError",
    "StoreError",
    "NotFoundError",
]


class RepoloError(Exception):
    """Base exception for all repolocli errors."""

    pass


class ConfigError(RepoloError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - YAML parsing of the configuration file
    - Missing configuration file given explicitly with --config
    - Invalid field types (allowlist/denylist must be lists of strings)
    - Invalid repology_url
    - Unknown output format or unreadable compare list
    """

    pass


class NetworkError(RepoloError):
    """Raised when the remote metadata source cannot be queried.

    Covers connection failures, timeouts imposed by the caller and any
    non-success HTTP status. Requests are never retried.
    """

    pass


class ParseError(RepoloError):
    """Raised when a document cannot be decoded into the expected shape.

    Used for both the on-disk version database and metadata payloads
    (remote responses or a replayed document).
    """

    pass


class StoreError(RepoloError):
    """Raised when the version database file cannot be read or written."""

    pass


class NotFoundError(RepoloError):
    """Raised when a project yields no packages where one is required.

    Example:
        Adding an unknown project:
            ```python
            from repolocli.exceptions import NotFoundError

            try:
                store.add_project("no-such-project", source)
            except NotFoundError as e:
                print(e)  # No packages found for project 'no-such-project'
            ```
    """

    pass
