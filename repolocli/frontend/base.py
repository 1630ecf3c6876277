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

"""Frontend protocol and registry for repolocli.

A frontend receives already computed results and renders them to a text
stream. It makes no decisions: sorting and filtering happen before the
frontend is called.

- Frontend protocol: the four list_* methods every renderer implements
- Frontend registry: dict mapping output format names to implementations
- Registration and lookup functions: register_frontend() and get_frontend()

Available formats (self-registered on import of repolocli.frontend):

- lines: one whitespace-separated record per line (default)
- json: one JSON document per call
- table: bordered text tables

Example:
    Registering a custom renderer:
        ```python
        from repolocli.frontend.base import register_frontend

        class CountFrontend:
            def __init__(self, stream):
                self.stream = stream

            def list_packages(self, packages):
                print(len(packages), file=self.stream)

            ...

        register_frontend("count", CountFrontend)
        ```

"""

from __future__ import annotations

from typing import Protocol, TextIO

from repolocli.exceptions import ConfigError
from repolocli.models import Package, Problem
from repolocli.results import ComparisonEntry


class Frontend(Protocol):
    """Protocol for result renderers."""

    def list_packages(self, packages: list[Package]) -> None:
        """Render package records."""
        ...

    def list_problems(self, problems: list[Problem]) -> None:
        """Render problem records."""
        ...

    def list_versions(self, project: str, versions: list[str]) -> None:
        """Render the versions of one project (new or stored)."""
        ...

    def list_comparisons(self, entries: list[ComparisonEntry]) -> None:
        """Render a comparison of a local package list with repositories."""
        ...


# -------------------------------
# Frontend Registry
# -------------------------------

_FRONTEND_REGISTRY: dict[str, type[Frontend]] = {}


def register_frontend(name: str, frontend_class: type[Frontend]) -> None:
    """Register a frontend by output format name.

    Registering the same name twice overwrites the previous registration.

    Args:
        name: Format name as used with ``--output``.
        frontend_class: Class taking the output stream as its only argument.

    """
    _FRONTEND_REGISTRY[name] = frontend_class


def available_frontends() -> list[str]:
    """Return the registered format names, sorted."""
    return sorted(_FRONTEND_REGISTRY)


def get_frontend(name: str, stream: TextIO) -> Frontend:
    """Instantiate the frontend registered under name.

    Args:
        name: Format name (e.g., "table"). Case-sensitive.
        stream: Text stream the frontend writes to.

    Returns:
        A new frontend instance bound to stream.

    Raises:
        ConfigError: If the name is not registered. The message lists the
            available formats.

    """
    if name not in _FRONTEND_REGISTRY:
        available = ", ".join(available_frontends())
        raise ConfigError(
            f"Unknown output format: {name!r}. Available: {available or '(none)'}"
        )
    return _FRONTEND_REGISTRY[name](stream)
