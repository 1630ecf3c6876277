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

"""Record types for data returned by a metadata source.

Package and Problem mirror the objects served by the repology.org API v1
(and by a replayed copy of its output). Both are frozen dataclasses: once a
record is decoded it is never mutated, only passed from the source to the
version store or straight to a frontend.

Decoding is strict about the fields the rest of the tool relies on
(repository and version for packages, every field for problems) and
lenient about everything else the API returns (summary, licenses,
maintainers, categories and so on are ignored).

Example:
    Decode an API payload:
        ```python
        from repolocli.models import parse_packages

        packages = parse_packages(response.json(), project="curl")
        for pkg in packages:
            print(pkg.repo, pkg.version, pkg.status)
        ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from repolocli.exceptions import ParseError

# Keys that can carry the package name, in order of preference. Older API
# responses have "name"; current ones split it into the other three.
_NAME_KEYS = ("name", "visiblename", "srcname", "binname")


class PackageStatus(str, Enum):
    """Version status as classified by repology."""

    NEWEST = "newest"
    DEVEL = "devel"
    UNIQUE = "unique"
    OUTDATED = "outdated"
    LEGACY = "legacy"
    ROLLING = "rolling"
    NOSCHEME = "noscheme"
    INCORRECT = "incorrect"
    UNTRUSTED = "untrusted"
    IGNORED = "ignored"

    def __str__(self) -> str:
        return self.value


def _require_str(data: dict[str, Any], key: str, kind: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ParseError(f"{kind} record is missing string field {key!r}: {data!r}")
    return value


@dataclass(frozen=True)
class Package:
    """One package observed in one repository.

    Attributes:
        name: Package name as known to the repository.
        version: Version string, compared only for exact equality.
        repo: Repository identifier (e.g., "debian_12", "arch").
        status: Repology classification, None when the source omits it.
        www: Homepage URLs, None when the source omits them.
    """

    name: str
    version: str
    repo: str
    status: PackageStatus | None = None
    www: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, data: Any, project: str | None = None) -> Package:
        """Build a Package from one decoded API record.

        Args:
            data: Mapping as found in the API response.
            project: Queried project name, used when the record carries no
                name field of its own.

        Returns:
            The decoded package.

        Raises:
            ParseError: If the record is not a mapping, lacks repo/version,
                has no usable name, or has an unknown status.
        """
        if not isinstance(data, dict):
            raise ParseError(f"Package record must be an object, got {data!r}")

        repo = _require_str(data, "repo", "Package")
        version = _require_str(data, "version", "Package")

        name = next(
            (data[key] for key in _NAME_KEYS if isinstance(data.get(key), str)),
            project,
        )
        if name is None:
            raise ParseError(f"Package record has no name field: {data!r}")

        status = None
        raw_status = data.get("status")
        if raw_status is not None:
            try:
                status = PackageStatus(raw_status)
            except ValueError as err:
                raise ParseError(f"Unknown package status {raw_status!r}") from err

        www = None
        raw_www = data.get("www")
        if raw_www is not None:
            if not isinstance(raw_www, list) or not all(
                isinstance(url, str) for url in raw_www
            ):
                raise ParseError(f"Package field 'www' must be a list of URLs: {raw_www!r}")
            www = tuple(raw_www)

        return cls(name=name, version=version, repo=repo, status=status, www=www)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "name": self.name,
            "version": self.version,
            "repo": self.repo,
            "status": self.status.value if self.status else None,
            "www": list(self.www) if self.www is not None else None,
        }


@dataclass(frozen=True)
class Problem:
    """One packaging problem reported for a repository.

    Attributes:
        repo: Repository the problem was found in.
        name: Package name in that repository.
        effname: Canonical project name the package belongs to.
        maintainer: Maintainer identity.
        description: Free-text problem description ("problem" in the API).
    """

    repo: str
    name: str
    effname: str
    maintainer: str
    description: str

    @classmethod
    def from_dict(cls, data: Any) -> Problem:
        """Build a Problem from one decoded API record.

        Raises:
            ParseError: If the record is not a mapping or a field is missing.
        """
        if not isinstance(data, dict):
            raise ParseError(f"Problem record must be an object, got {data!r}")
        return cls(
            repo=_require_str(data, "repo", "Problem"),
            name=_require_str(data, "name", "Problem"),
            effname=_require_str(data, "effname", "Problem"),
            maintainer=_require_str(data, "maintainer", "Problem"),
            description=_require_str(data, "problem", "Problem"),
        )

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-serializable representation (API field names)."""
        return {
            "repo": self.repo,
            "name": self.name,
            "effname": self.effname,
            "maintainer": self.maintainer,
            "problem": self.description,
        }


def parse_packages(payload: Any, project: str | None = None) -> list[Package]:
    """Decode a list of package records.

    Raises:
        ParseError: If the payload is not a list or a record is invalid.
    """
    if not isinstance(payload, list):
        raise ParseError(
            f"Expected a list of packages, got {type(payload).__name__}"
        )
    return [Package.from_dict(item, project=project) for item in payload]


def parse_problems(payload: Any) -> list[Problem]:
    """Decode a list of problem records.

    Raises:
        ParseError: If the payload is not a list or a record is invalid.
    """
    if not isinstance(payload, list):
        raise ParseError(
            f"Expected a list of problems, got {type(payload).__name__}"
        )
    return [Problem.from_dict(item) for item in payload]
