"""
Pytest configuration and shared fixtures for repolocli tests.

This module provides reusable fixtures and test doubles used across
the test suite.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from repolocli.exceptions import NetworkError
from repolocli.logging import SilentLogger, set_global_logger
from repolocli.models import Package


class FakeSource:
    """
    In-memory metadata source.

    Maps project name to a list of versions (or to an exception to raise).
    Records every project() call so tests can check visiting order and count.
    """

    def __init__(self, projects: dict[str, Any]):
        self.projects = projects
        self.calls: list[str] = []

    def project(self, name: str) -> list[Package]:
        self.calls.append(name)
        entry = self.projects.get(name, [])
        if isinstance(entry, Exception):
            raise entry
        return [
            Package(name=name, version=version, repo=f"repo{i}")
            for i, version in enumerate(entry)
        ]

    def problems_for_repo(self, repo: str):
        return []

    def problems_for_maintainer(self, maintainer: str):
        return []


class RecordingFrontend:
    """Frontend that keeps every call instead of rendering it."""

    def __init__(self):
        self.packages: list[list[Package]] = []
        self.problems: list[list[Any]] = []
        self.versions: list[tuple[str, list[str]]] = []
        self.comparisons: list[list[Any]] = []

    def list_packages(self, packages):
        self.packages.append(list(packages))

    def list_problems(self, problems):
        self.problems.append(list(problems))

    def list_versions(self, project, versions):
        self.versions.append((project, list(versions)))

    def list_comparisons(self, entries):
        self.comparisons.append(list(entries))


@pytest.fixture(autouse=True)
def silent_logger():
    """Reset the global logger so tests never print diagnostics."""
    set_global_logger(SilentLogger())
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def db_path(tmp_test_dir: Path) -> Path:
    """Path for a version database inside the temp directory."""
    return tmp_test_dir / "versions.json"


@pytest.fixture
def write_db(db_path: Path):
    """
    Factory fixture writing a version database.

    Usage:
        path = write_db({"foo": ["1.0"]})
    """

    def _write(data: dict[str, list[str]]) -> Path:
        db_path.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n")
        return db_path

    return _write


@pytest.fixture
def fake_source():
    """Factory for FakeSource instances."""
    return FakeSource


@pytest.fixture
def frontend() -> RecordingFrontend:
    """Provide a fresh recording frontend."""
    return RecordingFrontend()


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("config.yaml", {"key": "value"})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create


@pytest.fixture
def sample_package_payload() -> list[dict[str, Any]]:
    """Provide a repology /project response with three packages."""
    return [
        {
            "repo": "arch",
            "srcname": "curl",
            "binname": "curl",
            "visiblename": "curl",
            "version": "8.5.0",
            "status": "newest",
            "www": ["https://curl.se/"],
            "licenses": ["MIT"],
        },
        {
            "repo": "debian_12",
            "srcname": "curl",
            "version": "7.88.1",
            "status": "outdated",
        },
        {
            "repo": "freebsd",
            "name": "curl",
            "version": "8.5.0",
        },
    ]


@pytest.fixture
def sample_problem_payload() -> list[dict[str, str]]:
    """Provide a repology problems response."""
    return [
        {
            "repo": "freebsd",
            "name": "www/curl",
            "effname": "curl",
            "maintainer": "sunpoet@freebsd.org",
            "problem": "Homepage link is dead",
        },
        {
            "repo": "arch",
            "name": "curl",
            "effname": "curl",
            "maintainer": "someone@archlinux.org",
            "problem": "Homepage link is a permanent redirect",
        },
    ]


@pytest.fixture
def network_error() -> NetworkError:
    return NetworkError("connection refused")
