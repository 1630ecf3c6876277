"""
Tests for repolocli.models module.

Tests decoding of package and problem records.
"""

from __future__ import annotations

import pytest

from repolocli.exceptions import ParseError
from repolocli.models import (
    Package,
    PackageStatus,
    Problem,
    parse_packages,
    parse_problems,
)


class TestPackage:
    """Tests for Package.from_dict."""

    def test_full_record(self):
        pkg = Package.from_dict(
            {
                "repo": "arch",
                "visiblename": "curl",
                "version": "8.5.0",
                "status": "outdated",
                "www": ["https://curl.se/", "https://github.com/curl/curl"],
                "summary": "ignored",
            }
        )

        assert pkg == Package(
            name="curl",
            version="8.5.0",
            repo="arch",
            status=PackageStatus.OUTDATED,
            www=("https://curl.se/", "https://github.com/curl/curl"),
        )

    def test_name_preference(self):
        """Test that "name" wins over the split name fields."""
        pkg = Package.from_dict(
            {"repo": "r", "version": "1", "name": "a", "srcname": "b"}
        )

        assert pkg.name == "a"

    def test_name_falls_back_to_project(self):
        pkg = Package.from_dict({"repo": "r", "version": "1"}, project="foo")

        assert pkg.name == "foo"

    def test_missing_name_without_project_raises(self):
        with pytest.raises(ParseError, match="no name"):
            Package.from_dict({"repo": "r", "version": "1"})

    def test_optional_fields_default_to_none(self):
        pkg = Package.from_dict({"repo": "r", "version": "1"}, project="foo")

        assert pkg.status is None
        assert pkg.www is None

    @pytest.mark.parametrize("missing", ["repo", "version"])
    def test_missing_required_field_raises(self, missing):
        data = {"repo": "r", "version": "1", "name": "foo"}
        del data[missing]

        with pytest.raises(ParseError, match=missing):
            Package.from_dict(data)

    def test_unknown_status_raises(self):
        with pytest.raises(ParseError, match="Unknown package status"):
            Package.from_dict({"repo": "r", "version": "1", "name": "a", "status": "shiny"})

    def test_non_mapping_raises(self):
        with pytest.raises(ParseError, match="must be an object"):
            Package.from_dict(["not", "a", "dict"])

    def test_to_dict(self):
        pkg = Package("curl", "1", "arch", PackageStatus.NEWEST, ("https://curl.se/",))

        assert pkg.to_dict() == {
            "name": "curl",
            "version": "1",
            "repo": "arch",
            "status": "newest",
            "www": ["https://curl.se/"],
        }


class TestProblem:
    """Tests for Problem.from_dict."""

    def test_from_dict(self, sample_problem_payload):
        problem = Problem.from_dict(sample_problem_payload[0])

        assert problem.repo == "freebsd"
        assert problem.effname == "curl"
        assert problem.description == "Homepage link is dead"
        assert problem.to_dict() == sample_problem_payload[0]

    def test_missing_field_raises(self):
        with pytest.raises(ParseError, match="problem"):
            Problem.from_dict(
                {"repo": "r", "name": "n", "effname": "e", "maintainer": "m"}
            )


class TestParseLists:
    """Tests for list-level decoding."""

    def test_parse_packages(self, sample_package_payload):
        packages = parse_packages(sample_package_payload, project="curl")

        assert len(packages) == 3

    def test_parse_packages_rejects_non_list(self):
        with pytest.raises(ParseError, match="Expected a list of packages"):
            parse_packages({"repo": "arch"})

    def test_parse_problems_rejects_non_list(self):
        with pytest.raises(ParseError, match="Expected a list of problems"):
            parse_problems("nope")
