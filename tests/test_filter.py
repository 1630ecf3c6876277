"""
Tests for repolocli.filter module.

Tests the repository allow/deny policy as a truth table.
"""

from __future__ import annotations

import pytest

from repolocli.filter import (
    filter_packages,
    filter_problems,
    is_repo_allowed,
    repo_filter,
)
from repolocli.models import Package, Problem


class TestRepoFilter:
    """Tests for the allow/deny predicate."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("a", False),
            ("b", True),
            ("c", True),
        ],
    )
    def test_truth_table(self, name, expected):
        """Test deny ["a", "b"] with allow ["b"]."""
        accept = repo_filter(allowlist=["b"], denylist=["a", "b"])

        assert accept(name) is expected

    def test_empty_lists_accept_everything(self):
        """Test that no policy accepts every repository."""
        accept = repo_filter([], [])

        assert accept("anything")
        assert accept("")

    def test_empty_allowlist_accepts_denied_names(self):
        """Test that an empty allow-list lets every name through."""
        accept = repo_filter([], ["a"])

        assert accept("a") is True
        assert accept("freebsd") is True

    def test_denylist_with_allowlist(self):
        """Test that a deny-list rejects its entries once an allow-list exists."""
        accept = repo_filter(["arch"], ["freebsd"])

        assert not accept("freebsd")
        assert accept("arch")
        assert accept("debian_12")

    def test_allowlist_alone_does_not_restrict(self):
        """Test that allow-listing only re-admits denied names."""
        accept = repo_filter(["arch"], [])

        assert accept("arch")
        assert accept("debian_12")

    def test_exact_match_only(self):
        """Test that names are compared exactly, not by prefix or case."""
        accept = repo_filter(["arch"], ["debian"])

        assert accept("debian_12")
        assert accept("Debian")
        assert not accept("debian")

    def test_predicate_does_not_see_later_list_changes(self):
        """Test that the predicate is bound to copies of the lists."""
        deny = ["a"]
        accept = repo_filter(["x"], deny)
        deny.append("b")

        assert accept("b")

    def test_is_repo_allowed_matches_predicate(self):
        """Test the plain function agrees with the built predicate."""
        allow, deny = ["b"], ["a", "b"]
        accept = repo_filter(allow, deny)

        for name in ("a", "b", "c"):
            assert is_repo_allowed(name, allow, deny) == accept(name)


class TestFilterHelpers:
    """Tests for filtering packages and problems by repository."""

    def test_filter_packages(self):
        packages = [
            Package(name="curl", version="1", repo="arch"),
            Package(name="curl", version="2", repo="freebsd"),
        ]

        kept = filter_packages(packages, repo_filter(["arch"], ["freebsd"]))

        assert [p.repo for p in kept] == ["arch"]

    def test_filter_problems(self):
        problems = [
            Problem("arch", "curl", "curl", "m1", "x"),
            Problem("freebsd", "www/curl", "curl", "m2", "y"),
        ]

        kept = filter_problems(problems, repo_filter(["freebsd"], ["freebsd", "arch"]))

        assert [p.repo for p in kept] == ["freebsd"]
