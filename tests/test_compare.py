"""
Tests for repolocli.compare module.

Tests loading local package lists and comparing them with repositories.
"""

from __future__ import annotations

import json

import pytest

from repolocli.compare import LocalPackage, compare_packages, load_compare_list
from repolocli.exceptions import ConfigError, NetworkError


class TestLoadCompareList:
    """Tests for reading the local package list."""

    def test_json_list(self, tmp_test_dir):
        path = tmp_test_dir / "shipped.json"
        path.write_text(
            json.dumps(
                [
                    {"name": "curl", "version": "8.5.0", "comment": "patched"},
                    {"name": "zlib", "version": "1.3"},
                ]
            )
        )

        entries = load_compare_list(path)

        assert entries == [
            LocalPackage("curl", "8.5.0", "patched"),
            LocalPackage("zlib", "1.3", ""),
        ]

    def test_csv_list(self, tmp_test_dir):
        path = tmp_test_dir / "shipped.csv"
        path.write_text("name;version;comment\ncurl;8.5.0;patched\nzlib;1.3;\n")

        entries = load_compare_list(path)

        assert entries == [
            LocalPackage("curl", "8.5.0", "patched"),
            LocalPackage("zlib", "1.3", ""),
        ]

    def test_csv_without_comment_column(self, tmp_test_dir):
        path = tmp_test_dir / "shipped.CSV"
        path.write_text("name;version\ncurl;8.5.0\n")

        assert load_compare_list(path) == [LocalPackage("curl", "8.5.0")]

    def test_csv_bad_header_raises(self, tmp_test_dir):
        path = tmp_test_dir / "shipped.csv"
        path.write_text("package,version\ncurl,8.5.0\n")

        with pytest.raises(ConfigError, match="CSV header"):
            load_compare_list(path)

    def test_unsupported_extension_raises(self, tmp_test_dir):
        path = tmp_test_dir / "shipped.txt"
        path.write_text("curl 8.5.0\n")

        with pytest.raises(ConfigError, match="Unsupported compare list format"):
            load_compare_list(path)

    def test_missing_file_raises(self, tmp_test_dir):
        with pytest.raises(ConfigError, match="Cannot read compare list"):
            load_compare_list(tmp_test_dir / "absent.json")

    def test_invalid_json_raises(self, tmp_test_dir):
        path = tmp_test_dir / "shipped.json"
        path.write_text("[{")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_compare_list(path)

    def test_json_object_raises(self, tmp_test_dir):
        path = tmp_test_dir / "shipped.json"
        path.write_text('{"curl": "8.5.0"}')

        with pytest.raises(ConfigError, match="must be a JSON list"):
            load_compare_list(path)

    def test_entry_without_version_raises(self, tmp_test_dir):
        path = tmp_test_dir / "shipped.json"
        path.write_text('[{"name": "curl"}]')

        with pytest.raises(ConfigError, match="has no version"):
            load_compare_list(path)


class TestComparePackages:
    """Tests for building comparison rows."""

    def test_rows_for_requested_repos_only(self, fake_source):
        source = fake_source({"curl": ["8.5.0", "7.88.1", "8.4.0"]})
        entries = [LocalPackage("curl", "8.5.0", "ours")]

        rows = compare_packages(entries, ["repo1", "repo2"], source)

        assert [(r.repo, r.upstream_version) for r in rows] == [
            ("repo1", "7.88.1"),
            ("repo2", "8.4.0"),
        ]
        assert all(r.local_version == "8.5.0" and r.comment == "ours" for r in rows)
        assert [r.differs for r in rows] == [True, True]

    def test_same_version_does_not_differ(self, fake_source):
        source = fake_source({"curl": ["8.5.0"]})

        rows = compare_packages([LocalPackage("curl", "8.5.0")], ["repo0"], source)

        assert len(rows) == 1
        assert not rows[0].differs

    def test_unpackaged_entry_produces_no_rows(self, fake_source):
        source = fake_source({"curl": ["8.5.0"]})

        rows = compare_packages(
            [LocalPackage("curl", "8.5.0"), LocalPackage("zlib", "1.3")],
            ["repo0"],
            source,
        )

        assert [r.name for r in rows] == ["curl"]
        assert source.calls == ["curl", "zlib"]

    def test_source_error_propagates(self, fake_source, network_error):
        source = fake_source({"curl": network_error})

        with pytest.raises(NetworkError):
            compare_packages([LocalPackage("curl", "8.5.0")], ["repo0"], source)
