"""
repolocli - track package versions published across distributions

A Python CLI that queries the repology.org API (or a replayed copy of its
output), postprocesses the result and keeps a local database of the
versions already seen for a set of tracked projects.

repolocli provides:
  - Project and problem queries with table, JSON and line output
  - A repository allow/deny policy applied to query output
  - A version database reporting newly published versions (dry run by default)
  - Comparison of a local package list with distribution repositories
  - Offline replay of pre-fetched API responses from stdin

Quick Start
-----------
Show where a project is packaged:

    $ repolocli project curl

Track a project and check for new versions later:

    $ repolocli db add curl
    $ repolocli db update            # report only
    $ repolocli db update --commit   # report and record

For full CLI documentation:

    $ repolocli --help

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
core : module
    Project and problem queries.
store : package
    Version database and reconciliation.
backend : package
    Metadata sources (replay and remote).
frontend : package
    Result renderers.
config : package
    YAML configuration loading.

Project Information
-------------------
Author: Roger Cibrian
License: Apache-2.0
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "Query repology.org and track newly published package versions"

# Re-export commonly used names for convenience
from repolocli.backend import MetadataSource, RemoteSource, ReplaySource
from repolocli.config import load_config
from repolocli.exceptions import (
    ConfigError,
    NetworkError,
    NotFoundError,
    ParseError,
    RepoloError,
    StoreError,
)
from repolocli.filter import is_repo_allowed, repo_filter
from repolocli.models import Package, Problem
from repolocli.results import AddResult, ReconcileResult
from repolocli.store import VersionStore

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "AddResult",
    "ConfigError",
    "MetadataSource",
    "NetworkError",
    "NotFoundError",
    "Package",
    "ParseError",
    "Problem",
    "ReconcileResult",
    "RemoteSource",
    "RepoloError",
    "ReplaySource",
    "StoreError",
    "VersionStore",
    "is_repo_allowed",
    "load_config",
    "repo_filter",
]
