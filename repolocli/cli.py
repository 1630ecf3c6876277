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

"""Command-line interface for repolocli.

Commands:

    project: List the packages of a project across repositories
    problems: List problems reported for a repository or maintainer
    compare: Compare a local package list with distribution repositories
    db update: Report (and with --commit record) newly published versions
    db show: Show upstream packages of tracked projects (or stored versions)
    db add: Start tracking one or more projects

Example:
    Query a project as a table:
        ```bash
        $ repolocli --output table project curl --sort-repo
        ```

    Postprocess data fetched earlier:
        ```bash
        $ curl -s https://repology.org/api/v1/project/curl | repolocli --stdin project curl
        ```

    Check tracked projects for new versions, then record them:
        ```bash
        $ repolocli db update
        $ repolocli db update --commit
        ```

Exit Codes:

- 0: Success
- 1: Error (configuration, network, database or parse failure)

Note:
    The CLI uses argparse for command parsing. Each command has its own
    handler function (cmd_<command>). Results go to stdout, diagnostics to
    stderr. Verbose mode shows full tracebacks on errors.

"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
import traceback

from repolocli import __version__
from repolocli.backend import MetadataSource, new_backend
from repolocli.compare import compare_packages, load_compare_list
from repolocli.config import Configuration, default_database_path, load_config
from repolocli.core import query_problems, query_project
from repolocli.exceptions import RepoloError
from repolocli.filter import repo_filter
from repolocli.frontend import Frontend, available_frontends, get_frontend
from repolocli.logging import get_logger, set_global_logger
from repolocli.store import VersionStore


def _configure_logging(args: argparse.Namespace) -> None:
    set_global_logger(
        get_logger(verbose=args.verbose, debug=args.debug, quiet=args.quiet)
    )


def _notice(args: argparse.Namespace, message: str) -> None:
    """Print a status note to stderr unless --quiet is given."""
    if not args.quiet:
        print(message, file=sys.stderr)


def _setup(args: argparse.Namespace) -> tuple[Configuration, MetadataSource, Frontend]:
    """Configure logging and build the configuration, source and frontend."""
    _configure_logging(args)
    config = load_config(Path(args.config) if args.config else None)
    frontend = get_frontend(args.output, sys.stdout)
    source = new_backend(config, use_stdin=args.input_stdin)
    return config, source, frontend


def _open_store(args: argparse.Namespace) -> VersionStore:
    path = Path(args.db_file) if args.db_file else default_database_path()
    return VersionStore.open(path)


def cmd_project(args: argparse.Namespace) -> int:
    """Handler for 'repolocli project'.

    Lists the packages of a project, restricted to repositories accepted by
    the allow/deny policy and optionally sorted.

    Returns:
        Exit code (0 for success).

    """
    config, source, frontend = _setup(args)
    sort_by = "version" if args.sort_version else "repo" if args.sort_repo else None
    packages = query_project(
        source,
        args.project_name,
        repo_filter(config.allowlist, config.denylist),
        sort_by=sort_by,
    )
    frontend.list_packages(packages)
    return 0


def cmd_problems(args: argparse.Namespace) -> int:
    """Handler for 'repolocli problems'."""
    config, source, frontend = _setup(args)
    sort_by = (
        "maintainer" if args.sort_maintainer else "repo" if args.sort_repo else None
    )
    problems = query_problems(
        source,
        repo_filter(config.allowlist, config.denylist),
        repo=args.repo,
        maintainer=args.maintainer,
        sort_by=sort_by,
    )
    frontend.list_problems(problems)
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'repolocli compare'.

    Loads the local package list first so a malformed file fails before any
    network traffic.
    """
    entries = load_compare_list(Path(args.compare_list))
    _, source, frontend = _setup(args)
    frontend.list_comparisons(compare_packages(entries, args.distros, source))
    return 0


def cmd_db_update(args: argparse.Namespace) -> int:
    """Handler for 'repolocli db update'.

    Dry run unless --commit is given: new versions are reported for every
    tracked project, and only recorded in the database with --commit.

    Returns:
        Exit code (0 for success, 1 on any failure; nothing is recorded
        when a project fails).

    """
    _, source, frontend = _setup(args)
    store = _open_store(args)
    result = store.reconcile(source, frontend, commit=args.commit)
    if not result.has_updates:
        _notice(args, "No new versions.")
    elif not result.committed:
        _notice(args, "Dry run: use --commit to record these versions.")
    return 0


def cmd_db_show(args: argparse.Namespace) -> int:
    """Handler for 'repolocli db show'."""
    if args.local:
        _configure_logging(args)
        frontend = get_frontend(args.output, sys.stdout)
        _open_store(args).show_local(frontend)
        return 0

    _, source, frontend = _setup(args)
    _open_store(args).show(source, frontend)
    return 0


def cmd_db_add(args: argparse.Namespace) -> int:
    """Handler for 'repolocli db add'.

    Each project is fetched and written separately; a failure stops at that
    project and leaves the ones added before it in place.
    """
    _, source, _ = _setup(args)
    store = _open_store(args)
    for name in args.names:
        result = store.add_project(name, source)
        _notice(
            args, f"Added {result.project} with {len(result.versions)} version(s)"
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    parser = argparse.ArgumentParser(
        prog="repolocli",
        description="Query repology.org and postprocess its output",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "repolocli can read data from stdin (--stdin) if you want to "
            "postprocess repology.org\ndata you already fetched from "
            "repology.org/api/v1 via curl (or some other method)."
        ),
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"repolocli {__version__}",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        default=None,
        help="Override default configuration file path",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress progress lines and status notes (errors are still shown)",
    )
    parser.add_argument(
        "-o",
        "--output",
        choices=available_frontends(),
        default="lines",
        help="Output format (default: lines)",
    )
    parser.add_argument(
        "-I",
        "--stdin",
        dest="input_stdin",
        action="store_true",
        help="Read data (JSON) from stdin instead of querying the API",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'project' command
    parser_project = subparsers.add_parser(
        "project",
        help="Query data about a project",
    )
    parser_project.add_argument("project_name", help="Project name")
    project_sort = parser_project.add_mutually_exclusive_group()
    project_sort.add_argument(
        "--sort-version", action="store_true", help="Sort output by version"
    )
    project_sort.add_argument(
        "--sort-repo", action="store_true", help="Sort output by repository"
    )
    parser_project.set_defaults(func=cmd_project)

    # 'problems' command
    parser_problems = subparsers.add_parser(
        "problems",
        help="Query problems for a repository or a maintainer",
    )
    target = parser_problems.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "-r", "--repo", "--repository", help="The repository to get problems for"
    )
    target.add_argument(
        "-m", "--maintainer", "--maint", help="The maintainer to get problems for"
    )
    problems_sort = parser_problems.add_mutually_exclusive_group()
    problems_sort.add_argument(
        "--sort-maintainer", action="store_true", help="Sort output by maintainer"
    )
    problems_sort.add_argument(
        "--sort-repo", action="store_true", help="Sort output by repository"
    )
    parser_problems.set_defaults(func=cmd_problems)

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare a list of packages to distro repositories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "The list of packages shall have the following format:\n\n"
            "  CSV:  header name;version;comment\n"
            '  JSON: [{"name": "...", "version": "...", "comment": "..."}]'
        ),
    )
    parser_compare.add_argument(
        "compare_list",
        metavar="FILE",
        help="Package list to compare (.json or .csv)",
    )
    parser_compare.add_argument(
        "distros",
        metavar="DIST",
        nargs="+",
        help="Repology repository names to compare to",
    )
    parser_compare.set_defaults(func=cmd_compare)

    # 'db' command group
    parser_db = subparsers.add_parser("db", help="Manage the package-version database")
    parser_db.add_argument(
        "--file",
        dest="db_file",
        metavar="PATH",
        default=None,
        help="Use alternative database file (default: per-user data directory)",
    )
    db_sub = parser_db.add_subparsers(dest="db_command", required=True)

    parser_update = db_sub.add_parser(
        "update",
        help="Update the package-version database (by default only list what's new)",
    )
    parser_update.add_argument(
        "-C",
        "--commit",
        action="store_true",
        help="Apply the updates to the database",
    )
    parser_update.set_defaults(func=cmd_db_update)

    parser_show = db_sub.add_parser("show", help="Show the package-version database")
    parser_show.add_argument(
        "--local",
        action="store_true",
        help="Show the stored versions without querying the source",
    )
    parser_show.set_defaults(func=cmd_db_show)

    parser_add = db_sub.add_parser("add", help="Add packages to the database (by name)")
    parser_add.add_argument("names", metavar="NAME", nargs="+", help="Project names")
    parser_add.set_defaults(func=cmd_db_add)

    return parser


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, dispatch to the handler and map errors to exit codes."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.func(args)
    except RepoloError as err:
        print(f"Error: {err}", file=sys.stderr)
        if args.verbose or args.debug:
            traceback.print_exc()
        return 1


def main() -> None:
    """Main entry point, registered as the 'repolocli' console script."""
    sys.exit(run())


if __name__ == "__main__":
    main()
