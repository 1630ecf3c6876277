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

"""Logging interface for repolocli.

Library modules report progress through a small logger protocol instead of
printing directly, so the store and the metadata sources stay usable without
the CLI. All diagnostic output goes to stderr; stdout is reserved for the
rendered results (which may be JSON piped into another tool).

The logger supports three output levels:

- Step: Printed unless quiet mode is enabled (progress over the tracked projects)
- Verbose: Only printed when verbose mode is enabled
- Debug: Only printed when debug mode is enabled (implies verbose)

Example:
    Configure the global logger:
        ```python
        from repolocli.logging import get_logger, set_global_logger

        set_global_logger(get_logger(verbose=True))
        ```

    Use in library code:
        ```python
        from repolocli.logging import get_global_logger

        logger = get_global_logger()
        logger.verbose("STORE", "Loaded 12 tracked projects")
        logger.debug("HTTP", "GET https://repology.org/api/v1/project/curl")
        ```

Note:
    The default global logger is silent, so nothing is printed unless the
    CLI (or the caller) configures one.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class Logger(Protocol):
    """Protocol for logger implementations."""

    def step(self, step: int, total: int, message: str) -> None:
        """Print a step indicator.

        Args:
            step: Current step number (1-based).
            total: Total number of steps.
            message: Step description.
        """
        ...

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message.

        Args:
            prefix: Message prefix (e.g., "STORE", "BACKEND").
            message: Log message.
        """
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message.

        Args:
            prefix: Message prefix (e.g., "HTTP", "REPLAY").
            message: Log message.
        """
        ...


class DefaultLogger:
    """Logger that writes to stderr, honouring verbose and debug flags."""

    def __init__(
        self,
        verbose: bool = False,
        debug: bool = False,
        stream: TextIO | None = None,
        quiet: bool = False,
    ) -> None:
        """Initialize logger with verbosity settings.

        Args:
            verbose: If True, print verbose messages.
            debug: If True, print debug messages (implies verbose).
            stream: Output stream. Defaults to sys.stderr at write time.
            quiet: If True, suppress step indicators.
        """
        self._verbose = verbose or debug
        self._debug = debug
        self._quiet = quiet
        self._stream = stream

    def _write(self, line: str) -> None:
        print(line, file=self._stream or sys.stderr)

    def step(self, step: int, total: int, message: str) -> None:
        """Print a step indicator (unless quiet)."""
        if not self._quiet:
            self._write(f"[{step}/{total}] {message}")

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message (only when verbose mode is active)."""
        if self._verbose:
            self._write(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message (only when debug mode is active)."""
        if self._debug:
            self._write(f"[{prefix}] {message}")


class SilentLogger:
    """Logger that suppresses all output."""

    def step(self, step: int, total: int, message: str) -> None:
        pass

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass


# Global logger instance (defaults to silent)
_global_logger: Logger = SilentLogger()


def get_logger(
    verbose: bool = False, debug: bool = False, quiet: bool = False
) -> Logger:
    """Get a logger instance with specified verbosity.

    Args:
        verbose: If True, logger will print verbose messages.
        debug: If True, logger will print debug messages (implies verbose).
        quiet: If True, logger will not print step indicators.

    Returns:
        A stderr logger configured with the specified verbosity.
    """
    return DefaultLogger(verbose=verbose, debug=debug, quiet=quiet)


def get_global_logger() -> Logger:
    """Return the current global logger instance (silent by default)."""
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Set the global logger instance.

    Args:
        logger: Logger instance used by every library function that calls
            get_global_logger().

    Example:
        Configure from the CLI:
            ```python
            logger = get_logger(verbose=args.verbose, debug=args.debug)
            set_global_logger(logger)
            ```
    """
    global _global_logger
    _global_logger = logger
