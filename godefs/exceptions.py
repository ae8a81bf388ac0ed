"""
Exception classes for godefs.

Recoverable faults derive from GoDefsError and carry the offending path and
the underlying exception. PackageInvariantError signals a caller bug and is
intentionally outside that hierarchy.
"""

from __future__ import annotations

import os
from pathlib import Path


class GoDefsError(Exception):
    """
    Base exception for recoverable godefs errors.

    Attributes:
        message: A human-readable error message describing what went wrong.
        path: The file or directory the error relates to, if any.
        original_exception: The underlying exception that caused this error, if any.
        diagnostic_info: A dictionary with the exception type, details and OS name.
    """

    def __init__(
        self,
        message: str | None = None,
        path: str | Path | None = None,
        original_exception: BaseException | None = None,
    ):
        self.message = message or "An error occurred while loading Go sources"
        super().__init__(self.message)
        self.path = path
        self.original_exception = original_exception
        self.diagnostic_info = {
            "type": (
                type(original_exception).__name__ if original_exception else "Unknown"
            ),
            "details": str(original_exception) if original_exception else "No details",
            "os_name": os.name,
        }


class PackageDirectoryError(GoDefsError):
    """
    Raised when a package directory cannot be listed.

    Typically the directory is missing or not readable. No registry is
    created in that case.
    """

    def __init__(
        self,
        path: str | Path,
        original_exception: BaseException | None = None,
    ):
        super().__init__(
            message=f"cannot read package directory {path}: {original_exception}",
            path=path,
            original_exception=original_exception,
        )


class SourceSyntaxError(GoDefsError):
    """
    Raised when a source file contains a syntax error.

    Attributes:
        line: 1-based line of the first error node.
        column: 1-based column of the first error node.
    """

    def __init__(self, path: str | Path, line: int, column: int, detail: str):
        self.line = line
        self.column = column
        super().__init__(
            message=f"{path}:{line}:{column}: {detail}",
            path=path,
        )


class SourceParseError(GoDefsError):
    """
    Raised when a package file cannot be read or parsed.

    Wraps the underlying SourceSyntaxError or OSError together with the
    path of the file.
    """

    def __init__(self, path: str | Path, original_exception: BaseException):
        super().__init__(
            message=f"cannot parse source files {path}: {original_exception}",
            path=path,
            original_exception=original_exception,
        )


class PackageInvariantError(RuntimeError):
    """
    Raised when a caller hands a registry a file that is not one of its own.

    This is a programming error in the caller's bookkeeping, not a
    recoverable condition, so it does not derive from GoDefsError.
    """
