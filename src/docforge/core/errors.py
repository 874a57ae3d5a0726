# topmark:header:start
#
#   project      : DocForge
#   file         : errors.py
#   file_relpath : src/docforge/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Exceptions for DocForge.

Usage:
    Raise `ConfigurationError` for invalid or missing settings and
    `GenerationError` for failures while scanning, parsing or generating.
    Wrap lower-level exceptions with ``raise ... from exc`` so the error
    reporter can print the whole cause chain in debug mode.

Classification:
    Every DocForge error carries an `ErrorKind`. The error reporter branches on
    the kind (not on the Python class) because a configuration error changes
    the shape of the output: the header and the help text are printed around
    the message. Exceptions that are not DocForge errors are runtime failures.
"""

from __future__ import annotations

from enum import Enum
from typing import IO, Any

import click

from docforge.core.exit_codes import ExitCode


class ErrorKind(str, Enum):
    """Classification marker for DocForge failures.

    Attributes:
        CONFIGURATION: Invalid or missing settings; user-fixable.
        RUNTIME: Failure while scanning, parsing, generating or wiping output.
    """

    CONFIGURATION = "configuration"
    RUNTIME = "runtime"


class DocforgeError(click.ClickException):
    """Base class for all DocForge errors."""

    kind: ErrorKind = ErrorKind.RUNTIME
    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied by the error reporter through the markup layer.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        DocForge errors normally never reach Click: the phase runner hands them to
        the error reporter. This covers errors raised outside a run.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="red"))
                return
        super().show(file)


class ConfigurationError(DocforgeError):
    """Error for configuration errors (missing/invalid settings or config file)."""

    kind = ErrorKind.CONFIGURATION


class GenerationError(DocforgeError):
    """Error for failures during the scan, parse or generate phases."""

    kind = ErrorKind.RUNTIME


def error_kind(exc: BaseException) -> ErrorKind:
    """Return the kind marker of ``exc``; non-DocForge exceptions are runtime failures."""
    if isinstance(exc, DocforgeError):
        return exc.kind
    return ErrorKind.RUNTIME


def is_configuration_error(exc: BaseException) -> bool:
    """Return True if ``exc`` is marked as a configuration error."""
    return error_kind(exc) is ErrorKind.CONFIGURATION
