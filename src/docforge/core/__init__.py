# topmark:header:start
#
#   project      : DocForge
#   file         : __init__.py
#   file_relpath : src/docforge/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Core primitives shared by the CLI and the pipeline: error taxonomy and exit codes."""

from __future__ import annotations

from docforge.core.errors import (
    ConfigurationError,
    DocforgeError,
    ErrorKind,
    GenerationError,
    is_configuration_error,
)
from docforge.core.exit_codes import ExitCode

__all__ = [
    "ConfigurationError",
    "DocforgeError",
    "ErrorKind",
    "ExitCode",
    "GenerationError",
    "is_configuration_error",
]
