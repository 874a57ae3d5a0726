# topmark:header:start
#
#   project      : DocForge
#   file         : __init__.py
#   file_relpath : src/docforge/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Run pipeline: phase runner, progress and error reporting, parse results."""

from __future__ import annotations

from docforge.pipeline.errors import ErrorReporter
from docforge.pipeline.reporter import ProgressReporter
from docforge.pipeline.results import ParseResult
from docforge.pipeline.runner import Phase, PhaseRunner

__all__ = [
    "ErrorReporter",
    "ParseResult",
    "Phase",
    "PhaseRunner",
    "ProgressReporter",
]
