# topmark:header:start
#
#   project      : DocForge
#   file         : console_api.py
#   file_relpath : src/docforge/rendering/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Console protocol shared by the pipeline and the CLI.

The phase runner and the reporters only ever write whole lines of program
output; internal diagnostics go through `logging` instead.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Where DocForge writes its user-facing output.

    Each ``print`` writes one line (or a fragment when ``nl`` is False) and
    flushes it, so progress is visible while a long phase is running.
    """

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write program output."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a diagnostic outside of a run (stderr)."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` with Click styling, or unchanged when color is off."""
        ...
