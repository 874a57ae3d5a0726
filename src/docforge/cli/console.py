# topmark:header:start
#
#   project      : DocForge
#   file         : console.py
#   file_relpath : src/docforge/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Click-backed console for DocForge program output.

Progress lines, error reports and help all go to standard output through
`click.echo`, which flushes every write and strips ANSI codes when color is
off. The color flag can change once the settings are known (a ``color`` key
in the config file), hence `ClickConsole.color` is writable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from docforge.rendering.console_api import ConsoleLike

if TYPE_CHECKING:
    from typing import TextIO


class ClickConsole(ConsoleLike):
    """Console writing through `click.echo`.

    Args:
        color (bool): Whether ANSI styling is passed through.
        stream (TextIO | None): Destination of program output; Click's stdout
            when None (resolved at each write so test runners can swap it).
    """

    def __init__(self, *, color: bool = False, stream: TextIO | None = None) -> None:
        self.color = color
        self.stream = stream

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Echo ``text`` to the output stream."""
        click.echo(text, file=self.stream, nl=nl, color=self.color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Echo ``text`` to standard error."""
        click.echo(text, err=True, nl=nl, color=self.color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Apply `click.style` when color is on."""
        return click.style(text, **style_kwargs) if self.color else text
