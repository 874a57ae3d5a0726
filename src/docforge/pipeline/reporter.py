# topmark:header:start
#
#   project      : DocForge
#   file         : reporter.py
#   file_relpath : src/docforge/pipeline/reporter.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Progress reporting for the phases of a DocForge run.

Every progress line is a markup template (see `docforge.rendering.markup`),
formatted with positional values, rendered for the console's color mode and
written immediately. Reporting is best effort: a broken output stream is
logged, never turned into a run failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docforge.config.logging import get_logger
from docforge.rendering.markup import MarkupTag, markup, render_markup

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docforge.config.logging import DocforgeLogger
    from docforge.rendering.console_api import ConsoleLike

logger: DocforgeLogger = get_logger(__name__)

#: Prefix of each item line when a list spans several lines.
LIST_INDENT = " "


def format_list(label: str, items: Sequence[object]) -> str | None:
    """Apply the singular/plural rule to a labelled list.

    Args:
        label (str): Text introducing the list (e.g. ``"Scanning"``).
        items (Sequence[object]): Items to report.

    Returns:
        str | None: ``None`` for an empty list; the label followed by the single
            item on the same line; or the label alone followed by one indented
            line per item. Items are wrapped in ``value`` spans.
    """
    if not items:
        return None
    if len(items) == 1:
        return f"{label} {markup(MarkupTag.VALUE, items[0])}"
    lines: list[str] = [label]
    lines.extend(f"{LIST_INDENT}{markup(MarkupTag.VALUE, item)}" for item in items)
    return "\n".join(lines)


class ProgressReporter:
    """Writes formatted, markup-rendered status lines to the console.

    Args:
        console (ConsoleLike): Output console.
        color (bool): Whether markup spans are styled or stripped.
    """

    def __init__(self, console: ConsoleLike, *, color: bool) -> None:
        self.console = console
        self.color = color

    def report(self, template: str, *values: object) -> None:
        """Format ``values`` into ``template`` and write the rendered line.

        Substitution is positional (``str.format``) and happens before markup
        rendering, so values may themselves carry markup spans. Braces inside
        substituted values are not interpreted.
        """
        text: str = template.format(*values) if values else template
        self.write(text)

    def report_list(self, label: str, items: Sequence[object]) -> None:
        """Report a labelled list using the singular/plural rule; skip empty lists."""
        text: str | None = format_list(label, items)
        if text is not None:
            self.write(text)

    def write(self, text: str) -> None:
        """Render markup in ``text`` and write it as one line."""
        try:
            self.console.print(render_markup(text, color=self.color))
        except OSError as exc:
            logger.warning("Cannot write progress output: %s", exc)
