# topmark:header:start
#
#   project      : DocForge
#   file         : errors.py
#   file_relpath : src/docforge/pipeline/errors.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Failure reporting for a DocForge run.

Every exception escaping a phase ends up in `ErrorReporter.report`, which
classifies it (`docforge.core.errors.ErrorKind`) and prints it in one of two
shapes:

- normal mode: the outermost message only;
- debug mode (``settings.debug``): every message of the cause chain, outermost
  first, followed by the traceback of the root cause.

A configuration error is additionally framed by the program header and the
help text, since the user most likely needs the option reference.
"""

from __future__ import annotations

import traceback
from typing import TYPE_CHECKING

from docforge.config.logging import get_logger
from docforge.core.errors import is_configuration_error
from docforge.core.exit_codes import ExitCode
from docforge.rendering.markup import MarkupTag, markup, render_markup

if TYPE_CHECKING:
    from collections.abc import Iterator

    from docforge.config import Settings
    from docforge.config.logging import DocforgeLogger
    from docforge.rendering.console_api import ConsoleLike

logger: DocforgeLogger = get_logger(__name__)


def iter_exception_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield ``exc`` and its causes, outermost first.

    Follows ``__cause__`` (``raise ... from``) and otherwise the implicit
    ``__context__`` unless it was suppressed with ``from None``. Stops on cycles.
    """
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None


def exception_message(exc: BaseException) -> str:
    """Return the display message of ``exc``, or its class name when it has none."""
    message: object = getattr(exc, "message", None)
    text: str = message if isinstance(message, str) else str(exc)
    return text or type(exc).__name__


class ErrorReporter:
    """Prints a failure and maps it to the process exit code.

    Args:
        console (ConsoleLike): Output console.
        color (bool): Whether markup spans are styled or stripped.
        header (str): Markup program header, printed before configuration errors.
        help_text (str): Usage text, printed after configuration errors.
    """

    def __init__(self, console: ConsoleLike, *, color: bool, header: str, help_text: str) -> None:
        self.console = console
        self.color = color
        self.header = header
        self.help_text = help_text

    def report(self, exc: BaseException, settings: Settings | None) -> ExitCode:
        """Print ``exc`` and return the exit code of a failed run.

        Args:
            exc (BaseException): The failure, possibly with chained causes.
            settings (Settings | None): Settings of the run; None when resolving
                them was what failed (debug output is then unavailable).

        Returns:
            ExitCode: Always `ExitCode.FAILURE`.
        """
        config_error: bool = is_configuration_error(exc)
        debug: bool = settings is not None and settings.debug
        logger.debug("Reporting %s (configuration=%s, debug=%s)", type(exc).__name__, config_error, debug)

        if config_error:
            self._write(self.header)

        if debug:
            chain: list[BaseException] = list(iter_exception_chain(exc))
            self._write("")
            for item in chain:
                self._write(markup(MarkupTag.ERROR, exception_message(item)))
            self._write("")
            root: BaseException = chain[-1]
            trace: str = "".join(
                traceback.format_exception(type(root), root, root.__traceback__, chain=False)
            )
            self.console.print(trace.rstrip("\n"))
            self._write("")
        else:
            self._write("")
            self._write(markup(MarkupTag.ERROR, exception_message(exc)))
            self._write("")

        if config_error:
            self.console.print(self.help_text)
        return ExitCode.FAILURE

    def _write(self, text: str) -> None:
        try:
            self.console.print(render_markup(text, color=self.color))
        except OSError as exc:
            logger.warning("Cannot write error output: %s", exc)
