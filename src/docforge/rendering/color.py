# topmark:header:start
#
#   project      : DocForge
#   file         : color.py
#   file_relpath : src/docforge/rendering/color.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Color decision for DocForge console output.

Two questions are answered separately:

1. Which `ColorMode` applies? The command line (``--no-color``, ``--color``)
   wins over the ``color`` key of the config file; neither means "auto".
2. Does that mode enable color here? ``always``/``never`` are final; ``auto``
   consults ``FORCE_COLOR``, then ``NO_COLOR``, then whether the output stream
   is a terminal.

Both functions are Click-independent and take their environment as arguments
so they can be exercised without touching the process state.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from docforge.config.logging import DocforgeLogger, get_logger
from docforge.config.types import ColorMode

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import TextIO

logger: DocforgeLogger = get_logger(__name__)


def effective_color_mode(
    *,
    no_color: bool = False,
    cli_mode: ColorMode | str | None = None,
    config_mode: ColorMode | None = None,
) -> ColorMode:
    """Return the color mode chosen by the layered sources.

    Args:
        no_color (bool): ``--no-color`` was given.
        cli_mode (ColorMode | str | None): Value of ``--color``, if given.
        config_mode (ColorMode | None): ``color`` key of the config file, if set.

    Returns:
        ColorMode: The mode to apply; `ColorMode.AUTO` when nothing was requested.
    """
    if no_color:
        return ColorMode.NEVER
    if cli_mode is not None:
        return ColorMode(cli_mode)
    return config_mode or ColorMode.AUTO


def color_enabled(
    mode: ColorMode,
    *,
    environ: Mapping[str, str] | None = None,
    stream: TextIO | None = None,
) -> bool:
    """Return True if ``mode`` enables ANSI styling for ``stream``.

    Args:
        mode (ColorMode): Mode from `effective_color_mode`.
        environ (Mapping[str, str] | None): Environment; defaults to ``os.environ``.
        stream (TextIO | None): Output stream; defaults to ``sys.stdout``.
    """
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False

    env: Mapping[str, str] = os.environ if environ is None else environ
    force_color: str | None = env.get("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if "NO_COLOR" in env:
        return False

    out: TextIO = stream or sys.stdout
    try:
        isatty: bool = out.isatty()
    except (AttributeError, OSError, ValueError):
        isatty = False
    logger.trace("Color auto-detection on %r: isatty=%s", out, isatty)
    return isatty
