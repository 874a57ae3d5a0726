# topmark:header:start
#
#   project      : DocForge
#   file         : paths.py
#   file_relpath : src/docforge/config/paths.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Pure helpers for path normalization.

Paths declared inside a config file are anchored to that file's directory;
paths given on the command line are anchored to the invocation CWD. Both
end up absolute so the reporter prints the same path the backend reads.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from docforge.config.logging import DocforgeLogger, get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable
    from os import PathLike

logger: DocforgeLogger = get_logger(__name__)


def abs_path_from(base: Path, raw: str | PathLike[str]) -> Path:
    """Return an absolute Path for *raw* using *base* if *raw* is relative."""
    p = Path(str(raw)).expanduser()
    return (base / p).resolve() if not p.is_absolute() else p.resolve()


def abs_paths_from(base: Path, items: Iterable[str | PathLike[str]], kind: str) -> list[Path]:
    """Normalize each entry of ``items`` against ``base``.

    Args:
        base (Path): Directory against which relative entries are resolved.
        items (Iterable[str | PathLike[str]]): Raw path declarations.
        kind (str): Human-readable label used for debug logging.

    Returns:
        list[Path]: Absolute paths, in declaration order.
    """
    result: list[Path] = []
    for raw in items:
        p: Path = abs_path_from(base, raw)
        logger.debug("Normalized %s '%s' against %s -> %s", kind, raw, base, p)
        result.append(p)
    return result
