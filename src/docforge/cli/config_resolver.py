# topmark:header:start
#
#   project      : DocForge
#   file         : config_resolver.py
#   file_relpath : src/docforge/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Resolve DocForge `Settings` from Click parameters.

Bridges CLI parsing and the settings model: builds the argument mapping and
layers the configuration sources in precedence order.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from docforge.config import MutableSettings
from docforge.config.io import discover_config_file
from docforge.config.logging import get_logger

if TYPE_CHECKING:
    from docforge.config import ArgsLike, Settings
    from docforge.config.logging import DocforgeLogger

logger: DocforgeLogger = get_logger(__name__)


def resolve_settings(args: ArgsLike, config_path: str | None) -> Settings:
    """Build validated `Settings` from CLI arguments and configuration files.

    Resolution order (lowest → highest precedence):
      1. **Runtime defaults**.
      2. **Config file**: the one given with ``--config``; otherwise
         ``docforge.toml`` in the current directory, or ``pyproject.toml`` there
         when it has a ``[tool.docforge]`` table.
      3. **CLI overrides** (flags/args), applied last.

    Args:
        args (ArgsLike): CLI values keyed by config key (``None``/empty = not given).
        config_path (str | None): Explicit config file from ``--config``.

    Returns:
        Settings: The frozen settings snapshot.

    Raises:
        ConfigurationError: If a config file is missing or invalid, or the
            resulting settings fail validation.
    """
    logger.trace("CLI args: %s", dict(args))
    draft: MutableSettings = MutableSettings.from_defaults()

    path: Path | None = Path(config_path).expanduser() if config_path else None
    if path is None:
        path = discover_config_file(Path.cwd())
    if path is not None:
        draft.apply_toml_file(path)

    draft.apply_cli_args(args)
    return draft.freeze()
