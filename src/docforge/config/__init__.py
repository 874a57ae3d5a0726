# topmark:header:start
#
#   project      : DocForge
#   file         : __init__.py
#   file_relpath : src/docforge/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Configuration handling for DocForge.

Settings are layered from runtime defaults, a TOML config file (``docforge.toml``
or ``[tool.docforge]`` in ``pyproject.toml``) and command-line overrides, then
frozen into an immutable `Settings` snapshot.
"""

from __future__ import annotations

from docforge.config.model import ArgsLike, MutableSettings, Settings
from docforge.config.types import ColorMode

__all__ = [
    "ArgsLike",
    "ColorMode",
    "MutableSettings",
    "Settings",
]
