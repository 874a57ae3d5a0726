# topmark:header:start
#
#   project      : DocForge
#   file         : types.py
#   file_relpath : src/docforge/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Enums used by the DocForge settings model.

Kept free of DocForge imports so both the config layer and the rendering layer
can depend on it.
"""

from __future__ import annotations

from enum import Enum


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"
