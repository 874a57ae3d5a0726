# topmark:header:start
#
#   project      : DocForge
#   file         : keys.py
#   file_relpath : src/docforge/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Canonical TOML key names for DocForge configuration.

These constants are the external configuration schema as it appears in
``docforge.toml`` and in ``[tool.docforge]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by DocForge configuration.

    The table is flat: every key lives at the top level of ``docforge.toml``
    (or directly under ``[tool.docforge]``).
    """

    # Inputs
    KEY_SOURCE: Final[str] = "source"
    KEY_EXCLUDE: Final[str] = "exclude"
    KEY_EXTENSIONS: Final[str] = "extensions"

    # Outputs
    KEY_DESTINATION: Final[str] = "destination"
    KEY_TEMPLATE_CONFIG: Final[str] = "template_config"
    KEY_TITLE: Final[str] = "title"
    KEY_SKIP_DOC_PATH: Final[str] = "skip_doc_path"
    KEY_SKIP_DOC_PREFIX: Final[str] = "skip_doc_prefix"
    KEY_GENERATOR: Final[str] = "generator"

    # Behavior flags
    KEY_WIPEOUT: Final[str] = "wipeout"
    KEY_UPDATE_CHECK: Final[str] = "update_check"
    KEY_UPDATE_URL: Final[str] = "update_url"
    KEY_DEBUG: Final[str] = "debug"
    KEY_COLOR: Final[str] = "color"

    #: Keys whose values are filesystem paths, resolved against the config file's directory.
    PATH_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_SOURCE, KEY_DESTINATION, KEY_TEMPLATE_CONFIG}
    )

    #: Every key DocForge understands; anything else is reported and ignored.
    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_SOURCE,
            KEY_EXCLUDE,
            KEY_EXTENSIONS,
            KEY_DESTINATION,
            KEY_TEMPLATE_CONFIG,
            KEY_TITLE,
            KEY_SKIP_DOC_PATH,
            KEY_SKIP_DOC_PREFIX,
            KEY_GENERATOR,
            KEY_WIPEOUT,
            KEY_UPDATE_CHECK,
            KEY_UPDATE_URL,
            KEY_DEBUG,
            KEY_COLOR,
        }
    )
