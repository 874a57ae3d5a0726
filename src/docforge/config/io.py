# topmark:header:start
#
#   project      : DocForge
#   file         : io.py
#   file_relpath : src/docforge/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""TOML I/O helpers for DocForge configuration.

This module reads DocForge configuration from:
- the runtime defaults (defined in code, no I/O), and
- on-disk TOML files (``docforge.toml`` or ``[tool.docforge]`` in ``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
typed getters validate shapes and raise `ConfigurationError` on mismatches so
that settings resolution fails as a whole with a single, readable message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from docforge.config.keys import Toml
from docforge.config.logging import get_logger
from docforge.constants import (
    DEFAULT_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
    UPDATE_CHECK_URL,
)
from docforge.core.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

    from docforge.config.logging import DocforgeLogger

TomlTable = dict[str, Any]

logger: DocforgeLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return DocForge's runtime defaults as a Python dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.KEY_SOURCE: [],
        Toml.KEY_EXCLUDE: [],
        Toml.KEY_EXTENSIONS: [],
        Toml.KEY_SKIP_DOC_PATH: [],
        Toml.KEY_SKIP_DOC_PREFIX: [],
        Toml.KEY_WIPEOUT: False,
        Toml.KEY_UPDATE_CHECK: True,
        Toml.KEY_UPDATE_URL: UPDATE_CHECK_URL,
        Toml.KEY_DEBUG: False,
        # destination, template_config, title, generator and color are unset by default.
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``docforge.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f'Cannot read config file "{path}": {exc}') from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigurationError(f'Invalid TOML in config file "{path}": {exc}') from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_docforge_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the DocForge table from parsed config data.

    For ``pyproject.toml`` this is the ``[tool.docforge]`` table (or None when
    absent); any other file is a DocForge config file as a whole.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    if not isinstance(tool, dict):
        return None
    section: Any = tool.get(PYPROJECT_TOOL_SECTION)
    return cast("TomlTable", section) if isinstance(section, dict) else None


def discover_config_file(start: Path) -> Path | None:
    """Return the config file DocForge uses when ``--config`` is not given.

    ``docforge.toml`` in ``start`` wins; otherwise ``pyproject.toml`` in
    ``start`` is used when it carries a ``[tool.docforge]`` table.
    """
    candidate: Path = start / DEFAULT_CONFIG_NAME
    if candidate.is_file():
        logger.debug("Discovered config file: %s", candidate)
        return candidate
    pyproject: Path = start / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        if extract_docforge_table(pyproject, load_toml_dict(pyproject)) is not None:
            logger.debug("Discovered [tool.%s] in %s", PYPROJECT_TOOL_SECTION, pyproject)
            return pyproject
        logger.trace("No [tool.%s] table in %s", PYPROJECT_TOOL_SECTION, pyproject)
    return None


# --- Typed getters ---


def get_string_list_value_checked(table: TomlTable, key: str) -> list[str] | None:
    """Extract a list of strings, accepting a single string as a one-item list.

    Returns None when the key is absent.

    Raises:
        ConfigurationError: If the value is neither a string nor a list of strings.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in cast("list[Any]", value)):
        return list(cast("list[str]", value))
    raise ConfigurationError(f'Option "{key}" must be a string or a list of strings')


def get_string_value_or_none_checked(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value; None when absent.

    Raises:
        ConfigurationError: If the value is present but not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    raise ConfigurationError(f'Option "{key}" must be a string')


def get_bool_value_or_none_checked(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value; None when absent.

    Raises:
        ConfigurationError: If the value is present but not a boolean.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    raise ConfigurationError(f'Option "{key}" must be true or false')
