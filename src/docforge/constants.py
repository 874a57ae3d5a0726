# topmark:header:start
#
#   project      : DocForge
#   file         : constants.py
#   file_relpath : src/docforge/constants.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""DocForge Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from pathlib import Path

DOCFORGE_NAME: str = "DocForge"
DOCFORGE_VERSION: str = get_version("docforge")

# Config file discovered in the working directory when --config is not given:
DEFAULT_CONFIG_NAME: str = "docforge.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "docforge"

DEFAULT_TEMPLATE_CONFIG: Path = Path(__file__).parent / "templates" / "default" / "config.toml"

UPDATE_CHECK_URL: str = "https://pypi.org/pypi/docforge/json"
UPDATE_CHECK_TIMEOUT: float = 5.0

LOG_LEVEL_ENV: str = "DOCFORGE_LOG_LEVEL"
