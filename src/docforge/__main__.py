# topmark:header:start
#
#   project      : DocForge
#   file         : __main__.py
#   file_relpath : src/docforge/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Module entry point for running DocForge via ``python -m docforge``.

Delegates to :func:`docforge.cli.main.cli`, the same entry point as the
``docforge`` console script.

Examples:
    Generate documentation using a project config file::

        python -m docforge --config docforge.toml
"""

from __future__ import annotations

from docforge.cli.main import cli

if __name__ == "__main__":
    cli()
