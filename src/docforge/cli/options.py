# topmark:header:start
#
#   project      : DocForge
#   file         : options.py
#   file_relpath : src/docforge/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Reusable Click option groups for the DocForge command.

Options are grouped by concern (settings sources, generation, run behavior,
color) so `docforge.cli.main` stays thin. Every option defaults to ``None``
(or an empty tuple for repeatable options) so the settings layer can tell
"not given" from an explicit value.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click
from click.core import ParameterSource

from docforge.config.types import ColorMode

P = ParamSpec("P")
R = TypeVar("R")


def trap_underscored_option(ctx: click.Context, param: click.Parameter, _value: object) -> None:
    """Raise a helpful error for underscored long options (e.g., --skip_doc_path).

    Runs during option parsing (is_eager=True) so we can show a friendly hint
    instead of the generic "No such option" error.
    """
    name = getattr(param, "name", None)
    src = ctx.get_parameter_source(name) if name else None
    if src is not ParameterSource.COMMANDLINE:
        return

    bad = param.opts[0] if param.opts else "--?"
    suggestion = bad.replace("_", "-")
    raise click.UsageError(f"Unknown option: {bad}. Did you mean {suggestion}?", ctx=ctx)


def underscored_trap_option(*names: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Register hidden underscored spellings that raise a helpful error.

    The hidden option gets a unique destination name so its parameter source
    never overlaps with the real, hyphenated option.

    Args:
        *names: One or more underscored long option names to trap,
            e.g. "--skip_doc_path".

    Returns:
        A decorator compatible with Click's option stacking.
    """
    if not names:
        raise ValueError("underscored_trap_option requires at least one option name")

    dest = f"_trap_{names[0].lstrip('-').replace('-', '_')}"
    return click.option(
        *names,
        dest,
        hidden=True,
        expose_value=False,
        is_eager=True,
        multiple=True,
        callback=trap_underscored_option,
    )


def source_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options selecting configuration and sources.

    Adds ``-c/--config``, ``-s/--source``, ``--exclude`` and ``--extensions``.
    """
    f = click.option(
        "-c",
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Configuration file (docforge.toml or pyproject.toml with [tool.docforge]).",
    )(f)
    f = click.option(
        "-s",
        "--source",
        "source",
        multiple=True,
        metavar="PATH",
        help="Source file or directory to document. Repeatable.",
    )(f)
    f = click.option(
        "--exclude",
        "exclude",
        multiple=True,
        metavar="PATTERN",
        help="Exclude paths matching a gitignore-style pattern. Repeatable.",
    )(f)
    f = click.option(
        "--extensions",
        "extensions",
        multiple=True,
        metavar="EXT",
        help="Source file extension to scan (e.g. php). Repeatable.",
    )(f)
    return f


def generation_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options shaping the generated documentation.

    Adds ``-d/--destination``, ``-t/--template-config``, ``--title``,
    ``-g/--generator``, ``--skip-doc-path``, ``--skip-doc-prefix`` and
    ``--wipeout/--no-wipeout``.
    """
    f = click.option(
        "-d",
        "--destination",
        "destination",
        default=None,
        metavar="PATH",
        help="Output directory.",
    )(f)
    f = click.option(
        "-t",
        "--template-config",
        "template_config",
        default=None,
        metavar="PATH",
        help="Template config file.",
    )(f)
    f = click.option("--title", "title", default=None, help="Documentation title.")(f)
    f = click.option(
        "-g",
        "--generator",
        "generator",
        default=None,
        metavar="MODULE:ATTR",
        help="Generator backend, given as an import path.",
    )(f)
    f = click.option(
        "--skip-doc-path",
        "skip_doc_path",
        multiple=True,
        metavar="PATTERN",
        help="Do not document elements in paths matching the pattern. Repeatable.",
    )(f)
    f = click.option(
        "--skip-doc-prefix",
        "skip_doc_prefix",
        multiple=True,
        metavar="PREFIX",
        help="Do not document elements whose name starts with the prefix. Repeatable.",
    )(f)
    f = click.option(
        "--wipeout/--no-wipeout",
        "wipeout",
        default=None,
        help="Wipe out the destination directory before generating.",
    )(f)
    f = underscored_trap_option("--skip_doc_path", "--skip_doc_prefix", "--template_config")(f)
    return f


def run_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options controlling the run itself.

    Adds ``--update-check/--no-update-check``, ``--debug/--no-debug`` and
    ``-h/--help``. Help is a plain flag: DocForge prints its header before the
    help text, so Click's eager help option is disabled on the command.
    """
    f = click.option(
        "--update-check/--no-update-check",
        "update_check",
        default=None,
        help="Check for a newer DocForge release (default: on).",
    )(f)
    f = click.option(
        "--debug/--no-debug",
        "debug",
        default=None,
        help="Print the cause chain and a traceback on failure.",
    )(f)
    f = click.option(
        "-h",
        "--help",
        "help_flag",
        is_flag=True,
        default=False,
        help="Show this message and exit.",
    )(f)
    f = underscored_trap_option("--update_check")(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f
