# topmark:header:start
#
#   project      : DocForge
#   file         : main.py
#   file_relpath : src/docforge/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""DocForge command-line entry point.

Key ideas:
- One command; every option maps onto a settings key (see `docforge.config.keys`).
- Color and logging are initialized first, the rest of the run is delegated to
  `docforge.pipeline.runner.PhaseRunner`, whose exit code becomes the process status.
- ``ctx.obj`` may carry a ``generator_factory`` (and an ``update_checker``) to
  replace the backend named in the settings; embedders and tests use this.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from docforge.cli.config_resolver import resolve_settings
from docforge.cli.console import ClickConsole
from docforge.cli.options import (
    common_color_options,
    generation_options,
    run_options,
    source_options,
)
from docforge.config.keys import Toml
from docforge.config.logging import get_logger, resolve_env_log_level, setup_logging
from docforge.config.model import ARG_HELP
from docforge.constants import DOCFORGE_NAME, DOCFORGE_VERSION
from docforge.generator import load_generator
from docforge.pipeline.runner import PhaseRunner
from docforge.rendering.color import color_enabled, effective_color_mode

if TYPE_CHECKING:
    from docforge.config import Settings
    from docforge.config.logging import DocforgeLogger
    from docforge.generator import GeneratorFactory

logger: DocforgeLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    color_mode: str | None,
    no_color: bool,
) -> ClickConsole:
    """Initialize logging and color on the Click context and return the console.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.

    Returns:
        ClickConsole: The program-output console, also stored in ``ctx.obj``.
    """
    ctx.ensure_object(dict)

    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color = color_enabled(effective_color_mode(no_color=no_color, cli_mode=color_mode))
    ctx.color = enable_color

    console = ClickConsole(color=enable_color)
    ctx.obj["console"] = console
    return console


@click.command(
    name="docforge",
    add_help_option=False,
    help="Generate API documentation from source files.",
)
@source_options
@generation_options
@run_options
@common_color_options
@click.version_option(DOCFORGE_VERSION, "--version", prog_name=DOCFORGE_NAME)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    source: tuple[str, ...],
    exclude: tuple[str, ...],
    extensions: tuple[str, ...],
    destination: str | None,
    template_config: str | None,
    title: str | None,
    generator: str | None,
    skip_doc_path: tuple[str, ...],
    skip_doc_prefix: tuple[str, ...],
    wipeout: bool | None,
    update_check: bool | None,
    debug: bool | None,
    help_flag: bool,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the DocForge CLI."""
    console = init_common_state(ctx, color_mode=color_mode, no_color=no_color)

    args: dict[str, Any] = {
        Toml.KEY_SOURCE: source,
        Toml.KEY_EXCLUDE: exclude,
        Toml.KEY_EXTENSIONS: extensions,
        Toml.KEY_DESTINATION: destination,
        Toml.KEY_TEMPLATE_CONFIG: template_config,
        Toml.KEY_TITLE: title,
        Toml.KEY_GENERATOR: generator,
        Toml.KEY_SKIP_DOC_PATH: skip_doc_path,
        Toml.KEY_SKIP_DOC_PREFIX: skip_doc_prefix,
        Toml.KEY_WIPEOUT: wipeout,
        Toml.KEY_UPDATE_CHECK: update_check,
        Toml.KEY_DEBUG: debug,
        ARG_HELP: help_flag,
    }

    def settings_factory() -> Settings:
        return resolve_settings(args, config_path)

    def color_resolver(settings: Settings) -> bool:
        mode = effective_color_mode(
            no_color=no_color, cli_mode=color_mode, config_mode=settings.color_mode
        )
        console.color = ctx.color = color_enabled(mode)
        return console.color

    generator_factory: GeneratorFactory = ctx.obj.get("generator_factory") or load_generator
    runner = PhaseRunner(
        settings_factory,
        generator_factory,
        console,
        color=console.color,
        help_text=ctx.get_help(),
        update_checker=ctx.obj.get("update_checker"),
        color_resolver=color_resolver,
    )
    exit_code = runner.run()
    logger.debug("Finished in phase %s with exit code %d", runner.phase.value, exit_code)
    ctx.exit(int(exit_code))
