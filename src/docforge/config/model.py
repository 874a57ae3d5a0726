# topmark:header:start
#
#   project      : DocForge
#   file         : model.py
#   file_relpath : src/docforge/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Settings model and layering.

This module defines:
    - `Settings`: an immutable snapshot read by the phase runner, the error
      reporter and the generator backend.
    - `MutableSettings`: a mutable builder used while layering defaults, the
      config file and CLI overrides; `freeze()` validates it into `Settings`.

Scope:
    - *In scope*: data shapes, layering of TOML tables and CLI arguments,
      validation at freeze time.
    - *Out of scope*: TOML I/O and config file discovery (`docforge.config.io`),
      and the order in which layers are applied (`docforge.cli.config_resolver`).

Immutability:
    - `Settings` stores tuples and is ``frozen=True``. It is built once per run.

Path semantics:
    - Paths declared in a config file are normalized against that file's directory.
    - CLI paths are normalized against the invocation CWD.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from docforge.config.io import (
    TomlTable,
    extract_docforge_table,
    get_bool_value_or_none_checked,
    get_string_list_value_checked,
    get_string_value_or_none_checked,
    load_defaults_dict,
    load_toml_dict,
)
from docforge.config.keys import Toml
from docforge.config.logging import DocforgeLogger, get_logger
from docforge.config.paths import abs_path_from, abs_paths_from
from docforge.config.types import ColorMode
from docforge.constants import DEFAULT_TEMPLATE_CONFIG
from docforge.core.errors import ConfigurationError

# Generic mapping accepted by `MutableSettings.apply_cli_args`: the CLI passes its
# parameter dict, tests and embedders pass plain dicts.
ArgsLike = Mapping[str, Any]

#: Key used in ``ArgsLike`` mappings for the help flag (no TOML counterpart).
ARG_HELP = "help"

logger: DocforgeLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable runtime settings for one DocForge run.

    Attributes:
        source (tuple[Path, ...]): Source files or directories to document (non-empty
            unless help is requested).
        destination (Path | None): Output directory (set unless help is requested).
        exclude (tuple[str, ...]): Gitignore-style patterns of excluded paths.
        extensions (tuple[str, ...]): Source file extensions (lowercase, no dot);
            empty means every file.
        template_config (Path): Template config file handed to the backend.
        title (str | None): Documentation title.
        skip_doc_path (tuple[str, ...]): Path patterns not to document.
        skip_doc_prefix (tuple[str, ...]): Element name prefixes not to document.
        generator (str | None): Backend import path (``module:attribute``).
        update_url (str): Endpoint queried by the update check.
        help (bool): Print header and help instead of running.
        debug (bool): Print cause chains and a traceback on failure.
        wipeout (bool): Clear the destination directory before generating.
        update_check (bool): Check for a newer DocForge release.
        color_mode (ColorMode | None): Color mode from the config file, if any.
        config_files (tuple[Path, ...]): Config files merged into this snapshot.
    """

    source: tuple[Path, ...] = ()
    destination: Path | None = None
    exclude: tuple[str, ...] = ()
    extensions: tuple[str, ...] = ()
    template_config: Path = DEFAULT_TEMPLATE_CONFIG
    title: str | None = None
    skip_doc_path: tuple[str, ...] = ()
    skip_doc_prefix: tuple[str, ...] = ()
    generator: str | None = None
    update_url: str = ""
    help: bool = False
    debug: bool = False
    wipeout: bool = False
    update_check: bool = True
    color_mode: ColorMode | None = None
    config_files: tuple[Path, ...] = ()

    @property
    def skipping(self) -> tuple[str, ...]:
        """Return all skip rules: path rules first, then prefix rules."""
        return self.skip_doc_path + self.skip_doc_prefix

    def is_help_requested(self) -> bool:
        """Return True if this run should only print header and help."""
        return self.help


@dataclass
class MutableSettings:
    """Mutable settings builder used while layering configuration sources.

    Each ``apply_*`` method only overrides the values its source actually
    declares, so layers can be applied in precedence order (defaults, config
    file, CLI). Call `freeze()` to validate and obtain `Settings`.
    """

    source: list[Path] = field(default_factory=lambda: [])
    destination: Path | None = None
    exclude: list[str] = field(default_factory=lambda: [])
    extensions: list[str] = field(default_factory=lambda: [])
    template_config: Path | None = None
    title: str | None = None
    skip_doc_path: list[str] = field(default_factory=lambda: [])
    skip_doc_prefix: list[str] = field(default_factory=lambda: [])
    generator: str | None = None
    update_url: str = ""
    help: bool = False
    debug: bool = False
    wipeout: bool = False
    update_check: bool = True
    color_mode: ColorMode | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # Tracks whether the CLI carried any argument at all (see `is_help_requested`).
    cli_args_given: bool = False

    # ---------------------------- Loaders ----------------------------

    @classmethod
    def from_defaults(cls) -> MutableSettings:
        """Return a builder populated with DocForge's runtime defaults."""
        draft = cls()
        draft.apply_toml_dict(load_defaults_dict(), base=Path.cwd())
        return draft

    def apply_toml_file(self, path: Path) -> MutableSettings:
        """Layer the DocForge table of a TOML config file onto this builder.

        Args:
            path (Path): ``docforge.toml``-style file or ``pyproject.toml``.

        Returns:
            MutableSettings: ``self``, for chaining.

        Raises:
            ConfigurationError: If the file is missing, unreadable, invalid TOML,
                a ``pyproject.toml`` without ``[tool.docforge]``, or holds values of
                the wrong type.
        """
        if not path.is_file():
            raise ConfigurationError(f'Config file "{path}" doesn\'t exist')
        table: TomlTable | None = extract_docforge_table(path, load_toml_dict(path))
        if table is None:
            raise ConfigurationError(f'Config file "{path}" has no [tool.docforge] table')
        logger.info("Loading config file: %s", path)
        self.apply_toml_dict(table, base=path.parent.resolve())
        self.config_files.append(path)
        return self

    def apply_toml_dict(self, table: TomlTable, *, base: Path) -> MutableSettings:
        """Layer the keys present in ``table`` onto this builder.

        Args:
            table (TomlTable): Flat DocForge table.
            base (Path): Directory against which relative paths are resolved.

        Returns:
            MutableSettings: ``self``, for chaining.
        """
        for key in table:
            if key not in Toml.ALL_KEYS:
                logger.warning("Ignoring unknown config option: %s", key)

        source = get_string_list_value_checked(table, Toml.KEY_SOURCE)
        if source is not None:
            self.source = abs_paths_from(base, source, Toml.KEY_SOURCE)
        destination = get_string_value_or_none_checked(table, Toml.KEY_DESTINATION)
        if destination is not None:
            self.destination = abs_path_from(base, destination)
        template_config = get_string_value_or_none_checked(table, Toml.KEY_TEMPLATE_CONFIG)
        if template_config is not None:
            self.template_config = abs_path_from(base, template_config)

        self._apply_common(table)
        return self

    def apply_cli_args(self, args: ArgsLike) -> MutableSettings:
        """Layer command-line overrides onto this builder.

        ``None`` values and empty sequences mean "not given on the command line"
        and leave the current value untouched. Paths resolve against the CWD.

        Args:
            args (ArgsLike): Mapping keyed by `Toml` key names plus ``help``.

        Returns:
            MutableSettings: ``self``, for chaining.
        """
        cwd: Path = Path.cwd()
        given: dict[str, Any] = {
            k: v for k, v in args.items() if v is not None and v != () and v != []
        }
        self.cli_args_given = self.cli_args_given or any(
            v is not False for v in given.values()
        )

        if Toml.KEY_SOURCE in given:
            self.source = abs_paths_from(cwd, given[Toml.KEY_SOURCE], Toml.KEY_SOURCE)
        if Toml.KEY_DESTINATION in given:
            self.destination = abs_path_from(cwd, given[Toml.KEY_DESTINATION])
        if Toml.KEY_TEMPLATE_CONFIG in given:
            self.template_config = abs_path_from(cwd, given[Toml.KEY_TEMPLATE_CONFIG])
        if given.get(ARG_HELP):
            self.help = True

        self._apply_common(
            {
                k: (list(v) if isinstance(v, (list, tuple)) else v)
                for k, v in given.items()
                if k not in Toml.PATH_KEYS
            }
        )
        return self

    def _apply_common(self, table: TomlTable) -> None:
        """Apply the non-path keys shared by config files and CLI overrides."""
        exclude = get_string_list_value_checked(table, Toml.KEY_EXCLUDE)
        if exclude is not None:
            self.exclude = exclude
        extensions = get_string_list_value_checked(table, Toml.KEY_EXTENSIONS)
        if extensions is not None:
            self.extensions = [e.lstrip(".").lower() for e in extensions if e.strip(".")]
        skip_doc_path = get_string_list_value_checked(table, Toml.KEY_SKIP_DOC_PATH)
        if skip_doc_path is not None:
            self.skip_doc_path = skip_doc_path
        skip_doc_prefix = get_string_list_value_checked(table, Toml.KEY_SKIP_DOC_PREFIX)
        if skip_doc_prefix is not None:
            self.skip_doc_prefix = skip_doc_prefix

        title = get_string_value_or_none_checked(table, Toml.KEY_TITLE)
        if title is not None:
            self.title = title
        generator = get_string_value_or_none_checked(table, Toml.KEY_GENERATOR)
        if generator is not None:
            self.generator = generator
        update_url = get_string_value_or_none_checked(table, Toml.KEY_UPDATE_URL)
        if update_url is not None:
            self.update_url = update_url

        for key in (Toml.KEY_WIPEOUT, Toml.KEY_UPDATE_CHECK, Toml.KEY_DEBUG):
            flag = get_bool_value_or_none_checked(table, key)
            if flag is not None:
                setattr(self, key, flag)

        color = table.get(Toml.KEY_COLOR)
        if color is not None:
            try:
                self.color_mode = ColorMode(color)
            except ValueError as exc:
                choices = ", ".join(m.value for m in ColorMode)
                raise ConfigurationError(
                    f'Option "{Toml.KEY_COLOR}" must be one of: {choices}'
                ) from exc

    # ---------------------------- Queries ----------------------------

    def is_help_requested(self) -> bool:
        """Return True if only header and help should be printed.

        Help is requested explicitly (``--help``), or implicitly when the command
        line carried no argument and no config file was found.
        """
        if self.help:
            return True
        return not self.cli_args_given and not self.config_files

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> Settings:
        """Validate this builder and freeze it into immutable `Settings`.

        Validation is skipped when help is requested so help always prints.

        Raises:
            ConfigurationError: On the first invalid or missing setting.
        """
        help_requested: bool = self.is_help_requested()
        template_config: Path = self.template_config or DEFAULT_TEMPLATE_CONFIG
        if not help_requested:
            self._validate(template_config)

        return Settings(
            source=tuple(self.source),
            destination=self.destination,
            exclude=tuple(self.exclude),
            extensions=tuple(self.extensions),
            template_config=template_config,
            title=self.title,
            skip_doc_path=tuple(self.skip_doc_path),
            skip_doc_prefix=tuple(self.skip_doc_prefix),
            generator=self.generator,
            update_url=self.update_url,
            help=help_requested,
            debug=self.debug,
            wipeout=self.wipeout,
            update_check=self.update_check,
            color_mode=self.color_mode,
            config_files=tuple(self.config_files),
        )

    def _validate(self, template_config: Path) -> None:
        if not self.source:
            raise ConfigurationError("Source is not set")
        for source in self.source:
            if not source.exists():
                raise ConfigurationError(f'Source "{source}" doesn\'t exist')

        if self.destination is None:
            raise ConfigurationError("Destination is not set")
        for source in self.source:
            if source.is_dir() and self.destination.is_relative_to(source):
                raise ConfigurationError(
                    f'Destination "{self.destination}" is within source "{source}"'
                )

        if not template_config.is_file():
            raise ConfigurationError(f'Template config "{template_config}" doesn\'t exist')
