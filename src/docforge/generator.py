# topmark:header:start
#
#   project      : DocForge
#   file         : generator.py
#   file_relpath : src/docforge/generator.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Generator backend contract.

DocForge drives the run; a *generator backend* does the actual work of
reflecting the sources and rendering documentation. A backend subclasses
`Generator`, implements `Generator.parse` and `Generator.generate`, and is
selected with the ``generator`` setting (``module:attribute``)::

    # docforge.toml
    generator = "mydocs.backend:HtmlGenerator"

The base class supplies the program header, destination wiping and source file
enumeration (extensions filter plus gitignore-style exclusions) so backends
share the same scanning rules as the progress report.
"""

from __future__ import annotations

import importlib
import inspect
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from docforge.config.logging import get_logger
from docforge.constants import DOCFORGE_NAME, DOCFORGE_VERSION
from docforge.core.errors import ConfigurationError
from docforge.rendering.markup import MarkupTag, markup

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from docforge.config import Settings
    from docforge.config.logging import DocforgeLogger
    from docforge.pipeline.results import ParseResult

logger: DocforgeLogger = get_logger(__name__)


def program_header() -> str:
    """Return the markup header identifying the program and its version."""
    name: str = markup(MarkupTag.HEADER, f"{DOCFORGE_NAME} {DOCFORGE_VERSION}")
    return f"{name} - API documentation generator\n"


class Generator(ABC):
    """Base class of generator backends.

    Args:
        settings (Settings): Resolved settings of the current run.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def header(self) -> str:
        """Return the markup header printed at the start of a run."""
        return program_header()

    @abstractmethod
    def parse(self) -> ParseResult | Sequence[int]:
        """Scan and reflect the sources.

        Returns:
            ParseResult | Sequence[int]: The 8 element counts, found then documented
                (classes, constants, functions, internal classes).
        """

    @abstractmethod
    def generate(self) -> None:
        """Render the documentation into ``settings.destination``."""

    def wipe_out_destination(self) -> bool:
        """Delete the content of the destination directory.

        Returns:
            bool: True when the destination is empty afterwards; False if an
                entry could not be removed.
        """
        destination: Path | None = self.settings.destination
        if destination is None or not destination.is_dir():
            return True
        for entry in sorted(destination.iterdir()):
            try:
                if entry.is_dir() and not entry.is_symlink():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()
            except OSError as exc:
                logger.error("Cannot remove %s: %s", entry, exc)
                return False
            logger.trace("Removed %s", entry)
        return True

    def iter_source_files(self) -> Iterator[Path]:
        """Yield the source files selected by the settings, in a stable order.

        A source given as a file is yielded when its extension matches. A source
        directory is walked recursively; exclusion patterns are matched against
        paths relative to that directory, with ``.gitignore`` semantics.
        """
        extensions: frozenset[str] = frozenset(self.settings.extensions)
        spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(self.settings.exclude))
        seen: set[Path] = set()

        def selected(path: Path, rel: str) -> bool:
            if path in seen:
                return False
            if extensions and path.suffix.lstrip(".").lower() not in extensions:
                return False
            if spec.match_file(rel):
                logger.debug("Excluded: %s", path)
                return False
            return True

        for source in self.settings.source:
            if source.is_file():
                if selected(source, source.name):
                    seen.add(source)
                    yield source
                continue
            for path in sorted(p for p in source.rglob("*") if p.is_file()):
                if selected(path, path.relative_to(source).as_posix()):
                    seen.add(path)
                    yield path


GeneratorFactory = Callable[["Settings"], Generator]


def load_generator(settings: Settings) -> Generator:
    """Import and instantiate the backend named by ``settings.generator``.

    Args:
        settings (Settings): Resolved settings; ``generator`` is ``module:attribute``.

    Returns:
        Generator: The backend instance.

    Raises:
        ConfigurationError: If the setting is missing or malformed, the module
            cannot be imported, or the attribute is not a `Generator` subclass.
    """
    target: str | None = settings.generator
    if not target:
        raise ConfigurationError("Generator is not set")
    module_name, _, attr = target.partition(":")
    if not module_name or not attr:
        raise ConfigurationError(f'Generator "{target}" must be given as module:attribute')
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f'Cannot import generator module "{module_name}"') from exc
    factory: object = getattr(module, attr, None)
    if not (isinstance(factory, type) and issubclass(factory, Generator)):
        raise ConfigurationError(f'Generator "{target}" is not a docforge.generator.Generator')
    if inspect.isabstract(factory):
        raise ConfigurationError(f'Generator "{target}" does not implement parse() and generate()')
    logger.debug("Loaded generator backend %s", target)
    return factory(settings)
