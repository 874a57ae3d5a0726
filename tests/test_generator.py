# topmark:header:start
#
#   project      : DocForge
#   file         : test_generator.py
#   file_relpath : tests/test_generator.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Tests for the generator backend base class and backend loading."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from docforge.config import Settings
from docforge.core.errors import ConfigurationError
from docforge.generator import Generator, load_generator, program_header
from docforge.pipeline.results import ParseResult
from docforge.rendering.markup import strip_markup

BACKEND_MODULE = '''
from docforge.generator import Generator


class EmptyGenerator(Generator):
    def parse(self):
        return [0] * 8

    def generate(self):
        pass


NOT_A_GENERATOR = 42
'''


class NullGenerator(Generator):
    """Concrete backend exercising the base class helpers."""

    def parse(self) -> ParseResult:
        return ParseResult.from_sequence([0] * 8)

    def generate(self) -> None:
        return None


def _files(gen: Generator, root: Path) -> list[str]:
    return [p.relative_to(root).as_posix() for p in gen.iter_source_files()]


def test_header_names_program_and_version() -> None:
    """The header is a markup span with the program name."""
    header = program_header()

    assert header.startswith("@header@DocForge ")
    assert strip_markup(header).endswith(" - API documentation generator\n")


def test_iter_source_files_filters_extensions(
    project: Path, settings_for: Callable[..., Settings]
) -> None:
    """Only files with a configured extension are selected."""
    gen = NullGenerator(settings_for(project, extensions=("php",)))

    assert _files(gen, project) == ["src/a.php", "src/lib/b.php"]


def test_iter_source_files_applies_gitignore_patterns(
    project: Path, settings_for: Callable[..., Settings]
) -> None:
    """Exclusion patterns match relative to the source directory."""
    gen = NullGenerator(settings_for(project, exclude=("lib/",)))

    assert _files(gen, project) == ["src/a.php", "src/notes.txt"]


def test_iter_source_files_deduplicates_overlapping_sources(
    project: Path, settings_for: Callable[..., Settings]
) -> None:
    """A file reachable from two sources is yielded once."""
    src = project / "src"
    gen = NullGenerator(settings_for(project, source=(src, src / "a.php"), extensions=("php",)))

    assert _files(gen, project) == ["src/a.php", "src/lib/b.php"]


def test_wipe_out_destination_removes_content(
    project: Path, settings_for: Callable[..., Settings]
) -> None:
    """Files and subdirectories are removed; the directory itself stays."""
    out = project / "out"
    (out / "sub").mkdir(parents=True)
    (out / "sub" / "page.html").write_text("x", encoding="utf-8")
    (out / "index.html").write_text("x", encoding="utf-8")

    assert NullGenerator(settings_for(project)).wipe_out_destination() is True
    assert out.is_dir()
    assert list(out.iterdir()) == []


def test_wipe_out_destination_reports_failure(
    project: Path, settings_for: Callable[..., Settings], monkeypatch: pytest.MonkeyPatch
) -> None:
    """An entry that cannot be removed makes the wipe fail."""
    out = project / "out"
    out.mkdir()
    (out / "locked.html").write_text("x", encoding="utf-8")

    def refuse(self: Path, missing_ok: bool = False) -> None:
        raise PermissionError("read-only")

    monkeypatch.setattr(Path, "unlink", refuse)

    assert NullGenerator(settings_for(project)).wipe_out_destination() is False


@pytest.fixture
def backend_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Write an importable backend module and return its name."""
    (tmp_path / "fake_docforge_backend.py").write_text(BACKEND_MODULE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return "fake_docforge_backend"


def test_load_generator_imports_backend(
    backend_module: str, project: Path, settings_for: Callable[..., Settings]
) -> None:
    """``module:attribute`` names a Generator subclass, instantiated with settings."""
    settings = settings_for(project, generator=f"{backend_module}:EmptyGenerator")

    gen = load_generator(settings)

    assert type(gen).__name__ == "EmptyGenerator"
    assert gen.settings is settings


@pytest.mark.parametrize(
    ("target", "message"),
    [
        (None, "Generator is not set"),
        ("no_colon_here", "module:attribute"),
        ("docforge_missing_backend_xyz:Gen", "Cannot import"),
        ("{module}:NOT_A_GENERATOR", "is not a docforge.generator.Generator"),
        ("{module}:Missing", "is not a docforge.generator.Generator"),
        ("docforge.generator:Generator", "does not implement"),
    ],
)
def test_load_generator_errors(
    backend_module: str,
    project: Path,
    settings_for: Callable[..., Settings],
    target: str | None,
    message: str,
) -> None:
    """Bad backend settings are configuration errors."""
    if target is not None:
        target = target.format(module=backend_module)

    with pytest.raises(ConfigurationError, match=message):
        load_generator(settings_for(project, generator=target))
