# topmark:header:start
#
#   project      : DocForge
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Pytest configuration for the DocForge test suite.

Shared fixtures:

- a fake generator backend recording which hooks the run reached;
- a recording console capturing program output line by line;
- an isolated project directory with a ``src/`` tree.

Notes:
    Build `Settings` directly for pipeline tests (validation is done by
    `MutableSettings.freeze`, which has its own tests).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

import pytest

from docforge.config import Settings, logging
from docforge.generator import Generator
from docforge.pipeline.results import ParseResult

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

#: Default counts returned by `FakeGenerator.parse`: found 3/1/2/0, documented 2/1/2/0.
DEFAULT_COUNTS: tuple[int, ...] = (3, 1, 2, 0, 2, 1, 2, 0)


class FakeGenerator(Generator):
    """Generator backend double driven by constructor arguments.

    Every hook appends its name to ``calls`` so tests can assert which phases ran.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        calls: list[str],
        counts: ParseResult | Sequence[int] = DEFAULT_COUNTS,
        parse_error: BaseException | None = None,
        generate_error: BaseException | None = None,
        wipe_ok: bool = True,
    ) -> None:
        super().__init__(settings)
        self.calls = calls
        self.counts = counts
        self.parse_error = parse_error
        self.generate_error = generate_error
        self.wipe_ok = wipe_ok
        self.calls.append("init")

    def parse(self) -> ParseResult | Sequence[int]:
        self.calls.append("parse")
        if self.parse_error is not None:
            raise self.parse_error
        return self.counts

    def wipe_out_destination(self) -> bool:
        self.calls.append("wipe")
        return self.wipe_ok

    def generate(self) -> None:
        self.calls.append("generate")
        if self.generate_error is not None:
            raise self.generate_error


class RecordingConsole:
    """`ConsoleLike` implementation collecting printed text in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.errors: list[str] = []

    def print(self, text: str = "", *, nl: bool = True) -> None:
        self.lines.append(text)

    def error(self, text: str, *, nl: bool = True) -> None:
        self.errors.append(text)

    def styled(self, text: str, **style_kwargs: object) -> str:
        return text

    @property
    def output(self) -> str:
        """Return everything printed, one entry per line."""
        return "\n".join(self.lines) + "\n"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables from changing logging or color in tests."""
    monkeypatch.delenv("DOCFORGE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Silence logging again after tests that lowered the level."""
    yield
    logging.setup_logging(level=logging.logging.CRITICAL)


@pytest.fixture
def calls() -> list[str]:
    """Return the list into which fake generators record their hooks."""
    return []


@pytest.fixture
def make_generator_factory(calls: list[str]) -> Callable[..., Callable[[Settings], Generator]]:
    """Return a builder of generator factories producing `FakeGenerator` instances.

    Keyword arguments are forwarded to `FakeGenerator`; the built instance is
    also kept in ``factory.instances``.
    """

    def build(**kwargs: Any) -> Callable[[Settings], Generator]:
        instances: list[FakeGenerator] = []

        def factory(settings: Settings) -> Generator:
            gen = FakeGenerator(settings, calls=calls, **kwargs)
            instances.append(gen)
            return gen

        factory.instances = instances  # type: ignore[attr-defined]
        return factory

    return build


@pytest.fixture
def console() -> RecordingConsole:
    """Return a fresh recording console."""
    return RecordingConsole()


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create an isolated project directory and make it the working directory.

    Layout: ``src/a.php``, ``src/lib/b.php``, ``src/notes.txt``; no config file.
    """
    root: Path = tmp_path / "proj"
    (root / "src" / "lib").mkdir(parents=True)
    (root / "src" / "a.php").write_text("<?php class A {}\n", encoding="utf-8")
    (root / "src" / "lib" / "b.php").write_text("<?php class B {}\n", encoding="utf-8")
    (root / "src" / "notes.txt").write_text("notes\n", encoding="utf-8")
    monkeypatch.chdir(root)
    return root


def make_settings(root: Path, **overrides: Any) -> Settings:
    """Return `Settings` for a project rooted at ``root`` with sensible defaults."""
    values: dict[str, Any] = {
        "source": (root / "src",),
        "destination": root / "out",
        "update_check": False,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings_for() -> Callable[..., Settings]:
    """Return `make_settings` as a fixture (test modules never import conftest)."""
    return make_settings
