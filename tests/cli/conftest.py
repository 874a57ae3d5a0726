# topmark:header:start
#
#   project      : DocForge
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""CLI test helpers for running DocForge through Click's test runner.

The `run_cli` fixture invokes the command with a fake generator backend and a
silent update checker injected through Click's context object, so CLI tests
never import a real backend or touch the network.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

import pytest
from click.testing import CliRunner, Result

from docforge.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


@pytest.fixture
def run_cli(make_generator_factory: Callable[..., Any]) -> Callable[..., Result]:
    """Return a helper invoking ``docforge`` with test doubles injected.

    Helper keyword arguments:
        generator_factory: Backend factory; defaults to a `FakeGenerator` factory.
            Pass ``None`` explicitly with ``load_backend=True`` to use the real loader.
        update_checker: Update check double; defaults to "no newer version".
        load_backend (bool): Do not inject a generator factory at all.
    """

    def run(
        argv: Sequence[str],
        *,
        generator_factory: Callable[..., Any] | None = None,
        update_checker: Callable[[str, str], str | None] | None = None,
        load_backend: bool = False,
    ) -> Result:
        obj: dict[str, Any] = {
            "update_checker": update_checker or (lambda current, url: None),
        }
        if not load_backend:
            obj["generator_factory"] = generator_factory or make_generator_factory()
        return CliRunner().invoke(cli, list(argv), obj=obj)

    return run
