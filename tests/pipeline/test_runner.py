# topmark:header:start
#
#   project      : DocForge
#   file         : test_runner.py
#   file_relpath : tests/pipeline/test_runner.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Tests for the phase runner state machine."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from docforge.config import Settings
from docforge.core.errors import ConfigurationError, GenerationError
from docforge.core.exit_codes import ExitCode
from docforge.pipeline.runner import Phase, PhaseRunner

HELP = "Usage: docforge [OPTIONS]"

pytestmark = pytest.mark.pipeline


class FixedStats:
    """Run statistics returning fixed values."""

    def elapsed_seconds(self) -> int:
        return 4

    def peak_memory_mb(self) -> int:
        return 12


def _runner(
    settings: Settings | Callable[[], Settings],
    factory: Callable[[Settings], Any],
    console: Any,
    **kwargs: Any,
) -> PhaseRunner:
    settings_factory = settings if callable(settings) else (lambda: settings)
    kwargs.setdefault("update_checker", lambda current, url: None)
    return PhaseRunner(
        settings_factory,
        factory,
        console,
        color=False,
        help_text=HELP,
        stats=FixedStats(),  # type: ignore[arg-type]
        **kwargs,
    )


def test_successful_run_reports_every_phase(
    project: Path,
    console: Any,
    calls: list[str],
    make_generator_factory: Callable[..., Any],
    settings_for: Callable[..., Settings],
) -> None:
    """A full run prints the progress lines in phase order and exits 0."""
    settings = settings_for(project)
    runner = _runner(settings, make_generator_factory(), console)

    code = runner.run()

    assert code == ExitCode.SUCCESS
    assert runner.phase is Phase.DONE
    assert calls == ["init", "parse", "generate"]
    lines = console.lines
    assert lines[0].startswith("DocForge ")
    assert lines[1:] == [
        f"Scanning {project / 'src'}",
        "Found 3 classes, 1 constants, 2 functions and other 0 used internal classes",
        "Documentation for 2 classes, 1 constants, 2 functions and other 0 used internal"
        " classes will be generated",
        f"Using template config file {settings.template_config}",
        f"Generating to directory {project / 'out'}",
        "Done. Total time: 4 seconds, used: 12 MB RAM",
    ]


def test_single_source_without_excludes(
    project: Path,
    console: Any,
    make_generator_factory: Callable[..., Any],
    settings_for: Callable[..., Settings],
) -> None:
    """One source renders inline and no excluding line is printed."""
    settings = settings_for(project, source=(Path("/a"),), exclude=())

    _runner(settings, make_generator_factory(), console).run()

    assert "Scanning /a" in console.lines
    assert not any(line.startswith("Excluding") for line in console.lines)


def test_multiple_sources_and_single_exclude(
    project: Path,
    console: Any,
    make_generator_factory: Callable[..., Any],
    settings_for: Callable[..., Settings],
) -> None:
    """Several sources enumerate on indented lines; one exclude renders inline."""
    settings = settings_for(project, source=(Path("/a"), Path("/b")), exclude=("/c",))

    _runner(settings, make_generator_factory(), console).run()

    assert "Scanning\n /a\n /b" in console.lines
    assert "Excluding /c" in console.lines


def test_help_prints_header_and_help_only(
    project: Path,
    console: Any,
    calls: list[str],
    make_generator_factory: Callable[..., Any],
    settings_for: Callable[..., Settings],
) -> None:
    """Help mode exits 0 after header and help; no generator is built."""
    checked: list[str] = []
    settings = settings_for(project, help=True, update_check=True)
    runner = _runner(
        settings,
        make_generator_factory(),
        console,
        update_checker=lambda current, url: checked.append(url),
    )

    code = runner.run()

    assert code == ExitCode.SUCCESS
    assert runner.phase is Phase.HELP_CHECK
    assert calls == []
    assert checked == []
    assert console.lines[0].startswith("DocForge ")
    assert console.lines[-1] == HELP


def test_failed_wipe_stops_the_run(
    project: Path,
    console: Any,
    calls: list[str],
    make_generator_factory: Callable[..., Any],
    settings_for: Callable[..., Settings],
) -> None:
    """A failing wipe reports the fixed message and never generates."""
    (project / "out").mkdir()
    settings = settings_for(project, wipeout=True)
    runner = _runner(settings, make_generator_factory(wipe_ok=False), console)

    code = runner.run()

    assert code == ExitCode.FAILURE
    assert runner.phase is Phase.GENERATE_SETUP
    assert calls == ["init", "parse", "wipe"]
    assert "Wiping out destination directory" in console.lines
    assert console.lines[-3:] == ["", "cannot clear destination", ""]


def test_wipe_skipped_when_destination_missing(
    project: Path,
    console: Any,
    calls: list[str],
    make_generator_factory: Callable[..., Any],
    settings_for: Callable[..., Settings],
) -> None:
    """Wipeout is a no-op when the destination does not exist yet."""
    settings = settings_for(project, wipeout=True)

    code = _runner(settings, make_generator_factory(), console).run()

    assert code == ExitCode.SUCCESS
    assert "wipe" not in calls


def test_parse_failure_never_reaches_generate(
    project: Path,
    console: Any,
    calls: list[str],
    make_generator_factory: Callable[..., Any],
    settings_for: Callable[..., Settings],
) -> None:
    """A parse failure ends the run before the generate phase."""
    runner = _runner(
        settings_for(project),
        make_generator_factory(parse_error=GenerationError("cannot parse")),
        console,
    )

    code = runner.run()

    assert code == ExitCode.FAILURE
    assert runner.phase is Phase.PARSE
    assert "generate" not in calls
    assert "cannot parse" in console.lines


def _wrapped_parse_error() -> GenerationError:
    try:
        try:
            raise OSError("root msg")
        except OSError as exc:
            raise GenerationError("wrap msg") from exc
    except GenerationError as outer:
        return outer


@pytest.mark.parametrize("debug", [True, False])
def test_parse_failure_output_depends_on_debug(
    project: Path,
    console: Any,
    make_generator_factory: Callable[..., Any],
    settings_for: Callable[..., Settings],
    debug: bool,
) -> None:
    """Debug shows both chain messages and a trace; otherwise only the outer message."""
    runner = _runner(
        settings_for(project, debug=debug),
        make_generator_factory(parse_error=_wrapped_parse_error()),
        console,
    )

    runner.run()

    output = console.output
    assert "wrap msg" in console.lines
    if debug:
        assert "root msg" in console.lines
        assert console.lines.index("wrap msg") < console.lines.index("root msg")
        assert "Traceback (most recent call last):" in output
    else:
        assert "root msg" not in output
        assert "Traceback" not in output


def test_settings_failure_is_a_configuration_error(
    console: Any, calls: list[str], make_generator_factory: Callable[..., Any]
) -> None:
    """A failing settings factory prints header, message and help; exit 1."""

    def broken_settings() -> Settings:
        raise ConfigurationError("Destination is not set")

    runner = _runner(broken_settings, make_generator_factory(), console)

    code = runner.run()

    assert code == ExitCode.FAILURE
    assert runner.phase is Phase.INIT
    assert runner.settings is None
    assert calls == []
    assert console.lines[0].startswith("DocForge ")
    assert "Destination is not set" in console.lines
    assert console.lines[-1] == HELP


def test_update_notice_for_newer_version(
    project: Path,
    console: Any,
    make_generator_factory: Callable[..., Any],
    settings_for: Callable[..., Settings],
) -> None:
    """A newer release prints a notice followed by a blank line."""
    settings = settings_for(project, update_check=True, update_url="https://example.invalid/v")
    seen: list[str] = []

    def checker(current: str, url: str) -> str | None:
        seen.append(url)
        return "99.0.0"

    _runner(settings, make_generator_factory(), console, update_checker=checker).run()

    assert seen == ["https://example.invalid/v"]
    index = console.lines.index("New version 99.0.0 available")
    assert console.lines[index + 1] == ""


def test_update_check_failure_is_silent(
    project: Path,
    console: Any,
    make_generator_factory: Callable[..., Any],
    settings_for: Callable[..., Settings],
) -> None:
    """An exception from the update checker never fails the run."""

    def checker(current: str, url: str) -> str | None:
        raise TimeoutError("slow network")

    settings = settings_for(project, update_check=True)
    code = _runner(settings, make_generator_factory(), console, update_checker=checker).run()

    assert code == ExitCode.SUCCESS
    assert not any("New version" in line for line in console.lines)


def test_parse_result_sequence_is_validated(
    project: Path,
    console: Any,
    calls: list[str],
    make_generator_factory: Callable[..., Any],
    settings_for: Callable[..., Settings],
) -> None:
    """A backend reporting more documented than found elements fails the run."""
    runner = _runner(
        settings_for(project),
        make_generator_factory(counts=[1, 0, 0, 0, 2, 0, 0, 0]),
        console,
    )

    assert runner.run() == ExitCode.FAILURE
    assert "generate" not in calls


def test_skip_rules_are_reported(
    project: Path,
    console: Any,
    make_generator_factory: Callable[..., Any],
    settings_for: Callable[..., Settings],
) -> None:
    """Path rules come first, then prefix rules."""
    settings = settings_for(project, skip_doc_path=("tests/*",), skip_doc_prefix=("Test",))

    _runner(settings, make_generator_factory(), console).run()

    assert "Will not generate documentation for\n tests/*\n Test" in console.lines


def test_color_resolver_refines_color(
    project: Path,
    console: Any,
    make_generator_factory: Callable[..., Any],
    settings_for: Callable[..., Settings],
) -> None:
    """The color decision is refined once settings are known."""
    runner = _runner(
        settings_for(project),
        make_generator_factory(),
        console,
        color_resolver=lambda settings: True,
    )

    runner.run()

    assert runner.color is True
