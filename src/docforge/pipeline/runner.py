# topmark:header:start
#
#   project      : DocForge
#   file         : runner.py
#   file_relpath : src/docforge/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Phase runner: drives one DocForge run from settings to finished output.

A run moves through the `Phase` states in strict order. Each state either
completes and hands over to the next, or raises; the first exception ends the
run and is handed to `docforge.pipeline.errors.ErrorReporter`. Nothing is
retried. Help mode stops right after settings resolution.

Collaborators are injected so embedders and tests can replace them:

- ``settings_factory``: resolves and validates `Settings` (INIT);
- ``generator_factory``: builds the backend from settings (PARSE_SETUP);
- ``update_checker``: returns a newer version string or None (UPDATE_CHECK);
- ``stats``: elapsed time and peak memory for the final summary (DONE).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable

from docforge.config.logging import get_logger
from docforge.constants import DOCFORGE_VERSION
from docforge.core.errors import GenerationError
from docforge.core.exit_codes import ExitCode
from docforge.generator import program_header
from docforge.pipeline.errors import ErrorReporter
from docforge.pipeline.reporter import ProgressReporter
from docforge.pipeline.results import ParseResult
from docforge.rendering.markup import MarkupTag, markup
from docforge.utils.stats import RunStats
from docforge.utils.version import check_for_update

if TYPE_CHECKING:
    from docforge.config import Settings
    from docforge.config.logging import DocforgeLogger
    from docforge.generator import Generator, GeneratorFactory
    from docforge.rendering.console_api import ConsoleLike

logger: DocforgeLogger = get_logger(__name__)

SettingsFactory = Callable[[], "Settings"]
# (current version, update url) -> newer version or None
UpdateChecker = Callable[[str, str], "str | None"]
ColorResolver = Callable[["Settings"], bool]

FOUND_TEMPLATE = (
    "Found {} classes, {} constants, {} functions and other {} used internal classes"
)
DOCUMENTED_TEMPLATE = (
    "Documentation for {} classes, {} constants, {} functions and other {} used internal"
    " classes will be generated"
)


class Phase(str, Enum):
    """States of a run, in execution order."""

    INIT = "init"
    HELP_CHECK = "help_check"
    PARSE_SETUP = "parse_setup"
    UPDATE_CHECK = "update_check"
    SCAN_REPORT = "scan_report"
    PARSE = "parse"
    GENERATE_SETUP = "generate_setup"
    GENERATE = "generate"
    DONE = "done"


def _default_update_checker(current: str, url: str) -> str | None:
    return check_for_update(current, url)


class PhaseRunner:
    """Sequential state machine of a DocForge run.

    Args:
        settings_factory (SettingsFactory): Resolves the run settings.
        generator_factory (GeneratorFactory): Builds the backend from settings.
        console (ConsoleLike): Output console.
        color (bool): Initial color decision (markup styled or stripped).
        help_text (str): Usage text printed in help mode and on configuration errors.
        update_checker (UpdateChecker | None): Update check; defaults to
            `docforge.utils.version.check_for_update`.
        stats (RunStats | None): Run statistics; a stopwatch started now by default.
        color_resolver (ColorResolver | None): Refines the color decision once
            settings are known (e.g. a ``color`` key in the config file).
    """

    def __init__(
        self,
        settings_factory: SettingsFactory,
        generator_factory: GeneratorFactory,
        console: ConsoleLike,
        *,
        color: bool,
        help_text: str,
        update_checker: UpdateChecker | None = None,
        stats: RunStats | None = None,
        color_resolver: ColorResolver | None = None,
    ) -> None:
        self.settings_factory = settings_factory
        self.generator_factory = generator_factory
        self.console = console
        self.color = color
        self.help_text = help_text
        self.update_checker: UpdateChecker = update_checker or _default_update_checker
        self.stats: RunStats = stats or RunStats()
        self.color_resolver = color_resolver

        self.phase: Phase = Phase.INIT
        self.header: str = program_header()
        self.settings: Settings | None = None
        self.generator: Generator | None = None
        self.result: ParseResult | None = None

    @property
    def reporter(self) -> ProgressReporter:
        """Return a progress reporter bound to the current color decision."""
        return ProgressReporter(self.console, color=self.color)

    def run(self) -> ExitCode:
        """Execute the run and return its exit code.

        Returns:
            ExitCode: `ExitCode.SUCCESS` after help or a completed run;
                `ExitCode.FAILURE` after any reported failure.
        """
        try:
            return self._run_phases()
        except Exception as exc:
            logger.debug("Run failed in phase %s: %r", self.phase.value, exc)
            reporter = ErrorReporter(
                self.console, color=self.color, header=self.header, help_text=self.help_text
            )
            return reporter.report(exc, self.settings)

    def _enter(self, phase: Phase) -> None:
        logger.debug("Phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def _run_phases(self) -> ExitCode:
        # INIT
        settings: Settings = self.settings_factory()
        self.settings = settings
        if self.color_resolver is not None:
            self.color = self.color_resolver(settings)

        self._enter(Phase.HELP_CHECK)
        if settings.help:
            self.reporter.write(self.header)
            self.console.print(self.help_text)
            return ExitCode.SUCCESS

        self._enter(Phase.PARSE_SETUP)
        generator: Generator = self.generator_factory(settings)
        self.generator = generator
        self.header = generator.header()
        self.reporter.write(self.header)

        self._enter(Phase.UPDATE_CHECK)
        if settings.update_check:
            self._check_for_update(settings)

        self._enter(Phase.SCAN_REPORT)
        self.reporter.report_list("Scanning", [str(p) for p in settings.source])
        self.reporter.report_list("Excluding", list(settings.exclude))

        self._enter(Phase.PARSE)
        result: ParseResult = self._normalize_result(generator.parse())
        self.result = result
        self.reporter.report(FOUND_TEMPLATE, *(markup(MarkupTag.COUNT, n) for n in result.found))
        self.reporter.report(
            DOCUMENTED_TEMPLATE, *(markup(MarkupTag.COUNT, n) for n in result.documented)
        )

        self._enter(Phase.GENERATE_SETUP)
        self.reporter.report(
            "Using template config file {}", markup(MarkupTag.VALUE, settings.template_config)
        )
        if settings.wipeout and settings.destination is not None and settings.destination.is_dir():
            self.reporter.write("Wiping out destination directory")
            if not generator.wipe_out_destination():
                raise GenerationError("cannot clear destination")
        self.reporter.report(
            "Generating to directory {}", markup(MarkupTag.VALUE, settings.destination)
        )
        self.reporter.report_list("Will not generate documentation for", list(settings.skipping))

        self._enter(Phase.GENERATE)
        generator.generate()

        self._enter(Phase.DONE)
        self.reporter.report(
            "Done. Total time: {} seconds, used: {} MB RAM",
            markup(MarkupTag.COUNT, self.stats.elapsed_seconds()),
            markup(MarkupTag.COUNT, self.stats.peak_memory_mb()),
        )
        return ExitCode.SUCCESS

    def _check_for_update(self, settings: Settings) -> None:
        try:
            latest: str | None = self.update_checker(DOCFORGE_VERSION, settings.update_url)
        except Exception as exc:  # noqa: BLE001
            logger.debug("Update check failed: %r", exc)
            return
        if latest is None:
            return
        self.reporter.report("New version {} available", markup(MarkupTag.HEADER, latest))
        self.console.print()

    @staticmethod
    def _normalize_result(raw: object) -> ParseResult:
        if isinstance(raw, ParseResult):
            return raw
        if isinstance(raw, (list, tuple)):
            return ParseResult.from_sequence(raw)
        raise GenerationError(f"Generator returned an invalid parse result: {raw!r}")
