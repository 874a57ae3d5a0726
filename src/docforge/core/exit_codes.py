# topmark:header:start
#
#   project      : DocForge
#   file         : exit_codes.py
#   file_relpath : src/docforge/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Defines the exit codes used by the DocForge CLI.

A run either completes (including help display) or stops on the first failure.
Configuration and runtime failures share one exit status so shell scripts only
need to test for non-zero; the console output tells the two apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for DocForge CLI.

    Attributes:
        SUCCESS (int): The run completed, or help was displayed.
        FAILURE (int): A configuration error or a failure during the scan,
            parse or generate phases.

    Usage:
        ```python
        import subprocess
        from docforge.core.exit_codes import ExitCode

        result = subprocess.run(["docforge", "--config", "docforge.toml"])
        if result.returncode == ExitCode.SUCCESS:
            print("Documentation generated.")
        ```

    Note:
        Click's own usage errors (unknown option, invalid choice) are reported
        by Click before DocForge runs and keep Click's exit status 2.
    """

    SUCCESS = 0
    FAILURE = 1
