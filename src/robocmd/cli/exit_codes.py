# topmark:header:start
#
#   project      : RoboCmd
#   file         : exit_codes.py
#   file_relpath : src/robocmd/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the RoboCmd CLI.

Codes follow BSD ``sysexits`` where practical. They describe the CLI's own outcome;
the external tool's exit status is classified separately by
`robocmd.core.exit_codes`.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes of the RoboCmd CLI.

    Attributes:
        SUCCESS (int): The command completed; for ``run``, the tool reported success.
        FAILURE (int): For ``run``, the tool reported a failure-tier outcome (8..16).
        USAGE_ERROR (int): Invalid command-line usage (EX_USAGE).
        UNAVAILABLE (int): The external tool could not be launched (EX_UNAVAILABLE).
        SOFTWARE_ERROR (int): Unclassifiable exit status or abnormal termination
            (EX_SOFTWARE).
        CONFIG_ERROR (int): Missing, unreadable or invalid configuration (EX_CONFIG).

    Usage:
        ```python
        import subprocess
        from robocmd.cli.exit_codes import ExitCode

        result = subprocess.run(["robocmd", "run", "src", "dst"])
        if result.returncode == ExitCode.FAILURE:
            print("Some copies failed.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    UNAVAILABLE = 69
    SOFTWARE_ERROR = 70
    CONFIG_ERROR = 78
