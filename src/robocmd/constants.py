# topmark:header:start
#
#   project      : RoboCmd
#   file         : constants.py
#   file_relpath : src/robocmd/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RoboCmd Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    ROBOCMD_VERSION: str = get_version("robocmd")
except PackageNotFoundError:  # running from a source checkout
    ROBOCMD_VERSION = "0.0.0+unknown"

# Name of the external copy tool as found on PATH.
DEFAULT_EXECUTABLE: str = "robocopy"

# Environment variables
ENV_LOG_LEVEL: str = "ROBOCMD_LOG_LEVEL"
ENV_EXECUTABLE: str = "ROBOCMD_EXECUTABLE"

# Configuration files
CONFIG_FILE_NAME: str = "robocmd.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "robocmd"

VALUE_NOT_SET: str = "<not set>"
