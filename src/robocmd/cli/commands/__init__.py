# topmark:header:start
#
#   project      : RoboCmd
#   file         : __init__.py
#   file_relpath : src/robocmd/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the RoboCmd CLI (one module per command)."""

from __future__ import annotations
