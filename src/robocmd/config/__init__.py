# topmark:header:start
#
#   project      : RoboCmd
#   file         : __init__.py
#   file_relpath : src/robocmd/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for RoboCmd.

- ``logging``: Python logging setup (TRACE level, colored formatter).
- ``loader``: loading a command description from ``robocmd.toml`` or
  ``[tool.robocmd]`` in ``pyproject.toml``, and dumping a command back to TOML.
"""

from __future__ import annotations
