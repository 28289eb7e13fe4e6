# topmark:header:start
#
#   project      : RoboCmd
#   file         : __init__.py
#   file_relpath : src/robocmd/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RoboCmd package.

RoboCmd compiles typed, composable option values into the argument vector of the
Windows ``robocopy`` file-copy tool, runs it, and classifies its exit status.
The stable public surface lives in `robocmd.api`.
"""

from __future__ import annotations
