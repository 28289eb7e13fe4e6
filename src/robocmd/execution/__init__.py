# topmark:header:start
#
#   project      : RoboCmd
#   file         : __init__.py
#   file_relpath : src/robocmd/execution/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process invocation of the external copy tool.

The single I/O boundary of RoboCmd: `robocmd.execution.runner.run_robocopy` hands the
rendered argument vector to a process runner and classifies the returned status.
"""

from __future__ import annotations
