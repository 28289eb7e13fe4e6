# topmark:header:start
#
#   project      : RoboCmd
#   file         : __init__.py
#   file_relpath : src/robocmd/command/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The command object and its argument-vector renderer.

- ``model``: `RobocopyCommand` (immutable) and `MutableRobocopyCommand` (builder).
- ``render``: the fixed-order assembly of the argument vector, including the mirror
  collapse of recursion, purge and security flags.
"""

from __future__ import annotations
