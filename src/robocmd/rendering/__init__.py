# topmark:header:start
#
#   project      : RoboCmd
#   file         : __init__.py
#   file_relpath : src/robocmd/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers for RoboCmd.

This package provides CLI/UI-adjacent helpers (colors, outcome display) that are kept
separate from core, UI-agnostic utilities.

Public modules:
    - robocmd.rendering.colored_enum
    - robocmd.rendering.outcomes
"""

from __future__ import annotations
