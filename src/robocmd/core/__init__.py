# topmark:header:start
#
#   project      : RoboCmd
#   file         : __init__.py
#   file_relpath : src/robocmd/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across RoboCmd.

Included modules:

- ``flagset``
  The generic bounded-vocabulary flag-set type with combination, decomposition and
  rendering, specialized by every option family.

- ``exit_codes``
  Classification of the external tool's exit status into success and failure outcomes.

- ``enum_mixins``
  Keyed string enums with labels and alias parsing.

- ``errors``
  The library exception hierarchy.

Design goals:

- Keep this package free of UI dependencies and side effects.
- Prefer small, well-typed helpers over framework-specific utilities.
"""

from __future__ import annotations
