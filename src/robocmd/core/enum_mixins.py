# topmark:header:start
#
#   project      : RoboCmd
#   file         : enum_mixins.py
#   file_relpath : src/robocmd/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for RoboCmd (typing-friendly, UI-agnostic).

Provided:
    - ``KeyedStrEnum``: ``str`` enum whose ``.value`` is a stable machine key
      (used in TOML configuration) with a human ``label`` and parse aliases.
    - ``norm_token(s)``: the normalization applied before matching keys.

Design:
    - Keep the functions *pure* and side-effect free.
    - Avoid bringing UI libraries (e.g. yachalk) into this module.

Example:
    ```python
    class Mode(KeyedStrEnum):
        FAST = ("fast", "Fast mode", ("quick",))
        SAFE = ("safe", "Safe mode")

    assert Mode.parse("Quick") is Mode.FAST
    assert Mode.SAFE.label == "Safe mode"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def norm_token(s: str) -> str:
    """Normalize an identifier-like string to match config keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Use this when you want:
      - a stable, serialization-friendly key (`.value` / `.key`)
      - a human label (`.label`) and optional aliases for parsing

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against:
          - the stable key (`.value`)
          - the member name (`.name`)
          - any configured aliases

        Matching is case-insensitive and normalizes '-', ' ' to '_' via `norm_token()`.
        """
        if raw is None:
            return None
        token: str = norm_token(raw)

        for m in cls:
            if token == norm_token(m.value):
                return m
            if token == norm_token(m.name):
                return m
            for a in m.aliases:
                if token == norm_token(a):
                    return m
        return None
