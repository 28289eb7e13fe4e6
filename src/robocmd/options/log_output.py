# topmark:header:start
#
#   project      : RoboCmd
#   file         : log_output.py
#   file_relpath : src/robocmd/options/log_output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Log file written by the external copy tool.

Renders one of ``/log:``, ``/log+:``, ``/unilog:`` or ``/unilog+:`` followed by the path.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LoggingSettings:
    """Where and how the external tool writes its log.

    Attributes:
        path (Path): Log file path, passed through verbatim.
        unicode (bool): Write a Unicode log (``/unilog``).
        append (bool): Append to an existing log (``+`` suffix) instead of overwriting.
    """

    path: Path
    unicode: bool = False
    append: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))

    def token(self) -> str:
        """Return the single log token, e.g. ``/unilog+:C:\\logs\\copy.log``."""
        return f"/{'uni' if self.unicode else ''}log{'+' if self.append else ''}:{self.path}"

    def render(self) -> list[str]:
        """Return ``[token]``."""
        return [self.token()]
