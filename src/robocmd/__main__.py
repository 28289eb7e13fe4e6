# topmark:header:start
#
#   project      : RoboCmd
#   file         : __main__.py
#   file_relpath : src/robocmd/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running RoboCmd via ``python -m robocmd``.

It delegates directly to `robocmd.cli.main.cli`, the same entry point as the
``robocmd`` console script.
"""

from __future__ import annotations

from robocmd.cli.main import cli

if __name__ == "__main__":
    cli()
