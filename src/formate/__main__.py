# topmark:header:start
#
#   project      : Formate
#   file         : __main__.py
#   file_relpath : src/formate/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Formate via ``python -m formate``.

Delegates to `formate.cli.main.cli`, the single CLI entry point.

Examples:
    python -m formate check .
"""

from __future__ import annotations

from formate.cli.main import cli

if __name__ == "__main__":
    cli()
