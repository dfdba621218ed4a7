# topmark:header:start
#
#   project      : Formate
#   file         : __init__.py
#   file_relpath : src/formate/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formate configuration: immutable `Config` snapshots and the `MutableConfig` builder.

The TOML schema lives in `formate.config.keys`, file I/O and discovery in
`formate.config.loaders`, and logging setup in `formate.config.logging`.
"""

from __future__ import annotations

from formate.config.model import ArgsLike, Config, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "MutableConfig",
]
