# topmark:header:start
#
#   project      : Formate
#   file         : __init__.py
#   file_relpath : src/formate/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formate CLI subcommands."""
