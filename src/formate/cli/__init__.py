# topmark:header:start
#
#   project      : Formate
#   file         : __init__.py
#   file_relpath : src/formate/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for Formate."""
