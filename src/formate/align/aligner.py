# topmark:header:start
#
#   project      : Formate
#   file         : aligner.py
#   file_relpath : src/formate/align/aligner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Vertical alignment of property declarations.

`vertical_align` is the whole transform: split the text into lines, detect the
property groups, align every group independently, and join the lines again.
It is a pure function of its arguments with no shared state, so it is safe to
call concurrently on independent inputs.

Example:
    ```python
    css = ".c{\\n  color: red;\\n  background-color: green;\\n}"
    vertical_align(css)
    # '.c{\\n  color           : red;\\n  background-color: green;\\n}'
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from formate.align.rewriter import align_group
from formate.align.scanner import scan_groups
from formate.config.logging import get_logger

if TYPE_CHECKING:
    from formate.align.classifier import LineClassifier
    from formate.config.logging import FormateLogger

logger: FormateLogger = get_logger(__name__)


def vertical_align(
    text: str,
    additional_spaces: int = 0,
    align_colon: bool = True,
    *,
    classifier: LineClassifier | None = None,
) -> str:
    """Align the colons (or values) of every property group in ``text``.

    Args:
        text (str): Beautified stylesheet text, newline-separated.
        additional_spaces (int): Extra spaces added to the furthest colon of each group.
        align_colon (bool): Pad before the colon (colons line up) if True, after the
            colon (values line up) otherwise.
        classifier (LineClassifier | None): Optional replacement line classifier.

    Returns:
        str: The aligned text, with the same number of lines as ``text``.

    Raises:
        ValueError: If ``additional_spaces`` is negative.
    """
    if additional_spaces < 0:
        raise ValueError(f"additional_spaces must be >= 0, got {additional_spaces}")

    lines: list[str] = text.split("\n")
    groups = 0
    rewritten = 0
    for group in scan_groups(lines, classifier):
        groups += 1
        rewritten += align_group(lines, group, additional_spaces, align_colon)

    logger.debug(
        "vertical_align: %d line(s), %d group(s), %d line(s) rewritten",
        len(lines),
        groups,
        rewritten,
    )
    return "\n".join(lines)
