# topmark:header:start
#
#   project      : Formate
#   file         : test_classifier.py
#   file_relpath : tests/align/test_classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line classifier: declaration heuristic, comment and ignore-marker predicates."""

from __future__ import annotations

from formate.align.classifier import (
    DEFAULT_CLASSIFIER,
    LineClassifier,
    RegexLineClassifier,
    is_comment_line,
    is_ignore_marker_line,
    is_property_line,
)
from tests.conftest import parametrize


@parametrize(
    "line",
    [
        "color: red;",
        "    color: #333;",
        "background-color: green;",
        "text-align:center;",
        "margin : 0 auto;",
        "font-family: 'Helvetica Neue', Arial, sans-serif;",
        "-webkit-transition: all 0.2s;",
        "$primary: #ff0000;",
        "@base-color: #333;",
        "--main-bg: #fff;",
        "background: url(http://example.com/a.png);",
        "width: 100%",
    ],
)
def test_declarations_are_property_lines(line: str) -> None:
    """Declaration-shaped lines (including preprocessor variables) are accepted."""
    assert is_property_line(line)


@parametrize(
    "line",
    [
        "",
        "   ",
        "a:hover,",
        "a:hover {",
        "    a:focus {",
        ".c{",
        "}",
        "div p",
        "color;",
        "@media screen and (max-width: 10px) {",
        "transition: color 1s,",
        "a|b:c|",
    ],
)
def test_non_declarations_are_rejected(line: str) -> None:
    """Selectors, rule openers, continuations and blank lines are not declarations."""
    assert not is_property_line(line)


def test_comment_line_detection() -> None:
    """Only lines whose trimmed text starts with ``//`` are line comments."""
    assert is_comment_line("// a comment")
    assert is_comment_line("    //indented")
    assert not is_comment_line("color: red; // trailing")
    assert not is_comment_line("/* block */")
    assert not is_comment_line("")


@parametrize(
    "line",
    [
        "// formate-ignore",
        "    // formate-ignore   ",
        "//formate-ignore",
        "//   formate-ignore",
        "// formate-ignore next line please",
    ],
)
def test_ignore_marker_variants(line: str) -> None:
    """The ignore marker tolerates surrounding whitespace and trailing text."""
    assert is_ignore_marker_line(line)
    # An ignore marker is also a comment line.
    assert is_comment_line(line)


@parametrize("line", ["", "formate-ignore", "/* formate-ignore */", "// formate", "// ignore"])
def test_not_ignore_markers(line: str) -> None:
    """Lines without the ``//`` prefix and directive token are not markers."""
    assert not is_ignore_marker_line(line)


def test_default_classifier_satisfies_protocol() -> None:
    """The regex classifier implements the `LineClassifier` capability interface."""
    assert isinstance(DEFAULT_CLASSIFIER, LineClassifier)
    assert isinstance(RegexLineClassifier(), LineClassifier)
    assert DEFAULT_CLASSIFIER.is_property_line("color: red;")
    assert "pattern=" in repr(DEFAULT_CLASSIFIER)
