# topmark:header:start
#
#   project      : Formate
#   file         : test_beautifier.py
#   file_relpath : tests/formatting/test_beautifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Beautifier collaborators and their selection from config."""

from __future__ import annotations

from formate.formatting import (
    Beautifier,
    BeautifyOptions,
    CssBeautifier,
    PassthroughBeautifier,
    beautifier_for,
    format_text,
)
from tests.conftest import make_config


def test_options_from_config_defaults() -> None:
    """Defaults indent with four spaces and separate rules with blank lines."""
    options = BeautifyOptions.from_config(make_config())
    assert options == BeautifyOptions()
    assert options.indent_char == " "
    assert options.indent_size == 4


def test_beautifier_selection() -> None:
    """``beautify = false`` selects the passthrough beautifier."""
    assert isinstance(beautifier_for(make_config()), CssBeautifier)
    assert isinstance(beautifier_for(make_config(beautify=False)), PassthroughBeautifier)
    assert isinstance(CssBeautifier(), Beautifier)


def test_passthrough_returns_input() -> None:
    """The passthrough beautifier is the identity."""
    assert PassthroughBeautifier().beautify("a{b:c}", BeautifyOptions()) == "a{b:c}"


def test_css_beautifier_indents_declarations() -> None:
    """cssbeautifier puts one declaration per line with the configured indentation."""
    out = CssBeautifier().beautify("a{color:red;top:0}", BeautifyOptions(tab_size=2))
    lines = out.split("\n")
    assert lines[0] == "a {"
    assert "  color: red;" in lines
    assert lines[-1] == "}"


def test_beautify_then_align() -> None:
    """The full chain beautifies first and aligns the beautified declarations."""
    out = format_text("a{color:red;background-color:green}\n", make_config())
    lines = [line for line in out.split("\n") if ":" in line]
    assert len(lines) == 2
    assert lines[0].index(":") == lines[1].index(":")
    assert out.endswith("}\n")
