"""Elm syntax helpers shared by the generator builders."""

from __future__ import annotations

from typing import Sequence

from elmgen.doc import (
    EMPTY,
    LINE,
    Doc,
    above,
    beside,
    dquotes,
    enclose_sep,
    hsep,
    indent,
    punctuate,
    text,
)

INDENT = 4
"""Indentation width of generated code."""

EMPTY_STRING: Doc = dquotes(EMPTY)

_ESCAPES = str.maketrans(
    {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}
)


def elm_string(value: str) -> Doc:
    """A double-quoted Elm string literal."""
    escaped = value.translate(_ESCAPES)
    return dquotes(text(escaped))


def elm_list(items: Sequence[Doc]) -> Doc:
    """An Elm list in leading-comma style, one element per line."""
    if not items:
        return text("[]")
    return above(beside(text("["), hsep(punctuate(LINE + text(","), items))), text("]"))


def elm_record(fields: Sequence[Doc]) -> Doc:
    """An Elm record in leading-comma style."""
    return enclose_sep(text("{ "), LINE + text("}"), text(", "), fields)


def elm_field(name: str, value: Doc) -> Doc:
    """``name =`` with *value* indented on the following line."""
    return above(text(f"{name} ="), indent(INDENT, value))
