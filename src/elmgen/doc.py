"""Pretty-printing documents in the style of Wadler and Leijen.

Generated Elm code is built as a tree of :class:`Doc` nodes and laid out by
:func:`render`, which decides where grouped documents break based on the
page width and ribbon fraction. The combinators mirror the classic
``Text.PrettyPrint.Leijen`` vocabulary:

* ``a + b`` -- concatenation (``<>``)
* :func:`beside` -- concatenation with a space (``<+>``)
* :func:`above` -- concatenation with a line break (``<$>``)
* :func:`nest`, :func:`align`, :func:`hang`, :func:`indent` -- indentation
* :func:`group` -- lay out on one line if it fits, otherwise break

:data:`EMPTY` is absorbed by :func:`beside` and :func:`above`, so optional
pieces can be dropped in without leaving stray spaces or blank lines.

A :data:`LINE` renders as a newline followed by the current indentation, or
as a single space when its enclosing group is flattened;
:data:`LINEBREAK` flattens to nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


class Doc:
    """Base class of all document nodes."""

    def __add__(self, other: Doc) -> Doc:
        if isinstance(self, _Empty):
            return other
        if isinstance(other, _Empty):
            return self
        return _Cat(self, other)


@dataclass(frozen=True)
class _Empty(Doc):
    pass


@dataclass(frozen=True)
class _Text(Doc):
    text: str


@dataclass(frozen=True)
class _Line(Doc):
    flat: str


@dataclass(frozen=True)
class _Cat(Doc):
    left: Doc
    right: Doc


@dataclass(frozen=True)
class _Nest(Doc):
    indent: int
    doc: Doc


@dataclass(frozen=True)
class _Align(Doc):
    doc: Doc


@dataclass(frozen=True)
class _Group(Doc):
    doc: Doc


EMPTY: Doc = _Empty()
LINE: Doc = _Line(" ")
LINEBREAK: Doc = _Line("")
SPACE: Doc = _Text(" ")


# ---------------------------------------------------------------------------
# Primitive combinators
# ---------------------------------------------------------------------------


def text(value: str) -> Doc:
    """A literal run of text. *value* must not contain newlines."""
    if not value:
        return EMPTY
    return _Text(value)


def nest(i: int, doc: Doc) -> Doc:
    """Increase the indentation of line breaks inside *doc* by *i*."""
    return _Nest(i, doc)


def align(doc: Doc) -> Doc:
    """Indent line breaks inside *doc* to the column where *doc* starts."""
    return _Align(doc)


def group(doc: Doc) -> Doc:
    """Render *doc* on one line if it fits, with its breaks intact otherwise."""
    return _Group(doc)


def hang(i: int, doc: Doc) -> Doc:
    return align(nest(i, doc))


def indent(i: int, doc: Doc) -> Doc:
    """Indent *doc* by *i* columns, including its first line."""
    return hang(i, text(" " * i) + doc)


# ---------------------------------------------------------------------------
# Derived combinators
# ---------------------------------------------------------------------------


def beside(left: Doc, right: Doc) -> Doc:
    """``left <+> right``: join with a space unless either side is empty."""
    if isinstance(left, _Empty):
        return right
    if isinstance(right, _Empty):
        return left
    return left + SPACE + right


def above(top: Doc, bottom: Doc) -> Doc:
    """``top <$> bottom``: join with a :data:`LINE` unless either side is empty."""
    if isinstance(top, _Empty):
        return bottom
    if isinstance(bottom, _Empty):
        return top
    return top + LINE + bottom


def _below_tight(top: Doc, bottom: Doc) -> Doc:
    if isinstance(top, _Empty):
        return bottom
    if isinstance(bottom, _Empty):
        return top
    return top + LINEBREAK + bottom


def _fold(op, docs: Iterable[Doc]) -> Doc:
    result = EMPTY
    for doc in reversed(list(docs)):
        result = op(doc, result)
    return result


def hsep(docs: Iterable[Doc]) -> Doc:
    return _fold(beside, docs)


def vsep(docs: Iterable[Doc]) -> Doc:
    return _fold(above, docs)


def vcat(docs: Iterable[Doc]) -> Doc:
    return _fold(_below_tight, docs)


def cat(docs: Iterable[Doc]) -> Doc:
    """Concatenate horizontally if it fits, otherwise one document per line."""
    return group(vcat(docs))


def punctuate(sep: Doc, docs: Sequence[Doc]) -> list[Doc]:
    """Append *sep* to every document except the last."""
    if not docs:
        return []
    return [doc + sep for doc in docs[:-1]] + [docs[-1]]


def enclose_sep(left: Doc, right: Doc, sep: Doc, docs: Sequence[Doc]) -> Doc:
    """Enclose *docs* in *left*/*right*, prefixing all but the first with *sep*."""
    if not docs:
        return left + right
    if len(docs) == 1:
        return left + docs[0] + right
    prefixed = [left + docs[0]] + [sep + doc for doc in docs[1:]]
    return align(cat(prefixed) + right)


def enclose(left: str, right: str, doc: Doc) -> Doc:
    return text(left) + doc + text(right)


def dquotes(doc: Doc) -> Doc:
    return enclose('"', '"', doc)


def parens(doc: Doc) -> Doc:
    return enclose("(", ")", doc)


def braces(doc: Doc) -> Doc:
    return enclose("{", "}", doc)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render(doc: Doc, width: int = 100, ribbon: float = 0.4) -> str:
    """Lay out *doc* as text.

    A group is flattened when its flat form, plus whatever follows it up to
    the next line break, fits both in the remaining page width and within
    the ribbon (the share of the line allowed to hold non-indentation
    characters).

    Args:
        doc: The document to render.
        width: Maximum line width.
        ribbon: Fraction of *width* available for text after indentation.

    Returns:
        The rendered text, without a trailing newline.
    """
    ribbon_width = max(0, min(width, round(width * ribbon)))
    out: list[str] = []
    column = 0
    # Stack of (indentation, flat, doc); the top of the stack renders next.
    stack: list[tuple[int, bool, Doc]] = [(0, False, doc)]

    while stack:
        i, flat, node = stack.pop()
        if isinstance(node, _Empty):
            continue
        if isinstance(node, _Text):
            out.append(node.text)
            column += len(node.text)
        elif isinstance(node, _Line):
            if flat:
                out.append(node.flat)
                column += len(node.flat)
            else:
                out.append("\n" + " " * i)
                column = i
        elif isinstance(node, _Cat):
            stack.append((i, flat, node.right))
            stack.append((i, flat, node.left))
        elif isinstance(node, _Nest):
            stack.append((i + node.indent, flat, node.doc))
        elif isinstance(node, _Align):
            stack.append((column, flat, node.doc))
        elif isinstance(node, _Group):
            if flat:
                stack.append((i, True, node.doc))
                continue
            available = min(width - column, ribbon_width - column + i)
            pending = [(i, True, node.doc)] + stack[::-1]
            stack.append((i, _fits(available, column, pending), node.doc))
        else:
            raise TypeError(f"Unknown document node: {node!r}")

    return "".join(out)


def _fits(available: int, column: int, pending: list[tuple[int, bool, Doc]]) -> bool:
    """Whether the first line of *pending* fits in *available* characters."""
    queue = list(reversed(pending))
    while queue:
        if available < 0:
            return False
        i, flat, node = queue.pop()
        if isinstance(node, _Empty):
            continue
        if isinstance(node, _Text):
            available -= len(node.text)
            column += len(node.text)
        elif isinstance(node, _Line):
            if not flat:
                return True
            available -= len(node.flat)
            column += len(node.flat)
        elif isinstance(node, _Cat):
            queue.append((i, flat, node.right))
            queue.append((i, flat, node.left))
        elif isinstance(node, _Nest):
            queue.append((i + node.indent, flat, node.doc))
        elif isinstance(node, _Align):
            queue.append((column, flat, node.doc))
        elif isinstance(node, _Group):
            queue.append((i, True, node.doc))
    return available >= 0
