"""Request URL expression.

The path is an Elm list joined with ``/`` whose first element is the base
URL: the configured static prefix, or the ``urlBase`` argument when the
prefix is dynamic. Captured segments are URI-encoded with Elm's
``Http.encodeUri`` (``encodeURIComponent`` semantics), after ``toString``
unless the capture is already a string.

When the endpoint has query parameters, the joined ``params`` binding from
:mod:`elmgen.generator.query` is appended behind a ``?``, or nothing at all
if every parameter rendered empty.
"""

from __future__ import annotations

from typing import Sequence

from elmgen.doc import EMPTY, LINE, Doc, above, align, beside, indent, text, vsep
from elmgen.generator.naming import URL_BASE_ARG, capture_arg
from elmgen.generator.query import PARAMS_BINDING
from elmgen.generator.syntax import EMPTY_STRING, INDENT, elm_list, elm_string
from elmgen.models import CaptureSegment, PathSegment, RequestDescriptor, StaticSegment
from elmgen.options import ElmOptions, StaticPrefix


def mk_url(options: ElmOptions, segments: Sequence[PathSegment]) -> Doc:
    """``String.join "/" [ <base>, <segment>... ]``"""
    if isinstance(options.url_prefix, StaticPrefix):
        base = elm_string(options.url_prefix.url)
    else:
        base = text(URL_BASE_ARG)
    items = [base] + [_segment_to_doc(options, segment) for segment in segments]
    return above(beside(text("String.join"), elm_string("/")), indent(INDENT, elm_list(items)))


def _segment_to_doc(options: ElmOptions, segment: PathSegment) -> Doc:
    if isinstance(segment, StaticSegment):
        return elm_string(segment.text)
    if isinstance(segment, CaptureSegment):
        to_string = "" if options.is_string_type(segment.type) else " |> toString"
        return text(f"{capture_arg(segment)}{to_string} |> Http.encodeUri")
    raise ValueError(f"Unknown path segment: {segment!r}")


def mk_query_params(descriptor: RequestDescriptor) -> Doc:
    """The ``++ if List.isEmpty params ...`` suffix, or nothing without query parameters."""
    if not descriptor.query:
        return EMPTY
    conditional = vsep(
        [
            text(f"if List.isEmpty {PARAMS_BINDING} then"),
            indent(INDENT, EMPTY_STRING),
            text("else"),
            indent(
                INDENT,
                beside(
                    beside(elm_string("?"), text("++ String.join")),
                    beside(elm_string("&"), text(PARAMS_BINDING)),
                ),
            ),
        ]
    )
    return LINE + beside(text("++"), align(conditional))
