"""Identifiers used in generated Elm functions.

Endpoint names become camel-cased function names, and every argument gets a
category prefix so that a capture, a query parameter and a header with the
same raw name still produce distinct Elm identifiers:

==============  ============================  ==================
Part            Raw name                      Argument
==============  ============================  ==================
path capture    ``id``                        ``capture_id``
query param     ``sort``                      ``query_sort``
header          ``X-Request-Id``              ``header_X_Request_Id``
request body    --                            ``body``
dynamic prefix  --                            ``urlBase``
==============  ============================  ==================
"""

from __future__ import annotations

import re

from elmgen.exceptions import GenerationError
from elmgen.models import CaptureSegment, HeaderParam, QueryParam

BODY_ARG = "body"
URL_BASE_ARG = "urlBase"

_WORD_SEPARATOR_RE = re.compile(r"[_\s.]+")


def elm_function_name(name: str) -> str:
    """Convert an endpoint name to an Elm function name.

    The name is split into words on underscores, whitespace and dots; the
    first word is kept as is and later words are capitalised. Hyphens are
    dropped, not treated as word boundaries.

    Example::

        >>> elm_function_name("get_books_by_id")
        'getBooksById'
        >>> elm_function_name("post_user-profiles")
        'postUserprofiles'
    """
    words = [word for word in _WORD_SEPARATOR_RE.split(name) if word]
    if not words:
        raise GenerationError(f"Endpoint name {name!r} has no usable characters")
    camel = words[0] + "".join(word[:1].upper() + word[1:] for word in words[1:])
    return camel.replace("-", "")


def capture_arg(capture: CaptureSegment) -> str:
    return "capture_" + capture.name


def query_arg(param: QueryParam) -> str:
    return "query_" + param.name


def header_arg(header: HeaderParam) -> str:
    return "header_" + header.name.replace("-", "_")
