"""Extract :class:`~elmgen.models.RequestDescriptor` values from a loaded document.

A descriptor document is either a list of endpoint objects or a mapping
with an ``endpoints`` list. Endpoints use a compact, hand-writable form::

    endpoints:
      - name: get_books
        method: GET
        path: [books]
        query:
          - {name: published, type: Bool, kind: flag}
          - {name: sort, type: String}
          - {name: filters, type: List (Maybe Bool), kind: list}
        returns: List Book
      - name: get_books_by_id
        method: GET
        path: [books, {capture: id, type: Int}]
        returns: Book

Shorthand rules:

* ``name`` and ``returns`` stand for ``function_name`` and ``return_type``
  (the long names are accepted too).
* A string path entry is a static segment; ``{capture, type}`` is a
  captured one.
* Types are strings parsed by :func:`~elmgen.typerefs.parse_type` or
  ``{name, args}`` mappings.
* A path written as one string such as ``"/books/{id}"`` is rejected since
  capture types cannot be inferred from it.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from elmgen.exceptions import DescriptorError, TypeExpressionError
from elmgen.models import RequestDescriptor

_KEY_ALIASES = {
    "name": "function_name",
    "returns": "return_type",
}


def extract_descriptors(document: Any) -> list[RequestDescriptor]:
    """Validate every endpoint of *document* into a descriptor, in order.

    Args:
        document: The object returned by
            :func:`~elmgen.descriptors.loader.load_document`.

    Returns:
        The endpoint descriptors, in document order.

    Raises:
        DescriptorError: If the document has no endpoint list or an endpoint
            fails validation. The message names the offending endpoint.
    """
    if isinstance(document, dict):
        if "endpoints" not in document:
            raise DescriptorError("Descriptor document has no 'endpoints' list")
        endpoints = document["endpoints"]
    else:
        endpoints = document

    if not isinstance(endpoints, list):
        raise DescriptorError(
            f"'endpoints' must be a list (got {type(endpoints).__name__})"
        )

    return [_extract_one(index, raw) for index, raw in enumerate(endpoints)]


def _extract_one(index: int, raw: Any) -> RequestDescriptor:
    if not isinstance(raw, dict):
        raise DescriptorError(
            f"Endpoint #{index} must be an object (got {type(raw).__name__})"
        )
    data = _normalize_endpoint(index, raw)
    label = data.get("function_name") or f"#{index}"
    try:
        return RequestDescriptor.model_validate(data)
    except ValidationError as exc:
        raise DescriptorError(f"Invalid endpoint {label}: {exc}") from exc
    except TypeExpressionError as exc:
        raise TypeExpressionError(f"Invalid endpoint {label}: {exc}") from exc


def _normalize_endpoint(index: int, raw: dict[str, Any]) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for key, value in raw.items():
        data[_KEY_ALIASES.get(key, key)] = value

    path = data.get("path", [])
    if isinstance(path, str):
        raise DescriptorError(
            f"Endpoint #{index}: 'path' must be a list of segments, not {path!r}"
        )
    if isinstance(path, list):
        data["path"] = [_normalize_segment(segment) for segment in path]
    return data


def _normalize_segment(segment: Any) -> Any:
    if isinstance(segment, str):
        return {"kind": "static", "text": segment}
    if isinstance(segment, dict) and "capture" in segment:
        normalized = {k: v for k, v in segment.items() if k != "capture"}
        normalized["kind"] = "capture"
        normalized["name"] = segment["capture"]
        return normalized
    if isinstance(segment, dict) and "kind" not in segment and "text" in segment:
        return {**segment, "kind": "static"}
    return segment
