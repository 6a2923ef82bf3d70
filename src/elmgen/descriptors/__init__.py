"""Endpoint descriptor sources -- load and validate descriptor documents.

The generator consumes already-built :class:`~elmgen.models.RequestDescriptor`
values. This sub-package builds them from a JSON or YAML document (local
file, remote URL, or stdin) so that the CLI can drive generation for APIs
described outside Python.

Typical usage::

    from elmgen.descriptors import load_descriptors

    descriptors = load_descriptors("api.yaml")

Sub-modules:

* :mod:`~elmgen.descriptors.loader` -- I/O layer (URL, file, stdin) plus
  JSON/YAML format detection.
* :mod:`~elmgen.descriptors.extractor` -- Expands the document's shorthand
  forms and validates every endpoint into a ``RequestDescriptor``.
"""

from __future__ import annotations

from elmgen.descriptors.extractor import extract_descriptors
from elmgen.descriptors.loader import load_document
from elmgen.models import RequestDescriptor


def load_descriptors(source: str) -> list[RequestDescriptor]:
    """Load a descriptor document from *source* and extract its endpoints."""
    return extract_descriptors(load_document(source))


__all__ = ["extract_descriptors", "load_descriptors", "load_document"]
