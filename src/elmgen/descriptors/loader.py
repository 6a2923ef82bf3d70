"""Load descriptor documents from a URL, local file, or stdin.

This module handles all I/O for fetching raw descriptor documents and
converting them into Python objects. It supports both JSON and YAML with
automatic format detection. The result is handed to
:func:`~elmgen.descriptors.extractor.extract_descriptors`.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import httpx
import yaml

from elmgen.exceptions import DescriptorError


def load_document(source: str) -> Any:
    """Load a descriptor document from URL, file path, or stdin ('-').

    Supports JSON and YAML formats.
    Auto-detects format from content/extension.

    Args:
        source: A URL (http/https), file path, or '-' for stdin.

    Returns:
        The parsed document -- a list of endpoints or a mapping with an
        ``endpoints`` key.

    Raises:
        DescriptorError: If the source cannot be loaded or parsed.
    """
    if source == "-":
        return _load_from_stdin()
    elif source.startswith(("http://", "https://")):
        return _load_from_url(source)
    else:
        return _load_from_file(source)


def _load_from_stdin() -> Any:
    """Read a descriptor document from stdin."""
    try:
        content = sys.stdin.read()
    except OSError as exc:
        raise DescriptorError(f"Failed to read from stdin: {exc}") from exc

    if not content.strip():
        raise DescriptorError("No input received from stdin")

    return _parse_content(content, hint="stdin")


def _load_from_url(url: str) -> Any:
    """Fetch a descriptor document from URL. Supports JSON and YAML responses.

    Raises:
        DescriptorError: If the URL cannot be fetched or content cannot be parsed.
    """
    try:
        response = httpx.get(url, timeout=30.0, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise DescriptorError(
            f"HTTP {exc.response.status_code} fetching descriptors from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise DescriptorError(f"Failed to fetch descriptors from {url}: {exc}") from exc

    content_type = response.headers.get("content-type", "")
    hint = ""
    if "json" in content_type:
        hint = "json"
    elif "yaml" in content_type or "yml" in content_type:
        hint = "yaml"

    return _parse_content(response.text, hint=hint)


def _load_from_file(path: str) -> Any:
    """Load a descriptor document from a local file.

    The ``.json``, ``.yaml`` and ``.yml`` extensions select the parser;
    anything else falls back to content-based detection.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise DescriptorError(f"Descriptor file not found: {path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DescriptorError(f"Failed to read descriptor file {path}: {exc}") from exc

    if not content.strip():
        raise DescriptorError(f"Descriptor file is empty: {path}")

    suffix = file_path.suffix.lower()
    hint = ""
    if suffix == ".json":
        hint = "json"
    elif suffix in (".yaml", ".yml"):
        hint = "yaml"

    return _parse_content(content, hint=hint)


def _parse_content(content: str, hint: str = "") -> Any:
    """Parse content as JSON or YAML.

    Tries JSON first (unless hint is 'yaml'), then falls back to YAML.
    Valid JSON is also valid YAML, but JSON parsing is stricter.

    Raises:
        DescriptorError: If the content cannot be parsed as either format,
            or is neither a list nor a mapping.
    """
    json_error: Exception | None = None
    yaml_error: Exception | None = None

    if hint != "yaml":
        try:
            return _check_shape(json.loads(content))
        except json.JSONDecodeError as exc:
            json_error = exc
            if hint == "json":
                raise DescriptorError(f"Invalid JSON: {exc}") from exc

    try:
        return _check_shape(yaml.safe_load(content))
    except yaml.YAMLError as exc:
        yaml_error = exc

    msg = "Failed to parse descriptors as JSON or YAML"
    if json_error:
        msg += f"\n  JSON error: {json_error}"
    if yaml_error:
        msg += f"\n  YAML error: {yaml_error}"
    raise DescriptorError(msg)


def _check_shape(result: Any) -> Any:
    if not isinstance(result, (dict, list)):
        got = type(result).__name__ if result is not None else "empty document"
        raise DescriptorError(f"Descriptors must be a JSON/YAML list or object (got {got})")
    return result
