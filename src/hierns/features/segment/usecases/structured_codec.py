"""
Summary: Encode segments as null/string/list storage values and decode them back.
Why: Let configuration and persistence documents embed segments losslessly.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from hierns.features.segment.domain.errors import (
    CodingKey,
    CodingPath,
    DataCorruptedError,
    render_coding_path,
)
from hierns.features.segment.domain.segment import (
    NONE,
    AggregateSegment,
    AtomicSegment,
    Segment,
    StructureMarker,
    iter_structure,
)
from hierns.platform.logging import logger

# Storage values are what JSON and TOML loaders hand back: None, str or list.
StructuredValue = str | list["StructuredValue"] | None


def encode(segment: Segment) -> StructuredValue:
    """Encode a segment into its storage value. Never fails, at any depth.

    Args:
        segment: Segment to encode.

    Returns:
        StructuredValue: ``None`` for the empty segment, the string for an atomic
        segment, and a list of encoded children for an aggregate.
    """
    # Open lists, innermost last; the root list is kept for the return value.
    open_lists: list[list[StructuredValue]] = []
    result: StructuredValue = None
    for token in iter_structure(segment):
        if token is StructureMarker.OPEN:
            nested: list[StructuredValue] = []
            if open_lists:
                open_lists[-1].append(nested)
            else:
                result = nested
            open_lists.append(nested)
        elif token is StructureMarker.CLOSE:
            _ = open_lists.pop()
        elif token is StructureMarker.SEPARATOR:
            continue
        else:
            value = token.value if isinstance(token, AtomicSegment) else None
            if open_lists:
                open_lists[-1].append(value)
            else:
                result = value
    return result


def _try_nil(value: object) -> Segment | None:
    return NONE if value is None else None


def _try_scalar(value: object) -> Segment | None:
    return AtomicSegment(value) if isinstance(value, str) else None


def _try_list(value: object) -> Sequence[Any] | None:
    return value if isinstance(value, (list, tuple)) else None


@dataclass(slots=True)
class _ListFrame:
    """A list being decoded: its elements, location and children decoded so far."""

    elements: Sequence[Any]
    coding_path: CodingPath
    children: list[Segment] = field(default_factory=list)


def _corrupted(value: object, path: CodingPath) -> DataCorruptedError:
    description = (
        f"Expected null, a string or a list of segments, got {type(value).__name__}"
    )
    logger.debug(
        "Structured decode failed at %s: %s",
        render_coding_path(path),
        description,
        extra={"segment_event": "segment.decode.error", "coding_path": path},
    )
    return DataCorruptedError(path, description)


def decode(value: Any, coding_path: Sequence[CodingKey] = ()) -> Segment:
    """Decode a storage value into a segment.

    Shapes are tried in order: null, then string, then list of segments. A
    string is never read as a one-element list, nor the reverse. Nested lists
    are decoded with an explicit stack, so depth is not limited by recursion.

    Args:
        value: Storage value, typically taken from a JSON or TOML document.
        coding_path: Location of ``value`` inside the enclosing document.

    Returns:
        Segment: The decoded segment.

    Raises:
        DataCorruptedError: If ``value`` (or any nested element) has another
            shape. The error carries the path of the offending element.
    """
    path: CodingPath = tuple(coding_path)

    segment = _try_nil(value)
    if segment is None:
        segment = _try_scalar(value)
    if segment is not None:
        return segment

    elements = _try_list(value)
    if elements is None:
        raise _corrupted(value, path)

    stack: list[_ListFrame] = [_ListFrame(elements, path)]
    while True:
        frame = stack[-1]
        if len(frame.children) == len(frame.elements):
            _ = stack.pop()
            built = AggregateSegment(tuple(frame.children))
            if not stack:
                return built
            stack[-1].children.append(built)
            continue

        index = len(frame.children)
        element = frame.elements[index]
        element_path: CodingPath = (*frame.coding_path, index)

        leaf = _try_nil(element)
        if leaf is None:
            leaf = _try_scalar(element)
        if leaf is not None:
            frame.children.append(leaf)
            continue

        nested = _try_list(element)
        if nested is None:
            raise _corrupted(element, element_path)
        stack.append(_ListFrame(nested, element_path))


def dumps(segment: Segment, **json_kwargs: Any) -> str:
    """Encode a segment and serialize it as JSON.

    Args:
        segment: Segment to serialize.
        **json_kwargs: Extra keyword arguments forwarded to ``json.dumps``.

    Note:
        ``encode`` handles any depth, but ``json.dumps`` itself recurses, so
        segments nested beyond the interpreter recursion limit raise
        ``RecursionError`` here. Use ``encode`` with another writer for those.

    Returns:
        str: JSON document.
    """
    payload = encode(segment)
    logger.debug(
        "Encoded %s segment",
        segment.kind,
        extra={"segment_event": "segment.encode", "segment_text": segment.description},
    )
    _ = json_kwargs.setdefault("ensure_ascii", False)
    return json.dumps(payload, **json_kwargs)


def loads(text: str | bytes) -> Segment:
    """Deserialize a JSON document and decode it into a segment.

    Args:
        text: JSON document, as text or as encoded bytes (UTF-8/16/32).

    Returns:
        Segment: The decoded segment.

    Raises:
        DataCorruptedError: If the document cannot be decoded as text, is not
            valid JSON, nests deeper than the ``json`` parser supports, or does
            not describe a segment.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataCorruptedError((), f"Invalid JSON: {exc.msg}") from exc
    except UnicodeDecodeError as exc:
        raise DataCorruptedError((), f"Undecodable JSON bytes: {exc.reason}") from exc
    except RecursionError as exc:
        raise DataCorruptedError((), "JSON nesting exceeds the parser depth limit") from exc

    segment = decode(payload)
    logger.debug(
        "Decoded %s segment",
        segment.kind,
        extra={"segment_event": "segment.decode", "segment_text": segment.description},
    )
    return segment


__all__ = ["StructuredValue", "decode", "dumps", "encode", "loads"]
