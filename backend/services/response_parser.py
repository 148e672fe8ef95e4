"""Recover a JSON array from free-form model text.

The model is asked for a bare JSON array but may wrap it in commentary or
markdown fences. Brackets are matched by depth, skipping anything inside
JSON string literals, so nested arrays (``key_matches``, ``concerns``) and
``]`` characters inside notes do not end the array early.
"""

import json
import logging
from collections.abc import Iterator
from typing import Any

from services.errors import UnparsableResponse

logger = logging.getLogger(__name__)


def _balanced_end(text: str, start: int) -> int | None:
    """Index of the ``]`` closing the ``[`` at *start*, or None if unbalanced."""
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                return i
    return None


def iter_bracketed_spans(text: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) of each top-level balanced ``[...]`` span, in order."""
    pos = 0
    while True:
        start = text.find("[", pos)
        if start == -1:
            return
        end = _balanced_end(text, start)
        if end is None:
            # An unclosed bracket may still contain a complete array further on
            pos = start + 1
            continue
        yield start, end
        pos = end + 1


def extract_json_array(text: str) -> list[Any]:
    """Return the elements of the first balanced bracketed span that decodes as a JSON array.

    Raises UnparsableResponse when no balanced span exists or none decodes.
    """
    found_span = False
    for start, end in iter_bracketed_spans(text or ""):
        found_span = True
        candidate = text[start:end + 1]
        try:
            value = json.loads(candidate)
        except json.JSONDecodeError as e:
            logger.debug("Skipping non-JSON bracketed span at %d: %s", start, e)
            continue
        if isinstance(value, list):
            return value

    if not found_span:
        raise UnparsableResponse("Could not parse model response: no JSON array found", text)
    raise UnparsableResponse("Could not parse model response: JSON array is malformed", text)
