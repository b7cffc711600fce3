"""JSON extraction from LLM responses.

This module locates a single JSON object or array embedded in noisy text,
validates its bracket structure, and parses it. Text is expected to have
been through sanitize_content() already; no fence or quote handling
happens here.

The engine never raises for content problems. Every outcome is reported
through a Result:
- success: a candidate was found and decoded
- check: one missing closing bracket was auto-added and the repair decoded,
  or a bracket-balanced candidate failed to decode (``raw`` holds it)
- fail: no candidate, a bracket mismatch, more than one open bracket,
  or a repair that still does not decode
"""

import json as _json
import logging
from typing import Any

from snipsmart.core.domain import Result

logger = logging.getLogger("snipsmart.helpers.json")

BRACKETS = {"{": "}", "[": "]"}
CLOSERS = frozenset(BRACKETS.values())

INVALID_INPUT = "Invalid input: content must be a non-empty string."
PARSED = "JSON successfully extracted and parsed."


class _Mismatch(Exception):
    """Raised by _scan_structure() when a closer does not match the open bracket."""

    def __init__(self, index: int) -> None:
        super().__init__(index)
        self.index = index


def _decode(candidate: str) -> tuple[Any, Exception | None]:
    # strict=False accepts raw control characters inside strings, which
    # show up once escaped newlines have been collapsed by the sanitizer.
    # ValueError also covers integers past the int digit limit; deep
    # nesting exhausts the decoder's recursion.
    try:
        return _json.loads(candidate, strict=False), None
    except (ValueError, RecursionError) as e:
        return None, e


def _find_start(content: str) -> int:
    """Return the index of the earliest '{' or '[', or -1 if there is none."""
    positions = [i for i in (content.find(opener) for opener in BRACKETS) if i != -1]
    return min(positions) if positions else -1


def _scan_structure(content: str, start: int) -> tuple[int, list[str]]:
    """Walk the text from start, tracking expected closers on a stack.

    Scanning stops at the first index where the stack returns to empty;
    anything after that first balanced span is ignored.

    Args:
        content: The full text.
        start: Index of the opening bracket.

    Returns:
        (end, stack): end is the index of the closer that balanced the
        structure, or -1 if the text ran out first, in which case stack
        holds the closers still expected, innermost last.

    Raises:
        _Mismatch: If a closer appears with an empty stack or does not
            match the innermost open bracket.
    """
    stack: list[str] = []
    for i in range(start, len(content)):
        char = content[i]
        if char in BRACKETS:
            stack.append(BRACKETS[char])
        elif char in CLOSERS:
            if not stack or stack.pop() != char:
                raise _Mismatch(i)
            if not stack:
                return i, stack
    return -1, stack


def snip_json(content: Any) -> Result:
    """Extract and parse the first JSON object or array embedded in text.

    A fast path first slices from the first opening bracket to the last
    occurrence of its closer and tries to decode that. Only when it fails
    does the bracket scan run, which returns the first balanced span and
    may append a single missing closer when exactly one bracket is left
    open at end of input.

    Args:
        content: Text potentially containing a JSON value surrounded by
            prose. Anything other than a non-empty string fails.

    Returns:
        A Result describing what was found.

    Example:
        >>> snip_json('Here you go: {"a": 1} Cheers').data
        {'a': 1}
        >>> snip_json('{"name": "Alice", "age": 30 ').status
        <Status.CHECK: 'check'>
    """
    if not isinstance(content, str) or not content:
        return Result.fail(INVALID_INPUT)

    start = _find_start(content)
    if start == -1:
        return Result.fail("No JSON structure found.")
    logger.debug(f"JSON candidate starts at index {start} with {content[start]!r}")

    end = content.rfind(BRACKETS[content[start]])
    if end > start:
        data, error = _decode(content[start : end + 1])
        if error is None:
            logger.debug(f"Fast path parsed slice [{start}:{end + 1}]")
            return Result.success(PARSED, data)
        logger.debug(f"Fast path failed, scanning brackets: {error}")

    try:
        end, stack = _scan_structure(content, start)
    except _Mismatch as e:
        logger.debug(f"Bracket mismatch at index {e.index}")
        return Result.fail("Bracket mismatch detected.", raw=content[start : e.index + 1])

    if end == -1:
        tail = content[start:]
        if len(stack) > 1:
            logger.debug(f"{len(stack)} brackets left open, not repairing")
            return Result.fail("Unbalanced JSON structure.", raw=tail)

        repaired = tail + stack[0]
        logger.debug(f"Appending missing {stack[0]!r} and retrying")
        data, error = _decode(repaired)
        if error is not None:
            return Result.fail(
                f"One missing closing bracket auto-added, but parsing still failed. Error: {error}",
                raw=repaired,
            )
        return Result.check("One missing closing bracket auto-added. Please verify.", data=data)

    candidate = content[start : end + 1]
    data, error = _decode(candidate)
    if error is not None:
        return Result.check(
            f"Extracted candidate passed bracket validation but failed to parse. Check raw. Error: {error}",
            raw=candidate,
        )
    return Result.success(PARSED, data)
