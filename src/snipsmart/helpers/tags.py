"""HTML/XML snippet extraction from LLM responses.

This is a lightweight structural extractor, not a full HTML/XML parser.
It recovers the first well-nested element from noisy text by matching tag
names on a stack. There is no repair path: any mismatch or unclosed tag
is a failure.
"""

import logging
import re
from typing import Any

from snipsmart.core.domain import Result

logger = logging.getLogger("snipsmart.helpers.tags")

TAG_NAME = re.compile(r"[\w:-]*", re.ASCII)


def snip_by_tag(content: Any, case_sensitive: bool = False) -> Result:
    """Extract the first balanced HTML/XML element from text.

    The snippet starts at the first '<' in the text. Each opening tag is
    pushed, each closing tag must match the innermost open tag, and
    self-closing tags (``<br/>``) are never pushed. As soon as the stack
    empties the snippet is returned, even if more text follows.

    Args:
        content: Text potentially containing markup surrounded by prose.
        case_sensitive: Compare tag names verbatim instead of lowercased.

    Returns:
        A Result with status success or fail; the tag engine never
        returns check.

    Example:
        >>> snip_by_tag("Sure! <p>Hi <b>there</b></p> Bye").data
        '<p>Hi <b>there</b></p>'
    """
    if not isinstance(content, str) or not content:
        return Result.fail("Invalid input: content must be a non-empty string.")

    stack: list[str] = []
    snippet_start = -1
    length = len(content)
    i = 0

    while i < length:
        if content[i] != "<":
            i += 1
            continue

        if snippet_start == -1:
            snippet_start = i
            logger.debug(f"Snippet starts at index {i}")

        i += 1
        is_closing = i < length and content[i] == "/"
        if is_closing:
            i += 1

        name = TAG_NAME.match(content, i).group()
        i += len(name)
        if not name:
            return Result.fail("Invalid tag name.", raw=content[snippet_start:i])
        if not case_sensitive:
            name = name.lower()

        # Skip attributes up to the end of the tag
        is_self_closing = False
        while i < length and content[i] != ">":
            if content.startswith("/>", i):
                is_self_closing = True
                break
            i += 1
        if is_self_closing:
            i += 2
        elif i < length:
            i += 1

        if is_closing:
            if not stack:
                return Result.fail(
                    f"Unexpected closing tag </{name}> with no open tag.",
                    raw=content[snippet_start:i],
                )
            expected = stack.pop()
            if expected != name:
                return Result.fail(
                    f"Mismatched closing tag: expected </{expected}> but found </{name}>.",
                    raw=content[snippet_start:i],
                )
        elif not is_self_closing:
            stack.append(name)

        if not stack:
            logger.debug(f"Balanced snippet found at [{snippet_start}:{i}]")
            return Result.success("Valid tag structure found.", content[snippet_start:i])

    if stack:
        return Result.fail(f"Unclosed tag <{stack[-1]}>.", raw=content[snippet_start:])
    return Result.fail("No tags found.")
