"""Text cleanup applied to LLM output before JSON extraction.

Strips the wrapping that models commonly put around JSON: markdown code
fences, outer quotes and backticks, escaped newlines, and string
concatenation left over from code-style answers.
"""

import re
from typing import Any

FENCE_LINE = re.compile(r"^[ \t]*```[\w+-]*[ \t]*$\n?", re.MULTILINE)
ESCAPED_NEWLINE = re.compile(r"(?<!\\)(?:\\r\\n|\\n)")
CONCATENATION = re.compile(r"""["']\s*\+\s*["']""")
QUOTES = ("'", '"')


def _strip_outer_quotes(text: str) -> str:
    text = text.strip().strip("`").strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in QUOTES:
        text = text[1:-1]
    return text


def sanitize_content(text: Any) -> Any:
    """Normalize raw model output so the JSON engine sees bare JSON.

    Steps, in order:
    1. Drop lines that hold only a markdown fence marker (```` ```json ````).
    2. Strip surrounding backticks and one pair of matching outer quotes.
    3. Turn literal ``\\n`` / ``\\r\\n`` escape sequences into newlines.
    4. Remove quote-plus-quote concatenation artifacts (``" + "``).
    5. Trim surrounding whitespace.

    Args:
        text: Raw text. Non-string values are returned untouched so the
            engine can report them as invalid input.

    Returns:
        The cleaned text.

    Example:
        >>> sanitize_content('```json\\n{"a": 1}\\n```')
        '{"a": 1}'
    """
    if not isinstance(text, str):
        return text
    text = FENCE_LINE.sub("", text)
    text = _strip_outer_quotes(text)
    text = ESCAPED_NEWLINE.sub("\n", text)
    text = CONCATENATION.sub("", text)
    return text.strip()
