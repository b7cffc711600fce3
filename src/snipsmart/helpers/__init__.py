"""Extraction engines and text cleanup for snipsmart.

Exports:
    snip_json: Extract and parse an embedded JSON object or array.
    snip_by_tag: Extract the first balanced HTML/XML element.
    sanitize_content: Strip fences, quotes and escapes before JSON extraction.
"""

from snipsmart.helpers.json import snip_json
from snipsmart.helpers.sanitize import sanitize_content
from snipsmart.helpers.tags import snip_by_tag

__all__ = ["snip_json", "snip_by_tag", "sanitize_content"]
