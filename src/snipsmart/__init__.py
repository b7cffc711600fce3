"""snipsmart: Recover a JSON value or HTML/XML snippet from noisy LLM output.

snipsmart locates a single embedded structure inside surrounding prose,
validates it with a bracket or tag stack, and reports a three-state verdict
(success / check / fail) instead of raising on ambiguous input.
"""

from snipsmart.core.domain import Result, Status, SnipOptions, SnipSmartError
from snipsmart.core.app import Snipper, snip_smart, snip_smart_or_throw
from snipsmart.helpers import sanitize_content, snip_by_tag, snip_json

__all__ = [
    "snip_smart",
    "snip_smart_or_throw",
    "snip_json",
    "snip_by_tag",
    "sanitize_content",
    "Snipper",
    "Result",
    "Status",
    "SnipOptions",
    "SnipSmartError",
]
