"""Core domain types for snipsmart.

This module defines the types shared by both extraction engines:
- Status: The three-state verdict (success / check / fail)
- Result: Immutable outcome record returned by every engine call
- SnipOptions: Dispatcher configuration (format and tag case folding)
- SnipSmartError: Raised by the strict wrapper on any non-success result
"""
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Status(str, Enum):
    """Verdict of a single extraction call."""

    SUCCESS = "success"
    CHECK = "check"
    FAIL = "fail"


class Result(BaseModel):
    """Outcome of an extraction call.

    Results are frozen once produced. ``data`` is only populated when the
    engine judged the extraction usable and ``raw`` only when a candidate
    needs manual follow-up; the two are never populated together.

    Attributes:
        status: The verdict of the call.
        comments: Human-readable diagnostic message.
        data: The decoded JSON value or the raw tag snippet, if usable.
        raw: Best-effort reconstruction of the problematic candidate text.
    """

    model_config = ConfigDict(frozen=True)

    status: Status
    comments: str
    data: Any = None
    raw: str | None = None

    @model_validator(mode="after")
    def _data_or_raw(self) -> "Result":
        if self.data is not None and self.raw is not None:
            raise ValueError("a result carries either data or raw, not both")
        return self

    @property
    def ok(self) -> bool:
        """True only for a Success verdict."""
        return self.status is Status.SUCCESS

    @classmethod
    def success(cls, comments: str, data: Any) -> "Result":
        return cls(status=Status.SUCCESS, comments=comments, data=data)

    @classmethod
    def check(cls, comments: str, data: Any = None, raw: str | None = None) -> "Result":
        return cls(status=Status.CHECK, comments=comments, data=data, raw=raw)

    @classmethod
    def fail(cls, comments: str, raw: str | None = None) -> "Result":
        return cls(status=Status.FAIL, comments=comments, raw=raw)


class SnipOptions(BaseModel):
    """Dispatcher configuration.

    Attributes:
        format: Engine name, "json" or "tag".
        case_sensitive: Whether the tag engine compares tag names verbatim.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    format: str = "json"
    case_sensitive: bool = Field(default=False, alias="caseSensitive")


class SnipSmartError(Exception):
    """Raised by snip_smart_or_throw() when extraction does not succeed.

    The message equals the result's comments; the full result is kept on
    the exception for inspection.

    Attributes:
        result: The non-success Result that triggered the error.

    Example:
        >>> try:
        ...     snip_smart_or_throw("no json here")
        ... except SnipSmartError as e:
        ...     e.result.status
        <Status.FAIL: 'fail'>
    """

    def __init__(self, message: str, result: Result) -> None:
        super().__init__(message)
        self.result = result
