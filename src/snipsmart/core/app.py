"""Format dispatch for the extraction engines.

This module provides:
- Snipper: Registry mapping format names to extraction engines
- snip_smart: Forgiving entry point that always returns a Result
- snip_smart_or_throw: Strict entry point that returns data or raises

Engines are registered with the @snipper.engine(name) decorator and receive
the raw content together with the resolved SnipOptions.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

import pydantic

from snipsmart.core.domain import Result, SnipOptions, SnipSmartError
from snipsmart.helpers.json import snip_json
from snipsmart.helpers.sanitize import sanitize_content
from snipsmart.helpers.tags import snip_by_tag

logger = logging.getLogger("snipsmart.core.app")

Engine = Callable[[Any, SnipOptions], Result]
Options = str | Mapping[str, Any] | SnipOptions | None


class Snipper:
    """Registry of extraction engines keyed by format name.

    Typical usage:
        snipper = Snipper()

        @snipper.engine("json")
        def json_engine(content, options):
            return snip_json(content)

    Attributes:
        engines: Dictionary mapping format names to engine callables.
    """

    def __init__(self) -> None:
        self.engines: dict[str, Engine] = {}

    def engine(self, name: str) -> Callable[[Engine], Engine]:
        """Register a function as the engine for a format name.

        Args:
            name: Format name the engine is looked up by.

        Returns:
            A decorator that registers and returns the engine unchanged.
        """
        def register(fn: Engine) -> Engine:
            self.engines[name] = fn
            return fn

        return register

    def get_engine(self, name: str) -> Engine:
        """Retrieve a registered engine by format name.

        Raises:
            ValueError: If no engine is registered under the name.
        """
        try:
            return self.engines[name]
        except KeyError:
            raise ValueError(f"Unknown format: {name}")

    def formats(self) -> list[str]:
        return list(self.engines)


snipper = Snipper()


@snipper.engine("json")
def json_engine(content: Any, options: SnipOptions) -> Result:
    return snip_json(sanitize_content(content))


@snipper.engine("tag")
def tag_engine(content: Any, options: SnipOptions) -> Result:
    return snip_by_tag(content, case_sensitive=options.case_sensitive)


def resolve_options(options: Options) -> SnipOptions:
    """Normalize the accepted option shapes into SnipOptions.

    Args:
        options: A format name, a mapping with "format" and "caseSensitive"
            (or "case_sensitive") keys, a SnipOptions instance, or None.

    Returns:
        The resolved SnipOptions; the format defaults to "json". Values
        that cannot be read fall back to the defaults instead of raising.
    """
    if isinstance(options, SnipOptions):
        return options
    if isinstance(options, str):
        return SnipOptions(format=options)
    if not isinstance(options, Mapping):
        if options is not None:
            logger.warning(f"Unreadable options {options!r}, using defaults")
        return SnipOptions()
    values = dict(options)
    values["format"] = str(values.get("format") or "json")
    try:
        return SnipOptions.model_validate(values)
    except pydantic.ValidationError as e:
        logger.warning(f"Invalid options {values!r}, using defaults except format: {e}")
        return SnipOptions(format=values["format"])


def snip_smart(content: Any, options: Options = "json") -> Result:
    """Extract a structured snippet from text using the requested format.

    The JSON format sanitizes the content before extraction; the tag format
    works on the content as given. An unknown format fails immediately
    with the original content in ``raw`` and no engine is run.

    Args:
        content: Text potentially containing a JSON value or markup.
        options: Format name or options; see resolve_options().

    Returns:
        The engine's Result, or a fail Result for an unknown format.
    """
    resolved = resolve_options(options)
    try:
        engine = snipper.get_engine(resolved.format)
    except ValueError:
        logger.warning(f"Invalid format requested: {resolved.format!r}")
        return Result.fail(
            f"Invalid format '{resolved.format}'. Expected 'json' or 'tag'.",
            raw=content if isinstance(content, str) else None,
        )
    result = engine(content, resolved)
    logger.debug(f"{resolved.format} extraction finished: {result.status.value} - {result.comments}")
    return result


def snip_smart_or_throw(content: Any, options: Options = "json") -> Any:
    """Extract a snippet and return its data, raising on anything but success.

    Args:
        content: Text potentially containing a JSON value or markup.
        options: Format name or options; see resolve_options().

    Returns:
        The decoded JSON value or the tag snippet string.

    Raises:
        SnipSmartError: If the result status is check or fail. The error
            message is the result's comments and ``.result`` holds the Result.
    """
    result = snip_smart(content, options)
    if not result.ok:
        raise SnipSmartError(result.comments, result)
    return result.data
