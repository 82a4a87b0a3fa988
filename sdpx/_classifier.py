"""
Line classifier.

Splits one SDP line into ``(tag, value)`` on the first ``=`` and hands the
value to the field grammar. The result is either a :class:`Field` or a
:class:`MalformedLine`; classification never raises.
"""

from __future__ import annotations

from typing import Union

from ._exceptions import (
    EmptyValueError,
    MalformedLineError,
    MissingSeparatorError,
    UnknownFieldError,
)
from ._grammar import parse_value
from ._models import Field, MalformedLine
from ._types import FieldType


def split_line(line: str) -> tuple[str, str]:
    """
    Split a line into its type tag and value.

    Raises:
        MissingSeparatorError: No ``=`` or an empty tag
        EmptyValueError: Nothing after the ``=``
    """
    tag, sep, value = line.partition("=")
    if not sep or not tag:
        raise MissingSeparatorError(f"Expected '<type>=<value>', got {line!r}")
    if not value:
        raise EmptyValueError(f"Empty value for field {tag!r}")
    return tag, value


def classify_line(line: str, line_number: int = 0) -> Union[Field, MalformedLine]:
    """
    Classify one line (without its trailing newline).

    Args:
        line: Raw line text
        line_number: 1-based position in the document, 0 if unknown

    Returns:
        A Field for a known, well-formed line, otherwise a MalformedLine
    """
    try:
        tag, value = split_line(line)
    except MalformedLineError as e:
        return MalformedLine(line, line_number, e)

    field_type = FieldType.from_tag(tag)
    if field_type is None:
        return MalformedLine(line, line_number, UnknownFieldError(tag))

    result = parse_value(field_type, value)
    if isinstance(result, MalformedLineError):
        return MalformedLine(line, line_number, result)
    return Field(field_type, result, line_number)


__all__ = ["split_line", "classify_line"]
