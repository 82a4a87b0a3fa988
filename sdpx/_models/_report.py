"""
Parse results: classified fields, malformed lines and the aggregate report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Tuple

from .._exceptions import MalformedLineError
from .._types import FieldType
from ._session import SessionDescription


@dataclass(frozen=True)
class Field:
    """A line classified as a known field, holding its typed value."""

    type: FieldType
    value: Any
    line_number: int = 0

    @property
    def tag(self) -> str:
        return self.type.tag


@dataclass(frozen=True)
class MalformedLine:
    """A line that failed classification, kept verbatim with the reason."""

    line: str
    line_number: int
    error: MalformedLineError = field(compare=False)

    @property
    def reason(self) -> str:
        return str(self.error)


@dataclass(frozen=True)
class ParseReport:
    """
    Result of parsing one SDP document.

    Attributes:
        desc: The assembled session description (best effort)
        ignored_lines: Known fields that were not valid where they appeared,
            in input order
        malformed: Lines that failed classification, in input order
    """

    desc: SessionDescription = field(default_factory=SessionDescription)
    ignored_lines: Tuple[Field, ...] = ()
    malformed: Tuple[MalformedLine, ...] = ()

    @property
    def unparsed_lines(self) -> List[str]:
        """Raw text of every line that failed classification."""
        return [entry.line for entry in self.malformed]

    @property
    def ok(self) -> bool:
        """True when every line was classified and applied."""
        return not self.ignored_lines and not self.malformed
