"""
Section assembler for SDP documents.

Folds classified lines into a :class:`SessionDescription`, tracking whether
the current position is in the session section or inside a media block.

State machine:
==============

    SESSION --m=--> MEDIA --m=--> MEDIA (previous block sealed)

A known field is applied only when the current state is one of its valid
contexts; otherwise it is recorded in ``ignored_lines``. Lines that fail
classification go to ``malformed``. Neither outcome stops the parse.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, FrozenSet, Iterable, List, Optional, Union

from ._classifier import classify_line
from ._models import (
    Field,
    MalformedLine,
    MediaDescription,
    ParseReport,
    SessionDescription,
)
from ._types import FieldType, ParserOptions, SectionState
from ._utils import logger

SESSION_ONLY: FrozenSet[SectionState] = frozenset({SectionState.SESSION})
ANY_SECTION: FrozenSet[SectionState] = frozenset(SectionState)

# CRLF, CR and LF only; form feeds, U+2028 and friends stay inside text values
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Contexts in which each field may be applied
FIELD_CONTEXTS: Dict[FieldType, FrozenSet[SectionState]] = {
    FieldType.VERSION: SESSION_ONLY,
    FieldType.ORIGIN: SESSION_ONLY,
    FieldType.SESSION_NAME: SESSION_ONLY,
    FieldType.INFORMATION: ANY_SECTION,
    FieldType.URI: SESSION_ONLY,
    FieldType.CONNECTION: ANY_SECTION,
    FieldType.MEDIA: ANY_SECTION,
}


class SectionAssembler:
    """
    Stateful fold over the lines of one SDP document.

    Example:
        assembler = SectionAssembler()
        for line in split_lines(text):
            assembler.feed(line)
        report = assembler.finish()
    """

    def __init__(self, options: Optional[ParserOptions] = None):
        """
        Initialize assembler.

        Args:
            options: Parser configuration (defaults to ParserOptions())
        """
        self.options = options or ParserOptions()
        self.logger: logging.Logger = self.options.logger or logger

        self.state = SectionState.SESSION
        self.session = SessionDescription()
        self.current_media: Optional[MediaDescription] = None

        self.ignored_lines: List[Field] = []
        self.malformed: List[MalformedLine] = []

        self._line_number = 0
        self._finished = False

    def feed(self, line: str) -> None:
        """Classify one line and route it to the session or media record."""
        if self._finished:
            raise RuntimeError("Assembler already finished")

        self._line_number += 1
        if self.options.trace:
            self.logger.debug(f"line {self._line_number}: {line!r}")

        if self.options.strip_whitespace:
            line = line.rstrip()
        if not line and self.options.skip_blank_lines:
            return

        result = classify_line(line, self._line_number)
        if isinstance(result, MalformedLine):
            self.logger.debug(f"unparsed line {self._line_number}: {result.reason}")
            self.malformed.append(result)
            return

        self._route(result)

    def feed_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.feed(line)

    def finish(self) -> ParseReport:
        """Seal the open media block and return the report."""
        if not self._finished:
            self._seal_media()
            self._finished = True

        return ParseReport(
            desc=self.session,
            ignored_lines=tuple(self.ignored_lines),
            malformed=tuple(self.malformed),
        )

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    def _route(self, field: Field) -> None:
        if self.state not in FIELD_CONTEXTS[field.type]:
            self.logger.debug(
                f"ignored line {field.line_number}: {field.tag}= not valid in "
                f"{self.state.name.lower()} section"
            )
            self.ignored_lines.append(field)
            return

        if field.type is FieldType.MEDIA:
            self._open_media(field.value)
        elif self.state is SectionState.SESSION:
            self._apply_session(field)
        else:
            self._apply_media(field)

    def _apply_session(self, field: Field) -> None:
        session = self.session
        if field.type is FieldType.VERSION:
            session.protocol_version = field.value
        elif field.type is FieldType.ORIGIN:
            session.origin = field.value
        elif field.type is FieldType.SESSION_NAME:
            session.session_name = field.value
        elif field.type is FieldType.INFORMATION:
            session.session_information.append(field.value)
        elif field.type is FieldType.URI:
            session.uri = field.value
        elif field.type is FieldType.CONNECTION:
            session.connection_data = field.value

    def _apply_media(self, field: Field) -> None:
        media = self.current_media
        if field.type is FieldType.INFORMATION:
            media.title = field.value
        elif field.type is FieldType.CONNECTION:
            media.connection_data = field.value

    # ------------------------------------------------------------------
    # Media blocks
    # ------------------------------------------------------------------

    def _open_media(self, media: MediaDescription) -> None:
        self._seal_media()
        if self.state is not SectionState.MEDIA:
            self.logger.debug(f"line {self._line_number}: session -> media section")
            self.state = SectionState.MEDIA
        self.current_media = media

    def _seal_media(self) -> None:
        if self.current_media is not None:
            self.session.media.append(self.current_media)
            self.current_media = None


def split_lines(text: str) -> List[str]:
    """Split a document on CRLF, CR or LF, dropping the empty tail after a final break."""
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def parse(
    text: Union[str, bytes], *, options: Optional[ParserOptions] = None
) -> ParseReport:
    """
    Parse SDP text into a ParseReport.

    Lines are split on universal newline boundaries. The parse never fails:
    misplaced fields end up in ``report.ignored_lines`` and malformed or
    unknown lines in ``report.unparsed_lines``.

    Args:
        text: SDP document (bytes are decoded as UTF-8)
        options: Parser configuration

    Returns:
        The ParseReport for this document
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")

    assembler = SectionAssembler(options)
    assembler.feed_lines(split_lines(text))
    report = assembler.finish()

    assembler.logger.debug(
        f"parsed SDP: {len(report.desc.media)} media, "
        f"{len(report.ignored_lines)} ignored, {len(report.malformed)} unparsed"
    )
    return report


__all__ = ["SectionAssembler", "FIELD_CONTEXTS", "split_lines", "parse"]
