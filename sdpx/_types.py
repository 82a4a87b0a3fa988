"""
Type definitions and configuration for SDP parsing.

This module centralizes the enums shared by the grammar, the classifier and
the section assembler, plus the parser configuration dataclass.
"""

from __future__ import annotations

import ipaddress
import logging
import typing
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# =============================================================================
# Field Types
# =============================================================================


class FieldType(str, Enum):
    """
    Field types known to the classifier, keyed by their one-letter tag.

    Tags outside this enum (``a=``, ``t=``, ``b=``...) are unknown fields and
    end up as unparsed lines.
    """

    VERSION = "v"
    ORIGIN = "o"
    SESSION_NAME = "s"
    INFORMATION = "i"  # session information, or media title
    URI = "u"
    CONNECTION = "c"
    MEDIA = "m"  # starts a media section

    @property
    def tag(self) -> str:
        return self.value

    @classmethod
    def from_tag(cls, tag: str) -> Optional[FieldType]:
        """Return the field type for ``tag``, or None if it is unknown."""
        try:
            return cls(tag)
        except ValueError:
            return None


# =============================================================================
# Section States
# =============================================================================


class SectionState(Enum):
    """
    States of the section assembler.

    SESSION → MEDIA on the first ``m=`` line; every later ``m=`` line stays
    in MEDIA but seals the previous media block.
    """

    SESSION = auto()  # Before any m= line
    MEDIA = auto()  # Inside a media block


# =============================================================================
# Address Types
# =============================================================================

IPAddress = typing.Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class AddressType(str, Enum):
    """SDP address types (RFC 4566 Section 8.2.7)."""

    IP4 = "IP4"
    IP6 = "IP6"

    @classmethod
    def of(cls, address: IPAddress) -> AddressType:
        """Address type matching the family of ``address``."""
        return cls.IP4 if address.version == 4 else cls.IP6


# =============================================================================
# Parser Configuration
# =============================================================================


@dataclass
class ParserOptions:
    """Configuration for a single parse."""

    # Drop empty lines instead of recording them as unparsed
    skip_blank_lines: bool = False

    # Strip trailing whitespace before classifying each line
    strip_whitespace: bool = False

    # Log every input line at DEBUG level
    trace: bool = False

    # Logger used for tracing and diagnostics (defaults to the "sdpx" logger)
    logger: Optional[logging.Logger] = None


__all__ = [
    "FieldType",
    "SectionState",
    "AddressType",
    "IPAddress",
    "ParserOptions",
]
