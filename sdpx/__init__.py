"""sdpx - Session Description Protocol (SDP) parser and serializer for Python."""

from __future__ import annotations

# Models
from ._models import (
    ConnectionData,
    Field,
    MalformedLine,
    MediaDescription,
    Origin,
    ParseReport,
    SessionDescription,
)

# Types and configuration
from ._types import AddressType, FieldType, ParserOptions, SectionState

# Exceptions
from ._exceptions import (
    AddressFamilyMismatchError,
    EmptyValueError,
    FieldSyntaxError,
    MalformedLineError,
    MissingSeparatorError,
    RenderError,
    SDPError,
    UnknownFieldError,
)

# Engine
from ._classifier import classify_line
from ._grammar import parse_value
from ._assembler import SectionAssembler, parse
from ._serializer import render

# Logging
from ._utils import logger, setup_logging

__version__ = "0.1.0"

__all__ = [
    # Operations
    "parse",
    "render",
    "classify_line",
    "parse_value",
    "SectionAssembler",
    # Models
    "SessionDescription",
    "Origin",
    "ConnectionData",
    "MediaDescription",
    "Field",
    "MalformedLine",
    "ParseReport",
    # Types
    "AddressType",
    "FieldType",
    "ParserOptions",
    "SectionState",
    # Exceptions
    "SDPError",
    "MalformedLineError",
    "MissingSeparatorError",
    "EmptyValueError",
    "UnknownFieldError",
    "FieldSyntaxError",
    "AddressFamilyMismatchError",
    "RenderError",
    # Logging
    "logger",
    "setup_logging",
]
