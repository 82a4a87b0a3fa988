"""
SDP Models Package.

This package contains the session/media records and the parse report types.
"""

from ._report import Field, MalformedLine, ParseReport
from ._session import ConnectionData, MediaDescription, Origin, SessionDescription

__all__ = [
    # Session records
    "SessionDescription",
    "Origin",
    "ConnectionData",
    "MediaDescription",
    # Parse results
    "Field",
    "MalformedLine",
    "ParseReport",
]
