"""
SDP Session Models.

Plain mutable records for the session and media levels of a description.
Values are not validated on assignment; validation happens when text is
parsed or rendered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Union

from .._types import AddressType, IPAddress

if TYPE_CHECKING:
    from .._types import ParserOptions
    from ._report import ParseReport


@dataclass
class Origin:
    """
    Originator of the session (``o=`` line).

    The network type is always ``IN`` and the address type is derived from
    ``network_address``, so neither is stored.
    """

    username: str
    session_id: str
    session_version: int
    network_address: IPAddress

    @property
    def address_type(self) -> AddressType:
        return AddressType.of(self.network_address)


@dataclass
class ConnectionData:
    """Connection data (``c=`` line)."""

    network_address: IPAddress
    ttl: Optional[int] = None  # IPv4 multicast only
    address_count: Optional[int] = None

    @property
    def address_type(self) -> AddressType:
        return AddressType.of(self.network_address)


@dataclass
class MediaDescription:
    """
    One media block, opened by an ``m=`` line.

    Example:
        media = MediaDescription("audio", 49170, "RTP/AVP", ["0", "8"])
    """

    media: str
    port: int
    protocol: str
    formats: List[str] = field(default_factory=list)
    port_count: Optional[int] = None

    # Media-level overrides
    title: Optional[str] = None  # i= line
    connection_data: Optional[ConnectionData] = None  # c= line


@dataclass
class SessionDescription:
    """
    Session Description Protocol (RFC 4566).

    ``SessionDescription()`` is an empty description: every optional field
    is absent and both sequences are empty.

    Example:
        sdp = SessionDescription(protocol_version=0, session_name="Call")
        print(sdp)
    """

    protocol_version: Optional[int] = None  # v= line
    origin: Optional[Origin] = None  # o= line
    session_name: Optional[str] = None  # s= line
    session_information: List[str] = field(default_factory=list)  # i= lines
    uri: Optional[str] = None  # u= line
    connection_data: Optional[ConnectionData] = None  # c= line
    media: List[MediaDescription] = field(default_factory=list)  # m= blocks

    @classmethod
    def parse(
        cls, text: Union[str, bytes], options: Optional[ParserOptions] = None
    ) -> ParseReport:
        """Parse SDP text; see :func:`sdpx.parse`."""
        from .._assembler import parse

        return parse(text, options=options)

    def to_string(self, eol: Optional[str] = None) -> str:
        """Serialize to canonical SDP text."""
        from .._serializer import render

        return render(self) if eol is None else render(self, eol=eol)

    def to_bytes(self) -> bytes:
        """Serialize to bytes with CRLF line endings, as carried in SIP bodies."""
        from .._utils import CRLF

        return self.to_string(eol=CRLF).encode("utf-8")

    def __str__(self) -> str:
        return self.to_string()

    @property
    def content_type(self) -> str:
        return "application/sdp"
