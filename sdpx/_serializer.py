"""
Serializer for SDP session descriptions.

Fields are written in a fixed order, one per line:

    v= o= s= i=* u= c=   then for each media block:   m= i= c=

Absent fields are omitted. Address types in ``o=`` and ``c=`` lines are
derived from the stored addresses.
"""

from __future__ import annotations

import re
from typing import List

from ._exceptions import RenderError
from ._models import ConnectionData, MediaDescription, Origin, SessionDescription
from ._types import AddressType
from ._utils import EOL, NETTYPE

_FORBIDDEN = re.compile(r"[\r\n\x00]")


def _check_octet(value: int, name: str) -> None:
    if not 0 <= value <= 255:
        raise RenderError(f"{name} out of range [0, 255]: {value}")


def format_origin(origin: Origin) -> str:
    return (
        f"{origin.username} {origin.session_id} {origin.session_version} "
        f"{NETTYPE} {origin.address_type.value} {origin.network_address}"
    )


def format_connection(connection: ConnectionData) -> str:
    """
    Format connection data.

    Raises:
        RenderError: TTL on an IPv6 address, IPv4 count without TTL, or
            values outside 0-255
    """
    spec = str(connection.network_address)
    ttl, count = connection.ttl, connection.address_count

    if connection.address_type is AddressType.IP4:
        if ttl is not None:
            _check_octet(ttl, "ttl")
            spec += f"/{ttl}"
        if count is not None:
            if ttl is None:
                raise RenderError("IPv4 address count requires a ttl")
            _check_octet(count, "address count")
            spec += f"/{count}"
    else:
        if ttl is not None:
            raise RenderError("IPv6 connection data cannot carry a ttl")
        if count is not None:
            _check_octet(count, "address count")
            spec += f"/{count}"

    return f"{NETTYPE} {connection.address_type.value} {spec}"


def format_media(media: MediaDescription) -> str:
    if not media.formats:
        raise RenderError(f"Media {media.media!r} has no formats")
    port = str(media.port)
    if media.port_count is not None:
        port += f"/{media.port_count}"
    return f"{media.media} {port} {media.protocol} {' '.join(media.formats)}"


def to_lines(session: SessionDescription) -> List[str]:
    """Convert a session description to a list of ``<type>=<value>`` lines."""
    lines = []

    if session.protocol_version is not None:
        lines.append(f"v={session.protocol_version}")

    if session.origin is not None:
        lines.append(f"o={format_origin(session.origin)}")

    if session.session_name is not None:
        lines.append(f"s={session.session_name}")

    for info in session.session_information:
        lines.append(f"i={info}")

    if session.uri is not None:
        lines.append(f"u={session.uri}")

    if session.connection_data is not None:
        lines.append(f"c={format_connection(session.connection_data)}")

    for media in session.media:
        lines.append(f"m={format_media(media)}")
        if media.title is not None:
            lines.append(f"i={media.title}")
        if media.connection_data is not None:
            lines.append(f"c={format_connection(media.connection_data)}")

    for line in lines:
        if _FORBIDDEN.search(line):
            raise RenderError(f"CR, LF or NUL in {line[:2]} value: {line[2:]!r}")

    return lines


def render(session: SessionDescription, eol: str = EOL) -> str:
    """
    Render canonical SDP text, every line terminated by ``eol``.

    Raises:
        RenderError: A value cannot be expressed on the wire, or a value
            contains CR, LF or NUL
    """
    return "".join(line + eol for line in to_lines(session))


__all__ = ["render", "to_lines", "format_origin", "format_connection", "format_media"]
