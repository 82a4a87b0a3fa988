"""
Field grammar for the supported SDP line types.

Each ``parse_*`` function takes the value part of one line (the text after
the first ``=``) and returns a typed value, raising a
:class:`~sdpx._exceptions.FieldSyntaxError` when the text does not match.
:func:`parse_value` wraps them for callers that branch on the result instead
of catching.

Grammar (RFC 4566 Section 5, supported subset):

    v=<version>
    o=<username> <sess-id> <sess-version> <nettype> <addrtype> <address>
    s=<session name>
    i=<session information | media title>
    u=<uri>
    c=<nettype> <addrtype> <address>[/<ttl>][/<number of addresses>]
    m=<media> <port>[/<number of ports>] <proto> <fmt> ...
"""

from __future__ import annotations

import ipaddress
import re
from typing import Any, Callable, Dict, Optional, Union

from ._exceptions import AddressFamilyMismatchError, FieldSyntaxError, MalformedLineError
from ._models import ConnectionData, MediaDescription, Origin
from ._types import AddressType, FieldType, IPAddress
from ._utils import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN, NETTYPE

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"[0-9]+")
_WHITESPACE = re.compile(r"\s")
_FORBIDDEN_TEXT = re.compile(r"[\r\n\x00]")


# ============================================================================
# Token helpers
# ============================================================================


def _parse_int(
    text: str, name: str, minimum: int, maximum: int, *, signed: bool = True
) -> int:
    pattern = _SIGNED if signed else _UNSIGNED
    if not pattern.fullmatch(text):
        raise FieldSyntaxError(f"{name} is not an integer: {text!r}")
    value = int(text)
    if not minimum <= value <= maximum:
        raise FieldSyntaxError(f"{name} out of range [{minimum}, {maximum}]: {value}")
    return value


def _split_tokens(text: str, name: str) -> list[str]:
    """Split on single spaces; empty tokens (double spaces) are rejected."""
    tokens = text.split(" ")
    for token in tokens:
        if not token or _WHITESPACE.search(token):
            raise FieldSyntaxError(f"Invalid token in {name}: {text!r}")
    return tokens


def parse_address(nettype: str, addrtype: str, text: str) -> IPAddress:
    """
    Parse ``<nettype> <addrtype> <address>`` into an IP address.

    The address family must agree with ``addrtype``.

    Raises:
        FieldSyntaxError: Unknown nettype/addrtype or unparsable address
        AddressFamilyMismatchError: ``IP4`` with an IPv6 literal or vice versa
    """
    if nettype != NETTYPE:
        raise FieldSyntaxError(f"Unsupported network type {nettype!r}")
    try:
        expected = AddressType(addrtype)
    except ValueError:
        raise FieldSyntaxError(f"Unsupported address type {addrtype!r}") from None

    try:
        address = ipaddress.ip_address(text)
    except ValueError:
        raise FieldSyntaxError(f"Invalid IP address {text!r}") from None

    if AddressType.of(address) is not expected:
        raise AddressFamilyMismatchError(addrtype, text)
    return address


# ============================================================================
# Field parsers
# ============================================================================


def parse_version(text: str) -> int:
    """Parse a ``v=`` value (signed 32-bit integer)."""
    return _parse_int(text, "protocol version", INT32_MIN, INT32_MAX)


def parse_origin(text: str) -> Origin:
    """Parse an ``o=`` value into an :class:`Origin`."""
    tokens = _split_tokens(text, "origin")
    if len(tokens) != 6:
        raise FieldSyntaxError(f"Origin needs 6 fields, got {len(tokens)}: {text!r}")

    username, session_id, version, nettype, addrtype, address = tokens
    return Origin(
        username=username,
        session_id=session_id,
        session_version=_parse_int(version, "session version", INT64_MIN, INT64_MAX),
        network_address=parse_address(nettype, addrtype, address),
    )


def parse_text(text: str) -> str:
    """Parse a free-text value (``s=``, ``i=``)."""
    if not text:
        raise FieldSyntaxError("Empty text value")
    if _FORBIDDEN_TEXT.search(text):
        raise FieldSyntaxError(f"CR, LF or NUL in text value {text!r}")
    return text


def parse_uri(text: str) -> str:
    """Parse a ``u=`` value; the URI is kept as-is but may not contain spaces."""
    if not text or _WHITESPACE.search(text) or "\x00" in text:
        raise FieldSyntaxError(f"Invalid URI {text!r}")
    return text


def parse_connection(text: str) -> ConnectionData:
    """
    Parse a ``c=`` value into :class:`ConnectionData`.

    IPv4 addresses may carry ``/ttl`` and then ``/count``; IPv6 addresses
    only ``/count`` (RFC 4566 Section 5.7).
    """
    tokens = _split_tokens(text, "connection data")
    if len(tokens) != 3:
        raise FieldSyntaxError(
            f"Connection data needs 3 fields, got {len(tokens)}: {text!r}"
        )

    nettype, addrtype, spec = tokens
    address_text, *suffixes = spec.split("/")
    address = parse_address(nettype, addrtype, address_text)

    ttl: Optional[int] = None
    count: Optional[int] = None
    if address.version == 4:
        if len(suffixes) > 2:
            raise FieldSyntaxError(f"Too many '/' parts in {spec!r}")
        if suffixes:
            ttl = _parse_int(suffixes[0], "ttl", 0, 255, signed=False)
        if len(suffixes) == 2:
            count = _parse_int(suffixes[1], "address count", 0, 255, signed=False)
    else:
        if len(suffixes) > 1:
            raise FieldSyntaxError(f"IPv6 connection data has no ttl: {spec!r}")
        if suffixes:
            count = _parse_int(suffixes[0], "address count", 0, 255, signed=False)

    return ConnectionData(network_address=address, ttl=ttl, address_count=count)


def parse_media(text: str) -> MediaDescription:
    """Parse an ``m=`` value into a fresh :class:`MediaDescription`."""
    tokens = _split_tokens(text, "media description")
    if len(tokens) < 4:
        raise FieldSyntaxError(
            f"Media description needs at least 4 fields, got {len(tokens)}: {text!r}"
        )

    media, port_spec, protocol, *formats = tokens
    port_text, sep, count_text = port_spec.partition("/")
    port = _parse_int(port_text, "port", 0, 65535, signed=False)
    port_count: Optional[int] = None
    if sep:
        port_count = _parse_int(count_text, "port count", 1, 65535, signed=False)

    return MediaDescription(
        media=media,
        port=port,
        protocol=protocol,
        formats=formats,
        port_count=port_count,
    )


# ============================================================================
# Dispatch
# ============================================================================

GRAMMAR: Dict[FieldType, Callable[[str], Any]] = {
    FieldType.VERSION: parse_version,
    FieldType.ORIGIN: parse_origin,
    FieldType.SESSION_NAME: parse_text,
    FieldType.INFORMATION: parse_text,
    FieldType.URI: parse_uri,
    FieldType.CONNECTION: parse_connection,
    FieldType.MEDIA: parse_media,
}


def parse_value(
    field_type: FieldType, text: str
) -> Union[Any, MalformedLineError]:
    """
    Parse the value of a known field without raising.

    Returns:
        The typed value, or the MalformedLineError describing the failure
    """
    try:
        return GRAMMAR[field_type](text)
    except MalformedLineError as e:
        return e


__all__ = [
    "GRAMMAR",
    "parse_value",
    "parse_address",
    "parse_version",
    "parse_origin",
    "parse_text",
    "parse_uri",
    "parse_connection",
    "parse_media",
]
