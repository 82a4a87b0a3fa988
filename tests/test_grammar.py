import ipaddress

import pytest

from sdpx import (
    AddressFamilyMismatchError,
    ConnectionData,
    FieldSyntaxError,
    FieldType,
    MalformedLineError,
    Origin,
    parse_value,
)
from sdpx._grammar import (
    parse_connection,
    parse_media,
    parse_origin,
    parse_text,
    parse_uri,
    parse_version,
)


@pytest.mark.parametrize(
    "text,expected", [
        ("0", 0),
        ("17", 17),
        ("-3", -3),
        ("+5", 5),
        ("2147483647", 2**31 - 1),
    ]
)
def test_version(text, expected):
    assert parse_version(text) == expected


@pytest.mark.parametrize(
    "text", ["", "one", "1.0", " 1", "1 ", "1_000", "2147483648", "٣"],
    ids=["empty", "word", "float", "leading space", "trailing space",
         "underscore", "overflow", "non-ascii digit"]
)
def test_version_rejects(text):
    with pytest.raises(FieldSyntaxError):
        parse_version(text)


def test_origin_ipv6():
    origin = parse_origin("me sessA 11 IN IP6 ::ffff:5:2")
    assert origin == Origin(
        username="me",
        session_id="sessA",
        session_version=11,
        network_address=ipaddress.ip_address("::ffff:5:2"),
    )


def test_origin_ipv4():
    origin = parse_origin("- 2890844526 2890842807 IN IP4 10.47.16.5")
    assert origin.username == "-"
    assert origin.session_id == "2890844526"
    assert origin.session_version == 2890842807
    assert origin.network_address == ipaddress.IPv4Address("10.47.16.5")
    assert origin.address_type.value == "IP4"


@pytest.mark.parametrize(
    "text", [
        "me sessA 11 IN IP4 ::ffff:5:2",
        "me sessA 11 IN IP6 10.0.0.1",
    ],
    ids=["ip4 tag, ipv6 literal", "ip6 tag, ipv4 literal"]
)
def test_origin_family_mismatch(text):
    with pytest.raises(AddressFamilyMismatchError) as exc_info:
        parse_origin(text)
    assert isinstance(exc_info.value, MalformedLineError)


@pytest.mark.parametrize(
    "text", [
        "me sessA 11 IN IP4",
        "me sessA 11 IN IP4 10.0.0.1 extra",
        "me  sessA 11 IN IP4 10.0.0.1",
        "me sessA eleven IN IP4 10.0.0.1",
        "me sessA 9223372036854775808 IN IP4 10.0.0.1",
        "me sessA 11 ATM IP4 10.0.0.1",
        "me sessA 11 IN IPX 10.0.0.1",
        "me sessA 11 IN IP4 host.example.com",
        "me\tx sessA 11 IN IP4 10.0.0.1",
    ],
    ids=["five fields", "seven fields", "double space", "bad version",
         "version overflow", "bad nettype", "bad addrtype", "hostname", "tab"]
)
def test_origin_rejects(text):
    with pytest.raises(FieldSyntaxError):
        parse_origin(text)


def test_origin_negative_session_version():
    assert parse_origin("u s -1 IN IP4 10.0.0.1").session_version == -1


@pytest.mark.parametrize(
    "text,ttl,count", [
        ("IN IP4 10.0.0.1", None, None),
        ("IN IP4 224.2.1.1/127", 127, None),
        ("IN IP4 224.2.1.1/127/3", 127, 3),
    ]
)
def test_connection_ipv4(text, ttl, count):
    connection = parse_connection(text)
    assert connection.ttl == ttl
    assert connection.address_count == count
    assert connection.address_type.value == "IP4"


def test_connection_ipv6_count():
    connection = parse_connection("IN IP6 ff15::101/3")
    assert connection == ConnectionData(
        ipaddress.IPv6Address("ff15::101"), ttl=None, address_count=3
    )


@pytest.mark.parametrize(
    "text", [
        "IN IP4",
        "IN IP4 224.2.1.1/256",
        "IN IP4 224.2.1.1/127/3/1",
        "IN IP4 224.2.1.1/",
        "IN IP6 ff15::101/3/2",
        "IN IP6 10.0.0.1",
    ]
)
def test_connection_rejects(text):
    with pytest.raises(FieldSyntaxError):
        parse_connection(text)


def test_media():
    media = parse_media("audio 49170 RTP/AVP 0 8 101")
    assert media.media == "audio"
    assert media.port == 49170
    assert media.port_count is None
    assert media.protocol == "RTP/AVP"
    assert media.formats == ["0", "8", "101"]
    assert media.title is None
    assert media.connection_data is None


def test_media_port_count():
    assert parse_media("video 49170/2 RTP/AVP 31").port_count == 2


@pytest.mark.parametrize(
    "text", [
        "audio 49170 RTP/AVP",
        "audio port RTP/AVP 0",
        "audio 70000 RTP/AVP 0",
        "audio 49170/ RTP/AVP 0",
        "audio 49170/0 RTP/AVP 0",
    ]
)
def test_media_rejects(text):
    with pytest.raises(FieldSyntaxError):
        parse_media(text)


def test_uri_rejects_whitespace():
    assert parse_uri("http://example.com/a") == "http://example.com/a"
    with pytest.raises(FieldSyntaxError):
        parse_uri("http://example.com/a b")


def test_parse_value_does_not_raise():
    error = parse_value(FieldType.VERSION, "x")
    assert isinstance(error, FieldSyntaxError)
    assert parse_value(FieldType.VERSION, "2") == 2
    assert parse_value(FieldType.SESSION_NAME, "Talk") == "Talk"


@pytest.mark.parametrize(
    "text", ["hello\rworld", "hello\nworld", "nul\x00byte"],
    ids=["cr", "lf", "nul"]
)
def test_text_rejects_line_breaks_and_nul(text):
    with pytest.raises(FieldSyntaxError):
        parse_text(text)


def test_text_keeps_other_control_characters():
    assert parse_text("a\x0cb") == "a\x0cb"
    assert parse_text(" ") == " "


def test_uri_rejects_nul():
    with pytest.raises(FieldSyntaxError):
        parse_uri("http://example.com/\x00")
