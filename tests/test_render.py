import ipaddress

import pytest

from sdpx import (
    ConnectionData,
    MediaDescription,
    Origin,
    RenderError,
    SessionDescription,
    parse,
    render,
)

IPV4 = ipaddress.ip_address("10.47.16.5")
IPV6 = ipaddress.ip_address("2001:db8::5:2")


@pytest.fixture
def full_session():
    return SessionDescription(
        protocol_version=0,
        origin=Origin("jdoe", "2890844526", 2890842807, IPV4),
        session_name="SDP Seminar",
        session_information=["first", "second"],
        uri="http://www.example.com/seminars/sdp.pdf",
        connection_data=ConnectionData(ipaddress.ip_address("224.2.17.12"), ttl=127, address_count=3),
        media=[
            MediaDescription("audio", 49170, "RTP/AVP", ["0", "8"], title="voice"),
            MediaDescription(
                "video",
                51372,
                "RTP/AVP",
                ["99"],
                port_count=2,
                connection_data=ConnectionData(ipaddress.ip_address("ff15::101"), address_count=2),
            ),
        ],
    )


def test_empty_session_renders_nothing():
    assert render(SessionDescription()) == ""


def test_version_only():
    assert render(SessionDescription(protocol_version=1)) == "v=1\n"


@pytest.mark.parametrize(
    "address,expected", [
        (IPV4, "o=me sessA 11 IN IP4 10.47.16.5\n"),
        (IPV6, "o=me sessA 11 IN IP6 2001:db8::5:2\n"),
    ],
    ids=["ipv4", "ipv6"]
)
def test_origin_address_type_follows_address(address, expected):
    session = SessionDescription(origin=Origin("me", "sessA", 11, address))
    assert render(session) == expected


def test_canonical_order(full_session):
    assert render(full_session) == (
        "v=0\n"
        "o=jdoe 2890844526 2890842807 IN IP4 10.47.16.5\n"
        "s=SDP Seminar\n"
        "i=first\n"
        "i=second\n"
        "u=http://www.example.com/seminars/sdp.pdf\n"
        "c=IN IP4 224.2.17.12/127/3\n"
        "m=audio 49170 RTP/AVP 0 8\n"
        "i=voice\n"
        "m=video 51372/2 RTP/AVP 99\n"
        "c=IN IP6 ff15::101/2\n"
    )


def test_crlf(full_session):
    text = render(full_session, eol="\r\n")
    assert text.startswith("v=0\r\no=jdoe")
    assert text.endswith("\r\n")
    assert full_session.to_bytes() == text.encode("utf-8")


def test_str_matches_render(full_session):
    assert str(full_session) == render(full_session)
    assert full_session.to_string() == render(full_session)


@pytest.mark.parametrize(
    "session", [
        SessionDescription(protocol_version=-4),
        SessionDescription(origin=Origin("me", "sessA", 11, IPV6)),
        SessionDescription(protocol_version=0, origin=Origin("u", "s", -(2**63), IPV4)),
        SessionDescription(connection_data=ConnectionData(IPV4)),
        SessionDescription(connection_data=ConnectionData(IPV6, address_count=0)),
    ],
    ids=["negative version", "ipv6 origin", "min session version",
         "plain connection", "ipv6 count"]
)
def test_round_trip(session):
    report = parse(render(session))
    assert report.desc == session
    assert report.ok


def test_round_trip_full(full_session):
    report = parse(render(full_session))
    assert report.desc == full_session
    assert report.ok


@pytest.mark.parametrize(
    "connection", [
        ConnectionData(IPV6, ttl=5),
        ConnectionData(IPV4, address_count=2),
        ConnectionData(IPV4, ttl=300),
        ConnectionData(IPV4, ttl=1, address_count=-1),
    ],
    ids=["ipv6 ttl", "ipv4 count without ttl", "ttl overflow", "negative count"]
)
def test_unrepresentable_connection(connection):
    with pytest.raises(RenderError):
        render(SessionDescription(connection_data=connection))


def test_media_without_formats():
    session = SessionDescription(media=[MediaDescription("audio", 1, "RTP/AVP")])
    with pytest.raises(RenderError):
        render(session)


@pytest.mark.parametrize(
    "session", [
        SessionDescription(session_name="hello\rworld"),
        SessionDescription(session_information=["one\ntwo"]),
        SessionDescription(uri="http://example.com/\x00"),
        SessionDescription(origin=Origin("me\r\nv=9", "s", 1, IPV4)),
        SessionDescription(media=[MediaDescription("audio", 1, "RTP/AVP", ["0"], title="a\nb")]),
    ],
    ids=["session name", "information", "uri", "origin username", "media title"]
)
def test_line_breaks_in_values_rejected(session):
    with pytest.raises(RenderError):
        render(session)


def test_content_type():
    assert SessionDescription().content_type == "application/sdp"
