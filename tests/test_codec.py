import pytest

from minisipcodec.codec import generate_sip, parse_sip
from minisipcodec.message import SipError, SipMessage


def _request(method: str, uri: str) -> SipMessage:
    msg = SipMessage()
    msg.insert_request_line("SIP/2.0", uri, method)
    return msg


def test_generate_invite_exact_match():
    msg = _request("INVITE", "sip:alice@example.com")
    msg.insert_header("X-Test", "value")
    expected = "INVITE sip:alice@example.com SIP/2.0\r\nX-Test: value\r\n\r\n"
    assert generate_sip(msg) == expected


def test_generate_full_sip_request_generic():
    msg = _request("INVITE", "sip:bob@example.com")
    msg.insert_header("To", "<sip:bob@example.com>")
    msg.insert_header("From", "<sip:alice@example.com>;tag=123")
    msg.insert_header("Call-ID", "a84b4c76e66710")
    msg.insert_header("CSeq", "314159 INVITE")
    expected = (
        "INVITE sip:bob@example.com SIP/2.0\r\n"
        "To: <sip:bob@example.com>\r\n"
        "From: <sip:alice@example.com>;tag=123\r\n"
        "Call-ID: a84b4c76e66710\r\n"
        "CSeq: 314159 INVITE\r\n\r\n"
    )
    assert generate_sip(msg) == expected


def test_generate_very_long_sip_message():
    long_val = "X" * 1023
    msg = _request("OPTIONS", "sip:longmsg@example.com")
    msg.insert_header("X-Long", long_val)
    expected = (
        "OPTIONS sip:longmsg@example.com SIP/2.0\r\n"
        f"X-Long: {long_val}\r\n"
        "\r\n"
    )
    assert generate_sip(msg) == expected


def test_generate_full_sip_request_invite():
    msg = _request("INVITE", "sip:bob@example.com")
    msg.insert_via(
        "SIP/2.0/UDP", "client.example.com", None, "z9hG4bK776asdhds", None, 0
    )
    msg.insert_to("<sip:bob@example.com>", "abs456")
    msg.insert_from("<sip:alice@example.com>", "123")
    msg.insert_call_id("a84b4c76e66710")
    msg.insert_cseq("INVITE", 314159)
    expected = (
        "INVITE sip:bob@example.com SIP/2.0\r\n"
        "Via: SIP/2.0/UDP client.example.com;branch=z9hG4bK776asdhds\r\n"
        "To: <sip:bob@example.com>;tag=abs456\r\n"
        "From: <sip:alice@example.com>;tag=123\r\n"
        "Call-ID: a84b4c76e66710\r\n"
        "CSeq: 314159 INVITE\r\n\r\n"
    )
    assert generate_sip(msg) == expected


def test_generate_sip_request_with_body():
    msg = _request("POST", "sip:service@example.com")
    msg.insert_header("Content-Type", "text/plain")
    msg.insert_body("Hello, this is the body")
    expected = (
        "POST sip:service@example.com SIP/2.0\r\n"
        "Content-Length: 23\r\n"
        "Content-Type: text/plain\r\n"
        "\r\n"
        "Hello, this is the body"
    )
    assert generate_sip(msg) == expected


def test_generate_without_first_line_raises():
    msg = SipMessage()
    msg.insert_header("X-Test", "value")
    with pytest.raises(SipError):
        generate_sip(msg)


def test_generate_none_raises():
    with pytest.raises(SipError):
        generate_sip(None)


def test_parse_basic_invite_request():
    raw = (
        "INVITE sip:bob@example.com SIP/2.0\r\n"
        "Via: SIP/2.0/UDP pc33.example.com;branch=z9hG4bK776asdhds\r\n"
        "To: <sip:bob@example.com>\r\n"
        "From: <sip:alice@example.com>;tag=1928301774\r\n"
        "Call-ID: a84b4c76e66710\r\n"
        "CSeq: 314159 INVITE\r\n"
        "Max-Forwards: 13\r\n"
        "X-Custom:         Some custom value       \r\n"
        "\r\n"
    )
    msg = parse_sip(raw)

    assert msg.request_line.sip_method == "INVITE"
    assert msg.request_line.request_uri == "sip:bob@example.com"
    assert msg.to.uri == "sip:bob@example.com"
    assert msg.from_.uri == "sip:alice@example.com"
    assert msg.from_.tag == "1928301774"
    assert msg.cseq.method == "INVITE"
    assert msg.cseq.seq_number == 314159
    assert msg.call_id == "a84b4c76e66710"
    assert msg.max_forwards == 13
    assert msg.vias[0].branch == "z9hG4bK776asdhds"
    assert msg.vias[0].sent_by == "pc33.example.com"
    assert msg.vias[0].proto == "UDP"

    assert len(msg.headers) == 1
    assert msg.headers[0].key == "X-Custom"
    assert msg.headers[0].value == "Some custom value"


def test_parse_multiple_via_headers():
    raw = (
        "INVITE sip:bob@example.com SIP/2.0\r\n"
        "Via: SIP/2.0/UDP first.example.com;branch=z1\r\n"
        "Via: SIP/2.0/TCP second.example.com;branch=z2,SIP/2.0/WS "
        "third.example.com;branch=z3\r\n"
        "To: <sip:bob@example.com>\r\n"
        "From: <sip:alice@example.com>;tag=taggy\r\n"
        "Call-ID: abc123\r\n"
        "CSeq: 1 INVITE\r\n"
        "Max-Forwards: 70\r\n"
        "\r\n"
    )
    msg = parse_sip(raw)

    assert msg.to.uri == "sip:bob@example.com"
    assert msg.from_.uri == "sip:alice@example.com"
    assert msg.from_.tag == "taggy"
    assert msg.cseq.method == "INVITE"
    assert msg.cseq.seq_number == 1
    assert msg.call_id == "abc123"
    assert msg.max_forwards == 70

    assert [(v.proto, v.sent_by, v.branch) for v in msg.vias] == [
        ("UDP", "first.example.com", "z1"),
        ("TCP", "second.example.com", "z2"),
        ("WS", "third.example.com", "z3"),
    ]


def test_parse_message_with_body():
    raw = (
        "INVITE sip:bob@example.com SIP/2.0\r\n"
        "To: <sip:bob@example.com>\r\n"
        "From: <sip:alice@example.com>;tag=tag123\r\n"
        "Call-ID: call123\r\n"
        "CSeq: 1 INVITE\r\n"
        "Content-Length: 16\r\n"
        "\r\n"
        "Hello from body!"
    )
    msg = parse_sip(raw)

    assert msg.to.uri == "sip:bob@example.com"
    assert msg.from_.uri == "sip:alice@example.com"
    assert msg.from_.tag == "tag123"
    assert msg.cseq.method == "INVITE"
    assert msg.cseq.seq_number == 1
    assert msg.call_id == "call123"
    assert msg.content_length == 16
    assert msg.body == "Hello from body!"


def test_parse_accepts_bytes():
    raw = b"SIP/2.0 486 Busy Here\r\nCall-ID: c1\r\n\r\n"
    msg = parse_sip(raw)
    assert msg.status_line.status_code == 486
    assert msg.status_line.reason_phrase == "Busy Here"
    assert msg.call_id == "c1"


def test_parse_none_raises():
    with pytest.raises(SipError):
        parse_sip(None)


def test_parse_without_crlf_raises():
    with pytest.raises(SipError):
        parse_sip("INVITE sip:bob@example.com SIP/2.0")