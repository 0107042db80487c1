"""Rendering of a SIP message's first line, headers and body as text."""

from __future__ import annotations

from typing import Callable, Iterable

from .message import Field, SipError, SipHeader, SipMessage

CRLF = "\r\n"


def encode_request_line(msg: SipMessage) -> str:
    """Render ``Method SP Request-URI SP SIP-Version CRLF``."""
    line = msg.request_line
    return f"{line.sip_method} {line.request_uri} {line.sip_proto_ver}{CRLF}"


def encode_status_line(msg: SipMessage) -> str:
    """Render ``SIP-Version SP Status-Code SP Reason-Phrase CRLF``."""
    line = msg.status_line
    return f"{line.sip_proto_ver} {line.status_code} {line.reason_phrase}{CRLF}"


def encode_generic_header(header: SipHeader) -> str:
    """Render a header that has no dedicated field as ``Key: value CRLF``."""
    return f"{header.key}: {header.value}{CRLF}"


def _encode_vias(msg: SipMessage) -> str:
    lines = []
    for via in msg.vias:
        parts = [f"Via: {via.proto} {via.sent_by}"]
        if via.addr:
            parts.append(f";addr={via.addr}")
        if via.branch:
            parts.append(f";branch={via.branch}")
        if via.received:
            parts.append(f";received={via.received}")
        if via.ttl:
            parts.append(f";ttl={via.ttl}")
        parts.append(CRLF)
        lines.append("".join(parts))
    return "".join(lines)


def _encode_to(msg: SipMessage) -> str:
    if msg.to.tag:
        return f"To: {msg.to.uri};tag={msg.to.tag}{CRLF}"
    return f"To: {msg.to.uri}{CRLF}"


def _encode_from(msg: SipMessage) -> str:
    if msg.to.tag:
        return f"From: {msg.from_.uri};tag={msg.from_.tag}{CRLF}"
    return f"From: {msg.from_.uri}{CRLF}"


def _encode_call_id(msg: SipMessage) -> str:
    return f"Call-ID: {msg.call_id}{CRLF}"


def _encode_cseq(msg: SipMessage) -> str:
    return f"CSeq: {msg.cseq.seq_number} {msg.cseq.method}{CRLF}"


def _encode_content_length(msg: SipMessage) -> str:
    return f"Content-Length: {msg.content_length}{CRLF}"


_ENCODERS: tuple[tuple[Field, Callable[[SipMessage], str]], ...] = (
    (Field.VIAS, _encode_vias),
    (Field.TO, _encode_to),
    (Field.FROM, _encode_from),
    (Field.CALL_ID, _encode_call_id),
    (Field.CSEQ, _encode_cseq),
    (Field.CONTENT_LENGTH, _encode_content_length),
)


def encode_headers(msg: SipMessage) -> str:
    """Render every present dedicated header in the fixed wire order."""
    if msg is None:
        raise SipError("`msg` cannot be None")
    return "".join(
        encode(msg) for field, encode in _ENCODERS if msg.is_present(field)
    )


def generate_first_line(msg: SipMessage) -> str:
    """Render the request line, or the status line if there is no request line."""
    if msg.is_present(Field.REQUEST_LINE):
        return encode_request_line(msg)
    if msg.is_present(Field.STATUS_LINE):
        return encode_status_line(msg)
    raise SipError("Cannot generate msg without request or status line")


def _join_headers(headers: Iterable[SipHeader]) -> str:
    return "".join(encode_generic_header(header) for header in headers)


def generate_generic_headers(msg: SipMessage) -> str:
    """Render the generic headers in the order they were added."""
    return _join_headers(msg.headers)


def generate_body(msg: SipMessage) -> str:
    """Return the body when a non-zero Content-Length is present, else ``""``."""
    if msg.is_present(Field.CONTENT_LENGTH) and msg.content_length > 0:
        return msg.body
    return ""