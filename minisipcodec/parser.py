"""Parsing of the first line, the headers and the body of a SIP message."""

from __future__ import annotations

import string
from itertools import takewhile
from typing import Optional

from .message import Field, SipError, SipHeader, SipMessage

_C_SPACE = " \t\n\v\f\r"


def _atoi(text: str) -> int:
    """Read a leading decimal integer the way C's ``atoi`` does."""
    stripped = text.lstrip(_C_SPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = "".join(takewhile(lambda c: c in string.digits, stripped))
    return sign * int(digits) if digits else 0


def parse_request_line(line: str, msg: SipMessage) -> None:
    """Parse ``Method SP Request-URI SP SIP-Version`` into ``msg``."""
    method = "".join(takewhile(lambda c: c in string.ascii_letters, line))
    rest = line[len(method) :]
    if not rest or rest[0] not in _C_SPACE:
        raise SipError("No space after method in request line")

    version_at = line.find("SIP/", len(method))
    if version_at < 0:
        raise SipError("No sip version in request line")

    uri_text = rest.lstrip(_C_SPACE)
    request_uri = "".join(takewhile(lambda c: c not in _C_SPACE, uri_text))

    msg.request_line.sip_method = method
    msg.request_line.sip_proto_ver = line[version_at:]
    msg.request_line.request_uri = request_uri


def parse_status_line(line: str, msg: SipMessage) -> None:
    """Parse ``SIP-Version SP Status-Code SP Reason-Phrase`` into ``msg``."""
    first_space = line.find(" ")
    if first_space < 0:
        raise SipError("No sip version in status line")

    code_start = first_space + 1
    second_space = line.find(" ", code_start)
    if second_space < 0:
        raise SipError("No status code in status line")

    code = _atoi(line[code_start:]) & 0xFFFFFFFF
    if not code:
        raise SipError("Malformed status code in status line")

    msg.status_line.sip_proto_ver = line[:first_space]
    msg.status_line.status_code = code
    msg.status_line.reason_phrase = line[second_space + 1 :]


def parse_first_line(text: str, msg: SipMessage) -> str:
    """Parse the request or status line and return the text after it."""
    if msg is None:
        raise SipError("`msg` cannot be None")

    line_end = text.find("\r\n")
    if line_end < 0:
        raise SipError("No CLRF")

    version_at = text.find("SIP/")
    if version_at < 0:
        raise SipError("No sip version")
    if version_at > line_end:
        raise SipError("Sip version has to be in first line")

    line = text[:line_end]
    if version_at == 0:
        parse_status_line(line, msg)
    else:
        parse_request_line(line, msg)

    return text[line_end + 2 :]


def parse_headers(text: str, msg: SipMessage) -> str:
    """Collect ``Key: value`` lines into ``msg.headers`` and return the body.

    A line counts only once it ends with CRLF; the value keeps everything
    after the colon, spaces included. An empty line ends the headers.
    """
    if msg is None:
        raise SipError("`msg` cannot be None")

    line_start = 0
    header: Optional[SipHeader] = None
    value_start = 0
    crlf_count = 0

    for index, char in enumerate(text):
        if char == ":":
            if header is None:
                header = SipHeader(key=text[line_start:index])
                value_start = index + 1
                crlf_count = 0
        elif char == "\n" and index > 0 and text[index - 1] == "\r":
            crlf_count += 1
            old_line_start = line_start
            line_start = index + 1
            if crlf_count == 2 and index - old_line_start <= 2:
                break
            if header is not None:
                header.value = text[value_start : index - 1]
                msg.headers.append(header)
                header = None

    return text[line_start:]


def parse_body(text: str, msg: SipMessage) -> None:
    """Take the body from ``text``, limited to the message's Content-Length."""
    if not msg.is_present(Field.CONTENT_LENGTH) or msg.content_length == 0:
        return
    msg.body = text[: msg.content_length]