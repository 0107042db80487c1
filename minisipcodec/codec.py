"""Top-level parsing and generation of whole SIP messages."""

from __future__ import annotations

from typing import Union

from .decoder import decode_headers
from .encoder import (
    CRLF,
    encode_headers,
    generate_body,
    generate_first_line,
    generate_generic_headers,
)
from .message import SipError, SipMessage
from .parser import parse_body, parse_first_line, parse_headers


def parse_sip(data: Union[str, bytes]) -> SipMessage:
    """Parse a raw SIP message into a :class:`SipMessage`."""
    if data is None:
        raise SipError("`data` cannot be None")
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")

    msg = SipMessage()
    rest = parse_first_line(data, msg)
    rest = parse_headers(rest, msg)
    decode_headers(msg)
    parse_body(rest, msg)
    return msg


def generate_sip(msg: SipMessage) -> str:
    """Render ``msg`` as a raw SIP message."""
    if msg is None:
        raise SipError("`msg` cannot be None")
    return "".join(
        (
            generate_first_line(msg),
            encode_headers(msg),
            generate_generic_headers(msg),
            CRLF,
            generate_body(msg),
        )
    )