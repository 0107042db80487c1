"""Decoding of generic headers into the dedicated fields of a SIP message."""

from __future__ import annotations

import re
import string
from typing import Callable, Optional

from .args import ArgIterator, ArgKind
from .message import Field, SipError, SipHeader, SipMessage, Via

_C_SPACE = " \t\n\v\f\r"
_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def _c_int(text: str) -> int:
    """Read a leading integer the way C's ``atoi`` does, as an unsigned 32-bit value."""
    match = _LEADING_INT.match(text.lstrip(_C_SPACE))
    return int(match.group()) & 0xFFFFFFFF if match else 0


def _strip_angle_brackets(value: str) -> str:
    return value.strip("<").strip(">")


def decode_to(header: SipHeader, msg: SipMessage) -> None:
    """Fill ``msg.to`` from a ``To`` header value."""
    for kind, key, value in ArgIterator(header.value):
        if kind is ArgKind.VALUE:
            msg.to.uri = _strip_angle_brackets(key)
            msg.mark_present(Field.TO)
        elif kind is ArgKind.ARG and "tag".startswith(key):
            msg.to.tag = value or ""


def decode_from(header: SipHeader, msg: SipMessage) -> None:
    """Fill ``msg.from_`` from a ``From`` header value."""
    for kind, key, value in ArgIterator(header.value):
        if kind is ArgKind.VALUE:
            msg.from_.uri = _strip_angle_brackets(key)
            msg.mark_present(Field.FROM)
        elif kind is ArgKind.ARG and "tag".startswith(key):
            msg.from_.tag = value or ""


def decode_cseq(header: SipHeader, msg: SipMessage) -> None:
    """Fill ``msg.cseq`` from a ``CSeq`` value such as ``42 INVITE``."""
    value = header.value
    digits = len(value) - len(value.lstrip(string.digits))
    msg.cseq.seq_number = _c_int(value)
    msg.cseq.method = value[digits:].lstrip(_C_SPACE)
    msg.mark_present(Field.CSEQ)


def decode_call_id(header: SipHeader, msg: SipMessage) -> None:
    """Take the ``Call-ID`` value as it is."""
    msg.call_id = header.value
    msg.mark_present(Field.CALL_ID)


def decode_max_forwards(header: SipHeader, msg: SipMessage) -> None:
    """Read the ``Max-Forwards`` count."""
    msg.max_forwards = _c_int(header.value)
    msg.mark_present(Field.MAX_FORWARDS)


def _split_via_value(value: str) -> Optional[tuple[str, str]]:
    """Split ``SIP/2.0/UDP host`` into the transport and the sent-by part."""
    slash: Optional[int] = None
    for index, char in enumerate(value):
        if char == "/":
            slash = index
        elif char == " ":
            if slash is not None:
                return value[slash + 1 : index], value[index + 1 :]
            break
    return None


def decode_via(header: SipHeader, msg: SipMessage) -> None:
    """Append one :class:`Via` to ``msg.vias`` for each comma-separated entry."""
    via: Optional[Via] = None
    for kind, key, value in ArgIterator(header.value):
        if kind is ArgKind.VALUE:
            parts = _split_via_value(key)
            if parts is None:
                raise SipError(f"Malformed Via sip header: {header.value}")
            via = Via(proto=parts[0], sent_by=parts[1])
            msg.vias.append(via)
            msg.mark_present(Field.VIAS)
        elif kind is ArgKind.ARG and via is not None:
            arg_value = value or ""
            if "addr".startswith(key):
                via.addr = arg_value
            elif "branch".startswith(key):
                via.branch = arg_value
            elif "received".startswith(key):
                via.received = arg_value
            elif "ttl".startswith(key):
                via.ttl = _c_int(arg_value)


def decode_content_length(header: SipHeader, msg: SipMessage) -> None:
    """Read the ``Content-Length`` value."""
    msg.content_length = _c_int(header.value)
    msg.mark_present(Field.CONTENT_LENGTH)


_Decoder = Callable[[SipHeader, SipMessage], None]

_DECODERS: tuple[tuple[str, _Decoder], ...] = (
    ("To", decode_to),
    ("Via", decode_via),
    ("From", decode_from),
    ("CSeq", decode_cseq),
    ("Call-ID", decode_call_id),
    ("Max-Forwards", decode_max_forwards),
    ("Content-Length", decode_content_length),
)


def _find_decoder(key: str) -> Optional[_Decoder]:
    for name, decode in _DECODERS:
        if name.startswith(key):
            return decode
    return None


def decode_headers(msg: SipMessage) -> None:
    """Move every supported generic header into its dedicated field.

    Each header value is first trimmed of surrounding spaces. Headers that
    were decoded are removed from ``msg.headers``; the others stay in order.
    """
    if msg is None:
        raise SipError("`msg` cannot be None")

    remaining: list[SipHeader] = []
    pending = list(msg.headers)
    try:
        while pending:
            header = pending.pop(0)
            header.value = header.value.strip(" ")
            decode = _find_decoder(header.key)
            if decode is None:
                remaining.append(header)
                continue
            try:
                decode(header, msg)
            except SipError:
                remaining.append(header)
                raise
    finally:
        msg.headers[:] = remaining + pending