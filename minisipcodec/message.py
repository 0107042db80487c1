"""SIP message model and the operations that fill it in."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional


class SipError(ValueError):
    """Raised when a SIP message cannot be built, parsed or generated."""


class Field(enum.IntFlag):
    """Supported fields whose presence a message keeps track of."""

    NONE = 0
    REQUEST_LINE = 1
    STATUS_LINE = 2
    TO = 4
    FROM = 8
    CSEQ = 16
    CALL_ID = 32
    MAX_FORWARDS = 64
    VIAS = 128
    CONTENT_LENGTH = 256


@dataclass
class RequestLine:
    """Method SP Request-URI SP SIP-Version."""

    sip_proto_ver: str = ""
    request_uri: str = ""
    sip_method: str = ""


@dataclass
class StatusLine:
    """SIP-Version SP Status-Code SP Reason-Phrase."""

    sip_proto_ver: str = ""
    reason_phrase: str = ""
    status_code: int = 0


@dataclass
class SipHeader:
    """A header that has no dedicated field in the message."""

    key: str
    value: str = ""

    def __post_init__(self) -> None:
        if not self.key:
            raise SipError("Header key cannot be empty")


@dataclass
class HeaderTo:
    uri: str = ""
    tag: str = ""


@dataclass
class HeaderFrom:
    uri: str = ""
    tag: str = ""


@dataclass
class CSeq:
    method: str = ""
    seq_number: int = 0


@dataclass
class Via:
    proto: str = ""
    sent_by: str = ""
    addr: str = ""
    branch: str = ""
    received: str = ""
    ttl: int = 0


def _require(**values: object) -> None:
    missing = [name for name, value in values.items() if value is None]
    if missing:
        names = ", ".join(f"`{name}`" for name in missing)
        raise SipError(f"{names} cannot be None")


@dataclass
class SipMessage:
    """A SIP request or response with its decoded and generic headers."""

    presence: Field = Field.NONE
    request_line: RequestLine = field(default_factory=RequestLine)
    status_line: StatusLine = field(default_factory=StatusLine)
    to: HeaderTo = field(default_factory=HeaderTo)
    from_: HeaderFrom = field(default_factory=HeaderFrom)
    cseq: CSeq = field(default_factory=CSeq)
    call_id: str = ""
    max_forwards: int = 0
    vias: list[Via] = field(default_factory=list)
    content_length: int = 0
    headers: list[SipHeader] = field(default_factory=list)
    body: str = ""

    def mark_present(self, field: Field) -> None:
        """Record that `field` has been set."""
        self.presence |= field

    def is_present(self, field: Field) -> bool:
        """Tell whether `field` has been set."""
        return bool(self.presence & field)

    def insert_request_line(
        self, sip_ver: str, req_uri: str, sip_method: str
    ) -> None:
        _require(sip_ver=sip_ver, req_uri=req_uri, sip_method=sip_method)
        if not sip_ver or not req_uri or not sip_method:
            return
        self.request_line = RequestLine(
            sip_proto_ver=sip_ver, request_uri=req_uri, sip_method=sip_method
        )
        self.mark_present(Field.REQUEST_LINE)

    def insert_status_line(
        self, sip_ver: str, reason_phrase: str, status_code: int
    ) -> None:
        _require(sip_ver=sip_ver, reason_phrase=reason_phrase)
        if not status_code:
            raise SipError("`status_code` cannot be zero")
        if not sip_ver or not reason_phrase:
            return
        self.status_line = StatusLine(
            sip_proto_ver=sip_ver,
            reason_phrase=reason_phrase,
            status_code=status_code,
        )
        self.mark_present(Field.STATUS_LINE)

    def insert_header(self, key: str, value: Optional[str] = None) -> None:
        _require(key=key)
        if not key:
            return
        self.headers.append(SipHeader(key=key, value=value or ""))

    def insert_to(self, uri: str, tag: Optional[str] = None) -> None:
        _require(uri=uri)
        if not uri:
            return
        self.to.uri = uri
        if tag:
            self.to.tag = tag
        self.mark_present(Field.TO)

    def insert_from(self, uri: str, tag: Optional[str] = None) -> None:
        _require(uri=uri)
        if not uri:
            return
        self.from_.uri = uri
        if tag:
            self.from_.tag = tag
        self.mark_present(Field.FROM)

    def insert_call_id(self, call_id: str) -> None:
        _require(call_id=call_id)
        if not call_id:
            return
        self.call_id = call_id
        self.mark_present(Field.CALL_ID)

    def insert_cseq(self, sip_method: str, seq_number: int) -> None:
        _require(sip_method=sip_method)
        if not seq_number:
            raise SipError("`seq_number` cannot be zero")
        if not sip_method:
            return
        self.cseq = CSeq(method=sip_method, seq_number=seq_number)
        self.mark_present(Field.CSEQ)

    def insert_max_forwards(self, max_forwards: int) -> None:
        self.max_forwards = max_forwards
        self.mark_present(Field.MAX_FORWARDS)

    def insert_content_length(self, content_length: int) -> None:
        self.content_length = content_length
        self.mark_present(Field.CONTENT_LENGTH)

    def insert_via(
        self,
        proto: str,
        sent_by: str,
        addr: Optional[str] = None,
        branch: Optional[str] = None,
        received: Optional[str] = None,
        ttl: int = 0,
    ) -> None:
        _require(proto=proto, sent_by=sent_by)
        if not proto or not sent_by:
            return
        self.vias.append(
            Via(
                proto=proto,
                sent_by=sent_by,
                addr=addr or "",
                branch=branch or "",
                received=received or "",
                ttl=ttl,
            )
        )
        self.mark_present(Field.VIAS)

    def insert_body(self, body: str) -> None:
        _require(body=body)
        if not body:
            return
        self.body = body
        self.content_length = len(body)
        self.mark_present(Field.CONTENT_LENGTH)