# minisipcodec

A small, dependency-free library for parsing and generating SIP messages:
request and status lines, the common headers and a body.

## Installation

```
pip install minisipcodec
```

## Modules

- `minisipcodec.message` – the `SipMessage` model, its parts (`RequestLine`,
  `StatusLine`, `HeaderTo`, `HeaderFrom`, `CSeq`, `Via`, `SipHeader`), the
  `Field` flags that record which fields are set, and `SipError`.
- `minisipcodec.codec` – `parse_sip()` and `generate_sip()` for whole messages.
- `minisipcodec.parser` – `parse_first_line()`, `parse_request_line()`,
  `parse_status_line()`, `parse_headers()` and `parse_body()`.
- `minisipcodec.decoder` – `decode_headers()` and one `decode_*()` function per
  supported header.
- `minisipcodec.encoder` – functions that render the first line, the headers
  and the body as text.
- `minisipcodec.args` – `ArgIterator`, which walks a header value such as
  `SIP/2.0/UDP a.example.com;branch=z1,SIP/2.0/TCP b.example.com`, and `ArgKind`.
- `minisipcodec.cli` – the `minisipcodec` command.

## Parsing

```python
from minisipcodec.codec import parse_sip

raw = (
    "INVITE sip:bob@example.com SIP/2.0\r\n"
    "Via: SIP/2.0/UDP pc33.example.com;branch=z9hG4bK776asdhds\r\n"
    "To: <sip:bob@example.com>\r\n"
    "From: <sip:alice@example.com>;tag=1928301774\r\n"
    "Call-ID: a84b4c76e66710\r\n"
    "CSeq: 314159 INVITE\r\n"
    "X-Custom: some value\r\n"
    "Content-Length: 5\r\n"
    "\r\n"
    "hello"
)
msg = parse_sip(raw)

msg.request_line.sip_method   # "INVITE"
msg.from_.tag                 # "1928301774"
msg.vias[0].proto             # "UDP"
msg.vias[0].branch            # "z9hG4bK776asdhds"
msg.cseq.seq_number           # 314159
msg.headers[0].key            # "X-Custom"
msg.body                      # "hello"
```

`parse_sip()` takes a `str` or UTF-8 `bytes`. A first line that starts with
`SIP/` is read as a status line, any other as a request line. The headers
`To`, `From`, `Via`, `CSeq`, `Call-ID`, `Max-Forwards` and `Content-Length`
are decoded into fields of the returned `SipMessage`; angle brackets are
stripped from `To` and `From` URIs, and a `Via` value holding several
comma-separated entries gives one `Via` each. Every other header stays in
`msg.headers`, in the order it appeared, with surrounding spaces trimmed
from its value. The body is read only when a non-zero `Content-Length` is
present, and is cut to that length.

A missing CRLF, a missing `SIP/` version on the first line, a malformed
request or status line, or a malformed `Via` raises `SipError`.

## Generating

```python
from minisipcodec.message import SipMessage
from minisipcodec.codec import generate_sip

msg = SipMessage()
msg.insert_request_line("SIP/2.0", "sip:bob@example.com", "INVITE")
msg.insert_via("SIP/2.0/UDP", "client.example.com", None, "z9hG4bKbranch123", None, 0)
msg.insert_to("<sip:bob@example.com>", "x9y8z7")
msg.insert_from("<sip:alice@example.com>", "a1b2c3")
msg.insert_call_id("call-1234")
msg.insert_cseq("INVITE", 42)
msg.insert_header("X-Debug", "on")
msg.insert_body("Hello from the SIP body!")

wire = generate_sip(msg)   # a str with CRLF line endings
```

The output is the request line (or, without one, the status line), then
`Via`, `To`, `From`, `Call-ID`, `CSeq` and `Content-Length` where set, then
the generic headers in the order they were added, an empty line and the
body. `insert_body()` also sets the content length. A `From` tag is written
only when the `To` header has a tag too, and `Max-Forwards` is decoded when
parsing but not written when generating.

A message with neither a request line nor a status line raises `SipError`
on generation; so do `insert_status_line()` with a status code of zero,
`insert_cseq()` with a sequence number of zero, and `None` for a required
argument of any `insert_*()` method. An empty string for a required value
leaves the message unchanged.

## Command line

```
minisipcodec generate [--output FILE]
minisipcodec parse [--input FILE]
```

`generate` writes a sample INVITE to `FILE` (default `message.sip`) and
reports its size. `parse` reads `FILE` (default `message.sip`) and prints the
request line, `From`, `To`, `Call-ID`, `CSeq`, the first `Via`, the remaining
headers and the body. Both exit with status 1 and a message on standard
error when something fails.

## What it does not do

The package only turns text into `SipMessage` objects and back. It does not
send or receive messages over a network, keep dialogs or transactions, or
validate messages against the full SIP grammar.

## Running the tests

```
pip install minisipcodec[test]
pytest
```