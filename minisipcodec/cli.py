"""Command line for writing an example SIP message and reading one back."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .codec import generate_sip, parse_sip
from .message import SipError, SipMessage

DEFAULT_FILE = "message.sip"


def build_example_message() -> SipMessage:
    """Build the sample INVITE that the ``generate`` command writes."""
    msg = SipMessage()
    msg.insert_request_line("SIP/2.0", "sip:bob@example.com", "INVITE")
    msg.insert_from("<sip:alice@example.com>", "a1b2c3")
    msg.insert_to("<sip:bob@example.com>", "x9y8z7")
    msg.insert_call_id("call-1234")
    msg.insert_cseq("INVITE", 42)
    msg.insert_via(
        "SIP/2.0/UDP", "client.example.com", None, "z9hG4bKbranch123", None, 0
    )
    msg.insert_header("X-Debug", "on")
    msg.insert_body("Hello from the SIP body!")
    return msg


def format_message(msg: SipMessage) -> str:
    """Describe a parsed message in a human-readable summary."""
    line = msg.request_line
    lines = [
        "=== Parsed SIP ===",
        f"Request Line: {line.sip_method} {line.request_uri} {line.sip_proto_ver}",
        f"From: {msg.from_.uri} (tag={msg.from_.tag})",
        f"To: {msg.to.uri} (tag={msg.to.tag})",
        f"Call-ID: {msg.call_id}",
        f"CSeq: {msg.cseq.seq_number} {msg.cseq.method}",
    ]
    if msg.vias:
        via = msg.vias[0]
        lines.append(f"Via: {via.proto} {via.sent_by}; branch={via.branch}")
    lines.extend(f"Header: {h.key}: {h.value}" for h in msg.headers)
    body_size = len(msg.body.encode("utf-8"))
    lines.append(f"Body ({body_size} bytes): {msg.body}")
    return "\n".join(lines) + "\n"


def _generate(path: str) -> int:
    try:
        text = generate_sip(build_example_message())
        data = text.encode("utf-8")
        with open(path, "wb") as handle:
            handle.write(data)
    except (SipError, OSError) as exc:
        print(f"{path}: {exc}" if isinstance(exc, OSError) else exc, file=sys.stderr)
        print("Error during generation", file=sys.stderr)
        return 1
    print(f"SIP message written to {path} ({len(data)} bytes)")
    return 0


def _parse(path: str) -> int:
    try:
        with open(path, "rb") as handle:
            data = handle.read()
        msg = parse_sip(data)
    except (SipError, OSError, UnicodeDecodeError) as exc:
        print(f"{path}: {exc}" if isinstance(exc, OSError) else exc, file=sys.stderr)
        print("Parsing failed", file=sys.stderr)
        return 1
    sys.stdout.write(format_message(msg))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the ``generate`` or ``parse`` command; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="minisipcodec", description="Write or read a SIP message file."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="write the example message")
    generate.add_argument("--output", default=DEFAULT_FILE)

    parse = commands.add_parser("parse", help="read and summarise a message")
    parse.add_argument("--input", default=DEFAULT_FILE)

    args = parser.parse_args(argv)
    if args.command == "generate":
        return _generate(args.output)
    return _parse(args.input)


if __name__ == "__main__":
    sys.exit(main())