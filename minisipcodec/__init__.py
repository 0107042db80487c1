"""Parse SIP messages into SipMessage objects and generate them back as text."""

__version__ = "0.0.1"