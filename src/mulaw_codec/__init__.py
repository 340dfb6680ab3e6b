"""G.711 μ-law companding codec."""

from mulaw_codec.codec import SEG_UEND, SampleRangeError, decode, encode, roundtrip_breakpoints, search

__all__ = ["SEG_UEND", "SampleRangeError", "decode", "encode", "roundtrip_breakpoints", "search"]
__version__ = "0.1.0"
