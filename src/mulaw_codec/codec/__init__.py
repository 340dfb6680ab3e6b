"""Bit-exact G.711 μ-law codec primitives."""

from .breakpoints import roundtrip_breakpoints
from .mulaw import BIAS, CLIP, SampleRangeError, decode, encode, linear_to_mulaw, mulaw_to_linear
from .segments import SEG_UEND, search

__all__ = [
    "BIAS",
    "CLIP",
    "SEG_UEND",
    "SampleRangeError",
    "decode",
    "encode",
    "linear_to_mulaw",
    "mulaw_to_linear",
    "roundtrip_breakpoints",
    "search",
]
