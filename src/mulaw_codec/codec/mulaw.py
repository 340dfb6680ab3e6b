"""G.711 μ-law companding: signed 16-bit PCM <-> 8-bit μ-law codes."""
from __future__ import annotations

import operator

from mulaw_codec.codec.segments import SEG_UEND, search

QUANT_MASK = 0x0F
BIAS = 0x84
SEG_MASK = 0x70
SEG_SHIFT = 4
SIGN_BIT = 0x80
CLIP = 8159

_PCM_MIN = -32768
_PCM_MAX = 32767


class SampleRangeError(ValueError):
    """Raised when a value falls outside the int16 sample or uint8 code domain."""


def _check_int(value: object, low: int, high: int, kind: str) -> int:
    if isinstance(value, bool):
        raise SampleRangeError(f"{kind} must be an integer, got bool")
    try:
        number = operator.index(value)
    except TypeError as exc:
        raise SampleRangeError(f"{kind} must be an integer, got {type(value).__name__}") from exc
    if not low <= number <= high:
        raise SampleRangeError(f"{kind} {number} outside [{low}, {high}]")
    return number


def encode(sample: int) -> int:
    """Encode one signed 16-bit PCM sample as a μ-law byte."""

    pcm = _check_int(sample, _PCM_MIN, _PCM_MAX, "sample") >> 2
    if pcm < 0:
        pcm = -pcm
        mask = 0x7F
    else:
        mask = 0xFF

    pcm = min(pcm, CLIP)
    pcm += BIAS >> 2

    seg = search(pcm, SEG_UEND)
    if seg >= len(SEG_UEND):
        return 0x7F ^ mask

    code = (seg << SEG_SHIFT) | ((pcm >> (seg + 1)) & QUANT_MASK)
    return code ^ mask


def decode(code: int) -> int:
    """Decode one μ-law byte back to an approximate signed 16-bit PCM sample."""

    u_val = ~_check_int(code, 0, 0xFF, "code") & 0xFF

    t = ((u_val & QUANT_MASK) << 3) + BIAS
    t <<= (u_val & SEG_MASK) >> SEG_SHIFT

    # Negative branch subtracts from the unshifted bias; the asymmetry is part of G.711.
    return BIAS - t if u_val & SIGN_BIT else t - BIAS


linear_to_mulaw = encode
mulaw_to_linear = decode
