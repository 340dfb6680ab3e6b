"""Round-trip breakpoint table describing the μ-law quantization curve."""
from __future__ import annotations

from mulaw_codec.codec.mulaw import decode, encode

DEFAULT_START = -8031
DEFAULT_STOP = 8031


def roundtrip_breakpoints(start: int = DEFAULT_START, stop: int = DEFAULT_STOP) -> list[tuple[int, int]]:
    """Return ``(sample, decode(encode(sample)))`` pairs where the decoded value changes.

    Every integer in ``[start, stop)`` is visited; the first sample is always kept.
    """

    if stop < start:
        raise ValueError(f"stop ({stop}) must not be less than start ({start})")

    pairs: list[tuple[int, int]] = []
    for sample in range(start, stop):
        decoded = decode(encode(sample))
        if not pairs or pairs[-1][1] != decoded:
            pairs.append((sample, decoded))
    return pairs
