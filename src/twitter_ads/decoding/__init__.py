"""Response decoding: list envelopes and statistics payloads."""

from .cursor import CursorEnvelope, CursorListDecoder, decode_list, decode_single, parse_body
from .metrics import MetricValueDecoder

__all__ = [
    "CursorEnvelope",
    "CursorListDecoder",
    "MetricValueDecoder",
    "decode_list",
    "decode_single",
    "parse_body",
]
