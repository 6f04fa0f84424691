"""Request parameter encoding.

Provides the value codec, the declarative parameter tables, and the
query string / form body encoders built on them.
"""

from .codec import TimeWindow, ValueKind, decode_value, encode_value
from .encoder import FORM_CONTENT_TYPE, build_form_body, build_query_string
from .fields import UNSET, ActiveWindowMixin, Param, ParameterSet

__all__ = [
    "ActiveWindowMixin",
    "FORM_CONTENT_TYPE",
    "Param",
    "ParameterSet",
    "TimeWindow",
    "UNSET",
    "ValueKind",
    "build_form_body",
    "build_query_string",
    "decode_value",
    "encode_value",
]
