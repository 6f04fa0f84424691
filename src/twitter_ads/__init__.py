"""Typed async client for the Twitter Ads API."""

from .client import TwitterAdsClient
from .decoding import CursorEnvelope
from .encoding import UNSET, TimeWindow, build_form_body, build_query_string
from .exceptions import (
    APIError,
    ConfigurationError,
    ConflictingParameters,
    DecodingError,
    EncodingError,
    MalformedValue,
    PartialDecodeFailure,
    TwitterAdsError,
    UnknownMetric,
    UnrecognizedEnumValue,
    UnsupportedValueKind,
)
from .utils.log_setup import setup_logging

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "ConfigurationError",
    "ConflictingParameters",
    "CursorEnvelope",
    "DecodingError",
    "EncodingError",
    "MalformedValue",
    "PartialDecodeFailure",
    "TimeWindow",
    "TwitterAdsClient",
    "TwitterAdsError",
    "UNSET",
    "UnknownMetric",
    "UnrecognizedEnumValue",
    "UnsupportedValueKind",
    "build_form_body",
    "build_query_string",
    "setup_logging",
]
