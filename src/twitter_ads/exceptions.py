"""Structured exception classes for the Twitter Ads client.

Encoding errors are programmer errors raised before a request leaves the
process. Decoding errors describe a response that does not match the
documented wire format. Neither kind is retried or suppressed.
"""

import json
from typing import Any, Dict, List, Optional, Tuple


class TwitterAdsError(Exception):
    """Base exception for all Twitter Ads client errors.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict(), default=str)


class ConfigurationError(TwitterAdsError):
    """Raised when client configuration is missing or inconsistent."""

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with the offending setting name."""
        details = {"setting": setting} if setting else {}
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)
        self.setting = setting


class EncodingError(TwitterAdsError):
    """Base class for failures while building a query string or form body."""


class UnsupportedValueKind(EncodingError):
    """Raised when a field value does not match the field's declared kind.

    :param kind: Name of the declared value kind
    :param value: The rejected value
    :param field: Wire name of the field, when known
    """

    def __init__(self, kind: str, value: Any, field: Optional[str] = None):
        """Initialize with the declared kind and the rejected value."""
        where = f" for field '{field}'" if field else ""
        message = (
            f"Cannot encode {type(value).__name__} value {value!r} "
            f"as {kind}{where}"
        )
        super().__init__(
            message=message,
            code="UNSUPPORTED_VALUE_KIND",
            details={"kind": kind, "value": repr(value), "field": field},
        )
        self.kind = kind
        self.value = value
        self.field = field


class ConflictingParameters(EncodingError):
    """Raised when parameters set together contradict each other.

    :param names: Programmatic names of the conflicting parameters
    :param reason: What makes the combination invalid
    """

    def __init__(self, names: Tuple[str, ...], reason: str):
        """Initialize with the parameter names and the conflict."""
        super().__init__(
            message=f"Conflicting parameters {', '.join(names)}: {reason}",
            code="CONFLICTING_PARAMETERS",
            details={"names": list(names), "reason": reason},
        )
        self.names = names
        self.reason = reason


class DecodingError(TwitterAdsError):
    """Base class for failures while decoding an API response."""


class MalformedValue(DecodingError):
    """Raised when a wire value cannot be parsed.

    :param raw: The raw wire value
    :param field: Field name the value was read from
    :param reason: Optional explanation of the parse failure
    """

    def __init__(self, raw: Any, field: Optional[str] = None, reason: Optional[str] = None):
        """Initialize with the raw value and field for diagnostics."""
        message = f"Malformed value {raw!r}"
        if field:
            message += f" in field '{field}'"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message,
            code="MALFORMED_VALUE",
            details={"raw": raw, "field": field},
        )
        self.raw = raw
        self.field = field


class UnrecognizedEnumValue(DecodingError):
    """Raised when a wire token does not name any member of an enum.

    :param enum_name: Name of the target enum class
    :param raw: The unrecognized wire token
    :param field: Field name the token was read from
    """

    def __init__(self, enum_name: str, raw: Any, field: Optional[str] = None):
        """Initialize with the enum name and the unrecognized token."""
        message = f"Unrecognized {enum_name} value {raw!r}"
        if field:
            message += f" in field '{field}'"
        super().__init__(
            message=message,
            code="UNRECOGNIZED_ENUM_VALUE",
            details={"enum": enum_name, "raw": raw, "field": field},
        )
        self.enum_name = enum_name
        self.raw = raw
        self.field = field


class UnknownMetric(DecodingError):
    """Raised when a statistics payload names a metric missing from the catalogue."""

    def __init__(self, name: str):
        """Initialize with the unknown metric name."""
        super().__init__(
            message=f"Unknown metric '{name}'",
            code="UNKNOWN_METRIC",
            details={"metric": name},
        )
        self.name = name


class PartialDecodeFailure(DecodingError):
    """Raised when one element of a list page cannot be decoded.

    The whole page is rejected; the failing position and the underlying
    error are kept for reproduction.

    :param index: Zero-based position of the failing element
    :param cause: The exception raised while decoding it
    """

    def __init__(self, index: int, cause: BaseException):
        """Initialize with the element index and its decode error."""
        super().__init__(
            message=f"Failed to decode element {index}: {cause}",
            code="PARTIAL_DECODE_FAILURE",
            details={"index": index, "cause": type(cause).__name__},
        )
        self.index = index
        self.cause = cause


class APIError(TwitterAdsError):
    """Raised for non-successful API responses.

    :param message: Description of the API error
    :param status_code: Optional HTTP status code from the API response
    :param response_body: Optional response body from the failed request
    :param errors: Optional ``errors`` entries from the response envelope
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        """Initialize API error with message and optional response details."""
        details: Dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        if response_body:
            details["response_body"] = response_body[:1000]
        if errors:
            details["errors"] = errors
        super().__init__(message=message, code="API_ERROR", details=details)
        self.status_code = status_code
        self.response_body = response_body
        self.errors = errors or []
