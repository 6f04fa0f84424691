"""Conversion between typed values and Ads API wire strings.

Every request parameter and every scalar read from a response passes
through the functions in this module, so the formatting rules live in
one place:

- money amounts travel as integer micro-units (amount x 1,000,000)
- timestamps travel as ``YYYY-MM-DDTHH:MM:SSZ`` in UTC
- multi-valued parameters are comma-joined in caller order
- enums travel as their member value
- booleans travel as ``true`` / ``false``

Money conversion truncates toward zero beyond six fractional digits, so
``Decimal("0.1234565")`` is sent as ``123456``. Amounts with at most six
fractional digits round-trip exactly.

Decoded timestamps are naive ``datetime`` objects holding UTC wall time,
matching how the API documents its timestamps. Pass ``aware=True`` to
:func:`decode_timestamp` to get an aware UTC value instead.
"""

from datetime import datetime, timezone
from decimal import ROUND_DOWN, Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple, Type

from ..exceptions import MalformedValue, UnrecognizedEnumValue, UnsupportedValueKind

MICRO_MULTIPLIER = Decimal(1_000_000)
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
LIST_SEPARATOR = ","


class ValueKind(str, Enum):
    """Declared kind of a request parameter."""

    STRING = "string"
    STRING_LIST = "string-list"
    ENUM = "enum"
    ENUM_LIST = "enum-list"
    INTEGER = "integer"
    INTEGER_LIST = "integer-list"
    DECIMAL = "decimal"
    MONEY = "money"
    BOOLEAN = "boolean"
    BINARY_FLAG = "binary-flag"
    TIMESTAMP = "timestamp"
    TIMESTAMP_RANGE = "timestamp-range"

    @property
    def is_list(self) -> bool:
        return self in (ValueKind.STRING_LIST, ValueKind.ENUM_LIST, ValueKind.INTEGER_LIST)


class TimeWindow(NamedTuple):
    """A start/end pair; either bound may be open."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


def _to_decimal(value: Any, kind: ValueKind, field_name: Optional[str]) -> Decimal:
    if isinstance(value, bool) or isinstance(value, float):
        raise UnsupportedValueKind(kind.value, value, field_name)
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            raise UnsupportedValueKind(kind.value, value, field_name) from None
    else:
        raise UnsupportedValueKind(kind.value, value, field_name)
    if not amount.is_finite():
        raise UnsupportedValueKind(kind.value, value, field_name)
    return amount


def encode_money(value: Any, field_name: Optional[str] = None) -> str:
    """Render an amount as integer micro-units.

    :param value: Amount as ``Decimal``, ``int`` or numeric ``str``
    :type value: Any
    :param field_name: Wire name used in error messages
    :type field_name: Optional[str]
    :return: Plain digits, truncated toward zero
    :rtype: str
    :raises UnsupportedValueKind: If the value is not a finite decimal amount
    """
    amount = _to_decimal(value, ValueKind.MONEY, field_name)
    micros = (amount * MICRO_MULTIPLIER).to_integral_value(rounding=ROUND_DOWN)
    return str(int(micros))


def decode_money(raw: Any, field_name: Optional[str] = None) -> Decimal:
    """Convert a micro-unit wire value back into an exact decimal amount.

    :param raw: Integer micro-units, as JSON number or digit string
    :type raw: Any
    :param field_name: Field the value was read from
    :type field_name: Optional[str]
    :return: The amount in currency units
    :rtype: Decimal
    :raises MalformedValue: If the value is not an integer
    """
    if isinstance(raw, bool):
        raise MalformedValue(raw, field_name, "expected integer micro-units")
    if isinstance(raw, int):
        micros = raw
    else:
        try:
            micros = int(str(raw).strip())
        except ValueError:
            raise MalformedValue(raw, field_name, "expected integer micro-units") from None
    return Decimal(micros) / MICRO_MULTIPLIER


def encode_timestamp(value: datetime, field_name: Optional[str] = None) -> str:
    """Render a datetime as an ISO-8601 UTC string with second precision.

    Naive datetimes are taken to be UTC already.

    :param value: Datetime to render
    :type value: datetime
    :param field_name: Wire name used in error messages
    :type field_name: Optional[str]
    :return: ``YYYY-MM-DDTHH:MM:SSZ``
    :rtype: str
    :raises UnsupportedValueKind: If the value is not a datetime
    """
    if not isinstance(value, datetime):
        raise UnsupportedValueKind(ValueKind.TIMESTAMP.value, value, field_name)
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=0).strftime(TIMESTAMP_FORMAT)


def decode_timestamp(
    raw: Any, field_name: Optional[str] = None, aware: bool = False
) -> datetime:
    """Parse an API timestamp.

    :param raw: ISO-8601 string, ``Z`` suffix or numeric offset
    :type raw: Any
    :param field_name: Field the value was read from
    :type field_name: Optional[str]
    :param aware: Return an aware UTC datetime instead of a naive one
    :type aware: bool
    :return: The instant, as naive UTC wall time unless ``aware`` is set
    :rtype: datetime
    :raises MalformedValue: If the string is not a timestamp
    """
    if not isinstance(raw, str):
        raise MalformedValue(raw, field_name, "expected ISO-8601 timestamp")
    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise MalformedValue(raw, field_name, "expected ISO-8601 timestamp") from None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    parsed = parsed.replace(tzinfo=None)
    return parsed.replace(tzinfo=timezone.utc) if aware else parsed


def encode_enum(
    value: Any, enum_type: Optional[Type[Enum]] = None, field_name: Optional[str] = None
) -> Optional[str]:
    """Render an enum member as its wire token.

    :return: The member value, or ``None`` for members without a wire token
    :rtype: Optional[str]
    :raises UnsupportedValueKind: If the value is not a member of ``enum_type``
    """
    expected = enum_type or Enum
    if not isinstance(value, expected):
        raise UnsupportedValueKind(ValueKind.ENUM.value, value, field_name)
    if value.value is None:
        return None
    return str(value.value)


def decode_enum(raw: Any, enum_type: Type[Enum], field_name: Optional[str] = None) -> Enum:
    """Look up the enum member for a wire token.

    Tokens are matched exactly first, then upper-cased.

    :raises UnrecognizedEnumValue: If no member carries the token
    """
    if isinstance(raw, enum_type):
        return raw
    if isinstance(raw, int) and not isinstance(raw, bool):
        raw = str(raw)
    if isinstance(raw, str):
        for candidate in (raw, raw.strip().upper()):
            try:
                return enum_type(candidate)
            except ValueError:
                continue
    raise UnrecognizedEnumValue(enum_type.__name__, raw, field_name)


def encode_boolean(value: Any, field_name: Optional[str] = None) -> str:
    if not isinstance(value, bool):
        raise UnsupportedValueKind(ValueKind.BOOLEAN.value, value, field_name)
    return "true" if value else "false"


def decode_boolean(raw: Any, field_name: Optional[str] = None) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().lower() in ("true", "false"):
        return raw.strip().lower() == "true"
    raise MalformedValue(raw, field_name, "expected true or false")


def _encode_binary_flag(value: Any, field_name: Optional[str]) -> str:
    if not isinstance(value, bool):
        raise UnsupportedValueKind(ValueKind.BINARY_FLAG.value, value, field_name)
    return "1" if value else "0"


def _decode_binary_flag(raw: Any, field_name: Optional[str]) -> bool:
    if str(raw).strip() in ("1", "0"):
        return str(raw).strip() == "1"
    raise MalformedValue(raw, field_name, "expected 1 or 0")


def _encode_string(value: Any, field_name: Optional[str]) -> str:
    if not isinstance(value, str):
        raise UnsupportedValueKind(ValueKind.STRING.value, value, field_name)
    return value


def _decode_string(raw: Any, field_name: Optional[str]) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    raise MalformedValue(raw, field_name, "expected string")


def _encode_integer(value: Any, field_name: Optional[str]) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise UnsupportedValueKind(ValueKind.INTEGER.value, value, field_name)
    return str(value)


def _decode_integer(raw: Any, field_name: Optional[str]) -> int:
    if isinstance(raw, bool):
        raise MalformedValue(raw, field_name, "expected integer")
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        raise MalformedValue(raw, field_name, "expected integer") from None


def _encode_decimal(value: Any, field_name: Optional[str]) -> str:
    return format(_to_decimal(value, ValueKind.DECIMAL, field_name), "f")


def _decode_decimal(raw: Any, field_name: Optional[str]) -> Decimal:
    if isinstance(raw, bool):
        raise MalformedValue(raw, field_name, "expected decimal")
    try:
        amount = Decimal(str(raw).strip())
    except InvalidOperation:
        raise MalformedValue(raw, field_name, "expected decimal") from None
    if not amount.is_finite():
        raise MalformedValue(raw, field_name, "expected finite decimal")
    return amount


# ---------------------------------------------------------------------------
# Lists and ranges
# ---------------------------------------------------------------------------


def _encode_list(
    value: Any,
    kind: ValueKind,
    encode_item: Callable[[Any], Optional[str]],
    field_name: Optional[str],
) -> str:
    if not isinstance(value, (list, tuple)):
        raise UnsupportedValueKind(kind.value, value, field_name)
    tokens = [encode_item(item) for item in value]
    return LIST_SEPARATOR.join(token for token in tokens if token is not None)


def _split_list(raw: Any, field_name: Optional[str]) -> List[str]:
    if isinstance(raw, (list, tuple)):
        return [_decode_string(item, field_name) for item in raw]
    if not isinstance(raw, str):
        raise MalformedValue(raw, field_name, "expected comma separated list")
    if raw == "":
        return []
    return raw.split(LIST_SEPARATOR)


def _encode_range(
    value: Any, field_name: Optional[str]
) -> Tuple[Optional[str], Optional[str]]:
    if not isinstance(value, tuple) or len(value) != 2:
        raise UnsupportedValueKind(ValueKind.TIMESTAMP_RANGE.value, value, field_name)
    start, end = value
    return (
        encode_timestamp(start, field_name) if start is not None else None,
        encode_timestamp(end, field_name) if end is not None else None,
    )


def _decode_range(raw: Any, field_name: Optional[str]) -> TimeWindow:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise MalformedValue(raw, field_name, "expected start and end")
    start, end = raw
    return TimeWindow(
        decode_timestamp(start, field_name) if start is not None else None,
        decode_timestamp(end, field_name) if end is not None else None,
    )


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def encode_value(
    kind: ValueKind,
    value: Any,
    enum_type: Optional[Type[Enum]] = None,
    field_name: Optional[str] = None,
) -> Any:
    """Encode a typed value into its wire form.

    :param kind: Declared kind of the parameter
    :type kind: ValueKind
    :param value: The typed value
    :type value: Any
    :param enum_type: Enum class for ``ENUM`` and ``ENUM_LIST`` kinds
    :type enum_type: Optional[Type[Enum]]
    :param field_name: Wire name used in error messages
    :type field_name: Optional[str]
    :return: Wire string, ``None`` when the value has no wire form, or a
        ``(start, end)`` pair of optional strings for ``TIMESTAMP_RANGE``
    :rtype: Any
    :raises UnsupportedValueKind: If the value does not match ``kind``
    """
    if kind is ValueKind.STRING:
        return _encode_string(value, field_name)
    if kind is ValueKind.STRING_LIST:
        return _encode_list(value, kind, lambda v: _encode_string(v, field_name), field_name)
    if kind is ValueKind.ENUM:
        return encode_enum(value, enum_type, field_name)
    if kind is ValueKind.ENUM_LIST:
        return _encode_list(
            value, kind, lambda v: encode_enum(v, enum_type, field_name), field_name
        )
    if kind is ValueKind.INTEGER:
        return _encode_integer(value, field_name)
    if kind is ValueKind.INTEGER_LIST:
        return _encode_list(value, kind, lambda v: _encode_integer(v, field_name), field_name)
    if kind is ValueKind.DECIMAL:
        return _encode_decimal(value, field_name)
    if kind is ValueKind.MONEY:
        return encode_money(value, field_name)
    if kind is ValueKind.BOOLEAN:
        return encode_boolean(value, field_name)
    if kind is ValueKind.BINARY_FLAG:
        return _encode_binary_flag(value, field_name)
    if kind is ValueKind.TIMESTAMP:
        return encode_timestamp(value, field_name)
    if kind is ValueKind.TIMESTAMP_RANGE:
        return _encode_range(value, field_name)
    raise UnsupportedValueKind(str(kind), value, field_name)


_DECODERS: Dict[ValueKind, Callable[[Any, Optional[str]], Any]] = {
    ValueKind.STRING: _decode_string,
    ValueKind.STRING_LIST: _split_list,
    ValueKind.INTEGER: _decode_integer,
    ValueKind.INTEGER_LIST: lambda raw, name: [
        _decode_integer(item, name) for item in _split_list(raw, name)
    ],
    ValueKind.DECIMAL: _decode_decimal,
    ValueKind.MONEY: decode_money,
    ValueKind.BOOLEAN: decode_boolean,
    ValueKind.BINARY_FLAG: _decode_binary_flag,
    ValueKind.TIMESTAMP: decode_timestamp,
    ValueKind.TIMESTAMP_RANGE: _decode_range,
}


def decode_value(
    kind: ValueKind,
    raw: Any,
    enum_type: Optional[Type[Enum]] = None,
    field_name: Optional[str] = None,
) -> Any:
    """Decode a wire value into its typed form.

    :raises MalformedValue: If the wire value cannot be parsed
    :raises UnrecognizedEnumValue: If an enum token is unknown
    """
    if kind is ValueKind.ENUM:
        return decode_enum(raw, enum_type, field_name)
    if kind is ValueKind.ENUM_LIST:
        return [decode_enum(item, enum_type, field_name) for item in _split_list(raw, field_name)]
    return _DECODERS[kind](raw, field_name)
