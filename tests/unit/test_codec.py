"""Unit tests for the value codec."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from twitter_ads.encoding.codec import (
    TimeWindow,
    ValueKind,
    decode_enum,
    decode_money,
    decode_timestamp,
    decode_value,
    encode_enum,
    encode_money,
    encode_timestamp,
    encode_value,
)
from twitter_ads.exceptions import MalformedValue, UnrecognizedEnumValue, UnsupportedValueKind
from twitter_ads.models.enums import (
    ApprovalStatus,
    TargetingCriterionAgeBucket,
    TargetingCriterionGender,
)


@pytest.mark.unit
class TestMoney:
    @pytest.mark.parametrize(
        "amount, expected",
        [
            (Decimal("1.00"), "1000000"),
            (Decimal("0.123456"), "123456"),
            (Decimal("0.1234565"), "123456"),
            (Decimal("0.0000009"), "0"),
            ("25", "25000000"),
            (3, "3000000"),
        ],
    )
    def test_encode_converts_to_micros(self, amount, expected):
        assert encode_money(amount) == expected

    def test_encode_truncates_toward_zero(self):
        assert encode_money(Decimal("-0.0000015")) == "-1"

    def test_encode_rejects_float(self):
        with pytest.raises(UnsupportedValueKind) as exc_info:
            encode_money(0.5, "bid_amount_local_micro")
        assert exc_info.value.field == "bid_amount_local_micro"

    @pytest.mark.parametrize("amount", ["abc", Decimal("NaN"), True, None])
    def test_encode_rejects_non_amounts(self, amount):
        with pytest.raises(UnsupportedValueKind):
            encode_money(amount)

    def test_decode_is_exact(self):
        assert decode_money(123456) == Decimal("0.123456")
        assert decode_money("1000000") == Decimal("1")

    def test_six_fractional_digits_round_trip(self):
        amount = Decimal("12.345678")
        assert decode_money(encode_money(amount)) == amount

    def test_decode_rejects_fraction(self):
        with pytest.raises(MalformedValue):
            decode_money("12.5", "total_budget_amount_local_micro")


@pytest.mark.unit
class TestTimestamp:
    def test_encode_naive_is_taken_as_utc(self):
        assert encode_timestamp(datetime(2015, 5, 1, 7, 0, 0, 987654)) == "2015-05-01T07:00:00Z"

    def test_encode_aware_is_converted_to_utc(self):
        value = datetime(2015, 5, 1, 9, 30, tzinfo=timezone(timedelta(hours=2)))
        assert encode_timestamp(value) == "2015-05-01T07:30:00Z"

    def test_encode_rejects_strings(self):
        with pytest.raises(UnsupportedValueKind):
            encode_timestamp("2015-05-01T07:00:00Z")

    def test_decode_returns_naive_utc(self):
        assert decode_timestamp("2015-05-01T07:00:00Z") == datetime(2015, 5, 1, 7, 0)

    def test_decode_normalizes_offsets(self):
        assert decode_timestamp("2015-05-01T09:00:00+02:00") == datetime(2015, 5, 1, 7, 0)

    def test_decode_aware(self):
        parsed = decode_timestamp("2015-05-01T07:00:00Z", aware=True)
        assert parsed.tzinfo is timezone.utc
        assert parsed == datetime(2015, 5, 1, 7, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("raw", ["yesterday", 1430463600, ""])
    def test_decode_rejects_garbage(self, raw):
        with pytest.raises(MalformedValue):
            decode_timestamp(raw, "created_at")


@pytest.mark.unit
class TestEnum:
    def test_member_value_is_sent(self):
        assert encode_enum(ApprovalStatus.ACCEPTED, ApprovalStatus) == "ACCEPTED"

    def test_gender_codes(self):
        assert encode_value(ValueKind.ENUM, TargetingCriterionGender.MALE, TargetingCriterionGender) == "1"
        assert encode_value(ValueKind.ENUM, TargetingCriterionGender.FEMALE, TargetingCriterionGender) == "2"

    def test_member_without_wire_value_is_omitted(self):
        assert encode_enum(TargetingCriterionGender.BOTH, TargetingCriterionGender) is None

    def test_encode_rejects_plain_string(self):
        with pytest.raises(UnsupportedValueKind):
            encode_enum("ACCEPTED", ApprovalStatus)

    def test_decode_is_case_insensitive(self):
        assert decode_enum("under_review", ApprovalStatus) is ApprovalStatus.UNDER_REVIEW

    def test_decode_numeric_token(self):
        assert decode_enum(2, TargetingCriterionGender) is TargetingCriterionGender.FEMALE

    def test_decode_unknown_token(self):
        with pytest.raises(UnrecognizedEnumValue) as exc_info:
            decode_enum("PENDING", ApprovalStatus, "approval_status")
        assert exc_info.value.enum_name == "ApprovalStatus"
        assert exc_info.value.raw == "PENDING"
        assert exc_info.value.field == "approval_status"


@pytest.mark.unit
class TestEncodeValue:
    def test_lists_keep_caller_order(self):
        assert encode_value(ValueKind.STRING_LIST, ["b", "a", "b"]) == "b,a,b"
        assert encode_value(ValueKind.INTEGER_LIST, [3, 1]) == "3,1"

    def test_empty_list_is_empty_string(self):
        assert encode_value(ValueKind.STRING_LIST, []) == ""

    def test_enum_list(self):
        buckets = [TargetingCriterionAgeBucket.AGE_18_TO_34, TargetingCriterionAgeBucket.AGE_OVER_50]
        assert (
            encode_value(ValueKind.ENUM_LIST, buckets, TargetingCriterionAgeBucket)
            == "AGE_18_TO_34,AGE_OVER_50"
        )

    def test_booleans(self):
        assert encode_value(ValueKind.BOOLEAN, False) == "false"
        assert encode_value(ValueKind.BOOLEAN, True) == "true"
        assert encode_value(ValueKind.BINARY_FLAG, True) == "1"
        assert encode_value(ValueKind.BINARY_FLAG, False) == "0"

    def test_decimal_has_no_exponent(self):
        assert encode_value(ValueKind.DECIMAL, Decimal("1E+2")) == "100"

    def test_range_with_open_end(self):
        window = TimeWindow(datetime(2015, 5, 1), None)
        assert encode_value(ValueKind.TIMESTAMP_RANGE, window) == ("2015-05-01T00:00:00Z", None)

    @pytest.mark.parametrize(
        "kind, value",
        [
            (ValueKind.BOOLEAN, "true"),
            (ValueKind.INTEGER, "10"),
            (ValueKind.INTEGER, True),
            (ValueKind.STRING, 10),
            (ValueKind.STRING_LIST, "a,b"),
            (ValueKind.TIMESTAMP_RANGE, datetime(2015, 5, 1)),
        ],
    )
    def test_kind_mismatch(self, kind, value):
        with pytest.raises(UnsupportedValueKind):
            encode_value(kind, value, field_name="param")


@pytest.mark.unit
class TestDecodeValue:
    def test_lists(self):
        assert decode_value(ValueKind.STRING_LIST, "a,b") == ["a", "b"]
        assert decode_value(ValueKind.STRING_LIST, "") == []
        assert decode_value(ValueKind.INTEGER_LIST, "1,2") == [1, 2]

    def test_enum_list(self):
        assert decode_value(ValueKind.ENUM_LIST, "accepted,REJECTED", ApprovalStatus) == [
            ApprovalStatus.ACCEPTED,
            ApprovalStatus.REJECTED,
        ]

    def test_flags(self):
        assert decode_value(ValueKind.BINARY_FLAG, "1") is True
        assert decode_value(ValueKind.BOOLEAN, "false") is False

    def test_integer_rejects_garbage(self):
        with pytest.raises(MalformedValue):
            decode_value(ValueKind.INTEGER, "ten", field_name="count")

    def test_string_rejects_missing_value(self):
        with pytest.raises(MalformedValue):
            decode_value(ValueKind.STRING, None, field_name="name")

    @pytest.mark.parametrize("raw", [{"id": "a"}, ["a"], True])
    def test_string_rejects_non_scalars(self, raw):
        with pytest.raises(MalformedValue):
            decode_value(ValueKind.STRING, raw, field_name="name")

    def test_string_accepts_numeric_ids(self):
        assert decode_value(ValueKind.STRING, 596773612934668288) == "596773612934668288"


@pytest.mark.unit
@pytest.mark.parametrize(
    "kind, value, enum_type",
    [
        (ValueKind.STRING, "Spring launch", None),
        (ValueKind.STRING_LIST, ["8wku2", "8wku3"], None),
        (ValueKind.ENUM, ApprovalStatus.ACCEPTED, ApprovalStatus),
        (
            ValueKind.ENUM_LIST,
            [TargetingCriterionAgeBucket.AGE_18_TO_34, TargetingCriterionAgeBucket.AGE_OVER_50],
            TargetingCriterionAgeBucket,
        ),
        (ValueKind.INTEGER, 42, None),
        (ValueKind.INTEGER_LIST, [596773612934668288, 7], None),
        (ValueKind.DECIMAL, Decimal("12.50"), None),
        (ValueKind.MONEY, Decimal("10.000001"), None),
        (ValueKind.BOOLEAN, False, None),
        (ValueKind.BINARY_FLAG, True, None),
        (ValueKind.TIMESTAMP, datetime(2015, 5, 1, 7, 30, 15), None),
        (
            ValueKind.TIMESTAMP_RANGE,
            TimeWindow(datetime(2015, 5, 1, 7, 0), datetime(2015, 5, 2, 7, 0)),
            None,
        ),
        (ValueKind.TIMESTAMP_RANGE, TimeWindow(datetime(2015, 5, 1, 7, 0), None), None),
    ],
)
def test_decode_reverses_encode(kind, value, enum_type):
    encoded = encode_value(kind, value, enum_type)
    assert decode_value(kind, encoded, enum_type) == value


@pytest.mark.unit
def test_timestamp_round_trip_drops_microseconds():
    value = datetime(2015, 5, 1, 7, 30, 15, 999999)
    encoded = encode_value(ValueKind.TIMESTAMP, value)
    assert decode_value(ValueKind.TIMESTAMP, encoded) == value.replace(microsecond=0)
