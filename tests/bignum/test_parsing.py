"""Tests for bignum/parsing.py — result-returning parse and dict serialization."""

import pytest

from bignum import (
    BigNumber,
    BignumConfig,
    InvalidFormatError,
    ParseResult,
    number_from_dict,
    number_to_dict,
    parse,
    parse_or_raise,
)


class TestParse:
    def test_ok(self):
        r = parse("-1203")
        assert isinstance(r, ParseResult)
        assert r.ok
        assert r.rejection is None
        assert r.value == BigNumber(-1203)

    @pytest.mark.parametrize(
        "text,reason",
        [
            ("", "empty"),
            ("-", "sign_only"),
            ("12a3", "invalid_char:2"),
            ("1.0", "invalid_char:1"),
        ],
    )
    def test_rejection(self, text, reason):
        r = parse(text)
        assert r.ok is False
        assert r.value is None
        assert r.rejection == reason

    def test_result_is_frozen(self):
        r = parse("1")
        with pytest.raises(AttributeError):
            r.ok = False  # type: ignore

    def test_non_str_raises(self):
        with pytest.raises(TypeError):
            parse(12)  # type: ignore[arg-type]

    def test_max_input_digits(self):
        cfg = BignumConfig(max_input_digits=3)
        assert parse("-999", config=cfg).ok
        r = parse("1000", config=cfg)
        assert r.ok is False
        assert r.rejection == "too_long"

    @pytest.mark.parametrize(
        "text",
        [
            "0",
            "7",
            "-7",
            "9223372036854775808",
            "-1465490637660506965476761506497325278166",
        ],
    )
    def test_round_trip(self, text):
        r = parse(text)
        assert r.value is not None
        assert str(r.value) == text


class TestParseOrRaise:
    def test_ok(self):
        assert parse_or_raise("42") == BigNumber(42)

    def test_raises(self):
        with pytest.raises(InvalidFormatError) as excinfo:
            parse_or_raise("4 2")
        assert excinfo.value.reason == "invalid_char:1"

    def test_message_mentions_reason(self):
        with pytest.raises(InvalidFormatError, match="sign_only"):
            parse_or_raise("-")


class TestDictRoundTrip:
    def test_to_dict(self):
        assert number_to_dict(BigNumber(-120)) == {"negative": True, "digits": [0, 2, 1]}

    def test_zero(self):
        assert number_to_dict(BigNumber()) == {"negative": False, "digits": [0]}

    @pytest.mark.parametrize("value", [0, 1, -1, 10**25, -(10**25) + 7])
    def test_round_trip(self, value):
        n = BigNumber(value)
        assert number_from_dict(number_to_dict(n)) == n

    def test_missing_field(self):
        with pytest.raises(KeyError):
            number_from_dict({"digits": [1]})

    def test_bad_sign_type(self):
        with pytest.raises(TypeError):
            number_from_dict({"negative": 1, "digits": [1]})

    def test_bad_digits_type(self):
        with pytest.raises(TypeError):
            number_from_dict({"negative": False, "digits": "123"})

    def test_bad_digit_value(self):
        with pytest.raises(ValueError):
            number_from_dict({"negative": False, "digits": [1, -3]})
