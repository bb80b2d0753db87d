"""Tests for single-precision helpers."""

from __future__ import annotations

import math
import struct

import pytest

from matheval.errors import NumberFormatError
from matheval.numeric import SINGLE_MAX, apply_operator, format_single, parse_single, to_single


class TestToSingle:
    def test_rounds_to_32_bits(self) -> None:
        assert to_single(0.1) == struct.unpack("f", struct.pack("f", 0.1))[0]
        assert to_single(0.1) != 0.1

    def test_exact_values_unchanged(self) -> None:
        assert to_single(902) == 902.0
        assert to_single(0.5) == 0.5

    def test_overflow_to_infinity(self) -> None:
        assert to_single(1e39) == math.inf
        assert to_single(-1e39) == -math.inf

    def test_largest_finite(self) -> None:
        assert to_single(SINGLE_MAX) == SINGLE_MAX

    def test_special_values(self) -> None:
        assert to_single(math.inf) == math.inf
        assert math.isnan(to_single(math.nan))


class TestFormatSingle:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (902.0, "902"),
            (13103.0, "13103"),
            (1.844, "1.844"),
            (-34.3, "-34.3"),
            (0.1, "0.1"),
            (0.0, "0"),
            (1e-5, "0.00001"),
            (1.5e10, "15000000000"),
            (16777216.0, "16777220"),
            (1.8400002, "1.84"),
            (9.2000007, "9.200001"),
            (1 / 3, "0.3333333"),
            (123456.789, "123456.8"),
            (3e-20, "0.00000000000000000003"),
        ],
    )
    def test_seven_significant_digits(self, value: float, expected: str) -> None:
        assert format_single(value) == expected

    def test_special_values(self) -> None:
        assert format_single(math.inf) == "inf"
        assert format_single(-math.inf) == "-inf"
        assert format_single(math.nan) == "nan"


class TestParseSingle:
    def test_decimal(self) -> None:
        assert parse_single("2.5") == 2.5
        assert parse_single("0.1") == to_single(0.1)

    def test_invalid(self) -> None:
        with pytest.raises(NumberFormatError, match="Invalid number") as exc_info:
            parse_single("1.2.3", pos=7)
        assert exc_info.value.text == "1.2.3"
        assert exc_info.value.pos == 7


class TestApplyOperator:
    def test_arithmetic(self) -> None:
        assert apply_operator("+", 2, 3) == 5
        assert apply_operator("-", 2, 3) == -1
        assert apply_operator("*", 2, 3) == 6
        assert apply_operator("/", 3, 4) == 0.75

    def test_result_is_single_precision(self) -> None:
        assert apply_operator("+", 16777216, 1) == 16777216

    def test_division_by_zero(self) -> None:
        assert apply_operator("/", 1, 0) == math.inf
        assert apply_operator("/", -1, 0) == -math.inf
        assert apply_operator("/", 1, -0.0) == -math.inf
        assert math.isnan(apply_operator("/", 0, 0))

    def test_unknown_operator(self) -> None:
        with pytest.raises(ValueError, match="Unknown operator"):
            apply_operator("%", 1, 2)
