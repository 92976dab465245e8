"""
Tests for MAS amount conversion.
"""

from decimal import Decimal

import pytest

from massa_client.runtime.errors import ValidationError
from massa_client.utils import from_mas, to_mas


class TestFromMas:
    """Test MAS to nanoMAS conversion."""

    @pytest.mark.parametrize("value,expected", [
        ("1.5234", 1523400000),
        ("1.1234567899", 1123456790),
        ("0", 0),
        (2, 2000000000),
        (1.5234, 1523400000),
        (Decimal("0.000000001"), 1),
    ])
    def test_conversion(self, value, expected):
        assert from_mas(value) == expected

    @pytest.mark.parametrize("value", ["-1", "abc", "NaN", "Infinity", True, None])
    def test_invalid_values(self, value):
        with pytest.raises(ValidationError):
            from_mas(value)


class TestToMas:
    """Test nanoMAS to MAS conversion."""

    def test_fractional(self):
        assert to_mas(1123456790) == Decimal("1.12345679")

    def test_whole(self):
        result = to_mas(2000000000)
        assert result == 2
        assert str(result) == "2"

    def test_zero(self):
        assert str(to_mas(0)) == "0"
