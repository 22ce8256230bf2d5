"""Tests for amount normalization."""
import unittest

from statementflow.parser.amounts import normalize_amount
from statementflow.utils import ParseError


class TestNormalizeAmount(unittest.TestCase):
    """Test normalize_amount functionality."""

    def test_turkish_format(self):
        """Test dot thousands separator with comma decimals."""
        self.assertEqual(normalize_amount("1.234,56"), 1234.56)
        self.assertEqual(normalize_amount("2.025,00"), 2025.00)

    def test_english_format(self):
        """Test comma thousands separator with dot decimals."""
        self.assertEqual(normalize_amount("1,234.56"), 1234.56)
        self.assertEqual(normalize_amount("148.78"), 148.78)

    def test_many_thousands_groups(self):
        """Test amounts above a million."""
        self.assertEqual(normalize_amount("1.234.567,89"), 1234567.89)

    def test_currency_suffix_is_ignored(self):
        """Test that letters and spaces are stripped."""
        self.assertEqual(normalize_amount("1.700,00 TL"), 1700.00)

    def test_plain_integer(self):
        """Test amount without separators."""
        self.assertEqual(normalize_amount("830"), 830.0)

    def test_non_decimal_separator_is_dropped(self):
        """Test that a separator not followed by two digits is a thousands separator."""
        self.assertEqual(normalize_amount("1.234"), 1234.0)
        self.assertEqual(normalize_amount("1,5"), 15.0)

    def test_invalid_amount_raises(self):
        """Test that non-numeric tokens raise ParseError."""
        for raw in ["", "TL", ".", ",,"]:
            with self.subTest(raw=raw):
                with self.assertRaises(ParseError):
                    normalize_amount(raw)


if __name__ == "__main__":
    unittest.main()
