"""Tests for statement total extraction."""
import unittest

from statementflow.parser.totals import extract_statement_total


class TestStatementTotal(unittest.TestCase):
    """Test extract_statement_total functionality."""

    def test_donem_borcu(self):
        """Test the usual label."""
        lines = ["KART EKSTRESI", "Dönem Borcu : 32.990,60 TL"]
        self.assertEqual(extract_statement_total(lines), 32990.60)

    def test_label_variants(self):
        """Test labels with lost diacritics and other casing."""
        self.assertEqual(extract_statement_total(["Dnem Borcu: 1,234.56"]), 1234.56)
        self.assertEqual(extract_statement_total(["GENEL TOPLAM 500,00 TL"]), 500.0)
        self.assertEqual(extract_statement_total(["Ödenecek Tutar 75,25 TRY"]), 75.25)

    def test_first_match_wins(self):
        """Test that later totals are ignored."""
        lines = ["Ekstre Borcu 100,00", "Genel Toplam 200,00"]
        self.assertEqual(extract_statement_total(lines), 100.0)

    def test_unparsable_match_is_skipped(self):
        """Test that a label without a usable number does not stop the search."""
        lines = ["Toplam Tutar: . TL", "Dönem Borcu 50,00"]
        self.assertEqual(extract_statement_total(lines), 50.0)

    def test_missing_total(self):
        """Test statements without a total."""
        self.assertIsNone(extract_statement_total(["25/08/2025 MIGROS 10,00"]))


if __name__ == "__main__":
    unittest.main()
