"""Tests for Turkish description repair."""
import unittest

from statementflow.pdf.turkish_normalizer import TurkishNormalizer


class TestTurkishNormalizer(unittest.TestCase):
    """Test TurkishNormalizer functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.normalizer = TurkishNormalizer()

    def test_latin1_glyphs(self):
        """Test single-byte glyph replacement."""
        result = self.normalizer.clean_description("ÝSTANBUL ÞUBE")
        self.assertEqual(result, "İSTANBUL ŞUBE")

    def test_merchant_repairs(self):
        """Test garbled merchant names."""
        cases = {
            "KO  CA  KEBAP": "KOÇ CAĞ KEBAP",
            "D VERO LU": "D VEROĞLU",
            "YANIKKAYA GIDA N  SAN T": "YANIKKAYA GIDA İNŞ SAN T",
            "TANDIR UNLU MAMÜLLER N .": "TANDIR UNLU MAMÜLLER İNŞ.",
            "ANSERA KAFETERYA GI": "ANSERA KAFETERYA GIDA",
        }
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                self.assertEqual(self.normalizer.clean_description(raw), expected)

    def test_truncated_names_before_turkish_letter(self):
        """Test that a following Turkish letter counts as part of the word."""
        self.assertEqual(self.normalizer.clean_description("KÖY PASTANES"), "KÖY PASTANESİ")
        self.assertEqual(self.normalizer.clean_description("KÖY PASTANESİ"), "KÖY PASTANESİ")
        self.assertEqual(self.normalizer.clean_description("ROSSM ANKARA"), "ROSSMANN ANKARA")

    def test_clean_text_untouched(self):
        """Test that an uncorrupted description passes through."""
        text = "LCW ANK ANATOLIUM ANKARA TRTR"
        self.assertEqual(self.normalizer.clean_description(text), text)

    def test_whitespace_and_dashes(self):
        """Test whitespace collapse and dash removal."""
        self.assertEqual(self.normalizer.clean_description("---   MIGROS  ---"), "MIGROS")
        self.assertEqual(self.normalizer.clean_description("-"), "")
        self.assertEqual(self.normalizer.clean_description(""), "")

    def test_extra_rules_run_last(self):
        """Test appending custom rules."""
        normalizer = TurkishNormalizer(extra_rules=[(r"SHOPPNG", "SHOPPING")])

        self.assertEqual(normalizer.clean_description("ABC SHOPPNG"), "ABC SHOPPING")
        self.assertEqual(len(normalizer.rules), len(self.normalizer.rules) + 1)


if __name__ == "__main__":
    unittest.main()
