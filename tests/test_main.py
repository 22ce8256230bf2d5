"""Tests for the command line entry point."""
import io
import json
import logging
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from statementflow.main import main

STATEMENT_TEXT = """
25/08/2025 LCW ANK ANATOLIUM ANKARA TRTR 752.98
26/08/2025 MADAME COCO ANKARA ARMADA 325,79 TL
"""


class TestParseCommand(unittest.TestCase):
    """Test the parse subcommand."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = Path(tempfile.mkdtemp())
        self.statement_file = self.test_dir / "ekstre.txt"
        self.statement_file.write_text(STATEMENT_TEXT, encoding="utf-8")
        self.saved_level = logging.getLogger("statementflow").level

    def tearDown(self):
        """Clean up test fixtures."""
        logging.getLogger("statementflow").setLevel(self.saved_level)
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def run_cli(self, *argv):
        output = io.StringIO()
        with redirect_stdout(output), self.assertRaises(SystemExit) as cm:
            main(list(argv))
        return cm.exception.code, output.getvalue()

    def test_options_after_file(self):
        """Test --json and --log-level given after the file argument."""
        code, output = self.run_cli("parse", str(self.statement_file), "--json", "--log-level", "DEBUG")

        self.assertEqual(code, 0)
        result = json.loads(output)
        self.assertTrue(result["success"])
        self.assertEqual(sum(group["count"] for group in result["data"]), 2)
        self.assertEqual(logging.getLogger("statementflow").level, logging.DEBUG)

    def test_lowercase_log_level(self):
        """Test that the log level is case-insensitive."""
        code, _ = self.run_cli("parse", "--log-level", "warning", str(self.statement_file))

        self.assertEqual(code, 0)
        self.assertEqual(logging.getLogger("statementflow").level, logging.WARNING)

    def test_text_output(self):
        """Test the grouped text report."""
        code, output = self.run_cli("parse", str(self.statement_file))

        self.assertEqual(code, 0)
        self.assertIn("Parsed total: 1,078.77", output)
        self.assertIn("Statement total: not found", output)

    def test_missing_file(self):
        """Test that a failed parse exits with code 1."""
        code, output = self.run_cli("parse", str(self.test_dir / "missing.txt"), "--json")

        self.assertEqual(code, 1)
        self.assertFalse(json.loads(output)["success"])


if __name__ == "__main__":
    unittest.main()
