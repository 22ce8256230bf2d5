"""Test runner script."""
import os
import sys
import tempfile
import unittest
from pathlib import Path

# Make the package importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Keep test logs out of the user's log directory
os.environ.setdefault("STATEMENTFLOW_LOG_DIR", tempfile.mkdtemp(prefix="statementflow-logs-"))

if __name__ == "__main__":
    # Discover and run all tests
    loader = unittest.TestLoader()
    start_dir = Path(__file__).parent
    suite = loader.discover(start_dir, pattern="test_*.py", top_level_dir=str(project_root))

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    # Exit with error code if tests failed
    sys.exit(0 if result.wasSuccessful() else 1)
