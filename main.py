"""StatementFlow launcher"""
import sys
from pathlib import Path

# Allow running from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent))

if __name__ == "__main__":
    from statementflow.main import main
    main()
