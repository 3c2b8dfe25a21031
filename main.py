"""
Entry point for the ConsoleArgs sample app.

Run with:
    python main.py "first value" "second value" -o hello
    python main.py complex-command -m one -m two -b
    python -m consoleargs --help
"""
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from consoleargs.cli.main import main

if __name__ == "__main__":
    main()
