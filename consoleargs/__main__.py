"""
Entry point for running ConsoleArgs as a module.

Usage:
    python -m consoleargs "first value" "second value"
    python -m consoleargs complex-command -m one -m two -b
    python -m consoleargs --help
"""
from .cli.main import main

if __name__ == "__main__":
    main()
