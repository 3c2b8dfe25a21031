"""
Setup script for consoleargs.

ConsoleArgs is a sample console app showing how to wire a command-line
parser with:

1. Positional arguments - parsed in the order they are given
2. Options - single-value, repeatable and true/false flags
3. Subcommands - each with its own description, help and options

The 'consoleargs' command is the entry point.
"""

from setuptools import find_packages, setup

setup(
    name="consoleargs",
    version="1.0.0",
    description="Sample console app demonstrating argument, option and subcommand parsing",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.12.0,<0.16",
        "click>=8.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "consoleargs=consoleargs.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="cli arguments options subcommands sample",
)
