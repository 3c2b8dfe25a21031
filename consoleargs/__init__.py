"""
ConsoleArgs - a sample console app showing argument, option and subcommand parsing.
"""
