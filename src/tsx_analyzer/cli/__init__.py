"""
TSX Analyzer Command-Line Interface
===================================

This package provides the ``tsxa`` command-line tool, a Click group with
the subcommands:

- **analyze**: validate a file and report tokens and size reduction
- **tokens**: print a file's token stream
- **optimize**: strip debug calls from a file
- **serve**: run the HTTP service
"""

__all__ = ["tsxa"]
