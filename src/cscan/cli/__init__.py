"""
cscan Command-Line Interface
============================

- **cscan**: prints the token listing of a source file

The tool is a Click-based CLI application; shared exit codes and
exception handling live in ``cscan.cli.errors``.
"""

__all__ = ["cscan"]
