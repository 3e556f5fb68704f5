"""
cscan - Token Listing Command-Line Interface
============================================

Scans a source file and prints one line per token:

    Lexical Analysis Output:
    ------------------------
    [1:1] KEYWORD     "int"
    [1:5] IDENTIFIER  "main"
    ...
    [3:2] EOF         "EOF"

Scanning stops at the first ERROR token, which is reported with
"Stopping due to error." and exit code 1. UNKNOWN tokens are listed and
scanning continues.

Usage Examples
--------------
    $ cscan prog.c
    $ cscan --summary prog.c
    $ cscan -v --encoding utf-8 prog.c
"""

import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Optional

import click

from cscan import __version__
from cscan.cli.errors import ExitCode, handle_cli_exception
from cscan.scanner import ScannerConfig, Token, TokenKind, open_scanner

logger = logging.getLogger(__name__)

HEADER = "Lexical Analysis Output:"
RULE = "-" * len(HEADER)
STOP_MESSAGE = "Stopping due to error."


def format_token(token: Token) -> str:
    """Render a token as '[line:col] LABEL       "text"'."""
    return f'[{token.line}:{token.column}] {token.kind.label:<10}  "{token.text}"'


def format_summary(counts: Counter) -> str:
    """Render per-kind token counts in TokenKind order."""
    lines = ["Token summary:"]
    for kind in TokenKind:
        if counts[kind]:
            lines.append(f"  {kind.label:<10}  {counts[kind]}")
    return "\n".join(lines)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "source_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--encoding",
    default=None,
    help="Source file encoding (default: latin-1, or $CSCAN_ENCODING)",
)
@click.option(
    "--max-identifier-length",
    type=click.IntRange(min=1),
    default=None,
    help="Truncate identifiers to this many characters (default: 64)",
)
@click.option(
    "--summary",
    is_flag=True,
    help="Print a count of tokens per kind after the listing",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="cscan")
def main(
    source_file: Path,
    encoding: Optional[str],
    max_identifier_length: Optional[int],
    summary: bool,
    verbose: bool,
) -> None:
    """
    Print the tokens of a C-like source file.

    SOURCE_FILE is the file to scan.

    \b
    Examples:
        cscan prog.c                 # Token listing
        cscan --summary prog.c       # Listing plus counts per kind
        cscan -v prog.c              # Debug logging on stderr
    """
    setup_logging(verbose)

    config = ScannerConfig.from_env()
    if encoding:
        config.encoding = encoding
    if max_identifier_length is not None:
        config.max_identifier_length = max_identifier_length

    counts: Counter = Counter()
    failed = False

    try:
        with open_scanner(source_file, config=config) as scanner:
            click.echo(HEADER)
            click.echo(RULE)
            for token in scanner.tokens(stop_on_error=True):
                counts[token.kind] += 1
                click.echo(format_token(token))
                if token.is_error:
                    click.echo(STOP_MESSAGE)
                    failed = True
            logger.debug("Scanned %d characters from %s", scanner.consumed, source_file)
    except Exception as e:
        handle_cli_exception(e, verbose)

    if summary:
        click.echo(format_summary(counts))

    if failed:
        sys.exit(ExitCode.SCAN_ERROR)


if __name__ == "__main__":
    main()
