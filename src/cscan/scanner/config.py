"""
Scanner Configuration
=====================

Resource bounds and input settings for the scanner. Configuration can
come from:
- Default values (defined here)
- Environment variables (``ScannerConfig.from_env``)
- Command-line options of the ``cscan`` tool

Lexeme capture is bounded on purpose: characters beyond
``max_lexeme_length`` are dropped, and identifiers are cut to
``max_identifier_length``. Scanning never fails because a lexeme is long.
"""

from dataclasses import dataclass
import codecs
import os

from cscan.errors import ConfigError


# 256-byte lexeme buffer minus the terminator
DEFAULT_MAX_LEXEME_LENGTH = 255

DEFAULT_MAX_IDENTIFIER_LENGTH = 64

# One byte per character, so classification stays single-byte ASCII
DEFAULT_ENCODING = "latin-1"


@dataclass
class ScannerConfig:
    """
    Configuration for a Scanner instance.

    Attributes:
        max_lexeme_length: Longest text captured for any token (default: 255)
        max_identifier_length: Identifiers are truncated to this (default: 64)
        encoding: Text encoding used when the scanner opens a path
    """

    max_lexeme_length: int = DEFAULT_MAX_LEXEME_LENGTH
    max_identifier_length: int = DEFAULT_MAX_IDENTIFIER_LENGTH
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_env(cls) -> "ScannerConfig":
        """
        Create ScannerConfig from environment variables.

        Environment variables (all optional):
            CSCAN_MAX_LEXEME_LENGTH: Lexeme capture bound (integer)
            CSCAN_MAX_IDENTIFIER_LENGTH: Identifier truncation bound (integer)
            CSCAN_ENCODING: Encoding for opened source files

        Returns:
            ScannerConfig with values from environment variables
        """
        config = cls()

        if max_lexeme := os.environ.get("CSCAN_MAX_LEXEME_LENGTH"):
            try:
                config.max_lexeme_length = int(max_lexeme)
            except ValueError:
                pass  # Ignore invalid values

        if max_identifier := os.environ.get("CSCAN_MAX_IDENTIFIER_LENGTH"):
            try:
                config.max_identifier_length = int(max_identifier)
            except ValueError:
                pass

        if encoding := os.environ.get("CSCAN_ENCODING"):
            config.encoding = encoding

        return config

    def validate(self) -> "ScannerConfig":
        """
        Check the configuration and return it unchanged.

        Raises:
            ConfigError: If a limit is not positive, the identifier limit
                exceeds the lexeme limit, or the encoding is unknown
        """
        if self.max_lexeme_length < 1:
            raise ConfigError(
                f"max_lexeme_length must be positive, got {self.max_lexeme_length}"
            )
        if self.max_identifier_length < 1:
            raise ConfigError(
                f"max_identifier_length must be positive, got {self.max_identifier_length}"
            )
        if self.max_identifier_length > self.max_lexeme_length:
            raise ConfigError(
                "max_identifier_length cannot exceed max_lexeme_length "
                f"({self.max_identifier_length} > {self.max_lexeme_length})"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ConfigError(f"unknown encoding '{self.encoding}'") from None
        return self
