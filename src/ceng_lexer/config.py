"""
CENG Lexer - Configuration
==========================

Settings for the command-line tool: which file to read and which file to
write. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the above)

The defaults are the fixed names older versions of the tool always read
and wrote: ``code_file.ceng`` and ``code.lex`` in the working directory.
"""

from dataclasses import dataclass, field
from pathlib import Path
import os


DEFAULT_SOURCE_FILE = "code_file.ceng"
DEFAULT_OUTPUT_FILE = "code.lex"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class LexerConfig:
    """
    Configuration for a lexer run.

    Attributes:
        source_file: CENG source to scan (default: code_file.ceng)
        output_file: Where the token dump is written (default: code.lex)
        verbose: Enable debug logging (default: False)
    """

    source_file: Path = field(default_factory=lambda: Path(DEFAULT_SOURCE_FILE))
    output_file: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT_FILE))
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "LexerConfig":
        """
        Create LexerConfig from environment variables.

        Environment variables (all optional):
            CENG_SOURCE_FILE: Source file path
            CENG_OUTPUT_FILE: Output file path
            CENG_VERBOSE: "1", "true", "yes" or "on" enables debug logging

        Returns:
            LexerConfig with values from environment variables
        """
        config = cls()

        if source_file := os.environ.get("CENG_SOURCE_FILE"):
            config.source_file = Path(source_file)

        if output_file := os.environ.get("CENG_OUTPUT_FILE"):
            config.output_file = Path(output_file)

        if verbose := os.environ.get("CENG_VERBOSE"):
            config.verbose = verbose.strip().lower() in _TRUE_VALUES

        return config
