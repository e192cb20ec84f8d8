"""
CENG Lexer - Lexical Analyzer for the CENG Language
===================================================

This package converts source text written in CENG, a small C-like
language, into a flat sequence of classified tokens.

Main Components
---------------
- **lexer**: the scanner (Token, TokenKind, Scanner, scan)
- **sink**: token dump rendering and output
- **loader**: reading source files
- **config**: file locations and verbosity
- **cli**: the ``cenglex`` command

Quick Start
-----------
Scan a string:
    >>> from ceng_lexer import scan
    >>> [str(t) for t in scan("a++;")]
    ['Token{Type: Identifier, Value: a}', 'Token{Type: Operator, Value: ++}', 'Token{Type: EndOfLine}']

Scan a file and write the dump:
    >>> from ceng_lexer import load_source, scan, write_tokens
    >>> tokens = scan(load_source("code_file.ceng"))
    >>> write_tokens(tokens, "code.lex")

Or use the command-line tool:
    $ cenglex code_file.ceng -o code.lex
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from ceng_lexer.errors import (
    CengError,
    LexicalError,
    IdentifierTooLongError,
    IntConstantTooLongError,
    UnterminatedLiteralError,
    SourceLoadError,
)
from ceng_lexer.lexer import (
    KEYWORDS,
    MAX_IDENTIFIER_LENGTH,
    MAX_INT_LENGTH,
    Scanner,
    Token,
    TokenKind,
    scan,
)
from ceng_lexer.loader import load_source
from ceng_lexer.sink import TokenSink, render_token, render_tokens, write_tokens
from ceng_lexer.config import LexerConfig

__all__ = [
    # Version info
    "__version__",
    # Scanner
    "KEYWORDS",
    "MAX_IDENTIFIER_LENGTH",
    "MAX_INT_LENGTH",
    "Scanner",
    "Token",
    "TokenKind",
    "scan",
    # I/O
    "load_source",
    "TokenSink",
    "render_token",
    "render_tokens",
    "write_tokens",
    # Configuration
    "LexerConfig",
    # Exception hierarchy
    "CengError",
    "LexicalError",
    "IdentifierTooLongError",
    "IntConstantTooLongError",
    "UnterminatedLiteralError",
    "SourceLoadError",
]
