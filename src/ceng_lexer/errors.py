"""
CENG Lexer Error Hierarchy
==========================

This module defines the exception hierarchy for the CENG lexical analyzer.
All exceptions inherit from CengError, allowing callers to catch every
toolchain error with a single except clause if desired.

Exception Hierarchy
-------------------
CengError (base)
├── LexicalError - malformed lexeme found while scanning
│   ├── IdentifierTooLongError - identifier longer than 25 characters
│   ├── IntConstantTooLongError - digit run longer than 10 digits
│   └── UnterminatedLiteralError - string or block comment never closed
└── SourceLoadError - source file cannot be read

Error Message Format
--------------------
Lexical errors render in the format existing tooling expects:

    lexical error: identifier too long [line: 3]

The message text and line number are kept verbatim so callers can surface
them to the user unchanged.
"""


# =============================================================================
# Base Exception Class
# =============================================================================

class CengError(Exception):
    """
    Base exception for all CENG lexer errors.

        try:
            tokens = scan(source)
        except CengError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(CengError):
    """
    A malformed lexeme stopped the scan.

    Scanning never recovers from a lexical error: the first one found is
    raised and no tokens are returned.

    Attributes:
        message: The error description (e.g. "identifier too long")
        line: Line number (1-indexed) at which the fault was detected
    """

    def __init__(self, message: str, line: int):
        self.message = message
        self.line = line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format as 'lexical error: <message> [line: <line>]'."""
        return f"lexical error: {self.message} [line: {self.line}]"


class IdentifierTooLongError(LexicalError):
    """
    Identifier-shaped lexeme exceeds the 25 character limit.

    Example:
        int aaaaaaaaaaaaaaaaaaaaaaaaaa;   // 26 characters
    """

    def __init__(self, line: int):
        super().__init__("identifier too long", line)


class IntConstantTooLongError(LexicalError):
    """
    Digit run exceeds the 10 digit limit.

    Raised for plain and negative-prefixed constants alike; the message
    distinguishes the two.
    """

    def __init__(self, line: int, negative: bool = False):
        self.negative = negative
        message = "negative int constant too long" if negative else "int constant too long"
        super().__init__(message, line)


class UnterminatedLiteralError(LexicalError):
    """
    End of input reached inside a string literal or a block comment.

    Example:
        char s = "hello;      // missing closing quote
    """
    pass


# =============================================================================
# Source Loading Errors
# =============================================================================

class SourceLoadError(CengError):
    """
    The source file could not be read.

    Attributes:
        path: The path that was requested
        reason: The operating system's explanation
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read source file '{path}': {reason}")
