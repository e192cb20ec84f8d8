"""
CENG Lexer (Scanner)
====================

This module implements the scanner for CENG, a small C-like language.
It converts source text into a flat list of classified tokens in a single
left-to-right pass.

Token Categories
----------------
- Keywords: break, case, char, const, do, else, enum, float, for, if,
  int, double, long, struct, return, static, while
- Identifiers: letters, digits and '_', starting with a letter or '_'
- Integer constants: decimal digit runs, optionally prefixed by '-'
- String constants: "double quoted", may span lines, no escapes
- Operators: + ++ - -- * / = == < <= > >=
- Brackets: ( ) { }
- Statement terminator: ;

Comments
--------
- Single-line: // comment
- Multi-line: /* comment */

Everything else (spaces, tabs, unknown bytes) is skipped silently.

Limits
------
| Lexeme          | Maximum length |
|-----------------|----------------|
| Identifier      | 25 characters  |
| Int constant    | 10 digits      |

Line Counting
-------------
The line counter starts at 1 and advances on every newline consumed,
including newlines inside strings and block comments. A line comment adds
one line when it reaches its newline, and that newline is then counted
again by the main loop, so diagnostics after a line comment report a line
number higher than the physical line.

Example Usage
-------------
>>> from ceng_lexer.lexer import scan
>>> for token in scan(b"int x = -5;"):
...     print(token)
Token{Type: Keyword, Value: int}
Token{Type: Identifier, Value: x}
Token{Type: Operator, Value: =}
Token{Type: IntConstant, Value: -5}
Token{Type: EndOfLine}
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging
import string

from ceng_lexer.errors import (
    IdentifierTooLongError,
    IntConstantTooLongError,
    UnterminatedLiteralError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Limits
# =============================================================================

MAX_IDENTIFIER_LENGTH = 25
MAX_INT_LENGTH = 10


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for the CENG language.

    The value of each member is the label written by the token dump
    (see ceng_lexer.sink), as found in existing .lex files.
    """

    IDENTIFIER = "Identifier"
    STRING_CONSTANT = "StringConstant"
    INT_CONSTANT = "IntConstant"
    KEYWORD = "Keyword"
    OPERATOR = "Operator"
    LEFT_PAREN = "LeftPar"
    RIGHT_PAREN = "RightPar"
    LEFT_BRACE = "LeftCurlyBracket"
    RIGHT_BRACE = "RightCurlyBracket"
    STATEMENT_END = "EndOfLine"

    @property
    def label(self) -> str:
        """Name used for this kind in the token dump."""
        return self.value


# =============================================================================
# Keyword Set
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({
    "break", "case", "char", "const", "do", "else", "enum", "float", "for",
    "if", "int", "double", "long", "struct", "return", "static", "while",
})

# Single-character tokens for the four bracket bytes
BRACKETS: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
}

# Operators that become two characters when followed by a given byte
PAIRED_OPERATORS: dict[str, str] = {
    "+": "+",   # + ++
    "=": "=",   # = ==
    "<": "=",   # < <=
    ">": "=",   # > >=
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Tokens do not record where they came from; line numbers only matter
    while scanning, for error reporting.

    Attributes:
        kind: The TokenKind classification
        text: The exact lexeme, or "" for StatementEnd
    """
    kind: TokenKind
    text: str = ""

    def __str__(self) -> str:
        """Format as 'Token{Type: <kind>, Value: <text>}'."""
        if self.text:
            return f"Token{{Type: {self.kind.label}, Value: {self.text}}}"
        return f"Token{{Type: {self.kind.label}}}"


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes CENG source code.

    Each step of the main loop looks at the byte under the cursor, hands
    it to exactly one recognizer and advances by the number of bytes that
    recognizer consumed. Recognizers return ``(token, consumed)`` where
    token is None for whitespace, newlines and comments.

    A Scanner is single-use: build one per input.

    Usage:
        scanner = Scanner(source_bytes)
        tokens = scanner.tokenize()

    Attributes:
        source: The source text, one character per input byte
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    DIGITS = string.digits

    def __init__(self, source: bytes | str):
        """
        Initialize the scanner with source code.

        Args:
            source: Raw source bytes, or text already decoded. Bytes are
                mapped one-to-one onto characters (latin-1) so no input is
                ever rejected for its encoding.
        """
        if isinstance(source, (bytes, bytearray)):
            source = bytes(source).decode("latin-1")
        self.source = source

        self._pos = 0
        self._line = 1

    @property
    def line(self) -> int:
        """Current line number (1-indexed)."""
        return self._line

    def tokenize(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            Tokens in source order

        Raises:
            LexicalError: On the first malformed lexeme
        """
        tokens: list[Token] = []
        while not self._at_end():
            token, consumed = self._scan_step()
            if token is not None:
                tokens.append(token)
            self._pos += consumed

        logger.debug(f"Scanned {len(tokens)} tokens over {self._line} lines")
        return tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _run_length(self, start: int, charset: str) -> int:
        """Length of the maximal run of ``charset`` characters at ``start``."""
        end = start
        while end < len(self.source) and self.source[end] in charset:
            end += 1
        return end - start

    def _is_digit(self, char: str) -> bool:
        return char != "" and char in self.DIGITS

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _scan_step(self) -> tuple[Optional[Token], int]:
        """
        Recognize the lexeme starting at the cursor.

        Returns:
            The token produced (or None) and the number of bytes consumed
        """
        char = self._peek()

        if char == ";":
            return Token(TokenKind.STATEMENT_END), 1

        if char == "-":
            return self._scan_minus()

        if char == "*":
            return Token(TokenKind.OPERATOR, "*"), 1

        if char == "/":
            return self._scan_slash()

        if char in PAIRED_OPERATORS:
            return self._scan_paired_operator(char)

        if char in BRACKETS:
            return Token(BRACKETS[char], char), 1

        if char in self.IDENT_START:
            return self._scan_identifier()

        if char in self.DIGITS:
            return self._scan_int_constant()

        if char == '"':
            return self._scan_string()

        if char == "\n":
            self._line += 1
            return None, 1

        # Spaces, tabs and any other byte
        return None, 1

    # =========================================================================
    # Operators and Comments
    # =========================================================================

    def _scan_paired_operator(self, char: str) -> tuple[Token, int]:
        """Scan +/++, =/==, </<= or >/>=."""
        if self._peek(1) == PAIRED_OPERATORS[char]:
            return Token(TokenKind.OPERATOR, char + self._peek(1)), 2
        return Token(TokenKind.OPERATOR, char), 1

    def _scan_minus(self) -> tuple[Token, int]:
        """
        Scan '-', '--' or a negative integer constant.

        Only a '-' directly followed by a digit absorbs the digits; this is
        the one place a sign becomes part of a number.
        """
        if self._peek(1) == "-":
            return Token(TokenKind.OPERATOR, "--"), 2

        if self._is_digit(self._peek(1)):
            start = self._pos + 1
            length = self._run_length(start, self.DIGITS)
            if length > MAX_INT_LENGTH:
                raise IntConstantTooLongError(self._line, negative=True)
            digits = self.source[start:start + length]
            return Token(TokenKind.INT_CONSTANT, "-" + digits), length + 1

        return Token(TokenKind.OPERATOR, "-"), 1

    def _scan_slash(self) -> tuple[Optional[Token], int]:
        """Scan '/', a block comment or a line comment."""
        if self._peek(1) == "*":
            return None, self._skip_block_comment()

        if self._peek(1) == "/":
            return None, self._skip_line_comment()

        return Token(TokenKind.OPERATOR, "/"), 1

    def _skip_block_comment(self) -> int:
        """
        Skip a multi-line comment (/* ... */), counting its newlines.

        The search for the closing */ starts after the opening /*, so "/*/"
        does not close itself.

        Raises:
            UnterminatedLiteralError: If the input ends inside the comment
        """
        body_start = self._pos + 2
        end = self.source.find("*/", body_start)
        if end == -1:
            self._line += self.source.count("\n", body_start)
            raise UnterminatedLiteralError("multiline comment not terminated", self._line)

        self._line += self.source.count("\n", body_start, end)
        return end + 2 - self._pos

    def _skip_line_comment(self) -> int:
        """
        Skip a single-line comment up to, not including, its newline.

        Always adds one line, even at end of input.
        """
        end = self.source.find("\n", self._pos)
        if end == -1:
            end = len(self.source)
        self._line += 1
        return end - self._pos

    # =========================================================================
    # Identifiers, Numbers and Strings
    # =========================================================================

    def _scan_identifier(self) -> tuple[Token, int]:
        """
        Scan an identifier or keyword.

        Keywords are identifier-shaped lexemes found in KEYWORDS.
        """
        length = self._run_length(self._pos, self.IDENT_CHARS)
        if length > MAX_IDENTIFIER_LENGTH:
            raise IdentifierTooLongError(self._line)

        name = self.source[self._pos:self._pos + length]
        if name in KEYWORDS:
            return Token(TokenKind.KEYWORD, name), length
        return Token(TokenKind.IDENTIFIER, name), length

    def _scan_int_constant(self) -> tuple[Token, int]:
        """Scan a decimal digit run."""
        length = self._run_length(self._pos, self.DIGITS)
        if length > MAX_INT_LENGTH:
            raise IntConstantTooLongError(self._line)

        digits = self.source[self._pos:self._pos + length]
        return Token(TokenKind.INT_CONSTANT, digits), length

    def _scan_string(self) -> tuple[Token, int]:
        """
        Scan a double-quoted string constant.

        The payload is the raw text between the quotes. There are no
        escape sequences; newlines inside the string are kept and counted.

        Raises:
            UnterminatedLiteralError: If the input ends before the closing quote
        """
        body_start = self._pos + 1
        end = self.source.find('"', body_start)
        if end == -1:
            self._line += self.source.count("\n", body_start)
            raise UnterminatedLiteralError("string constant not terminated", self._line)

        self._line += self.source.count("\n", body_start, end)
        return Token(TokenKind.STRING_CONSTANT, self.source[body_start:end]), end + 1 - self._pos


# =============================================================================
# Convenience Function
# =============================================================================

def scan(source: bytes | str) -> list[Token]:
    """
    Tokenize CENG source code.

    Args:
        source: Raw source bytes or text

    Returns:
        Tokens in source order

    Raises:
        LexicalError: On the first malformed lexeme
    """
    return Scanner(source).tokenize()
