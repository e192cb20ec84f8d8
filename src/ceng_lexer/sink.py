"""
Token Dump Output
=================

Renders tokens in the text dump format and writes them out.

Format
------
One token per line:

    Token{Type: Keyword, Value: int}
    Token{Type: Identifier, Value: x}
    Token{Type: EndOfLine}

The Value part is omitted when the token has no text. Lines are separated
by a newline with no newline after the last one, the layout of the .lex
files read by downstream tools.
"""

from pathlib import Path
from typing import Iterable, TextIO
import logging

from ceng_lexer.lexer import Token

logger = logging.getLogger(__name__)


def render_token(token: Token) -> str:
    """Format a single token as a dump line."""
    return str(token)


def render_tokens(tokens: Iterable[Token]) -> str:
    """Format tokens as newline-separated dump lines, without a trailing newline."""
    return "\n".join(render_token(token) for token in tokens)


def write_tokens(tokens: list[Token], path: str | Path) -> int:
    """
    Write the token dump to a file.

    Args:
        tokens: Tokens to write
        path: Destination file (overwritten)

    Returns:
        Number of tokens written
    """
    path = Path(path)
    path.write_text(render_tokens(tokens), encoding="latin-1")
    logger.debug(f"Wrote {len(tokens)} tokens to {path}")
    return len(tokens)


class TokenSink:
    """
    Writes token dumps to an open text stream.

    Usage:
        sink = TokenSink(sys.stdout)
        sink.write(tokens)
    """

    def __init__(self, stream: TextIO):
        self.stream = stream

    def write(self, tokens: list[Token]) -> int:
        """Write the dump followed by a newline; return the token count."""
        text = render_tokens(tokens)
        if text:
            self.stream.write(text + "\n")
        return len(tokens)
