"""
Tests for token dump output and source loading
==============================================

These tests verify the Token{Type: ..., Value: ...} rendering, file and
stream output, and reading source files from disk.
"""

import io

import pytest

from ceng_lexer.errors import CengError, SourceLoadError
from ceng_lexer.lexer import Token, TokenKind, scan
from ceng_lexer.loader import load_source
from ceng_lexer.sink import TokenSink, render_token, render_tokens, write_tokens


# =============================================================================
# Rendering
# =============================================================================

class TestRenderToken:
    """Tests for render_token()."""

    def test_with_value(self):
        token = Token(TokenKind.IDENTIFIER, "count")
        assert render_token(token) == "Token{Type: Identifier, Value: count}"

    def test_without_value(self):
        assert render_token(Token(TokenKind.STATEMENT_END)) == "Token{Type: EndOfLine}"

    def test_bracket_labels(self):
        rendered = [render_token(t) for t in scan("(){}")]
        assert rendered == [
            "Token{Type: LeftPar, Value: (}",
            "Token{Type: RightPar, Value: )}",
            "Token{Type: LeftCurlyBracket, Value: {}",
            "Token{Type: RightCurlyBracket, Value: }}",
        ]

    def test_matches_str(self):
        for token in scan('int x = "s"; x++;'):
            assert render_token(token) == str(token)

    def test_distinct_tokens_render_distinctly(self):
        """Kind and payload both survive rendering."""
        tokens = {
            Token(TokenKind.IDENTIFIER, "int"),
            Token(TokenKind.KEYWORD, "int"),
            Token(TokenKind.STRING_CONSTANT, "int"),
            Token(TokenKind.INT_CONSTANT, "5"),
            Token(TokenKind.INT_CONSTANT, "-5"),
            Token(TokenKind.OPERATOR, "-"),
            Token(TokenKind.STATEMENT_END),
        }
        assert len({render_token(t) for t in tokens}) == len(tokens)


class TestRenderTokens:
    """Tests for render_tokens()."""

    def test_newline_separated_without_trailing_newline(self):
        text = render_tokens(scan("a;"))
        assert text == "Token{Type: Identifier, Value: a}\nToken{Type: EndOfLine}"

    def test_empty(self):
        assert render_tokens([]) == ""


# =============================================================================
# Output
# =============================================================================

class TestWriteTokens:
    """Tests for write_tokens()."""

    def test_writes_file(self, tmp_path):
        out = tmp_path / "code.lex"
        count = write_tokens(scan("x = 1;"), out)
        assert count == 4
        assert out.read_text() == (
            "Token{Type: Identifier, Value: x}\n"
            "Token{Type: Operator, Value: =}\n"
            "Token{Type: IntConstant, Value: 1}\n"
            "Token{Type: EndOfLine}"
        )

    def test_overwrites_existing(self, tmp_path):
        out = tmp_path / "code.lex"
        out.write_text("stale")
        write_tokens([], out)
        assert out.read_text() == ""

    def test_high_bytes_round_trip(self, tmp_path):
        """String payloads keep their original bytes."""
        out = tmp_path / "code.lex"
        write_tokens(scan(b'"caf\xe9"'), out)
        assert out.read_bytes() == b"Token{Type: StringConstant, Value: caf\xe9}"


class TestTokenSink:
    """Tests for TokenSink."""

    def test_writes_stream(self):
        stream = io.StringIO()
        count = TokenSink(stream).write(scan("a++;"))
        assert count == 3
        assert stream.getvalue().splitlines() == [
            "Token{Type: Identifier, Value: a}",
            "Token{Type: Operator, Value: ++}",
            "Token{Type: EndOfLine}",
        ]

    def test_nothing_written_for_no_tokens(self):
        stream = io.StringIO()
        assert TokenSink(stream).write([]) == 0
        assert stream.getvalue() == ""


# =============================================================================
# Source Loading
# =============================================================================

class TestLoadSource:
    """Tests for load_source()."""

    def test_reads_bytes(self, tmp_path):
        src = tmp_path / "code_file.ceng"
        src.write_bytes(b"int x;\n")
        assert load_source(src) == b"int x;\n"

    def test_accepts_str_path(self, tmp_path):
        src = tmp_path / "a.ceng"
        src.write_bytes(b"x")
        assert load_source(str(src)) == b"x"

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "nope.ceng"
        with pytest.raises(SourceLoadError) as exc_info:
            load_source(missing)
        assert exc_info.value.path == str(missing)
        assert "cannot read source file" in str(exc_info.value)
        assert isinstance(exc_info.value, CengError)

    def test_directory(self, tmp_path):
        with pytest.raises(SourceLoadError):
            load_source(tmp_path)
