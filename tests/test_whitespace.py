"""Test whitespace, comments, line tracking, and lexeme fidelity."""

import pytest

from loxscan.lexer import scan_tokens
from loxscan.tokens import TokenType

from .conftest import assert_types


class TestWhitespace:
    @pytest.mark.parametrize("source", ["", " ", "\t\t", "\r\n", " \n\t\r\n  ", "\n\n\n"])
    def test_only_eof(self, source):
        tokens = scan_tokens(source)
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF

    def test_whitespace_separates_tokens(self, lex):
        tokens = lex("a\tb\rc d")
        assert_types(tokens, [TokenType.IDENTIFIER] * 4)


class TestComments:
    def test_comment_only(self):
        tokens = scan_tokens("// nothing here")
        assert_types(tokens, [TokenType.EOF])

    def test_comment_after_code(self, lex):
        tokens = lex("x; // trailing")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.SEMICOLON])

    def test_comment_hides_invalid_characters(self, lex):
        tokens = lex('// @#$ "unterminated ~`')
        assert tokens == []

    def test_comment_ends_at_newline(self, lex):
        tokens = lex("// one\ntwo")
        assert_types(tokens, [TokenType.IDENTIFIER])
        assert tokens[0].line == 2

    def test_single_slash_is_division(self, lex):
        tokens = lex("a / b")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.SLASH, TokenType.IDENTIFIER])

    def test_slash_then_comment(self, lex):
        tokens = lex("/ //x")
        assert_types(tokens, [TokenType.SLASH])


class TestLineTracking:
    def test_first_line_is_one(self):
        tokens = scan_tokens("x")
        assert tokens[0].line == 1
        assert tokens[1].line == 1

    def test_line_after_newlines(self):
        tokens = scan_tokens("a\nb\n\nc")
        assert [t.line for t in tokens] == [1, 2, 4, 4]

    def test_crlf_counts_once(self):
        tokens = scan_tokens("a\r\nb")
        assert tokens[1].line == 2

    def test_eof_line_after_trailing_newline(self):
        tokens = scan_tokens("a;\n")
        assert tokens[-1].line == 2

    def test_comment_lines_counted(self):
        tokens = scan_tokens("// c1\n// c2\nprint")
        assert tokens[0].type == TokenType.PRINT
        assert tokens[0].line == 3


class TestLexemeFidelity:
    def test_lexemes_are_source_slices(self):
        source = 'fun add(a, b) {\n  return a + b >= 10.25; // sum\n}\nprint "ok";\n'
        tokens = scan_tokens(source)
        pos = 0
        for tok in tokens[:-1]:
            idx = source.index(tok.lexeme, pos)
            # Only whitespace and comments may sit between consecutive lexemes
            gap = source[pos:idx]
            assert gap.strip() == "" or gap.strip().startswith("//")
            pos = idx + len(tok.lexeme)
        assert source[pos:].strip() == ""

    def test_reassembled_without_whitespace(self):
        tokens = scan_tokens("if(a!=b){x=1.5;}")
        assert "".join(t.lexeme for t in tokens) == "if(a!=b){x=1.5;}"
