"""Lox scanner: converts source text into a flat token stream."""

from __future__ import annotations

from loxscan.errors import LexError, UnexpectedCharacterError, UnterminatedStringError
from loxscan.tokens import KEYWORDS, Token, TokenType, is_alnum, is_alpha, is_digit

_SINGLE_CHAR = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# (kind without "=", kind with "=")
_WITH_EQUAL = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


class Scanner:
    """Scan Lox source text into a list of Token objects.

    A scanner is single-use: create one per source text. Lines are 1-based.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1

    def scan_tokens(self) -> list[Token]:
        """Scan the full source and return the token list, ending with EOF.

        Raises LexError on the first invalid input; no partial result is
        returned.
        """
        while not self._is_at_end():
            self._start = self._current
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        return self._tokens

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        if self._is_at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self._source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self._source):
            return "\0"
        return self._source[self._current + 1]

    def _add_token(self, tt: TokenType, literal: str | float | None = None) -> None:
        lexeme = self._source[self._start : self._current]
        self._tokens.append(Token(tt, lexeme, literal, self._line))

    def _error(self, ch: str) -> LexError:
        return UnexpectedCharacterError(ch, self._line)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._advance()

        if ch in _SINGLE_CHAR:
            self._add_token(_SINGLE_CHAR[ch])
            return

        if ch in _WITH_EQUAL:
            single, double = _WITH_EQUAL[ch]
            self._add_token(double if self._match("=") else single)
            return

        if ch == "/":
            if self._match("/"):
                # Comment runs to end of line; the newline is left for the loop
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
            return

        if ch in " \r\t":
            return

        if ch == "\n":
            self._line += 1
            return

        if ch == '"':
            self._string()
            return

        if is_digit(ch):
            self._number()
            return

        if is_alpha(ch):
            self._identifier()
            return

        raise self._error(ch)

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _string(self) -> None:
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._is_at_end():
            raise UnterminatedStringError(self._line)

        self._advance()  # closing quote

        value = self._source[self._start + 1 : self._current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self) -> None:
        while is_digit(self._peek()):
            self._advance()

        # A trailing dot without fractional digits is left for the next token
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self._source[self._start : self._current]))

    def _identifier(self) -> None:
        while is_alnum(self._peek()):
            self._advance()

        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def scan_tokens(source: str) -> list[Token]:
    """Convenience function: scan source text and return the token list."""
    return Scanner(source).scan_tokens()
