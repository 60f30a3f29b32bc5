"""Recursive-descent parser for the lambda language."""

from __future__ import annotations

from typing import Optional

from .ast import Define, Expr, Function, Paren, Sequence, Word, Words

_WHITESPACE = frozenset(" \n\t\r")


class ParseError(ValueError):
    """Raised when the source text cannot be parsed."""


def _is_word_char(ch: Optional[str]) -> bool:
    return ch is not None and (ch.isalnum() or ch == "_")


class Parser:
    """Parses source text into an expression tree."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0

    def parse(self) -> Expr:
        """Parse the whole input; several ';'-separated expressions form a Sequence."""
        exprs: list[Expr] = []
        while True:
            self._skip_whitespace()
            if self._peek() is None:
                break
            exprs.append(self._parse_expression())
            self._skip_whitespace()
            if not self._consume(";"):
                break
        if len(exprs) == 1:
            return exprs[0]
        return Sequence(tuple(exprs))

    def _parse_expression(self) -> Expr:
        self._skip_whitespace()
        if self._peek() == "L":
            return self._parse_function()
        if self._peek() == "(":
            return self._parse_paren()
        definition = self._parse_define()
        if definition is not None:
            return definition
        return self._parse_words()

    def _parse_function(self) -> Function:
        self._expect("L")
        self._skip_whitespace()
        params = [self._parse_word()]
        while (ch := self._peek()) is not None:
            if _is_word_char(ch):
                params.append(self._parse_word())
            elif ch == " ":
                self._pos += 1
            else:
                break
        self._expect(".")
        body = self._parse_expression()
        return Function(tuple(params), body)

    def _parse_define(self) -> Optional[Define]:
        saved = self._pos
        self._skip_whitespace()
        try:
            name = self._parse_word()
        except ParseError:
            name = None
        if name is not None:
            self._skip_whitespace()
            if self._consume("="):
                self._skip_whitespace()
                return Define(name, self._parse_primary())
        self._pos = saved
        return None

    def _parse_words(self) -> Expr:
        words: list[Expr] = [Word(self._parse_word())]
        self._skip_whitespace()
        while _is_word_char(self._peek()):
            words.append(Word(self._parse_word()))
            self._skip_whitespace()
        if len(words) == 1:
            return words[0]
        return Words(tuple(words))

    def _parse_paren(self) -> Paren:
        self._expect("(")
        inner = self._parse_expression()
        self._expect(")")
        return Paren(inner)

    def _parse_primary(self) -> Expr:
        self._skip_whitespace()
        if self._peek() == "L":
            return self._parse_function()
        if self._peek() == "(":
            return self._parse_paren()
        return self._parse_words()

    def _parse_word(self) -> str:
        start = self._pos
        while _is_word_char(self._peek()):
            self._pos += 1
        if self._pos == start:
            raise ParseError("Expected word")
        return self._source[start:self._pos]

    def _peek(self) -> Optional[str]:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return None

    def _skip_whitespace(self) -> None:
        while self._peek() in _WHITESPACE:
            self._pos += 1

    def _consume(self, expected: str) -> bool:
        if self._peek() == expected:
            self._pos += 1
            return True
        return False

    def _expect(self, expected: str) -> None:
        ch = self._peek()
        if ch is not None:
            self._pos += 1
        if ch != expected:
            raise ParseError(f"Expected '{expected}'")


def parse(source: str) -> Expr:
    """Parse source text into an expression tree."""
    return Parser(source).parse()