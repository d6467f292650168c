"""
Tokenizer

Splits ASCIIMath source into tokens on demand, one per next_token() call,
with a single token of pushback.

Symbols are recognised by longest match against the symbol table: a window
as long as the longest registered spelling is shortened one unit at a time
until it names a symbol. A single unmatched character becomes an identifier.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Mapping, Optional

from ..shared.symbol_table import SymbolTable, SymbolDescriptor
from .symbols import GrammarClass

_WHITESPACE = re.compile(r'\s+')
_NUMBER = re.compile(r'-?[0-9]+(?:\.[0-9]+)?')
# One scan unit: an escaped whitespace/digit, or any other single character
_UNIT = re.compile(r'\\[\s0-9]|[^\s0-9]')

_TEX_TEXT_START = 'text('


class TokenType(Enum):
    """Token classification; grammar classes plus literal and eof types"""
    SYMBOL = "symbol"
    TEXT = "text"
    NUMBER = "number"
    IDENTIFIER = "identifier"
    UNARY = "unary"
    BINARY = "binary"
    INFIX = "infix"
    LPAREN = "lparen"
    RPAREN = "rparen"
    LRPAREN = "lrparen"
    EOF = "eof"


_GRAMMAR_TOKEN_TYPES = {
    GrammarClass.SYMBOL: TokenType.SYMBOL,
    GrammarClass.UNARY: TokenType.UNARY,
    GrammarClass.BINARY: TokenType.BINARY,
    GrammarClass.INFIX: TokenType.INFIX,
    GrammarClass.LPAREN: TokenType.LPAREN,
    GrammarClass.RPAREN: TokenType.RPAREN,
    GrammarClass.LRPAREN: TokenType.LRPAREN,
}


@dataclass(frozen=True)
class Token:
    """
    One token of input.

    - value: symbol id for symbol tokens, literal content for text/number/identifier
    - text: the source text the token was read from
    - extra: metadata inherited from the symbol descriptor
    """
    type: TokenType
    value: Optional[str]
    text: str = ''
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def get(self, key: str, default: Any = None) -> Any:
        return self.extra.get(key, default)


EOF_TOKEN = Token(TokenType.EOF, None)


class Tokenizer:
    """
    Lazy tokenizer over one source string.

    Usage:
        tok = Tokenizer("a + b", DEFAULT_PARSER_SYMBOL_TABLE)
        t = tok.next_token()
        tok.push_back(t)  # next call returns t again
    """

    def __init__(self, source: str, symbols: SymbolTable):
        self._source = source
        self._pos = 0
        self._symbols = symbols
        self._lookahead = max(symbols.longest_spelling_length(), 1)
        self._push_back: Optional[Token] = None

    def next_token(self) -> Token:
        if self._push_back is not None:
            token = self._push_back
            self._push_back = None
            return token

        match = _WHITESPACE.match(self._source, self._pos)
        if match:
            self._pos = match.end()

        if self._pos >= len(self._source):
            return EOF_TOKEN

        c = self._source[self._pos]
        if c == '"':
            return self._read_quoted_text()
        if self._source.startswith(_TEX_TEXT_START, self._pos):
            return self._read_tex_text()
        if c == '-' or '0' <= c <= '9':
            return self._read_number() or self._read_symbol()
        return self._read_symbol()

    def push_back(self, token: Token) -> None:
        """Unread one token. Pushing back eof is a no-op"""
        if token.type != TokenType.EOF:
            self._push_back = token

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token.type == TokenType.EOF:
                return
            yield token

    def _read_quoted_text(self) -> Token:
        start = self._pos
        end = self._source.find('"', start + 1)
        if end == -1:
            # Unterminated: take everything that is left
            self._pos = len(self._source)
            value = self._source[start + 1:]
        else:
            self._pos = end + 1
            value = self._source[start + 1:end]
        return Token(TokenType.TEXT, value, self._source[start:self._pos])

    def _read_tex_text(self) -> Token:
        start = self._pos
        content_start = start + len(_TEX_TEXT_START)
        end = self._source.find(')', content_start)
        if end == -1:
            self._pos = len(self._source)
            value = self._source[content_start:]
        else:
            self._pos = end + 1
            value = self._source[content_start:end]
        return Token(TokenType.TEXT, value, self._source[start:self._pos])

    def _read_number(self) -> Optional[Token]:
        match = _NUMBER.match(self._source, self._pos)
        if not match:
            return None
        self._pos = match.end()
        return Token(TokenType.NUMBER, match.group(0), match.group(0))

    def _read_symbol(self) -> Token:
        units = []
        pos = self._pos
        while len(units) < self._lookahead:
            match = _UNIT.match(self._source, pos)
            if not match:
                break
            units.append(match.group(0))
            pos = match.end()

        descriptor: Optional[SymbolDescriptor] = None
        while units:
            candidate = ''.join(units)
            descriptor = self._symbols.lookup(candidate)
            if descriptor is not None or len(units) == 1:
                break
            units.pop()

        self._pos += len(candidate)
        if descriptor is None:
            return Token(TokenType.IDENTIFIER, candidate, candidate)
        return Token(_GRAMMAR_TOKEN_TYPES[descriptor.kind], descriptor.value, candidate, descriptor.extra)
