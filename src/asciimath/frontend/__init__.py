"""
Frontend: ASCIIMath text to AST.
"""

from .symbols import GrammarClass, OperandConversion, add_default_parser_symbols, DEFAULT_PARSER_SYMBOL_TABLE
from .tokenizer import Token, TokenType, Tokenizer
from .parser import Expression, Parser

__all__ = [
    'GrammarClass', 'OperandConversion', 'add_default_parser_symbols', 'DEFAULT_PARSER_SYMBOL_TABLE',
    'Token', 'TokenType', 'Tokenizer',
    'Expression', 'Parser',
]
