"""
asciimath: ASCIIMath to MathML, HTML and LaTeX.

Usage:
    import asciimath

    expression = asciimath.parse("sum_(i=1)^n i^3=((n(n+1))/2)^2")
    expression.to_mathml()
    expression.to_html()
    expression.to_latex()

Every module logs to its own `asciimath.*` logger; no handlers are installed.
"""

from typing import Optional

from .shared.nodes import (
    ASTNode, Sequence, Symbol, Identifier, Number, Text, Color,
    Paren, Group, SubSup, UnaryOp, BinaryOp, InfixOp, Matrix,
)
from .shared.ast_visitor import ASTVisitor
from .shared.errors import AsciiMathError, SymbolTableError, ColorTableError
from .shared.symbol_table import SymbolDescriptor, SymbolTable, SymbolTableBuilder
from .shared.color_table import RGB, ColorTable, ColorTableBuilder, add_default_colors, DEFAULT_COLOR_TABLE
from .frontend.symbols import GrammarClass, OperandConversion, add_default_parser_symbols, DEFAULT_PARSER_SYMBOL_TABLE
from .frontend.parser import Expression, Parser
from .backends.display_symbols import DisplayClass, add_default_display_symbols, DEFAULT_DISPLAY_SYMBOL_TABLE
from .backends.mathml import MathMLBuilder, to_mathml
from .backends.html import HTMLBuilder, to_html
from .backends.latex import LatexBuilder, add_default_latex_symbols, DEFAULT_LATEX_SYMBOL_TABLE, to_latex

__version__ = "2.0.0"


def parse(source: str, symbol_table: Optional[SymbolTable] = None,
          color_table: Optional[ColorTable] = None) -> Expression:
    """Parse ASCIIMath source into an Expression"""
    return Parser(symbol_table=symbol_table, color_table=color_table).parse(source)


__all__ = [
    'parse', 'Expression', 'Parser',
    'ASTNode', 'Sequence', 'Symbol', 'Identifier', 'Number', 'Text', 'Color',
    'Paren', 'Group', 'SubSup', 'UnaryOp', 'BinaryOp', 'InfixOp', 'Matrix',
    'ASTVisitor',
    'AsciiMathError', 'SymbolTableError', 'ColorTableError',
    'SymbolDescriptor', 'SymbolTable', 'SymbolTableBuilder',
    'RGB', 'ColorTable', 'ColorTableBuilder', 'add_default_colors', 'DEFAULT_COLOR_TABLE',
    'GrammarClass', 'OperandConversion', 'add_default_parser_symbols', 'DEFAULT_PARSER_SYMBOL_TABLE',
    'DisplayClass', 'add_default_display_symbols', 'DEFAULT_DISPLAY_SYMBOL_TABLE',
    'MathMLBuilder', 'to_mathml', 'HTMLBuilder', 'to_html',
    'LatexBuilder', 'add_default_latex_symbols', 'DEFAULT_LATEX_SYMBOL_TABLE', 'to_latex',
    '__version__',
]
