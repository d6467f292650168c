"""
Backends: AST to MathML, HTML and LaTeX markup.
"""

from .display_symbols import DisplayClass, AccentPosition, add_default_display_symbols, DEFAULT_DISPLAY_SYMBOL_TABLE
from .base import MarkupBuilder, RowMode
from .mathml import MathMLBuilder, to_mathml
from .html import HTMLBuilder, to_html
from .latex import LatexBuilder, add_default_latex_symbols, DEFAULT_LATEX_SYMBOL_TABLE, to_latex

__all__ = [
    'DisplayClass', 'AccentPosition', 'add_default_display_symbols', 'DEFAULT_DISPLAY_SYMBOL_TABLE',
    'MarkupBuilder', 'RowMode',
    'MathMLBuilder', 'to_mathml',
    'HTMLBuilder', 'to_html',
    'LatexBuilder', 'add_default_latex_symbols', 'DEFAULT_LATEX_SYMBOL_TABLE', 'to_latex',
]
