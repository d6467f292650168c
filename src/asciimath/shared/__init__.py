"""
Shared components: AST nodes, visitor, symbol and color tables, errors.
"""

from .errors import AsciiMathError, SymbolTableError, ColorTableError
from .nodes import (
    ASTNode, NodeType,
    Sequence, Symbol, Identifier, Number, Text, Color,
    Paren, Group, SubSup, UnaryOp, BinaryOp, InfixOp, Matrix,
    expression, unwrap,
)
from .ast_visitor import ASTVisitor
from .symbol_table import SymbolDescriptor, SymbolTable, SymbolTableBuilder
from .color_table import RGB, BLACK, ColorTable, ColorTableBuilder, add_default_colors, DEFAULT_COLOR_TABLE
