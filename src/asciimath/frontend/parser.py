"""
Parser

Recursive-descent parser for ASCIIMath. There is no operator precedence:
input is read left to right, with sub/superscripts binding to the preceding
simple expression and `/` combining the intermediate expressions around it.

The parser never raises on malformed input. Missing operands become None and
unterminated groups keep a None closing delimiter.
"""

import logging
import re
from typing import Any, List, Optional

from ..shared.nodes import (
    ASTNode, Sequence, Symbol, Identifier, Number, Text, Paren, Group, SubSup,
    UnaryOp, BinaryOp, InfixOp, Matrix, Color, expression, unwrap,
)
from ..shared.symbol_table import SymbolTable
from ..shared.color_table import ColorTable, DEFAULT_COLOR_TABLE, BLACK
from .symbols import OperandConversion, DEFAULT_PARSER_SYMBOL_TABLE
from .tokenizer import Tokenizer, Token, TokenType

logger = logging.getLogger(__name__)

_HEX6 = re.compile(r'#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})')
_HEX3 = re.compile(r'#([0-9a-fA-F])([0-9a-fA-F])([0-9a-fA-F])')

_OPENING = (TokenType.LPAREN, TokenType.LRPAREN)
_CLOSING = (TokenType.RPAREN, TokenType.LRPAREN)

# Row delimiter pairs that allow a paren to be read as a matrix
_MATRIX_ROW_DELIMITERS = (('lparen', 'rparen'), ('lbracket', 'rbracket'))


class Expression:
    """
    Parse result: the AST root plus the source it was parsed from.

    str(expression) gives back the original source text.
    """

    def __init__(self, source: str, ast: Optional[ASTNode]):
        self.source = source
        self.ast = ast

    def to_mathml(self, prefix: str = "", fenced: bool = False, **attrs: Any) -> str:
        from ..backends.mathml import to_mathml
        return to_mathml(self.ast, prefix=prefix, fenced=fenced, **attrs)

    def to_html(self, prefix: str = "", inline: bool = True, **attrs: Any) -> str:
        from ..backends.html import to_html
        return to_html(self.ast, prefix=prefix, inline=inline, **attrs)

    def to_latex(self) -> str:
        from ..backends.latex import to_latex
        return to_latex(self.ast)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Expression) and other.source == self.source and other.ast == self.ast

    def __hash__(self) -> int:
        return hash((self.source, self.ast))

    def __str__(self) -> str:
        return self.source

    def __repr__(self) -> str:
        return f"Expression(source={self.source!r}, ast={self.ast!r})"


class Parser:
    """
    ASCIIMath parser.

    Grammar (informal):
        expression   := intermediate ( '/' intermediate )*
        intermediate := simple ( '_' simple ( '^' simple )? | '^' simple )?
        simple       := paren | unary simple | binary simple simple
                      | NUMBER | TEXT | IDENTIFIER | SYMBOL
        paren        := LPAREN ( RPAREN | expression RPAREN? )

    A Parser holds only its tables, so one instance can parse any number of
    inputs and can be shared between threads.
    """

    def __init__(self, symbol_table: Optional[SymbolTable] = None,
                 color_table: Optional[ColorTable] = None):
        self.symbol_table = symbol_table if symbol_table is not None else DEFAULT_PARSER_SYMBOL_TABLE
        self.color_table = color_table if color_table is not None else DEFAULT_COLOR_TABLE

    def parse(self, source: str) -> Expression:
        """Parse ASCIIMath source text. Never raises on malformed input"""
        logger.debug(f"Parsing {source!r}")
        tokenizer = Tokenizer(source, self.symbol_table)
        ast = self._parse_expression(tokenizer, 0)
        logger.debug(f"Parsed {source!r} -> {type(ast).__name__}")
        return Expression(source, ast)

    # ============================================
    # GRAMMAR
    # ============================================

    def _parse_expression(self, tok: Tokenizer, depth: int) -> Optional[ASTNode]:
        items: List[ASTNode] = []

        while True:
            s1 = self._parse_intermediate_expression(tok, depth)
            if s1 is None:
                break

            t1 = tok.next_token()
            if t1.type == TokenType.INFIX and t1.value == 'frac':
                s2 = self._parse_intermediate_expression(tok, depth)
                if s2 is not None:
                    items.append(InfixOp(_token_to_symbol(t1), unwrap(s1), unwrap(s2)))
                else:
                    items.append(s1)
            elif t1.type == TokenType.EOF:
                items.append(s1)
                break
            else:
                items.append(s1)
                tok.push_back(t1)
                if t1.type in _CLOSING and depth > 0:
                    break

        return expression(*items)

    def _parse_intermediate_expression(self, tok: Tokenizer, depth: int) -> Optional[ASTNode]:
        s = self._parse_simple_expression(tok, depth)
        sub = None
        sup = None

        t1 = tok.next_token()
        if t1.type == TokenType.INFIX and t1.value == 'sub':
            sub = self._parse_simple_expression(tok, depth)
            if sub is not None:
                t2 = tok.next_token()
                if t2.type == TokenType.INFIX and t2.value == 'sup':
                    sup = self._parse_simple_expression(tok, depth)
                else:
                    tok.push_back(t2)
        elif t1.type == TokenType.INFIX and t1.value == 'sup':
            sup = self._parse_simple_expression(tok, depth)
        else:
            tok.push_back(t1)

        if sub is not None or sup is not None:
            return SubSup(s, unwrap(sub), unwrap(sup))
        return s

    def _parse_simple_expression(self, tok: Tokenizer, depth: int) -> Optional[ASTNode]:
        t1 = tok.next_token()

        if t1.type in _OPENING:
            t2 = tok.next_token()
            if t2.type in _CLOSING:
                return Paren(_token_to_symbol(t1), None, _token_to_symbol(t2))
            tok.push_back(t2)

            e = self._parse_expression(tok, depth + 1)

            t2 = tok.next_token()
            if t2.type in _CLOSING:
                return self._convert_to_matrix(Paren(_token_to_symbol(t1), e, _token_to_symbol(t2)))
            tok.push_back(t2)
            return Paren(_token_to_symbol(t1), e, None)

        if t1.type == TokenType.RPAREN:
            if depth > 0:
                tok.push_back(t1)
                return None
            return _token_to_symbol(t1)

        if t1.type == TokenType.UNARY:
            s = unwrap(self._parse_simple_expression(tok, depth))
            s = self._convert_node(s, t1.get('convert_operand'))
            return UnaryOp(_token_to_symbol(t1), s)

        if t1.type == TokenType.BINARY:
            s1 = unwrap(self._parse_simple_expression(tok, depth))
            s2 = unwrap(self._parse_simple_expression(tok, depth))
            s1 = self._convert_node(s1, t1.get('convert_operand1'))
            s2 = self._convert_node(s2, t1.get('convert_operand2'))
            return BinaryOp(_token_to_symbol(t1), s1, s2)

        if t1.type == TokenType.EOF:
            return None
        if t1.type == TokenType.NUMBER:
            return Number(t1.value)
        if t1.type == TokenType.TEXT:
            return Text(t1.value)
        if t1.type == TokenType.IDENTIFIER:
            return Identifier(t1.value)

        # Plain symbols, and infix operators with nothing to bind to
        return _token_to_symbol(t1)

    # ============================================
    # MATRIX INFERENCE
    # ============================================

    def _convert_to_matrix(self, node: Paren) -> ASTNode:
        """
        Re-read `(row),(row),...` as a Matrix.

        Rows must all be parens with `()` or all with `[]` delimiters, separated
        by commas. Each row is split once on its top-level commas. A row whose
        cell count differs from the first row's abandons the conversion and the
        paren is returned unchanged.
        """
        if not isinstance(node.expression, Sequence):
            return node

        items = node.expression.items
        rows = items[0::2]
        separators = items[1::2]

        if len(rows) <= 1 or len(rows) <= len(separators):
            return node
        if not all(_is_matrix_separator(item) for item in separators):
            return node
        if not any(all(_has_delimiters(row, l, r) for row in rows) for l, r in _MATRIX_ROW_DELIMITERS):
            return node

        cells = [_split_row(row.expression) for row in rows]
        if any(len(row) != len(cells[0]) for row in cells):
            logger.debug(f"Matrix inference abandoned: ragged rows {[len(row) for row in cells]}")
            return node

        logger.debug(f"Inferred {len(cells)}x{len(cells[0])} matrix")
        return Matrix(node.lparen, tuple(tuple(row) for row in cells), node.rparen)

    # ============================================
    # OPERAND CONVERSION
    # ============================================

    def _convert_node(self, node: Optional[ASTNode], conversion: Optional[OperandConversion]) -> Optional[ASTNode]:
        if conversion is None or conversion == OperandConversion.NONE:
            return node
        if conversion == OperandConversion.COLOR_TEXT:
            return self._convert_node_to_color(node)
        raise ValueError(f"Unknown operand conversion: {conversion!r}")

    def _convert_node_to_color(self, node: Optional[ASTNode]) -> Color:
        """
        Resolve an operand to a Color.

        The operand's leaf text is concatenated and matched as `#RRGGBB`, then
        `#RGB`, then as a color name (case-insensitive). Unknown names are black.
        """
        parts: List[str] = []
        _append_color_text(parts, node)
        s = ''.join(parts)

        m = _HEX6.match(s)
        if m:
            rgb = tuple(int(h, 16) for h in m.groups())
        else:
            m = _HEX3.match(s)
            if m:
                rgb = tuple(int(h * 2, 16) for h in m.groups())
            else:
                rgb = self.color_table.lookup(s) or BLACK
        return Color(rgb[0], rgb[1], rgb[2], s)


def _token_to_symbol(token: Token) -> Symbol:
    return Symbol(token.value, token.text)


def _is_matrix_separator(node: Optional[ASTNode]) -> bool:
    return isinstance(node, Identifier) and node.value == ','


def _has_delimiters(node: ASTNode, lparen: str, rparen: str) -> bool:
    return (isinstance(node, Paren)
            and node.lparen is not None and node.lparen.value == lparen
            and node.rparen is not None and node.rparen.value == rparen)


def _split_row(row: Optional[ASTNode]) -> List[Optional[ASTNode]]:
    if row is None:
        row_items = ()
    elif isinstance(row, Sequence):
        row_items = row.items
    else:
        row_items = (row,)

    chunks: List[List[ASTNode]] = [[]]
    for item in row_items:
        if _is_matrix_separator(item):
            chunks.append([])
        else:
            chunks[-1].append(item)
    return [expression(*chunk) for chunk in chunks]


def _append_color_text(parts: List[str], node: Optional[ASTNode]) -> None:
    if node is None:
        return
    if isinstance(node, (Number, Identifier, Text)):
        parts.append(node.value)
    elif isinstance(node, Symbol):
        parts.append(node.text)
    elif isinstance(node, Sequence):
        for item in node.items:
            _append_color_text(parts, item)
    elif isinstance(node, Group):
        _append_color_text(parts, node.expression)
    elif isinstance(node, Paren):
        _append_color_text(parts, node.lparen)
        _append_color_text(parts, node.expression)
        _append_color_text(parts, node.rparen)
    elif isinstance(node, SubSup):
        _append_color_text(parts, node.base)
        _append_color_text(parts, node.sub)
        _append_color_text(parts, node.sup)
    elif isinstance(node, (UnaryOp,)):
        _append_color_text(parts, node.operator)
        _append_color_text(parts, node.operand)
    elif isinstance(node, (BinaryOp, InfixOp)):
        _append_color_text(parts, node.operator)
        _append_color_text(parts, node.operand1)
        _append_color_text(parts, node.operand2)
    elif isinstance(node, Color):
        parts.append(node.text)
    elif isinstance(node, Matrix):
        for row in node.rows:
            for cell in row:
                _append_color_text(parts, cell)
