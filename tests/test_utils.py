"""
Test utilities for the asciimath test suite.

AST construction helpers that mirror what the parser produces, so expected
trees can be written compactly:

    seq(sup(ident('a'), num('2')), sym('+'), ident('b'))
"""

import sys
from pathlib import Path
from typing import Optional, Sequence as SequenceType, Union

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from asciimath import parse
from asciimath.frontend.symbols import DEFAULT_PARSER_SYMBOL_TABLE
from asciimath.shared.nodes import (
    ASTNode, Symbol, Identifier, Number, Text, Color, Paren, Group, SubSup,
    UnaryOp, BinaryOp, InfixOp, Matrix, expression,
)

NodeLike = Union[ASTNode, str, None]


def sym(spelling: str) -> Symbol:
    """Symbol node for a default-table spelling, e.g. sym('+') -> Symbol('plus', '+')"""
    descriptor = DEFAULT_PARSER_SYMBOL_TABLE.lookup(spelling)
    if descriptor is None:
        raise KeyError(f"No default symbol spelled {spelling!r}")
    return Symbol(descriptor.value, spelling)


def ident(value: str) -> Identifier:
    return Identifier(value)


def num(value: str) -> Number:
    return Number(value)


def text(value: str) -> Text:
    return Text(value)


def _node(value: NodeLike) -> Optional[ASTNode]:
    # Bare strings are shorthand for symbols
    if isinstance(value, str):
        return sym(value)
    return value


def seq(*items: NodeLike) -> Optional[ASTNode]:
    return expression(*(_node(item) for item in items))


def paren(body: NodeLike, lparen: Optional[str] = '(', rparen: Optional[str] = ')') -> Paren:
    return Paren(
        sym(lparen) if lparen is not None else None,
        _node(body),
        sym(rparen) if rparen is not None else None,
    )


def group(body: NodeLike, lparen: Optional[str] = '(', rparen: Optional[str] = ')') -> Group:
    return Group(
        sym(lparen) if lparen is not None else None,
        _node(body),
        sym(rparen) if rparen is not None else None,
    )


def sub(base: NodeLike, subscript: NodeLike) -> SubSup:
    return SubSup(_node(base), _node(subscript), None)


def sup(base: NodeLike, superscript: NodeLike) -> SubSup:
    return SubSup(_node(base), None, _node(superscript))


def subsup(base: NodeLike, subscript: NodeLike, superscript: NodeLike) -> SubSup:
    return SubSup(_node(base), _node(subscript), _node(superscript))


def unary(operator: str, operand: NodeLike) -> UnaryOp:
    return UnaryOp(sym(operator), _node(operand))


def binary(operator: str, operand1: NodeLike, operand2: NodeLike) -> BinaryOp:
    return BinaryOp(sym(operator), _node(operand1), _node(operand2))


def infix(operand1: NodeLike, operator: str, operand2: NodeLike) -> InfixOp:
    return InfixOp(sym(operator), _node(operand1), _node(operand2))


def color(r: int, g: int, b: int, source: str) -> Color:
    return Color(r, g, b, source)


def matrix(rows: SequenceType[SequenceType[NodeLike]], lparen: Optional[str] = '(',
           rparen: Optional[str] = ')') -> Matrix:
    return Matrix(
        sym(lparen) if lparen is not None else None,
        tuple(tuple(_node(cell) for cell in row) for row in rows),
        sym(rparen) if rparen is not None else None,
    )


def parse_ast(source: str) -> Optional[ASTNode]:
    """Parse with the default tables and return only the AST"""
    return parse(source).ast
