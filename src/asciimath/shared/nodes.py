"""
ASCIIMath AST (Abstract Syntax Tree) Definitions

Closed set of immutable node variants produced by the parser and consumed
by the markup builders.

Visitor Pattern Support:
- All AST nodes have accept() methods for polymorphic dispatch
- Nodes are frozen dataclasses: structural equality, hashable, no parent links
- str(node) writes the node back out as ASCIIMath source
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Tuple, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .ast_visitor import ASTVisitor

T = TypeVar('T')


class NodeType(Enum):
    """AST node types"""
    SEQUENCE = "sequence"
    SYMBOL = "symbol"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    TEXT = "text"
    PAREN = "paren"
    GROUP = "group"
    SUBSUP = "subsup"
    UNARY_OP = "unary_op"
    BINARY_OP = "binary_op"
    INFIX_OP = "infix_op"
    MATRIX = "matrix"
    COLOR = "color"


class ASTNode:
    """
    Base class for all AST nodes

    Visitor Pattern Support (LLVM-style):
    - All nodes have accept() method for polymorphic dispatch
    - Subclasses must implement accept() to call appropriate visit_* method
    """
    __slots__ = ()
    node_type: ClassVar[NodeType]

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        """
        Accept a visitor (polymorphic dispatch).

        Example:
            class Counter(ASTVisitor[int]):
                def visit_number(self, node: Number) -> int:
                    return 1
                ...

            Number("42").accept(Counter())
        """
        raise NotImplementedError(f"accept() not implemented for {self.__class__.__name__}")


def _source(node: Optional[ASTNode]) -> str:
    return '' if node is None else str(node)


# ============================================
# LEAF NODES
# ============================================

@dataclass(frozen=True)
class Symbol(ASTNode):
    """Grammar symbol: resolved id plus the spelling it was written with"""
    value: Optional[str]
    text: str
    node_type: ClassVar[NodeType] = NodeType.SYMBOL

    def __str__(self) -> str:
        return self.text

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_symbol(self)


@dataclass(frozen=True)
class Identifier(ASTNode):
    """Single unrecognised character"""
    value: str
    node_type: ClassVar[NodeType] = NodeType.IDENTIFIER

    def __str__(self) -> str:
        return self.value

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_identifier(self)


@dataclass(frozen=True)
class Number(ASTNode):
    """Numeric literal, kept as written (e.g. "-4", "3.14")"""
    value: str
    node_type: ClassVar[NodeType] = NodeType.NUMBER

    def __str__(self) -> str:
        return self.value

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_number(self)


@dataclass(frozen=True)
class Text(ASTNode):
    """Quoted or text(...) literal"""
    value: str
    node_type: ClassVar[NodeType] = NodeType.TEXT

    def __str__(self) -> str:
        return f'"{self.value}"'

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_text(self)


@dataclass(frozen=True)
class Color(ASTNode):
    """
    Resolved color literal.

    Produced by the parser from the first operand of `color`; `text` keeps the
    operand text the color was resolved from.
    """
    r: int
    g: int
    b: int
    text: str
    node_type: ClassVar[NodeType] = NodeType.COLOR

    def to_hex_rgb(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return f"({self.text})"

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_color(self)


# ============================================
# INNER NODES
# ============================================

@dataclass(frozen=True)
class Sequence(ASTNode):
    """
    Ordered run of two or more nodes.

    Use expression() to build sequences: it collapses the empty and singleton
    cases so a Sequence never wraps fewer than two items.
    """
    items: Tuple[ASTNode, ...]
    node_type: ClassVar[NodeType] = NodeType.SEQUENCE

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __str__(self) -> str:
        return ' '.join(str(item) for item in self.items)

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_sequence(self)


@dataclass(frozen=True)
class Paren(ASTNode):
    """
    Parenthesized expression as written in the source.

    lparen/rparen are Symbol nodes or None for a missing delimiter. no_unwrap
    marks parens that must keep their delimiters when used as an operand.
    """
    lparen: Optional[Symbol]
    expression: Optional[ASTNode]
    rparen: Optional[Symbol]
    no_unwrap: bool = False
    node_type: ClassVar[NodeType] = NodeType.PAREN

    def __str__(self) -> str:
        return f"{_source(self.lparen)}{_source(self.expression)}{_source(self.rparen)}"

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_paren(self)


@dataclass(frozen=True)
class Group(ASTNode):
    """Unwrapped Paren: renders as its body, delimiters kept for round-tripping"""
    lparen: Optional[Symbol]
    expression: Optional[ASTNode]
    rparen: Optional[Symbol]
    node_type: ClassVar[NodeType] = NodeType.GROUP

    def __str__(self) -> str:
        return f"{_source(self.lparen)}{_source(self.expression)}{_source(self.rparen)}"

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_group(self)


@dataclass(frozen=True)
class SubSup(ASTNode):
    """Base with optional subscript and superscript"""
    base: Optional[ASTNode]
    sub: Optional[ASTNode] = None
    sup: Optional[ASTNode] = None
    node_type: ClassVar[NodeType] = NodeType.SUBSUP

    def __str__(self) -> str:
        s = _source(self.base)
        if self.sub is not None:
            s += f"_{self.sub}"
        if self.sup is not None:
            s += f"^{self.sup}"
        return s

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_subsup(self)


@dataclass(frozen=True)
class UnaryOp(ASTNode):
    """Prefix operator applied to one operand (sqrt, hat, bb, sin, ...)"""
    operator: Symbol
    operand: Optional[ASTNode]
    node_type: ClassVar[NodeType] = NodeType.UNARY_OP

    def __str__(self) -> str:
        return f"{self.operator} {_source(self.operand)}"

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_unary_op(self)


@dataclass(frozen=True)
class BinaryOp(ASTNode):
    """Prefix operator applied to two operands (frac, root, overset, color, ...)"""
    operator: Symbol
    operand1: Optional[ASTNode]
    operand2: Optional[ASTNode]
    node_type: ClassVar[NodeType] = NodeType.BINARY_OP

    def __str__(self) -> str:
        return f"{self.operator} {_source(self.operand1)} {_source(self.operand2)}"

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_binary_op(self)


@dataclass(frozen=True)
class InfixOp(ASTNode):
    """Operator written between its operands (a/b)"""
    operator: Symbol
    operand1: Optional[ASTNode]
    operand2: Optional[ASTNode]
    node_type: ClassVar[NodeType] = NodeType.INFIX_OP

    def __str__(self) -> str:
        return f"{_source(self.operand1)}{self.operator}{_source(self.operand2)}"

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_infix_op(self)


@dataclass(frozen=True)
class Matrix(ASTNode):
    """
    Matrix inferred from a comma separated list of parenthesized rows.

    rows is a tuple of rows, each a tuple of cells; an empty cell is None.
    All rows have the same number of cells.
    """
    lparen: Optional[Symbol]
    rows: Tuple[Tuple[Optional[ASTNode], ...], ...] = field(default=())
    rparen: Optional[Symbol] = None
    node_type: ClassVar[NodeType] = NodeType.MATRIX

    @property
    def column_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def __str__(self) -> str:
        rows = ','.join('(' + ','.join(_source(cell) for cell in row) + ')' for row in self.rows)
        return f"{_source(self.lparen)}{rows}{_source(self.rparen)}"

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_matrix(self)


# ============================================
# CONSTRUCTION HELPERS
# ============================================

def expression(*items: Optional[ASTNode]) -> Optional[ASTNode]:
    """
    Collapse a run of nodes: no items is None, one item is the item itself,
    anything longer is a Sequence.
    """
    if len(items) == 0:
        return None
    if len(items) == 1:
        return items[0]
    return Sequence(tuple(items))


def unwrap(node: Optional[ASTNode]) -> Optional[ASTNode]:
    """Turn a Paren used as an operand into a Group, dropping its visible delimiters"""
    if isinstance(node, Paren) and not node.no_unwrap:
        return Group(node.lparen, node.expression, node.rparen)
    return node
