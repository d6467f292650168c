"""
Markup Builder Interface

Shared dispatch for every output format. The builder walks the AST,
classifies symbols through an id-keyed display table and calls one
append_* hook per layout construct; subclasses only decide how each
construct is written.
"""

import logging
from abc import abstractmethod
from enum import Enum
from typing import Iterable, Optional, Tuple

from ..shared.ast_visitor import ASTVisitor
from ..shared.nodes import (
    ASTNode, Sequence, Symbol, Identifier, Number, Text, Color, Paren, Group,
    SubSup, UnaryOp, BinaryOp, InfixOp, Matrix,
)
from ..shared.symbol_table import SymbolDescriptor, SymbolTable
from .display_symbols import DisplayClass, AccentPosition, DEFAULT_DISPLAY_SYMBOL_TABLE

logger = logging.getLogger(__name__)

# Display classes drawn as operators when they appear as plain symbols
_OPERATOR_LIKE = frozenset({
    DisplayClass.OPERATOR, DisplayClass.ACCENT,
    DisplayClass.LPAREN, DisplayClass.RPAREN, DisplayClass.LRPAREN,
})

Rows = Tuple[Tuple[Optional[ASTNode], ...], ...]


class RowMode(Enum):
    """
    How append() groups what it writes.

    - AVOID: only a Sequence becomes a row
    - FORCE: anything becomes a row
    - OMIT: a Sequence is written inline without a row
    """
    AVOID = "avoid"
    FORCE = "force"
    OMIT = "omit"


class MarkupBuilder(ASTVisitor[None]):
    """
    Base markup builder (one instance per rendered expression).

    Subclasses accumulate output in their own buffer and implement the
    abstract append_* hooks. Builders never mutate the AST.
    """

    def __init__(self, symbol_table: Optional[SymbolTable] = None):
        self.symbol_table = symbol_table if symbol_table is not None else DEFAULT_DISPLAY_SYMBOL_TABLE

    def append(self, node: Optional[ASTNode], row: RowMode = RowMode.AVOID) -> None:
        if node is None:
            return
        require_node(node)
        if isinstance(node, Sequence):
            if row == RowMode.OMIT:
                for item in node.items:
                    self.append(item)
            else:
                self.append_row(node.items)
            return
        if row == RowMode.FORCE:
            self.append_row((node,))
            return
        node.accept(self)

    # ============================================
    # SYMBOL RESOLUTION
    # ============================================

    def resolve_symbol(self, node: Optional[ASTNode]) -> Optional[SymbolDescriptor]:
        if isinstance(node, Symbol):
            return self.symbol_table.lookup(node.value)
        return None

    def resolve_paren(self, paren: Optional[object]) -> Optional[str]:
        """Display text of a delimiter given as a Symbol node or a symbol id; None when invisible"""
        if paren is None:
            return None
        key = paren.value if isinstance(paren, Symbol) else paren
        descriptor = self.symbol_table.lookup(key)
        if descriptor is not None:
            return descriptor.value
        return key

    # ============================================
    # VISITOR
    # ============================================

    def visit_sequence(self, node: Sequence) -> None:
        self.append_row(node.items)

    def visit_symbol(self, node: Symbol) -> None:
        descriptor = self.resolve_symbol(node)
        if descriptor is None:
            if node.value is not None:
                self.append_identifier(node.value)
        elif descriptor.kind in _OPERATOR_LIKE:
            self.append_operator(descriptor.value)
        else:
            self.append_identifier(descriptor.value)

    def visit_identifier(self, node: Identifier) -> None:
        self.append_identifier(node.value)

    def visit_number(self, node: Number) -> None:
        self.append_number(node.value)

    def visit_text(self, node: Text) -> None:
        self.append_text(node.value)

    def visit_color(self, node: Color) -> None:
        self.append_text(node.text)

    def visit_paren(self, node: Paren) -> None:
        self.append_paren(self.resolve_paren(node.lparen), node.expression, self.resolve_paren(node.rparen))

    def visit_group(self, node: Group) -> None:
        self.append(node.expression)

    def visit_subsup(self, node: SubSup) -> None:
        descriptor = self.resolve_symbol(node.base)
        if descriptor is not None and descriptor.get('underover'):
            self.append_underover(node.base, node.sub, node.sup)
        else:
            self.append_subsup(node.base, node.sub, node.sup)

    def visit_unary_op(self, node: UnaryOp) -> None:
        descriptor = self.resolve_symbol(node.operator)
        operand = node.operand
        if descriptor is None:
            logger.debug(f"No display entry for unary operator {node.operator.value!r}")
            self.append_identifier_unary(node.operator.value, _refence(operand))
            return

        kind = descriptor.kind
        if kind == DisplayClass.OPERATOR:
            self.append_operator_unary(descriptor.value, _refence(operand))
        elif kind == DisplayClass.WRAP:
            self.append_wrap(
                self.resolve_paren(descriptor.get('lparen')),
                operand,
                self.resolve_paren(descriptor.get('rparen')),
            )
        elif kind == DisplayClass.ACCENT:
            self.append_accent(operand, node.operator, descriptor.get('position', AccentPosition.OVER))
        elif kind == DisplayClass.FONT:
            self.append_font(descriptor.value, operand)
        elif kind == DisplayClass.CANCEL:
            self.append_cancel(operand)
        elif kind == DisplayClass.SQRT:
            self.append_sqrt(operand)
        else:
            self.append_identifier_unary(descriptor.value, _refence(operand))

    def visit_binary_op(self, node: BinaryOp) -> None:
        descriptor = self.resolve_symbol(node.operator)
        kind = descriptor.kind if descriptor is not None else None

        if kind == DisplayClass.OVER:
            self.append_overset(node.operand2, node.operand1)
        elif kind == DisplayClass.UNDER:
            self.append_underset(node.operand2, node.operand1)
        elif kind == DisplayClass.ROOT:
            self.append_root(node.operand2, node.operand1)
        elif kind == DisplayClass.FRAC:
            self.append_fraction(node.operand1, node.operand2)
        elif kind == DisplayClass.COLOR and isinstance(node.operand1, Color):
            self.append_color(node.operand1, node.operand2)
        else:
            logger.debug(f"Binary operator {node.operator.value!r} has no layout; writing operands in a row")
            self.append_row(_present(node.operator, node.operand1, node.operand2))

    def visit_infix_op(self, node: InfixOp) -> None:
        descriptor = self.resolve_symbol(node.operator)
        if descriptor is not None and descriptor.kind == DisplayClass.FRAC:
            self.append_fraction(node.operand1, node.operand2)
        else:
            self.append_row(_present(node.operand1, node.operator, node.operand2))

    def visit_matrix(self, node: Matrix) -> None:
        self.append_matrix(self.resolve_paren(node.lparen), node.rows, self.resolve_paren(node.rparen))

    # ============================================
    # LAYOUT HOOKS
    # ============================================

    @abstractmethod
    def append_row(self, items: Iterable[ASTNode]) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_operator(self, operator: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_identifier(self, identifier: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_text(self, text: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_number(self, number: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_sqrt(self, expression: Optional[ASTNode]) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_cancel(self, expression: Optional[ASTNode]) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_root(self, base: Optional[ASTNode], index: Optional[ASTNode]) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_color(self, color: Color, expression: Optional[ASTNode]) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_fraction(self, numerator: Optional[ASTNode], denominator: Optional[ASTNode]) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_font(self, style: str, expression: Optional[ASTNode]) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_matrix(self, lparen: Optional[str], rows: Rows, rparen: Optional[str]) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_operator_unary(self, operator: str, expression: Optional[ASTNode]) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_identifier_unary(self, identifier: str, expression: Optional[ASTNode]) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_paren(self, lparen: Optional[str], expression: Optional[ASTNode], rparen: Optional[str]) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_subsup(self, base: Optional[ASTNode], sub: Optional[ASTNode], sup: Optional[ASTNode]) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_underover(self, base: Optional[ASTNode], under: Optional[ASTNode], over: Optional[ASTNode]) -> None:
        raise NotImplementedError

    def append_wrap(self, lparen: Optional[str], expression: Optional[ASTNode], rparen: Optional[str]) -> None:
        """Operand of abs/norm/floor/ceil between its display delimiters"""
        self.append_paren(lparen, expression, rparen)

    def append_accent(self, expression: Optional[ASTNode], accent: Symbol, position: AccentPosition) -> None:
        if position == AccentPosition.UNDER:
            self.append_underover(expression, accent, None)
        else:
            self.append_underover(expression, None, accent)

    def append_overset(self, base: Optional[ASTNode], over: Optional[ASTNode]) -> None:
        self.append_underover(base, None, over)

    def append_underset(self, base: Optional[ASTNode], under: Optional[ASTNode]) -> None:
        self.append_underover(base, under, None)


def require_node(node: object) -> None:
    if not isinstance(node, ASTNode):
        raise TypeError(f"Cannot render {type(node).__name__}: not an AST node")


def _refence(operand: Optional[ASTNode]) -> Optional[ASTNode]:
    """
    Give a function argument its parentheses back.

    `sin(x)` parses to sin applied to the Group `x`; function application is
    shown with the argument's delimiters, so the Group is turned back into
    the Paren it came from.
    """
    if isinstance(operand, Group) and (operand.lparen is not None or operand.rparen is not None):
        return Paren(operand.lparen, operand.expression, operand.rparen)
    return operand


def _present(*nodes: Optional[ASTNode]) -> Tuple[ASTNode, ...]:
    return tuple(node for node in nodes if node is not None)
