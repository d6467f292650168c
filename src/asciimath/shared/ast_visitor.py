"""
AST Visitor Pattern

Abstract visitor with one visit_* method per AST variant. Every variant is
abstract, so a concrete visitor that forgets a variant fails at
instantiation rather than silently skipping nodes.

Design:
- Abstract base class with visit_* methods for each AST node type
- Type-safe (mypy can check)
- Extensible (add new visitors without changing nodes)
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .nodes import (
        Sequence, Symbol, Identifier, Number, Text, Paren, Group, SubSup,
        UnaryOp, BinaryOp, InfixOp, Matrix, Color,
    )

T = TypeVar('T')


class ASTVisitor(ABC, Generic[T]):
    """
    Base AST visitor.

    Usage:
        class Printer(ASTVisitor[str]):
            def visit_number(self, node) -> str:
                return node.value
            ...

        text = node.accept(Printer())
    """

    # Leaves
    @abstractmethod
    def visit_symbol(self, node: 'Symbol') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_symbol()")

    @abstractmethod
    def visit_identifier(self, node: 'Identifier') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_identifier()")

    @abstractmethod
    def visit_number(self, node: 'Number') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_number()")

    @abstractmethod
    def visit_text(self, node: 'Text') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_text()")

    @abstractmethod
    def visit_color(self, node: 'Color') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_color()")

    # Nodes with children
    @abstractmethod
    def visit_sequence(self, node: 'Sequence') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_sequence()")

    @abstractmethod
    def visit_paren(self, node: 'Paren') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_paren()")

    @abstractmethod
    def visit_group(self, node: 'Group') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_group()")

    @abstractmethod
    def visit_subsup(self, node: 'SubSup') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_subsup()")

    @abstractmethod
    def visit_unary_op(self, node: 'UnaryOp') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_unary_op()")

    @abstractmethod
    def visit_binary_op(self, node: 'BinaryOp') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_binary_op()")

    @abstractmethod
    def visit_infix_op(self, node: 'InfixOp') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_infix_op()")

    @abstractmethod
    def visit_matrix(self, node: 'Matrix') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_matrix()")
