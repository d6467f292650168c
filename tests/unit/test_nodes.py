#!/usr/bin/env python3
"""
Tests for AST nodes: construction helpers, structural equality, source
writing and visitor dispatch.
"""

import dataclasses
import pytest
from tests.test_utils import sym, ident, num, text, seq, paren, group
from asciimath.shared.ast_visitor import ASTVisitor
from asciimath.shared.nodes import (
    NodeType, Sequence, Symbol, Identifier, Number, Text, Color, Paren,
    SubSup, UnaryOp, BinaryOp, InfixOp, Matrix, expression, unwrap,
)


class TestExpressionHelper:
    """expression() never builds a Sequence of fewer than two items"""

    def test_empty(self):
        assert expression() is None

    def test_single(self):
        node = ident('a')
        assert expression(node) is node

    def test_several(self):
        node = expression(ident('a'), ident('b'))
        assert isinstance(node, Sequence)
        assert len(node) == 2
        assert node[1] == ident('b')
        assert list(node) == [ident('a'), ident('b')]


class TestUnwrap:
    def test_paren_becomes_group(self):
        assert unwrap(paren(ident('a'))) == group(ident('a'))

    def test_delimiters_are_kept(self):
        result = unwrap(paren(ident('a'), '[', ']'))
        assert result.lparen == sym('[') and result.rparen == sym(']')

    def test_no_unwrap_flag(self):
        node = Paren(sym('('), ident('a'), sym(')'), no_unwrap=True)
        assert unwrap(node) is node

    @pytest.mark.parametrize("node", [None, Identifier('a'), Number('1')])
    def test_other_nodes_unchanged(self, node):
        assert unwrap(node) is node


class TestEquality:
    """Nodes are frozen values"""

    def test_structural_equality(self):
        assert seq(ident('a'), '+', num('1')) == seq(ident('a'), '+', num('1'))
        assert Identifier('a') != Text('a')

    def test_symbol_spelling_matters(self):
        assert Symbol('overline', 'bar') != Symbol('overline', 'overline')

    def test_hashable(self):
        nodes = {ident('a'), ident('a'), paren(ident('a'))}
        assert len(nodes) == 2

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ident('a').value = 'b'

    def test_node_types(self):
        assert ident('a').node_type == NodeType.IDENTIFIER
        assert group(None).node_type == NodeType.GROUP
        assert Matrix(None).node_type == NodeType.MATRIX


class TestSource:
    """str(node) writes ASCIIMath back out"""

    @pytest.mark.parametrize("node,expected", [
        (text('hi there'), '"hi there"'),
        (paren(ident('a'), '(', None), '(a'),
        (group(num('2')), '(2)'),
        (SubSup(ident('x'), num('1'), num('2')), 'x_1^2'),
        (SubSup(ident('x'), None, num('2')), 'x^2'),
        (UnaryOp(sym('sqrt'), ident('x')), 'sqrt x'),
        (UnaryOp(sym('sqrt'), None), 'sqrt '),
        (BinaryOp(sym('frac'), ident('a'), ident('b')), 'frac a b'),
        (InfixOp(sym('/'), ident('a'), ident('b')), 'a/b'),
        (Color(255, 0, 0, 'red'), '(red)'),
        (seq(ident('a'), '+', ident('b')), 'a + b'),
    ])
    def test_str(self, node, expected):
        assert str(node) == expected


class TestColor:
    @pytest.mark.parametrize("rgb,expected", [
        ((255, 0, 0), '#ff0000'),
        ((17, 34, 51), '#112233'),
        ((0, 0, 0), '#000000'),
    ])
    def test_to_hex_rgb(self, rgb, expected):
        assert Color(*rgb, 'x').to_hex_rgb() == expected


class _LeafCounter(ASTVisitor[int]):
    """Counts leaves, descending through every inner node"""

    def _count(self, *nodes):
        return sum(node.accept(self) for node in nodes if node is not None)

    def visit_symbol(self, node):
        return 1

    def visit_identifier(self, node):
        return 1

    def visit_number(self, node):
        return 1

    def visit_text(self, node):
        return 1

    def visit_color(self, node):
        return 1

    def visit_sequence(self, node):
        return self._count(*node.items)

    def visit_paren(self, node):
        return self._count(node.lparen, node.expression, node.rparen)

    def visit_group(self, node):
        return self._count(node.expression)

    def visit_subsup(self, node):
        return self._count(node.base, node.sub, node.sup)

    def visit_unary_op(self, node):
        return self._count(node.operator, node.operand)

    def visit_binary_op(self, node):
        return self._count(node.operator, node.operand1, node.operand2)

    def visit_infix_op(self, node):
        return self._count(node.operator, node.operand1, node.operand2)

    def visit_matrix(self, node):
        return self._count(*(cell for row in node.rows for cell in row))


class TestVisitor:
    def test_dispatch(self):
        node = seq(paren(ident('a')), SubSup(ident('x'), num('1'), None), group(ident('b')))
        assert node.accept(_LeafCounter()) == 6

    def test_incomplete_visitor_cannot_be_instantiated(self):
        class Partial(ASTVisitor[int]):
            def visit_number(self, node):
                return 1

        with pytest.raises(TypeError):
            Partial()
