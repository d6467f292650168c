"""
MathML Backend

Presentation MathML. Fences are written as <mrow> with <mo> delimiters by
default; fenced=True switches to the older <mfenced open close> form.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, List, Optional

from ..shared.nodes import ASTNode, Color
from ..shared.symbol_table import SymbolTable
from ..utils.config import DEFAULT_MATHML_PREFIX, DEFAULT_MATHML_FENCED
from ..utils.escaping import escape_text, escape_attribute
from .base import MarkupBuilder, RowMode, Rows

logger = logging.getLogger(__name__)


class MathMLBuilder(MarkupBuilder):
    """
    Writes one <math> element.

    Usage:
        builder = MathMLBuilder(prefix="m:")
        builder.append_expression(expression.ast, display="block")
        str(builder)
    """

    def __init__(self, prefix: str = DEFAULT_MATHML_PREFIX, fenced: bool = DEFAULT_MATHML_FENCED,
                 symbol_table: Optional[SymbolTable] = None):
        super().__init__(symbol_table)
        self.prefix = prefix
        self.fenced = fenced
        self._out: List[str] = []

    def append_expression(self, node: Optional[ASTNode], **attrs: Any) -> 'MathMLBuilder':
        with self._tag("math", **attrs):
            self.append(node, row=RowMode.OMIT)
        return self

    def __str__(self) -> str:
        return ''.join(self._out)

    # ============================================
    # TAG WRITING
    # ============================================

    @contextmanager
    def _tag(self, name: str, **attrs: Any) -> Iterator[None]:
        self._out.append(f"<{self.prefix}{name}")
        for key, value in attrs.items():
            self._out.append(f' {key}="{escape_attribute(str(value))}"')
        self._out.append(">")
        yield
        self._out.append(f"</{self.prefix}{name}>")

    def _leaf(self, name: str, text: str) -> None:
        with self._tag(name):
            self._out.append(escape_text(text))

    @contextmanager
    def _fence(self, lparen: Optional[str], rparen: Optional[str]) -> Iterator[None]:
        if self.fenced:
            if lparen is None and rparen is None:
                yield
                return
            with self._tag("mfenced", open=lparen or '', close=rparen or ''):
                yield
        else:
            with self._tag("mrow"):
                if lparen is not None:
                    self._leaf("mo", lparen)
                yield
                if rparen is not None:
                    self._leaf("mo", rparen)

    # ============================================
    # LAYOUT HOOKS
    # ============================================

    def append_row(self, items: Iterable[ASTNode]) -> None:
        with self._tag("mrow"):
            for item in items:
                self.append(item)

    def append_operator(self, operator: str) -> None:
        self._leaf("mo", operator)

    def append_identifier(self, identifier: str) -> None:
        self._leaf("mi", identifier)

    def append_text(self, text: str) -> None:
        self._leaf("mtext", text)

    def append_number(self, number: str) -> None:
        self._leaf("mn", number)

    def append_sqrt(self, expression: Optional[ASTNode]) -> None:
        with self._tag("msqrt"):
            self.append(expression)

    def append_cancel(self, expression: Optional[ASTNode]) -> None:
        with self._tag("menclose", notation="updiagonalstrike"):
            self.append(expression)

    def append_root(self, base: Optional[ASTNode], index: Optional[ASTNode]) -> None:
        with self._tag("mroot"):
            self.append(base)
            self.append(index)

    def append_color(self, color: Color, expression: Optional[ASTNode]) -> None:
        with self._tag("mstyle", mathcolor=color.to_hex_rgb()):
            self.append(expression)

    def append_fraction(self, numerator: Optional[ASTNode], denominator: Optional[ASTNode]) -> None:
        with self._tag("mfrac"):
            self.append(numerator)
            self.append(denominator)

    def append_font(self, style: str, expression: Optional[ASTNode]) -> None:
        with self._tag("mstyle", mathvariant=style.replace('_', '-')):
            self.append(expression)

    def append_matrix(self, lparen: Optional[str], rows: Rows, rparen: Optional[str]) -> None:
        with self._fence(lparen, rparen):
            with self._tag("mtable"):
                for row in rows:
                    with self._tag("mtr"):
                        for cell in row:
                            with self._tag("mtd"):
                                self.append(cell)

    def append_operator_unary(self, operator: str, expression: Optional[ASTNode]) -> None:
        with self._tag("mrow"):
            self.append_operator(operator)
            self.append(expression, row=RowMode.OMIT)

    def append_identifier_unary(self, identifier: str, expression: Optional[ASTNode]) -> None:
        with self._tag("mrow"):
            self.append_identifier(identifier)
            self.append(expression, row=RowMode.OMIT)

    def append_paren(self, lparen: Optional[str], expression: Optional[ASTNode], rparen: Optional[str]) -> None:
        with self._fence(lparen, rparen):
            # An <mo>-delimited row already groups the body
            self.append(expression, row=RowMode.AVOID if self.fenced else RowMode.OMIT)

    def append_subsup(self, base: Optional[ASTNode], sub: Optional[ASTNode], sup: Optional[ASTNode]) -> None:
        self._append_scripts(("msub", "msup", "msubsup"), base, sub, sup)

    def append_underover(self, base: Optional[ASTNode], under: Optional[ASTNode], over: Optional[ASTNode]) -> None:
        self._append_scripts(("munder", "mover", "munderover"), base, under, over)

    def _append_scripts(self, tags, base: Optional[ASTNode], lower: Optional[ASTNode], upper: Optional[ASTNode]) -> None:
        lower_tag, upper_tag, both_tag = tags
        if lower is not None and upper is not None:
            with self._tag(both_tag):
                self.append(base)
                self.append(lower)
                self.append(upper)
        elif lower is not None:
            with self._tag(lower_tag):
                self.append(base)
                self.append(lower)
        elif upper is not None:
            with self._tag(upper_tag):
                self.append(base)
                self.append(upper)
        else:
            self.append(base)


def to_mathml(node: Optional[ASTNode], prefix: str = DEFAULT_MATHML_PREFIX,
              fenced: bool = DEFAULT_MATHML_FENCED, **attrs: Any) -> str:
    """Render an AST (or None) to a MathML string"""
    logger.debug(f"Rendering MathML (prefix={prefix!r}, fenced={fenced})")
    return str(MathMLBuilder(prefix=prefix, fenced=fenced).append_expression(node, **attrs))
