"""
HTML Backend

Nested <span> layout markup; every span carries a `math-` class and the
positioning is left to a stylesheet.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, List, Optional

from ..shared.nodes import ASTNode, Color, Group, Sequence
from ..shared.symbol_table import SymbolTable
from ..utils.config import HTML_CLASS_PREFIX, ZERO_WIDTH_JOINER, DEFAULT_HTML_INLINE
from ..utils.escaping import escape_text, escape_attribute
from .base import MarkupBuilder, Rows, require_node

logger = logging.getLogger(__name__)


class HTMLBuilder(MarkupBuilder):
    """
    Writes one inline or block <span>.

    - Class names are `math-` + prefix + layout name (math-row, math-fraction, ...)
    - Empty script positions are filled with a zero-width joiner so rows line up
    """

    def __init__(self, prefix: str = "", symbol_table: Optional[SymbolTable] = None):
        super().__init__(symbol_table)
        self.prefix = prefix
        self._out: List[str] = []

    def append_expression(self, node: Optional[ASTNode], inline: bool = DEFAULT_HTML_INLINE,
                          **attrs: Any) -> 'HTMLBuilder':
        with self._span("inline" if inline else "block", **attrs):
            self._row(node)
        return self

    def __str__(self) -> str:
        return ''.join(self._out)

    @contextmanager
    def _span(self, name: str, **attrs: Any) -> Iterator[None]:
        self._out.append(f'<span class="{HTML_CLASS_PREFIX}{self.prefix}{name}"')
        for key, value in attrs.items():
            self._out.append(f' {key}="{escape_attribute(str(value))}"')
        self._out.append(">")
        yield
        self._out.append("</span>")

    def _leaf(self, name: str, text: str, **attrs: Any) -> None:
        with self._span(name, **attrs):
            self._out.append(escape_text(text))

    def _blank(self) -> None:
        self._leaf("blank", ZERO_WIDTH_JOINER)

    def _row(self, node: Optional[ASTNode]) -> None:
        """
        Write a node inside a row span; a Sequence contributes its items.

        Same output as append(node, row=RowMode.FORCE), dispatched directly
        to keep one frame per nesting level off the stack.
        """
        if node is None:
            return
        require_node(node)
        with self._span("row"):
            if isinstance(node, Sequence):
                for item in node.items:
                    self.append(item)
            else:
                node.accept(self)

    def visit_group(self, node: Group) -> None:
        self._row(node.expression)

    # ============================================
    # LAYOUT HOOKS
    # ============================================

    def append_row(self, items: Iterable[ASTNode]) -> None:
        with self._span("row"):
            for item in items:
                self.append(item)

    def append_operator(self, operator: str) -> None:
        self._leaf("operator", operator)

    def append_identifier(self, identifier: str) -> None:
        self._leaf("identifier", identifier)

    def append_text(self, text: str) -> None:
        self._leaf("text", text)

    def append_number(self, number: str) -> None:
        self._leaf("number", number)

    def append_sqrt(self, expression: Optional[ASTNode]) -> None:
        with self._span("sqrt"):
            self._row(expression)

    def append_cancel(self, expression: Optional[ASTNode]) -> None:
        with self._span("cancel"):
            self._row(expression)

    def append_root(self, base: Optional[ASTNode], index: Optional[ASTNode]) -> None:
        with self._span("root"):
            with self._span("smaller"):
                self.append(index)
            with self._span("sqrt"):
                self._row(base)

    def append_color(self, color: Color, expression: Optional[ASTNode]) -> None:
        with self._span("color", style=f"color: {color.to_hex_rgb()};"):
            self._row(expression)

    def append_fraction(self, numerator: Optional[ASTNode], denominator: Optional[ASTNode]) -> None:
        self._blank()
        with self._span("fraction"):
            for part in (numerator, denominator):
                with self._span("fraction_row"), self._span("fraction_cell"), self._span("smaller"), self._span("row"):
                    self.append(part)

    def append_font(self, style: str, expression: Optional[ASTNode]) -> None:
        with self._span(f"font-{style}"):
            self._row(expression)

    def append_matrix(self, lparen: Optional[str], rows: Rows, rparen: Optional[str]) -> None:
        # Brace size follows the row count only; cell heights are not measured
        brace_style = f"font-size: {len(rows)}00%;"
        columns = len(rows[0]) if rows else 0
        grid_style = f"grid-template-columns:repeat({columns},1fr);grid-template-rows:repeat({len(rows)},1fr);"

        with self._span("row"):
            if lparen is not None:
                self._leaf("brace", lparen, style=brace_style)
            with self._span("matrix", style=grid_style):
                for row in rows:
                    for cell in row:
                        with self._span("row"):
                            self.append(cell)
            if rparen is not None:
                self._leaf("brace", rparen, style=brace_style)

    def append_operator_unary(self, operator: str, expression: Optional[ASTNode]) -> None:
        with self._span("row"):
            self.append_operator(operator)
            self.append(expression)

    def append_identifier_unary(self, identifier: str, expression: Optional[ASTNode]) -> None:
        with self._span("row"):
            self.append_identifier(identifier)
            self.append(expression)

    def append_paren(self, lparen: Optional[str], expression: Optional[ASTNode], rparen: Optional[str]) -> None:
        with self._span("row"):
            if lparen is not None:
                self._leaf("brace", lparen)
            self._row(expression)
            if rparen is not None:
                self._leaf("brace", rparen)

    def append_wrap(self, lparen: Optional[str], expression: Optional[ASTNode], rparen: Optional[str]) -> None:
        with self._span("row"):
            if lparen is not None:
                self._leaf("brace", lparen)
            self.append(expression)
            if rparen is not None:
                self._leaf("brace", rparen)

    def append_subsup(self, base: Optional[ASTNode], sub: Optional[ASTNode], sup: Optional[ASTNode]) -> None:
        self.append(base)
        with self._span("subsup"):
            for script in (sup, sub):
                if script is None:
                    self._leaf("smaller", ZERO_WIDTH_JOINER)
                else:
                    with self._span("smaller"):
                        self.append(script)

    def append_underover(self, base: Optional[ASTNode], under: Optional[ASTNode], over: Optional[ASTNode]) -> None:
        self._blank()
        with self._span("underover"):
            with self._span("smaller"):
                if over is None:
                    self._blank()
                else:
                    self.append(over)
            self.append(base)
            with self._span("smaller"):
                if under is None:
                    self._blank()
                else:
                    self.append(under)


def to_html(node: Optional[ASTNode], prefix: str = "", inline: bool = DEFAULT_HTML_INLINE, **attrs: Any) -> str:
    """Render an AST (or None) to an HTML span string"""
    logger.debug(f"Rendering HTML (prefix={prefix!r}, inline={inline})")
    return str(HTMLBuilder(prefix=prefix).append_expression(node, inline=inline, **attrs))
