#!/usr/bin/env python3
"""
End-to-end customisation: parser, display and color tables derived from
the defaults and threaded through parse and render.
"""

from asciimath import (
    parse, Parser, MathMLBuilder, HTMLBuilder, LatexBuilder,
    SymbolTableBuilder, ColorTableBuilder, GrammarClass, DisplayClass,
    add_default_parser_symbols, add_default_display_symbols, add_default_latex_symbols, add_default_colors,
)


def _parser_table():
    return (add_default_parser_symbols(SymbolTableBuilder())
            .add('mysymbol', 'mysymbol', GrammarClass.SYMBOL)
            .add('+', 'foo', GrammarClass.SYMBOL)
            .build())


def _display_table():
    return (add_default_display_symbols(SymbolTableBuilder())
            .add('mysymbol', '★', DisplayClass.OPERATOR)
            .add('foo', '⊕', DisplayClass.OPERATOR)
            .build())


class TestCustomSymbols:
    """A new spelling and a remapped standard spelling flow through every backend"""

    source = 'a + mysymbol + b'

    def test_mathml(self):
        ast = Parser(symbol_table=_parser_table()).parse(self.source).ast
        builder = MathMLBuilder(symbol_table=_display_table()).append_expression(ast)
        assert str(builder) == (
            '<math><mi>a</mi><mo>&#x2295;</mo><mo>&#x2605;</mo><mo>&#x2295;</mo><mi>b</mi></math>'
        )

    def test_html(self):
        ast = Parser(symbol_table=_parser_table()).parse('a + mysymbol').ast
        builder = HTMLBuilder(symbol_table=_display_table()).append_expression(ast)
        assert str(builder) == (
            '<span class="math-inline"><span class="math-row">'
            '<span class="math-identifier">a</span>'
            '<span class="math-operator">&#x2295;</span>'
            '<span class="math-operator">&#x2605;</span>'
            '</span></span>'
        )

    def test_latex(self):
        ast = Parser(symbol_table=_parser_table()).parse(self.source).ast
        latex_table = (add_default_latex_symbols(SymbolTableBuilder(), display_table=_display_table())
                       .add('mysymbol', '\\star', DisplayClass.OPERATOR)
                       .build())
        assert str(LatexBuilder(symbol_table=latex_table).append_expression(ast)) == 'a ⊕ \\star ⊕ b'

    def test_default_builders_show_unknown_ids(self):
        expression = Parser(symbol_table=_parser_table()).parse(self.source)
        assert expression.to_mathml() == (
            '<math><mi>a</mi><mi>foo</mi><mi>mysymbol</mi><mi>foo</mi><mi>b</mi></math>'
        )


class TestCustomColors:
    def _colors(self):
        return add_default_colors(ColorTableBuilder()).add('brand', r=18, g=52, b=86).build()

    def test_custom_name(self):
        expression = parse('color(brand) x', color_table=self._colors())
        assert expression.to_mathml() == '<math><mstyle mathcolor="#123456"><mi>x</mi></mstyle></math>'
        assert expression.to_latex() == '\\textcolor[RGB]{18,52,86}{x}'

    def test_defaults_still_resolve(self):
        expression = parse('color(Blue) x', color_table=self._colors())
        assert expression.to_html() == (
            '<span class="math-inline"><span class="math-row">'
            '<span class="math-color" style="color: #0000ff;"><span class="math-row">'
            '<span class="math-identifier">x</span></span></span></span></span>'
        )

    def test_unknown_name_is_black(self):
        expression = parse('color(brand) x')
        assert expression.ast.operand1.to_hex_rgb() == '#000000'
        assert expression.ast.operand1.text == 'brand'
