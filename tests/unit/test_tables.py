#!/usr/bin/env python3
"""
Tests for symbol and color tables: builder validation, aliases, overwrite
policy and immutability of built tables.
"""

import dataclasses
import pytest
from asciimath import (
    SymbolDescriptor, SymbolTableBuilder, SymbolTableError, ColorTableBuilder, ColorTableError,
    GrammarClass, DisplayClass, RGB, DEFAULT_COLOR_TABLE, DEFAULT_PARSER_SYMBOL_TABLE,
    DEFAULT_DISPLAY_SYMBOL_TABLE, add_default_display_symbols,
)

S = GrammarClass.SYMBOL


class TestSymbolTableBuilder:
    """Entry registration"""

    def test_too_few_arguments(self):
        with pytest.raises(SymbolTableError) as exc_info:
            SymbolTableBuilder().add('sqrt', 'sqrt')
        assert exc_info.value.error_code == "E0101"
        assert str(exc_info.value).startswith("[E0101] Insufficient arguments")

    def test_alias_spellings(self):
        table = SymbolTableBuilder().add('o+', 'oplus', 'oplus', S).build()
        assert table.lookup('o+').value == 'oplus'
        assert table.lookup('oplus').value == 'oplus'
        assert table.lookup('o+').text == 'o+'
        assert table.lookup('oplus').text == 'oplus'

    def test_none_value(self):
        table = SymbolTableBuilder().add('{:', None, GrammarClass.LPAREN).build()
        assert table.lookup('{:').value is None
        assert table.lookup('{:').kind == GrammarClass.LPAREN

    def test_overwrite_allowed_by_default(self):
        table = SymbolTableBuilder().add('+', 'plus', S).add('+', 'foo', S).build()
        assert table.lookup('+').value == 'foo'

    def test_overwrite_disallowed(self):
        builder = SymbolTableBuilder(allow_overwrite=False).add('+', 'plus', S)
        with pytest.raises(SymbolTableError) as exc_info:
            builder.add('+', 'foo', S)
        assert exc_info.value.spelling == '+'

    def test_extra_metadata(self):
        table = SymbolTableBuilder().add('sum', '∑', DisplayClass.OPERATOR, underover=True).build()
        assert table.lookup('sum').get('underover') is True
        assert table.lookup('sum').get('position') is None
        assert table.lookup('sum').get('position', 'over') == 'over'

    def test_update_copies_entries(self):
        table = SymbolTableBuilder().update(DEFAULT_DISPLAY_SYMBOL_TABLE).add('plus', 'PLUS', DisplayClass.OPERATOR).build()
        assert table.lookup('plus').value == 'PLUS'
        assert table.lookup('sum').get('underover') is True
        assert len(table) == len(DEFAULT_DISPLAY_SYMBOL_TABLE)

    def test_built_table_is_a_snapshot(self):
        builder = SymbolTableBuilder().add('a', 'a', S)
        table = builder.build()
        builder.add('b', 'b', S)
        assert table.lookup('b') is None
        assert len(table) == 1


class TestSymbolTable:
    """Lookup and immutability"""

    def test_lookup_missing(self, parser_symbols):
        assert parser_symbols.lookup('nosuchsymbol') is None
        assert parser_symbols.lookup(None) is None

    def test_mapping_interface(self, parser_symbols):
        assert 'sqrt' in parser_symbols
        assert parser_symbols['sqrt'].kind == GrammarClass.UNARY
        assert len(list(parser_symbols)) == len(parser_symbols)

    def test_table_is_read_only(self, parser_symbols):
        with pytest.raises(TypeError):
            parser_symbols['sqrt'] = None

    def test_descriptor_is_frozen(self, parser_symbols):
        descriptor = parser_symbols.lookup('sqrt')
        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.value = 'other'

    def test_descriptor_without_extra(self):
        descriptor = SymbolDescriptor('plus', S, '+')
        assert dict(descriptor.extra) == {}
        assert descriptor.get('underover') is None
        with pytest.raises(TypeError):
            descriptor.extra['underover'] = True
        assert SymbolDescriptor('plus', S, '+').extra is descriptor.extra, "Descriptors share one empty extra"

    def test_extra_does_not_affect_equality(self):
        plain = SymbolDescriptor('sum', S, 'sum')
        tagged = SymbolTableBuilder().add('sum', 'sum', S, underover=True).build().lookup('sum')
        assert plain == tagged
        assert hash(plain) == hash(tagged)

    def test_extra_is_read_only(self, display_symbols):
        with pytest.raises(TypeError):
            display_symbols.lookup('sum').extra['underover'] = False

    def test_longest_spelling_length(self):
        table = SymbolTableBuilder().add('a', 'a', S).add('abc', 'abc', S).build()
        assert table.longest_spelling_length() == 3
        assert SymbolTableBuilder().build().longest_spelling_length() == 0

    def test_default_tables_cover_each_other(self):
        parser_ids = {d.value for d in DEFAULT_PARSER_SYMBOL_TABLE.values() if d.value is not None}
        missing = sorted(parser_ids - set(DEFAULT_DISPLAY_SYMBOL_TABLE))
        assert not missing, f"Parser ids without display entries: {missing}"

    def test_default_display_builder_is_reusable(self):
        table = add_default_display_symbols(SymbolTableBuilder()).build()
        assert dict(table) == dict(DEFAULT_DISPLAY_SYMBOL_TABLE)


class TestColorTable:
    """Named colors"""

    def test_default_colors(self, color_table):
        assert len(color_table) == 16
        assert color_table.lookup('red') == RGB(255, 0, 0)
        assert color_table.lookup('teal') == RGB(0, 128, 128)

    def test_case_insensitive(self, color_table):
        assert color_table.lookup('RED') == color_table.lookup('Red') == RGB(255, 0, 0)
        assert color_table['Navy'] == RGB(0, 0, 128)

    def test_unknown(self, color_table):
        assert color_table.lookup('foo') is None
        with pytest.raises(KeyError):
            color_table['foo']

    def test_aliases_share_value(self):
        table = ColorTableBuilder().add('grey', 'gray', r=128, g=128, b=128).build()
        assert table.lookup('grey') == table.lookup('gray') == RGB(128, 128, 128)

    def test_names_are_stored_lower_case(self):
        table = ColorTableBuilder().add('DarkRed', r=139, g=0, b=0).build()
        assert list(table) == ['darkred']

    def test_no_names(self):
        with pytest.raises(ColorTableError):
            ColorTableBuilder().add(r=0, g=0, b=0)

    @pytest.mark.parametrize("r,g,b", [(256, 0, 0), (0, -1, 0), (0, 0, 1000)])
    def test_component_out_of_range(self, r, g, b):
        with pytest.raises(ColorTableError) as exc_info:
            ColorTableBuilder().add('bad', r=r, g=g, b=b)
        assert exc_info.value.error_code == "E0201"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_COLOR_TABLE['red'] = RGB(0, 0, 0)
