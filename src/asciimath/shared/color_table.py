"""
Color Table

Named colors accepted by the `color` operator. Names are matched
case-insensitively by the parser, so they are stored lower-cased.
"""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, NamedTuple, Optional

from .errors import ColorTableError


class RGB(NamedTuple):
    r: int
    g: int
    b: int


BLACK = RGB(0, 0, 0)


class ColorTable(Mapping):
    """Frozen mapping from lower-case color name to RGB"""

    def __init__(self, entries: Mapping[str, RGB]):
        self._entries = MappingProxyType(dict(entries))

    def lookup(self, name: str) -> Optional[RGB]:
        return self._entries.get(name.lower())

    def __getitem__(self, name: str) -> RGB:
        return self._entries[name.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class ColorTableBuilder:
    """Accumulates named colors; several names may share one RGB value"""

    def __init__(self):
        self._table: Dict[str, RGB] = {}

    def add(self, *names: str, r: int, g: int, b: int) -> 'ColorTableBuilder':
        if not names:
            raise ColorTableError("At least one color name is required")
        for component in (r, g, b):
            if not 0 <= component <= 255:
                raise ColorTableError(f"Color component {component} out of range 0..255 for {names[0]!r}")
        entry = RGB(r, g, b)
        for name in names:
            self._table[name.lower()] = entry
        return self

    def build(self) -> ColorTable:
        return ColorTable(self._table)


def add_default_colors(builder: ColorTableBuilder) -> ColorTableBuilder:
    builder.add('aqua', r=0, g=255, b=255)
    builder.add('black', r=0, g=0, b=0)
    builder.add('blue', r=0, g=0, b=255)
    builder.add('fuchsia', r=255, g=0, b=255)
    builder.add('gray', r=128, g=128, b=128)
    builder.add('green', r=0, g=128, b=0)
    builder.add('lime', r=0, g=255, b=0)
    builder.add('maroon', r=128, g=0, b=0)
    builder.add('navy', r=0, g=0, b=128)
    builder.add('olive', r=128, g=128, b=0)
    builder.add('purple', r=128, g=0, b=128)
    builder.add('red', r=255, g=0, b=0)
    builder.add('silver', r=192, g=192, b=192)
    builder.add('teal', r=0, g=128, b=128)
    builder.add('white', r=255, g=255, b=255)
    builder.add('yellow', r=255, g=255, b=0)
    return builder


DEFAULT_COLOR_TABLE = add_default_colors(ColorTableBuilder()).build()
