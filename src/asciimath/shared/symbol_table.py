"""
Symbol Tables

Spelling-keyed tables drive the tokenizer ("sqrt" -> unary sqrt); id-keyed
tables drive the markup builders ("sqrt" -> display class sqrt). Both are
built with the same builder and frozen on build().
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from .errors import SymbolTableError

logger = logging.getLogger(__name__)

_EMPTY_EXTRA: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class SymbolDescriptor:
    """
    Immutable symbol table entry.

    - value: symbol id (None for invisible delimiters such as `{:`)
    - kind: grammar class (parser tables) or display class (render tables)
    - text: the key the entry was registered under
    - extra: read-only per-class metadata (underover, position, converters, ...)
    """
    value: Optional[str]
    kind: Enum
    text: str
    extra: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_EXTRA, compare=False, hash=False)

    def get(self, key: str, default: Any = None) -> Any:
        return self.extra.get(key, default)


class SymbolTable(Mapping):
    """
    Frozen mapping from key to SymbolDescriptor.

    No lookup mutates the table; a built table can be shared between parses
    and threads.
    """

    def __init__(self, entries: Mapping[str, SymbolDescriptor]):
        self._entries = MappingProxyType(dict(entries))
        self._longest = max((len(key) for key in self._entries), default=0)

    def lookup(self, key: Optional[str]) -> Optional[SymbolDescriptor]:
        if key is None:
            return None
        return self._entries.get(key)

    def longest_spelling_length(self) -> int:
        """Length of the longest registered key; sizes the tokenizer lookahead window"""
        return self._longest

    def __getitem__(self, key: str) -> SymbolDescriptor:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SymbolTable({len(self)} entries)"


class SymbolTableBuilder:
    """
    Accumulates entries and freezes them into a SymbolTable.

    Usage:
        b = SymbolTableBuilder()
        b.add('sqrt', 'sqrt', GrammarClass.UNARY)
        b.add('o+', 'oplus', 'oplus', GrammarClass.SYMBOL)  # alias spellings
        table = b.build()

    Not thread-safe; finish building before sharing the table.
    """

    def __init__(self, allow_overwrite: bool = True):
        self.allow_overwrite = allow_overwrite
        self._table: Dict[str, SymbolDescriptor] = {}

    def add(self, *args: Union[str, Enum, None], **extra: Any) -> 'SymbolTableBuilder':
        """
        Register one entry under one or more keys.

        Positional arguments are `key..., value, kind`; keyword arguments are
        stored as the entry's extra metadata.
        """
        if len(args) < 3:
            raise SymbolTableError(
                f"Insufficient arguments: expected at least one key, a value and a kind, got {len(args)}"
            )

        *keys, value, kind = args
        frozen_extra = MappingProxyType(dict(extra)) if extra else _EMPTY_EXTRA
        for key in keys:
            if key in self._table:
                if not self.allow_overwrite:
                    raise SymbolTableError(f"Symbol '{key}' is already defined", spelling=key)
                logger.debug(f"Overwriting symbol '{key}': {self._table[key].value} -> {value}")
            self._table[key] = SymbolDescriptor(value, kind, key, frozen_extra)
        return self

    def update(self, table: Mapping[str, SymbolDescriptor]) -> 'SymbolTableBuilder':
        """Copy every entry of an existing table (derive a custom table from the defaults)"""
        for key, descriptor in table.items():
            self.add(key, descriptor.value, descriptor.kind, **dict(descriptor.extra))
        return self

    def build(self) -> SymbolTable:
        return SymbolTable(self._table)
