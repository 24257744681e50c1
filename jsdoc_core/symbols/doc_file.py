"""
DocFile - resolved symbols for one source file.
"""

from typing import Any, Dict, List, Optional

from .symbol import Symbol


class DocFile:
    """
    Per-source-file container of resolved symbols plus an overview symbol.

    Symbols are kept in the order they were added. Lookups scan that list and
    return the first symbol with a matching alias.
    """

    def __init__(self, path: str):
        self.path = path
        self.overview: Symbol = Symbol.file_overview(path)
        self.overview.alias = path
        self.symbols: List[Symbol] = []

    def add_symbol(self, symbol: Symbol) -> None:
        self.symbols.append(symbol)

    def get_symbol(self, alias: str) -> Optional[Symbol]:
        for symbol in self.symbols:
            if symbol.alias == alias:
                return symbol
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'overview': self.overview.to_dict(),
            'symbols': [s.to_dict() for s in self.symbols],
        }

    def __len__(self) -> int:
        return len(self.symbols)

    def __repr__(self) -> str:
        return f"DocFile({self.path}: {len(self.symbols)} symbols)"
