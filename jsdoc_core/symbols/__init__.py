"""
Symbol model for documented JavaScript entities.

Symbols are produced by a parser backend and linked into a per-file graph by
the resolver.
"""

from .symbol_kind import SymbolKind, MemberList, member_list_for
from .tag_set import TagSet
from .doc_comment import DocComment
from .symbol import Symbol, UNDOCUMENTED
from .doc_file import DocFile

__all__ = [
    'SymbolKind',
    'MemberList',
    'member_list_for',
    'TagSet',
    'DocComment',
    'Symbol',
    'UNDOCUMENTED',
    'DocFile',
]
