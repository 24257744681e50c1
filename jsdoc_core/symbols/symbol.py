"""
Symbol class for representing documented JavaScript entities.
"""

from typing import Any, Dict, List, Optional

from .doc_comment import DocComment
from .symbol_kind import SymbolKind
from .tag_set import TagSet

# Description given to symbols the parser found without a doc comment
UNDOCUMENTED = "undocumented"

OVERVIEW_TAGS = ('overview', 'fileOverview')
DEFAULT_OVERVIEW = "/** @overview No overview provided. */"


class Symbol:
    """
    One documented entity (function, object, file...) and its relationships.

    Attributes:
        name: Parser-assigned name; rewritten to a short name during resolution
        alias: Dotted canonical identifier (Parent.child) used for lookups
        kind: SymbolKind, fixed once parsed
        description: Doc text, or UNDOCUMENTED
        tags: TagSet of documentation annotations
        memberof: Dotted name of the enclosing symbol, if any
        params: Parameter names from the declaration
        inherits: Base symbol names declared by the author
        methods, properties: Member symbols linked during resolution
        inherited_methods, inherited_properties: Copied from resolved bases
    """

    def __init__(
        self,
        name: str,
        kind: SymbolKind,
        description: str = UNDOCUMENTED,
        tags: Optional[TagSet] = None,
        params: Optional[List[str]] = None,
        inherits: Optional[List[str]] = None,
        line: int = 0
    ):
        if not isinstance(kind, SymbolKind):
            raise TypeError(f"kind must be SymbolKind enum, got {type(kind)}")

        self.name: str = name
        self.alias: str = name
        self.kind: SymbolKind = kind
        self.description: str = description
        self.tags: TagSet = tags if tags is not None else TagSet()
        self.memberof: str = ''
        self.params: List[str] = list(params or [])
        self.inherits: List[str] = list(inherits or [])
        self.line: int = line

        self.methods: List['Symbol'] = []
        self.properties: List['Symbol'] = []
        self.inherited_methods: List['Symbol'] = []
        self.inherited_properties: List['Symbol'] = []

    @classmethod
    def file_overview(cls, path: str, comment: Optional[str] = None) -> 'Symbol':
        """Wrap a file overview comment (or the default one) as a FILE symbol."""
        doc = DocComment.parse(comment or DEFAULT_OVERVIEW)
        description = doc.description
        for tag in OVERVIEW_TAGS:
            values = doc.tags.get_tag(tag)
            if values:
                description = values[0]
                doc.tags.drop_tag(tag)
                break
        return cls(path, SymbolKind.FILE, description, doc.tags)

    def is_documented(self) -> bool:
        return self.description != UNDOCUMENTED

    def copy(self) -> 'Symbol':
        """Return a working copy that shares no mutable state with this symbol."""
        clone = Symbol(self.name, self.kind, self.description, self.tags.copy(),
                       self.params, self.inherits, self.line)
        clone.alias = self.alias
        clone.memberof = self.memberof
        clone.methods = list(self.methods)
        clone.properties = list(self.properties)
        clone.inherited_methods = list(self.inherited_methods)
        clone.inherited_properties = list(self.inherited_properties)
        return clone

    def to_dict(self) -> Dict[str, Any]:
        """Serialize; related symbols are referenced by alias."""
        return {
            'name': self.name,
            'alias': self.alias,
            'kind': self.kind.value,
            'description': self.description,
            'memberof': self.memberof,
            'params': list(self.params),
            'tags': self.tags.to_dict(),
            'inherits': list(self.inherits),
            'methods': [s.alias for s in self.methods],
            'properties': [s.alias for s in self.properties],
            'inherited_methods': [s.alias for s in self.inherited_methods],
            'inherited_properties': [s.alias for s in self.inherited_properties],
        }

    def __repr__(self) -> str:
        return f"Symbol({self.kind.value}: {self.alias} at line {self.line})"
