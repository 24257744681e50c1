"""
Symbol kind enumeration for type-safe symbol classification.
"""

from enum import Enum


class SymbolKind(Enum):
    """Type-safe enumeration of documented JavaScript symbol kinds."""
    FILE = "file"
    OBJECT = "object"
    FUNCTION = "function"
    CONSTRUCTOR = "constructor"


class MemberList(Enum):
    """Which list of a parent symbol a linked child is appended to."""
    METHODS = "methods"
    PROPERTIES = "properties"
    NONE = "none"


# Every kind is listed so a new kind has to be classified explicitly
_MEMBER_LISTS = {
    SymbolKind.FILE: MemberList.NONE,
    SymbolKind.OBJECT: MemberList.PROPERTIES,
    SymbolKind.FUNCTION: MemberList.METHODS,
    SymbolKind.CONSTRUCTOR: MemberList.NONE,
}


def member_list_for(kind: SymbolKind) -> MemberList:
    """Return the parent list a child of the given kind links into."""
    return _MEMBER_LISTS[kind]
