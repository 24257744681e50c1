"""
TagSet - ordered multimap of documentation tags for a single symbol.
"""

from typing import Dict, Iterable, List, Optional, Tuple


class TagSet:
    """
    Documentation annotations keyed by tag name.

    A tag may appear more than once; every occurrence keeps its argument text
    in declaration order. Querying a tag that was never declared returns an
    empty list rather than failing.
    """

    def __init__(self, tags: Optional[Iterable[Tuple[str, str]]] = None):
        self._tags: Dict[str, List[str]] = {}
        for name, value in tags or []:
            self.add_tag(name, value)

    def add_tag(self, name: str, value: str = '') -> None:
        self._tags.setdefault(name, []).append(value)

    def get_tag(self, name: str) -> List[str]:
        """Return all argument strings recorded for name (possibly empty)."""
        return list(self._tags.get(name, []))

    def has_tag(self, name: str) -> bool:
        return len(self.get_tag(name)) > 0

    def drop_tag(self, name: str) -> None:
        """Remove every entry for name. Dropping an absent tag does nothing."""
        self._tags.pop(name, None)

    def copy(self) -> 'TagSet':
        clone = TagSet()
        clone._tags = {name: list(values) for name, values in self._tags.items()}
        return clone

    def to_dict(self) -> Dict[str, List[str]]:
        return {name: list(values) for name, values in self._tags.items()}

    def __contains__(self, name: str) -> bool:
        return self.has_tag(name)

    def __len__(self) -> int:
        return sum(len(values) for values in self._tags.values())

    def __eq__(self, other) -> bool:
        if not isinstance(other, TagSet):
            return NotImplemented
        return self._tags == other._tags

    def __repr__(self) -> str:
        return f"TagSet({self._tags})"
