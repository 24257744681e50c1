"""
Doc comment parsing: splits a /** ... */ block into a description and tags.
"""

import re
from typing import List

from .tag_set import TagSet

_COMMENT_START_RE = re.compile(r'^/\*\*+')
_COMMENT_END_RE = re.compile(r'\*+/$')
_LINE_PREFIX_RE = re.compile(r'^\s*\*(?!/)\s?')
_TAG_RE = re.compile(r'^@(\w+)\s*(.*)$')

DESCRIPTION_TAGS = ('desc', 'description')


class DocComment:
    """
    A parsed documentation comment.

    Attributes:
        description: Free text before the first tag, or the value of an
                     explicit @desc/@description tag
        tags: Every other tag, in declaration order
    """

    def __init__(self, description: str = '', tags: TagSet = None):
        self.description = description
        self.tags = tags if tags is not None else TagSet()

    @staticmethod
    def unwrap(comment: str) -> List[str]:
        """Strip comment delimiters and leading asterisks, returning the lines."""
        body = comment.strip()
        body = _COMMENT_START_RE.sub('', body)
        body = _COMMENT_END_RE.sub('', body)
        return [_LINE_PREFIX_RE.sub('', line).rstrip() for line in body.split('\n')]

    @classmethod
    def parse(cls, comment: str) -> 'DocComment':
        description_lines: List[str] = []
        tags: List[list] = []

        for line in cls.unwrap(comment):
            match = _TAG_RE.match(line.strip())
            if match:
                tags.append([match.group(1), [match.group(2)]])
            elif tags:
                tags[-1][1].append(line)
            else:
                description_lines.append(line)

        doc = cls('\n'.join(description_lines).strip())
        for title, lines in tags:
            value = '\n'.join(lines).strip()
            if title in DESCRIPTION_TAGS:
                doc.description = value
            else:
                doc.tags.add_tag(title, value)
        return doc
