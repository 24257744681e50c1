"""
Parser that walks a JavaScript token stream and emits raw documentation symbols.
"""

import re
from typing import List, Optional

from .. import logger
from ..symbols import DocComment, Symbol, SymbolKind, UNDOCUMENTED
from ..symbols.symbol import OVERVIEW_TAGS
from .token_reader import Token, TokenStream, TokenType

INHERIT_TAGS = ('augments', 'extends', 'inherits')

_PARAM_NAME_RE = re.compile(r'^(?:\{[^}]*\}\s*)?\[?([\w$.]+)')
_PROTOTYPE_RE = re.compile(r'\.prototype(\.|$)')


def to_member_path(name: str) -> str:
    """Convert a dotted JavaScript name to a '/'-separated member path."""
    return _PROTOTYPE_RE.sub(lambda m: '/' if m.group(1) else '', name).replace('.', '/')


class _Scope:
    """An open object literal or function body whose members get a path prefix."""

    def __init__(self, path: str, depth: int, is_function: bool):
        self.path = path
        self.depth = depth
        self.is_function = is_function


class JsParser:
    """
    Extracts documented symbols from a token stream.

    Recognises function declarations, assignments of functions or values to
    (dotted) names, keys of object literals and virtual symbols declared with
    @name. A doc comment applies to the declaration that immediately follows
    it; a comment with @overview/@fileOverview becomes the file overview.

    After parse(), the results are available as `symbols` and `overview`.
    """

    def __init__(self):
        self.symbols: List[Symbol] = []
        self.overview: Optional[str] = None
        self._scopes: List[_Scope] = []
        self._depth = 0

    def parse(self, stream: TokenStream) -> List[Symbol]:
        self.symbols = []
        self.overview = None
        self._scopes = []
        self._depth = 0

        doc: Optional[Token] = None
        while not stream.at_end():
            token = stream.next()

            if token.type == TokenType.COMM:
                if token.is_doc_comment():
                    doc = self._on_doc_comment(token)
                continue

            if token.is_punc('{'):
                self._depth += 1
                doc = None
            elif token.is_punc('}'):
                self._close_scopes()
                doc = None
            elif token.is_name('function') and stream.look() is not None and stream.look().is_name():
                name_token = stream.next()
                self._on_function(stream, self._qualify(name_token.data), doc, name_token.line)
                doc = None
            elif token.is_name('var') or token.is_name('let') or token.is_name('const'):
                continue
            elif token.is_name() and self._is_assignment(stream):
                stream.next()
                if token.data.endswith('.prototype'):
                    self._on_prototype(stream, self._qualify(token.data))
                else:
                    self._on_assignment(stream, self._qualify(token.data), doc, token.line)
                doc = None
            elif token.type in (TokenType.NAME, TokenType.STRN) and self._is_object_key(stream):
                stream.next()
                key = token.data.strip('\'"')
                value = stream.look()
                self._on_assignment(stream, f"{self._scopes[-1].path}/{key}", doc, token.line)
                if value is not None and not (value.is_name('function') or value.is_punc('{')):
                    self._skip_value(stream)
                doc = None
            else:
                doc = None

        logger.debug(f"Parsed {len(self.symbols)} raw symbols")
        return self.symbols

    def _on_doc_comment(self, token: Token) -> Optional[Token]:
        """Handle comments that stand alone; return the token if it documents the next declaration."""
        comment = DocComment.parse(token.data)
        if any(comment.tags.has_tag(tag) for tag in OVERVIEW_TAGS):
            self.overview = token.data
            return None

        names = comment.tags.get_tag('name')
        if names and names[0]:
            comment.tags.drop_tag('name')
            name = to_member_path(names[0].split()[0])
            kind = self._kind_from_tags(comment, SymbolKind.OBJECT)
            params = [self._param_name(p) for p in comment.tags.get_tag('param')]
            self._emit(name, kind, comment, [p for p in params if p], token.line)
            return None

        return token

    def _on_function(self, stream: TokenStream, path: str, doc: Optional[Token], line: int):
        params = self._read_params(stream)
        comment = DocComment.parse(doc.data) if doc else None
        kind = self._kind_from_tags(comment, SymbolKind.FUNCTION) if comment else SymbolKind.FUNCTION
        if comment or not self._in_function():
            self._emit(path, kind, comment, params, line)
        self._open_function_scope(stream, path)

    def _on_assignment(self, stream: TokenStream, path: str, doc: Optional[Token], line: int):
        comment = DocComment.parse(doc.data) if doc else None
        value = stream.look()

        if value is not None and value.is_name('function'):
            stream.next()
            if stream.look() is not None and stream.look().is_name():
                stream.next()
            self._on_function(stream, path, doc, line)
            return

        if comment:
            kind = self._kind_from_tags(comment, SymbolKind.OBJECT)
            self._emit(path, kind, comment, [], line)

        if value is not None and value.is_punc('{'):
            self._scopes.append(_Scope(path, self._depth + 1, False))

    def _on_prototype(self, stream: TokenStream, path: str):
        """Foo.prototype = { ... } documents members of Foo, not a new symbol."""
        value = stream.look()
        if value is not None and value.is_punc('{'):
            self._scopes.append(_Scope(path, self._depth + 1, False))

    def _emit(self, path: str, kind: SymbolKind, comment: Optional[DocComment], params: List[str], line: int):
        if comment is None:
            symbol = Symbol(path, kind, UNDOCUMENTED, params=params, line=line)
        else:
            inherits = []
            for tag in INHERIT_TAGS:
                inherits.extend(v.split()[0] for v in comment.tags.get_tag(tag) if v.strip())
            symbol = Symbol(path, kind, comment.description, comment.tags, params, inherits, line)
        self.symbols.append(symbol)

    def _kind_from_tags(self, comment: DocComment, default: SymbolKind) -> SymbolKind:
        if comment.tags.has_tag('constructor') or comment.tags.has_tag('class'):
            return SymbolKind.CONSTRUCTOR
        if comment.tags.has_tag('function') or comment.tags.has_tag('method'):
            return SymbolKind.FUNCTION
        return default

    @staticmethod
    def _param_name(text: str) -> str:
        match = _PARAM_NAME_RE.match(text.strip())
        return match.group(1) if match else ''

    @staticmethod
    def _read_params(stream: TokenStream) -> List[str]:
        params: List[str] = []
        if stream.look() is None or not stream.look().is_punc('('):
            return params
        stream.next()

        expect_name = True
        nesting = 0
        while not stream.at_end():
            token = stream.next()
            if token.is_punc('(') or token.is_punc('[') or token.is_punc('{'):
                nesting += 1
            elif token.is_punc(')') or token.is_punc(']') or token.is_punc('}'):
                if nesting == 0:
                    break
                nesting -= 1
            elif token.is_punc(',') and nesting == 0:
                expect_name = True
            elif expect_name and token.is_name() and nesting == 0:
                params.append(token.data)
                expect_name = False
        return params

    @staticmethod
    def _skip_value(stream: TokenStream):
        """Consume the rest of an object literal value, stopping before its ',' or closing '}'."""
        nesting = 0
        while not stream.at_end():
            token = stream.look()
            if token.is_punc('(') or token.is_punc('[') or token.is_punc('{'):
                nesting += 1
            elif token.is_punc(')') or token.is_punc(']') or token.is_punc('}'):
                if nesting == 0:
                    return
                nesting -= 1
            elif token.is_punc(',') and nesting == 0:
                return
            stream.next()

    def _open_function_scope(self, stream: TokenStream, path: str):
        if stream.look() is not None and stream.look().is_punc('{'):
            self._scopes.append(_Scope(path, self._depth + 1, True))

    def _close_scopes(self):
        self._depth -= 1
        while self._scopes and self._scopes[-1].depth > self._depth:
            self._scopes.pop()

    def _in_function(self) -> bool:
        return any(scope.is_function for scope in self._scopes)

    def _qualify(self, name: str) -> str:
        """Resolve 'this.x' inside a function body against that function's path."""
        if name == 'this' or name.startswith('this.'):
            for scope in reversed(self._scopes):
                if scope.is_function:
                    return to_member_path(scope.path + name[len('this'):])
        return to_member_path(name)

    @staticmethod
    def _is_assignment(stream: TokenStream) -> bool:
        first, second = stream.look(), stream.look(1)
        return (first is not None and first.is_punc('=')
                and not (second is not None and (second.is_punc('=') or second.is_punc('>'))))

    def _is_object_key(self, stream: TokenStream) -> bool:
        if not self._scopes or self._scopes[-1].is_function:
            return False
        if self._scopes[-1].depth != self._depth:
            return False
        following = stream.look()
        return following is not None and following.is_punc(':')
