"""
Tokenizer for JavaScript source: turns text into a flat list of tokens.

Only the token classes the doc parser cares about are distinguished.
Whitespace is dropped; dotted names such as Foo.prototype.bar are kept as a
single NAME token.
"""

import re
from enum import Enum
from typing import List, Optional


class TokenizeError(Exception):
    pass


class TokenType(Enum):
    COMM = "comment"
    NAME = "name"
    STRN = "string"
    NUMB = "number"
    REGX = "regex"
    PUNC = "punctuation"


class Token:
    def __init__(self, data: str, type: TokenType, line: int):
        self.data = data
        self.type = type
        self.line = line

    def is_doc_comment(self) -> bool:
        return self.type == TokenType.COMM and self.data.startswith('/**') and self.data != '/**/'

    def is_punc(self, data: str) -> bool:
        return self.type == TokenType.PUNC and self.data == data

    def is_name(self, data: str = None) -> bool:
        return self.type == TokenType.NAME and (data is None or self.data == data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.data, self.type, self.line) == (other.data, other.type, other.line)

    def __repr__(self) -> str:
        return f"Token({self.type.name}: {self.data!r} line {self.line})"


_NAME_RE = re.compile(r'[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*')
_NUMBER_RE = re.compile(r'0[xX][0-9a-fA-F]+|\d+(?:\.\d+)?(?:[eE][+-]?\d+)?|\.\d+')
_SPACE_RE = re.compile(r'\s+')

# A '/' after one of these (or at the start) begins a regex literal, not a division
_REGEX_PRECEDERS = set('(,=:[!&|?{};+-*%<>~^')


class TokenReader:
    """
    Reads tokens from JavaScript source text.

    Usage:
        tokens = TokenReader(src).tokenize()
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        text = self.text
        while self.pos < len(text):
            char = text[self.pos]

            space = _SPACE_RE.match(text, self.pos)
            if space:
                self._advance(space.group(0))
                continue

            if text.startswith('/*', self.pos):
                self._read_block_comment()
            elif text.startswith('//', self.pos):
                self._read_line_comment()
            elif char in ('"', "'", '`'):
                self._read_string(char)
            elif char == '/' and self._regex_allowed():
                self._read_regex()
            elif _NAME_RE.match(text, self.pos):
                self._emit(_NAME_RE.match(text, self.pos).group(0), TokenType.NAME)
            elif _NUMBER_RE.match(text, self.pos):
                self._emit(_NUMBER_RE.match(text, self.pos).group(0), TokenType.NUMB)
            else:
                self._emit(char, TokenType.PUNC)

        return self.tokens

    def _advance(self, consumed: str):
        self.pos += len(consumed)
        self.line += consumed.count('\n')

    def _emit(self, data: str, type: TokenType):
        self.tokens.append(Token(data, type, self.line))
        self._advance(data)

    def _last_significant(self) -> Optional[Token]:
        for token in reversed(self.tokens):
            if token.type != TokenType.COMM:
                return token
        return None

    def _regex_allowed(self) -> bool:
        previous = self._last_significant()
        if previous is None:
            return True
        if previous.type == TokenType.PUNC:
            return previous.data in _REGEX_PRECEDERS
        return previous.is_name('return') or previous.is_name('typeof')

    def _read_block_comment(self):
        end = self.text.find('*/', self.pos + 2)
        if end == -1:
            raise TokenizeError(f"Unterminated comment starting on line {self.line}")
        self._emit(self.text[self.pos:end + 2], TokenType.COMM)

    def _read_line_comment(self):
        end = self.text.find('\n', self.pos)
        if end == -1:
            end = len(self.text)
        self._emit(self.text[self.pos:end], TokenType.COMM)

    def _read_string(self, quote: str):
        i = self.pos + 1
        while i < len(self.text):
            char = self.text[i]
            if char == '\\':
                i += 2
                continue
            if char == quote:
                self._emit(self.text[self.pos:i + 1], TokenType.STRN)
                return
            if char == '\n' and quote != '`':
                break
            i += 1
        raise TokenizeError(f"Unterminated string starting on line {self.line}")

    def _read_regex(self):
        i = self.pos + 1
        in_class = False
        while i < len(self.text):
            char = self.text[i]
            if char == '\n':
                break
            if char == '\\':
                i += 2
                continue
            if char == '[':
                in_class = True
            elif char == ']':
                in_class = False
            elif char == '/' and not in_class:
                i += 1
                while i < len(self.text) and (self.text[i].isalnum() or self.text[i] == '_'):
                    i += 1
                self._emit(self.text[self.pos:i], TokenType.REGX)
                return
            i += 1
        # Not a regex after all; treat the slash as plain punctuation
        self._emit('/', TokenType.PUNC)


class TokenStream:
    """Cursor over a token list, skipping nothing."""

    def __init__(self, tokens: List[Token]):
        self.tokens = list(tokens)
        self.cursor = 0

    def look(self, n: int = 0) -> Optional[Token]:
        index = self.cursor + n
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return None

    def next(self) -> Optional[Token]:
        token = self.look()
        if token is not None:
            self.cursor += 1
        return token

    def at_end(self) -> bool:
        return self.cursor >= len(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)
