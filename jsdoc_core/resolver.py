"""
SymbolResolver - filters raw parser symbols and links them into per-file graphs.
"""

import re
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from .logger import DocLogger
from .options import DocOptions, FilterOption
from .parsers import JsParser, TokenReader, TokenStream
from .symbols import DocFile, MemberList, Symbol, member_list_for

SourcePath = Union[str, Path]

_UNDERSCORED_RE = re.compile(r'(^_|[./]_)')
_MEMBER_NAME_RE = re.compile(r'^(.+)/([^/]+)$')


def read_source(path: SourcePath) -> str:
    return Path(path).read_text(encoding='utf-8')


def tokenize(text: str) -> list:
    return TokenReader(text).tokenize()


class SymbolResolver:
    """
    Turns the raw symbols of each source file into a linked DocFile.

    Files are processed one at a time in ascending path order. Within a file
    each symbol passes through the stages filter, fold memberof, split name,
    link parent, link bases, append. Parents and bases are looked up only
    among symbols already added to the same file, so they must be declared
    before the symbols that refer to them.

    Unresolved parents or bases are reported through log.warn and never
    raise. Failures from reading or tokenizing a file propagate.
    """

    def __init__(
        self,
        options: Optional[DocOptions] = None,
        log: Optional[DocLogger] = None,
        read_text: Callable[[SourcePath], str] = read_source,
        tokenizer: Callable[[str], list] = tokenize,
        parser_factory: Callable[[], JsParser] = JsParser
    ):
        """
        Args:
            options: Filter settings (include private, all functions...)
            log: warn/inform sinks; defaults to the JsDoc logger
            read_text: Returns the text of a source identifier
            tokenizer: Turns text into a token list
            parser_factory: Creates a parser exposing parse(stream), symbols and overview
        """
        self.options = options or DocOptions()
        self.log = log or DocLogger()
        self.read_text = read_text
        self.tokenizer = tokenizer
        self.parser_factory = parser_factory

    def resolve(self, source_paths: Union[SourcePath, Iterable[SourcePath]]) -> List[DocFile]:
        """
        Resolve every source file, in ascending path order.

        Args:
            source_paths: A single path or a collection of paths

        Returns:
            One DocFile per source path
        """
        if isinstance(source_paths, (str, Path)):
            source_paths = [source_paths]
        paths = sorted(str(p) for p in source_paths)

        files: List[DocFile] = []
        parser = self.parser_factory()
        for index, path in enumerate(paths, start=1):
            self.log.inform(f"Tokenizing: file {index}, {path}")
            text = self.read_text(path)

            tokens = self.tokenizer(text)
            self.log.inform(f"\t{len(tokens)} tokens found.")

            parser.parse(TokenStream(tokens))
            self.log.inform(f"\t{len(parser.symbols)} symbols found.")

            files.append(self.resolve_symbols(path, parser.symbols, parser.overview))
        return files

    def resolve_symbols(self, path: str, raw_symbols: List[Symbol], overview: Optional[str] = None) -> DocFile:
        """
        Build the DocFile for one source file from its raw parser output.

        The raw symbols are not modified; each one is copied before it is
        rewritten, so resolving the same output twice gives the same result.
        """
        doc_file = DocFile(path)

        for raw in raw_symbols:
            if not self._passes_tag_filters(raw):
                continue

            symbol = raw.copy()
            self._fold_memberof(symbol)

            if not self._passes_documented_filter(symbol):
                continue

            self._link_parent(symbol, doc_file)
            self._link_bases(symbol, doc_file)
            doc_file.add_symbol(symbol)

        doc_file.overview = Symbol.file_overview(path, overview)
        doc_file.overview.alias = path
        return doc_file

    def _passes_tag_filters(self, symbol: Symbol) -> bool:
        if symbol.tags.get_tag('ignore'):
            return False
        if symbol.tags.get_tag('private') and not self.options.is_set(FilterOption.INCLUDE_PRIVATE):
            return False
        return True

    @staticmethod
    def _fold_memberof(symbol: Symbol):
        parents = symbol.tags.get_tag('memberof')
        if parents:
            symbol.name = f"{parents[0]}/{symbol.name}"
            symbol.tags.drop_tag('memberof')

    def _passes_documented_filter(self, symbol: Symbol) -> bool:
        if symbol.is_documented():
            return True
        underscored = self.options.is_set(FilterOption.ALL_FUNCTIONS_UNDERSCORED)
        if _UNDERSCORED_RE.search(symbol.name) and not underscored:
            return False
        return self.options.is_set(FilterOption.ALL_FUNCTIONS) or underscored

    def _link_parent(self, symbol: Symbol, doc_file: DocFile):
        """Split a Parent/child name and attach the symbol to its parent if known."""
        match = _MEMBER_NAME_RE.match(symbol.name)
        if not match:
            return

        parent_name = match.group(1).replace('/', '.')
        child_name = match.group(2)

        symbol.alias = symbol.name.replace('/', '.')
        symbol.name = child_name
        symbol.memberof = parent_name

        parent = doc_file.get_symbol(parent_name)
        if parent is None:
            self.log.warn(f"Member '{child_name}' documented but no documentation exists for parent object '{parent_name}'.")
            return

        member_list = member_list_for(symbol.kind)
        if member_list == MemberList.METHODS:
            parent.methods.append(symbol)
        elif member_list == MemberList.PROPERTIES:
            parent.properties.append(symbol)

    def _link_bases(self, symbol: Symbol, doc_file: DocFile):
        for base_name in symbol.inherits:
            base = doc_file.get_symbol(base_name)
            if base is None:
                self.log.warn(f"Can't determine inherited methods or properties from unfound '{base_name}' symbol.")
                continue
            symbol.inherited_methods = symbol.inherited_methods + base.methods
            symbol.inherited_properties = symbol.inherited_properties + base.properties
