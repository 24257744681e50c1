import pytest
from jsdoc_core.options import DocOptions
from jsdoc_core.parsers import JsParser, TokenReader, TokenStream, to_member_path
from jsdoc_core.resolver import SymbolResolver
from jsdoc_core.symbols import SymbolKind, UNDOCUMENTED
from unittest.mock import Mock

SHAPES_JS = """
/** @fileOverview Shapes library. */

/**
 * A shape.
 * @constructor
 */
function Shape(name) {
    /** The shape name. */
    this.name = name;
}

/** Compute area. */
Shape.prototype.area = function() { return 0; };

function helper(a, b) {
    function inner() {}
}
"""

UTIL_JS = """
/** Utility namespace. */
var Util = {
    /** Trim a string. */
    trim: function(s) { return s.replace(/^\\s+/, ''); },
    /** Version number. */
    version: '1.0',
    undocumented: 3
};

/**
 * @name Util.format
 * @function
 * @param {string} pattern The pattern.
 */
"""

INHERIT_JS = """
/** @constructor */
function Base() {}

Base.prototype = {
    /** Say hi. */
    hi: function() {}
};

/**
 * @constructor
 * @augments Base
 */
function Child() {}
"""


def parse(text):
    parser = JsParser()
    parser.parse(TokenStream(TokenReader(text).tokenize()))
    return parser


def summary(symbols):
    return [(s.name, s.kind) for s in symbols]


class TestToMemberPath:
    @pytest.mark.parametrize("name,expected", [
        ("Foo", "Foo"),
        ("Foo.bar", "Foo/bar"),
        ("Foo.prototype.bar", "Foo/bar"),
        ("Foo.prototype", "Foo"),
        ("a.b.c", "a/b/c"),
    ])
    def test_conversion(self, name, expected):
        assert to_member_path(name) == expected


class TestJsParser:
    def test_declarations_and_members(self):
        parser = parse(SHAPES_JS)
        assert summary(parser.symbols) == [
            ("Shape", SymbolKind.CONSTRUCTOR),
            ("Shape/name", SymbolKind.OBJECT),
            ("Shape/area", SymbolKind.FUNCTION),
            ("helper", SymbolKind.FUNCTION),
        ]

    def test_overview_comment(self):
        parser = parse(SHAPES_JS)
        assert parser.overview == "/** @fileOverview Shapes library. */"

    def test_function_params(self):
        parser = parse(SHAPES_JS)
        assert parser.symbols[0].params == ["name"]
        assert parser.symbols[3].params == ["a", "b"]

    def test_undocumented_function(self):
        helper = parse(SHAPES_JS).symbols[3]
        assert helper.description == UNDOCUMENTED

    def test_descriptions(self):
        symbols = parse(SHAPES_JS).symbols
        assert symbols[0].description == "A shape."
        assert symbols[1].description == "The shape name."

    def test_object_literal_members(self):
        parser = parse(UTIL_JS)
        assert summary(parser.symbols) == [
            ("Util", SymbolKind.OBJECT),
            ("Util/trim", SymbolKind.FUNCTION),
            ("Util/version", SymbolKind.OBJECT),
            ("Util/format", SymbolKind.FUNCTION),
        ]
        assert parser.overview is None

    def test_virtual_symbol_params_from_tags(self):
        virtual = parse(UTIL_JS).symbols[3]
        assert virtual.params == ["pattern"]
        assert virtual.tags.get_tag("name") == []

    def test_prototype_literal_and_augments(self):
        parser = parse(INHERIT_JS)
        assert summary(parser.symbols) == [
            ("Base", SymbolKind.CONSTRUCTOR),
            ("Base/hi", SymbolKind.FUNCTION),
            ("Child", SymbolKind.CONSTRUCTOR),
        ]
        assert parser.symbols[2].inherits == ["Base"]

    def test_parser_resets_between_files(self):
        parser = JsParser()
        parser.parse(TokenStream(TokenReader(SHAPES_JS).tokenize()))
        parser.parse(TokenStream(TokenReader("/** X. */ var X = 1;").tokenize()))
        assert [s.name for s in parser.symbols] == ["X"]
        assert parser.overview is None

    def test_ternary_in_property_value_is_not_a_key(self):
        parser = parse(
            "/** Lib. */\n"
            "var Lib = {\n"
            "    /** Run. */\n"
            "    run: flag ? a : function() { return { x: 1 }; },\n"
            "    /** Stop. */\n"
            "    stop: function() {}\n"
            "};\n"
        )
        assert summary(parser.symbols) == [
            ("Lib", SymbolKind.OBJECT),
            ("Lib/run", SymbolKind.OBJECT),
            ("Lib/stop", SymbolKind.FUNCTION),
        ]

    def test_comparison_is_not_assignment(self):
        parser = parse("/** Doc. */ if (a == b) {}")
        assert parser.symbols == []


class TestParserWithResolver:
    def resolve(self, text, options=None):
        sources = {"lib.js": text}
        resolver = SymbolResolver(options or DocOptions(), Mock(), read_text=sources.__getitem__)
        return resolver.resolve("lib.js")[0]

    def test_shapes_graph(self):
        doc_file = self.resolve(SHAPES_JS)
        shape = doc_file.get_symbol("Shape")
        assert [s.alias for s in doc_file.symbols] == ["Shape", "Shape.name", "Shape.area"]
        assert [s.alias for s in shape.methods] == ["Shape.area"]
        assert [s.alias for s in shape.properties] == ["Shape.name"]
        assert doc_file.overview.description == "Shapes library."

    def test_all_functions_includes_helper(self):
        doc_file = self.resolve(SHAPES_JS, DocOptions(all_functions=True))
        assert doc_file.get_symbol("helper") is not None
        assert doc_file.get_symbol("inner") is None

    def test_inherited_members(self):
        doc_file = self.resolve(INHERIT_JS)
        child = doc_file.get_symbol("Child")
        assert [s.alias for s in child.inherited_methods] == ["Base.hi"]

    def test_virtual_member_links_to_namespace(self):
        doc_file = self.resolve(UTIL_JS)
        util = doc_file.get_symbol("Util")
        assert [s.alias for s in util.methods] == ["Util.trim", "Util.format"]
        assert [s.alias for s in util.properties] == ["Util.version"]
