"""
JavaScript tokenizer and doc-comment parser used to produce raw symbols.
"""

from .token_reader import TokenReader, TokenStream, Token, TokenType, TokenizeError
from .js_parser import JsParser, to_member_path

__all__ = ['TokenReader', 'TokenStream', 'Token', 'TokenType', 'TokenizeError',
           'JsParser', 'to_member_path']
