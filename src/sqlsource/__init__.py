"""SQL source tokenizing and highlighting."""

from sqlsource.lexer import Lexer, LexerState, Token, TokenType
from sqlsource.sql import SQLHTMLRenderer, SQLLexer, is_keyword, render, strip_markup, tokenize


__all__ = [
    "Lexer",
    "LexerState",
    "SQLHTMLRenderer",
    "SQLLexer",
    "Token",
    "TokenType",
    "is_keyword",
    "render",
    "strip_markup",
    "tokenize"
]
