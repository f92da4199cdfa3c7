"""
SQL syntax highlighting module.

This module provides tokenizing and HTML highlighting for SQL source text.
"""

from sqlsource.sql.sql_html_renderer import SQLHTMLRenderer, render, strip_markup
from sqlsource.sql.sql_keywords import SQL_KEYWORDS, is_keyword
from sqlsource.sql.sql_lexer import SQLLexer, SQLLexerState, tokenize

__all__ = [
    'SQLHTMLRenderer',
    'SQLLexer',
    'SQLLexerState',
    'SQL_KEYWORDS',
    'is_keyword',
    'render',
    'strip_markup',
    'tokenize',
]
