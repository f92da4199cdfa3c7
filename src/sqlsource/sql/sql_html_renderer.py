"""
Render SQL source text as highlighted HTML.
"""

import re
from typing import Dict, Iterable

from sqlsource.lexer import Token, TokenType
from sqlsource.sql.sql_keywords import is_keyword
from sqlsource.sql.sql_lexer import tokenize


class SQLHTMLRenderer:
    """
    Renders SQL tokens as HTML fragments.

    Every token is HTML-escaped.  String literals, comments and keywords are
    then wrapped in a span carrying a CSS class; all other tokens are emitted
    as plain escaped text.  Removing the spans and unescaping the result gives
    back the original source exactly.
    """

    KEYWORD_CLASS = "sql-keyword"
    STRING_CLASS = "sql-string"
    COMMENT_CLASS = "sql-comment"

    _TOKEN_CLASSES: Dict[TokenType, str] = {
        TokenType.STRING: STRING_CLASS,
        TokenType.COMMENT: COMMENT_CLASS,
    }

    _SPAN_TAG_RE = re.compile(r'</?span[^>]*>')

    def escape_html(self, text: str) -> str:
        """
        Escape special HTML characters in text.

        Args:
            text: The text to escape

        Returns:
            The escaped text
        """
        text = text.replace('&', '&amp;')  # Must come first to avoid double-escaping
        text = text.replace('<', '&lt;')
        text = text.replace('>', '&gt;')
        text = text.replace('"', '&quot;')
        text = text.replace("'", '&#039;')
        return text

    def unescape_html(self, text: str) -> str:
        """
        Reverse escape_html.

        Args:
            text: The escaped text

        Returns:
            The original text
        """
        text = text.replace('&#039;', "'")
        text = text.replace('&quot;', '"')
        text = text.replace('&gt;', '>')
        text = text.replace('&lt;', '<')
        text = text.replace('&amp;', '&')  # Must come last
        return text

    def _style_class(self, token: Token) -> str | None:
        if token.type == TokenType.WORD:
            return self.KEYWORD_CLASS if is_keyword(token.value) else None

        return self._TOKEN_CLASSES.get(token.type)

    def render_token(self, token: Token) -> str:
        """
        Render a single token.

        Args:
            token: The token to render

        Returns:
            The escaped token text, wrapped in a styled span if the token has a style
        """
        escaped = self.escape_html(token.value)
        style_class = self._style_class(token)
        if style_class is None:
            return escaped

        return f'<span class="{style_class}">{escaped}</span>'

    def render_tokens(self, tokens: Iterable[Token]) -> str:
        """
        Render a sequence of tokens, in order.

        Args:
            tokens: The tokens to render

        Returns:
            The HTML fragment for all the tokens
        """
        return "".join(self.render_token(token) for token in tokens)

    def render(self, text: str) -> str:
        """
        Tokenize and render SQL source text.

        Args:
            text: The SQL source text

        Returns:
            The highlighted HTML fragment
        """
        return self.render_tokens(tokenize(text))

    def strip_markup(self, html: str) -> str:
        """
        Recover the source text from rendered HTML.

        Args:
            html: Output of render

        Returns:
            The text with style spans removed and escapes undone
        """
        return self.unescape_html(self._SPAN_TAG_RE.sub('', html))


_renderer = SQLHTMLRenderer()


def render(text: str) -> str:
    """Render SQL source text as highlighted HTML."""
    return _renderer.render(text)


def strip_markup(html: str) -> str:
    """Recover the original source text from the output of render."""
    return _renderer.strip_markup(html)
