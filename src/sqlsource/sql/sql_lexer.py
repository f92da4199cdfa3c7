from dataclasses import dataclass
from typing import ClassVar, List, Set, Tuple

from sqlsource.lexer import Lexer, LexerState, Matcher, Token, TokenType


@dataclass
class SQLLexerState(LexerState):
    """
    State information for the SQL lexer.

    SQL source is always lexed as a whole, so no state carries between calls.
    """


class SQLLexer(Lexer):
    """
    Lexer for SQL source text.

    Splits the input into string literals, line comments, words, whitespace
    and symbol runs.  The tokens cover the input exactly, with no gaps.  This
    is a highlighting lexer: it does not validate SQL and does not understand
    block comments or doubled-quote escapes inside strings.
    """

    _LINE_TERMINATOR_CHARS: ClassVar[Set[str]] = {'\n', '\r', '\u2028', '\u2029'}

    # Characters that end a symbol run
    _NON_SYMBOL_CHARS: ClassVar[Set[str]] = (
        Lexer._LETTER_DIGIT_UNDERSCORE_CHARS | Lexer._WHITESPACE_CHARS | {"'", '-'}
    )

    def lex(self, prev_lexer_state: LexerState | None, input_str: str) -> SQLLexerState:
        """
        Lex all the tokens in the input.

        Args:
            prev_lexer_state: Optional previous lexer state (unused, SQL has no continuation state)
            input_str: The input string to parse

        Returns:
            The updated lexer state after processing
        """
        self._input = input_str
        self._input_len = len(input_str)
        self._position = 0
        self._tokens = []
        self._next_token = 0

        self._inner_lex()
        return SQLLexerState()

    def _get_matchers(self) -> List[Tuple[TokenType, Matcher]]:
        return [
            (TokenType.STRING, self._match_string),
            (TokenType.COMMENT, self._match_line_comment),
            (TokenType.WORD, self._match_word),
            (TokenType.WHITESPACE, self._match_whitespace),
            (TokenType.SYMBOL, self._match_symbols),
        ]

    def _match_string(self, start: int) -> int:
        """
        Match a single-quoted string.

        The string ends at the next single quote.  An unterminated string runs
        to the end of the input.
        """
        if self._input[start] != "'":
            return 0

        close = self._input.find("'", start + 1)
        if close == -1:
            return self._input_len - start

        return close + 1 - start

    def _match_line_comment(self, start: int) -> int:
        """
        Match a `--` comment up to, but not including, the end of the line.
        """
        if not self._input.startswith('--', start):
            return 0

        return 2 + self._match_run(start + 2, lambda ch: ch not in self._LINE_TERMINATOR_CHARS)

    def _match_word(self, start: int) -> int:
        """
        Match an identifier or keyword.
        """
        ch = self._input[start]
        if not (self._is_letter(ch) or ch == '_'):
            return 0

        return 1 + self._match_run(start + 1, self._is_letter_or_digit_or_underscore)

    def _match_whitespace(self, start: int) -> int:
        return self._match_run(start, self._is_whitespace)

    def _match_symbols(self, start: int) -> int:
        # Digits and lone hyphens never match here and fall back to single-character symbols
        return self._match_run(start, lambda ch: ch not in self._NON_SYMBOL_CHARS)


def tokenize(text: str) -> List[Token]:
    """
    Split SQL source text into tokens.

    Args:
        text: The SQL source text

    Returns:
        The tokens, in order, covering the whole of the text
    """
    lexer = SQLLexer()
    lexer.lex(None, text)
    return lexer.get_tokens()
