from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Callable, ClassVar, List, Set, Tuple


class TokenType(IntEnum):
    """Type of lexical token."""
    COMMENT = auto()
    STRING = auto()
    SYMBOL = auto()
    WHITESPACE = auto()
    WORD = auto()


@dataclass
class Token:
    """
    Represents a token in the input stream.

    Attributes:
        type: The type of the token
        value: The exact text of the input covered by the token
        start: The starting position of the token in the input stream
    """
    type: TokenType
    value: str
    start: int

    @property
    def end(self) -> int:
        """Position one past the last character of the token."""
        return self.start + len(self.value)


@dataclass
class LexerState:
    """
    State information for the Lexer.
    """


# A matcher takes the position to match at and returns the matched length, or 0.
Matcher = Callable[[int], int]


class Lexer(ABC):
    """
    Base lexer class.

    Subclasses supply an ordered list of matchers.  At each position the
    matchers are tried in order and the first one to match a non-empty run
    of characters produces the next token.  If none match, a single character
    is consumed as a fallback token so the lexer always makes progress.
    """

    # Character lookup tables - shared by all subclasses
    _WHITESPACE_CHARS: ClassVar[Set[str]] = set(" \t\r\n\v\f\u00A0\u1680\u2028\u2029\u202F\u205F\u3000\uFEFF")
    _LETTER_CHARS: ClassVar[Set[str]] = set("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
    _LETTER_DIGIT_UNDERSCORE_CHARS: ClassVar[Set[str]] = set("0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
    _DIGIT_CHARS: ClassVar[Set[str]] = set("0123456789")

    # Add the Unicode whitespace range \u2000-\u200A
    for i in range(0x2000, 0x200B):
        _WHITESPACE_CHARS.add(chr(i))

    # Token type used when no matcher accepts the current character
    _FALLBACK_TOKEN_TYPE: ClassVar[TokenType] = TokenType.SYMBOL

    def __init__(self) -> None:
        self._input: str = ""
        self._input_len: int = 0
        self._position: int = 0
        self._tokens: List[Token] = []
        self._next_token: int = 0

    @abstractmethod
    def _get_matchers(self) -> List[Tuple[TokenType, Matcher]]:
        """
        Get the matchers for this lexer, in priority order.

        Returns:
            A list of (token type, matcher) pairs
        """

    @abstractmethod
    def lex(self, prev_lexer_state: LexerState | None, input_str: str) -> LexerState | None:
        """
        Parse the input string

        Args:
            prev_lexer_state: The previous lexer state, if any
            input_str: The input string to lex

        Returns:
            The updated lexer state
        """

    def _inner_lex(self) -> None:
        """
        Lex all the tokens in the input.
        """
        matchers = self._get_matchers()
        while self._position < self._input_len:
            start = self._position
            token_type = self._FALLBACK_TOKEN_TYPE
            length = 1
            for matcher_type, matcher in matchers:
                matched = matcher(start)
                if matched > 0:
                    token_type = matcher_type
                    length = matched
                    break

            self._position = start + length
            self._tokens.append(Token(type=token_type, value=self._input[start:self._position], start=start))

    def _match_run(self, start: int, predicate: Callable[[str], bool]) -> int:
        """
        Match the longest run of characters accepted by a predicate.

        Args:
            start: Position to start matching at
            predicate: Character test

        Returns:
            The length of the run, which may be 0
        """
        position = start
        while position < self._input_len and predicate(self._input[position]):
            position += 1

        return position - start

    def get_tokens(self) -> List[Token]:
        """
        Get all the tokens produced by the last call to lex.

        Returns:
            A copy of the token list.
        """
        return list(self._tokens)

    def get_next_token(self) -> Token | None:
        """
        Gets the next token from the input.

        Returns:
            The next Token available or None if there are no tokens left.
        """
        if self._next_token >= len(self._tokens):
            return None

        token = self._tokens[self._next_token]
        self._next_token += 1
        return token

    def peek_next_token(self, offset: int = 0) -> Token | None:
        """
        Get the token that is 'offset' positions ahead.

        Args:
            offset: How many tokens to look ahead (default 0)

        Returns:
            The token at the specified offset, or None if none found
        """
        current_token_index = self._next_token
        skipped = 0
        token = None

        while skipped <= offset:
            token = self.get_next_token()
            if not token:
                break

            skipped += 1

        self._next_token = current_token_index
        return token

    def _is_letter(self, ch: str) -> bool:
        """
        Determines if a character is a letter.
        """
        return ch in self._LETTER_CHARS

    def _is_digit(self, ch: str) -> bool:
        """
        Determines if a character is a digit.
        """
        return ch in self._DIGIT_CHARS

    def _is_letter_or_digit_or_underscore(self, ch: str) -> bool:
        """
        Determines if a character is a letter, digit, or underscore.
        """
        return ch in self._LETTER_DIGIT_UNDERSCORE_CHARS

    def _is_whitespace(self, ch: str) -> bool:
        """
        Determines if a character is whitespace, including newlines.
        """
        return ch in self._WHITESPACE_CHARS
