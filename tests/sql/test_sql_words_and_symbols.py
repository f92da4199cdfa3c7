"""
Tests for SQL word, whitespace and symbol tokenization.
"""
from sqlsource.lexer import TokenType
from sqlsource.sql.sql_lexer import SQLLexer, SQLLexerState, tokenize


class TestSQLWords:
    """Test SQL word tokenization."""

    def test_identifiers(self):
        """Test identifiers made of letters, digits and underscores."""
        test_cases = ['T', 't1', 'GEN_ID', '_private', '__x__', 'a1b2c3', 'SELECT']
        for word in test_cases:
            lexer = SQLLexer()
            lexer.lex(None, word)

            tokens = list(lexer._tokens)
            assert len(tokens) == 1, f"Word '{word}' should produce one token"
            assert tokens[0].type.name == 'WORD', f"Word '{word}' should be WORD type"
            assert tokens[0].value == word

    def test_keywords_are_words(self):
        """Test that keywords are not classified at lex time."""
        lexer = SQLLexer()
        lexer.lex(None, 'SELECT')

        tokens = list(lexer._tokens)
        assert tokens[0].type == TokenType.WORD

    def test_select_star(self):
        """Test a simple query."""
        tokens = tokenize('SELECT * FROM T')
        assert [(t.type.name, t.value, t.start) for t in tokens] == [
            ('WORD', 'SELECT', 0),
            ('WHITESPACE', ' ', 6),
            ('SYMBOL', '*', 7),
            ('WHITESPACE', ' ', 8),
            ('WORD', 'FROM', 9),
            ('WHITESPACE', ' ', 13),
            ('WORD', 'T', 14),
        ]

    def test_digits_are_single_symbols(self):
        """Test that each digit outside a word is its own symbol."""
        tokens = tokenize('123')
        assert [(t.type.name, t.value) for t in tokens] == [
            ('SYMBOL', '1'),
            ('SYMBOL', '2'),
            ('SYMBOL', '3'),
        ]

    def test_digit_before_word(self):
        """Test that a word cannot start with a digit."""
        tokens = tokenize('1abc')
        assert [(t.type.name, t.value) for t in tokens] == [
            ('SYMBOL', '1'),
            ('WORD', 'abc'),
        ]

    def test_digit_ends_symbol_run(self):
        """Test that digits are not merged into symbol runs."""
        tokens = tokenize('x:=1;')
        assert [(t.type.name, t.value) for t in tokens] == [
            ('WORD', 'x'),
            ('SYMBOL', ':='),
            ('SYMBOL', '1'),
            ('SYMBOL', ';'),
        ]

    def test_non_ascii_letters_are_symbols(self):
        """Test that only ASCII letters form words."""
        tokens = tokenize('café')
        assert [(t.type.name, t.value) for t in tokens] == [
            ('WORD', 'caf'),
            ('SYMBOL', 'é'),
        ]


class TestSQLSymbols:
    """Test SQL symbol tokenization."""

    def test_symbol_runs(self):
        """Test runs of punctuation."""
        test_cases = ['*', '<=', '<>', '||', ');', '.', '$@#', '!=']
        for symbols in test_cases:
            tokens = tokenize(symbols)
            assert len(tokens) == 1, f"Symbols '{symbols}' should produce one token"
            assert tokens[0].type.name == 'SYMBOL'
            assert tokens[0].value == symbols

    def test_call_syntax(self):
        """Test a function call with arguments."""
        tokens = tokenize('GEN_ID(G, 1);')
        assert [(t.type.name, t.value) for t in tokens] == [
            ('WORD', 'GEN_ID'),
            ('SYMBOL', '('),
            ('WORD', 'G'),
            ('SYMBOL', ','),
            ('WHITESPACE', ' '),
            ('SYMBOL', '1'),
            ('SYMBOL', ');'),
        ]

    def test_qualified_name(self):
        """Test a dotted name."""
        tokens = tokenize('NEW.ID')
        assert [(t.type.name, t.value) for t in tokens] == [
            ('WORD', 'NEW'),
            ('SYMBOL', '.'),
            ('WORD', 'ID'),
        ]


class TestSQLWhitespace:
    """Test SQL whitespace tokenization."""

    def test_whitespace_only(self):
        """Test that whitespace-only input is a single token."""
        tokens = tokenize('   \n\t')
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.WHITESPACE
        assert tokens[0].value == '   \n\t'
        assert tokens[0].start == 0
        assert tokens[0].end == 5

    def test_mixed_whitespace_run(self):
        """Test that newlines and indentation merge into one token."""
        tokens = tokenize('BEGIN\n    END')
        assert [(t.type.name, t.value) for t in tokens] == [
            ('WORD', 'BEGIN'),
            ('WHITESPACE', '\n    '),
            ('WORD', 'END'),
        ]

    def test_unicode_whitespace(self):
        """Test non-breaking and other Unicode spaces."""
        text = 'a' + chr(0x00A0) + chr(0x2003) + 'b'
        tokens = tokenize(text)
        assert [t.type.name for t in tokens] == ['WORD', 'WHITESPACE', 'WORD']
        assert tokens[1].value == chr(0x00A0) + chr(0x2003)


class TestSQLLexer:
    """Test the SQL lexer interface."""

    def test_empty_input(self):
        """Test that empty input produces no tokens."""
        lexer = SQLLexer()
        state = lexer.lex(None, '')

        assert isinstance(state, SQLLexerState)
        assert lexer.get_tokens() == []
        assert lexer.get_next_token() is None
        assert tokenize('') == []

    def test_get_next_token_and_peek(self):
        """Test iterating over tokens."""
        lexer = SQLLexer()
        lexer.lex(None, 'a b')

        assert lexer.peek_next_token().value == 'a'
        assert lexer.peek_next_token(2).value == 'b'
        assert lexer.get_next_token().value == 'a'
        assert lexer.get_next_token().type == TokenType.WHITESPACE
        assert lexer.get_next_token().value == 'b'
        assert lexer.get_next_token() is None
        assert lexer.peek_next_token() is None

    def test_lexer_reuse(self):
        """Test that a second lex call replaces the previous tokens."""
        lexer = SQLLexer()
        state = lexer.lex(None, 'SELECT 1')
        lexer.lex(state, 'x')

        tokens = lexer.get_tokens()
        assert len(tokens) == 1
        assert tokens[0].value == 'x'
        assert tokens[0].start == 0

    def test_token_end(self):
        """Test half-open token offsets."""
        tokens = tokenize("ab 'cd'")
        assert [(t.start, t.end) for t in tokens] == [(0, 2), (2, 3), (3, 7)]
