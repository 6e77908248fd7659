"""Test punctuation and operator tokens, including two-character forms."""

import pytest

from loxscan.tokens import TokenType

from .conftest import assert_lexemes, assert_types


class TestSingleCharacter:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("(", TokenType.LEFT_PAREN),
            (")", TokenType.RIGHT_PAREN),
            ("{", TokenType.LEFT_BRACE),
            ("}", TokenType.RIGHT_BRACE),
            (",", TokenType.COMMA),
            (".", TokenType.DOT),
            ("-", TokenType.MINUS),
            ("+", TokenType.PLUS),
            (";", TokenType.SEMICOLON),
            ("*", TokenType.STAR),
            ("/", TokenType.SLASH),
        ],
    )
    def test_each_punctuator(self, lex, source, expected):
        tokens = lex(source)
        assert_types(tokens, [expected])
        assert tokens[0].lexeme == source
        assert tokens[0].literal is None

    def test_adjacent_punctuation(self, lex):
        tokens = lex("(){},.-+;*")
        assert_types(
            tokens,
            [
                TokenType.LEFT_PAREN,
                TokenType.RIGHT_PAREN,
                TokenType.LEFT_BRACE,
                TokenType.RIGHT_BRACE,
                TokenType.COMMA,
                TokenType.DOT,
                TokenType.MINUS,
                TokenType.PLUS,
                TokenType.SEMICOLON,
                TokenType.STAR,
            ],
        )


class TestTwoCharacter:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("!=", TokenType.BANG_EQUAL),
            ("==", TokenType.EQUAL_EQUAL),
            ("<=", TokenType.LESS_EQUAL),
            (">=", TokenType.GREATER_EQUAL),
        ],
    )
    def test_combined_form(self, lex, source, expected):
        tokens = lex(source)
        assert_types(tokens, [expected])
        assert tokens[0].lexeme == source

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("!", TokenType.BANG),
            ("=", TokenType.EQUAL),
            ("<", TokenType.LESS),
            (">", TokenType.GREATER),
        ],
    )
    def test_single_form(self, lex, source, expected):
        assert_types(lex(source), [expected])

    def test_single_form_before_other_char(self, lex):
        tokens = lex("!a")
        assert_types(tokens, [TokenType.BANG, TokenType.IDENTIFIER])

    def test_triple_equals(self, lex):
        tokens = lex("===")
        assert_types(tokens, [TokenType.EQUAL_EQUAL, TokenType.EQUAL])
        assert_lexemes(tokens, ["==", "="])

    def test_space_breaks_pair(self, lex):
        tokens = lex("< =")
        assert_types(tokens, [TokenType.LESS, TokenType.EQUAL])

    def test_bang_bang_equal(self, lex):
        tokens = lex("!!=")
        assert_types(tokens, [TokenType.BANG, TokenType.BANG_EQUAL])


class TestExpressions:
    def test_addition(self, lex):
        tokens = lex("1+2")
        assert_types(tokens, [TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER])
        assert tokens[0].literal.value == 1.0
        assert tokens[2].literal.value == 2.0

    def test_statement(self, lex):
        tokens = lex('var greeting = "hi";')
        assert_types(
            tokens,
            [
                TokenType.VAR,
                TokenType.IDENTIFIER,
                TokenType.EQUAL,
                TokenType.STRING,
                TokenType.SEMICOLON,
            ],
        )
        assert_lexemes(tokens, ["var", "greeting", "=", '"hi"', ";"])

    def test_comparison_chain(self, lex):
        tokens = lex("a<=b!=c")
        assert_types(
            tokens,
            [
                TokenType.IDENTIFIER,
                TokenType.LESS_EQUAL,
                TokenType.IDENTIFIER,
                TokenType.BANG_EQUAL,
                TokenType.IDENTIFIER,
            ],
        )


class TestPackageEntryPoint:
    def test_scan_matches_scan_all(self, collector):
        from loxscan import scan

        tokens = scan("x >= 1 @", collector)
        assert_types(
            tokens,
            [TokenType.IDENTIFIER, TokenType.GREATER_EQUAL, TokenType.NUMBER, TokenType.EOF],
        )
        assert collector.had_error
