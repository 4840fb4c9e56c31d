import pytest

from expression_converter.tokenizer import tokenize
from expression_converter.tokens import (
    Token,
    TokenKind,
    is_right_associative,
    precedence,
)


def operand(text):
    return Token(text, TokenKind.OPERAND)


def operator(text):
    return Token(text, TokenKind.OPERATOR)


OPEN = Token("(", TokenKind.OPEN_PAREN)
CLOSE = Token(")", TokenKind.CLOSE_PAREN)


class TestTokenize:
    def test_simple_binary_expression(self):
        assert tokenize("A+B") == [operand("A"), operator("+"), operand("B")]

    def test_whitespace_is_skipped(self):
        assert tokenize("  12 *\t345 ") == [
            operand("12"),
            operator("*"),
            operand("345"),
        ]

    def test_parentheses(self):
        assert tokenize("(A)") == [OPEN, operand("A"), CLOSE]

    @pytest.mark.parametrize("symbol", list("+-*/^%"))
    def test_single_character_operators(self, symbol):
        assert tokenize(f"A{symbol}B") == [operand("A"), operator(symbol), operand("B")]

    def test_log_between_operands(self):
        assert tokenize("AlogB") == [operand("A"), operator("log"), operand("B")]

    def test_log_ends_lowercase_operand_scan(self):
        assert tokenize("blogc") == [operand("b"), operator("log"), operand("c")]

    def test_log_on_its_own(self):
        assert tokenize("log") == [operator("log")]

    def test_decimal_operands_are_single_tokens(self):
        assert tokenize("3.14+2.5") == [
            operand("3.14"),
            operator("+"),
            operand("2.5"),
        ]

    def test_leading_decimal_point_is_skipped(self):
        assert tokenize(".5+1") == [operand("5"), operator("+"), operand("1")]

    def test_only_one_decimal_point_per_operand(self):
        assert tokenize("1.2.3") == [operand("1.2"), operand("3")]

    def test_letter_led_operand_takes_no_decimal_point(self):
        assert tokenize("A.5") == [operand("A"), operand("5")]

    def test_empty_operand_scan_still_advances(self):
        # a scan starting on "." consumes nothing; the point is stepped over
        assert tokenize(".5") == [operand("5")]
        assert tokenize("..5") == [operand("5")]
        assert tokenize("7.") == [operand("7.")]

    def test_lone_point_is_dropped(self):
        assert tokenize("A . B") == [operand("A"), operand("B")]

    def test_alphanumeric_run_is_one_operand(self):
        assert tokenize("x1y+2z") == [operand("x1y"), operator("+"), operand("2z")]


class TestUnrecognizedCharacters:
    def test_garbage_splits_operands(self):
        # '#' ends the scan of A; B starts a fresh operand
        assert tokenize("A#B") == [operand("A"), operand("B")]

    def test_garbage_between_tokens_vanishes(self):
        assert tokenize("A $+ @B") == [operand("A"), operator("+"), operand("B")]

    def test_only_garbage_gives_no_tokens(self):
        assert tokenize("#$@!") == []

    def test_empty_string(self):
        assert tokenize("") == []


class TestOperatorMetadata:
    @pytest.mark.parametrize(
        "op,expected",
        [("+", 1), ("-", 1), ("*", 2), ("/", 2), ("%", 2), ("^", 3), ("log", 3)],
    )
    def test_precedence(self, op, expected):
        assert precedence(op) == expected

    def test_unknown_operator_has_undefined_precedence(self):
        assert precedence("&") == -1
        assert not is_right_associative("&")

    @pytest.mark.parametrize("op", ["^", "log"])
    def test_right_associative(self, op):
        assert is_right_associative(op)

    @pytest.mark.parametrize("op", ["+", "-", "*", "/", "%"])
    def test_left_associative(self, op):
        assert not is_right_associative(op)

    def test_mirrored_swaps_parentheses_only(self):
        assert OPEN.mirrored() == CLOSE
        assert CLOSE.mirrored() == OPEN
        assert operand("A").mirrored() == operand("A")
        assert operator("log").mirrored() == operator("log")
