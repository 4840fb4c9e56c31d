"""Infix to prefix and postfix conversion."""

from .balance import has_balanced_parentheses
from .reorder import (
    Conversion,
    convert,
    infix_to_postfix,
    infix_to_prefix,
    to_postfix,
    to_prefix,
)
from .tokenizer import tokenize
from .tokens import Token, TokenKind, is_right_associative, precedence

__all__ = [
    "Conversion",
    "Token",
    "TokenKind",
    "convert",
    "has_balanced_parentheses",
    "infix_to_postfix",
    "infix_to_prefix",
    "is_right_associative",
    "precedence",
    "to_postfix",
    "to_prefix",
    "tokenize",
]
