from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    OPERAND = "operand"
    OPERATOR = "operator"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"


@dataclass(frozen=True)
class Token:
    text: str
    kind: TokenKind

    def mirrored(self) -> "Token":
        """Swap parenthesis direction, leave everything else alone."""
        if self.kind is TokenKind.OPEN_PAREN:
            return CLOSE_PAREN
        if self.kind is TokenKind.CLOSE_PAREN:
            return OPEN_PAREN
        return self

    def __repr__(self) -> str:
        return f"{self.kind.name}({self.text!r})"


OPEN_PAREN = Token("(", TokenKind.OPEN_PAREN)
CLOSE_PAREN = Token(")", TokenKind.CLOSE_PAREN)

SINGLE_CHAR_OPERATORS = frozenset("+-*/^%")
LOG_OPERATOR = "log"

# operator -> (precedence, right associative)
OPERATORS = {
    "+": (1, False),
    "-": (1, False),
    "*": (2, False),
    "/": (2, False),
    "%": (2, False),
    "^": (3, True),
    LOG_OPERATOR: (3, True),
}

UNDEFINED_PRECEDENCE = -1


def precedence(operator: str) -> int:
    return OPERATORS.get(operator, (UNDEFINED_PRECEDENCE, False))[0]


def is_right_associative(operator: str) -> bool:
    return OPERATORS.get(operator, (UNDEFINED_PRECEDENCE, False))[1]
