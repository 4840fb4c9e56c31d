"""
Character scanner turning an infix string into a list of tokens.

Unknown characters are dropped without complaint: `A#B` gives the two
operands `A` and `B`, and a string of nothing but noise gives no tokens.
"""

import logging
from typing import List, Optional

from .tokens import (
    CLOSE_PAREN,
    LOG_OPERATOR,
    OPEN_PAREN,
    SINGLE_CHAR_OPERATORS,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)


class Scanner:
    def __init__(self, text: str):
        self.text = text
        self.i = 0

    def peek(self, offset: int = 0) -> Optional[str]:
        pos = self.i + offset
        return self.text[pos] if pos < len(self.text) else None

    def at_log(self) -> bool:
        return self.text.startswith(LOG_OPERATOR, self.i)

    def at_operand(self) -> bool:
        ch = self.peek()
        if ch is None:
            return False
        if ch.isalnum():
            return True
        nxt = self.peek(1)
        return ch == "." and nxt is not None and nxt.isdigit()

    def scan(self) -> List[Token]:
        tokens: List[Token] = []
        while self.i < len(self.text):
            token = self._next_token()
            if token is not None:
                tokens.append(token)
        logger.debug(f"Tokenized {self.text!r} -> {tokens}")
        return tokens

    def _next_token(self) -> Optional[Token]:
        ch = self.text[self.i]
        if ch.isspace():
            self.i += 1
            return None
        if ch == "(":
            self.i += 1
            return OPEN_PAREN
        if ch == ")":
            self.i += 1
            return CLOSE_PAREN
        if ch in SINGLE_CHAR_OPERATORS:
            self.i += 1
            return Token(ch, TokenKind.OPERATOR)
        if self.at_log():
            self.i += len(LOG_OPERATOR)
            return Token(LOG_OPERATOR, TokenKind.OPERATOR)
        if self.at_operand():
            return self._scan_operand()
        logger.debug(f"Dropping unrecognized character {ch!r} at position {self.i}")
        self.i += 1
        return None

    def _scan_operand(self) -> Optional[Token]:
        start = self.i
        leads_with_digit = self.text[start].isdigit()
        seen_point = False
        while self.i < len(self.text) and not self.at_log():
            ch = self.text[self.i]
            if ch.isalnum():
                self.i += 1
            elif ch == "." and not seen_point and leads_with_digit:
                seen_point = True
                self.i += 1
            else:
                break
        if self.i == start:
            # nothing consumed, still move on so the scan always terminates
            self.i += 1
            return None
        return Token(self.text[start : self.i], TokenKind.OPERAND)


def tokenize(expression: str) -> List[Token]:
    return Scanner(expression).scan()
