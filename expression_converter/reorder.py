"""
Shunting-yard reordering of infix tokens.

Postfix runs the reduction once over the tokens as given. Prefix mirrors the
token stream (reverse it, swap paren direction), runs the same reduction with
a pop rule that only looks at precedence (strictly higher pops), and reverses
what comes out.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Sequence

from .tokenizer import tokenize
from .tokens import OPEN_PAREN, Token, TokenKind, is_right_associative, precedence

logger = logging.getLogger(__name__)

PopPredicate = Callable[[str, str], bool]


def postfix_should_pop(stack_top: str, incoming: str) -> bool:
    top_prec, in_prec = precedence(stack_top), precedence(incoming)
    if top_prec > in_prec:
        return True
    return top_prec == in_prec and not is_right_associative(incoming)


def prefix_should_pop(stack_top: str, incoming: str) -> bool:
    return precedence(stack_top) > precedence(incoming)


def reduce_tokens(tokens: Iterable[Token], should_pop: PopPredicate) -> List[str]:
    output: List[str] = []
    stack: List[str] = []
    for token in tokens:
        if token.kind is TokenKind.OPERAND:
            output.append(token.text)
        elif token.kind is TokenKind.OPEN_PAREN:
            stack.append(OPEN_PAREN.text)
        elif token.kind is TokenKind.CLOSE_PAREN:
            while stack and stack[-1] != OPEN_PAREN.text:
                output.append(stack.pop())
            if stack:
                stack.pop()
        elif token.kind is TokenKind.OPERATOR:
            while (
                stack
                and stack[-1] != OPEN_PAREN.text
                and should_pop(stack[-1], token.text)
            ):
                output.append(stack.pop())
            stack.append(token.text)
        else:
            raise TypeError(f"Unsupported token: {token!r}")
        logger.debug(f"{token!r}: output={output} stack={stack}")

    while stack:
        top = stack.pop()
        if top != OPEN_PAREN.text:
            output.append(top)
    return output


def mirror(tokens: Sequence[Token]) -> List[Token]:
    return [token.mirrored() for token in reversed(tokens)]


def to_postfix(tokens: Sequence[Token]) -> str:
    return "".join(reduce_tokens(tokens, postfix_should_pop))


def to_prefix(tokens: Sequence[Token]) -> str:
    reduced = reduce_tokens(mirror(tokens), prefix_should_pop)
    # reverse whole token texts so multi-character ones like `log` stay intact
    return "".join(reversed(reduced))


def infix_to_postfix(text: str) -> str:
    return to_postfix(tokenize(text))


def infix_to_prefix(text: str) -> str:
    return to_prefix(tokenize(text))


@dataclass(frozen=True)
class Conversion:
    prefix: str
    postfix: str


def convert(text: str) -> Conversion:
    """Tokenize once and produce both notations."""
    tokens = tokenize(text)
    return Conversion(prefix=to_prefix(tokens), postfix=to_postfix(tokens))
