from typing import List


def has_balanced_parentheses(expression: str) -> bool:
    """Check paren nesting on the raw string, independent of tokenization."""
    stack: List[str] = []
    for ch in expression:
        if ch == "(":
            stack.append(ch)
        elif ch == ")":
            if not stack:
                return False
            stack.pop()
    return not stack
