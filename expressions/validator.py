import re

from expressions.errors import (
    AdjacentOperandsWithoutOperator,
    EmptyExpression,
    InvalidCharacter,
    InvalidOperatorPlacement,
    UnmatchedParenthesis,
)
from expressions.utils import is_operator

_INVALID_CHAR_PATT = re.compile(r"[^a-zA-Z0-9+\-*/().\s]")
_ADJACENT_OPERANDS_PATT = re.compile(r"[a-zA-Z0-9.]\s+[a-zA-Z0-9.]")


def validate(expression: str) -> None:
    """Rejects structurally broken expressions before they reach the evaluator.

    Raises the first matching ``ExpressionError`` subclass; positions refer to ``expression`` as given.
    """
    if not expression.strip():
        raise EmptyExpression("Expression cannot be empty")

    invalid_char = _INVALID_CHAR_PATT.search(expression)
    if invalid_char:
        raise InvalidCharacter(
            f"Expression contains invalid character {invalid_char.group()!r}", position=invalid_char.start()
        )

    adjacent = _ADJACENT_OPERANDS_PATT.search(expression)
    if adjacent:
        raise AdjacentOperandsWithoutOperator(
            "Expression contains two operands without an operator", position=adjacent.end() - 1
        )

    _check_operator_placement(expression)
    _check_parentheses(expression)


def _check_operator_placement(expression: str) -> None:
    # (char, index in the raw text) with whitespace dropped, so "2 + * 3" is seen as "2+*3"
    chars = [(c, i) for i, c in enumerate(expression) if not c.isspace()]

    for j, (c, i) in enumerate(chars):
        if not is_operator(c):
            continue
        prev = chars[j - 1][0] if j > 0 else None
        nxt = chars[j + 1][0] if j + 1 < len(chars) else None

        # only unary minus may start a factor
        if c != "-" and (prev is None or prev == "(" or is_operator(prev)):
            if prev is None:
                errmsg = f"Expression cannot start with operator {c!r}"
            elif prev == "(":
                errmsg = f"Operator {c!r} cannot follow '('"
            else:
                errmsg = f"Operator {c!r} cannot follow operator {prev!r}"
            raise InvalidOperatorPlacement(errmsg, position=i)

        if nxt is None:
            raise InvalidOperatorPlacement(f"Expression cannot end with operator {c!r}", position=i)
        if nxt == ")":
            raise InvalidOperatorPlacement(f"Operator {c!r} cannot precede ')'", position=i)


def _check_parentheses(expression: str) -> None:
    open_positions: list[int] = []
    for i, c in enumerate(expression):
        if c == "(":
            open_positions.append(i)
        elif c == ")":
            if not open_positions:
                raise UnmatchedParenthesis("Expression contains unmatched closing parenthesis", position=i)
            open_positions.pop()
    if open_positions:
        raise UnmatchedParenthesis("Expression contains unmatched opening parenthesis", position=open_positions[-1])
