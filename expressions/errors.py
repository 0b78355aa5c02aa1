import enum
from dataclasses import dataclass
from typing import ClassVar, Optional

from expressions.utils import PrintableEnum


class ErrorKind(PrintableEnum):
    EMPTY_EXPRESSION = enum.auto()
    INVALID_CHARACTER = enum.auto()
    ADJACENT_OPERANDS = enum.auto()
    INVALID_OPERATOR_PLACEMENT = enum.auto()
    UNMATCHED_PARENTHESIS = enum.auto()
    VARIABLE_INPUT = enum.auto()
    NUMBER_FORMAT = enum.auto()
    MISSING_PARENTHESIS = enum.auto()
    UNDEFINED_VARIABLE = enum.auto()
    UNEXPECTED_CHARACTER = enum.auto()
    UNEXPECTED_END = enum.auto()
    NESTING_TOO_DEEP = enum.auto()


@dataclass
class ExpressionError(Exception):
    errmsg: str
    position: Optional[int] = None

    kind: ClassVar[ErrorKind]

    def __str__(self) -> str:
        return f"[{self.kind}] {self.errmsg}"


class EmptyExpression(ExpressionError):
    kind = ErrorKind.EMPTY_EXPRESSION


class InvalidCharacter(ExpressionError):
    kind = ErrorKind.INVALID_CHARACTER


class AdjacentOperandsWithoutOperator(ExpressionError):
    kind = ErrorKind.ADJACENT_OPERANDS


class InvalidOperatorPlacement(ExpressionError):
    kind = ErrorKind.INVALID_OPERATOR_PLACEMENT


class UnmatchedParenthesis(ExpressionError):
    kind = ErrorKind.UNMATCHED_PARENTHESIS


class VariableInputError(ExpressionError):
    kind = ErrorKind.VARIABLE_INPUT


class NumberFormatError(ExpressionError):
    kind = ErrorKind.NUMBER_FORMAT


class MissingParenthesis(ExpressionError):
    kind = ErrorKind.MISSING_PARENTHESIS


class UndefinedVariable(ExpressionError):
    kind = ErrorKind.UNDEFINED_VARIABLE


class UnexpectedCharacter(ExpressionError):
    kind = ErrorKind.UNEXPECTED_CHARACTER


class UnexpectedEndOfExpression(ExpressionError):
    kind = ErrorKind.UNEXPECTED_END


class NestingTooDeep(ExpressionError):
    kind = ErrorKind.NESTING_TOO_DEEP


@dataclass
class InvalidExpression(Exception):
    """The only error ``ExpressionEvaluator.evaluate`` lets out; ``cause`` holds the underlying failure."""

    expression: str
    cause: ExpressionError

    def __str__(self) -> str:
        lines = [f"Invalid expression: {self.expression}", str(self.cause)]
        if self.cause.position is not None:
            lines.extend(_pointer_lines(self.expression, self.cause.position))
        return "\n".join(lines)


def _pointer_lines(code: str, position: int, context: int = 10) -> list[str]:
    start = max(0, position - context)
    end = min(len(code), position + context)
    prefix = "..." if start > 0 else ""
    suffix = "..." if end < len(code) else ""
    return [prefix + code[start:end] + suffix, " " * (len(prefix) + position - start) + "^"]
