import logging
import math
import operator
from typing import Callable, Mapping, Optional

from expressions.errors import (
    ExpressionError,
    InvalidExpression,
    MissingParenthesis,
    NestingTooDeep,
    UndefinedVariable,
    UnexpectedCharacter,
    UnexpectedEndOfExpression,
)
from expressions.tokenizer import Tokenizer
from expressions.utils import is_letter, is_valid_in_number
from expressions.validator import validate
from expressions.variables import ConsoleValueSource, ValueSource, find_variables, resolve_variables

logger = logging.getLogger(__name__)


def divide(a: float, b: float) -> float:
    """IEEE-754 division: x / 0 gives a signed infinity, 0 / 0 gives nan."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


ADDITIVE_OPS: dict[str, Callable[[float, float], float]] = {"+": operator.add, "-": operator.sub}
MULTIPLICATIVE_OPS: dict[str, Callable[[float, float], float]] = {"*": operator.mul, "/": divide}


class ExpressionEvaluator:
    """Evaluates arithmetic expressions with ``+ - * /``, parentheses, unary minus and variables.

    Values for variables are requested from ``value_source`` the first time a name is seen
    and kept for the lifetime of the evaluator, so later calls never ask for them again.
    """

    def __init__(
        self,
        value_source: Optional[ValueSource] = None,
        variables: Optional[Mapping[str, float]] = None,
    ) -> None:
        self.value_source: ValueSource = value_source if value_source is not None else ConsoleValueSource()
        self._variables: dict[str, float] = dict(variables) if variables else dict()

    @property
    def variables(self) -> Mapping[str, float]:
        return dict(self._variables)

    def evaluate(self, expression: str) -> float:
        try:
            validate(expression)
            resolve_variables(find_variables(expression), self._variables, self.value_source)
            tokenizer = Tokenizer(expression)
            try:
                result = self.parse_expression(tokenizer)
            except RecursionError:
                raise NestingTooDeep(
                    "Expression is nested too deeply", position=tokenizer.position
                ) from None
            if tokenizer.has_next():
                raise UnexpectedCharacter(
                    f"Unexpected character: {tokenizer.peek()!r}", position=tokenizer.position
                )
        except ExpressionError as e:
            logger.debug("Failed to evaluate %r: %s", expression, e)
            raise InvalidExpression(expression=expression, cause=e) from e
        logger.debug("%r = %s", expression, result)
        return result

    def parse_expression(self, tokenizer: Tokenizer) -> float:
        value = self.parse_term(tokenizer)
        while tokenizer.has_next() and tokenizer.peek() in ADDITIVE_OPS:
            op = ADDITIVE_OPS[tokenizer.next()]
            value = op(value, self.parse_term(tokenizer))
        return value

    def parse_term(self, tokenizer: Tokenizer) -> float:
        value = self.parse_factor(tokenizer)
        while tokenizer.has_next() and tokenizer.peek() in MULTIPLICATIVE_OPS:
            op = MULTIPLICATIVE_OPS[tokenizer.next()]
            value = op(value, self.parse_factor(tokenizer))
        return value

    def parse_factor(self, tokenizer: Tokenizer) -> float:
        if not tokenizer.has_next():
            raise UnexpectedEndOfExpression("Unexpected end of expression", position=tokenizer.position)
        next_char = tokenizer.peek()
        if is_valid_in_number(next_char):
            return tokenizer.parse_number()
        elif next_char == "(":
            open_position = tokenizer.position
            tokenizer.next()
            value = self.parse_expression(tokenizer)
            if not tokenizer.has_next():
                raise MissingParenthesis(
                    "Missing closing parenthesis for '(' opened here", position=open_position
                )
            if tokenizer.peek() != ")":
                raise MissingParenthesis(
                    f"Expected ')', found {tokenizer.peek()!r}", position=tokenizer.position
                )
            tokenizer.next()
            return value
        elif is_letter(next_char):
            name_position = tokenizer.position
            name = tokenizer.parse_name()
            if name in self._variables:
                return self._variables[name]
            raise UndefinedVariable(f"Variable {name} is undefined", position=name_position)
        elif next_char == "-":
            tokenizer.next()
            return -self.parse_factor(tokenizer)
        else:
            raise UnexpectedCharacter(f"Unexpected character: {next_char!r}", position=tokenizer.position)
