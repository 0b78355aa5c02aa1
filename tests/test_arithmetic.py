import math

import pytest

from expressions.evaluator import ExpressionEvaluator, divide
from expressions.variables import MappingValueSource


@pytest.fixture
def evaluator() -> ExpressionEvaluator:
    return ExpressionEvaluator(value_source=MappingValueSource({}))


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", 1.0),
        pytest.param("-1", -1.0),
        pytest.param("1+2", 3.0),
        pytest.param("(1+2)", 3.0),
        pytest.param("-(1+2)", -3.0),
        pytest.param("(((1)))", 1.0),
        pytest.param("1 * 4 + 5", 9.0),
        pytest.param("1 + 4 * 5", 21.0),
        pytest.param("10 / 5 / 2 / 2", 0.5),
        pytest.param("10 - 4 - 3", 3.0),
        pytest.param("10 + 2 * (5 + 3 - 1)", 24.0),
        pytest.param("3 + 4", 7.0),
        pytest.param("2 * 3", 6.0),
        pytest.param("8 / 4", 2.0),
        pytest.param("2 - 3", -1.0),
        pytest.param("2 + 3 * 4", 14.0),
        pytest.param("(2 + 3) * 4", 20.0),
        pytest.param("10 / (5 - 3)", 5.0),
        pytest.param(".5 + 1.", 1.5),
        pytest.param("  7\t*\n6 ", 42.0),
        # unary minus
        pytest.param("--3", 3.0),
        pytest.param("---3", -3.0),
        pytest.param("2 * -3", -6.0),
        pytest.param("2 - -3", 5.0),
        pytest.param("(-3)", -3.0),
        pytest.param("-(-(2 + 1)) * 2", 6.0),
    ],
)
def test_eval_arithmetic(evaluator: ExpressionEvaluator, code: str, expected_ret_val: float) -> None:
    assert evaluator.evaluate(code) == expected_ret_val


@pytest.mark.parametrize(
    "code",
    [
        pytest.param("3 + 4"),
        pytest.param("2 + 3 * 4"),
        pytest.param("10 / (5 - 3) - 1.25"),
        pytest.param("--3 * 2"),
        pytest.param("8 / 4 / 2"),
    ],
)
def test_parenthesized_equals_bare(evaluator: ExpressionEvaluator, code: str) -> None:
    assert evaluator.evaluate("(" + code + ")") == evaluator.evaluate(code)


def test_division_by_zero_is_not_an_error(evaluator: ExpressionEvaluator) -> None:
    assert evaluator.evaluate("1 / 0") == math.inf
    assert evaluator.evaluate("-1 / 0") == -math.inf
    assert evaluator.evaluate("1 / -0") == -math.inf
    assert math.isnan(evaluator.evaluate("0 / 0"))
    assert math.isnan(evaluator.evaluate("1 / 0 - 1 / 0"))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        pytest.param(3.0, 2.0, 1.5),
        pytest.param(3.0, 0.0, math.inf),
        pytest.param(-3.0, 0.0, -math.inf),
        pytest.param(3.0, -0.0, -math.inf),
        pytest.param(math.inf, 0.0, math.inf),
    ],
)
def test_divide(a: float, b: float, expected: float) -> None:
    assert divide(a, b) == expected


def test_divide_nan() -> None:
    assert math.isnan(divide(0.0, 0.0))
    assert math.isnan(divide(math.nan, 0.0))
