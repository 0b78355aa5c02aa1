import math
import random
import re
import warnings

from expressions.errors import InvalidExpression
from expressions.evaluator import ExpressionEvaluator
from expressions.variables import MappingValueSource

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return float(eval(code))
    except ZeroDivisionError:
        return "division by zero"
    except Exception as e:
        return str(e)


def eval_my(evaluator: ExpressionEvaluator, code: str) -> float | str:
    try:
        return evaluator.evaluate(code)
    except InvalidExpression as e:
        return str(e)


if __name__ == "__main__":
    alphabet = "0123456789" + ".()+-*/ "
    evaluator = ExpressionEvaluator(value_source=MappingValueSource({}))

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int division (10 // 3)

        if re.findall(r"\b0\d", code):
            continue  # python rejects leading zeros

        if re.findall(r"(^|[-+*/(])\s*\+", code):
            continue  # no unary plus here

        res_py = eval_py(code)
        res_my = eval_my(evaluator, code)
        if isinstance(res_py, float) and isinstance(res_my, float):
            if math.isclose(res_my, res_py) or (math.isnan(res_my) and math.isnan(res_py)):
                continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if res_py == "division by zero" and isinstance(res_my, float) and not math.isfinite(res_my):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
