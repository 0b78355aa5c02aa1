import argparse
import logging
import sys
from typing import Optional, Sequence

from expressions.errors import InvalidExpression
from expressions.evaluator import ExpressionEvaluator
from expressions.utils import LETTERS
from expressions.variables import ConsoleValueSource, MappingValueSource


def _parse_var(s: str) -> tuple[str, float]:
    name, sep, value = s.partition("=")
    name = name.strip()
    if not sep or not name or not all(c in LETTERS for c in name):
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE with a letters-only name, got {s!r}")
    try:
        return name, float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"value for {name} is not a number: {value!r}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate an arithmetic expression with variables.")
    parser.add_argument("expression", nargs="?", help="Expression to evaluate; prompted for when omitted.")
    parser.add_argument(
        "--var",
        dest="vars",
        action="append",
        type=_parse_var,
        default=[],
        metavar="NAME=VALUE",
        help="Value for a variable; others are asked for interactively. Can be repeated.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log evaluation steps to stderr.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    source = MappingValueSource(dict(args.vars), fallback=ConsoleValueSource())
    evaluator = ExpressionEvaluator(value_source=source)

    expression = args.expression
    if expression is None:
        try:
            expression = input("Enter an expression: ")
        except EOFError:
            print("No expression given", file=sys.stderr)
            return 1

    try:
        result = evaluator.evaluate(expression)
    except InvalidExpression as e:
        print(e, file=sys.stderr)
        return 1

    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
