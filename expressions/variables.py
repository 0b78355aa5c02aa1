import logging
from typing import Callable, Iterable, Mapping, Optional, Protocol, runtime_checkable

from expressions.errors import VariableInputError
from expressions.utils import is_letter

logger = logging.getLogger(__name__)


@runtime_checkable
class ValueSource(Protocol):
    def get_value(self, name: str) -> float:
        """Returns the value for variable ``name``; raises VariableInputError if none can be obtained."""
        ...


class ConsoleValueSource:
    """Asks the user for every value, one line per variable."""

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None) -> None:
        self._input = input_fn

    def get_value(self, name: str) -> float:
        read_line = self._input if self._input is not None else input
        try:
            line = read_line(f"Enter value for variable {name}: ")
        except EOFError:
            raise VariableInputError(f"No value supplied for variable {name}")
        try:
            return float(line.strip())
        except ValueError:
            raise VariableInputError(f"Value {line.strip()!r} for variable {name} is not a number")


class MappingValueSource:
    def __init__(self, values: Mapping[str, float], fallback: Optional[ValueSource] = None) -> None:
        self._values = dict(values)
        self._fallback = fallback

    def get_value(self, name: str) -> float:
        if name in self._values:
            return self._values[name]
        elif self._fallback is not None:
            return self._fallback.get_value(name)
        else:
            raise VariableInputError(f"No value supplied for variable {name}")


def find_variables(expression: str) -> list[str]:
    """Unique letter runs of ``expression`` in order of first appearance."""
    names: dict[str, None] = dict()
    i = 0
    while i < len(expression):
        if is_letter(expression[i]):
            name_end_idx = i + 1
            while name_end_idx < len(expression) and is_letter(expression[name_end_idx]):
                name_end_idx += 1
            names[expression[i:name_end_idx]] = None
            i = name_end_idx
        else:
            i += 1
    return list(names)


def resolve_variables(names: Iterable[str], variables: dict[str, float], source: ValueSource) -> None:
    for name in names:
        if name in variables:
            continue
        logger.debug("Requesting value for variable %s", name)
        try:
            variables[name] = float(source.get_value(name))
        except VariableInputError:
            raise
        except Exception as e:
            raise VariableInputError(f"Could not get a number for variable {name}: {e}") from e
        logger.debug("Variable %s = %s", name, variables[name])
