import enum
import string


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
OPERATORS = frozenset("+-*/")


def is_letter(c: str) -> bool:
    return c in LETTERS


def is_valid_in_number(c: str) -> bool:
    return c in DIGITS or c == "."


def is_operator(c: str) -> bool:
    return c in OPERATORS
