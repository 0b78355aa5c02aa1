from expressions.errors import NumberFormatError, UnexpectedEndOfExpression
from expressions.utils import is_letter, is_valid_in_number


class Tokenizer:
    """Character cursor over an expression with all whitespace removed."""

    def __init__(self, expression: str) -> None:
        self._raw_len = len(expression)
        kept = [(c, i) for i, c in enumerate(expression) if not c.isspace()]
        self.code = "".join(c for c, _ in kept)
        # index in the raw expression for every char of self.code
        self._raw_idx = [i for _, i in kept]
        self.pos = 0

    @property
    def position(self) -> int:
        """Cursor position in the raw expression."""
        return self.raw_position(self.pos)

    def raw_position(self, pos: int) -> int:
        if pos < len(self._raw_idx):
            return self._raw_idx[pos]
        return self._raw_len

    def has_next(self) -> bool:
        return self.pos < len(self.code)

    def peek(self) -> str:
        if not self.has_next():
            raise UnexpectedEndOfExpression("Unexpected end of expression", position=self.position)
        return self.code[self.pos]

    def next(self) -> str:
        c = self.peek()
        self.pos += 1
        return c

    def parse_number(self) -> float:
        start = self.pos
        while self.has_next() and is_valid_in_number(self.peek()):
            self.pos += 1
        lexeme = self.code[start : self.pos]
        if lexeme.count(".") > 1 or not any(c.isdigit() for c in lexeme):
            raise NumberFormatError(f"Invalid number literal: {lexeme!r}", position=self.raw_position(start))
        return float(lexeme)

    def parse_name(self) -> str:
        start = self.pos
        while self.has_next() and is_letter(self.peek()):
            self.pos += 1
        return self.code[start : self.pos]
