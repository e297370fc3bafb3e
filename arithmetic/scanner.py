import string

from arithmetic.errors import ErrorKind, ExpressionSyntaxError

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
WHITESPACE_TABLE = str.maketrans("", "", string.whitespace)


def is_valid_in_number(s: str) -> bool:
    return s in DIGITS or s == "."


def is_valid_in_identifier(s: str) -> bool:
    return s in LETTERS or s in DIGITS or s == "_"


def strip_whitespace(code: str) -> str:
    """Removes every whitespace character, including ones inside literals: "1 2" -> "12".

    Only ASCII whitespace counts; a no-break space is kept.
    """
    return code.translate(WHITESPACE_TABLE)


class Cursor:
    """Read position over a whitespace-free buffer, owned by a single evaluation"""

    def __init__(self, code: str) -> None:
        self.code = code
        self.pos = 0
        self.depth = 0  # open parentheses around the current position

    def peek(self) -> str:
        return self.code[self.pos] if self.pos < len(self.code) else ""

    def consume(self) -> str:
        current = self.peek()
        self.pos += 1  # may step one past the end
        return current

    def error(self, kind: ErrorKind, errmsg: str, pos: int | None = None) -> ExpressionSyntaxError:
        return ExpressionSyntaxError(
            kind=kind,
            errmsg=errmsg,
            code=self.code,
            error_char_idx=self.pos if pos is None else pos,
        )

    def scan_number(self) -> float:
        start = self.pos
        while is_valid_in_number(self.peek()):
            self.consume()
        lexeme = self.code[start : self.pos]
        try:
            return float(lexeme)
        except ValueError:
            raise self.error(ErrorKind.INVALID_NUMBER, f"Invalid number: {lexeme}", pos=start) from None

    def scan_identifier(self) -> str:
        start = self.pos
        while is_valid_in_identifier(self.peek()):
            self.consume()
        return self.code[start : self.pos]
