import enum
from dataclasses import dataclass

from arithmetic.utils import PrintableEnum


class ErrorKind(PrintableEnum):
    INVALID_NUMBER = enum.auto()
    UNDEFINED_VARIABLE = enum.auto()
    UNMATCHED_PARENTHESIS = enum.auto()
    UNEXPECTED_CHARACTER = enum.auto()
    DIVISION_BY_ZERO = enum.auto()
    INVALID_ASSIGNMENT = enum.auto()
    NESTING_TOO_DEEP = enum.auto()


@dataclass
class ExpressionSyntaxError(Exception):
    kind: ErrorKind
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"Error at position {self.error_char_idx}: {self.errmsg}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )
