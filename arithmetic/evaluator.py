"""Recursive-descent evaluation of arithmetic expressions and assignments.

Grammar, loosest binding first:

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/' | '%') factor)*
    factor     := ('-' | '+')? primary
    primary    := number | identifier | '(' expression ')'

There is no separate tokenizer: every grammar level reads characters straight
off a Cursor and computes its value as it goes.
"""
import logging
import math
from dataclasses import dataclass

from arithmetic.environment import Environment
from arithmetic.errors import ErrorKind
from arithmetic.scanner import DIGITS, LETTERS, Cursor, strip_whitespace
from arithmetic.utils import format_number

logger = logging.getLogger(__name__)

# four Python frames per level, well below the default recursion limit
MAX_NESTING_DEPTH = 100


@dataclass(frozen=True)
class Assignment:
    name: str
    value: float

    def __str__(self) -> str:
        return f"{self.name} = {format_number(self.value)}"


EvalOutcome = float | Assignment


def is_assignment(code: str) -> bool:
    """Starts with a letter and has '=' somewhere; where the '=' sits is not checked"""
    return bool(code) and code[0] in LETTERS and "=" in code


class Evaluator:
    def __init__(self, environment: Environment) -> None:
        self.environment = environment

    def evaluate(self, text: str) -> EvalOutcome:
        cursor = Cursor(strip_whitespace(text))
        if is_assignment(cursor.code):
            logger.debug("Evaluating %r as assignment", cursor.code)
            return self._assignment(cursor)
        logger.debug("Evaluating %r as expression", cursor.code)
        return self._expression(cursor)

    def _assignment(self, cursor: Cursor) -> Assignment:
        name = cursor.scan_identifier()
        if cursor.peek() != "=":
            raise cursor.error(ErrorKind.INVALID_ASSIGNMENT, "Invalid assignment")
        cursor.consume()
        value = self._expression(cursor)
        self.environment.set(name, value)
        assignment = Assignment(name=name, value=value)
        logger.info("%s", assignment)
        return assignment

    def _expression(self, cursor: Cursor) -> float:
        value = self._term(cursor)
        while True:
            current = cursor.peek()
            if current == "+":
                cursor.consume()
                value += self._term(cursor)
            elif current == "-":
                cursor.consume()
                value -= self._term(cursor)
            else:
                return value

    def _term(self, cursor: Cursor) -> float:
        value = self._factor(cursor)
        while True:
            current = cursor.peek()
            if current == "*":
                cursor.consume()
                value *= self._factor(cursor)
            elif current == "/":
                op_idx = cursor.pos
                cursor.consume()
                divisor = self._factor(cursor)
                if divisor == 0:
                    raise cursor.error(ErrorKind.DIVISION_BY_ZERO, "Division by zero", pos=op_idx)
                value /= divisor
            elif current == "%":
                op_idx = cursor.pos
                cursor.consume()
                divisor = self._factor(cursor)
                if divisor == 0:
                    raise cursor.error(ErrorKind.DIVISION_BY_ZERO, "Division by zero in modulus", pos=op_idx)
                # C fmod gives NaN for an infinite dividend, math.fmod raises
                value = math.nan if math.isinf(value) else math.fmod(value, divisor)
            else:
                return value

    def _factor(self, cursor: Cursor) -> float:
        if cursor.peek() == "-":
            cursor.consume()
            return -self._primary(cursor)
        elif cursor.peek() == "+":
            cursor.consume()
        return self._primary(cursor)

    def _primary(self, cursor: Cursor) -> float:
        current = cursor.peek()
        if current in DIGITS or current == ".":
            return cursor.scan_number()
        elif current in LETTERS:
            start = cursor.pos
            name = cursor.scan_identifier()
            value, found = self.environment.get(name)
            if not found:
                raise cursor.error(ErrorKind.UNDEFINED_VARIABLE, f"Undefined variable: {name}", pos=start)
            return value
        elif current == "(":
            if cursor.depth >= MAX_NESTING_DEPTH:
                raise cursor.error(
                    ErrorKind.NESTING_TOO_DEEP, f"More than {MAX_NESTING_DEPTH} nested parentheses"
                )
            cursor.consume()
            cursor.depth += 1
            value = self._expression(cursor)
            if cursor.peek() != ")":
                raise cursor.error(ErrorKind.UNMATCHED_PARENTHESIS, "Unmatched parenthesis")
            cursor.consume()
            cursor.depth -= 1
            return value
        elif current == "":
            raise cursor.error(ErrorKind.UNEXPECTED_CHARACTER, "Unexpected end of input")
        else:
            raise cursor.error(ErrorKind.UNEXPECTED_CHARACTER, f"Unexpected character: {current}")


def evaluate(text: str, environment: Environment) -> EvalOutcome:
    return Evaluator(environment).evaluate(text)
