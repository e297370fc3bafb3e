import argparse
import logging
import sys
from typing import Optional, Sequence

from arithmetic import __version__
from arithmetic.environment import Environment
from arithmetic.errors import ExpressionSyntaxError
from arithmetic.evaluator import Assignment, Evaluator
from arithmetic.utils import format_number

logger = logging.getLogger(__name__)

TITLE = "=== Arithmetic Expression Evaluator ==="
TERMINAL_WIDTH = 80
MENU = [
    "1. Evaluate an expression (e.g., 3+5*2)",
    "2. Assign a variable (e.g., x=10)",
    "3. Exit",
]


def print_title() -> None:
    padding = (TERMINAL_WIDTH - len(TITLE)) // 2
    print(" " * padding + TITLE)
    print()


def report(evaluator: Evaluator, code: str, prefix: str = "Result: ") -> bool:
    try:
        outcome = evaluator.evaluate(code)
    except ExpressionSyntaxError as e:
        print(e, file=sys.stderr)
        return False

    if isinstance(outcome, Assignment):
        print(outcome)
    else:
        print(prefix + format_number(outcome))
    return True


def menu_loop(evaluator: Evaluator) -> int:
    print_title()
    for line in MENU:
        print(line)

    while True:
        try:
            choice = input("\nEnter your choice (1-3): ").strip()
            if choice == "1":
                report(evaluator, input("Enter expression: "))
            elif choice == "2":
                report(evaluator, input("Enter assignment (e.g., x=10): "))
            elif choice == "3":
                print("Exiting...")
                return 0
            else:
                print("Invalid choice! Please try again.")
        except EOFError:
            print()
            logger.debug("Input closed, leaving the menu")
            return 0


def print_variables(environment: Environment) -> None:
    for name, value in environment.items():
        print(f"{name} = {format_number(value)}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arithmetic",
        description="Evaluate arithmetic expressions and assign variables",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="expressions or assignments to evaluate in order; starts the interactive menu when omitted",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: %(default)s)",
    )
    parser.add_argument(
        "--vars",
        action="store_true",
        help="print every variable after the expressions have been evaluated",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    environment = Environment()
    evaluator = Evaluator(environment)
    if not args.expressions:
        return menu_loop(evaluator)

    ok = True
    for code in args.expressions:
        ok = report(evaluator, code, prefix="") and ok
    if args.vars:
        print_variables(environment)
    return 0 if ok else 1
