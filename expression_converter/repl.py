"""Console front end: reads infix lines and prints prefix and postfix forms."""

import atexit
import logging
import os
from typing import Callable, Optional

from rich.console import Console

from .balance import has_balanced_parentheses
from .reorder import Conversion, convert

try:
    import readline
except ImportError:  # pragma: no cover
    readline = None

logger = logging.getLogger(__name__)

BANNER = "\n".join(
    [
        "========================================",
        "   Expression Converter Program",
        "   Infix → Prefix & Postfix",
        "========================================",
        "",
    ]
)
PROMPT = "Enter infix: "
FAREWELL = "Thank you for using the Expression Converter!"
EXIT_COMMANDS = {"exit", "quit"}
DEFAULT_HISTORY_FILE = "~/.expression_converter_history"


class ExpressionError(ValueError):
    pass


class EmptyExpressionError(ExpressionError):
    def __init__(self):
        super().__init__("Error: Empty input. Please try again.")


class UnbalancedParenthesesError(ExpressionError):
    def __init__(self, expression: str):
        self.expression = expression
        super().__init__("Error: Unbalanced parentheses. Please try again.")


def should_exit(line: str) -> bool:
    return line.strip().lower() in EXIT_COMMANDS


def validate_expression(line: str) -> None:
    if not line:
        raise EmptyExpressionError()
    if not has_balanced_parentheses(line):
        raise UnbalancedParenthesesError(line)


def process_expression(line: str) -> Conversion:
    validate_expression(line)
    return convert(line)


def format_conversion(conversion: Conversion) -> str:
    return f"Prefix is: {conversion.prefix}\nPostfix is: {conversion.postfix}"


class ConverterShell:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False, soft_wrap=True)

    def print_banner(self):
        self.console.print(BANNER, markup=False)

    def handle(self, line: str) -> bool:
        """Process one input line. Returns False once the session should end."""
        line = line.strip()
        if should_exit(line):
            self.console.print(FAREWELL, markup=False)
            return False
        try:
            conversion = process_expression(line)
        except ExpressionError as exc:
            logger.debug(f"Rejected {line!r}: {exc}")
            self.console.print(f"{exc}\n", style="red", markup=False)
            return True
        except Exception as exc:
            logger.debug(f"Conversion failed for {line!r}", exc_info=True)
            self.console.print(
                f"Error processing expression: {exc}\n"
                "Please check your input and try again.\n",
                style="red",
                markup=False,
            )
            return True
        self.console.print(f"{format_conversion(conversion)}\n", markup=False)
        return True

    def run(self, read_line: Callable[[str], str] = input) -> None:
        while True:
            try:
                line = read_line(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                self.console.print(FAREWELL, markup=False)
                break
            if not self.handle(line):
                break


def load_history(history_file: str) -> None:
    """Restore readline history and write it back when the process exits."""
    if readline is None:
        return
    history_path = os.path.expanduser(history_file)
    if os.path.exists(history_path):
        try:
            readline.read_history_file(history_path)
        except OSError:
            logger.warning(f"Ignoring unreadable history file {history_path}")
    atexit.register(save_history, history_path)


def save_history(history_path: str) -> None:
    try:
        readline.write_history_file(history_path)
    except OSError:
        logger.warning(f"Could not write history file {history_path}")
