import argparse
import logging
import os
import sys

from rich.console import Console

from .repl import (
    DEFAULT_HISTORY_FILE,
    ConverterShell,
    ExpressionError,
    format_conversion,
    load_history,
    process_expression,
)

LOG_LEVEL_ENV = "EXPRESSION_CONVERTER_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expression-converter",
        description="Convert infix expressions to prefix and postfix notation.",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to convert. Starts an interactive session when omitted.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=os.environ.get(LOG_LEVEL_ENV, "ERROR").upper(),
        help=f"Logging verbosity (default from ${LOG_LEVEL_ENV}, else ERROR)",
    )
    parser.add_argument(
        "--history-file",
        default=DEFAULT_HISTORY_FILE,
        help="Where the interactive session keeps its readline history",
    )
    parser.add_argument(
        "--no-banner", action="store_true", help="Skip the start-up banner"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.ERROR),
        format="%(levelname)s:%(name)s:%(message)s",
    )

    console = Console(highlight=False, soft_wrap=True)
    if args.expressions:
        status = 0
        for expression in args.expressions:
            try:
                conversion = process_expression(expression.strip())
            except ExpressionError as exc:
                console.print(f"{expression}: {exc}", style="red", markup=False)
                status = 1
                continue
            console.print(format_conversion(conversion), markup=False)
        return status

    load_history(args.history_file)
    shell = ConverterShell(console)
    if not args.no_banner:
        shell.print_banner()
    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
