from __future__ import annotations

import argparse
import json
import sys

from . import config
from .api import clear_cache, evaluate
from .config import VERSION
from .logging_config import get_logger, setup_logging
from .types import EvalResult

logger = get_logger("cli")

HEALTH_CHECK_CASES = [
    ("2 + 2", 4.0),
    ("2 + 2 * 3", 8.0),
    ("2 ^ 3 ^ 2", 512.0),
    ("5!", 120.0),
    ("-7 % 3", 2.0),
]


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running Kalkulator Pratt health check...")
    print("-" * 50)

    try:
        import numpy

        print(f"[OK] NumPy {numpy.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] NumPy import failed: {e}")
        checks_failed += 1

    try:
        import sympy

        print(f"[OK] SymPy {sympy.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    for expression, expected in HEALTH_CHECK_CASES:
        res = evaluate(expression)
        if res.ok and res.value == expected:
            print(f"[OK] {expression} = {res.result}")
            checks_passed += 1
        else:
            print(f"[FAIL] {expression}: expected {expected}, got {res.result or res.error}")
            checks_failed += 1

    print("-" * 50)
    print(f"Checks passed: {checks_passed}, failed: {checks_failed}")
    if checks_failed:
        print("\n[FAIL] Some health checks failed")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(res: EvalResult, output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Evaluation result
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print("Error:", res.error)
        return
    print(res.result)
    if res.exact is not None and res.exact != res.result:
        print("Exact:", res.exact)


def print_help_text() -> None:
    """Print help text for REPL commands."""
    help_text = f"""Kalkulator Pratt version {VERSION}

Enter one arithmetic expression per line:
  2 + 2 * 3          precedence: 8
  2 ^ 3 ^ 2          '^' groups from the right: 512
  -7 % 3             Euclidean remainder: 2
  5!                 factorial: 120
  sin(pi/2), ln(exp(1)), sqrt(16), deg(pi), rad(180), log(1000)

Operators: + - * / % ^ !  and parentheses
Functions: sin cos tan asin acos atan deg rad exp ln log sqrt
Constants: pi

Commands: help, quit, exit (or Ctrl-D)
"""
    print(help_text)


def repl_loop(output_format: str = "human", exact: bool = False) -> None:
    """Interactive loop: read a line, evaluate it, print the value or the error."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    interactive = sys.stdin.isatty()
    prompt = "> " if interactive else ""
    if interactive:
        print(f"Kalkulator Pratt {VERSION} - type 'help' for commands, 'quit' to exit.")

    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            if interactive:
                print()
            break

        line = line.strip()
        if not line:
            continue
        if line in ("quit", "exit"):
            break
        if line == "help":
            print_help_text()
            continue

        try:
            print_result_pretty(evaluate(line, exact=exact), output_format)
        except Exception as e:
            logger.error(f"Unexpected error in REPL: {e}", exc_info=True)
            print("An error occurred. Please check your input and try again.")


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Kalkulator Pratt CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="kalkulator-pratt", description="Evaluate arithmetic expressions"
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        help="Also show a closed form of the result when one is recognized",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "--implicit-multiplication",
        action="store_true",
        help="Read '2(3)' as '2*(3)' and '2pi' as '2*pi'",
    )
    parser.add_argument(
        "--strict-parens",
        action="store_true",
        help="Reject ')' without a matching '('",
    )
    parser.add_argument(
        "--max-depth", type=int, help="Maximum expression nesting depth"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)
    if args.implicit_multiplication:
        config.IMPLICIT_MULTIPLICATION = True
    if args.strict_parens:
        config.STRICT_PARENS = True
    if args.max_depth and args.max_depth > 0:
        config.MAX_NESTING_DEPTH = int(args.max_depth)
    clear_cache()

    if args.version:
        print(f"kalkulator-pratt {VERSION}")
        return 0

    if args.health_check:
        return _health_check()

    if args.eval_expr is not None:
        res = evaluate(args.eval_expr, exact=args.exact)
        print_result_pretty(res, args.format)
        return 0 if res.ok else 1

    repl_loop(output_format=args.format, exact=args.exact)
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
