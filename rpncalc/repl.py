import argparse
import logging
import sys
from typing import Iterable, Iterator, Optional, TextIO

from rpncalc.config import ReplConfig
from rpncalc.errors import EvalError
from rpncalc.runtime import evaluate
from rpncalc.tokenizer import format_postfix, tokenize
from rpncalc.utils import format_result

logger = logging.getLogger(__name__)


def run(lines: Iterable[str], out: TextIO, config: ReplConfig) -> int:
    """Evaluates every line until the sentinel, returns the number of failed expressions"""
    failed = 0
    for line in lines:
        code = line.rstrip("\r\n")
        if code.strip() == config.sentinel:
            break

        try:
            tokens = tokenize(code)
            if config.show_postfix:
                print(f"postfix: {format_postfix(tokens)}", file=out)
            result = evaluate(tokens, code=code)
        except EvalError as e:
            logger.debug("Failed to evaluate %r: %s", code, e.kind)
            print(f"Error: {e}", file=out)
            failed += 1
            continue

        print(f"{code} = {format_result(result)}", file=out)
    return failed


def _interactive_lines(prompt: str) -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def _parse_args(argv: Optional[list[str]]) -> ReplConfig:
    defaults = ReplConfig()
    parser = argparse.ArgumentParser(description="Evaluate arithmetic expressions, one per line")
    parser.add_argument("--prompt", default=defaults.prompt, help="prompt shown on an interactive terminal")
    parser.add_argument("--sentinel", default=defaults.sentinel, help="input line that ends the session")
    parser.add_argument(
        "--show-postfix",
        dest="show_postfix",
        action="store_true",
        default=defaults.show_postfix,
        help="print the postfix form of every expression",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    return ReplConfig(
        prompt=args.prompt,
        sentinel=args.sentinel,
        show_postfix=args.show_postfix,
        log_level=args.log_level,
    )


def main(argv: Optional[list[str]] = None) -> None:
    config = _parse_args(argv)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    lines: Iterable[str] = _interactive_lines(config.prompt) if sys.stdin.isatty() else sys.stdin
    failed = run(lines, sys.stdout, config)
    logger.info("Session finished, %d expression(s) failed", failed)


if __name__ == "__main__":
    main()
