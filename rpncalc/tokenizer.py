import enum
import logging
from collections import deque
from dataclasses import dataclass
from typing import Optional

from rpncalc.errors import ErrorKind, EvalError
from rpncalc.operators import Operator, lookup
from rpncalc.utils import PrintableEnum, format_result

logger = logging.getLogger(__name__)


class TokenKind(PrintableEnum):
    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    BRACKET_OPEN = enum.auto()
    # scan-only marker for "a group was just closed", never queued
    BRACKET_CLOSE = enum.auto()


@dataclass
class Token:
    kind: TokenKind
    value: Optional[float] = None
    operator: Optional[Operator] = None

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return format_result(self.value)  # type: ignore
        elif self.kind is TokenKind.OPERATOR:
            return str(self.operator)
        elif self.kind is TokenKind.BRACKET_OPEN:
            return "("
        else:
            return ")"


BRACKET_OPEN = Token(kind=TokenKind.BRACKET_OPEN)
BRACKET_CLOSE = Token(kind=TokenKind.BRACKET_CLOSE)


def _is_valid_in_number(s: str) -> bool:
    return (s.isascii() and s.isdigit()) or s == "."


def _starts_operand(last_token: Optional[Token]) -> bool:
    """True where a + or - can only be a sign: at the start of the (sub)expression or after an operator"""
    return last_token is None or last_token.kind in (TokenKind.OPERATOR, TokenKind.BRACKET_OPEN)


def _pops_before(stacked: Operator, incoming: Operator) -> bool:
    # >= keeps operators of the same tier left-associative
    return stacked.tier >= incoming.tier


def tokenize(code: str) -> list[Token]:
    """Scans infix code and returns its tokens in postfix order (shunting-yard)"""
    holding: deque[Token] = deque()
    output: list[Token] = []
    digits = ""
    digits_start_idx = 0
    last_token: Optional[Token] = None

    def flush_digits() -> None:
        nonlocal digits, last_token
        if not digits:
            return
        try:
            value = float(digits)
        except ValueError:
            raise EvalError(
                ErrorKind.NUMBER_PARSE_ERROR,
                f"Can't parse number: {digits!r}",
                code=code,
                error_char_idx=digits_start_idx,
            ) from None
        output.append(Token(kind=TokenKind.NUMBER, value=value))
        last_token = output[-1]
        digits = ""

    for i, c in enumerate(code):
        if _is_valid_in_number(c):
            if c == "." and "." in digits:
                raise EvalError(
                    ErrorKind.DUPLICATE_DECIMAL,
                    f"Second decimal point in number {digits!r}",
                    code=code,
                    error_char_idx=i,
                )
            if not digits:
                digits_start_idx = i
            digits += c
            continue

        if c.isspace():
            # whitespace does not end a number: "3 . 5" reads as "3.5"
            continue

        flush_digits()

        if c == "(":
            holding.append(BRACKET_OPEN)
            last_token = BRACKET_OPEN
        elif c == ")":
            while holding and holding[-1].kind is not TokenKind.BRACKET_OPEN:
                output.append(holding.pop())
            if not holding:
                raise EvalError(
                    ErrorKind.MISMATCHED_PARENTHESIS,
                    "Closing bracket without an opening one",
                    code=code,
                    error_char_idx=i,
                )
            holding.pop()
            last_token = BRACKET_CLOSE
        else:
            operator = lookup(c)
            if operator is None:
                raise EvalError(
                    ErrorKind.INVALID_CHARACTER,
                    f"Unexpected character: {c!r}",
                    code=code,
                    error_char_idx=i,
                )
            if operator.symbol in "+-" and _starts_operand(last_token):
                operator = operator.as_unary()
            # a sign pops an earlier sign too, so "- -3" runs out of operands
            while (
                holding
                and holding[-1].kind is TokenKind.OPERATOR
                and _pops_before(holding[-1].operator, operator)  # type: ignore
            ):
                output.append(holding.pop())
            last_token = Token(kind=TokenKind.OPERATOR, operator=operator)
            holding.append(last_token)

    flush_digits()

    # unclosed brackets are queued as well and rejected by the evaluator
    while holding:
        output.append(holding.pop())

    logger.debug("%r -> %s", code, format_postfix(output))
    return output


def format_postfix(tokens: list[Token]) -> str:
    """[3, 4, 2, *, +] => '3 4 2 * +'"""
    return " ".join(str(t) for t in tokens)
