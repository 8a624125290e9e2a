import bisect
import dataclasses
import math
from dataclasses import dataclass
from typing import Callable, Optional

# binds tighter than any binary operator
UNARY_PRECEDENCE = 255

Reducer = Callable[[list[float]], float]


def _div(operands: list[float]) -> float:
    a, b = operands[1], operands[0]
    if b == 0.0:
        # python raises on float division by zero, IEEE-754 does not
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


@dataclass(frozen=True)
class Operator:
    symbol: str
    argc: int
    precedence: int
    reducer: Reducer = dataclasses.field(repr=False, compare=False)

    @property
    def tier(self) -> int:
        """Binding strength used for reordering: + and - share a tier, as do * and /"""
        return (self.precedence + 1) // 2

    @property
    def is_unary(self) -> bool:
        return self.argc == 1

    def as_unary(self) -> "Operator":
        """Copy of the operator in prefix position. Table entries stay untouched."""
        return dataclasses.replace(self, argc=1, precedence=UNARY_PRECEDENCE)

    def resolve(self, operands: list[float]) -> float:
        """Operands come in pop order: operands[0] is the most recently pushed one"""
        return self.reducer(operands)

    def __str__(self) -> str:
        return f"u{self.symbol}" if self.is_unary else self.symbol


# sorted by symbol, looked up by bisection
OPERATORS: tuple[Operator, ...] = tuple(
    sorted(
        [
            Operator(symbol="/", argc=2, precedence=4, reducer=_div),
            Operator(symbol="*", argc=2, precedence=3, reducer=lambda ops: ops[1] * ops[0]),
            Operator(symbol="+", argc=2, precedence=2, reducer=lambda ops: ops[1] + ops[0]),
            Operator(symbol="-", argc=2, precedence=1, reducer=lambda ops: ops[1] - ops[0]),
        ],
        key=lambda op: op.symbol,
    )
)
_SYMBOLS = [op.symbol for op in OPERATORS]


def lookup(symbol: str) -> Optional[Operator]:
    i = bisect.bisect_left(_SYMBOLS, symbol)
    if i < len(_SYMBOLS) and _SYMBOLS[i] == symbol:
        return OPERATORS[i]
    return None
