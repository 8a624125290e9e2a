"""Compares eval_expression with python's own eval on random arithmetic strings"""
import math
import random
import re
import string
import warnings
from typing import Callable, Optional

from rpncalc.errors import EvalError
from rpncalc.runtime import eval_expression

warnings.filterwarnings("ignore")

ALPHABET = string.digits + ".()+-*/ "

# shapes that mean something else in python or here
SKIPPED_PATTERNS = [
    re.compile(r"\*\s*\*"),  # power, 10**4
    re.compile(r"/\s*/"),  # int division, 10 // 3
    re.compile(r"[\d.]\s+[\d.]"),  # "1 2" is one number here
    re.compile(r"(?<![\d.])0\d"),  # leading zeros are a syntax error in python
]


def outcome(fn: Callable[[str], float], code: str) -> Optional[float]:
    """Result as float, None for any failure"""
    try:
        return float(fn(code))
    except ZeroDivisionError:
        return math.inf  # sign is not compared, see agree()
    except (EvalError, SyntaxError, TypeError, ValueError):
        return None


def agree(mine: Optional[float], python: Optional[float]) -> bool:
    if mine is None or python is None:
        return mine is python
    if math.isinf(python):
        # python raised ZeroDivisionError
        return math.isinf(mine) or math.isnan(mine)
    return math.isclose(mine, python, abs_tol=1e-9)


if __name__ == "__main__":
    while True:
        code = "".join(random.choices(ALPHABET, k=10))
        if any(p.search(code) for p in SKIPPED_PATTERNS):
            continue

        mine = outcome(eval_expression, code)
        python = outcome(eval, code)
        if not agree(mine, python):
            print(f"{code!r}\npy: {python}\nmy: {mine}\n\n")
