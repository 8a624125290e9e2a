from rpncalc.errors import EvalError
from rpncalc.runtime import evaluate
from rpncalc.tokenizer import format_postfix, tokenize
from rpncalc.utils import format_result

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "80225/+2",
    "7/6/2000",
    "10 / 5/ 2",
    "8 - 2 + 1",
    "1 / 0",
    "(1 + 2",
    "3 . 5 . 2",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except EvalError as e:
        print(e)
        continue

    print(f"postfix: {format_postfix(tokens)}")

    try:
        result = evaluate(tokens, code=code)
    except EvalError as e:
        print(e)
        continue
    print(f"result: {format_result(result)}")
