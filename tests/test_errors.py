import pytest

from rpncalc.errors import ErrorKind, EvalError, _excerpt
from rpncalc.runtime import eval_expression
from rpncalc.tokenizer import TokenKind


@pytest.mark.parametrize(
    "code, expected_kind",
    [
        pytest.param("3 . 5 . 2", ErrorKind.DUPLICATE_DECIMAL),
        pytest.param("1.2.3", ErrorKind.DUPLICATE_DECIMAL),
        pytest.param(")", ErrorKind.MISMATCHED_PARENTHESIS),
        pytest.param("(1 + 2))", ErrorKind.MISMATCHED_PARENTHESIS),
        pytest.param("+", ErrorKind.NOT_ENOUGH_ARGUMENTS),
        pytest.param("-", ErrorKind.NOT_ENOUGH_ARGUMENTS),
        pytest.param("1 +", ErrorKind.NOT_ENOUGH_ARGUMENTS),
        pytest.param("* 2", ErrorKind.NOT_ENOUGH_ARGUMENTS),
        # a second sign pops the first one before any operand is queued
        pytest.param("- -3", ErrorKind.NOT_ENOUGH_ARGUMENTS),
        pytest.param("+-3", ErrorKind.NOT_ENOUGH_ARGUMENTS),
        pytest.param("3 # 4", ErrorKind.INVALID_CHARACTER),
        pytest.param("2 ^ 3", ErrorKind.INVALID_CHARACTER),
        pytest.param("x", ErrorKind.INVALID_CHARACTER),
        pytest.param("\u0663", ErrorKind.INVALID_CHARACTER),
        pytest.param("1e5", ErrorKind.INVALID_CHARACTER),
        pytest.param(".", ErrorKind.NUMBER_PARSE_ERROR),
        pytest.param(". + 1", ErrorKind.NUMBER_PARSE_ERROR),
        pytest.param("", ErrorKind.NO_RESULT),
        pytest.param("   ", ErrorKind.NO_RESULT),
        pytest.param("()", ErrorKind.NO_RESULT),
        # unclosed brackets only surface during evaluation
        pytest.param("(1 + 2", ErrorKind.UNEXPECTED_TOKEN),
        pytest.param("(", ErrorKind.UNEXPECTED_TOKEN),
    ],
)
def test_error_kind(code: str, expected_kind: ErrorKind) -> None:
    with pytest.raises(EvalError) as exc_info:
        eval_expression(code)
    assert exc_info.value.kind is expected_kind


def test_unexpected_token_carries_token() -> None:
    with pytest.raises(EvalError) as exc_info:
        eval_expression("(2 * 3")
    assert exc_info.value.token is not None
    assert exc_info.value.token.kind is TokenKind.BRACKET_OPEN


def test_error_points_at_character() -> None:
    with pytest.raises(EvalError) as exc_info:
        eval_expression("3 # 4")
    assert exc_info.value.error_char_idx == 2
    assert str(exc_info.value).splitlines() == [
        "INVALID_CHARACTER: Unexpected character: '#'",
        "3 # 4",
        "  ^",
    ]


def test_error_excerpt_is_shortened() -> None:
    code = "1 + 2 + 3 + 4 + 5 + 6 $ 7 + 8 + 9 + 10 + 11"
    with pytest.raises(EvalError) as exc_info:
        eval_expression(code)
    excerpt, caret = str(exc_info.value).splitlines()[1:]
    assert excerpt.startswith("...") and excerpt.endswith("...")
    assert excerpt[caret.index("^")] == "$"


def test_error_without_position() -> None:
    with pytest.raises(EvalError) as exc_info:
        eval_expression("")
    assert str(exc_info.value) == "NO_RESULT: Expression evaluates to nothing"


@pytest.mark.parametrize(
    "code, idx, expected_excerpt, expected_col",
    [
        pytest.param("1 + x", 4, "1 + x", 4),
        pytest.param("0123456789abcdefghij", 15, "...56789abcdefghij", 13),
        pytest.param("0123456789abcdefghijklmnop", 12, "...23456789abcdefghijkl...", 13),
    ],
)
def test_excerpt(code: str, idx: int, expected_excerpt: str, expected_col: int) -> None:
    assert _excerpt(code, idx) == (expected_excerpt, expected_col)
