import logging

from rpncalc.errors import ErrorKind, EvalError
from rpncalc.tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)


def eval_expression(code: str) -> float:
    return evaluate(tokenize(code), code=code)


def evaluate(tokens: list[Token], code: str = "") -> float:
    """Reduces tokens in postfix order to a single value"""
    stack: list[float] = []
    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            stack.append(token.value)  # type: ignore
        elif token.kind is TokenKind.OPERATOR:
            operator = token.operator
            if len(stack) < operator.argc:  # type: ignore
                raise EvalError(
                    ErrorKind.NOT_ENOUGH_ARGUMENTS,
                    f"Operator {operator} expects {operator.argc} operand(s), {len(stack)} available",
                    code=code,
                    token=token,
                )
            if operator.is_unary:
                if operator.symbol == "-":
                    stack.append(-stack.pop())
                # unary plus is identity
            else:
                operands = [stack.pop() for _ in range(operator.argc)]
                stack.append(operator.resolve(operands))
        else:
            raise EvalError(
                ErrorKind.UNEXPECTED_TOKEN,
                f"Unexpected token in postfix queue: {token}",
                code=code,
                token=token,
            )

    if not stack:
        raise EvalError(ErrorKind.NO_RESULT, "Expression evaluates to nothing", code=code)
    if len(stack) > 1:
        logger.debug("%d values left on the stack, using the topmost", len(stack))
    return stack[-1]
