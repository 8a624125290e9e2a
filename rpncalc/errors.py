import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from rpncalc.utils import PrintableEnum

if TYPE_CHECKING:
    from rpncalc.tokenizer import Token


class ErrorKind(PrintableEnum):
    INVALID_CHARACTER = enum.auto()
    UNEXPECTED_TOKEN = enum.auto()
    DUPLICATE_DECIMAL = enum.auto()
    NUMBER_PARSE_ERROR = enum.auto()
    MISMATCHED_PARENTHESIS = enum.auto()
    NOT_ENOUGH_ARGUMENTS = enum.auto()
    NO_RESULT = enum.auto()


@dataclass
class EvalError(Exception):
    kind: ErrorKind
    errmsg: str
    code: str
    error_char_idx: Optional[int] = None
    token: Optional["Token"] = None

    def __str__(self) -> str:
        header = f"{self.kind}: {self.errmsg}"
        if self.error_char_idx is None:
            return header
        excerpt, caret_col = _excerpt(self.code.rstrip("\r\n"), self.error_char_idx)
        return "\n".join([header, excerpt, " " * caret_col + "^"])


def _excerpt(code: str, idx: int, radius: int = 10) -> tuple[str, int]:
    """Cuts code down to `radius` chars around idx, returns the excerpt and the column of idx in it"""
    start = max(0, idx - radius)
    end = min(len(code), idx + radius)
    prefix = "..." if start > 0 else ""
    suffix = "..." if end < len(code) else ""
    return prefix + code[start:end] + suffix, len(prefix) + idx - start
