import enum
import math


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def format_result(value: float) -> str:
    """11.0 -> '11', 0.5 -> '0.5', inf -> 'inf'"""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)
