import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name.replace("_", " ").title().replace(" ", "")

    __repr__ = __str__


def format_number(value: float) -> str:
    """Six significant digits, like a C++ stream prints a double"""
    return f"{value:g}"
