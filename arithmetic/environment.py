from typing import Iterator


class Environment:
    """Variable table shared by every evaluation of a session.

    Assignment is the only way to change it: values are inserted or
    overwritten, never removed. Not safe for concurrent writers.
    """

    def __init__(self) -> None:
        self._values: dict[str, float] = dict()

    def get(self, name: str) -> tuple[float, bool]:
        if name in self._values:
            return self._values[name], True
        return 0.0, False

    def set(self, name: str, value: float) -> None:
        self._values[name] = value

    def items(self) -> Iterator[tuple[str, float]]:
        yield from sorted(self._values.items())

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Environment({self._values!r})"
