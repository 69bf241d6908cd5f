from typing import Callable, Union

Number = Union[int, float]


def multiply(factor: Number) -> Callable[[Number], Number]:
    """Return a function that multiplies its argument by ``factor``.

        >>> multiply(3)(5)
        15
    """

    def apply(value: Number) -> Number:
        return value * factor

    return apply
