"""Calculator with arithmetic and string helpers.

Everything here is pure except `Calculator.value`, a single stored number
that callers may set and read back.
"""

import math

from .errors import DivisionByZeroError, NegativeFactorialError, NegativeSquareRootError


class Calculator:
    """Arithmetic, predicate and string helpers plus one stored value.

    Attributes:
        value (float): A stored number. Starts at ``0.0``.
    """

    def __init__(self) -> None:
        self.value: float = 0.0

    # --- Arithmetic ---

    def add(self, a: int, b: int) -> int:
        """Return ``a + b``."""
        return a + b

    def subtract(self, a: int, b: int) -> int:
        """Return ``a - b``."""
        return a - b

    def multiply(self, a: int, b: int) -> int:
        """Return ``a * b``."""
        return a * b

    def divide(self, a: float, b: float) -> float:
        """Divide `a` by `b`.

        Raises:
            DivisionByZeroError: If `b` is zero.
        """
        if b == 0:
            raise DivisionByZeroError
        return a / b

    # --- Predicates ---

    def is_positive(self, number: int) -> bool:
        return number > 0

    def is_even(self, number: int) -> bool:
        return number % 2 == 0

    def is_empty(self, text: str) -> bool:
        return text == ""

    # --- Strings ---

    def concatenate(self, first: str, second: str) -> str:
        return first + second

    def to_upper_case(self, text: str) -> str:
        return text.upper()

    def get_length(self, text: str) -> int:
        return len(text)

    # --- Advanced ---

    def factorial(self, n: int) -> int:
        """Return ``n!`` computed with a loop.

        Args:
            n: A non-negative integer.

        Returns:
            int: The factorial of `n` (``0! == 1``).

        Raises:
            NegativeFactorialError: If `n` is negative.
        """
        if n < 0:
            raise NegativeFactorialError(n)
        result = 1
        for i in range(2, n + 1):
            result *= i
        return result

    def square_root(self, x: float) -> float:
        """Return the square root of `x`.

        Raises:
            NegativeSquareRootError: If `x` is negative.
        """
        if x < 0:
            raise NegativeSquareRootError(x)
        return math.sqrt(x)
