"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Calculator errors
# ============================================================================


class CalculatorError(DomainError, ValueError):
    """Raised when a calculator operation receives an invalid argument."""


class DivisionByZeroError(CalculatorError):
    """Raised when dividing by zero."""

    def __init__(self) -> None:
        super().__init__("Division by zero")


class NegativeFactorialError(CalculatorError):
    """Raised when the factorial of a negative number is requested."""

    def __init__(self, n: int) -> None:
        super().__init__("Factorial is not defined for negative numbers")
        self.n = n


class NegativeSquareRootError(CalculatorError):
    """Raised when the square root of a negative number is requested."""

    def __init__(self, x: float) -> None:
        super().__init__("Square root is not defined for negative numbers")
        self.x = x
