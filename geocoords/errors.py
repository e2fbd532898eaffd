"""Exceptions raised by coordinate construction and conversion."""

from typing import Any


class CoordinateError(Exception):
    """Base class for all geocoords errors."""


class DomainError(CoordinateError, ValueError):
    """A coordinate field is outside its valid range or malformed."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class ParseError(DomainError):
    """Text does not match the expected coordinate template."""

    def __init__(self, kind: str, text: str, template: str):
        self.kind = kind
        self.template = template
        super().__init__(kind, text, f"expected {template}")


class ConvergenceError(CoordinateError, ArithmeticError):
    """An iterative solver did not reach its tolerance."""

    def __init__(self, iterations: int, residual: float):
        self.iterations = iterations
        self.residual = residual
        super().__init__(
            f"Conformal latitude did not converge after {iterations} iterations "
            f"(last step {residual:.3e})"
        )
