"""
Exceptions raised by vector construction and arithmetic.
"""


class VectorError(Exception):
    """Base exception for all numvector errors."""
    pass


class NullArgumentError(VectorError, TypeError):
    """A required vector argument is None."""

    def __init__(self, argument: str):
        super().__init__(f"Argument '{argument}' is required, None was given")
        self.argument = argument


class VectorRangeError(VectorError, ValueError):
    """
    A numeric argument is outside its valid bound.

    Raised when:
    - A dimension is negative
    - An interpolation blend factor is outside [0, 1]
    """

    def __init__(self, argument: str, value, bound: str):
        super().__init__(f"{argument}={value} violates {bound}")
        self.argument = argument
        self.value = value
        self.bound = bound


class VectorIndexError(VectorRangeError, IndexError):
    """Indexer access outside 0 <= index < dimension."""

    def __init__(self, index, dimension: int):
        super().__init__("index", index, f"0 <= index < {dimension}")
        self.dimension = dimension


class VectorDomainError(VectorError, ArithmeticError):
    """
    A structural precondition of an operation does not hold.

    Raised when:
    - An operation requires a fixed dimension (cross product needs 3)
    - Normalizing an empty or zero-magnitude vector
    - Accessing a named component the vector does not have
    """
    pass


class DimensionMismatchError(VectorDomainError):
    """Operands of a binary or ternary operation disagree in dimension."""

    def __init__(self, operation: str, **dimensions: int):
        shapes = " != ".join(f"{name}.dimension={dim}" for name, dim in dimensions.items())
        super().__init__(f"{operation}: dimension mismatch, {shapes}")
        self.operation = operation
        self.dimensions = tuple(dimensions.values())


class UnsupportedElementTypeError(VectorError, TypeError):
    """No capability set or constants are registered for an element type."""

    def __init__(self, element_type: type, what: str = "arithmetic"):
        super().__init__(
            f"No {what} registered for element type {element_type.__name__}"
        )
        self.element_type = element_type
