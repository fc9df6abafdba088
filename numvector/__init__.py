"""Generic n-dimensional vectors over pluggable numeric element types."""
from numvector.compute import (
    Arithmetic,
    arithmetic_for,
    one,
    operator_arithmetic,
    register_arithmetic,
    register_constants,
    register_constants_maker,
    zero,
)
from numvector.exceptions import (
    DimensionMismatchError,
    NullArgumentError,
    UnsupportedElementTypeError,
    VectorDomainError,
    VectorError,
    VectorIndexError,
    VectorRangeError,
)
from numvector.numtypes.RuntimeTypes import Q
from numvector.vector.Vector import StepStatus, Vector
from numvector.vector.factory import ones, zeros
from numvector.vector.operations import (
    QuaternionLike,
    add,
    angle,
    barycentric_interpolation,
    cross_product,
    divide,
    dot_product,
    equal,
    equal_with_tolerance,
    linear_interpolation,
    magnitude,
    magnitude_squared,
    multiply,
    negate,
    normalize,
    rotate_by_axis_angle,
    rotate_by_quaternion,
    spherical_interpolation,
    subtract,
)

__version__ = "0.1.0"
