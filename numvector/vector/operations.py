"""
Vector arithmetic.

Every operation that produces a vector takes an optional `out` vector. When
`out` already has the result's dimension and element type its backing array is
overwritten and `out` itself is returned; otherwise a new vector is allocated.
Callers rebind the result, `c = add(a, b, out=c)`. Passing a source vector as
`out` is supported: each element is read before the same slot is written.
Sources that only partially overlap `out` (views such as `arr[1:]` and
`arr[:-1]` adopted with `Vector.wrap`) are copied before writing.

Elementary arithmetic is delegated to the capability set of the first
operand's element type, resolved once per call.
"""
import typing as tp

import numpy as np

from numvector.compute import constants_for
from numvector.exceptions import (
    DimensionMismatchError,
    NullArgumentError,
    VectorDomainError,
    VectorRangeError,
)
from numvector.vector.Vector import Vector


class QuaternionLike(tp.Protocol):
    def rotate(self, vector: Vector, out: tp.Optional[Vector] = None) -> Vector:
        ...


########### Private Helpers ############

def _require(**arguments):
    for name, value in arguments.items():
        if value is None:
            raise NullArgumentError(name)


def _require_same_dimension(operation: str, **vectors: Vector):
    dimensions = {name: vector.dimension for name, vector in vectors.items()}
    if len(set(dimensions.values())) > 1:
        raise DimensionMismatchError(operation, **dimensions)


def _destination(out: tp.Optional[Vector], dimension: int, element_type: type) -> Vector:
    if (
        out is not None
        and out.dimension == dimension
        and out.element_type is element_type
    ):
        return out
    return Vector.of_dimension(dimension, element_type)


def _sources(out: tp.Optional[Vector], *vectors: Vector) -> tp.Tuple[np.ndarray, ...]:
    """Backing arrays to read from, copied where they partially overlap `out`."""
    if out is None:
        return tuple(v.values for v in vectors)
    C = out.values
    return tuple(
        v.values.copy() if v.values is not C and np.shares_memory(v.values, C) else v.values
        for v in vectors
    )


def _sum_of_products(A, B, arithmetic, zero):
    # Left-to-right accumulation starting at the additive identity
    add, multiply = arithmetic.add, arithmetic.multiply
    result = zero
    for i in range(len(A)):
        result = add(result, multiply(A[i], B[i]))
    return result


############# Public API ###############

def negate(a: Vector, out: tp.Optional[Vector] = None) -> Vector:
    _require(a=a)
    negate_ = a.arithmetic.negate
    A = _sources(out, a)[0]
    c = _destination(out, a.dimension, a.element_type)
    C = c.values
    for i in range(len(A)):
        C[i] = negate_(A[i])
    return c


def add(a: Vector, b: Vector, out: tp.Optional[Vector] = None) -> Vector:
    _require(a=a, b=b)
    _require_same_dimension("add", a=a, b=b)
    add_ = a.arithmetic.add
    A, B = _sources(out, a, b)
    c = _destination(out, a.dimension, a.element_type)
    C = c.values
    for i in range(len(A)):
        C[i] = add_(A[i], B[i])
    return c


def subtract(a: Vector, b: Vector, out: tp.Optional[Vector] = None) -> Vector:
    _require(a=a, b=b)
    _require_same_dimension("subtract", a=a, b=b)
    subtract_ = a.arithmetic.subtract
    A, B = _sources(out, a, b)
    c = _destination(out, a.dimension, a.element_type)
    C = c.values
    for i in range(len(A)):
        C[i] = subtract_(A[i], B[i])
    return c


def multiply(a: Vector, scalar, out: tp.Optional[Vector] = None) -> Vector:
    _require(a=a)
    multiply_ = a.arithmetic.multiply
    A = _sources(out, a)[0]
    c = _destination(out, a.dimension, a.element_type)
    C = c.values
    for i in range(len(A)):
        C[i] = multiply_(A[i], scalar)
    return c


# A zero divisor is left to the element type's own division
def divide(a: Vector, scalar, out: tp.Optional[Vector] = None) -> Vector:
    _require(a=a)
    divide_ = a.arithmetic.divide
    A = _sources(out, a)[0]
    c = _destination(out, a.dimension, a.element_type)
    C = c.values
    for i in range(len(A)):
        C[i] = divide_(A[i], scalar)
    return c


def dot_product(a: Vector, b: Vector):
    _require(a=a, b=b)
    _require_same_dimension("dot_product", a=a, b=b)
    return _sum_of_products(a.values, b.values, a.arithmetic, constants_for(a.element_type).zero)


def cross_product(a: Vector, b: Vector, out: tp.Optional[Vector] = None) -> Vector:
    _require(a=a, b=b)
    if a.dimension != 3 or b.dimension != 3:
        raise VectorDomainError(
            f"cross_product requires a.dimension == b.dimension == 3, "
            f"given a.dimension={a.dimension}, b.dimension={b.dimension}"
        )
    arithmetic = a.arithmetic
    subtract_, multiply_ = arithmetic.subtract, arithmetic.multiply
    A, B = a.values, b.values

    # All components are computed before `out` (possibly a or b) is written
    c0 = subtract_(multiply_(A[1], B[2]), multiply_(A[2], B[1]))
    c1 = subtract_(multiply_(A[2], B[0]), multiply_(A[0], B[2]))
    c2 = subtract_(multiply_(A[0], B[1]), multiply_(A[1], B[0]))

    c = _destination(out, 3, a.element_type)
    C = c.values
    C[0], C[1], C[2] = c0, c1, c2
    return c


def magnitude_squared(a: Vector):
    _require(a=a)
    return _sum_of_products(a.values, a.values, a.arithmetic, constants_for(a.element_type).zero)


def magnitude(a: Vector):
    _require(a=a)
    return a.arithmetic.square_root(magnitude_squared(a))


def normalize(a: Vector, out: tp.Optional[Vector] = None) -> Vector:
    _require(a=a)
    dimension = a.dimension
    if dimension < 1:
        raise VectorDomainError("normalize requires a.dimension > 0, given an empty vector")
    arithmetic = a.arithmetic
    length = magnitude(a)
    if arithmetic.equal(length, constants_for(a.element_type).zero):
        raise VectorDomainError(f"normalize requires a.magnitude > 0, given {a!r}")
    divide_ = arithmetic.divide
    A = _sources(out, a)[0]
    b = _destination(out, dimension, a.element_type)
    B = b.values
    for i in range(dimension):
        B[i] = divide_(A[i], length)
    return b


def linear_interpolation(a: Vector, b: Vector, blend, out: tp.Optional[Vector] = None) -> Vector:
    """a + blend * (b - a), with 0 <= blend <= 1."""
    _require(a=a, b=b)
    arithmetic = a.arithmetic
    constants = constants_for(a.element_type)
    if arithmetic.less_than(blend, constants.zero) or arithmetic.greater_than(blend, constants.one):
        raise VectorRangeError("blend", blend, "0 <= blend <= 1")
    _require_same_dimension("linear_interpolation", a=a, b=b)
    add_, subtract_, multiply_ = arithmetic.add, arithmetic.subtract, arithmetic.multiply
    A, B = _sources(out, a, b)
    c = _destination(out, a.dimension, a.element_type)
    C = c.values
    for i in range(len(A)):
        C[i] = add_(A[i], multiply_(blend, subtract_(B[i], A[i])))
    return c


def barycentric_interpolation(a: Vector, b: Vector, c: Vector, u, v,
                              out: tp.Optional[Vector] = None) -> Vector:
    """a + u * (b - a) + v * (c - a)"""
    _require(a=a, b=b, c=c)
    _require_same_dimension("barycentric_interpolation", a=a, b=b, c=c)
    arithmetic = a.arithmetic
    add_, subtract_, multiply_ = arithmetic.add, arithmetic.subtract, arithmetic.multiply
    A, B, C = _sources(out, a, b, c)
    d = _destination(out, a.dimension, a.element_type)
    D = d.values
    for i in range(len(A)):
        D[i] = add_(
            add_(A[i], multiply_(u, subtract_(B[i], A[i]))),
            multiply_(v, subtract_(C[i], A[i])),
        )
    return d


def spherical_interpolation(a: Vector, b: Vector, blend, out: tp.Optional[Vector] = None) -> Vector:
    raise NotImplementedError("spherical_interpolation is not implemented")


def angle(a: Vector, b: Vector):
    _require(a=a, b=b)
    raise NotImplementedError("angle between vectors is not implemented")


def rotate_by_axis_angle(vector: Vector, angle, x, y, z) -> Vector:
    raise NotImplementedError("rotation about an axis by an angle is not implemented")


def rotate_by_quaternion(vector: Vector, quaternion: QuaternionLike,
                         out: tp.Optional[Vector] = None) -> Vector:
    _require(vector=vector, quaternion=quaternion)
    return quaternion.rotate(vector, out=out)


def equal(a: tp.Optional[Vector], b: tp.Optional[Vector]) -> bool:
    if a is b:
        return True
    if a is None or b is None:
        return False
    if a.dimension != b.dimension:
        return False
    equal_ = a.arithmetic.equal
    A, B = a.values, b.values
    return all(equal_(A[i], B[i]) for i in range(len(A)))


def equal_with_tolerance(a: tp.Optional[Vector], b: tp.Optional[Vector], leniency) -> bool:
    if a is b:
        return True
    if a is None or b is None:
        return False
    if a.dimension != b.dimension:
        return False
    equal_ = a.arithmetic.equal_with_tolerance
    A, B = a.values, b.values
    return all(equal_(A[i], B[i], leniency) for i in range(len(A)))
