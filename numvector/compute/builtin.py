"""
Capability sets and constants for the element types supported out of the box:
int, float, Fraction, Decimal, numpy integer/floating scalars, the fixed-point
Q type and symbolic z3 reals.
"""
import math
import operator
from decimal import Decimal
from fractions import Fraction

import numpy as np
import z3

from numvector.compute.arithmetic import Arithmetic, operator_arithmetic, register_arithmetic
from numvector.compute.constants import Constants, register_constants, register_constants_maker
from numvector.numtypes.RuntimeTypes import Q
from numvector.utils.smt_utils import prove


def _fraction_sqrt(x: Fraction) -> Fraction:
    # Exact for perfect squares, float-precision otherwise
    if x < 0:
        raise ValueError(f"Square root of a negative number: {x}")
    num_root = math.isqrt(x.numerator)
    den_root = math.isqrt(x.denominator)
    if num_root * num_root == x.numerator and den_root * den_root == x.denominator:
        return Fraction(num_root, den_root)
    return Fraction(math.sqrt(x))


def _numpy_integer_sqrt(x):
    return type(x)(math.isqrt(int(x)))


def _z3_abs(x):
    return z3.If(x < 0, -x, x)


# Integer division keeps integer vectors integral
register_arithmetic(int, operator_arithmetic(square_root=math.isqrt, divide=operator.floordiv))
register_constants(int, 0, 1)

register_arithmetic(float, operator_arithmetic(square_root=math.sqrt))
register_constants(float, 0.0, 1.0)

register_arithmetic(Fraction, operator_arithmetic(square_root=_fraction_sqrt))
register_constants(Fraction, Fraction(0), Fraction(1))

register_arithmetic(Decimal, operator_arithmetic(square_root=lambda x: x.sqrt()))
register_constants(Decimal, Decimal(0), Decimal(1))

register_arithmetic(np.integer, operator_arithmetic(square_root=_numpy_integer_sqrt, divide=operator.floordiv))
register_arithmetic(np.floating, operator_arithmetic(square_root=np.sqrt))
for _numpy_base in (np.integer, np.floating):
    register_constants_maker(_numpy_base, lambda t: Constants(t(0), t(1)))

register_arithmetic(Q, Arithmetic(
    add=Q.add,
    subtract=Q.sub,
    multiply=Q.mul,
    divide=Q.div,
    negate=Q.neg,
    square_root=Q.sqrt,
    less_than=lambda x, y: x < y,
    greater_than=lambda x, y: x > y,
    equal=lambda x, y: x == y,
    equal_with_tolerance=lambda x, y, leniency: x.sub(y).abs() <= leniency,
))
register_constants(Q, Q.from_int(0), Q.from_int(1))

# Comparisons over symbolic reals hold only when provable for all assignments
register_arithmetic(z3.ArithRef, Arithmetic(
    add=operator.add,
    subtract=operator.sub,
    multiply=operator.mul,
    divide=operator.truediv,
    negate=operator.neg,
    square_root=z3.Sqrt,
    less_than=lambda x, y: prove(x < y),
    greater_than=lambda x, y: prove(x > y),
    equal=lambda x, y: prove(x == y),
    equal_with_tolerance=lambda x, y, leniency: prove(_z3_abs(x - y) <= leniency),
    # Provably equal expressions may differ structurally
    hash=lambda x: 0,
))
register_constants(z3.ArithRef, z3.RealVal(0), z3.RealVal(1))
