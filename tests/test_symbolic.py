import unittest

import z3

from numvector.exceptions import VectorRangeError
from numvector.utils.smt_utils import prove, prove_equal
from numvector.vector.Vector import Vector
from numvector.vector.operations import (
    add,
    cross_product,
    dot_product,
    linear_interpolation,
    magnitude_squared,
    negate,
    subtract,
)


def symbolic_vector(name: str, dimension: int) -> Vector:
    return Vector([z3.Real(f"{name}_{i}") for i in range(dimension)])


class TestProve(unittest.TestCase):
    def test_valid_claims(self):
        x, y = z3.Reals("x y")
        self.assertTrue(prove(x + y == y + x))
        self.assertTrue(prove(x * x >= 0))
        self.assertTrue(prove(True))

    def test_invalid_claims(self):
        x = z3.Real("x")
        self.assertFalse(prove(x > 0))
        self.assertFalse(prove(False))

    def test_prove_equal_unrolls(self):
        x, y = z3.Reals("x y")
        self.assertTrue(prove_equal((x + y, [x * y]), (y + x, [y * x])))
        self.assertFalse(prove_equal((x,), (y,)))


class TestSymbolicVectors(unittest.TestCase):
    """Vector identities proved for every real assignment."""

    def setUp(self):
        self.a = symbolic_vector("a", 3)
        self.b = symbolic_vector("b", 3)

    def test_element_type(self):
        self.assertTrue(issubclass(self.a.element_type, z3.ArithRef))

    def test_negate_twice(self):
        self.assertEqual(negate(negate(self.a)), self.a)

    def test_add_commutes(self):
        self.assertEqual(add(self.a, self.b), add(self.b, self.a))
        self.assertEqual(subtract(self.a, self.b), negate(subtract(self.b, self.a)))

    def test_different_vectors_are_not_provably_equal(self):
        self.assertNotEqual(self.a, self.b)

    def test_cross_product(self):
        c = cross_product(self.a, self.b)
        self.assertEqual(c, negate(cross_product(self.b, self.a)))
        self.assertTrue(prove(dot_product(self.a, c) == 0))
        self.assertTrue(prove(dot_product(self.b, c) == 0))

    def test_dot_product_with_itself(self):
        self.assertTrue(prove(dot_product(self.a, self.a) == magnitude_squared(self.a)))

    def test_linear_interpolation_endpoints(self):
        self.assertEqual(linear_interpolation(self.a, self.b, z3.RealVal(0)), self.a)
        self.assertEqual(linear_interpolation(self.a, self.b, z3.RealVal(1)), self.b)

    def test_linear_interpolation_blend_out_of_range(self):
        with self.assertRaises(VectorRangeError):
            linear_interpolation(self.a, self.b, z3.RealVal(2))
        with self.assertRaises(VectorRangeError):
            linear_interpolation(self.a, self.b, z3.RealVal(-1))

    def test_symbolic_blend(self):
        t = z3.Real("t")
        c = linear_interpolation(self.a, self.b, t)
        self.assertTrue(prove(z3.Implies(t == 0, c[0] == self.a[0])))


if __name__ == "__main__":
    unittest.main()
