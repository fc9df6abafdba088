import unittest
from decimal import Decimal
from fractions import Fraction

import numpy as np

from numvector.exceptions import VectorDomainError, VectorIndexError, VectorRangeError
from numvector.numtypes.RuntimeTypes import Q
from numvector.vector.Vector import StepStatus, Vector
from numvector.vector.operations import add, magnitude


class TestConstruction(unittest.TestCase):
    def test_explicit_elements(self):
        v = Vector([1, 2, 3])
        self.assertEqual(v.dimension, 3)
        self.assertIs(v.element_type, int)
        self.assertEqual(v.to_list(), [1, 2, 3])

    def test_explicit_elements_are_copied(self):
        source = [1.0, 2.0]
        v = Vector(source)
        source[0] = 9.0
        self.assertEqual(v[0], 1.0)

    def test_empty_elements(self):
        v = Vector([])
        self.assertEqual(v.dimension, 0)
        self.assertEqual(len(v), 0)
        self.assertIs(v.element_type, float)

    def test_of_dimension(self):
        native = Vector.of_dimension(3, np.float64)
        self.assertEqual(native.values.dtype, np.float64)
        self.assertEqual(native.to_list(), [0.0, 0.0, 0.0])

        boxed = Vector.of_dimension(2, int)
        self.assertEqual(boxed.to_list(), [0, 0])
        self.assertEqual(Vector.of_dimension(2, Fraction).to_list(), [Fraction(0), Fraction(0)])

    def test_of_dimension_is_ready_for_arithmetic(self):
        self.assertEqual(magnitude(Vector.of_dimension(3)), 0.0)
        self.assertEqual(add(Vector.of_dimension(2, int), Vector([1, 2])), Vector([1, 2]))
        self.assertEqual(magnitude(Vector.of_dimension(2, Q)), Q.from_int(0))
        self.assertEqual(
            add(Vector.of_dimension(1, Decimal), Vector([Decimal("1.5")])).to_list(),
            [Decimal("1.5")],
        )

    def test_negative_dimension(self):
        with self.assertRaises(VectorRangeError) as ctx:
            Vector.of_dimension(-1)
        self.assertEqual(ctx.exception.value, -1)
        self.assertIsInstance(ctx.exception, ValueError)

        with self.assertRaises(VectorRangeError):
            Vector.from_function(-2, lambda i: i)

    def test_from_function_ascending_order(self):
        calls = []

        def square(i):
            calls.append(i)
            return i * i

        v = Vector.from_function(4, square)
        self.assertEqual(calls, [0, 1, 2, 3])
        self.assertEqual(v.to_list(), [0, 1, 4, 9])

    def test_element_type_override(self):
        v = Vector([1, 2], element_type=np.float32)
        self.assertIs(v.element_type, np.float32)
        self.assertEqual(v.values.dtype, np.float32)


class TestAccess(unittest.TestCase):
    def test_indexer(self):
        v = Vector([1.0, 2.0, 3.0])
        self.assertEqual(v[2], 3.0)
        v[1] = 7.0
        self.assertEqual(v[1], 7.0)

    def test_indexer_rejects_dimension(self):
        v = Vector([1.0, 2.0, 3.0])
        with self.assertRaises(VectorIndexError) as ctx:
            v[3]
        self.assertEqual(ctx.exception.value, 3)
        self.assertEqual(ctx.exception.dimension, 3)
        self.assertIsInstance(ctx.exception, IndexError)

        with self.assertRaises(VectorIndexError):
            v[3] = 1.0

    def test_indexer_rejects_negative(self):
        with self.assertRaises(VectorIndexError):
            Vector([1.0])[-1]

    def test_indexer_rejects_slices(self):
        with self.assertRaises(TypeError):
            Vector([1.0, 2.0])[0:1]

    def test_named_components(self):
        v = Vector([1, 2, 3])
        self.assertEqual((v.x, v.y, v.z), (1, 2, 3))
        v.z = 30
        self.assertEqual(v[2], 30)

    def test_missing_component(self):
        v = Vector([1, 2])
        with self.assertRaises(VectorDomainError) as ctx:
            v.z
        self.assertIn("z", str(ctx.exception))
        with self.assertRaises(VectorDomainError):
            v.z = 3
        with self.assertRaises(VectorDomainError):
            Vector([]).x


class TestConversions(unittest.TestCase):
    def test_wrap_aliases_storage(self):
        array = np.array([1.0, 2.0])
        v = Vector.wrap(array)
        self.assertIs(v.element_type, np.float64)
        array[0] = 5.0
        self.assertEqual(v[0], 5.0)

    def test_wrap_rejects_matrices(self):
        with self.assertRaises(TypeError):
            Vector.wrap(np.zeros((2, 2)))

    def test_wrap_rejects_mismatched_dtype(self):
        with self.assertRaises(TypeError):
            Vector.wrap(np.zeros(2), element_type=np.int32)

    def test_to_array_is_a_copy(self):
        v = Vector([1.0, 2.0])
        array = v.to_array()
        array[0] = 9.0
        self.assertEqual(v[0], 1.0)

    def test_from_array(self):
        v = Vector.from_array(np.array([1, 2, 3], dtype=np.int64))
        self.assertIs(v.element_type, np.int64)
        self.assertEqual(v.to_list(), [1, 2, 3])

    def test_to_matrix(self):
        m = Vector([1.0, 2.0, 3.0]).to_matrix()
        self.assertEqual(m.shape, (3, 1))
        self.assertEqual(m[2, 0], 3.0)

    def test_from_scalar(self):
        v = Vector.from_scalar(4.5)
        self.assertEqual(v.dimension, 1)
        self.assertEqual(v.x, 4.5)

    def test_copy(self):
        v = Vector([1, 2])
        w = v.copy()
        w[0] = 10
        self.assertEqual(v[0], 1)
        self.assertIs(w.element_type, int)

    def test_repr(self):
        self.assertEqual(repr(Vector([1, 2])), "Vector<int>[1, 2]")


class TestSteppers(unittest.TestCase):
    def test_stepper(self):
        seen = []
        Vector([1, 2, 3]).stepper(seen.append)
        self.assertEqual(seen, [1, 2, 3])

    def test_stepper_ref(self):
        v = Vector([1, 2, 3])
        v.stepper_ref(lambda x: x * 10)
        self.assertEqual(v.to_list(), [10, 20, 30])

    def test_stepper_break_stops_immediately(self):
        seen = []

        def step(x):
            seen.append(x)
            return StepStatus.BREAK if x == 2 else StepStatus.CONTINUE

        status = Vector([1, 2, 3, 4]).stepper_break(step)
        self.assertIs(status, StepStatus.BREAK)
        self.assertEqual(seen, [1, 2])

    def test_stepper_break_completes(self):
        status = Vector([1, 2]).stepper_break(lambda x: StepStatus.CONTINUE)
        self.assertIs(status, StepStatus.CONTINUE)

    def test_stepper_ref_break(self):
        v = Vector([1, 2, 3, 4])
        status = v.stepper_ref_break(
            lambda x: (-x, StepStatus.BREAK if x == 2 else StepStatus.CONTINUE)
        )
        self.assertIs(status, StepStatus.BREAK)
        self.assertEqual(v.to_list(), [-1, -2, 3, 4])

    def test_iteration(self):
        self.assertEqual(list(Vector([3, 1, 2])), [3, 1, 2])


if __name__ == "__main__":
    unittest.main()
