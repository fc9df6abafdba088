import typing as tp
from enum import Enum

import numpy as np

from numvector.compute import Arithmetic, arithmetic_for, constants_for
from numvector.config import DEFAULT_ELEMENT_TYPE
from numvector.exceptions import VectorDomainError, VectorIndexError, VectorRangeError


class StepStatus(Enum):
    CONTINUE = "continue"
    BREAK = "break"


def storage_dtype(element_type: type) -> np.dtype:
    """numpy scalar types keep their native dtype, everything else is stored as objects."""
    if isinstance(element_type, type) and issubclass(element_type, np.generic):
        return np.dtype(element_type)
    return np.dtype(object)


def allocate(dimension: int, element_type: type) -> np.ndarray:
    """Zero-initialized storage: zero bits for native dtypes, the registered zero for objects."""
    dtype = storage_dtype(element_type)
    if dtype == object:
        values = np.empty(dimension, dtype=object)
        zero = constants_for(element_type).zero
        for i in range(dimension):
            values[i] = zero
        return values
    return np.zeros(dimension, dtype=dtype)


class Vector:
    """A fixed-length sequence of elements of a single numeric type.

    Arithmetic on the elements is delegated to the capability set registered
    for `element_type` (see numvector.compute). The length never changes after
    construction; elements may be replaced through the indexer, the x/y/z
    properties or the mutable steppers.

    Construction from explicit elements copies them. Use `Vector.wrap` to
    adopt an existing numpy array without copying.
    """
    def __init__(self, values: tp.Iterable = (), element_type: tp.Optional[type] = None):
        values = list(values)
        if element_type is None:
            element_type = type(values[0]) if values else DEFAULT_ELEMENT_TYPE

        self._element_type = element_type
        # Every slot is overwritten below
        self._values = np.empty(len(values), dtype=storage_dtype(element_type))
        for i, value in enumerate(values):
            self._values[i] = value

    ############# Constructors ###############

    @classmethod
    def of_dimension(cls, dimension: int, element_type: type = DEFAULT_ELEMENT_TYPE) -> "Vector":
        if dimension < 0:
            raise VectorRangeError("dimension", dimension, "dimension >= 0")
        return cls.wrap(allocate(dimension, element_type), element_type)

    @classmethod
    def from_function(cls,
                      dimension: int,
                      function: tp.Callable[[int], tp.Any],
                      element_type: tp.Optional[type] = None) -> "Vector":
        if dimension < 0:
            raise VectorRangeError("dimension", dimension, "dimension >= 0")
        return cls([function(i) for i in range(dimension)], element_type)

    @classmethod
    def wrap(cls, array: np.ndarray, element_type: tp.Optional[type] = None) -> "Vector":
        """Adopts `array` as backing storage. Writes through either one are shared."""
        if not isinstance(array, np.ndarray) or array.ndim != 1:
            raise TypeError(f"Expected a one-dimensional numpy array, given {type(array).__name__}")
        if element_type is None:
            if array.dtype != object:
                element_type = array.dtype.type
            else:
                element_type = type(array[0]) if len(array) else DEFAULT_ELEMENT_TYPE
        if array.dtype != storage_dtype(element_type):
            raise TypeError(
                f"Array of dtype {array.dtype} can not back a vector of {element_type.__name__}"
            )
        vector = cls.__new__(cls)
        vector._element_type = element_type
        vector._values = array
        return vector

    @classmethod
    def from_array(cls, array: tp.Sequence, element_type: tp.Optional[type] = None) -> "Vector":
        return cls(array, element_type)

    @classmethod
    def from_scalar(cls, scalar, element_type: tp.Optional[type] = None) -> "Vector":
        return cls([scalar], element_type)

    @classmethod
    def zeros(cls, dimension: int, element_type: type = DEFAULT_ELEMENT_TYPE) -> "Vector":
        from numvector.vector.factory import zeros

        return zeros(dimension, element_type)

    @classmethod
    def ones(cls, dimension: int, element_type: type = DEFAULT_ELEMENT_TYPE) -> "Vector":
        from numvector.vector.factory import ones

        return ones(dimension, element_type)

    ############# Basic properties ###############

    @property
    def dimension(self) -> int:
        return len(self._values)

    @property
    def element_type(self) -> type:
        return self._element_type

    @property
    def values(self) -> np.ndarray:
        """The backing array (not a copy)."""
        return self._values

    @property
    def arithmetic(self) -> Arithmetic:
        return arithmetic_for(self._element_type)

    def _check_index(self, index):
        if not isinstance(index, (int, np.integer)):
            raise TypeError(f"Vector indices must be integers, given {type(index).__name__}")
        if not 0 <= index < self.dimension:
            raise VectorIndexError(index, self.dimension)

    def __getitem__(self, index):
        self._check_index(index)
        return self._values[index]

    def __setitem__(self, index, value):
        self._check_index(index)
        self._values[index] = value

    def _check_component(self, index: int, name: str):
        if self.dimension <= index:
            raise VectorDomainError(
                f"This vector doesn't have a {name} component (dimension={self.dimension})"
            )

    @property
    def x(self):
        self._check_component(0, "x")
        return self._values[0]

    @x.setter
    def x(self, value):
        self._check_component(0, "x")
        self._values[0] = value

    @property
    def y(self):
        self._check_component(1, "y")
        return self._values[1]

    @y.setter
    def y(self, value):
        self._check_component(1, "y")
        self._values[1] = value

    @property
    def z(self):
        self._check_component(2, "z")
        return self._values[2]

    @z.setter
    def z(self, value):
        self._check_component(2, "z")
        self._values[2] = value

    def __len__(self):
        return self.dimension

    def __iter__(self):
        return iter(self._values)

    def copy(self) -> "Vector":
        return Vector.wrap(self._values.copy(), self._element_type)

    def __repr__(self):
        return f"Vector<{self._element_type.__name__}>[{', '.join(str(x) for x in self._values)}]"

    ############# Steppers ###############

    def stepper(self, step: tp.Callable[[tp.Any], None]) -> None:
        for value in self._values:
            step(value)

    def stepper_ref(self, step: tp.Callable[[tp.Any], tp.Any]) -> None:
        """`step` returns the replacement for each element."""
        values = self._values
        for i in range(len(values)):
            values[i] = step(values[i])

    def stepper_break(self, step: tp.Callable[[tp.Any], StepStatus]) -> StepStatus:
        for value in self._values:
            if step(value) is StepStatus.BREAK:
                return StepStatus.BREAK
        return StepStatus.CONTINUE

    def stepper_ref_break(self, step: tp.Callable[[tp.Any], tp.Tuple[tp.Any, StepStatus]]) -> StepStatus:
        """`step` returns (replacement, status); the replacement is stored before stopping."""
        values = self._values
        for i in range(len(values)):
            values[i], status = step(values[i])
            if status is StepStatus.BREAK:
                return StepStatus.BREAK
        return StepStatus.CONTINUE

    ############# Conversions ###############

    def to_array(self) -> np.ndarray:
        return self._values.copy()

    def to_list(self) -> list:
        return self._values.tolist()

    def to_matrix(self) -> np.ndarray:
        """Single-column matrix of shape (dimension, 1)."""
        return self._values.reshape(-1, 1).copy()

    ############# Mathematics ###############

    @property
    def magnitude(self):
        return operations.magnitude(self)

    @property
    def magnitude_squared(self):
        return operations.magnitude_squared(self)

    def negate(self) -> "Vector":
        return operations.negate(self)

    def add(self, other: "Vector") -> "Vector":
        return operations.add(self, other)

    def subtract(self, other: "Vector") -> "Vector":
        return operations.subtract(self, other)

    def multiply(self, scalar) -> "Vector":
        return operations.multiply(self, scalar)

    def divide(self, scalar) -> "Vector":
        return operations.divide(self, scalar)

    def dot_product(self, other: "Vector"):
        return operations.dot_product(self, other)

    def cross_product(self, other: "Vector") -> "Vector":
        return operations.cross_product(self, other)

    def normalize(self) -> "Vector":
        return operations.normalize(self)

    def linear_interpolation(self, other: "Vector", blend) -> "Vector":
        return operations.linear_interpolation(self, other, blend)

    def spherical_interpolation(self, other: "Vector", blend) -> "Vector":
        return operations.spherical_interpolation(self, other, blend)

    def barycentric_interpolation(self, b: "Vector", c: "Vector", u, v) -> "Vector":
        return operations.barycentric_interpolation(self, b, c, u, v)

    def rotate_by(self, quaternion) -> "Vector":
        return operations.rotate_by_quaternion(self, quaternion)

    def rotate_by_axis_angle(self, angle, x, y, z) -> "Vector":
        return operations.rotate_by_axis_angle(self, angle, x, y, z)

    def angle(self, other: "Vector"):
        return operations.angle(self, other)

    def equal_with_tolerance(self, other: "Vector", leniency) -> bool:
        return operations.equal_with_tolerance(self, other, leniency)

    def __neg__(self):
        return operations.negate(self)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return operations.add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return operations.subtract(self, other)

    def __mul__(self, scalar):
        if isinstance(scalar, Vector):
            return NotImplemented
        return operations.multiply(self, scalar)

    def __rmul__(self, scalar):
        if isinstance(scalar, Vector):
            return NotImplemented
        return operations.multiply(self, scalar)

    def __truediv__(self, scalar):
        if isinstance(scalar, Vector):
            return NotImplemented
        return operations.divide(self, scalar)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return operations.equal(self, other)

    def __hash__(self):
        hash_ = self.arithmetic.hash
        return hash((self.dimension, tuple(hash_(x) for x in self._values)))


# Imported last: operations builds Vector instances
from numvector.vector import operations  # noqa: E402
