from numvector.compute.arithmetic import Arithmetic, arithmetic_for, operator_arithmetic, register_arithmetic
from numvector.compute.constants import Constants, constants_for, one, register_constants, register_constants_maker, zero

# Registers the built-in element types
from numvector.compute import builtin  # noqa: F401
