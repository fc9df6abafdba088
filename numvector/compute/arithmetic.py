"""
Arithmetic capability sets.

Every elementary operation a vector performs on its elements goes through an
`Arithmetic` record registered for the element type. Resolution walks the
element type's MRO once and caches the result, so subclasses (e.g. numpy's
float32 under numpy.floating) share their base's registration.
"""
import logging
import operator
import threading
import typing as tp
from dataclasses import dataclass

from numvector.exceptions import UnsupportedElementTypeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Arithmetic:
    add: tp.Callable[[tp.Any, tp.Any], tp.Any]
    subtract: tp.Callable[[tp.Any, tp.Any], tp.Any]
    multiply: tp.Callable[[tp.Any, tp.Any], tp.Any]
    divide: tp.Callable[[tp.Any, tp.Any], tp.Any]
    negate: tp.Callable[[tp.Any], tp.Any]
    square_root: tp.Callable[[tp.Any], tp.Any]
    less_than: tp.Callable[[tp.Any, tp.Any], bool]
    greater_than: tp.Callable[[tp.Any, tp.Any], bool]
    equal: tp.Callable[[tp.Any, tp.Any], bool]
    equal_with_tolerance: tp.Callable[[tp.Any, tp.Any, tp.Any], bool]
    # Must agree with `equal`: elements that compare equal hash alike
    hash: tp.Callable[[tp.Any], int] = hash


def operator_arithmetic(square_root: tp.Callable[[tp.Any], tp.Any],
                        divide: tp.Callable[[tp.Any, tp.Any], tp.Any] = operator.truediv) -> Arithmetic:
    """Capability set backed by the element type's own Python operators."""
    return Arithmetic(
        add=operator.add,
        subtract=operator.sub,
        multiply=operator.mul,
        divide=divide,
        negate=operator.neg,
        square_root=square_root,
        less_than=lambda x, y: bool(x < y),
        greater_than=lambda x, y: bool(x > y),
        equal=lambda x, y: bool(x == y),
        equal_with_tolerance=lambda x, y, leniency: bool(abs(x - y) <= leniency),
    )


_REGISTRY: dict[type, Arithmetic] = {}
_RESOLVED: dict[type, Arithmetic] = {}
_LOCK = threading.Lock()


def register_arithmetic(element_type: type, arithmetic: Arithmetic) -> None:
    with _LOCK:
        _REGISTRY[element_type] = arithmetic
        # Subclasses may now resolve differently
        _RESOLVED.clear()
    logger.debug("Registered arithmetic for %s", element_type.__name__)


def arithmetic_for(element_type: type) -> Arithmetic:
    resolved = _RESOLVED.get(element_type)
    if resolved is not None:
        return resolved

    with _LOCK:
        resolved = _RESOLVED.get(element_type)
        if resolved is None:
            for base in element_type.__mro__:
                if base in _REGISTRY:
                    resolved = _REGISTRY[base]
                    break
            else:
                raise UnsupportedElementTypeError(element_type)
            _RESOLVED[element_type] = resolved
            logger.debug("Resolved arithmetic for %s via %s", element_type.__name__, base.__name__)
    return resolved
