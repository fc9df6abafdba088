"""
Zero- and one-filled vectors.

The first request for a given element type decides how such vectors are
built: if freshly allocated storage already holds the requested identity
(zero bits for native dtypes, the registered zero for object storage),
allocation alone is enough; otherwise every slot is filled with the constant. The decision is
made once per (identity, element type) under a lock and reused for the rest
of the process.
"""
import logging
import threading
import typing as tp

from numvector.compute import arithmetic_for, constants_for
from numvector.config import DEFAULT_ELEMENT_TYPE
from numvector.vector.Vector import Vector, storage_dtype

logger = logging.getLogger(__name__)

FAST = "fast"
FILL = "fill"

_KINDS = ("zero", "one")

_factories: dict[tuple[str, type], tp.Callable[[int], Vector]] = {}
_strategies: dict[tuple[str, type], str] = {}
_FACTORY_LOCK = threading.Lock()


def _default_value(element_type: type):
    """What a freshly allocated slot holds."""
    dtype = storage_dtype(element_type)
    if dtype == object:
        return constants_for(element_type).zero
    return dtype.type(0)


def _specialize(kind: str, element_type: type) -> tp.Tuple[str, tp.Callable[[int], Vector]]:
    target = getattr(constants_for(element_type), kind)
    default = _default_value(element_type)

    if arithmetic_for(element_type).equal(default, target):
        def factory(dimension: int) -> Vector:
            return Vector.of_dimension(dimension, element_type)
        return FAST, factory

    def factory(dimension: int) -> Vector:
        vector = Vector.of_dimension(dimension, element_type)
        values = vector.values
        for i in range(dimension):
            values[i] = target
        return vector
    return FILL, factory


def _factory(kind: str, element_type: type) -> tp.Callable[[int], Vector]:
    key = (kind, element_type)
    factory = _factories.get(key)
    if factory is not None:
        return factory

    with _FACTORY_LOCK:
        factory = _factories.get(key)
        if factory is None:
            strategy, factory = _specialize(kind, element_type)
            _strategies[key] = strategy
            # Published last; lock-free readers only ever see a finished factory
            _factories[key] = factory
            logger.debug("%s factory for %s: %s path", kind, element_type.__name__, strategy)
    return factory


def zeros(dimension: int, element_type: type = DEFAULT_ELEMENT_TYPE) -> Vector:
    return _factory("zero", element_type)(dimension)


def ones(dimension: int, element_type: type = DEFAULT_ELEMENT_TYPE) -> Vector:
    return _factory("one", element_type)(dimension)


def factory_strategy(kind: str, element_type: type) -> tp.Optional[str]:
    """FAST, FILL, or None when no vector of this kind was requested yet."""
    if kind not in _KINDS:
        raise ValueError(f"kind must be one of {_KINDS}, given {kind!r}")
    return _strategies.get((kind, element_type))


def reset_factories() -> None:
    with _FACTORY_LOCK:
        _factories.clear()
        _strategies.clear()
