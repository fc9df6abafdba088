"""Additive and multiplicative identities per element type."""
import logging
import threading
import typing as tp
from dataclasses import dataclass

from numvector.exceptions import UnsupportedElementTypeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Constants:
    zero: tp.Any
    one: tp.Any


# A maker builds the constants of a concrete element type, so a single
# registration on a base class (numpy.floating) yields float32 zeros for float32.
ConstantsMaker = tp.Callable[[type], Constants]

_MAKERS: dict[type, ConstantsMaker] = {}
_RESOLVED: dict[type, Constants] = {}
_LOCK = threading.Lock()


def register_constants(element_type: type, zero, one) -> None:
    register_constants_maker(element_type, lambda _: Constants(zero, one))


def register_constants_maker(element_type: type, maker: ConstantsMaker) -> None:
    with _LOCK:
        _MAKERS[element_type] = maker
        _RESOLVED.clear()
    logger.debug("Registered constants for %s", element_type.__name__)


def constants_for(element_type: type) -> Constants:
    resolved = _RESOLVED.get(element_type)
    if resolved is not None:
        return resolved

    with _LOCK:
        resolved = _RESOLVED.get(element_type)
        if resolved is None:
            for base in element_type.__mro__:
                if base in _MAKERS:
                    resolved = _MAKERS[base](element_type)
                    break
            else:
                raise UnsupportedElementTypeError(element_type, what="constants")
            _RESOLVED[element_type] = resolved
    return resolved


def zero(element_type: type):
    return constants_for(element_type).zero


def one(element_type: type):
    return constants_for(element_type).one
