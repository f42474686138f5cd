from .codec import BIG_ENDIAN, LITTLE_ENDIAN, MAX_SAFE_INTEGER  # byte-order tags + exact double range
from .errors import (  # error taxonomy
    BigIntegerError,
    DivisionByZero,
    ImplementationAlreadySet,
    ImplementationNotSet,
    InsufficientLength,
    InvalidInput,
    InverseDoesNotExist,
    PrecisionLoss,
)
from .fallback import GmpBigInteger  # gmpy2-backed backend
from .interface import BigInteger  # abstract contract
from .native import NativeBigInteger  # Python-int backend
from .registry import BackendRegistry, default_implementation  # backend selection

default_registry = BackendRegistry(default_implementation())  # process-wide registry, installed once

new = default_registry.new  # construct with the active backend
set_implementation = default_registry.set_implementation  # install/replace the active backend
override = default_registry.override  # scoped replacement for tests

__all__ = [  # public API
    "BIG_ENDIAN",
    "LITTLE_ENDIAN",
    "MAX_SAFE_INTEGER",
    "BackendRegistry",
    "BigInteger",
    "BigIntegerError",
    "DivisionByZero",
    "GmpBigInteger",
    "ImplementationAlreadySet",
    "ImplementationNotSet",
    "InsufficientLength",
    "InvalidInput",
    "InverseDoesNotExist",
    "NativeBigInteger",
    "PrecisionLoss",
    "default_implementation",
    "default_registry",
    "new",
    "override",
    "set_implementation",
]
