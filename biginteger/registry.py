"""Backend selection.

A `BackendRegistry` holds the single concrete `BigInteger` class that services value
construction. The package builds one default registry at import time; components that
need a numeric backend can also be handed a registry of their own.

Installation is serialised by a lock, but swapping backends while values of the old
backend are still being combined is not supported: callers finish (or convert) such
computations first.
"""

from __future__ import annotations  # keep type hints lightweight

import contextlib  # scoped override
import logging  # backend install/replace traces
import os  # BIGINTEGER_BACKEND
import threading  # guard installation

from .errors import ImplementationAlreadySet, ImplementationNotSet, InvalidInput
from .fallback import GmpBigInteger
from .interface import BigInteger
from .native import NativeBigInteger

logger = logging.getLogger(__name__)

BACKEND_ENV = "BIGINTEGER_BACKEND"  # environment override for the default backend
BACKENDS = {  # accepted BIGINTEGER_BACKEND values
    "native": NativeBigInteger,
    "fallback": GmpBigInteger,
    "gmp": GmpBigInteger,
}

def default_implementation(environ=None):  # Backend for the default registry; Python ints are unbounded, so native unless overridden.
    environ = os.environ if environ is None else environ
    name = environ.get(BACKEND_ENV)
    if name:
        impl = BACKENDS.get(name.strip().lower())
        if impl is None:
            raise InvalidInput(f"{BACKEND_ENV} must be one of {sorted(BACKENDS)}, got {name!r}")
        logger.info("biginteger backend %s selected via %s", impl.__name__, BACKEND_ENV)
        return impl
    return NativeBigInteger

class BackendRegistry:  # Holds the active concrete BigInteger implementation.
    def __init__(self, implementation=None):  # Optionally install an implementation right away.
        self._lock = threading.Lock()
        self._implementation = None
        if implementation is not None:
            self.set_implementation(implementation)

    @property
    def implementation(self):  # Active backend class (None while empty).
        return self._implementation

    def set_implementation(self, implementation, replace=False):  # Install a backend class.
        if not (isinstance(implementation, type) and issubclass(implementation, BigInteger)):
            raise TypeError(f"expected a BigInteger subclass, got {implementation!r}")
        with self._lock:
            previous = self._implementation
            if previous is not None and not replace:
                raise ImplementationAlreadySet("Implementation already set")
            self._implementation = implementation
        if previous is None:
            logger.debug("biginteger backend installed: %s", implementation.__name__)
        else:
            logger.debug("biginteger backend replaced: %s -> %s", previous.__name__, implementation.__name__)

    def new(self, n=None) -> BigInteger:  # Construct a value with the active backend.
        impl = self._implementation
        if impl is None:
            raise ImplementationNotSet("no BigInteger implementation installed")
        return impl(n)

    @contextlib.contextmanager
    def override(self, implementation):  # Temporarily replace the backend; restore on exit.
        previous = self._implementation
        self.set_implementation(implementation, replace=True)
        try:
            yield self
        finally:
            with self._lock:
                self._implementation = previous
            logger.debug("biginteger backend restored: %s", getattr(previous, "__name__", None))
