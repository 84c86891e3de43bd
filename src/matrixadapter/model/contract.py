"""
Matrix Contract
===============
Defines the common operation set every matrix-like object offers to the
driver, plus the optional logging capability.

Classes:
    MatrixOperations: Abstract base class (fill, find minimum, display, close).
    Loggable: Protocol for objects that accept informational log messages.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import numpy as np
    from matrixadapter.io.inputs import InputSource

logger = logging.getLogger(__name__)


def render_header(name: str) -> str:
    """Default header shown above every rendered matrix."""
    return f"\n--- {name} ---"


@runtime_checkable
class Loggable(Protocol):
    def log_info(self, message: str) -> None: ...


class MatrixOperations(ABC):
    """
    Abstract base class for matrices the driver can process uniformly.

    Instances are scoped resources: `with matrix:` guarantees close() runs
    on every exit path.
    """
    NAME: str = "Matrix"

    def __init__(self) -> None:
        self.closed = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.NAME}')"

    def __enter__(self) -> MatrixOperations:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @abstractmethod
    def fill_random(self, rng: np.random.Generator) -> None:
        """
        Fill every cell with a random value.

        Args:
            rng: Seeded generator; the same seed yields the same values.
        """
        pass

    @abstractmethod
    def fill_manual(self, source: InputSource) -> None:
        """
        Fill every cell with a value read from the input source.

        Args:
            source: Where the values are read from.
        """
        pass

    @abstractmethod
    def find_min(self) -> float:
        """
        Smallest value currently stored.

        Raises:
            InvalidStateError: If the matrix has not been filled yet.
        """
        pass

    @abstractmethod
    def display(self) -> str:
        """Human-readable rendering, starting with render_header()."""
        pass

    def close(self) -> None:
        """Release the object's resources. Calling it twice is a no-op."""
        if self.closed:
            return
        self._release()
        self.closed = True
        logger.info("[System] Resources of '%s' released.", self.NAME)

    def _release(self) -> None:
        """Override to free implementation-specific resources."""
        pass
