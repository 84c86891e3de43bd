"""
matrixadapter
=============
Adapter pattern demo: a 2D matrix implements MatrixOperations directly, a
3D volume with its own method names is made compatible by Volume3DAdapter.
"""
from importlib.metadata import version, PackageNotFoundError

from matrixadapter.exceptions import MatrixError, InvalidStateError, InputExhaustedError
from matrixadapter.model import (
    MatrixOperations,
    Loggable,
    Grid2D,
    Volume3D,
    Volume3DAdapter,
)

try:
    __version__ = version("matrixadapter")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "MatrixError",
    "InvalidStateError",
    "InputExhaustedError",
    "MatrixOperations",
    "Loggable",
    "Grid2D",
    "Volume3D",
    "Volume3DAdapter",
]
