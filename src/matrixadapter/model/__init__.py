from matrixadapter.model.contract import MatrixOperations, Loggable, render_header
from matrixadapter.model.grid import Grid2D
from matrixadapter.model.volume import Volume3D
from matrixadapter.model.adapter import Volume3DAdapter

__all__ = [
    "MatrixOperations",
    "Loggable",
    "render_header",
    "Grid2D",
    "Volume3D",
    "Volume3DAdapter",
]
