from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

import numpy as np

from matrixadapter import config
from matrixadapter.exceptions import InvalidStateError
from matrixadapter.io.inputs import read_float
from matrixadapter.model.contract import MatrixOperations, render_header

if TYPE_CHECKING:
    import numpy.typing as npt
    from matrixadapter.io.inputs import InputSource

logger = logging.getLogger(__name__)


class Grid2D(MatrixOperations):
    """
    Square N x N table of doubles implementing the matrix contract directly.
    Cells are visited in row-major order.
    """
    NAME = "2D Matrix [3x3]"

    def __init__(self, size: int = config.MATRIX_SIZE) -> None:
        super().__init__()
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.NAME = f"2D Matrix [{size}x{size}]"
        self._data: npt.NDArray[np.float64] = np.zeros((size, size), dtype=np.float64)
        self.filled = False

    @property
    def values(self) -> npt.NDArray[np.float64]:
        """Copy of the stored values."""
        return self._data.copy()

    def fill_random(self, rng: np.random.Generator) -> None:
        # numpy draws in C order, i.e. row by row
        draws = rng.uniform(config.RANDOM_LOW, config.RANDOM_HIGH, size=self._data.shape)
        self._data[:] = np.round(draws, config.DECIMALS)
        self.filled = True
        self.log_info("Filled with random numbers.")

    def fill_manual(self, source: InputSource) -> None:
        source.notify(f"\nEnter the elements of {self.NAME}:")
        # storage is only touched once every value has been read
        buffer = np.empty_like(self._data)
        for i in range(self.size):
            for j in range(self.size):
                buffer[i, j] = read_float(
                    source,
                    f"Element [{i},{j}]: ",
                    "Error: enter a valid number.",
                )
        self._data[:] = buffer
        self.filled = True
        self.log_info("Filled manually.")

    def fill_constant(self, value: float) -> None:
        """Set every cell to the same value."""
        self._data.fill(value)
        self.filled = True

    def fill_values(self, values: Iterable[float]) -> None:
        """
        Load N*N values in row-major order.

        Raises:
            ValueError: If the number of values does not match the grid.
        """
        flat = np.fromiter(values, dtype=np.float64)
        if flat.size != self._data.size:
            raise ValueError(f"Expected {self._data.size} values, got {flat.size}")
        self._data[:] = flat.reshape(self._data.shape)
        self.filled = True

    def find_min(self) -> float:
        if not self.filled:
            raise InvalidStateError(f"{self.NAME} has not been filled yet")
        return float(self._data.min())

    def display(self) -> str:
        lines = [render_header(self.NAME)]
        for row in self._data:
            cells = "".join(f"{config.format_cell(value)} " for value in row)
            lines.append(f"|{cells}|")
        return "\n".join(lines)

    def log_info(self, message: str) -> None:
        logger.info("[LOG 2D]: %s", message)
