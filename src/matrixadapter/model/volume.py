"""
3D Volume (Adaptee)
===================
A cube of doubles with its own, pre-existing method names. It knows nothing
about MatrixOperations; Volume3DAdapter makes it usable by the driver.

Storage is indexed [z, y, x] and every traversal runs z (outer) -> y -> x (inner).
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

import numpy as np

from matrixadapter import config
from matrixadapter.exceptions import InvalidStateError
from matrixadapter.io.inputs import read_float

if TYPE_CHECKING:
    import numpy.typing as npt
    from matrixadapter.io.inputs import InputSource

logger = logging.getLogger(__name__)


class Volume3D:
    """
    N x N x N table of doubles.
    """

    def __init__(self, size: int = config.MATRIX_SIZE) -> None:
        """
        Args:
            size: Edge length of the cube.
        """
        if size < 1:
            raise ValueError(f"Volume size must be positive, got {size}")
        self.size = size
        self._cube_data: npt.NDArray[np.float64] = np.zeros((size, size, size), dtype=np.float64)
        self.filled = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self.size}, filled={self.filled})"

    @property
    def cube(self) -> npt.NDArray[np.float64]:
        """Copy of the stored values, indexed [z, y, x]."""
        return self._cube_data.copy()

    def fill_volume_random(self, rng: np.random.Generator) -> None:
        """
        Fill the cube with random values rounded to config.DECIMALS.

        Args:
            rng: Seeded generator. Draw order is z -> y -> x, which is the
                C order of the [z, y, x] array.
        """
        draws = rng.uniform(config.RANDOM_LOW, config.RANDOM_HIGH, size=self._cube_data.shape)
        self._cube_data[:] = np.round(draws, config.DECIMALS)
        self.filled = True
        logger.debug("Volume filled with %d random values.", self._cube_data.size)

    def fill_volume_manual(self, source: InputSource) -> None:
        """
        Fill the cube layer by layer from the input source.

        Args:
            source: Where the values are read from.

        Raises:
            InputExhaustedError: If input ends early. The cube keeps its previous contents.
        """
        source.notify("Filling the 3D matrix (layer by layer)...")
        buffer = np.empty_like(self._cube_data)
        for z in range(self.size):
            source.notify(f"--- Layer Z={z} ---")
            for y in range(self.size):
                for x in range(self.size):
                    buffer[z, y, x] = read_float(
                        source,
                        f"Val [z:{z}, y:{y}, x:{x}]: ",
                        "Invalid number.",
                    )
        self._cube_data[:] = buffer
        self.filled = True

    def load_values(self, values: Iterable[float]) -> None:
        """
        Load N*N*N values in z -> y -> x order.

        Raises:
            ValueError: If the number of values does not match the cube.
        """
        flat = np.fromiter(values, dtype=np.float64)
        if flat.size != self._cube_data.size:
            raise ValueError(f"Expected {self._cube_data.size} values, got {flat.size}")
        self._cube_data[:] = flat.reshape(self._cube_data.shape)
        self.filled = True

    def get_min_from_volume(self) -> float:
        """
        Smallest value in the cube.

        Raises:
            InvalidStateError: If the cube has not been filled yet.
        """
        if not self.filled:
            raise InvalidStateError("3D volume has not been filled yet")
        return float(self._cube_data.min())

    def show_layers(self) -> str:
        """Render each z-layer as an indented block of rows."""
        lines: list[str] = []
        for z in range(self.size):
            lines.append(f"Layer Z = {z}:")
            for row in self._cube_data[z]:
                lines.append("  " + "".join(f"{config.format_cell(value)} " for value in row))
        return "\n".join(lines)
