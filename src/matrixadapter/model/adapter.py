"""
Volume Adapter
==============
Makes a Volume3D usable wherever MatrixOperations is expected.

Every contract call is forwarded to exactly one Volume3D method; values are
never copied, reshaped or converted on the way. Log messages are buffered
and shown at the end of display() instead of being printed immediately.
"""
from __future__ import annotations

from datetime import datetime
import logging
from typing import TYPE_CHECKING, Callable, Optional

from matrixadapter.model.contract import MatrixOperations, render_header
from matrixadapter.model.volume import Volume3D

if TYPE_CHECKING:
    import numpy as np
    from matrixadapter.io.inputs import InputSource

logger = logging.getLogger(__name__)


class Volume3DAdapter(MatrixOperations):
    """
    Adapter exposing a Volume3D through the matrix contract.
    """
    NAME = "Adapter for 3D Matrix"

    def __init__(self, volume: Volume3D, clock: Optional[Callable[[], datetime]] = None) -> None:
        """
        Args:
            volume: The pre-built volume to wrap. The adapter keeps the only reference it uses.
            clock: Source of timestamps for buffered log lines (defaults to datetime.now).
        """
        super().__init__()
        if not isinstance(volume, Volume3D):
            raise TypeError(f"Volume3DAdapter wraps a Volume3D, got {type(volume).__name__}")
        self._adaptee = volume
        self._clock = clock or datetime.now
        self._log_buffer: list[str] = []

    @property
    def adaptee(self) -> Volume3D:
        return self._adaptee

    @property
    def log_buffer(self) -> list[str]:
        """Copy of the buffered log lines, oldest first."""
        return list(self._log_buffer)

    def fill_random(self, rng: np.random.Generator) -> None:
        self._adaptee.fill_volume_random(rng)
        self.log_info("Filled RANDOM through the adapter.")

    def fill_manual(self, source: InputSource) -> None:
        source.notify("\n[Adapter] Starting manual fill of the 3D matrix...")
        self._adaptee.fill_volume_manual(source)
        self.log_info("Filled MANUAL through the adapter.")

    def find_min(self) -> float:
        return self._adaptee.get_min_from_volume()

    def display(self) -> str:
        parts = [
            render_header(self.NAME),
            "(Adapted 3D view)",
            self._adaptee.show_layers(),
        ]
        parts.extend(self._log_buffer)
        return "\n".join(parts)

    def log_info(self, message: str) -> None:
        self._log_buffer.append(f"[LOG 3D BUFFER] {self._clock():%H:%M:%S}: {message}")

    def _release(self) -> None:
        for line in self._log_buffer:
            logger.debug(line)
        self._log_buffer.clear()
