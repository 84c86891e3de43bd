"""
Configuration & Global Constants
================================
This module serves as the central registry for the demo's fixed dimensions,
numeric ranges and console formatting.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (grid size, random range, cell
   width) from being scattered across the matrix classes.
2. Run settings: It defines the DemoSettings container the CLI fills from
   its arguments and hands to the driver.

Exports:
    MATRIX_SIZE (int): Dimension N of every grid and volume.
    RANDOM_LOW, RANDOM_HIGH (float): Range of random fill values.
    DECIMALS (int): Rounding of random values and display precision.
    CELL_WIDTH (int): Fixed width of one rendered cell.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

MATRIX_SIZE: int = 3

RANDOM_LOW: float = -10.0
RANDOM_HIGH: float = 10.0

DECIMALS: int = 2
CELL_WIDTH: int = 7
SEPARATOR_WIDTH: int = 40

MANUAL_CHOICE: str = "2"


class FillMode(StrEnum):
    RANDOM = "random"
    MANUAL = "manual"

    @classmethod
    def from_choice(cls, choice: Optional[str]) -> FillMode:
        """Map the menu line to a fill mode. Only "2" selects manual input."""
        if choice is not None and choice.strip() == MANUAL_CHOICE:
            return cls.MANUAL
        return cls.RANDOM


@dataclass
class DemoSettings:
    """
    Settings for one run of the demo.
    A fill_mode of None means the driver asks through the menu.
    """
    seed: Optional[int] = None
    fill_mode: Optional[FillMode] = None
    log_level: int = logging.INFO
    log_file: Optional[str] = None
    self_check: bool = False


def format_cell(value: float) -> str:
    """Fixed-width, fixed-precision rendering of one cell."""
    return f"{value:{CELL_WIDTH}.{DECIMALS}f}"
