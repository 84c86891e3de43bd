"""
Demo Driver
===========
Builds the list of matrices and walks each one through
fill -> display -> minimum, without knowing which concrete type it holds.

Why is this file needed?
------------------------
It acts as the composition root. It:
1. Parses command-line options into DemoSettings.
2. Sets up logging.
3. Creates the random generator and the input source and passes them in
   explicitly, so no object keeps global state.
4. Guarantees each matrix is closed before the next one is started.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

import numpy as np

from matrixadapter import config
from matrixadapter.config import DemoSettings, FillMode
from matrixadapter.exceptions import InputExhaustedError
from matrixadapter.io.inputs import ConsoleInput, InputSource
from matrixadapter.logging_config import configure_from_settings
from matrixadapter.model.adapter import Volume3DAdapter
from matrixadapter.model.contract import Loggable, MatrixOperations
from matrixadapter.model.grid import Grid2D
from matrixadapter.model.volume import Volume3D
from matrixadapter.selfcheck import run_self_check

logger = logging.getLogger(__name__)

BANNER = "=== Matrix Adapter Demo (Random & Input) ==="


def build_matrices() -> list[MatrixOperations]:
    """One direct implementer and one adapted volume."""
    return [
        Grid2D(),
        Volume3DAdapter(Volume3D()),
    ]


def choose_fill_mode(source: InputSource, out: TextIO) -> FillMode:
    """Ask once how all matrices should be filled."""
    print("Choose how to fill the matrices:", file=out)
    print("1. Random numbers", file=out)
    print("2. Keyboard input", file=out)
    mode = FillMode.from_choice(source.read("Your choice: "))
    logger.info("Fill mode: %s", mode)
    return mode


def process_matrix(
    matrix: MatrixOperations,
    mode: FillMode,
    rng: np.random.Generator,
    source: InputSource,
    out: TextIO,
) -> float:
    """
    Run one matrix through its full lifecycle and close it.

    Returns:
        The minimum printed for this matrix.
    """
    with matrix:
        if mode is FillMode.RANDOM:
            matrix.fill_random(rng)
        else:
            matrix.fill_manual(source)

        if isinstance(matrix, Loggable):
            matrix.log_info("Operation completed (logged via interface).")

        print(matrix.display(), file=out)
        minimum = matrix.find_min()
        print(f">> MIN Element: {minimum:.2f}", file=out)
        print("-" * config.SEPARATOR_WIDTH, file=out)
    return minimum


def run_demo(
    matrices: Sequence[MatrixOperations],
    mode: FillMode,
    rng: np.random.Generator,
    source: InputSource,
    out: TextIO,
) -> list[float]:
    """
    Process the matrices strictly one after another.

    If one of them fails, the ones not yet processed are closed as well.
    """
    minima: list[float] = []
    try:
        for matrix in matrices:
            minima.append(process_matrix(matrix, mode, rng, source, out))
    finally:
        for matrix in matrices:
            matrix.close()
    return minima


def parse_args(argv: Optional[Sequence[str]] = None) -> DemoSettings:
    parser = argparse.ArgumentParser(
        prog="matrixadapter",
        description="Adapter pattern demo: a 2D matrix and an adapted 3D matrix behind one interface.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random generator.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--random", dest="fill_mode", action="store_const", const=FillMode.RANDOM,
                      help="Fill with random numbers without asking.")
    mode.add_argument("--manual", dest="fill_mode", action="store_const", const=FillMode.MANUAL,
                      help="Fill from keyboard input without asking.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    parser.add_argument("--self-check", action="store_true", help="Run the self-check and exit.")
    args = parser.parse_args(argv)

    return DemoSettings(
        seed=args.seed,
        fill_mode=args.fill_mode,
        log_level=logging.DEBUG if args.debug else logging.INFO,
        log_file=args.log_file,
        self_check=args.self_check,
    )


def main(
    argv: Optional[Sequence[str]] = None,
    source: Optional[InputSource] = None,
    out: Optional[TextIO] = None,
) -> int:
    settings = parse_args(argv)
    out = out if out is not None else sys.stdout
    source = source if source is not None else ConsoleInput(out)

    configure_from_settings(settings, stream=out)

    if settings.self_check:
        report = run_self_check(settings.seed if settings.seed is not None else 42)
        print(report.render(), file=out)
        return 0

    print(f"{BANNER}\n", file=out)

    rng = np.random.default_rng(settings.seed)
    mode = settings.fill_mode or choose_fill_mode(source, out)

    try:
        run_demo(build_matrices(), mode, rng, source, out)
    except InputExhaustedError as e:
        logger.error("Stopped: %s", e)
        print("\nInput ended before all values were entered.", file=out)

    print("\nProgram finished. Press Enter.", file=out)
    source.read("")
    return 0


if __name__ == "__main__":
    sys.exit(main())
