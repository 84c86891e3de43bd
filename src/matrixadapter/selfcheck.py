"""
Self-Check Routine
==================
Runs the demo's core guarantees against freshly built objects and reports
which of them hold. Invoked with `matrixadapter --self-check`.

Checks:
    seeded_determinism: same seed -> same contents and minimum.
    constant_fill: a constant table has that constant as its minimum.
    increasing_fill: strictly increasing values -> the first one is the minimum.
    display_round_trip: the rendered text reproduces the stored values.
    adapter_transparency: adapter and a directly driven volume agree.
    manual_input_rejection: "abc" is rejected, "3.5" is accepted.
    seeded_range: seed 42 minima lie inside the random range.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import re
from typing import Callable

import numpy as np

from matrixadapter import config
from matrixadapter.exceptions import SENTINEL_MIN
from matrixadapter.io.inputs import ScriptedInput, read_float
from matrixadapter.model.adapter import Volume3DAdapter
from matrixadapter.model.grid import Grid2D
from matrixadapter.model.volume import Volume3D

logger = logging.getLogger(__name__)

_NUMBER_PATTERN = re.compile(r"-?\d+\.\d+")


@dataclass
class CheckResult:
    name: str
    passed: bool
    detail: str = ""


@dataclass
class SelfCheckReport:
    seed: int
    results: list[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    def render(self) -> str:
        lines = [f"Self-check (seed={self.seed}):"]
        for result in self.results:
            status = "PASS" if result.passed else "FAIL"
            suffix = f" ({result.detail})" if result.detail else ""
            lines.append(f"  [{status}] {result.name}{suffix}")
        lines.append("All checks passed." if self.passed else "Some checks FAILED.")
        return "\n".join(lines)


def parse_rendered_values(text: str) -> list[float]:
    """Extract every decimal number from a rendered matrix, in display order."""
    return [float(token) for token in _NUMBER_PATTERN.findall(text)]


def _check_seeded_determinism(seed: int) -> CheckResult:
    first, second = Grid2D(), Grid2D()
    first.fill_random(np.random.default_rng(seed))
    second.fill_random(np.random.default_rng(seed))
    grid_ok = np.array_equal(first.values, second.values) and first.find_min() == second.find_min()

    left, right = Volume3DAdapter(Volume3D()), Volume3DAdapter(Volume3D())
    left.fill_random(np.random.default_rng(seed))
    right.fill_random(np.random.default_rng(seed))
    adapter_ok = (
        np.array_equal(left.adaptee.cube, right.adaptee.cube)
        and left.find_min() == right.find_min()
    )
    return CheckResult("seeded_determinism", grid_ok and adapter_ok, f"grid={grid_ok}, adapter={adapter_ok}")


def _check_constant_fill(seed: int) -> CheckResult:
    value = 4.25
    grid = Grid2D()
    grid.fill_constant(value)
    found = grid.find_min()
    return CheckResult("constant_fill", found == value, f"min={found:.2f}")


def _check_increasing_fill(seed: int) -> CheckResult:
    grid = Grid2D()
    values = -2.0 + 0.5 * np.arange(grid.size * grid.size)
    grid.fill_values(values)
    found = grid.find_min()
    return CheckResult("increasing_fill", found == values[0], f"min={found:.2f}")


def _check_display_round_trip(seed: int) -> CheckResult:
    grid = Grid2D()
    grid.fill_random(np.random.default_rng(seed))
    parsed = parse_rendered_values(grid.display())
    expected = np.round(grid.values.ravel(), config.DECIMALS)
    ok = len(parsed) == expected.size and np.allclose(parsed, expected, atol=10 ** -config.DECIMALS / 2)
    return CheckResult("display_round_trip", bool(ok), f"{len(parsed)} values")


def _check_adapter_transparency(seed: int) -> CheckResult:
    direct = Volume3D()
    direct.fill_volume_random(np.random.default_rng(seed))
    adapter = Volume3DAdapter(Volume3D())
    adapter.fill_random(np.random.default_rng(seed))
    ok = np.array_equal(direct.cube, adapter.adaptee.cube) and direct.get_min_from_volume() == adapter.find_min()
    return CheckResult("adapter_transparency", bool(ok))


def _check_manual_input_rejection(seed: int) -> CheckResult:
    source = ScriptedInput(["abc", "3.5"])
    value = read_float(source, "Value: ", "Invalid number.")
    ok = value == 3.5 and len(source.prompts) == 2 and len(source.messages) == 1
    return CheckResult("manual_input_rejection", ok, f"prompts={len(source.prompts)}")


def _check_seeded_range(seed: int) -> CheckResult:
    minima = []
    for matrix in (Grid2D(), Volume3DAdapter(Volume3D())):
        with matrix:
            matrix.fill_random(np.random.default_rng(seed))
            minima.append(matrix.find_min())
    ok = all(config.RANDOM_LOW <= m <= config.RANDOM_HIGH and m != SENTINEL_MIN for m in minima)
    return CheckResult("seeded_range", ok, ", ".join(f"{m:.2f}" for m in minima))


CHECKS: list[Callable[[int], CheckResult]] = [
    _check_seeded_determinism,
    _check_constant_fill,
    _check_increasing_fill,
    _check_display_round_trip,
    _check_adapter_transparency,
    _check_manual_input_rejection,
    _check_seeded_range,
]


def run_self_check(seed: int = 42) -> SelfCheckReport:
    """
    Run every check with the given seed.

    Returns:
        Report with one CheckResult per check, in a fixed order.
    """
    report = SelfCheckReport(seed=seed)
    for check in CHECKS:
        result = check(seed)
        logger.debug("Self-check %s: %s", result.name, "pass" if result.passed else "fail")
        report.results.append(result)
    if not report.passed:
        logger.warning("Self-check reported failures.")
    return report
