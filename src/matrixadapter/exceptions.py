import sys


# Largest representable double. find_min() never returns it as a
# "not filled yet" marker; InvalidStateError is raised instead.
SENTINEL_MIN: float = sys.float_info.max


class MatrixError(RuntimeError):
    """Base class for errors raised by the matrix demo."""


class InvalidStateError(MatrixError):
    """An operation was requested in a state where its result is undefined."""


class InputExhaustedError(MatrixError):
    """The input source ended while a numeric value was still required."""
