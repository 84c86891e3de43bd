"""
Input Sources
=============
Abstractions over where manually entered matrix values come from.

The matrix classes never call input() themselves; they receive an
InputSource. ConsoleInput reads from the terminal, ScriptedInput replays a
fixed list of lines (tests, self-check).
"""
from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import Iterable, Optional, TextIO

import numpy as np

from matrixadapter.exceptions import InputExhaustedError

logger = logging.getLogger(__name__)


class InputSource(ABC):
    """
    Abstract base class for line-oriented user input.
    """

    @abstractmethod
    def read(self, prompt: str) -> Optional[str]:
        """
        Show the prompt and read one line.

        Args:
            prompt: Text shown before reading.

        Returns:
            The line without its trailing newline, or None at end of input.
        """
        pass

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show a feedback message to the user (e.g. a rejected value)."""
        pass


class ConsoleInput(InputSource):
    """Reads from standard input via the builtin input()."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def read(self, prompt: str) -> Optional[str]:
        # prompt goes to the same stream as notices
        self.stream.write(prompt)
        self.stream.flush()
        try:
            return input()
        except EOFError:
            logger.debug("End of input reached at prompt %r", prompt)
            return None

    def notify(self, message: str) -> None:
        print(message, file=self.stream)


class ScriptedInput(InputSource):
    """
    Replays a fixed sequence of lines.

    Every prompt and notice is recorded so callers can inspect the
    conversation afterwards.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self._position = 0
        self.prompts: list[str] = []
        self.messages: list[str] = []

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(remaining={self.remaining})"

    @property
    def remaining(self) -> int:
        return len(self._lines) - self._position

    def read(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        if self._position >= len(self._lines):
            return None
        line = self._lines[self._position]
        self._position += 1
        return line

    def notify(self, message: str) -> None:
        self.messages.append(message)


def parse_float(text: Optional[str]) -> Optional[float]:
    """
    Parse one user token as a decimal number.

    Both '.' and ',' are accepted as the decimal separator. Empty,
    non-numeric and non-finite tokens (nan, inf) are rejected.

    Returns:
        The parsed value, or None if the token is not a valid number.
    """
    if text is None:
        return None
    token = text.strip().replace(",", ".")
    if not token:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if not np.isfinite(value):
        return None
    return value


def read_float(source: InputSource, prompt: str, error_message: str) -> float:
    """
    Prompt until the source yields a valid number.

    There is no retry limit: every malformed token is reported through
    source.notify() and the prompt is shown again.

    Raises:
        InputExhaustedError: If the source reaches end of input first.
    """
    while True:
        line = source.read(prompt)
        if line is None:
            raise InputExhaustedError(f"Input ended while waiting for {prompt.strip()!r}")
        value = parse_float(line)
        if value is not None:
            return value
        logger.debug("Rejected input %r at prompt %r", line, prompt)
        source.notify(error_message)
