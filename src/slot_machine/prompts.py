"""Prompt-and-validate loops for the player's numeric answers.

Each loop asks for a line of text, parses it as a float and keeps asking
until the value is acceptable. There is no retry limit.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

import structlog

logger = structlog.get_logger(__name__)

ACCEPT_TOKEN = "y"

InputProvider = Callable[[str], str]
OutputSink = Callable[[str], None]


class SlotMachineError(Exception):
    """Base error for the slot machine."""


class SessionAborted(SlotMachineError):
    """The player closed the input stream or interrupted a prompt."""


def parse_number(text: str) -> Optional[float]:
    """Return the finite float in ``text`` or None."""
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


class Prompter:
    def __init__(
        self,
        ask: Optional[InputProvider] = None,
        say: Optional[OutputSink] = None,
    ) -> None:
        self.ask = ask or input
        self.say = say or print

    def read(self, prompt: str) -> str:
        try:
            return self.ask(prompt)
        except (EOFError, KeyboardInterrupt) as exc:
            raise SessionAborted(prompt) from exc

    def _loop(
        self,
        prompt: str,
        error: str,
        accept: Callable[[float], bool],
    ) -> float:
        while True:
            text = self.read(prompt)
            value = parse_number(text)
            if value is not None and accept(value):
                return value
            logger.debug("input_rejected", prompt=prompt, text=text)
            self.say(error)

    def deposit(self) -> float:
        return self._loop(
            "Enter a deposit amount: ",
            "Invalid deposit, Try again!",
            lambda v: v > 0,
        )

    def lines(self, max_lines: int) -> int:
        value = self._loop(
            f"Enter number of lines to bet between 1 and {max_lines} : ",
            "Invalid number of lines, Try again!",
            lambda v: v.is_integer() and 1 <= v <= max_lines,
        )
        return int(value)

    def bet(self, balance: float, lines: int) -> float:
        return self._loop(
            "Enter your bet amount per line : ",
            "Invalid bet, Try again!",
            lambda v: 0 < v <= balance / lines,
        )

    def play_again(self) -> bool:
        return self.read("Do you want to play again(y/n)? ") == ACCEPT_TOKEN
