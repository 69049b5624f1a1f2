"""Game session: deposit once, then play rounds until broke or done."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

import structlog

from .engine.payout import PayoutEvaluator
from .engine.spin import Grid, SpinEngine, transpose
from .formatter import format_amount, format_grid
from .prompts import Prompter, SessionAborted

logger = structlog.get_logger(__name__)


class GameState(Enum):
    AWAITING_DEPOSIT = auto()
    ROUND_START = auto()
    ROUND_RESOLVED = auto()
    TERMINATED = auto()


@dataclass(frozen=True)
class RoundResult:
    lines: int
    bet: float
    rows: Grid
    winnings: float
    balance: float

    @property
    def stake(self) -> float:
        return self.bet * self.lines

    @property
    def balance_change(self) -> float:
        return self.winnings - self.stake

    def to_dict(self) -> dict:
        return {
            "lines": self.lines,
            "bet": self.bet,
            "stake": self.stake,
            "rows": [[str(s) for s in row] for row in self.rows],
            "winnings": self.winnings,
            "balance": self.balance,
        }


class SlotMachineGame:
    def __init__(
        self,
        prompter: Optional[Prompter] = None,
        engine: Optional[SpinEngine] = None,
        evaluator: Optional[PayoutEvaluator] = None,
    ) -> None:
        self.prompter = prompter or Prompter()
        self.engine = engine or SpinEngine()
        self.evaluator = evaluator or PayoutEvaluator(self.engine.table)
        self.say = self.prompter.say
        self.state = GameState.AWAITING_DEPOSIT
        self.balance: float = 0
        self.history: List[RoundResult] = []

    def play_round(self) -> RoundResult:
        self.say(f"Current Balance ${format_amount(self.balance)}")
        lines = self.prompter.lines(self.engine.rows)
        bet = self.prompter.bet(self.balance, lines)
        self.balance -= bet * lines

        rows = transpose(self.engine.spin())
        for line in format_grid(rows):
            self.say(line)
        winnings = self.evaluator.winnings(rows, bet, lines)
        self.balance += winnings
        self.say(f"You won, ${format_amount(winnings)}")

        result = RoundResult(lines=lines, bet=bet, rows=rows, winnings=winnings, balance=self.balance)
        self.history.append(result)
        logger.info(
            "round_resolved",
            winning_lines=self.evaluator.winning_lines(rows, lines),
            **result.to_dict(),
        )
        return result

    def step(self) -> GameState:
        """Advance the session by one state transition."""
        if self.state is GameState.AWAITING_DEPOSIT:
            self.balance = self.prompter.deposit()
            self.state = GameState.ROUND_START
        elif self.state is GameState.ROUND_START:
            self.play_round()
            self.state = GameState.ROUND_RESOLVED
        elif self.state is GameState.ROUND_RESOLVED:
            if self.balance <= 0:
                self.say("You ran out of money!")
                self.state = GameState.TERMINATED
            elif self.prompter.play_again():
                self.state = GameState.ROUND_START
            else:
                self.state = GameState.TERMINATED
        return self.state

    def run(self) -> float:
        try:
            while self.state is not GameState.TERMINATED:
                self.step()
        except SessionAborted:
            logger.info("session_aborted")
            self.state = GameState.TERMINATED
        self.say(f"Final Balance ${format_amount(self.balance)}")
        logger.info("session_terminated", balance=self.balance, rounds=len(self.history))
        return self.balance
