# src/blackjack/table/stats.py

from __future__ import annotations

import dataclasses

from blackjack.common.constants import RESULT_LOSS, RESULT_TIE, RESULT_WIN
from blackjack.table.round import RoundResult


@dataclasses.dataclass
class SessionStats:
    """Running tally for the current sitting. Not persisted."""
    wins: int = 0
    losses: int = 0
    pushes: int = 0
    aborted: int = 0

    @property
    def rounds(self) -> int:
        return self.wins + self.losses + self.pushes

    @property
    def win_rate(self) -> float:
        decided = self.wins + self.losses
        return (self.wins / decided) if decided > 0 else 0.0

    def record(self, result: RoundResult) -> None:
        if result.result == RESULT_WIN:
            self.wins += 1
        elif result.result == RESULT_LOSS:
            self.losses += 1
        elif result.result == RESULT_TIE:
            self.pushes += 1
        else:
            raise ValueError(f"Unknown result code: {result.result!r}")

    def record_abort(self) -> None:
        self.aborted += 1

    def summary(self) -> str:
        text = f"Rounds: {self.rounds} | W={self.wins} L={self.losses} P={self.pushes}"
        if self.wins + self.losses:
            text += f" | win rate {self.win_rate:.1%}"
        if self.aborted:
            text += f" | aborted={self.aborted}"
        return text
