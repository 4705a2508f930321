# src/blackjack/table/players.py

from typing import Callable

from blackjack.common.cards import Hand
from blackjack.common.constants import DEALER_NAME, PLAYER_NAME
from blackjack.common.rules import dealer_should_hit, is_bust

# Blocking yes/no query: "does the player want another card?"
DecisionSource = Callable[[], bool]


class Player:
    """A seat at the table. Owns one Hand for the whole session."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._hand = Hand()

    @property
    def hand(self) -> Hand:
        return self._hand

    def total(self) -> int:
        return self._hand.total()

    def is_busted(self) -> bool:
        return is_bust(self._hand)

    def wants_to_draw(self) -> bool:
        raise NotImplementedError

    def reset(self) -> None:
        self._hand.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self._hand!r})"


class Dealer(Player):
    """House seat: hits on 15 or less, stands on 16 and up."""

    def __init__(self, name: str = DEALER_NAME) -> None:
        super().__init__(name)

    def wants_to_draw(self) -> bool:
        return dealer_should_hit(self._hand)


class HumanPlayer(Player):
    """Defers every draw decision to an injected yes/no source."""

    def __init__(self, decide: DecisionSource, name: str = PLAYER_NAME) -> None:
        super().__init__(name)
        self._decide = decide

    def wants_to_draw(self) -> bool:
        return bool(self._decide())
