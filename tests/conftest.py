from typing import Callable, Iterable, List, Optional

import pytest

from blackjack.common.cards import Card, Deck
from blackjack.table.players import Player
from blackjack.table.round import RoundResult, TableView


def cards(*tokens: str) -> List[Card]:
    """cards("A", "10", "K") -> spades of those ranks; "9H" picks a suit."""
    ranks = {"A": 1, "J": 11, "Q": 12, "K": 13}
    out = []
    for t in tokens:
        suit = "S"
        if t[-1] in "CDHS":
            t, suit = t[:-1], t[-1]
        out.append(Card(ranks.get(t) or int(t), suit))
    return out


class StackedDeck(Deck):
    """Deals a fixed sequence, first card first. Shuffle is a no-op."""

    def __init__(self, order: Iterable[Card], on_populate: Optional[Callable[[], None]] = None):
        super().__init__(seed=0)
        self._order = list(order)
        self._on_populate = on_populate
        self.populate_calls = 0

    def populate(self) -> None:
        self.populate_calls += 1
        if self._on_populate is not None:
            self._on_populate()
        self._cards = list(reversed(self._order))

    def shuffle(self) -> None:
        pass


class RecordingView(TableView):
    def __init__(self):
        self.shown = []         # (name, tokens, total)
        self.announced: List[RoundResult] = []

    def show_hand(self, player: Player) -> None:
        self.shown.append((player.name, player.hand.display(), player.hand.total()))

    def announce(self, result: RoundResult) -> None:
        self.announced.append(result)


def scripted(*answers: bool) -> Callable[[], bool]:
    it = iter(answers)
    return lambda: next(it)


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()
