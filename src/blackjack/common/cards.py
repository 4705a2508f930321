# src/blackjack/common/cards.py

import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .constants import ACE, KING, RANK_LABELS, RANKS, SUITS
from .rules import hand_value, soft_aces


class EmptyDeckError(IndexError):
    """Raised when a card is dealt from a deck with no cards left."""
    pass


@dataclass(frozen=True)
class Card:
    rank: int  # 1..13
    suit: str  # "C","D","H","S"

    def __post_init__(self) -> None:
        if not ACE <= self.rank <= KING:
            raise ValueError(f"rank must be 1..13, got {self.rank!r}")
        if self.suit not in SUITS:
            raise ValueError(f"suit must be one of {SUITS}, got {self.suit!r}")

    @property
    def is_ace(self) -> bool:
        return self.rank == ACE

    @property
    def label(self) -> str:
        return RANK_LABELS.get(self.rank, str(self.rank))

    def value(self) -> int:
        # Ace = 11 until the hand rescoring knocks it down to 1
        if self.is_ace:
            return 11
        if self.rank >= 10:
            return 10
        return self.rank

    def display(self) -> str:
        return f"{self.label}{self.suit}"

    def __str__(self) -> str:
        return self.display()


class Hand:
    """Cards held by one party, in the order they were dealt."""

    def __init__(self) -> None:
        self._cards: List[Card] = []

    def add(self, card: Card) -> None:
        self._cards.append(card)

    def clear(self) -> None:
        self._cards.clear()

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def total(self) -> int:
        return hand_value(self._cards)

    def is_soft(self) -> bool:
        """True while at least one Ace is still counted as 11."""
        return soft_aces(self._cards) > 0

    def display(self) -> str:
        return " ".join(c.display() for c in self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    def __repr__(self) -> str:
        return f"Hand([{self.display()}] total={self.total()})"


class Deck:
    """
    A single 52-card deck.

    populate() rebuilds the cards in a fixed order (suit-major, Ace..King),
    shuffle() permutes them with the deck's own PRNG and deal() pops the last
    card. Pass a seed for a reproducible shuffle; seed=None draws from the OS.
    """

    def __init__(self, *, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)
        self._cards: List[Card] = []

    def populate(self) -> None:
        self._cards = [Card(r, s) for s in SUITS for r in RANKS]

    def shuffle(self) -> None:
        if not self._cards:
            return
        self._rng.shuffle(self._cards)

    def deal(self) -> Card:
        if not self._cards:
            raise EmptyDeckError("Cannot deal from an empty deck")
        return self._cards.pop()

    def deal_to(self, hand: Hand) -> Card:
        card = self.deal()
        hand.add(card)
        return card

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)
