# src/blackjack/common/rules.py

from typing import TYPE_CHECKING, Iterable, Tuple

from .constants import (
    ACE_SOFT_BONUS,
    BLACKJACK,
    DEALER_STAND_ON,
    RESULT_LOSS,
    RESULT_TIE,
    RESULT_WIN,
)

if TYPE_CHECKING:
    from .cards import Card


def card_value(card: "Card") -> int:
    # Ace = 11, 2-10 = face value, J/Q/K = 10
    return card.value()


def _score(cards: Iterable["Card"]) -> Tuple[int, int]:
    """Returns (total, aces still counted as 11)."""
    total = 0
    aces = 0
    for c in cards:
        total += card_value(c)
        if c.is_ace:
            aces += 1
    while total > BLACKJACK and aces > 0:
        total -= ACE_SOFT_BONUS
        aces -= 1
    return total, aces


def hand_value(cards: Iterable["Card"]) -> int:
    return _score(cards)[0]


def soft_aces(cards: Iterable["Card"]) -> int:
    return _score(cards)[1]


def is_bust_total(total: int) -> bool:
    return total > BLACKJACK


def is_bust(cards: Iterable["Card"]) -> bool:
    return is_bust_total(hand_value(cards))


def dealer_should_hit_total(total: int) -> bool:
    return total < DEALER_STAND_ON


def dealer_should_hit(cards: Iterable["Card"]) -> bool:
    return dealer_should_hit_total(hand_value(cards))


def classify_outcome(player_total: int, dealer_total: int) -> int:
    """
    Result code from the player's side. Precedence:
    player bust > dealer bust > higher total > push.
    """
    if is_bust_total(player_total):
        return RESULT_LOSS
    if is_bust_total(dealer_total):
        return RESULT_WIN
    if dealer_total > player_total:
        return RESULT_LOSS
    if player_total > dealer_total:
        return RESULT_WIN
    return RESULT_TIE
