# src/blackjack/client/cardfx/sprites.py
from __future__ import annotations

from blackjack.common.cards import Card
from blackjack.common.constants import RED_SUITS, SUIT_SYMBOLS

from .terminal import RED_BOLD, RESET, Sprite, Style


def suit_style(card: Card) -> Style:
    # Hearts/diamonds red; spades/clubs default
    return RED_BOLD if card.suit in RED_SUITS else RESET


def card_face(card: Card, w: int = 9, h: int = 5, color: bool = False) -> Sprite:
    w = max(w, 7)
    h = max(h, 4)
    inner_w = w - 2

    top = "┌" + "─" * inner_w + "┐"
    bot = "└" + "─" * inner_w + "┘"

    suit = SUIT_SYMBOLS[card.suit]
    r = card.label[:2]
    tl = (r + suit).ljust(inner_w)
    br = (r + suit).rjust(inner_w)

    lines = [top, "│" + tl + "│"]
    middle_rows = h - 4
    mid_symbol = suit.center(inner_w)
    for i in range(middle_rows):
        lines.append("│" + (mid_symbol if i == middle_rows // 2 else " " * inner_w) + "│")
    lines.append("│" + br + "│")
    lines.append(bot)

    if color:
        style = suit_style(card)
        lines = [style.paint(line) for line in lines]
    return Sprite(lines)
