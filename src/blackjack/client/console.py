# src/blackjack/client/console.py

import sys
from typing import Optional, TextIO

from blackjack.common.constants import RESULT_LOSS, RESULT_WIN
from blackjack.table.players import Player
from blackjack.table.round import RoundResult, TableView

from .cardfx import BOLD, GREEN_BOLD, RED_BOLD, YELLOW_BOLD, card_face, hstack


class ConsoleView(TableView):
    """
    Prints the table to a text stream.

    Short form:  'Casino: AS [11]'
    Card art:    one row of card faces under the 'Casino: [11]' header
    """

    def __init__(self, out: Optional[TextIO] = None, card_art: bool = False, color: bool = True):
        self.out = out if out is not None else sys.stdout
        self.card_art = card_art
        self.color = color

    def _write(self, text: str) -> None:
        self.out.write(text + "\n")
        self.out.flush()

    def show_hand(self, player: Player) -> None:
        hand = player.hand
        if not self.card_art:
            self._write(f"{player.name}: {hand.display()} [{hand.total()}]")
            return

        self._write(BOLD.paint(f"{player.name}: [{hand.total()}]", self.color))
        row = hstack([card_face(c, color=self.color) for c in hand])
        for line in row.lines:
            self._write(line)

    def announce(self, result: RoundResult) -> None:
        if result.result == RESULT_WIN:
            style = GREEN_BOLD
        elif result.result == RESULT_LOSS:
            style = RED_BOLD
        else:
            style = YELLOW_BOLD
        for line in result.message.splitlines():
            self._write(style.paint(line, self.color))
        self._write("")
