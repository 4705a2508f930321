# src/blackjack/table/round.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from blackjack.common.cards import Deck
from blackjack.common.constants import (
    BLACKJACK,
    DEALER_NAME,
    DEALER_POLICY_CHASE,
    DEALER_POLICY_HOUSE,
    PLAYER_NAME,
    RESULT_LOSS,
    RESULT_TIE,
    RESULT_WIN,
    VALID_DEALER_POLICIES,
)
from blackjack.common.logging_utils import get_logger, log_hand
from blackjack.common.rules import classify_outcome
from blackjack.table.players import Player

log = get_logger("table.round")


class RoundState(Enum):
    START = "start"
    DEALER_INITIAL_DEAL = "dealer_initial_deal"
    PLAYER_INITIAL_DEAL = "player_initial_deal"
    PLAYER_DRAW_LOOP = "player_draw_loop"
    DEALER_DRAW_LOOP = "dealer_draw_loop"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class RoundResult:
    result: int          # RESULT_WIN / RESULT_LOSS / RESULT_TIE (player's side)
    player_total: int
    dealer_total: int
    player_busted: bool
    dealer_busted: bool
    player_name: str = PLAYER_NAME
    dealer_name: str = DEALER_NAME

    @property
    def winner(self) -> str:
        if self.result == RESULT_WIN:
            return self.player_name
        if self.result == RESULT_LOSS:
            return self.dealer_name
        return ""

    @property
    def message(self) -> str:
        if self.player_busted:
            return f"{self.player_name} busts.\n{self.dealer_name} wins."
        if self.dealer_busted:
            return f"{self.dealer_name} busts.\n{self.player_name} wins."
        if self.result == RESULT_TIE:
            return "Push: No one wins."
        return f"{self.winner} wins."


class TableView:
    """
    Display and outcome sink for a round. The base class ignores everything,
    so it doubles as a headless view.
    """

    def show_hand(self, player: Player) -> None:
        pass

    def announce(self, result: RoundResult) -> None:
        pass


class RoundController:
    """
    Plays one round of blackjack per play() call.

    Owns the deck and both seats for the process lifetime; every round starts
    from empty hands and a freshly populated, shuffled deck. Any EmptyDeckError
    raised while dealing aborts the round and propagates to the caller.
    """

    def __init__(
        self,
        deck: Deck,
        dealer: Player,
        player: Player,
        view: Optional[TableView] = None,
        dealer_policy: str = DEALER_POLICY_CHASE,
    ):
        if dealer_policy not in VALID_DEALER_POLICIES:
            raise ValueError(f"Unknown dealer policy: {dealer_policy!r}")
        self.deck = deck
        self.dealer = dealer
        self.player = player
        self.view = view if view is not None else TableView()
        self.dealer_policy = dealer_policy
        self.state = RoundState.START

    # ---------- state ----------
    def reset(self) -> None:
        self.dealer.reset()
        self.player.reset()
        self.state = RoundState.START

    # ---------- round ----------
    def play(self) -> RoundResult:
        self.reset()
        self.deck.populate()
        self.deck.shuffle()
        log.info(f"New round: deck populated and shuffled ({len(self.deck)} cards)")

        self.state = RoundState.DEALER_INITIAL_DEAL
        self._deal(self.dealer, "initial deal")

        self.state = RoundState.PLAYER_INITIAL_DEAL
        self._deal(self.player, "initial deal", show=False)
        self._deal(self.player, "initial deal")

        self.state = RoundState.PLAYER_DRAW_LOOP
        player_busted = self._player_turn()

        if player_busted:
            result = self._resolve()
            self.state = RoundState.RESOLVED
            return result

        self.state = RoundState.DEALER_DRAW_LOOP
        if self.dealer_policy == DEALER_POLICY_HOUSE:
            self._dealer_turn_house()
        else:
            self._dealer_turn_chase()

        result = self._resolve()
        self.state = RoundState.RESOLVED
        return result

    def _deal(self, who: Player, note: str, show: bool = True) -> None:
        card = self.deck.deal_to(who.hand)
        log_hand(log, who.name, who.hand, note=f"{note}: {card}")
        if show:
            self.view.show_hand(who)

    def _player_turn(self) -> bool:
        """Returns True if the player busted."""
        while self.player.wants_to_draw():
            if not self.player.is_busted():
                self._deal(self.player, "player hit")
            if self.player.is_busted():
                return True
        log_hand(log, self.player.name, self.player.hand, note="stands")
        return False

    def _dealer_turn_chase(self) -> None:
        # Dealer keeps drawing until it is ahead, sitting on 21, or busted.
        player_total = self.player.total()
        while not self.dealer.is_busted() and self.dealer.total() != BLACKJACK:
            if self.dealer.total() > player_total:
                break
            self._deal(self.dealer, "dealer hit")

    def _dealer_turn_house(self) -> None:
        while self.dealer.wants_to_draw():
            self._deal(self.dealer, "dealer hit")

    def _resolve(self) -> RoundResult:
        player_total = self.player.total()
        dealer_total = self.dealer.total()
        result = RoundResult(
            result=classify_outcome(player_total, dealer_total),
            player_total=player_total,
            dealer_total=dealer_total,
            player_busted=self.player.is_busted(),
            dealer_busted=self.dealer.is_busted(),
            player_name=self.player.name,
            dealer_name=self.dealer.name,
        )
        log.info(f"Round over: player={player_total} dealer={dealer_total} result={_RESULT_NAMES[result.result]}")
        self.view.announce(result)
        return result


_RESULT_NAMES = {RESULT_WIN: "WIN", RESULT_LOSS: "LOSS", RESULT_TIE: "TIE"}
