import pytest

from blackjack.common.cards import Deck, EmptyDeckError
from blackjack.common.constants import (
    DEALER_POLICY_HOUSE,
    RESULT_LOSS,
    RESULT_TIE,
    RESULT_WIN,
    VALID_RESULTS,
)
from blackjack.table.players import Dealer, HumanPlayer, Player
from blackjack.table.round import RoundController, RoundResult, RoundState
from blackjack.table.stats import SessionStats

from conftest import StackedDeck, cards, scripted


def make_table(order, decide, view, **kw):
    deck = StackedDeck(cards(*order))
    table = RoundController(deck, Dealer(), HumanPlayer(decide), view=view, **kw)
    return table, deck


# Deal order: 1 card to the dealer, 2 to the player, player hits, then dealer hits.

def test_player_blackjack_beats_busting_dealer(view):
    table, _ = make_table(["10", "A", "K", "5", "9"], scripted(False), view)
    r = table.play()
    assert r.result == RESULT_WIN
    assert (r.player_total, r.dealer_total) == (21, 24)
    assert r.dealer_busted and not r.player_busted
    assert table.state is RoundState.RESOLVED


def test_dealer_forced_past_17_against_standing_18(view):
    table, _ = make_table(["10", "10", "8", "7", "K"], scripted(False), view)
    r = table.play()
    assert r.result == RESULT_WIN
    assert r.player_total == 18
    assert r.dealer_total == 27
    # the card that busts the dealer is still shown
    assert view.shown[-1] == ("Casino", "10S 7S KS", 27)
    assert r.message == "Casino busts.\nPlayer wins."


def test_player_bust_is_announced_once_and_dealer_skips(view):
    table, deck = make_table(["10", "10", "6", "K", "5"], scripted(True), view)
    r = table.play()
    assert r.result == RESULT_LOSS
    assert r.player_busted
    assert r.player_total == 26
    assert len(table.dealer.hand) == 1
    assert len(deck) == 1
    assert view.announced == [r]
    assert r.message == "Player busts.\nCasino wins."


def test_dealer_stops_on_21(view):
    table, deck = make_table(["A", "10", "9", "K", "5"], scripted(False), view)
    r = table.play()
    assert r.result == RESULT_LOSS
    assert (r.player_total, r.dealer_total) == (19, 21)
    assert len(deck) == 1


def test_dealer_stops_once_ahead_even_below_17(view):
    table, deck = make_table(["10", "10", "5", "6", "5"], scripted(False), view)
    r = table.play()
    assert r.result == RESULT_LOSS
    assert (r.player_total, r.dealer_total) == (15, 16)
    assert r.message == "Casino wins."
    assert len(deck) == 1


def test_dealer_keeps_drawing_on_a_tie(view):
    table, _ = make_table(["10", "10", "9", "9", "2"], scripted(False), view)
    r = table.play()
    assert r.result == RESULT_LOSS
    assert (r.player_total, r.dealer_total) == (19, 21)


def test_push_at_21(view):
    table, _ = make_table(["10", "A", "K", "A"], scripted(False), view)
    r = table.play()
    assert r.result == RESULT_TIE
    assert r.message == "Push: No one wins."
    assert r.winner == ""


def test_player_hits_then_stands(view):
    table, _ = make_table(["9", "2", "3", "5", "K", "Q"], scripted(True, False), view)
    r = table.play()
    assert r.player_total == 10
    assert table.player.hand.display() == "2S 3S 5S"
    assert r.dealer_total == 19
    assert r.result == RESULT_LOSS


def test_view_sees_initial_deals(view):
    table, _ = make_table(["7", "2", "3", "K", "Q"], scripted(False), view)
    table.play()
    assert view.shown[0] == ("Casino", "7S", 7)
    assert view.shown[1] == ("Player", "2S 3S", 5)


def test_house_policy_stands_on_16(view):
    table, deck = make_table(["10", "10", "8", "6", "K"], scripted(False), view,
                             dealer_policy=DEALER_POLICY_HOUSE)
    r = table.play()
    assert r.result == RESULT_WIN
    assert (r.player_total, r.dealer_total) == (18, 16)
    assert len(deck) == 1


def test_unknown_policy_rejected(view):
    with pytest.raises(ValueError):
        make_table(["10"], scripted(), view, dealer_policy="psychic")


def test_reset_clears_hands_before_populate(view):
    seen = []
    dealer, player = Dealer(), HumanPlayer(scripted(False, False))

    def check():
        seen.append((len(dealer.hand), len(player.hand)))

    deck = StackedDeck(cards("10", "10", "8", "7", "K"), on_populate=check)
    table = RoundController(deck, dealer, player, view=view)
    table.play()
    table.play()
    assert seen == [(0, 0), (0, 0)]
    assert deck.populate_calls == 2
    assert player.hand.display() == "10S 8S"


def test_empty_deck_aborts_round(view):
    table, _ = make_table(["10", "A"], scripted(False), view)
    with pytest.raises(EmptyDeckError):
        table.play()
    assert table.state is RoundState.PLAYER_INITIAL_DEAL
    assert view.announced == []


@pytest.mark.parametrize("always_draw", [False, True])
def test_random_rounds_always_terminate(always_draw):
    dealer = Dealer()
    player = HumanPlayer(lambda: always_draw)
    table = RoundController(Deck(seed=7), dealer, player)
    for _ in range(200):
        r = table.play()
        assert r.result in VALID_RESULTS
        assert len(table.deck) == 52 - len(dealer.hand) - len(player.hand)
        if always_draw:
            assert r.player_busted


def test_session_stats_tally():
    stats = SessionStats()
    stats.record(RoundResult(RESULT_WIN, 20, 18, False, False))
    stats.record(RoundResult(RESULT_LOSS, 25, 10, True, False))
    stats.record(RoundResult(RESULT_TIE, 20, 20, False, False))
    stats.record_abort()
    assert (stats.wins, stats.losses, stats.pushes, stats.rounds) == (1, 1, 1, 3)
    assert stats.win_rate == 0.5
    assert stats.summary() == "Rounds: 3 | W=1 L=1 P=1 | win rate 50.0% | aborted=1"


class Stander(Player):
    def wants_to_draw(self) -> bool:
        return False


def test_controller_accepts_any_player_strategy(view):
    deck = StackedDeck(cards("9", "10", "8"))
    table = RoundController(deck, Stander("Bank"), Stander("Guest"), view=view,
                            dealer_policy=DEALER_POLICY_HOUSE)
    r = table.play()
    assert r.result == RESULT_WIN
    assert (r.player_total, r.dealer_total) == (18, 9)
    assert r.message == "Guest wins."
