# src/blackjack/client/main.py

import sys
from typing import Callable, Optional, TextIO

from blackjack.common.cards import Deck, EmptyDeckError
from blackjack.common.config import ConfigError, GameConfig
from blackjack.common.logging_utils import get_logger, setup_logging
from blackjack.table.players import Dealer, HumanPlayer
from blackjack.table.round import RoundController
from blackjack.table.stats import SessionStats
from blackjack.client.console import ConsoleView
from blackjack.client.ui import REPLAY_PROMPT, ask_yes_no, goodbye_script, make_draw_source, welcome_script

log = get_logger("client.main")


def build_table(config: GameConfig, read: Callable[[str], str], out: TextIO) -> RoundController:
    """Deck, both seats and the view are created once and reused every round."""
    return RoundController(
        deck=Deck(seed=config.seed),
        dealer=Dealer(),
        player=HumanPlayer(make_draw_source(read)),
        view=ConsoleView(out, card_art=config.card_art, color=config.color),
        dealer_policy=config.dealer_policy,
    )


def run(config: GameConfig, read: Callable[[str], str] = input, out: Optional[TextIO] = None) -> SessionStats:
    out = out if out is not None else sys.stdout
    table = build_table(config, read, out)
    stats = SessionStats()

    out.write(welcome_script() + "\n")
    try:
        while True:
            try:
                result = table.play()
                stats.record(result)
            except EmptyDeckError as e:
                log.warning(f"Round aborted in state {table.state.value}: {e}")
                out.write(f"Round aborted: {e}\n\n")
                stats.record_abort()

            if not ask_yes_no(REPLAY_PROMPT, read):
                break
    except KeyboardInterrupt:
        log.info("Interrupted, leaving the table")
        out.write("\n")

    log.info(f"===== SESSION OVER =====  {stats.summary()}")
    out.write(goodbye_script() + "\n")
    out.write(stats.summary() + "\n")
    return stats


def main() -> None:
    setup_logging()

    try:
        config = GameConfig.from_env()
    except ConfigError as e:
        log.error(str(e))
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    log.info(f"Starting with {config}")
    run(config)


if __name__ == "__main__":
    main()
