# src/blackjack/common/logging_utils.py

import logging
import os
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .cards import Hand

# Environment switches:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
# WARNING by default so log lines don't interleave with the table output.
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def setup_logging(level: Optional[str] = None) -> None:
    """Call once at program start (client/main.py)."""
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_hand(
    logger: logging.Logger,
    who: str,                     # "Casino" / "Player"
    hand: "Hand",
    note: str = "",
    level: int = logging.DEBUG,
) -> None:
    """
    Unified hand log, one line per deal or checkpoint:
    '[Player] cards=AS 10H total=21 soft | note'
    """
    base = f"[{who}] cards={hand.display() or '-'} total={hand.total()}"
    if hand.is_soft():
        base += " soft"
    if note:
        base += f" | {note}"

    logger.log(level, base)
