# src/blackjack/client/ui.py

from typing import Callable

DRAW_PROMPT = "Do you want to draw? (y/n): "
REPLAY_PROMPT = "Would you like to play another round? (y/n): "


def welcome_script() -> str:
    return "\nWelcome to the blackjack table\n"


def goodbye_script() -> str:
    return "Game over! Thank you for visiting the Blackjack table."


def ask_yes_no(prompt: str, read: Callable[[str], str] = input) -> bool:
    """
    Returns True for y/yes, False for n/no (case-insensitive).
    Keeps asking on anything else; end of input counts as "no".
    """
    while True:
        try:
            raw = read(prompt).strip().lower()
        except EOFError:
            return False
        if raw.startswith("y"):
            return True
        if raw.startswith("n"):
            return False


def make_draw_source(read: Callable[[str], str] = input) -> Callable[[], bool]:
    """Decision source for HumanPlayer backed by the console."""
    return lambda: ask_yes_no(DRAW_PROMPT, read)
