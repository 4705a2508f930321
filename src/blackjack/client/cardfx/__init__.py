# cardfx/__init__.py

from .terminal import Sprite, Style, hstack, RESET, BOLD, RED_BOLD, GREEN_BOLD, YELLOW_BOLD
from .sprites import card_face, suit_style

__all__ = [
    "Sprite",
    "Style",
    "hstack",
    "RESET",
    "BOLD",
    "RED_BOLD",
    "GREEN_BOLD",
    "YELLOW_BOLD",
    "card_face",
    "suit_style",
]
