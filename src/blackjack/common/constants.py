# src/blackjack/common/constants.py

BLACKJACK = 21
ACE_SOFT_BONUS = 10          # an Ace counts 11 until it has to drop back to 1
DEALER_STAND_ON = 16         # house rule: dealer hits on 15 or less

# Rank encoding: Ace..King -> 1..13
ACE = 1
JACK = 11
QUEEN = 12
KING = 13
RANKS = list(range(ACE, KING + 1))

RANK_LABELS = {ACE: "A", JACK: "J", QUEEN: "Q", KING: "K"}

# Suit encoding, in deck build order
SUITS = ["C", "D", "H", "S"]
SUIT_SYMBOLS = {"C": "♣", "D": "♦", "H": "♥", "S": "♠"}
RED_SUITS = {"D", "H"}

DECK_SIZE = len(SUITS) * len(RANKS)  # 52

# Round result codes (player's point of view)
RESULT_TIE = 0x1
RESULT_LOSS = 0x2
RESULT_WIN = 0x3

VALID_RESULTS = {RESULT_TIE, RESULT_LOSS, RESULT_WIN}

# Dealer draw policies
DEALER_POLICY_CHASE = "chase"   # draw until ahead of the player, 21 or bust
DEALER_POLICY_HOUSE = "house"   # draw while below DEALER_STAND_ON
VALID_DEALER_POLICIES = {DEALER_POLICY_CHASE, DEALER_POLICY_HOUSE}

DEALER_NAME = "Casino"
PLAYER_NAME = "Player"
