"""
Central configuration for the console Blackjack game.
All constants defined here to avoid magic numbers scattered throughout code.
This single file is the source of truth for game rules and presentation settings.
"""

import os

# ============ GAME RULES ============
# Dealer hits while the hand total is below this value and stands on anything at or above it.
# Soft and hard 17 are treated the same: the dealer stands on both.
DEALER_HIT_THRESHOLD = 17
MAX_HAND_VALUE = 21
ACE_HIGH_VALUE = 11
ACE_LOW_VALUE = 1
FACE_CARD_VALUE = 10

# ============ DECK CONSTANTS ============
DECK_SIZE = 52

# ============ ROUND PARAMETERS ============
INITIAL_HAND_SIZE = 2  # Cards dealt to each side at start of round

# Pause (seconds) before the dealer's turn and after each dealer draw.
# Purely presentational: lets the player follow the dealer's cards one at a time.
# Tests inject a no-op sleep instead of touching this.
DEALER_DRAW_DELAY = 1.0

# ============ LOGGING ============
# Environment switch:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
# Default is WARNING so a normal game shows only the table text.
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
