"""
Core blackjack game logic and rules.
"""

from enum import Enum

from config import DEALER_HIT_THRESHOLD, MAX_HAND_VALUE, ACE_HIGH_VALUE, ACE_LOW_VALUE

# Downgrading an Ace from 11 to 1
ACE_ADJUSTMENT = ACE_HIGH_VALUE - ACE_LOW_VALUE


class Outcome(Enum):
    """Result of a round, from the player's point of view."""
    PLAYER_BUST = "player_bust"
    DEALER_BUST = "dealer_bust"
    TIE = "tie"
    PLAYER_WINS = "player_wins"
    DEALER_WINS = "dealer_wins"

    @property
    def message(self):
        """Line announced at the table for this outcome."""
        return OUTCOME_MESSAGES[self]


OUTCOME_MESSAGES = {
    Outcome.PLAYER_BUST: "Player busts! Dealer wins.",
    Outcome.DEALER_BUST: "Dealer busts! Player wins.",
    Outcome.TIE: "It's a tie.",
    Outcome.PLAYER_WINS: "Player wins!",
    Outcome.DEALER_WINS: "Dealer wins.",
}


def _soft_total(cards):
    """Return (total, aces still counted as 11) after downgrading as needed."""
    total = sum(card.value() for card in cards)
    num_aces = sum(1 for card in cards if card.is_ace())

    while total > MAX_HAND_VALUE and num_aces > 0:
        total -= ACE_ADJUSTMENT
        num_aces -= 1

    return total, num_aces


def calculate_hand_value(cards):
    """
    Calculate the total value of a hand, handling Aces intelligently.

    Aces are initially counted as 11. If the total exceeds 21 and there are
    Aces in the hand, we recalculate them as 1 (one at a time) until we're
    at or under 21 or we've used all Aces.

    Args:
        cards (list): List of Card objects

    Returns:
        int: Total hand value (can exceed 21; caller treats that as a bust)
    """
    if not cards:
        return 0
    return _soft_total(cards)[0]


def is_soft(cards):
    """Return True if at least one Ace in the hand is still counted as 11."""
    if not cards:
        return False
    return _soft_total(cards)[1] > 0


def is_bust(hand_value):
    """
    Check if a hand value is a bust (over 21).

    Args:
        hand_value (int): Total value of hand

    Returns:
        bool: True if busted
    """
    return hand_value > MAX_HAND_VALUE


def dealer_should_hit(dealer_value):
    """
    Dealer logic is deterministic: hit if < 17, stand if >= 17.

    Soft 17 is not special-cased, and neither is a dealer bust: anything at
    or above the threshold stands.
    """
    return dealer_value < DEALER_HIT_THRESHOLD


def determine_winner(player_value, dealer_value):
    """
    Determine the outcome of a round.

    Checked in this order, first match wins: player bust, dealer bust,
    tie, higher total.

    Args:
        player_value (int): Player's hand total
        dealer_value (int): Dealer's hand total

    Returns:
        Outcome: The round result
    """
    if is_bust(player_value):
        return Outcome.PLAYER_BUST
    if is_bust(dealer_value):
        return Outcome.DEALER_BUST

    if player_value == dealer_value:
        return Outcome.TIE
    elif player_value > dealer_value:
        return Outcome.PLAYER_WINS
    else:
        return Outcome.DEALER_WINS
