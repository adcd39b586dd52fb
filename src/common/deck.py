"""
Deck management for a standard 52-card deck.

Why encapsulate deck management in a class?
- Prevents mistakes: can't silently deal from an exhausted deck
- Owns the undealt cards: a dealt card leaves the deck for good
- Randomness is injected, so a round can be replayed from a seed

Design choice: one deck per round
The game plays exactly one round, so there is no reshuffle or reset logic.
Build a Deck, deal from it, throw it away.
"""

import random

from .card import Card, Rank, Suit
from .logging_utils import get_logger

log = get_logger("common.deck")

# Seeded once per process from the OS entropy pool (or the clock as fallback).
# Every shuffle without an explicit rng draws from this same generator, so two
# decks built in quick succession never repeat the same order.
_default_rng = random.Random()


def default_rng():
    """Return the process-wide random source used when none is injected."""
    return _default_rng


def build_deck():
    """
    Create all 52 cards in canonical order (not shuffled).

    Iterates: Hearts Two..Ace, Diamonds Two..Ace, Clubs ..., Spades ...
    This is deterministic so we can verify the deck is complete.
    """
    return [Card(suit, rank) for suit in Suit for rank in Rank]


def shuffle(cards, rng):
    """
    Permute cards in place with a Fisher-Yates scan.

    For i from the last index down to 1, swap cards[i] with a uniformly
    chosen cards[j], 0 <= j <= i. Every permutation is equally likely
    (given a fair rng) and no card is lost or duplicated.

    Args:
        cards (list[Card]): Cards to shuffle (modified in place)
        rng (random.Random): Source of randomness
    """
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]


class Deck:
    """
    The undealt cards of one round.

    The top of the deck is the end of the list: deal() pops from there.
    """

    def __init__(self, rng=None, shuffled=True, cards=None):
        """
        Create a new deck, by default with all 52 cards.

        Args:
            rng (random.Random | None): Random source; process default if None
            shuffled (bool): Shuffle immediately (False keeps the given order)
            cards (list[Card] | None): Fixed card order; full canonical deck if None
        """
        self.rng = rng if rng is not None else default_rng()
        self.cards = list(cards) if cards is not None else build_deck()
        if shuffled:
            self.shuffle()

    @classmethod
    def from_cards(cls, cards):
        """
        Build a deck with a fixed, already-arranged order.

        The last card in the list is dealt first. Used to replay a known
        round without any randomness.
        """
        return cls(shuffled=False, cards=cards)

    def shuffle(self):
        """Randomize the remaining cards in place."""
        shuffle(self.cards, self.rng)
        log.debug("Shuffled deck, top card %r", self.cards[-1] if self.cards else None)

    def deal(self):
        """
        Remove and return the top card.

        Returns:
            Card: The card that was on top

        Raises:
            IndexError: If the deck is empty. A single round never gets close
                to 52 cards, so this is a broken precondition and is not caught.
        """
        if not self.cards:
            raise IndexError("Deck exhausted - no cards left to deal")
        return self.cards.pop()

    def cards_remaining(self):
        """Return the number of cards left in deck."""
        return len(self.cards)

    def is_empty(self):
        """Return True if all cards have been dealt."""
        return not self.cards
