"""
Card model: suits, ranks and a single immutable playing card.

Why enums instead of bare ints?
- Closed sets: there are exactly 4 suits and 13 ranks, nothing else can sneak in
- Self-documenting: Rank.ACE vs 14
- Exhaustive lookups: every member has an entry in the name tables below
"""

from dataclasses import dataclass
from enum import Enum

from config import ACE_HIGH_VALUE, FACE_CARD_VALUE


class Suit(Enum):
    """The four suits, in canonical deck order."""
    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3


class Rank(Enum):
    """
    The thirteen ranks, in canonical deck order (Two lowest, Ace last).

    Member values are the pip count for Two..Ten; face cards and the Ace
    simply continue the sequence so iteration order stays Two..Ace.
    """
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


# Lookup tables for human-readable display
RANK_NAMES = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "10", Rank.JACK: "Jack", Rank.QUEEN: "Queen",
    Rank.KING: "King", Rank.ACE: "Ace",
}

SUIT_NAMES = {
    Suit.HEARTS: "Hearts",
    Suit.DIAMONDS: "Diamonds",
    Suit.CLUBS: "Clubs",
    Suit.SPADES: "Spades",
}

SUIT_SYMBOLS = {Suit.HEARTS: "♥", Suit.DIAMONDS: "♦", Suit.CLUBS: "♣", Suit.SPADES: "♠"}

FACE_RANKS = (Rank.JACK, Rank.QUEEN, Rank.KING)


@dataclass(frozen=True)
class Card:
    """
    Represents a single playing card.

    Cards are immutable once created: suit and rank never change.
    Two cards with the same suit and rank compare equal and hash the same,
    so a full deck can be checked with a plain set.
    """
    suit: Suit
    rank: Rank

    def value(self):
        """
        Return the provisional blackjack value of this card.

        Examples:
        - Ace → 11 (calculate_hand_value downgrades it to 1 when the hand would bust)
        - Five → 5
        - Jack / Queen / King → 10
        """
        if self.rank is Rank.ACE:
            return ACE_HIGH_VALUE
        if self.rank in FACE_RANKS:
            return FACE_CARD_VALUE
        return self.rank.value

    def is_ace(self):
        """Return True if this card is an Ace."""
        return self.rank is Rank.ACE

    def __str__(self):
        """Return readable representation (e.g., 'Ace of Hearts')."""
        return render_card(self)

    def __repr__(self):
        """Return compact representation with symbols (e.g., 'A♥', '10♠')."""
        name = RANK_NAMES[self.rank]
        short = name if name.isdigit() else name[0]
        return f"{short}{SUIT_SYMBOLS[self.suit]}"


def render_card(card: Card) -> str:
    """Format a card as '<RankName> of <SuitName>', e.g. '10 of Clubs'."""
    return f"{RANK_NAMES[card.rank]} of {SUIT_NAMES[card.suit]}"
