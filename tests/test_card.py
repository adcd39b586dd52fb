"""
Unit tests for Card class.

Tests suit/rank enums, blackjack values, immutability and rendering.
"""

import dataclasses

import pytest
from src.common.card import Card, Rank, Suit, render_card


class TestCard:
    """Test Card class functionality."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Suit.HEARTS, Rank.FIVE)
        assert card.rank is Rank.FIVE
        assert card.suit is Suit.HEARTS

    def test_card_numeric_values(self):
        """Test numeric cards have correct blackjack value."""
        numeric = [Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX,
                   Rank.SEVEN, Rank.EIGHT, Rank.NINE, Rank.TEN]
        for expected, rank in enumerate(numeric, start=2):
            assert Card(Suit.CLUBS, rank).value() == expected

    def test_face_cards_value_10(self):
        """Test Jack, Queen, King have value 10."""
        for rank in [Rank.JACK, Rank.QUEEN, Rank.KING]:
            assert Card(Suit.SPADES, rank).value() == 10

    def test_ace_value_11(self):
        """Test Ace has provisional value 11."""
        card = Card(Suit.DIAMONDS, Rank.ACE)
        assert card.value() == 11
        assert card.is_ace()

    def test_only_ace_is_ace(self):
        """Test is_ace is False for every other rank."""
        for rank in Rank:
            if rank is not Rank.ACE:
                assert not Card(Suit.HEARTS, rank).is_ace()

    def test_card_equality(self):
        """Test two cards with same suit/rank are equal and hash alike."""
        card1 = Card(Suit.HEARTS, Rank.FIVE)
        card2 = Card(Suit.HEARTS, Rank.FIVE)
        assert card1 == card2
        assert len({card1, card2}) == 1

    def test_card_inequality(self):
        """Test different cards are not equal."""
        card = Card(Suit.HEARTS, Rank.FIVE)
        assert card != Card(Suit.DIAMONDS, Rank.FIVE)
        assert card != Card(Suit.HEARTS, Rank.SIX)

    def test_card_is_immutable(self):
        """Test a card cannot be modified after creation."""
        card = Card(Suit.HEARTS, Rank.FIVE)
        with pytest.raises(dataclasses.FrozenInstanceError):
            card.rank = Rank.SIX


class TestRenderCard:
    """Test human-readable card names."""

    def test_ace_of_hearts(self):
        assert render_card(Card(Suit.HEARTS, Rank.ACE)) == "Ace of Hearts"

    def test_ten_of_clubs(self):
        assert render_card(Card(Suit.CLUBS, Rank.TEN)) == "10 of Clubs"

    def test_face_card(self):
        assert render_card(Card(Suit.SPADES, Rank.QUEEN)) == "Queen of Spades"

    def test_str_matches_render(self):
        """Test str(card) uses the same format."""
        card = Card(Suit.DIAMONDS, Rank.SEVEN)
        assert str(card) == "7 of Diamonds"

    def test_all_cards_render(self):
        """Test every rank/suit combination has a name."""
        for suit in Suit:
            for rank in Rank:
                assert " of " in render_card(Card(suit, rank))

    def test_repr_is_compact(self):
        assert repr(Card(Suit.SPADES, Rank.KING)) == "K♠"
        assert repr(Card(Suit.HEARTS, Rank.TEN)) == "10♥"
