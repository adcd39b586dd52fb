"""
Console user interface for the Blackjack game.

Handles all I/O: displaying cards, asking for decisions, announcing the result.
Separated from the round logic so the turn controller can be driven by a
scripted fake in tests and by the real console here.

Design principle: keep I/O away from game rules.
This file is the *only* place that uses print() and input().
"""

from src.common.card import render_card
from src.common.game_logic import calculate_hand_value

HIDDEN_CARD = "Unknown card"
DECISION_PROMPT = "Do you want to hit (h) or stand (s)? "
INVALID_CHOICE = "Invalid choice. Please choose 'h' to hit or 's' to stand."


def show_hand(title, cards, hide_second=False):
    """
    Print a titled hand, one card per line, followed by a blank line.

    Args:
        title (str): e.g. "Player's Hand"
        cards (list[Card]): Cards in the hand
        hide_second (bool): If True, hide the second card (dealer's hole card)
    """
    print(f"{title}:")
    for i, card in enumerate(cards):
        if hide_second and i == 1:
            print(HIDDEN_CARD)
        else:
            print(render_card(card))
    print()


def show_total(who, cards):
    """Print the current total of a hand, e.g. "Player's total: 17"."""
    print(f"{who}'s total: {calculate_hand_value(cards)}")


class ConsoleUI:
    """
    Table presenter used by BlackjackRound.

    Every method maps to one thing the round wants to tell (or ask) the
    player. input_fn defaults to the builtin input().
    """

    def __init__(self, input_fn=None):
        self.input_fn = input_fn or input

    # ----------------- deal -----------------
    def show_initial_hands(self, player_cards, dealer_cards):
        show_hand("Player's Hand", player_cards)
        show_hand("Dealer's Hand", dealer_cards, hide_second=True)

    # ----------------- player turn -----------------
    def ask_decision(self):
        """Return the raw line typed by the player (parsing is the round's job)."""
        return self.input_fn(DECISION_PROMPT)

    def show_invalid_choice(self):
        print(INVALID_CHOICE)

    def show_player_draw(self, card, player_cards):
        print(f"Player draws a card: {render_card(card)}")
        show_total("Player", player_cards)
        print()

    def show_player_bust(self):
        print("Player busts!")

    def show_player_stands(self):
        print("Player stands.")

    # ----------------- dealer turn -----------------
    def show_dealer_hand(self, dealer_cards):
        print()
        show_hand("Dealer's Hand", dealer_cards)

    def show_dealer_turn(self):
        print("Dealer's turn:")

    def show_dealer_draw(self, card):
        print(f"Dealer draws a card: {render_card(card)}")

    def show_dealer_stands(self):
        print("Dealer stands.")
        print()

    # ----------------- result -----------------
    def show_result(self, player_cards, dealer_cards, outcome):
        show_total("Player", player_cards)
        show_total("Dealer", dealer_cards)
        print(outcome.message)

    def show_goodbye(self):
        print("\nGame aborted.")
