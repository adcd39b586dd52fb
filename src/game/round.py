"""
Turn controller for one round of Blackjack.

Drives the deal, the player's hit/stand loop and the dealer's fixed policy.
All I/O goes through a UI object (see src/game/ui.py for the console one),
so the same state machine runs against scripted input in tests.

Player:  AwaitingChoice -> Hit (loop) | Stand | Bust
Dealer:  Hitting (while total < 17) -> Standing
"""

import time
from enum import Enum

from config import DEALER_DRAW_DELAY, INITIAL_HAND_SIZE
from src.common.game_logic import (
    calculate_hand_value,
    is_bust,
    is_soft,
    dealer_should_hit,
    determine_winner,
)
from src.common.logging_utils import get_logger

log = get_logger("game.round")


class Decision(Enum):
    HIT = "hit"
    STAND = "stand"


class PlayerState(Enum):
    """How the player's turn ended."""
    STAND = "stand"
    BUST = "bust"


# Accepted spellings after strip() + lower()
DECISION_WORDS = {
    "h": Decision.HIT,
    "hit": Decision.HIT,
    "s": Decision.STAND,
    "stand": Decision.STAND,
}


def parse_decision(raw):
    """
    Turn a line of player input into a Decision.

    Input is normalised (surrounding whitespace stripped, lowercased), so
    "H", " s " and "stand" are all accepted.

    Returns:
        Decision | None: None if the input is not a valid choice
    """
    if raw is None:
        return None
    return DECISION_WORDS.get(raw.strip().lower())


class BlackjackRound:
    """
    One round: a deck, two hands and the turn logic that connects them.

    Cards move only from the deck to a hand, so deck + player + dealer
    always make up the same 52 cards.
    """

    def __init__(self, deck, ui, sleep=time.sleep, delay=DEALER_DRAW_DELAY):
        """
        Args:
            deck (Deck): Deck to deal from (already shuffled or arranged)
            ui: Presenter with the ConsoleUI methods
            sleep (callable): Called with `delay` to pace the dealer's draws
            delay (float): Seconds per pause; 0 skips pausing entirely
        """
        self.deck = deck
        self.ui = ui
        self.sleep = sleep
        self.delay = delay
        self.player_hand = []
        self.dealer_hand = []
        self.player_state = None

    # ----------------- helpers -----------------
    def _pause(self):
        if self.delay > 0:
            self.sleep(self.delay)

    def player_value(self):
        return calculate_hand_value(self.player_hand)

    def dealer_value(self):
        return calculate_hand_value(self.dealer_hand)

    # ----------------- phases -----------------
    def deal_initial(self):
        """Deal alternately: player, dealer, player, dealer."""
        for _ in range(INITIAL_HAND_SIZE):
            self.player_hand.append(self.deck.deal())
            self.dealer_hand.append(self.deck.deal())

        log.info("Initial deal: player %r (%d), dealer shows %r",
                 self.player_hand, self.player_value(), self.dealer_hand[0])
        self.ui.show_initial_hands(self.player_hand, self.dealer_hand)

    def player_turn(self):
        """
        Ask for hit/stand until the player stands or busts.

        Invalid input re-prompts without dealing a card.

        Returns:
            PlayerState: STAND or BUST
        """
        while True:
            decision = parse_decision(self.ui.ask_decision())

            if decision is None:
                self.ui.show_invalid_choice()
                continue

            if decision is Decision.STAND:
                self.ui.show_player_stands()
                self.player_state = PlayerState.STAND
                break

            card = self.deck.deal()
            self.player_hand.append(card)
            self.ui.show_player_draw(card, self.player_hand)

            value = self.player_value()
            log.debug("Player hits %r -> %d%s", card, value,
                      " (soft)" if is_soft(self.player_hand) else "")
            if is_bust(value):
                self.ui.show_player_bust()
                self.player_state = PlayerState.BUST
                break

        log.info("Player turn over: %s with %d", self.player_state.value, self.player_value())
        return self.player_state

    def dealer_turn(self):
        """Draw while the dealer's total is below 17, then stand."""
        self.ui.show_dealer_turn()
        self._pause()

        while dealer_should_hit(self.dealer_value()):
            card = self.deck.deal()
            self.dealer_hand.append(card)
            self.ui.show_dealer_draw(card)
            log.debug("Dealer hits %r -> %d", card, self.dealer_value())
            self._pause()

        self.ui.show_dealer_stands()
        log.info("Dealer stands on %d", self.dealer_value())

    def finish(self):
        """Score both hands, announce and return the Outcome."""
        outcome = determine_winner(self.player_value(), self.dealer_value())
        self.ui.show_result(self.player_hand, self.dealer_hand, outcome)
        log.info("Outcome: %s (player %d, dealer %d)",
                 outcome.value, self.player_value(), self.dealer_value())
        return outcome

    def play(self):
        """
        Play the whole round and return its Outcome.

        The dealer always plays out the hand, even after a player bust, so the
        final totals show both hands as they finished.
        """
        self.deal_initial()
        self.player_turn()

        self.ui.show_dealer_hand(self.dealer_hand)
        self.dealer_turn()

        return self.finish()
