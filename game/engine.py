from enum import Enum

from .guess import Guess
from .ruleset import DEFAULT_RULES
from .sequence import Sequence, compute_score


class RoundState(Enum):
    PLAYING = "playing"
    ROUND_COMPLETE = "round_complete"
    GAME_OVER = "game_over"


class GameEngine:
    """Main game class — manages the sequence, the round state and the score."""

    def __init__(self, rules=None, rng=None):
        """
        Initialize the engine with a given ruleset.

        Args:
            rules (dict, optional): Ruleset, defaults to DEFAULT_RULES.
            rng: Randomness source with a ``choice`` method. Defaults to the
            ``random`` module.
        """
        self.rules = rules or DEFAULT_RULES
        self.rng = rng
        self.initialize_game()

    def initialize_game(self):
        """Set up a new game: empty sequence, ready for the first round."""
        self.sequence = Sequence(rules=self.rules)
        self.state = RoundState.ROUND_COMPLETE
        self.current_index = 0
        self.completed_rounds = 0

    def new_round(self):
        """Append one random color and start accepting guesses."""
        if self.state is not RoundState.ROUND_COMPLETE:
            raise RuntimeError(f"Cannot start a new round while {self.state.value}.")

        color = self.sequence.extend_random(self.rng)
        self.current_index = 0
        self.state = RoundState.PLAYING
        return color

    def make_guess(self, guess_input) -> bool:
        """
        Evaluate the next guess of the current round.

        A wrong color ends the game. Input that does not name a palette
        color raises ValueError and leaves the state untouched.

        Returns:
            bool: True if the guess matched, False on game over.
        """
        if self.state is not RoundState.PLAYING:
            raise RuntimeError(f"Cannot guess while {self.state.value}.")

        guess = Guess(guess_input, rules=self.rules)
        guess.validate(strict=True)

        if not self.sequence.matches(self.current_index, guess.get_guess()):
            self.state = RoundState.GAME_OVER
            return False

        self.current_index += 1

        # Round finished
        if self.current_index == len(self.sequence):
            self.completed_rounds += 1
            self.state = RoundState.ROUND_COMPLETE

        return True

    @property
    def is_over(self):
        return self.state is RoundState.GAME_OVER

    @property
    def round_complete(self):
        return self.state is RoundState.ROUND_COMPLETE

    @property
    def score(self):
        """Number of fully correct rounds so far."""
        return self.completed_rounds

    def final_score(self):
        """Score as computed from the sequence length at the end of the game."""
        return compute_score(self.sequence, failed=self.is_over)

    def remaining_guesses(self):
        """Return how many colors are left to enter in this round."""
        if self.state is not RoundState.PLAYING:
            return 0
        return len(self.sequence) - self.current_index

    def reveal_sequence(self):
        return self.sequence.colors
