import random
from .ruleset import DEFAULT_RULES


class Sequence:
    """
        Represents the color sequence the player has to repeat.
    Attributes:
        rules (dict): The ruleset providing the palette."""

    def __init__(self, colors=None, rules=None):
        """
        Initialize a Sequence instance.

        Args:
            colors (list or None): Initial colors, mostly used by tests and
            when restoring a game.
            rules (dict or None): Reference to the ruleset (defines the
            palette).
        """

        self.rules = rules or DEFAULT_RULES
        if colors is None:
            self._colors = []
        else:
            self._colors = [c.lower() for c in colors]

        if self._colors:
            self.validate()

    @property
    def colors(self) -> tuple:
        """Read-only view, the sequence only grows through extend_random."""
        return tuple(self._colors)

    def extend_random(self, rng=None) -> str:
        """
        Start a new round by appending one uniformly random palette color.

        Args:
            rng: Any object with a ``choice`` method. Defaults to the
            ``random`` module.

        Returns:
            str: The color that was appended.
        """

        rng = rng or random
        color = rng.choice(self.rules["colors"])
        if color not in self.rules["colors"]:
            raise ValueError(f"Random source produced unknown color '{color}'.")
        self._colors.append(color)
        return color

    def validate(self, strict: bool = True) -> bool:
        """
        Validate that every color belongs to the palette.

        Args:
            strict (bool): If True, raise ValueError on failure.

        Returns:
            bool: True if valid; False if invalid and strict is False.
        """

        for color in self._colors:
            if color not in self.rules["colors"]:
                if strict:
                    allowed = ", ".join(self.rules["colors"])
                    raise ValueError(
                        f"Invalid color '{color}'. Allowed: {allowed}."
                    )
                return False

        return True

    def matches(self, index: int, guess: str) -> bool:
        """
        Compare a guess with the color at the given position.

        Args:
            index (int): Zero-based position in the sequence.
            guess (str): The guessed color.

        Returns:
            bool: True if the guess equals the color at ``index``.
        """

        if index < 0 or index >= len(self._colors):
            raise IndexError(
                f"Index {index} outside sequence of length {len(self._colors)}."
            )
        return self._colors[index] == guess

    def as_string(self):
        return ", ".join(self._colors) if self._colors else "EMPTY"

    def __len__(self):
        return len(self._colors)

    def __iter__(self):
        return iter(self._colors)

    def __getitem__(self, index):
        return self._colors[index]

    def __eq__(self, other):
        if isinstance(other, Sequence):
            return self._colors == other._colors
        if isinstance(other, (list, tuple)):
            return self._colors == list(other)
        return False


def check_guess(sequence, index: int, guess: str) -> bool:
    """Return whether ``guess`` equals ``sequence[index]``."""
    if isinstance(sequence, Sequence):
        return sequence.matches(index, guess)
    if index < 0 or index >= len(sequence):
        raise IndexError(
            f"Index {index} outside sequence of length {len(sequence)}."
        )
    return sequence[index] == guess


def compute_score(sequence, failed: bool = True) -> int:
    """
    Number of fully correct rounds.

    Args:
        sequence: The sequence as it stood when the game ended.
        failed (bool): Whether the game ended on a wrong guess. The round
        in progress at that moment does not count.

    Returns:
        int: The score.
    """
    length = len(sequence)
    if failed:
        return max(0, length - 1)
    return length
