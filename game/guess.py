from .ruleset import DEFAULT_RULES


class Guess:
    """
        Represents a single color the player entered.
    Attributes:
        raw (str): The input as typed.
        color (str | None): The palette color it resolves to.
        rules (dict): The ruleset for validation.
        is_valid (bool): Whether the input names a palette color."""

    def __init__(self, raw: str | None, rules=None):
        """
        Initialize a Guess instance.
        Args:
            raw (str | None): The typed input, a color name or shortcut.
            rules (dict, optional): The ruleset for validation. Defaults to DEFAULT_RULES.
        """

        self.rules = rules or DEFAULT_RULES

        # --- Input normalization ---
        self.raw = raw or ""
        text = self.raw.strip()
        shortcuts = self.rules.get("shortcuts", {})
        if text.upper() in shortcuts:
            text = shortcuts[text.upper()]

        # --- Attribute setup ---
        self.color = text.lower() or None
        self.is_valid = False

        # --- Validation ---
        if self.color:
            self.is_valid = self.validate(strict=False)

    def validate(self, strict: bool = True):
        """
        Check that the guess names a palette color.

        Args:
            strict (bool): If True, raise ValueError on invalid guess.
        Returns:
            bool: True if valid, False otherwise.
        """

        if self.color not in self.rules["colors"]:
            if strict:
                allowed = ", ".join(self.rules["colors"])
                raise ValueError(f"Invalid color '{self.raw}'. Allowed: {allowed}.")
            return False

        return True

    def get_guess(self):
        """
        Return the normalized color.

        Returns:
            str | None: The palette color."""
        return self.color
