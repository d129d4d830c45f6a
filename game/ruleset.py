# Configuration: palette, display timing, high score storage, etc.
DEFAULT_RULES = {
    "name": "classic",  # Identifier for this ruleset
    "colors": [
        "red",
        "blue",
        "green",
        "yellow",
    ],  # The palette every round draws from
    "shortcuts": {  # One-letter input aliases
        "R": "red",
        "B": "blue",
        "G": "green",
        "Y": "yellow",
    },
    "display": {
        "emoji_map": {  # Used by the CLI when revealing the sequence
            "red": "🔴",
            "blue": "🔵",
            "green": "🟢",
            "yellow": "🟡",
        },
        "reveal_delay": 1.0,  # Seconds each color stays on screen
        "round_delay": 1.0,  # Pause after a completed round
        "clear_screen": True,  # Clear the terminal between reveals
    },
    "highscores": {
        "filename": ".simon_highscores.json",  # Stored in the user's home
        "max_entries": 5,  # Size of the high score table
    },
}
