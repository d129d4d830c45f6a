# state/persistence.py
from pathlib import Path

from .score_entry import ScoreEntry
from .serializer import table_from_json, table_to_json


class ScoreStore:
    """
        Keeps the ranked high score table in a JSON file.
    Attributes:
        path (Path): Location of the high score file.
        max_entries (int): How many entries survive a save."""

    def __init__(self, path, max_entries: int = 5):
        self.path = Path(path)
        self.max_entries = max_entries

    def load(self) -> list:
        """
        Load the high score table from disk.
        Returns:
            list[ScoreEntry]: The table, empty if the file is missing or
            cannot be parsed. Malformed entries are skipped."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
            return table_from_json(text)
        except (OSError, ValueError, TypeError, RecursionError):
            # JSONDecodeError is a ValueError, deep nesting overflows the decoder
            return []

    def save(self, entry: ScoreEntry):
        """
        Add an entry, keep the best ``max_entries`` and write the table back.
        Args:
            entry (ScoreEntry): The finished game.
        Returns:
            int | None: 1-based rank of the entry, None if it did not make
            the table."""
        table = self.load()
        table.append(entry)
        table.sort(key=lambda e: e.score, reverse=True)
        del table[self.max_entries:]
        self._write(table)

        for rank, kept in enumerate(table, start=1):
            if kept is entry:
                return rank
        return None

    def reset(self):
        """Overwrite the store with an empty table."""
        self._write([])

    def show(self) -> str:
        """Render the current table, or a hint that there is none."""
        table = self.load()
        if not table:
            return "No high scores yet."

        lines = ["High Scores:"]
        for rank, entry in enumerate(table, start=1):
            lines.append(
                f"{rank}. {entry.name} - {entry.score} points ({entry.date})"
            )
        return "\n".join(lines)

    def _write(self, table):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(table_to_json(table))
