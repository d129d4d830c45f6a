# state/score_entry.py
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _now_iso():
    # Millisecond precision with a trailing Z, e.g. 2026-10-17T09:30:00.123Z
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


@dataclass(frozen=True)
class ScoreEntry:
    """One finished game in the high score table"""

    name: str
    score: int
    date: str = field(default_factory=_now_iso)

    def __post_init__(self):
        if isinstance(self.score, bool) or not isinstance(self.score, int):
            raise ValueError(f"Score must be an integer, got {self.score!r}.")
        if self.score < 0:
            raise ValueError(f"Score must be non-negative, got {self.score}.")

    def to_dict(self):
        # Return the entry as dictionary for i.e. json
        return {"name": self.name, "score": self.score, "date": self.date}

    @classmethod
    def from_dict(cls, data):
        # Load the entry from a dictionary
        if not isinstance(data, dict):
            raise ValueError(f"Score entry must be an object, got {data!r}.")
        try:
            score = data["score"]
            # JSON numbers such as 3.0 are whole scores too
            if isinstance(score, float) and score.is_integer():
                score = int(score)
            return cls(
                name=str(data["name"]),
                score=score,
                date=str(data["date"]),
            )
        except KeyError as e:
            raise ValueError(f"Score entry is missing {e}.") from e
