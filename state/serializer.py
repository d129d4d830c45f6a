# Convert high score tables to and from their JSON file format
import json

from .score_entry import ScoreEntry


def table_to_json(entries) -> str:
    """
    Convert a list of score entries to a pretty-printed JSON string.
    Args:
        entries (list[ScoreEntry]): The table to convert.
    Returns:
        str: The JSON array representation.
    """
    return json.dumps([e.to_dict() for e in entries], indent=2)


def table_from_json(json_string: str) -> list:
    """
    Convert a JSON string back to a list of score entries.
    Args:
        json_string (str): The JSON array to convert.
    Returns:
        list[ScoreEntry]: The valid entries, in file order. Items that are
        not valid entries are left out.
    Raises:
        ValueError: If the text is not a JSON array.
    """
    data = json.loads(json_string)
    if not isinstance(data, list):
        raise ValueError("High score file must hold a JSON array.")

    entries = []
    for item in data:
        try:
            entries.append(ScoreEntry.from_dict(item))
        except ValueError:
            continue
    return entries
