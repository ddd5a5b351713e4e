#region Imports
import json
from pathlib import Path

from contrib_canvas.models.activity import ActivityDataset, InvalidDataset
#endregion


#region Functions


def load_dataset(file_path: Path) -> ActivityDataset:
    """
    Load an activity dataset from a JSON file.

    The file holds the payload served by GitHub contribution APIs:
    a "years" list and a "contributions" list.

    Args:
        file_path: Path to the JSON file

    Returns:
        ActivityDataset

    Raises:
        FileNotFoundError: If the file doesn't exist
        InvalidDataset: If the file is not valid JSON or has the wrong shape
    """
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidDataset(f"Invalid JSON in {file_path}: {e}") from e

    return ActivityDataset.from_dict(payload)


#endregion
