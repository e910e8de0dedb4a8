"""Plain JSON export of the raw leaderboard."""

import json
from pathlib import Path

from .atomic import atomic_path


def write_json(records: list[dict], path: Path) -> Path:
    """Write records as indented JSON, exactly as fetched."""
    text = json.dumps(records, indent=2, ensure_ascii=False)
    with atomic_path(path) as tmp:
        tmp.write_text(text + "\n", encoding="utf-8")
    return Path(path)
