"""Serializers for the accumulated leaderboard."""

from pathlib import Path

from .json_writer import write_json
from .parquet_writer import write_parquet

WRITERS = {
    "parquet": write_parquet,
    "json": write_json,
}


def write_output(records: list[dict], path: Path, fmt: str) -> Path:
    """Write records with the serializer registered for ``fmt``."""
    try:
        writer = WRITERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown output format: {fmt!r} (expected one of {', '.join(WRITERS)})") from None
    return writer(records, path)


__all__ = ["WRITERS", "write_json", "write_output", "write_parquet"]
