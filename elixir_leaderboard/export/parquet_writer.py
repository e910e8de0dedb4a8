"""Parquet export with a fixed, typed leaderboard schema."""

from dataclasses import asdict
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from ..models import normalize_rank
from .atomic import atomic_path

COMPRESSION = "snappy"
DEFAULT_BATCH_SIZE = 10_000  # rows buffered per write_table call

SCHEMA = pa.schema(
    [
        pa.field("date", pa.string(), nullable=False),
        pa.field("name", pa.string(), nullable=False),
        pa.field("chest", pa.bool_()),
        pa.field("total", pa.float64()),
        pa.field("total_points_earned_by_tvl", pa.float64()),
        pa.field("total_tvl_usd", pa.float64()),
        pa.field("total_direct_referrals", pa.int64()),
        pa.field("total_indirect_referrals", pa.int64()),
        pa.field("total_points_earned_by_referrals", pa.float64()),
        pa.field("rank", pa.int64()),
    ]
)


def write_parquet(records: list[dict], path: Path, batch_size: int = DEFAULT_BATCH_SIZE) -> Path:
    """Write records to a Snappy-compressed Parquet file.

    Each record is normalized first, so absent optional fields become nulls
    rather than zeros. Rows keep their input order.
    """
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")

    with atomic_path(path) as tmp:
        with pq.ParquetWriter(str(tmp), SCHEMA, compression=COMPRESSION) as writer:
            for start in range(0, len(records), batch_size):
                rows = [asdict(normalize_rank(r)) for r in records[start : start + batch_size]]
                writer.write_table(pa.Table.from_pylist(rows, schema=SCHEMA))
    return Path(path)
