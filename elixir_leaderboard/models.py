"""Data models and constants for leaderboard collection."""

import math
from dataclasses import dataclass

from .errors import RecordFormatError

SCORES_API_URL = "https://api.points.elixir.xyz/api/scores"
DEFAULT_PAGE_SIZE = 5000
DEFAULT_REQUEST_INTERVAL = 0.5  # seconds between the end of one request and the next
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_PROGRESS_EVERY = 10  # pages

TEXT_FIELDS = ("date", "name")
FLOAT_FIELDS = (
    "total",
    "total_points_earned_by_tvl",
    "total_tvl_usd",
    "total_points_earned_by_referrals",
)
INT_FIELDS = ("total_direct_referrals", "total_indirect_referrals", "rank")


@dataclass
class LeaderboardPage:
    """One page of the scores endpoint."""

    ranks: list[dict]
    total_count: int


@dataclass
class RankRecord:
    """A leaderboard entry with every field mapped to its column type.

    Optional fields stay ``None`` when absent; they are never zero-filled.
    """

    date: str
    name: str
    chest: bool | None = None
    total: float | None = None
    total_points_earned_by_tvl: float | None = None
    total_tvl_usd: float | None = None
    total_direct_referrals: int | None = None
    total_indirect_referrals: int | None = None
    total_points_earned_by_referrals: float | None = None
    rank: int | None = None


def _to_text(field: str, value) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise RecordFormatError(f"{field}: expected string, got {value!r}")
    return value


def _to_bool(field: str, value) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    raise RecordFormatError(f"{field}: expected boolean, got {value!r}")


def _to_float(field: str, value) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise RecordFormatError(f"{field}: expected number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        raise RecordFormatError(f"{field}: expected number, got {value!r}") from None


def _to_int(field: str, value) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise RecordFormatError(f"{field}: expected integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
    number = _to_float(field, value)
    if not math.isfinite(number) or not number.is_integer():
        raise RecordFormatError(f"{field}: expected integer, got {value!r}")
    return int(number)


def normalize_rank(raw: dict) -> RankRecord:
    """Map a raw API record onto the typed column schema.

    Null policy: ``date``/``name`` fall back to ``""``; every other field
    keeps ``None`` for a missing or null value. Numbers are coerced to the
    column type only when that is lossless.
    """
    if not isinstance(raw, dict):
        raise RecordFormatError(f"Expected a rank object, got {type(raw).__name__}")

    values = {}
    for field in TEXT_FIELDS:
        values[field] = _to_text(field, raw.get(field))
    values["chest"] = _to_bool("chest", raw.get("chest"))
    for field in FLOAT_FIELDS:
        values[field] = _to_float(field, raw.get(field))
    for field in INT_FIELDS:
        values[field] = _to_int(field, raw.get(field))
    return RankRecord(**values)
