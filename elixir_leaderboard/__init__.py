"""Collect the Elixir points leaderboard into a local Parquet or JSON file.

Pages through the public scores API one request at a time, then hands the
accumulated ranks to a single serializer.
"""

from .cli import main
from .client import LeaderboardClient, get_client
from .fetch_ranks import fetch_all_ranks
from .models import LeaderboardPage, RankRecord, normalize_rank

__all__ = [
    "main",
    "LeaderboardClient",
    "get_client",
    "fetch_all_ranks",
    "LeaderboardPage",
    "RankRecord",
    "normalize_rank",
]

if __name__ == "__main__":
    main()
