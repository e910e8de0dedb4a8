"""Leaderboard collector exceptions.

HTTP failures are not wrapped: httpx errors propagate as raised.
"""


class LeaderboardError(Exception):
    """Base exception for leaderboard collection failures."""


class LeaderboardFormatError(LeaderboardError):
    """Raised when a page body is not the expected ``{ranks, totalCount}`` shape."""


class RecordFormatError(LeaderboardError):
    """Raised when a rank record cannot be mapped onto the column schema."""


class IncompleteLeaderboardError(LeaderboardError):
    """Raised when the accumulated record count disagrees with ``totalCount``."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected:,} ranks but fetched {actual:,}")
