"""HTTP client for the Elixir points leaderboard API using httpx."""

import httpx

from .errors import LeaderboardFormatError
from .models import LeaderboardPage
from .settings import get_settings


class LeaderboardClient:
    """Thin client for the paginated scores endpoint.

    No retry and no throttle: pacing belongs to the caller, and every
    failure propagates.
    """

    def __init__(self, api_url=None, timeout=None, http_client: httpx.Client | None = None):
        settings = get_settings()
        self.api_url = api_url or settings.api_url
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            headers={"Accept": "application/json"},
            timeout=timeout if timeout is not None else settings.request_timeout,
        )

    def fetch_page(self, first: int, offset: int) -> LeaderboardPage:
        """Fetch ``first`` ranks starting at ``offset``.

        Raises:
            httpx.HTTPStatusError: Non-2xx response.
            httpx.TransportError: Network failure.
            LeaderboardFormatError: Body is not ``{ranks: [...], totalCount: n}``.
        """
        resp = self._client.get(self.api_url, params={"first": first, "offset": offset})
        resp.raise_for_status()

        try:
            body = resp.json()
        except ValueError as e:
            raise LeaderboardFormatError(f"Invalid JSON at offset {offset}: {e}") from e

        return _parse_page(body, offset)

    def close(self):
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


def _parse_page(body, offset: int) -> LeaderboardPage:
    if not isinstance(body, dict):
        raise LeaderboardFormatError(f"Expected an object at offset {offset}, got {type(body).__name__}")

    ranks = body.get("ranks")
    if not isinstance(ranks, list):
        raise LeaderboardFormatError(f"Missing 'ranks' list at offset {offset}")

    total_count = body.get("totalCount")
    if isinstance(total_count, float) and total_count.is_integer():
        total_count = int(total_count)
    if isinstance(total_count, bool) or not isinstance(total_count, int) or total_count < 0:
        raise LeaderboardFormatError(f"Invalid 'totalCount' at offset {offset}: {total_count!r}")

    return LeaderboardPage(ranks=ranks, total_count=total_count)


# Client instances keyed by config
_clients: dict[tuple, LeaderboardClient] = {}


def get_client(api_url=None, timeout=None) -> LeaderboardClient:
    """Get or create a LeaderboardClient with the given configuration."""
    key = (api_url, timeout)
    if key not in _clients:
        _clients[key] = LeaderboardClient(api_url, timeout)
    return _clients[key]
