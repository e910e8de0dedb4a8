"""Paginate through the scores endpoint and accumulate every rank."""

import math
import sys

from ..client import get_client
from ..errors import IncompleteLeaderboardError
from ..settings import get_settings
from ..throttle import Throttle


def _log(msg: str):
    sys.stderr.write(f"[leaderboard] {msg}\n")
    sys.stderr.flush()


def fetch_all_ranks(
    client=None,
    page_size: int | None = None,
    throttle: Throttle | None = None,
    progress_every: int | None = None,
    verify_count: bool | None = None,
) -> list[dict]:
    """Fetch every page of the leaderboard, in order.

    Page 0 is requested first to learn ``totalCount``; the remaining pages
    follow one at a time, each passing through the throttle. Records are
    returned exactly as received.

    Raises:
        IncompleteLeaderboardError: If ``verify_count`` and the number of
            records fetched differs from the first page's ``totalCount``.
    """
    settings = get_settings()
    if client is None:
        client = get_client()
    if page_size is None:
        page_size = settings.page_size
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if throttle is None:
        throttle = Throttle(settings.request_interval)
    if progress_every is None:
        progress_every = settings.progress_every
    if progress_every <= 0:
        raise ValueError(f"progress_every must be positive, got {progress_every}")
    if verify_count is None:
        verify_count = settings.verify_count

    throttle.wait()
    first_page = client.fetch_page(page_size, 0)
    throttle.touch()

    total = first_page.total_count
    total_pages = math.ceil(total / page_size)
    print(f"Fetching {total_pages} pages...", flush=True)

    all_ranks = list(first_page.ranks)

    for page in range(1, total_pages):
        throttle.wait()
        response = client.fetch_page(page_size, page * page_size)
        throttle.touch()
        all_ranks.extend(response.ranks)

        if page % progress_every == 0:
            print(f"Fetched {page}/{total_pages} pages", flush=True)

    if len(all_ranks) != total:
        if verify_count:
            raise IncompleteLeaderboardError(expected=total, actual=len(all_ranks))
        _log(f"Count mismatch: totalCount {total:,}, fetched {len(all_ranks):,}")

    return all_ranks
