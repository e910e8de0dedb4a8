from .fetch_ranks import fetch_all_ranks

__all__ = ["fetch_all_ranks"]
