"""Integration tests for the collector CLI.

Real client, real throttle, real files. Only the HTTP transport is mocked.
"""

import json
from unittest.mock import patch

import httpx
import pyarrow.parquet as pq
import pytest

from elixir_leaderboard.cli import main
from elixir_leaderboard.client import LeaderboardClient


def _leaderboard(total):
    return [
        {
            "date": "2024-06-01",
            "name": f"0x{i:04x}",
            "chest": (i % 3 == 0) if i % 2 else None,
            "total": 1000.0 - i,
            "total_points_earned_by_tvl": 800.0 - i,
            "total_tvl_usd": 5000.0 + i,
            "rank": i + 1,
        }
        for i in range(total)
    ]


class FakeApi:
    """Serves a leaderboard slice per request and records the offsets asked for."""

    def __init__(self, total, fail_at=None):
        self.ranks = _leaderboard(total)
        self.fail_at = fail_at
        self.offsets = []

    def __call__(self, request):
        first = int(request.url.params["first"])
        offset = int(request.url.params["offset"])
        self.offsets.append(offset)
        if offset == self.fail_at:
            return httpx.Response(500, text="Internal Server Error")
        return httpx.Response(
            200,
            json={"ranks": self.ranks[offset : offset + first], "totalCount": len(self.ranks)},
        )


@pytest.fixture(autouse=True)
def _no_sleep():
    with patch("elixir_leaderboard.throttle.time.sleep"):
        yield


def _patch_client(api):
    client = LeaderboardClient(http_client=httpx.Client(transport=httpx.MockTransport(api)))
    return patch("elixir_leaderboard.fetch_ranks.fetch_ranks.get_client", return_value=client)


def describe_collect():

    def it_writes_parquet_by_default(tmp_path, capsys):
        api = FakeApi(12)

        with _patch_client(api):
            code = main(["--output-dir", str(tmp_path), "--page-size", "5", "--interval", "0"])

        assert code == 0
        assert api.offsets == [0, 5, 10]
        rows = pq.read_table(tmp_path / "leaderboard.parquet").to_pylist()
        assert len(rows) == 12
        assert [r["rank"] for r in rows] == list(range(1, 13))
        assert rows[0]["chest"] is None

        out = capsys.readouterr().out
        assert "Fetching 3 pages..." in out
        assert "Retrieved 12 total ranks" in out
        assert f"Saved leaderboard data to {tmp_path / 'leaderboard.parquet'}" in out

    def it_writes_json_as_fetched(tmp_path):
        api = FakeApi(7)

        with _patch_client(api):
            code = main(["--format", "json", "--output-dir", str(tmp_path), "--page-size", "3"])

        assert code == 0
        written = json.loads((tmp_path / "leaderboard.json").read_text(encoding="utf-8"))
        assert written == api.ranks

    def it_honours_an_explicit_output_path(tmp_path):
        target = tmp_path / "nested" / "scores.json"

        with _patch_client(FakeApi(2)):
            code = main(["--format", "json", "-o", str(target), "--page-size", "5"])

        assert code == 0
        assert target.exists()

    def describe_failures():
        def it_aborts_without_output_when_a_page_fails(tmp_path, capsys):
            api = FakeApi(12, fail_at=5)

            with _patch_client(api):
                code = main(["--output-dir", str(tmp_path), "--page-size", "5"])

            assert code == 1
            assert api.offsets == [0, 5]
            assert list(tmp_path.iterdir()) == []
            err = capsys.readouterr().err
            assert err.startswith("Error:")
            assert "500" in err

        def it_aborts_when_the_first_page_fails(tmp_path, capsys):
            api = FakeApi(12, fail_at=0)

            with _patch_client(api):
                code = main(["--output-dir", str(tmp_path), "--page-size", "5"])

            assert code == 1
            assert api.offsets == [0]
            assert not (tmp_path / "leaderboard.parquet").exists()

        def it_aborts_on_a_count_mismatch(tmp_path, capsys):
            api = FakeApi(12)
            api.ranks = api.ranks[:10]  # server shrinks, first page still says 12

            def shrinking(request):
                resp = api(request)
                if int(request.url.params["offset"]) == 0:
                    return httpx.Response(200, json={**resp.json(), "totalCount": 12})
                return resp

            with _patch_client(shrinking):
                code = main(["--output-dir", str(tmp_path), "--page-size", "5"])

            assert code == 1
            assert "Expected 12 ranks but fetched 10" in capsys.readouterr().err
            assert list(tmp_path.iterdir()) == []

        def it_can_skip_count_verification(tmp_path):
            api = FakeApi(12)
            api.ranks = api.ranks[:10]

            def shrinking(request):
                resp = api(request)
                if int(request.url.params["offset"]) == 0:
                    return httpx.Response(200, json={**resp.json(), "totalCount": 12})
                return resp

            with _patch_client(shrinking):
                code = main(
                    ["--output-dir", str(tmp_path), "--page-size", "5", "--no-verify-count"]
                )

            assert code == 0
            assert pq.read_table(tmp_path / "leaderboard.parquet").num_rows == 10

        def it_reports_invalid_settings_as_an_error(tmp_path, monkeypatch, capsys):
            monkeypatch.chdir(tmp_path)
            monkeypatch.setenv("LEADERBOARD_PROGRESS_EVERY", "0")
            api = FakeApi(3)

            with _patch_client(api):
                code = main(["--output-dir", str(tmp_path / "out"), "--page-size", "1"])

            assert code == 1
            assert api.offsets == []
            err = capsys.readouterr().err
            assert err.startswith("Error:")
            assert "progress_every" in err
            assert "Traceback" not in err

        def it_rejects_a_zero_page_size(tmp_path, capsys):
            api = FakeApi(3)

            with _patch_client(api):
                code = main(["--output-dir", str(tmp_path), "--page-size", "0"])

            assert code == 1
            assert api.offsets == []
            assert "page_size must be positive" in capsys.readouterr().err
            assert list(tmp_path.iterdir()) == []
