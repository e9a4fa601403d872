"""Tests for the evaluate command.

Tests cover:
- Dashboard JSON on stdout for a post batch
- Detail view via --alert-id
- Exit codes for unknown alerts and invalid input
- Skipping of unparseable post records
"""

import json

import pytest  # type: ignore

from commands.evaluate.main import build_query, main, parse_args, read_posts

NOW = "2024-05-10T12:00:00Z"


def _post(index, sentiment, timestamp):
    return {
        "id": f"p{index}",
        "timestamp": timestamp,
        "author": f"Autor {index}",
        "handle": f"@autor{index}",
        "platform": "twitter",
        "content": f"mensaje numero {index}",
        "sentiment": sentiment,
        "cluster": "Salud",
        "reach": 100,
        "engagement": 10,
    }


@pytest.fixture
def posts_file(tmp_path, monkeypatch):
    """Posts file in an empty working directory (default config)."""
    monkeypatch.chdir(tmp_path)
    records = []
    for index in range(100):
        sentiment = "negativo" if index < 60 else "positivo"
        records.append(_post(index, sentiment, "2024-05-10T12:00:00Z"))
    for index in range(100, 140):
        sentiment = "negativo" if index < 110 else "positivo"
        records.append(_post(index, sentiment, "2024-05-09T06:00:00Z"))
    records.append({"id": "", "timestamp": NOW})
    records.append({"id": "sin-fecha"})
    path = tmp_path / "posts.json"
    path.write_text(json.dumps({"posts": records}), encoding="utf-8")
    return str(path)


def _run(capsys, argv):
    code = main(argv)
    out = capsys.readouterr().out
    return code, (json.loads(out) if out.strip() else None)


class TestDashboard:
    def test_prints_dashboard(self, capsys, posts_file):
        code, data = _run(capsys, [posts_file, "--now", NOW, "--timeframe", "24h"])
        assert code == 0
        ids = [alert["id"] for alert in data["alerts"]]
        assert "overall" in ids
        assert data["total"] == len(ids)
        assert data["window"]["end"] == "2024-05-10T12:00:00.000Z"
        assert len(data["rules"]) == 9

    def test_limit_and_cursor(self, capsys, posts_file):
        code, data = _run(
            capsys, [posts_file, "--now", NOW, "--timeframe", "24h", "--limit", "1"]
        )
        assert code == 0
        assert len(data["alerts"]) == 1
        assert data["next_cursor"] == "1"


class TestDetail:
    def test_prints_detail(self, capsys, posts_file):
        code, data = _run(
            capsys, [posts_file, "--now", NOW, "--timeframe", "24h", "--alert-id", "overall"]
        )
        assert code == 0
        assert data["alert"]["id"] == "overall"
        assert data["history"]

    def test_unknown_alert(self, capsys, posts_file):
        code, data = _run(capsys, [posts_file, "--now", NOW, "--alert-id", "city:Arequipa"])
        assert code == 2
        assert data is None


class TestErrors:
    def test_invalid_now(self, capsys, posts_file):
        code, data = _run(capsys, [posts_file, "--now", "mañana"])
        assert code == 1
        assert data is None

    def test_invalid_date_range(self, capsys, posts_file):
        code, _ = _run(
            capsys, [posts_file, "--date-from", "2024-05-10", "--date-to", "2024-05-01"]
        )
        assert code == 1

    def test_unknown_timeframe_rejected_by_parser(self, posts_file):
        with pytest.raises(SystemExit):
            parse_args([posts_file, "--timeframe", "2h"])


class TestHelpers:
    def test_read_posts_skips_invalid(self, posts_file):
        posts = read_posts(posts_file)
        assert len(posts) == 140
        assert posts[0].cluster == "Salud"

    def test_read_posts_plain_list(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([_post(1, "neutral", NOW)]), encoding="utf-8")
        assert [post.id for post in read_posts(str(path))] == ["p1"]

    def test_read_posts_rejects_non_list(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"posts": "nada"}), encoding="utf-8")
        with pytest.raises(ValueError):
            read_posts(str(path))

    def test_build_query(self, posts_file):
        args = parse_args(
            [posts_file, "--severity", "critical,high", "--sort", "volume", "--limit", "5"]
        )
        query = build_query(args)
        assert query.severity == ("critical", "high")
        assert query.sort == "volume"
        assert query.limit == 5
