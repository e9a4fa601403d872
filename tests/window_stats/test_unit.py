"""Unit tests for window statistics.

Tests cover:
- Share, risk and impact aggregates
- Top topics, entities and keywords (first-seen tie order)
- New-author share and geographic spread
- Baseline helpers (daily counts, dynamic min volume, baseline impact)
"""

from datetime import timedelta

import pytest  # type: ignore

from internal.window_stats import (
    build_daily_counts,
    build_stats,
    calc_baseline_impact,
    calc_risk_score,
    extract_tokens,
    resolve_min_volume,
)


class TestBuildStats:
    def test_empty_batch_is_zero(self):
        stats = build_stats([])
        assert stats.total == 0
        assert stats.negative_share == 0.0
        assert stats.risk_score == 0.0
        assert stats.earliest_at is None
        assert stats.top_topics == []

    def test_negative_share(self, make_posts):
        posts = make_posts(40, sentiment="negativo") + make_posts(60, sentiment="positivo")
        stats = build_stats(posts)
        assert stats.total == 100
        assert stats.negative_share == 40.0

    def test_reach_engagement_and_rate(self, make_post):
        posts = [make_post(reach=100, engagement=10), make_post(reach=300, engagement=30)]
        stats = build_stats(posts)
        assert stats.reach == 400
        assert stats.engagement == 40
        assert stats.engagement_rate == 10.0

    def test_impact_is_arithmetic_mean(self, make_post):
        posts = [make_post(reach=100, engagement=10), make_post(reach=300, engagement=30)]
        assert build_stats(posts).impact_score == pytest.approx(200 * 0.6 + 20 * 0.4)

    def test_time_bounds(self, make_post, base_ts):
        posts = [
            make_post(timestamp=base_ts),
            make_post(timestamp=base_ts - timedelta(hours=5)),
        ]
        stats = build_stats(posts)
        assert stats.earliest_at == base_ts - timedelta(hours=5)
        assert stats.latest_at == base_ts

    def test_top_topics_ties_keep_first_seen_order(self, make_post):
        topics = ["agua", "luz", "luz", "agua", "gas", "", "tren"]
        stats = build_stats([make_post(topic=topic) for topic in topics])
        assert [t.name for t in stats.top_topics] == ["agua", "luz", "gas"]
        assert [t.count for t in stats.top_topics] == [2, 2, 1]

    def test_empty_topics_are_not_counted(self, make_post):
        stats = build_stats([make_post(topic="") for _ in range(3)] + [make_post(topic="agua")])
        assert [(t.name, t.count) for t in stats.top_topics] == [("agua", 1)]

    def test_top_entities_by_author_key(self, make_post):
        posts = [
            make_post(handle="@ana"),
            make_post(handle="@ana"),
            make_post(handle="", author="Beto"),
        ]
        entities = build_stats(posts).top_entities
        assert entities[0].name == "@ana"
        assert entities[0].count == 2
        assert entities[1].name == "Beto"

    def test_keywords(self, make_post):
        posts = [
            make_post(content="¡Protesta en San Juan! protesta"),
            make_post(content="Protesta para todos"),
        ]
        keywords = {k.term: k.count for k in build_stats(posts).keywords}
        assert keywords["protesta"] == 3
        assert keywords["juan"] == 1
        assert "san" not in keywords
        assert "para" not in keywords

    def test_new_authors_pct(self, make_post):
        current = [make_post(handle="@a"), make_post(handle="@B")]
        baseline = [make_post(handle="@b")]
        assert build_stats(current, baseline).new_authors_pct == 50.0
        assert build_stats(current, baseline).unique_authors == 2

    def test_geo_spread_counts_distinct_cities(self, make_post):
        posts = [make_post(city="Lima"), make_post(city="Lima"), make_post(city="Cusco"), make_post()]
        assert build_stats(posts).geo_spread == 2


class TestRiskScore:
    def test_clamped_to_100(self, make_post):
        assert calc_risk_score([make_post(sentiment="negativo", reach=100)]) == 100.0

    def test_clamped_to_zero(self, make_post):
        assert calc_risk_score([make_post(sentiment="positivo", reach=100)]) == 0.0

    def test_zero_reach_total(self, make_post):
        assert calc_risk_score([make_post(sentiment="negativo", reach=0)]) == 0.0

    def test_weighted_by_reach(self, make_posts):
        posts = make_posts(60, sentiment="negativo") + make_posts(40, sentiment="positivo")
        # (6000 * 1.2 - 4000 * 0.3) / 10000
        assert calc_risk_score(posts) == pytest.approx(60.0)


class TestTokens:
    def test_short_tokens_and_stopwords_dropped(self):
        assert extract_tokens("Que paso con la marcha hoy") == ["paso", "marcha"]

    def test_empty(self):
        assert extract_tokens("") == []


class TestBaselineHelpers:
    def test_baseline_impact_ignores_zero_values(self, make_post):
        posts = [
            make_post(reach=0, engagement=0),
            make_post(reach=100, engagement=0),
            make_post(reach=300, engagement=0),
        ]
        assert calc_baseline_impact(posts) == pytest.approx(200 * 0.6)
        assert calc_baseline_impact([]) == 0.0

    def test_daily_counts(self, make_post, base_ts):
        posts = [
            make_post(timestamp=base_ts),
            make_post(timestamp=base_ts + timedelta(hours=1)),
            make_post(timestamp=base_ts - timedelta(days=1)),
        ]
        assert build_daily_counts(posts) == [2, 1]

    @pytest.mark.parametrize(
        "base_min,daily,total,expected",
        [
            (40, [], 100, 40),
            (2, [10, 10], 0, 12),
            (0, [], 450, 5),
            (0, [], 350, 4),
            (0, [], 0, 3),
        ],
    )
    def test_resolve_min_volume(self, base_min, daily, total, expected):
        assert resolve_min_volume(base_min, daily, total) == expected
