"""Unit tests for signal detection.

Tests cover:
- Threshold validation and camelCase overrides
- Each of the nine rules at and around its threshold
- The min-volume gate, which applies to every rule
- Fixed rule order in the result
"""

import pytest  # type: ignore

from internal.model import NamedCount, SignalType
from internal.signal_detection import (
    DetectionContext,
    ErrInvalidThreshold,
    New,
    SignalDetection,
    Thresholds,
    detect_signals,
)
from internal.window_stats import WindowStats, build_stats


def _types(result):
    return [signal.type for signal in result.signals]


def _topics(*names):
    return [NamedCount(name=name, count=1) for name in names]


# ============================================================================
# Thresholds
# ============================================================================


class TestThresholds:
    def test_defaults(self):
        thresholds = Thresholds()
        assert thresholds.min_volume == 40
        assert thresholds.volume_spike_pct == 30.0
        assert thresholds.coordination_ratio == 18.0

    def test_camel_case_overrides(self):
        thresholds = Thresholds().with_overrides({"minVolume": 10, "riskScore": "50"})
        assert thresholds.min_volume == 10
        assert thresholds.risk_score == 50.0

    def test_snake_case_and_none_overrides(self):
        thresholds = Thresholds().with_overrides({"negativity_pct": 20, "risk_score": None})
        assert thresholds.negativity_pct == 20.0
        assert thresholds.risk_score == 45.0

    def test_unknown_override_raises(self):
        with pytest.raises(ErrInvalidThreshold, match="unknown threshold"):
            Thresholds().with_overrides({"bogus": 1})

    def test_non_numeric_override_raises(self):
        with pytest.raises(ErrInvalidThreshold):
            Thresholds().with_overrides({"minVolume": "many"})

    def test_negative_min_volume_override_raises(self):
        with pytest.raises(ErrInvalidThreshold):
            Thresholds().with_overrides({"minVolume": -1})

    def test_invalid_construction(self):
        with pytest.raises(ValueError):
            Thresholds(min_volume=-5)
        with pytest.raises(ValueError):
            Thresholds(risk_score="high")

    def test_overrides_do_not_mutate(self):
        base = Thresholds()
        base.with_overrides({"minVolume": 1})
        assert base.min_volume == 40


# ============================================================================
# Rules
# ============================================================================


class TestGate:
    def test_below_min_volume_fires_nothing(self):
        stats = WindowStats(total=10, negative_share=100.0, risk_score=100.0)
        result = detect_signals(stats, WindowStats(), 5.0, Thresholds(min_volume=40))
        assert result.signals == []
        assert result.delta_pct == 100.0

    def test_at_min_volume_rules_run(self):
        stats = WindowStats(total=40, negative_share=50.0)
        prev = WindowStats(total=40, negative_share=50.0)
        result = detect_signals(stats, prev, 1.0, Thresholds(min_volume=40))
        assert _types(result) == [SignalType.NEGATIVITY]


class TestVolume:
    def test_delta_fires(self):
        result = detect_signals(
            WindowStats(total=150), WindowStats(total=100), 1.0, Thresholds(min_volume=1)
        )
        assert _types(result) == [SignalType.VOLUME]
        assert result.signals[0].value == 50.0
        assert result.signals[0].delta_pct == 50.0
        assert result.rule_values["volume"].threshold == 30.0

    def test_below_delta_does_not_fire(self):
        result = detect_signals(
            WindowStats(total=120), WindowStats(total=100), 1.0, Thresholds(min_volume=1)
        )
        assert SignalType.VOLUME not in _types(result)

    def test_z_score_fires_without_delta(self):
        context = DetectionContext(baseline_daily=[10, 12, 8, 10])
        result = detect_signals(
            WindowStats(total=20), WindowStats(total=20), 1.0, Thresholds(min_volume=1), context
        )
        assert _types(result) == [SignalType.VOLUME]
        assert result.volume_z_score == pytest.approx(6.1237, rel=1e-3)
        assert result.signals[0].value == pytest.approx(result.volume_z_score * 10)


class TestSentimentRules:
    def test_negativity_value(self, make_posts):
        """100 posts with 40 negative fire negativity with value 40."""
        posts = make_posts(40, sentiment="negativo") + make_posts(60, sentiment="positivo")
        stats = build_stats(posts)
        result = detect_signals(stats, stats, 1.0, Thresholds(), DetectionContext(posts, posts))
        assert _types(result) == [SignalType.NEGATIVITY]
        assert result.signals[0].value == 40.0

    def test_sentiment_shift(self):
        stats = WindowStats(total=50, negative_share=30.0)
        prev = WindowStats(total=50, negative_share=15.0)
        result = detect_signals(stats, prev, 1.0, Thresholds(min_volume=1))
        assert _types(result) == [SignalType.SENTIMENT_SHIFT]
        assert result.signals[0].value == 15.0

    def test_risk(self):
        stats = WindowStats(total=50, risk_score=45.0)
        result = detect_signals(stats, WindowStats(total=50), 1.0, Thresholds(min_volume=1))
        assert _types(result) == [SignalType.RISK]


class TestViral:
    def test_fires_with_ratio_and_delta(self):
        result = detect_signals(
            WindowStats(total=125), WindowStats(total=100), 1.5, Thresholds(min_volume=1)
        )
        assert _types(result) == [SignalType.VIRAL]
        assert result.signals[0].value == 1.5
        assert result.rule_values["viral"].delta_threshold == 20.0

    def test_needs_both_conditions(self):
        result = detect_signals(
            WindowStats(total=110), WindowStats(total=100), 1.5, Thresholds(min_volume=1)
        )
        assert result.signals == []


class TestTopicNovelty:
    def test_fires_when_most_topics_are_new(self):
        stats = WindowStats(total=50, top_topics=_topics("agua", "luz", "gas"))
        prev = WindowStats(total=50, top_topics=_topics("agua"))
        result = detect_signals(stats, prev, 1.0, Thresholds(min_volume=1))
        assert _types(result) == [SignalType.TOPIC_NOVELTY]
        assert result.signals[0].value == pytest.approx(200 / 3)

    def test_no_topics_no_signal(self):
        result = detect_signals(
            WindowStats(total=50), WindowStats(total=50), 1.0, Thresholds(min_volume=1)
        )
        assert result.signals == []


class TestContentRules:
    def test_cross_platform(self, make_posts):
        current = make_posts(10, platform="twitter") + make_posts(10, platform="facebook")
        prev = make_posts(5, platform="twitter") + make_posts(5, platform="facebook")
        stats = build_stats(current)
        context = DetectionContext(current_posts=current, prev_posts=prev)
        result = detect_signals(
            stats,
            stats,
            1.0,
            Thresholds(min_volume=20, volume_spike_pct=1000, volume_z_score=1000),
            context,
        )
        assert SignalType.CROSS_PLATFORM in _types(result)
        assert result.rule_values["cross_platform"].value == 2

    def test_cross_platform_floor(self, make_posts):
        current = make_posts(2, platform="twitter") + make_posts(2, platform="facebook")
        stats = build_stats(current)
        context = DetectionContext(current_posts=current, prev_posts=[])
        result = detect_signals(stats, stats, 1.0, Thresholds(min_volume=1), context)
        assert SignalType.CROSS_PLATFORM not in _types(result)

    def test_coordination(self, make_post):
        shared = [
            make_post(
                content=f"Vote hoy https://x.co/{index}",
                handle=f"@bot{index}",
                sentiment="positivo",
            )
            for index in range(4)
        ]
        organic = [make_post(sentiment="positivo") for _ in range(6)]
        posts = shared + organic
        stats = build_stats(posts)
        result = detect_signals(
            stats, stats, 1.0, Thresholds(min_volume=1), DetectionContext(posts, posts)
        )
        assert _types(result) == [SignalType.COORDINATION]
        assert result.signals[0].value == 40.0

    def test_coordination_key_ignores_text_past_160_chars(self, make_post):
        prefix = "a" * 160
        shared = [
            make_post(content=f"{prefix} firma {index}", handle=f"@bot{index}", sentiment="positivo")
            for index in range(4)
        ]
        organic = [make_post(sentiment="positivo") for _ in range(6)]
        posts = shared + organic
        stats = build_stats(posts)
        result = detect_signals(
            stats, stats, 1.0, Thresholds(min_volume=1), DetectionContext(posts, posts)
        )
        assert SignalType.COORDINATION in _types(result)
        assert result.rule_values["coordination"].value == 40.0

    def test_coordination_key_differs_within_160_chars(self, make_post):
        shared = [
            make_post(
                content="a" * 100 + f" firma {index} " + "b" * 100,
                handle=f"@bot{index}",
                sentiment="positivo",
            )
            for index in range(4)
        ]
        organic = [make_post(sentiment="positivo") for _ in range(6)]
        posts = shared + organic
        stats = build_stats(posts)
        result = detect_signals(
            stats, stats, 1.0, Thresholds(min_volume=1), DetectionContext(posts, posts)
        )
        assert SignalType.COORDINATION not in _types(result)

    def test_same_author_repeating_is_not_coordination(self, make_post):
        posts = [make_post(content="mismo texto", handle="@uno") for _ in range(5)]
        stats = build_stats(posts)
        result = detect_signals(
            stats, stats, 1.0, Thresholds(min_volume=1), DetectionContext(posts, posts)
        )
        assert SignalType.COORDINATION not in _types(result)

    def test_content_rules_skipped_without_posts(self):
        stats = WindowStats(total=50)
        result = detect_signals(stats, stats, 1.0, Thresholds(min_volume=1), DetectionContext())
        assert result.signals == []


class TestGeoExpansion:
    def test_fires(self):
        stats = WindowStats(total=50, geo_spread=5)
        prev = WindowStats(total=50, geo_spread=2)
        result = detect_signals(stats, prev, 1.0, Thresholds(min_volume=1))
        assert _types(result) == [SignalType.GEO_EXPANSION]
        assert result.signals[0].value == 150.0


class TestRuleOrder:
    def test_fixed_order(self):
        stats = WindowStats(
            total=200,
            negative_share=60.0,
            risk_score=80.0,
            geo_spread=4,
            top_topics=_topics("nuevo"),
        )
        prev = WindowStats(total=100, negative_share=20.0, geo_spread=1)
        result = detect_signals(stats, prev, 2.0, Thresholds(min_volume=1))
        assert _types(result) == [
            SignalType.VOLUME,
            SignalType.SENTIMENT_SHIFT,
            SignalType.NEGATIVITY,
            SignalType.RISK,
            SignalType.VIRAL,
            SignalType.TOPIC_NOVELTY,
            SignalType.GEO_EXPANSION,
        ]
        assert set(result.rule_values) == {signal.type.value for signal in result.signals}


class TestSignalDetectionUseCase:
    def test_new_returns_detector(self):
        assert isinstance(New(), SignalDetection)

    def test_detect_matches_pure_function(self):
        stats = WindowStats(total=50, negative_share=50.0)
        prev = WindowStats(total=50, negative_share=50.0)
        thresholds = Thresholds(min_volume=1)
        assert _types(New().detect(stats, prev, 1.0, thresholds)) == _types(
            detect_signals(stats, prev, 1.0, thresholds)
        )
