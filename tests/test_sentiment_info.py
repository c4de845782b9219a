from __future__ import annotations

from sentiment_analyzer.response_normalizer import normalize_payload
from sentiment_analyzer.sentiment_info import (
    SENTIMENT_INFO,
    character_count,
    format_confidence,
    is_almost_full,
    render_result,
)
from sentiment_analyzer.sentiment_types import NormalizationPolicy, SentimentLabel, SentimentResult


def test_every_label_has_canned_text():
    assert set(SENTIMENT_INFO) == set(SentimentLabel)
    for info in SENTIMENT_INFO.values():
        assert info.description
        assert info.tip


def test_format_confidence_rounds_to_whole_percent():
    assert format_confidence(0.95) == "95%"
    assert format_confidence(0.125) == "13%"
    assert format_confidence(0.994) == "99%"
    assert format_confidence(1.0) == "100%"
    assert format_confidence(0.0) == "0%"


def test_character_count():
    assert character_count("hello") == "5/500 characters"
    assert character_count("") == "0/500 characters"


def test_is_almost_full():
    assert not is_almost_full("a" * 450)
    assert is_almost_full("a" * 451)


def test_render_result_overlay():
    text = render_result(SentimentResult(label=SentimentLabel.NEGATIVE, score=0.85))
    lines = text.splitlines()
    assert lines[0] == "negative"
    assert lines[1] == "Confidence: 85%"
    assert "What does this mean?" in lines
    assert SENTIMENT_INFO[SentimentLabel.NEGATIVE].description in lines
    assert lines[-2] == "Pro Tip"
    assert lines[-1] == SENTIMENT_INFO[SentimentLabel.NEGATIVE].tip


def test_format_confidence_clamps_out_of_range_scores():
    assert format_confidence(1.7) == "100%"
    assert format_confidence(1e307) == "100%"
    assert format_confidence(-0.2) == "0%"


def test_render_result_with_huge_permissive_score():
    out = normalize_payload({"label": "POSITIVE", "score": 1e307}, NormalizationPolicy.PERMISSIVE)
    assert out.ok
    assert "Confidence: 100%" in render_result(out.result).splitlines()
