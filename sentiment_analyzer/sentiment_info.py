from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping

from sentiment_analyzer.sentiment_types import SentimentLabel, SentimentResult
from sentiment_analyzer.validation import MAX_TEXT_LENGTH


@dataclass(frozen=True)
class SentimentInfo:
    description: str
    tip: str


SENTIMENT_INFO: Mapping[SentimentLabel, SentimentInfo] = {
    SentimentLabel.POSITIVE: SentimentInfo(
        description=(
            "The text expresses a positive sentiment, showing approval, happiness, or optimism."
        ),
        tip=(
            "To maintain this positive tone, continue using affirmative language "
            "and focus on benefits and solutions."
        ),
    ),
    SentimentLabel.NEGATIVE: SentimentInfo(
        description=(
            "The text expresses a negative sentiment, showing disapproval, sadness, or pessimism."
        ),
        tip=(
            "To shift to a more positive tone, try focusing on solutions rather than problems, "
            "and use more constructive language."
        ),
    ),
    SentimentLabel.NEUTRAL: SentimentInfo(
        description=(
            "The text expresses a neutral sentiment, showing neither strong approval nor disapproval."
        ),
        tip=(
            "To make your message more engaging, consider adding more descriptive or emotional "
            "language that aligns with your intent."
        ),
    ),
}


def format_confidence(score: float) -> str:
    """0.95 -> '95%' (round half up, clamped to 0-100)."""
    pct = min(max(score, 0.0), 1.0) * 100
    return f"{int(math.floor(pct + 0.5))}%"


def character_count(text: str, max_length: int = MAX_TEXT_LENGTH) -> str:
    return f"{len(text)}/{max_length} characters"


def is_almost_full(text: str, max_length: int = MAX_TEXT_LENGTH) -> bool:
    return len(text) > max_length * 0.9


def render_result(result: SentimentResult) -> str:
    """
    Text rendition of the result overlay:
    label, confidence, then the canned explanation and tip.
    """
    info = SENTIMENT_INFO[result.label]
    lines = [
        result.label.value.lower(),
        f"Confidence: {format_confidence(result.score)}",
        "",
        "What does this mean?",
        info.description,
        "",
        "Pro Tip",
        info.tip,
    ]
    return "\n".join(lines)
