from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

from sentiment_analyzer.sentiment_types import (
    ErrorKind,
    Failure,
    NormalizationPolicy,
    Outcome,
    SentimentLabel,
    SentimentResult,
    Success,
)

logger = logging.getLogger(__name__)

DEFAULT_SCORE = 0.5
MIN_SCORE = 0.0
MAX_SCORE = 1.0

EMPTY_RESPONSE_MSG = "Empty API response"
EMPTY_RESULT_ARRAY_MSG = "Empty result array from API"
INVALID_RESULT_FORMAT_MSG = "Invalid result format from API"
MISSING_LABEL_MSG = "No sentiment label found in API response"
MISSING_SCORE_MSG = "No valid sentiment score found in API response"


class PayloadShape(str, Enum):
    RECORD = "record"  # {label, score}
    FLAT = "flat"  # [{label, score}, ...]
    NESTED = "nested"  # [[{label, score}, ...]]


@dataclass(frozen=True)
class Candidate:
    """Single record extracted from a payload, before field validation."""

    value: Any


def detect_shape(payload: Any) -> PayloadShape:
    if isinstance(payload, list):
        if payload and isinstance(payload[0], list):
            return PayloadShape.NESTED
        return PayloadShape.FLAT
    return PayloadShape.RECORD


def resolve_candidate(payload: Any) -> Union[Candidate, Failure]:
    """
    Collapse a payload of any known shape to one candidate record.

    The classifier orders candidates highest-confidence first, so the
    first entry always wins.
    """
    shape = detect_shape(payload)
    if shape is PayloadShape.NESTED:
        inner = payload[0]
        if not inner:
            return Failure(ErrorKind.EMPTY_RESULT_ARRAY, EMPTY_RESULT_ARRAY_MSG)
        return Candidate(inner[0])
    if shape is PayloadShape.FLAT:
        if not payload:
            return Failure(ErrorKind.EMPTY_RESULT_ARRAY, EMPTY_RESULT_ARRAY_MSG)
        return Candidate(payload[0])
    return Candidate(payload)


def normalize_label(
        raw: Any,
        policy: NormalizationPolicy = NormalizationPolicy.STRICT,
) -> Union[SentimentLabel, Failure]:
    """
    Map raw label text onto SentimentLabel (case-insensitive).

    - strict: uppercased text must be exactly one of the three labels
    - permissive: substring match on POSITIVE then NEGATIVE, else NEUTRAL
    """
    if not isinstance(raw, str) or not raw:
        return Failure(ErrorKind.MISSING_OR_INVALID_LABEL, MISSING_LABEL_MSG)

    upper = raw.upper()
    if policy is NormalizationPolicy.PERMISSIVE:
        if "POSITIVE" in upper:
            return SentimentLabel.POSITIVE
        if "NEGATIVE" in upper:
            return SentimentLabel.NEGATIVE
        return SentimentLabel.NEUTRAL

    try:
        return SentimentLabel(upper)
    except ValueError:
        return Failure(ErrorKind.UNSUPPORTED_LABEL, f"Invalid sentiment label: {upper}")


def normalize_score(
        raw: Any,
        policy: NormalizationPolicy = NormalizationPolicy.STRICT,
) -> Union[float, Failure]:
    """
    Validate the candidate's score.

    - strict: finite number in [0, 1]
    - permissive: any finite number, DEFAULT_SCORE otherwise
    """
    if not _is_number(raw):
        if policy is NormalizationPolicy.PERMISSIVE:
            return DEFAULT_SCORE
        return Failure(ErrorKind.MISSING_OR_INVALID_SCORE, MISSING_SCORE_MSG)

    score = float(raw)
    if policy is NormalizationPolicy.STRICT and not (MIN_SCORE <= score <= MAX_SCORE):
        return Failure(
            ErrorKind.SCORE_OUT_OF_RANGE,
            f"Sentiment score out of range: {score} (expected {MIN_SCORE}-{MAX_SCORE})",
        )
    return score


def normalize_payload(
        payload: Any,
        policy: NormalizationPolicy = NormalizationPolicy.STRICT,
) -> Outcome:
    """
    Reduce a raw classifier payload to a SentimentResult.

    Order: empty check -> shape resolution -> record check -> label -> score.
    Deterministic: the same payload always gives the same outcome.
    """
    if payload is None or payload == "":
        return Failure(ErrorKind.EMPTY_RESPONSE, EMPTY_RESPONSE_MSG)

    candidate = resolve_candidate(payload)
    if isinstance(candidate, Failure):
        return candidate

    record = candidate.value
    if not isinstance(record, Mapping):
        return Failure(ErrorKind.INVALID_RESULT_FORMAT, INVALID_RESULT_FORMAT_MSG)

    label = normalize_label(record.get("label"), policy)
    if isinstance(label, Failure):
        return label

    score = normalize_score(record.get("score"), policy)
    if isinstance(score, Failure):
        return score

    logger.debug(
        "Normalized payload: shape=%s policy=%s label=%s score=%s",
        detect_shape(payload).value,
        policy.value,
        label.value,
        score,
    )
    return Success(SentimentResult(label=label, score=score))


def _is_number(value: Any) -> bool:
    # bool is an int subclass; a JSON true/false is not a score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
