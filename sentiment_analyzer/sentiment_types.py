from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class SentimentLabel(str, Enum):
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    NEUTRAL = "NEUTRAL"


class NormalizationPolicy(str, Enum):
    """
    How the normalizer treats labels/scores it does not recognize.

    - strict: unknown label or bad score -> failure
    - permissive: unknown label -> NEUTRAL, bad score -> 0.5
    """

    STRICT = "strict"
    PERMISSIVE = "permissive"


class ErrorKind(str, Enum):
    EMPTY_TEXT = "EmptyText"
    TEXT_TOO_LONG = "TextTooLong"
    MISSING_CREDENTIAL = "MissingCredential"
    TRANSPORT_ERROR = "TransportError"
    EMPTY_RESPONSE = "EmptyResponse"
    EMPTY_RESULT_ARRAY = "EmptyResultArray"
    INVALID_RESULT_FORMAT = "InvalidResultFormat"
    MISSING_OR_INVALID_LABEL = "MissingOrInvalidLabel"
    MISSING_OR_INVALID_SCORE = "MissingOrInvalidScore"
    UNSUPPORTED_LABEL = "UnsupportedLabel"
    SCORE_OUT_OF_RANGE = "ScoreOutOfRange"
    INVALID_CONFIGURATION = "InvalidConfiguration"


@dataclass(frozen=True)
class SentimentResult:
    """
    Standardized sentiment output.

    - label: POSITIVE|NEGATIVE|NEUTRAL
    - score: classifier confidence for the label (finite float)
    """

    label: SentimentLabel
    score: float

    def to_payload(self) -> dict[str, Any]:
        """Bare-object form, same shape the classifier returns."""
        return {"label": self.label.value, "score": self.score}


@dataclass(frozen=True)
class ValidationOutcome:
    is_valid: bool
    error_message: Optional[str] = None
    error_kind: Optional[ErrorKind] = None


@dataclass(frozen=True)
class Success:
    result: SentimentResult

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Success, Failure]
