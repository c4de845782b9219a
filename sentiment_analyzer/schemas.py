"""
Response schemas handed back to the form caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, Optional

from pydantic import BaseModel

if TYPE_CHECKING:
    from sentiment_analyzer.sentiment_types import Outcome


class SentimentResponse(BaseModel):
    """Validated classifier result."""

    label: Literal["POSITIVE", "NEGATIVE", "NEUTRAL"]
    score: float


class AnalysisResponse(BaseModel):
    """
    Uniform result-or-error shape:

    - {"success": true, "result": {"label": ..., "score": ...}}
    - {"success": false, "error": "..."}
    """

    success: bool
    result: Optional[SentimentResponse] = None
    error: Optional[str] = None

    @classmethod
    def from_outcome(cls, outcome: "Outcome") -> "AnalysisResponse":
        if outcome.ok:
            res = outcome.result  # type: ignore[union-attr]
            return cls(
                success=True,
                result=SentimentResponse(label=res.label.value, score=res.score),
            )
        return cls(success=False, error=outcome.message)  # type: ignore[union-attr]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def to_response(outcome: "Outcome") -> dict[str, Any]:
    return AnalysisResponse.from_outcome(outcome).to_dict()
