from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sentiment_analyzer.sentiment_types import NormalizationPolicy

DEFAULT_API_URL = (
    "https://api-inference.huggingface.co/models/"
    "distilbert-base-uncased-finetuned-sst-2-english"
)
DEFAULT_USER_AGENT = "sentiment-analyzer/0.1"


class AnalyzerSettings(BaseSettings):
    """
    Environment-driven settings for the sentiment analyzer.
    """

    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

    # ---- Credential ----
    # Absent key is reported per request, never at startup.
    hugging_face_api_key: Optional[str] = Field(default=None, alias="HUGGING_FACE_API_KEY")

    # ---- Classifier endpoint ----
    sentiment_api_url: str = Field(default=DEFAULT_API_URL, alias="SENTIMENT_API_URL")

    # None -> transport default (requests never times out on its own)
    request_timeout_sec: Optional[float] = Field(default=None, alias="SENTIMENT_REQUEST_TIMEOUT_SEC")

    user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="SENTIMENT_USER_AGENT")

    # ---- Normalization ----
    # strict: reject unknown labels / bad scores; permissive: NEUTRAL / 0.5
    label_policy: NormalizationPolicy = Field(
        default=NormalizationPolicy.STRICT,
        alias="SENTIMENT_LABEL_POLICY",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


def load_settings() -> AnalyzerSettings:
    return AnalyzerSettings()
