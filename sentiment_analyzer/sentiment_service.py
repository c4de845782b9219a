"""
Sentiment analysis invoker.

One submission = one request:
text check -> credential check -> single POST -> normalize.
Every expected failure comes back as a Failure value; nothing is raised
to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import requests
from pydantic import ValidationError

from sentiment_analyzer.http_client import HttpConfig, InferenceClient, upstream_error_detail
from sentiment_analyzer.response_normalizer import normalize_payload
from sentiment_analyzer.sentiment_types import ErrorKind, Failure, NormalizationPolicy, Outcome
from sentiment_analyzer.settings import (
    DEFAULT_API_URL,
    DEFAULT_USER_AGENT,
    AnalyzerSettings,
    load_settings,
)
from sentiment_analyzer.validation import validate_api_key, validate_text

logger = logging.getLogger(__name__)

MISSING_CREDENTIAL_MSG = "API key is not configured on the server"
INVALID_CONFIGURATION_MSG = "Server configuration is invalid"


async def analyze_sentiment(
        text: str,
        api_key: Optional[str],
        *,
        client: Optional[InferenceClient] = None,
        api_url: str = DEFAULT_API_URL,
        policy: NormalizationPolicy = NormalizationPolicy.STRICT,
) -> Outcome:
    """
    Classify one text.

    Args:
        text: user text (1..500 chars, not blank)
        api_key: bearer token for the inference API
        client: transport; a default InferenceClient is created when omitted
        api_url: classifier endpoint
        policy: label/score normalization policy

    Returns:
        Success(SentimentResult) or Failure(kind, message)
    """
    check = validate_text(text)
    if not check.is_valid:
        return Failure(check.error_kind or ErrorKind.EMPTY_TEXT, check.error_message or "Invalid text")

    if not validate_api_key(api_key).is_valid:
        logger.warning("Sentiment request rejected: credential not configured")
        return Failure(ErrorKind.MISSING_CREDENTIAL, MISSING_CREDENTIAL_MSG)

    if client is None:
        client = InferenceClient(HttpConfig(timeout_sec=None, user_agent=DEFAULT_USER_AGENT))

    try:
        payload = await asyncio.to_thread(client.post_json, api_url, {"inputs": text}, api_key)
    except requests.RequestException as e:
        detail = upstream_error_detail(e) or str(e)
        logger.warning("Sentiment request failed: %s", detail)
        return Failure(ErrorKind.TRANSPORT_ERROR, f"API Error: {detail}")

    logger.debug("API response: %r", payload)

    outcome = normalize_payload(payload, policy)
    if outcome.ok:
        logger.info(
            "Sentiment classified: label=%s score=%.4f chars=%s",
            outcome.result.label.value,
            outcome.result.score,
            len(text),
        )
    else:
        logger.warning("Sentiment response rejected: kind=%s msg=%s", outcome.kind.value, outcome.message)
    return outcome


async def analyze_with_settings(
        text: str,
        settings: Optional[AnalyzerSettings] = None,
        *,
        client: Optional[InferenceClient] = None,
) -> Outcome:
    """
    Form-facing entry point: settings are read once per call and passed on
    explicitly.
    """
    if settings is None:
        try:
            settings = load_settings()
        except ValidationError as e:
            return configuration_failure(e)
    s = settings
    if client is None:
        client = InferenceClient(
            HttpConfig(timeout_sec=s.request_timeout_sec, user_agent=s.user_agent)
        )
    return await analyze_sentiment(
        text,
        s.hugging_face_api_key,
        client=client,
        api_url=s.sentiment_api_url,
        policy=s.label_policy,
    )


def configuration_failure(exc: ValidationError) -> Failure:
    """Failure naming the environment variables that did not validate."""
    names = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
    logger.error("Settings rejected: %s", ", ".join(names) or exc)
    message = INVALID_CONFIGURATION_MSG
    if names:
        message = f"{message}: {', '.join(names)}"
    return Failure(ErrorKind.INVALID_CONFIGURATION, message)
