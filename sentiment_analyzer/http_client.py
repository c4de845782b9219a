from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpConfig:
    timeout_sec: Optional[float]
    user_agent: str


class InferenceClient:
    """
    Thin HTTP client for the hosted classifier:
    - Bearer token auth
    - JSON in, JSON out
    - Exactly one attempt per call (no retry, no backoff)
    - Logs meaningful failures (never the token)
    """

    def __init__(self, config: HttpConfig, session: Optional[requests.Session] = None):
        self._cfg = config
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": self._cfg.user_agent})

    def post_json(self, url: str, payload: dict[str, Any], api_key: str) -> Any:
        """
        POST a JSON body and return the decoded response body.

        Returns:
            Decoded JSON, or None when the body is empty.

        Raises:
            requests.HTTPError: non-2xx responses
            requests.RequestException: network errors, undecodable body
        """
        try:
            resp = self._session.post(
                url,
                json=payload,
                headers={
                    "Authorization": f"Bearer {api_key}",
                    "Content-Type": "application/json",
                },
                timeout=self._cfg.timeout_sec,
            )
            resp.raise_for_status()
            if not resp.content:
                return None
            return resp.json()
        except requests.RequestException as e:
            logger.error("HTTP POST failed: url=%s err=%s", url, e)
            raise


def upstream_error_detail(exc: requests.RequestException) -> Optional[str]:
    """
    Error text supplied by the remote service, if any.

    The inference API answers failures with {"error": "..."}.
    """
    resp = getattr(exc, "response", None)
    if resp is None:
        return None
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        detail = body.get("error")
        if isinstance(detail, str) and detail:
            return detail
        if isinstance(detail, list) and detail:
            return "; ".join(str(d) for d in detail)
    return None
