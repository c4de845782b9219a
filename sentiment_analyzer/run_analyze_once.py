from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from sentiment_analyzer.schemas import to_response
from sentiment_analyzer.sentiment_info import character_count, is_almost_full, render_result
from sentiment_analyzer.sentiment_service import analyze_with_settings, configuration_failure
from sentiment_analyzer.sentiment_types import NormalizationPolicy
from sentiment_analyzer.settings import load_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Analyze the sentiment of a short text.")
    parser.add_argument("text", nargs="*", help="Text to analyze (read from stdin when omitted)")
    parser.add_argument("--json", action="store_true", help="Print the raw result/error object")
    parser.add_argument(
        "--policy",
        choices=[p.value for p in NormalizationPolicy],
        default=None,
        help="Label normalization policy (overrides SENTIMENT_LABEL_POLICY)",
    )
    return parser.parse_args(argv)


def _emit(outcome, as_json: bool) -> int:
    if as_json:
        print(json.dumps(to_response(outcome), ensure_ascii=False, indent=2))
    elif outcome.ok:
        print(render_result(outcome.result))
    else:
        print(f"Error: {outcome.message}", file=sys.stderr)
    return 0 if outcome.ok else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)

    try:
        s = load_settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        return _emit(configuration_failure(e), args.json)

    logging.basicConfig(level=s.log_level, format=LOG_FORMAT)

    if args.policy:
        s = s.model_copy(update={"label_policy": NormalizationPolicy(args.policy)})

    text = " ".join(args.text) if args.text else sys.stdin.read().rstrip("\n")
    logger.info("Analyzing text: %s policy=%s", character_count(text), s.label_policy.value)
    if is_almost_full(text):
        logger.warning("Text is close to the length limit: %s", character_count(text))

    outcome = asyncio.run(analyze_with_settings(text, s))
    if outcome.ok and not args.json:
        print(character_count(text))
        print()
    return _emit(outcome, args.json)


if __name__ == "__main__":
    sys.exit(main())
