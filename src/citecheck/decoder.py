"""Decode structured payloads out of free-text model responses.

Models are asked to answer with a single ```json fenced block, but they
sometimes omit the fence or wrap lists in an object. Everything here is
tolerant: malformed input decodes to ``None`` (or an empty list for search
results) and is logged, never raised.
"""

import json
import logging
import math
import re
from typing import Any

from citecheck.data import AnalysisResult, ArticleSummary, Citation, Evaluation, OriginalArticle

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```json[ \t]*\r?\n(.*?)\r?\n[ \t]*```", re.DOTALL)

MIN_SCORE = 1.0
MAX_SCORE = 5.0


def decode_json(text: str) -> Any | None:
    """Extract and parse the JSON payload of a model response.

    Uses the first ```json fenced block if there is one, otherwise tries the
    whole text.

    Args:
        text: Raw response text.

    Returns:
        The parsed value, or None if nothing parseable was found. Note that a
        literal ``null`` payload also decodes to None.
    """
    match = _FENCE_RE.search(text)
    payload = match.group(1) if match else text.strip()
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        if match:
            logger.warning("Failed to parse fenced JSON block: %s", e)
        else:
            logger.warning("Response is not valid JSON: %r", text)
        return None


def _str(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    return "" if value is None else str(value)


def _parse_article(raw: dict[str, Any]) -> ArticleSummary:
    published = raw.get("publishedDate")
    return ArticleSummary(
        title=_str(raw, "title"),
        summary=_str(raw, "summary"),
        url=_str(raw, "url"),
        publisher=_str(raw, "publisher"),
        published_date=str(published) if published else None,
    )


def decode_article_list(text: str) -> list[ArticleSummary]:
    """Decode a search response into a list of articles.

    A top-level list is used as is. An object with exactly one property whose
    value is a list (e.g. ``{"articles": [...]}``) is unwrapped. Anything else
    yields an empty list.
    """
    parsed = decode_json(text)

    if isinstance(parsed, dict) and len(parsed) == 1:
        (inner,) = parsed.values()
        if isinstance(inner, list):
            parsed = inner

    if not isinstance(parsed, list):
        logger.warning("Article search did not return a list. Raw response: %r", text)
        return []

    articles: list[ArticleSummary] = []
    for item in parsed:
        if isinstance(item, dict):
            articles.append(_parse_article(item))
        else:
            logger.warning("Skipping non-object search result: %r", item)
    return articles


def decode_article(text: str) -> ArticleSummary | None:
    """Decode a URL extraction response into a single article, or None."""
    parsed = decode_json(text)
    if not isinstance(parsed, dict):
        return None
    return _parse_article(parsed)


def _parse_citation(raw: object) -> Citation | None:
    if not isinstance(raw, dict):
        return None
    return Citation(source=_str(raw, "source"), quote=_str(raw, "quote"))


def _parse_original(raw: object) -> OriginalArticle | None:
    if not isinstance(raw, dict):
        return None
    return OriginalArticle(
        title=_str(raw, "title"),
        url=_str(raw, "url"),
        snippet=_str(raw, "snippet"),
    )


def _parse_evaluation(raw: object) -> Evaluation | None:
    if not isinstance(raw, dict):
        return None
    score = raw.get("score")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        try:
            score = float(str(score))
        except ValueError:
            logger.warning("Dropping evaluation with non-numeric score: %r", score)
            return None
    score = float(score)
    if not math.isfinite(score):
        logger.warning("Dropping evaluation with non-finite score: %r", score)
        return None
    score = max(MIN_SCORE, min(MAX_SCORE, score))
    return Evaluation(summary=_str(raw, "summary"), score=score)


def decode_analysis(text: str) -> AnalysisResult | None:
    """Decode an analysis response into an AnalysisResult, or None.

    Stages after a missing one are discarded, so a result never carries an
    evaluation without an original article or an original article without a
    citation.
    """
    parsed = decode_json(text)
    if not isinstance(parsed, dict):
        return None

    citation = _parse_citation(parsed.get("citation"))
    original = _parse_original(parsed.get("originalArticle")) if citation else None
    evaluation = _parse_evaluation(parsed.get("evaluation")) if original else None
    return AnalysisResult(citation=citation, original_article=original, evaluation=evaluation)
