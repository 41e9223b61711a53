"""Tests for prompt builders."""

from citecheck.data import ArticleSummary, QueryParams
from citecheck.prompts import (
    CITATION_CLAUSE,
    SEARCH_FORMAT_CLAUSE,
    build_analysis_prompt,
    build_extraction_prompt,
    build_search_prompt,
)


def _params(**overrides: object) -> QueryParams:
    values: dict[str, object] = {
        "keywords": "AI 반도체",
        "start_date": "2024-05-01",
        "end_date": "2024-05-08",
        "publisher": "",
        "must_cite": False,
    }
    values.update(overrides)
    return QueryParams(**values)  # type: ignore[arg-type]


def test_search_prompt_embeds_keywords_and_dates() -> None:
    prompt = build_search_prompt(_params())
    assert '"AI 반도체"' in prompt
    assert "2024-05-01" in prompt
    assert "2024-05-08" in prompt


def test_search_prompt_without_filters_omits_clauses() -> None:
    prompt = build_search_prompt(_params())
    assert "언론사는" not in prompt
    assert CITATION_CLAUSE not in prompt


def test_search_prompt_with_filters_includes_clauses() -> None:
    prompt = build_search_prompt(_params(publisher="연합뉴스", must_cite=True))
    assert '언론사는 "연합뉴스"' in prompt
    assert CITATION_CLAUSE in prompt


def test_search_prompt_blank_publisher_is_omitted() -> None:
    prompt = build_search_prompt(_params(publisher="   "))
    assert "언론사는" not in prompt


def test_search_prompt_always_ends_with_format_clause() -> None:
    for params in (_params(), _params(publisher="조선일보", must_cite=True)):
        prompt = build_search_prompt(params)
        assert prompt.endswith(SEARCH_FORMAT_CLAUSE)
        for key in ("title", "summary", "publisher", "url", "publishedDate"):
            assert f'"{key}"' in prompt


def test_extraction_prompt_embeds_url_and_contract() -> None:
    url = "https://www.yna.co.kr/view/AKR20240501"
    prompt = build_extraction_prompt(url)
    assert prompt.count(url) >= 3
    assert "Title-based fallback" in prompt
    assert "```json\nnull\n```" in prompt
    for key in ("title", "publisher", "summary", "url", "publishedDate"):
        assert f'"{key}"' in prompt


def test_analysis_prompt_embeds_article() -> None:
    article = ArticleSummary(
        title="삼성전자, HBM 공급 확대",
        summary="로이터에 따르면...",
        url="https://www.yna.co.kr/view/1",
        publisher="연합뉴스",
    )
    prompt = build_analysis_prompt(article)
    assert "- Title: 삼성전자, HBM 공급 확대" in prompt
    assert "- Content summary: 로이터에 따르면..." in prompt
    assert "- URL: https://www.yna.co.kr/view/1" in prompt
    assert '"citation"' in prompt
    assert '"originalArticle"' in prompt
    assert '"evaluation"' in prompt
    assert "Attempt 3" in prompt


def test_analysis_prompt_omits_empty_url() -> None:
    prompt = build_analysis_prompt(ArticleSummary(title="제목", summary="요약"))
    assert "- URL:" not in prompt
    assert "- Publisher:" not in prompt


def test_analysis_prompt_tolerates_braces_in_article() -> None:
    prompt = build_analysis_prompt(ArticleSummary(title="{weird}", summary="{0}"))
    assert "{weird}" in prompt
