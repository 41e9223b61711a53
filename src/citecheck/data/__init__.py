"""Data models for citecheck."""

from citecheck.data.models import (
    DEFAULT_KEYWORDS,
    DEFAULT_LOOKBACK_DAYS,
    AnalysisResult,
    APICallUsage,
    ArticleSummary,
    Citation,
    Evaluation,
    LoadingState,
    OriginalArticle,
    QueryParams,
    Usage,
    WorkflowState,
)

__all__ = [
    "DEFAULT_KEYWORDS",
    "DEFAULT_LOOKBACK_DAYS",
    "APICallUsage",
    "AnalysisResult",
    "ArticleSummary",
    "Citation",
    "Evaluation",
    "LoadingState",
    "OriginalArticle",
    "QueryParams",
    "Usage",
    "WorkflowState",
]
