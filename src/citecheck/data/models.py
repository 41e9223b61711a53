"""Core data models for citecheck."""

from dataclasses import dataclass, field
from datetime import date, timedelta

DEFAULT_KEYWORDS = "AI 반도체"
DEFAULT_LOOKBACK_DAYS = 7


@dataclass(frozen=True)
class ArticleSummary:
    """A Korean news article returned by search or URL extraction.

    ``url`` is the identity key. It may be empty when the model could not
    recover one, in which case list position identifies the article.
    """

    title: str
    summary: str
    url: str = ""
    publisher: str = ""
    published_date: str | None = None


@dataclass(frozen=True)
class Citation:
    """A foreign-press citation found inside a Korean article."""

    source: str
    quote: str


@dataclass(frozen=True)
class OriginalArticle:
    """The English-language article a citation appears to come from."""

    title: str
    url: str
    snippet: str


@dataclass(frozen=True)
class Evaluation:
    """Fidelity judgment of a citation against its original source."""

    summary: str
    score: float

    @property
    def rating(self) -> str:
        """Coarse band for the score: ``high``, ``medium`` or ``low``."""
        if self.score >= 4:
            return "high"
        if self.score >= 2:
            return "medium"
        return "low"


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of a citation check.

    Each stage is only meaningful when the previous one succeeded:
    ``original_article`` needs a ``citation`` and ``evaluation`` needs an
    ``original_article``.
    """

    citation: Citation | None = None
    original_article: OriginalArticle | None = None
    evaluation: Evaluation | None = None


@dataclass(frozen=True)
class APICallUsage:
    """Usage from a single API call."""

    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    web_searches: int = 0


@dataclass
class Usage:
    """Accumulated API usage across a session."""

    api_calls: list[APICallUsage] = field(default_factory=list)

    @property
    def input_tokens(self) -> int:
        return sum(c.input_tokens for c in self.api_calls)

    @property
    def output_tokens(self) -> int:
        return sum(c.output_tokens for c in self.api_calls)

    @property
    def web_searches(self) -> int:
        return sum(c.web_searches for c in self.api_calls)

    def __add__(self, other: "Usage") -> "Usage":
        return Usage(api_calls=self.api_calls + other.api_calls)

    def __iadd__(self, other: "Usage") -> "Usage":
        self.api_calls.extend(other.api_calls)
        return self


@dataclass
class QueryParams:
    """User-editable search form values."""

    keywords: str
    start_date: str
    end_date: str
    publisher: str = ""
    must_cite: bool = False
    article_url: str = ""

    @classmethod
    def default(
        cls,
        today: date | None = None,
        *,
        keywords: str = DEFAULT_KEYWORDS,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
    ) -> "QueryParams":
        """Build the session defaults: a fixed keyword and a trailing window.

        Args:
            today: Reference date (defaults to the current local date).
            keywords: Initial search keywords.
            lookback_days: Width of the date window ending today.
        """
        end = today or date.today()
        start = end - timedelta(days=lookback_days)
        return cls(keywords=keywords, start_date=start.isoformat(), end_date=end.isoformat())


@dataclass
class LoadingState:
    """Independent busy flags for the three operations."""

    search: bool = False
    analysis: bool = False
    url: bool = False


@dataclass
class WorkflowState:
    """Session state owned by the workflow orchestrator."""

    params: QueryParams
    articles: list[ArticleSummary] = field(default_factory=list)
    selected: ArticleSummary | None = None
    analysis: AnalysisResult | None = None
    loading: LoadingState = field(default_factory=LoadingState)
    error: str | None = None
    search_attempted: bool = False
    credential_selected: bool = False

    @property
    def is_analyzing(self) -> bool:
        """True while an analysis runs, either directly or via a URL."""
        return self.loading.analysis or self.loading.url

    @property
    def selected_url(self) -> str | None:
        return self.selected.url if self.selected is not None else None
