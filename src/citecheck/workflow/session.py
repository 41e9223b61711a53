"""Session controller behind the search form, article list and analysis panel."""

import logging

from citecheck.credentials import CredentialSelector
from citecheck.data import AnalysisResult, ArticleSummary, QueryParams, WorkflowState
from citecheck.decoder import decode_analysis, decode_article, decode_article_list
from citecheck.errors import is_permission_error
from citecheck.gateway.base import ANALYSIS_MODEL, FAST_MODEL, Gateway
from citecheck.prompts import build_analysis_prompt, build_extraction_prompt, build_search_prompt

logger = logging.getLogger(__name__)

SEARCH_FAILED = "기사 검색에 실패했습니다. API 키와 네트워크 연결을 확인해주세요."
ANALYSIS_FAILED = "기사 분석 중 오류가 발생했습니다. 잠시 후 다시 시도해주세요."
URL_FAILED = "URL 분석 중 오류가 발생했습니다. API 키와 네트워크 연결을 확인해주세요."
EXTRACTION_FAILED = (
    "URL에서 기사 내용을 추출할 수 없습니다. 삭제되었거나 유료 기사이거나,"
    " 기술적인 이유로 접근할 수 없는 기사일 수 있습니다."
)
PERMISSION_DENIED = (
    "선택한 API 키에 웹 검색을 사용할 권한이 없습니다. 다른 키를 선택한 뒤 다시 시도해주세요."
)


class CitationCheckSession:
    """Runs the search, select-and-analyze and URL workflows against shared state.

    Each operation owns one busy flag in ``state.loading`` and always clears it
    when done. Operations may overlap; there is no locking, so when two of them
    write the selection or analysis slots the last one to finish wins.

    Failures never propagate out of an operation. They are logged and turned
    into ``state.error``. A rejected credential additionally clears
    ``state.credential_selected`` so the caller can ask for another key.

    Args:
        gateway: LLM gateway used for every call.
        credentials: Key selector consulted by the credential operations.
        params: Initial form values (defaults to ``QueryParams.default()``).
    """

    def __init__(
        self,
        gateway: Gateway,
        credentials: CredentialSelector,
        *,
        params: QueryParams | None = None,
    ) -> None:
        self._gateway = gateway
        self._credentials = credentials
        self.state = WorkflowState(params=params or QueryParams.default())

    async def check_credential(self) -> bool:
        """Refresh ``state.credential_selected`` from the key selector."""
        self.state.credential_selected = await self._credentials.has_selected_credential()
        return self.state.credential_selected

    async def select_credential(self) -> None:
        """Let the user pick a key, then clear any stale error."""
        await self._credentials.open_selector()
        self.state.credential_selected = True
        self.state.error = None

    async def search(self) -> None:
        """Search for articles with the current form values."""
        state = self.state
        state.loading.search = True
        state.error = None
        state.articles = []
        state.selected = None
        state.analysis = None
        state.search_attempted = True
        try:
            prompt = build_search_prompt(state.params)
            text = await self._gateway.invoke(FAST_MODEL, prompt, search=True)
            state.articles = decode_article_list(text)
            logger.info(
                "Search for %r returned %d articles", state.params.keywords, len(state.articles)
            )
        except Exception as e:
            self._handle_error(e, SEARCH_FAILED)
        finally:
            state.loading.search = False

    async def select_article(self, article: ArticleSummary) -> None:
        """Select ``article`` and run the citation analysis on it.

        Re-selecting the current article (same URL) does nothing.
        """
        state = self.state
        if state.selected is not None and state.selected.url == article.url:
            return

        state.selected = article
        state.loading.analysis = True
        state.error = None
        state.analysis = None
        try:
            state.analysis = await self._analyze(article)
        except Exception as e:
            self._handle_error(e, ANALYSIS_FAILED)
        finally:
            state.loading.analysis = False

    async def analyze_url(self) -> None:
        """Extract the article at ``params.article_url`` and analyze it."""
        state = self.state
        url = state.params.article_url.strip()
        if not url:
            return

        state.loading.url = True
        state.error = None
        state.selected = None
        state.analysis = None
        try:
            text = await self._gateway.invoke(FAST_MODEL, build_extraction_prompt(url), search=True)
            article = decode_article(text)
            if article is None:
                logger.info("Could not extract an article from %s", url)
                state.error = EXTRACTION_FAILED
                return

            state.selected = article
            state.analysis = await self._analyze(article)
        except Exception as e:
            self._handle_error(e, URL_FAILED)
            state.selected = None
            state.analysis = None
        finally:
            state.loading.url = False

    async def _analyze(self, article: ArticleSummary) -> AnalysisResult | None:
        prompt = build_analysis_prompt(article)
        text = await self._gateway.invoke(ANALYSIS_MODEL, prompt, search=True)
        result = decode_analysis(text)
        if result is None:
            logger.warning("Analysis of %r returned no usable result", article.title)
        return result

    def _handle_error(self, exc: Exception, default_message: str) -> None:
        logger.exception("Operation failed: %s", exc)
        if is_permission_error(exc):
            self.state.error = PERMISSION_DENIED
            self.state.credential_selected = False
        else:
            self.state.error = default_message
