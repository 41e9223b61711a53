"""citecheck: verify how Korean news articles cite foreign press."""

from citecheck.config import CiteCheckConfig, create_from_config, load_config
from citecheck.credentials import CredentialSelector, KeyStore
from citecheck.data import (
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
from citecheck.decoder import decode_analysis, decode_article, decode_article_list, decode_json
from citecheck.errors import (
    CiteCheckError,
    ConfigurationError,
    CredentialPermissionError,
    GatewayError,
)
from citecheck.gateway import ANALYSIS_MODEL, FAST_MODEL, ClaudeGateway, Gateway
from citecheck.prompts import build_analysis_prompt, build_extraction_prompt, build_search_prompt
from citecheck.workflow import CitationCheckSession

__all__ = [
    # Models
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
    # Decoding
    "decode_analysis",
    "decode_article",
    "decode_article_list",
    "decode_json",
    # Prompts
    "build_analysis_prompt",
    "build_extraction_prompt",
    "build_search_prompt",
    # Gateway
    "ANALYSIS_MODEL",
    "FAST_MODEL",
    "ClaudeGateway",
    "Gateway",
    # Credentials
    "CredentialSelector",
    "KeyStore",
    # Errors
    "CiteCheckError",
    "ConfigurationError",
    "CredentialPermissionError",
    "GatewayError",
    # Workflow
    "CitationCheckSession",
    # Config
    "CiteCheckConfig",
    "create_from_config",
    "load_config",
]
