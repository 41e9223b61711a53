from citecheck.workflow.session import (
    ANALYSIS_FAILED,
    EXTRACTION_FAILED,
    PERMISSION_DENIED,
    SEARCH_FAILED,
    URL_FAILED,
    CitationCheckSession,
)

__all__ = [
    "ANALYSIS_FAILED",
    "EXTRACTION_FAILED",
    "PERMISSION_DENIED",
    "SEARCH_FAILED",
    "URL_FAILED",
    "CitationCheckSession",
]
