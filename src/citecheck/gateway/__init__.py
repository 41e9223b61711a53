from citecheck.gateway.base import ANALYSIS_MODEL, FAST_MODEL, Gateway
from citecheck.gateway.claude import ClaudeGateway

__all__ = ["ANALYSIS_MODEL", "FAST_MODEL", "ClaudeGateway", "Gateway"]
