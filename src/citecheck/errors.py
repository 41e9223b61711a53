"""Exception types raised by the gateway and classified by the workflow."""

PERMISSION_MARKERS = ("PERMISSION_DENIED", "API key not valid")


class CiteCheckError(Exception):
    """Base class for citecheck errors."""


class ConfigurationError(CiteCheckError):
    """No API credential is available."""


class CredentialPermissionError(CiteCheckError):
    """The provider rejected the credential or its permissions.

    The user has to pick another key; retrying with the same one won't help.
    """


class GatewayError(CiteCheckError):
    """Any other failure of the upstream call."""


def is_permission_error(exc: BaseException) -> bool:
    """Return True if ``exc`` calls for re-selecting the credential."""
    if isinstance(exc, CredentialPermissionError):
        return True
    message = str(exc)
    return any(marker in message for marker in PERMISSION_MARKERS)
