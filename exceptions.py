class ConfigError(RuntimeError):
    """Raised when the application configuration cannot be loaded"""


class MatchAnalysisError(RuntimeError):
    """Base class for every failure surfaced to the user as an error message"""


class InputValidationError(MatchAnalysisError):
    """Raised when the resume or job description is empty"""


class MissingCredentialError(MatchAnalysisError):
    """Raised when no API key is configured"""


class TransportError(MatchAnalysisError):
    """Raised when the API answers with a non-success status or cannot be reached.

    ``status_code`` is None when no HTTP response was received at all.
    """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ProtocolError(MatchAnalysisError):
    """Raised when a successful response does not carry a usable candidate"""


class DecodeError(MatchAnalysisError):
    """Raised when the candidate text is not JSON or does not fit the result schema"""
