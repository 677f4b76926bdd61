"""Custom exception classes for the summarizer."""


class GptcError(Exception):
    """Base exception for summarizer errors."""
    pass


class ConfigurationError(GptcError):
    """Raised when environment configuration is invalid."""
    pass


class CredentialError(GptcError):
    """Raised when the API token file is missing, unreadable or empty."""
    pass


class InputFileError(GptcError):
    """Raised when the input document cannot be read."""
    pass


class DegenerateRatioError(GptcError, ValueError):
    """Raised when a compression ratio would ask the model for zero words."""
    pass


class CompletionError(GptcError):
    """Raised when the completion service fails a request."""
    pass


class AuthError(CompletionError):
    """Raised when the completion service rejects the credential."""
    pass


class TransportError(CompletionError):
    """Raised on network or timeout failures talking to the completion service."""
    pass
