from __future__ import annotations


class ForgeMCPError(Exception):
    """Base error for the forge bridge server."""


class ValidationError(ForgeMCPError):
    """Raised when user input is invalid."""


class ConfigurationError(ForgeMCPError):
    """Raised when the resolved configuration cannot satisfy a request."""


class RemoteAPIError(ForgeMCPError):
    """Raised when the forge API answers with an error payload."""


class ExternalServiceError(ForgeMCPError):
    """Raised when the forge API cannot be reached or returns garbage."""
