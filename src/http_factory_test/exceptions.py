"""
Custom exceptions for http_factory_test.

This module defines the exception hierarchy raised by the configuration
layer and the reference implementation. Conformance failures are never
reported through these classes; they surface as plain assertion errors.
"""

from typing import Optional


class HTTPFactoryError(Exception):
    """Base exception for all http_factory_test errors."""
    
    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(HTTPFactoryError):
    """Raised when a factory under test cannot be located or built."""
    
    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Configuration error: {message}", cause)


class InvalidArgumentError(HTTPFactoryError, ValueError):
    """Raised when a factory receives an argument it cannot accept."""
    
    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Invalid argument: {message}", cause)


class StreamError(HTTPFactoryError):
    """Raised when there's an error with stream operations."""
    
    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Stream error: {message}", cause)
