"""
Custom Exception Classes
Response composition exceptions with HTTP status codes
"""
from typing import Optional


class FrameworkException(Exception):
    """Base exception for all framework exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class AlreadyEmittedError(FrameworkException):
    """
    Headers already sent exception

    Raised when a header is set after the transport started sending the response

    Example:
        raise AlreadyEmittedError("Cannot set header 'X-Id', headers already sent")
    """
    message = "Headers already sent"


class TemplateNotFoundError(FrameworkException):
    """
    Template not found exception

    Raised when an explicit or derived template does not exist or cannot be read

    Example:
        raise TemplateNotFoundError("users/show")
    """
    message = "Template does not exist or cannot be read"

    def __init__(self, template: str, message: Optional[str] = None):
        self.template = template
        super().__init__(
            message or f"Template '{template}' does not exist or cannot be read"
        )


class InvalidHelperError(FrameworkException):
    """
    Invalid helper exception

    Raised at registration time when the helper is neither a Helper nor a callable
    """
    message = "No callable or Helper given"
