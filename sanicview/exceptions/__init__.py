"""
Exceptions Package
"""
from sanicview.exceptions.custom import (
    FrameworkException,
    AlreadyEmittedError,
    TemplateNotFoundError,
    InvalidHelperError,
)

__all__ = [
    'FrameworkException',
    'AlreadyEmittedError',
    'TemplateNotFoundError',
    'InvalidHelperError',
]
