"""
Middleware Package
"""
from sanicview.middleware.response_middleware import (
    ResponseComposerMiddleware,
    install,
    setup_logging,
)

__all__ = [
    'ResponseComposerMiddleware',
    'install',
    'setup_logging',
]
