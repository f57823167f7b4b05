"""
sanicview
Response composition for Sanic: buffered headers and output, template
selection and template helpers
"""
from sanicview.http import (
    BufferedTransport,
    RequestContext,
    ResponseComposer,
    Transport,
    respond,
)
from sanicview.view.helpers import Helper, HelperResult, default_helpers

__all__ = [
    'BufferedTransport',
    'RequestContext',
    'ResponseComposer',
    'Transport',
    'respond',
    'Helper',
    'HelperResult',
    'default_helpers',
]
