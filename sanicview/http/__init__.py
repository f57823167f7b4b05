"""
HTTP Package
Response composition and its transports
"""
from sanicview.http.transport import Transport, BufferedTransport
from sanicview.http.request_context import RequestContext
from sanicview.http.output_buffer import OutputBuffer
from sanicview.http.response import ResponseComposer
from sanicview.http.sanic_response import respond

__all__ = [
    'Transport',
    'BufferedTransport',
    'RequestContext',
    'OutputBuffer',
    'ResponseComposer',
    'respond',
]
