"""
Response Transport
Destination of emitted header lines and body text
"""
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from sanic.response import HTTPResponse, raw

from sanicview.exceptions import AlreadyEmittedError

_STATUS_LINE = re.compile(r'^HTTP/\d(?:\.\d)?\s+(\d{3})\b')


class Transport(ABC):
    """Anything a ResponseComposer can emit into"""

    @abstractmethod
    def send_header(self, line: str):
        """Send one header line; raises AlreadyEmittedError once headers are sent"""

    @abstractmethod
    def write(self, data: str):
        """Send body text"""

    @abstractmethod
    def headers_sent(self) -> bool:
        """True once the body has started and headers can no longer change"""


class BufferedTransport(Transport):
    """
    In-memory transport that becomes a Sanic response

    Headers are considered sent as soon as the first body text is written.

    Example:
        transport = BufferedTransport()
        transport.send_header('Content-Type: text/plain')
        transport.write('hello')
        return transport.to_response()
    """

    def __init__(self):
        self.header_lines: List[str] = []
        self.chunks: List[str] = []
        self._headers_sent = False

    def send_header(self, line: str):
        if self._headers_sent:
            raise AlreadyEmittedError(f"Cannot send header '{line}', headers already sent")
        self.header_lines.append(line)

    def write(self, data: str):
        self._headers_sent = True
        self.chunks.append(data)

    def headers_sent(self) -> bool:
        return self._headers_sent

    @property
    def body(self) -> str:
        return ''.join(self.chunks)

    def parsed_headers(self) -> Tuple[int, List[Tuple[str, str]]]:
        """
        Split header lines into a status code and (name, value) pairs

        'HTTP/1.1 404 Not Found' style lines set the status; lines without a
        colon are otherwise ignored.
        """
        status = 200
        pairs: List[Tuple[str, str]] = []
        for line in self.header_lines:
            status_match = _STATUS_LINE.match(line)
            if status_match:
                status = int(status_match.group(1))
                continue
            if ':' not in line:
                continue
            name, value = line.split(':', 1)
            pairs.append((name.strip(), value.strip()))
        return status, pairs

    def to_response(self, status: Optional[int] = None) -> HTTPResponse:
        """
        Build the Sanic response for everything written so far

        The last Content-Type header wins; other repeated headers are kept.
        """
        from sanicview.defaults import DEFAULT_CONTENT_TYPE

        parsed_status, pairs = self.parsed_headers()
        content_type = DEFAULT_CONTENT_TYPE
        headers: List[Tuple[str, str]] = []
        for name, value in pairs:
            if name.lower() == 'content-type':
                content_type = value
            else:
                headers.append((name, value))

        response = raw(
            self.body.encode('utf-8'),
            status=status or parsed_status,
            content_type=content_type,
        )
        for name, value in headers:
            response.headers.add(name, value)
        return response
