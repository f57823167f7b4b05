"""
Output Buffer
Deferred or immediate forwarding of header lines and body text
"""
from typing import List

from sanicview.http.transport import Transport
from sanicview.logging import getLogger

logger = getLogger(__name__)


class OutputBuffer:
    """
    Holds header lines and body text until flushed when deferred,
    forwards them straight to the transport otherwise

    Once flushed, a deferred buffer forwards like an immediate one, so
    output produced after emission still reaches the transport.
    """

    def __init__(self, transport: Transport, deferred: bool):
        self.transport = transport
        self._deferred = bool(deferred)
        self._flushed = False
        self.headers: List[str] = []
        self._body: List[str] = []

    @property
    def deferred(self) -> bool:
        return self._deferred

    @property
    def queueing(self) -> bool:
        """True while header lines and body text are being held back"""
        return self._deferred and not self._flushed

    @property
    def body(self) -> str:
        return ''.join(self._body)

    @body.setter
    def body(self, value: str):
        self._body = [value] if value else []

    def header(self, line: str):
        if self.queueing:
            logger.debug("Header queued: %s", line)
            self.headers.append(line)
            return

        if self._flushed:
            logger.debug("Header set after flush, sending directly: %s", line)
        else:
            logger.debug("Header sent: %s", line)
        self.transport.send_header(line)

    def write(self, text: str):
        if self.queueing:
            self._body.append(text)
            return

        if self._flushed:
            logger.debug("Output written after flush, sending directly")
        self.transport.write(text)

    def flush(self):
        """Send queued headers in order, then the queued body"""
        headers, body = self.headers, self.body
        self.headers, self._body = [], []
        self._flushed = True

        for line in headers:
            self.transport.send_header(line)
        if body:
            self.transport.write(body)
