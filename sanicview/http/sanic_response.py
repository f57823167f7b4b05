"""
Sanic Response Bridge
Turns a flushed composer into a Sanic HTTPResponse
"""
import asyncio
from typing import Optional

from sanic.response import HTTPResponse

from sanicview.http.response import ResponseComposer
from sanicview.http.transport import BufferedTransport


async def respond(composer: ResponseComposer, status: Optional[int] = None) -> HTTPResponse:
    """
    Flush the composer and return its buffered output as a Sanic response

    Template rendering runs in a worker thread to avoid blocking the event loop.

    Example:
        @app.get('/users/<user_id:int>', name='users.show')
        async def show(request, user_id):
            request.ctx.response.set('user', await User.get(id=user_id))
            return await respond(request.ctx.response)
    """
    if not isinstance(composer.transport, BufferedTransport):
        raise TypeError("respond() requires a composer writing to a BufferedTransport")

    await asyncio.to_thread(composer.flush)
    return composer.transport.to_response(status)
