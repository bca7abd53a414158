import time
from typing import Optional

from .constants import Headers
from .http import PartialContentSettings, build_response
from .log import log_request_builder, logger


class PartialContentApp:
    """ASGI application serving an in-memory buffer with byte range support."""

    def __init__(self, data: bytes, settings: Optional[PartialContentSettings] = None):
        self.data = data
        self.settings = settings or PartialContentSettings()
        self.log_request = log_request_builder(self.settings.log_access_format) if self.settings.log_access else None

    async def __call__(self, scope, receive, send):
        if scope['type'] == 'lifespan':
            await self.lifespan(receive, send)
            return
        if scope['type'] != 'http':
            logger.error('Unsupported ASGI scope type %r', scope['type'])
            return

        rtime = time.time()
        headers = dict(scope['headers'])
        range_header = headers.get(Headers.range.value.encode('latin1'), b'').decode('latin1') or None
        status, response_headers, body = build_response(self.data, scope['method'], range_header, self.settings)

        await send(
            {
                'type': 'http.response.start',
                'status': status,
                'headers': [(key.encode('latin1'), value.encode('latin1')) for key, value in response_headers],
            }
        )
        await send({'type': 'http.response.body', 'body': body, 'more_body': False})

        if self.log_request:
            self.log_request(rtime, scope['method'], scope['path'], status, range_header)

    async def lifespan(self, receive, send):
        while True:
            message = await receive()
            if message['type'] == 'lifespan.startup':
                await send({'type': 'lifespan.startup.complete'})
            elif message['type'] == 'lifespan.shutdown':
                await send({'type': 'lifespan.shutdown.complete'})
                return
