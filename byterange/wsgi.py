import time
from http import HTTPStatus
from typing import Optional

from .http import PartialContentSettings, build_response
from .log import log_request_builder


class PartialContentApp:
    """WSGI application serving an in-memory buffer with byte range support."""

    def __init__(self, data: bytes, settings: Optional[PartialContentSettings] = None):
        self.data = data
        self.settings = settings or PartialContentSettings()
        self.log_request = log_request_builder(self.settings.log_access_format) if self.settings.log_access else None

    def __call__(self, environ, start_response):
        rtime = time.time()
        range_header = environ.get('HTTP_RANGE')
        method = environ['REQUEST_METHOD']
        status, headers, body = build_response(self.data, method, range_header, self.settings)

        start_response(f'{status} {HTTPStatus(status).phrase}', headers)
        if self.log_request:
            self.log_request(rtime, method, environ.get('PATH_INFO', '/'), status, range_header)
        return [body]
