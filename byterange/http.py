from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import RANGE_PREFIX, Headers, RangeUnits
from .errors import ConfigurationError, RangeNotSatisfiableError
from .log import DEFAULT_ACCESSLOG_FMT, logger
from .range import ByteRange, parse_range_header


@dataclass
class PartialContentSettings:
    content_type: str = 'application/octet-stream'
    accept_ranges: bool = True
    log_access: bool = False
    log_access_format: str = DEFAULT_ACCESSLOG_FMT

    def __post_init__(self):
        if not self.content_type:
            raise ConfigurationError('content_type')


def requested_range(range_header: Optional[str], settings: PartialContentSettings) -> Optional[ByteRange]:
    """
    Pick the `ByteRange` to serve for a request, if any.

    Requests without a `bytes` range, with multiple ranges, with a suffix
    range or with a start which is not a plain decimal number get the full
    representation.
    """
    if not settings.accept_ranges or not range_header:
        return None
    if not range_header.startswith(RANGE_PREFIX):
        return None
    spec = range_header[len(RANGE_PREFIX) :]
    if ',' in spec or '-' not in spec:
        return None
    start = spec.split('-', 1)[0]
    if not (start.isascii() and start.isdigit()):
        return None
    return parse_range_header(range_header)


def resolve_range(byte_range: ByteRange, length: int) -> ByteRange:
    """
    Resolve a requested range against the resource length.

    Open ends and ends past the resource are set to the last byte, so the
    result always formats to a `Content-Range` value.

    Raises:
        RangeNotSatisfiableError: when the range starts past the resource
            or its end precedes its start.
    """
    last = length - 1
    end = last if byte_range.end is None else min(byte_range.end, last)
    if byte_range.start >= length or byte_range.start > end:
        raise RangeNotSatisfiableError(byte_range.start, byte_range.end, length)
    return ByteRange(start=byte_range.start, end=end, raw=byte_range.raw)


def unsatisfied_range_header(length: int) -> str:
    return f'{RangeUnits.bytes.value} */{length}'


def build_response(
    data: bytes, method: str, range_header: Optional[str], settings: PartialContentSettings
) -> Tuple[int, List[Tuple[str, str]], bytes]:
    """
    Build status, headers and body for a request on the `data` resource.

    Returns `206` with the sliced body for satisfiable ranges, `416` for
    unsatisfiable ones and `200` with the whole buffer otherwise.
    """
    if method not in ('GET', 'HEAD'):
        return 405, [(Headers.allow.value, 'GET, HEAD')], b''

    length = len(data)
    headers = [(Headers.content_type.value, settings.content_type)]
    if settings.accept_ranges:
        headers.append((Headers.accept_ranges.value, RangeUnits.bytes.value))

    byte_range = requested_range(range_header, settings)
    if byte_range is None:
        status, body = 200, data
    else:
        try:
            byte_range = resolve_range(byte_range, length)
        except RangeNotSatisfiableError as exc:
            logger.debug('Rejecting range %r: %s', byte_range.raw, exc)
            return 416, [(Headers.content_range.value, unsatisfied_range_header(length))], b''
        status, body = 206, byte_range.apply(data)
        headers.append((Headers.content_range.value, byte_range.to_header_value(length)))

    headers.append((Headers.content_length.value, str(len(body))))
    if method == 'HEAD':
        body = b''
    return status, headers, body
