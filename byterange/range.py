"""HTTP Range header parsing utilities according to RFC 7233."""

import re
from dataclasses import dataclass, field
from typing import Optional, TypeVar

from .constants import RANGE_PREFIX
from .errors import RangeNotSatisfiableError
from .log import logger


BufferT = TypeVar('BufferT', bytes, bytearray, memoryview)

INT64_MAX = 2**63 - 1
INT64_DIGITS = len(str(INT64_MAX))

_int_re = re.compile(r'\+?[0-9]+', re.ASCII)


def _parse_int(value: str, part: str, raw: str) -> int:
    if not _int_re.fullmatch(value):
        logger.debug('Unable to parse range %s %r in %r, defaulting to 0', part, value, raw)
        return 0
    digits = value.lstrip('+').lstrip('0')
    # saturate like a 64 bit integer parser would, without converting huge strings
    if len(digits) > INT64_DIGITS:
        return INT64_MAX
    return min(INT64_MAX, int(digits or '0'))


@dataclass(frozen=True)
class ByteRange:
    """
    A single `bytes` range as requested by a `Range` header.

    Attributes:
        start: first requested byte offset
        end: inclusive last byte offset, or None for "until the end of the resource"
        raw: the original header value
    """

    start: int = 0
    end: Optional[int] = None
    raw: str = field(default='', compare=False, repr=False)

    @classmethod
    def parse(cls, value: str) -> 'ByteRange':
        return parse_range_header(value)

    def to_header_value(self, file_length: int) -> str:
        """
        Build the `Content-Range` header value for this range.

        Returns an empty string for open-ended ranges: the caller has to
        resolve the actual end before emitting the header.

        Examples:
            >>> ByteRange(0, 499).to_header_value(1000)
            'bytes 0-499/1000'
            >>> ByteRange(500).to_header_value(1000)
            ''
        """
        if self.end is None:
            return ''
        return f'bytes {self.start}-{self.end}/{file_length}'

    def apply(self, data: BufferT) -> BufferT:
        """
        Slice `data` according to this range.

        An explicit end past the buffer is clamped to the buffer length, while
        a start outside of the buffer (or past the clamped end) is not, and
        raises `RangeNotSatisfiableError`.

        The result is a plain slice of `data`: a copy for `bytes` and
        `bytearray`, a view for `memoryview`.
        """
        length = len(data)
        if self.end is None:
            stop = length
        else:
            stop = min(self.end + 1, length)

        if self.start < 0 or self.start > length or self.start > stop:
            raise RangeNotSatisfiableError(self.start, self.end, length)

        return data[self.start : stop]


def parse_range_header(range_header: str) -> ByteRange:
    """
    Parse a single range HTTP Range header value.

    Parsing is permissive and never fails: the `bytes=` prefix is optional,
    an unparsable start defaults to 0 and an unparsable (non-empty) end
    defaults to 0.

    Args:
        range_header: The Range header value (e.g., "bytes=0-499")

    Examples:
        >>> parse_range_header("bytes=0-499")
        ByteRange(start=0, end=499)
        >>> parse_range_header("bytes=500-")
        ByteRange(start=500, end=None)
        >>> parse_range_header("bytes=")
        ByteRange(start=0, end=None)
    """
    spec = range_header[len(RANGE_PREFIX) :] if range_header.startswith(RANGE_PREFIX) else range_header
    parts = spec.split('-')

    start = _parse_int(parts[0], 'start', range_header)
    end = None
    # only the first two fields matter, anything after a second dash is ignored
    if len(parts) > 1 and parts[1]:
        end = _parse_int(parts[1], 'end', range_header)

    return ByteRange(start=start, end=end, raw=range_header)
