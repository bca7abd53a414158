from .errors import ByteRangeError, ConfigurationError, RangeNotSatisfiableError
from .range import ByteRange, parse_range_header


__all__ = [
    'ByteRange',
    'ByteRangeError',
    'ConfigurationError',
    'RangeNotSatisfiableError',
    'parse_range_header',
]
