from enum import Enum


class StrEnum(str, Enum):
    def __str__(self) -> str:
        return str(self.value)


class RangeUnits(StrEnum):
    bytes = 'bytes'


class Headers(StrEnum):
    accept_ranges = 'accept-ranges'
    allow = 'allow'
    content_length = 'content-length'
    content_range = 'content-range'
    content_type = 'content-type'
    range = 'range'


RANGE_PREFIX = RangeUnits.bytes.value + '='
