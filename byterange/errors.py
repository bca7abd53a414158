from typing import Optional


class ByteRangeError(Exception): ...


class ConfigurationError(ByteRangeError): ...


class RangeNotSatisfiableError(ByteRangeError, IndexError):
    def __init__(self, start: int, end: Optional[int], length: int):
        self.start = start
        self.end = end
        self.length = length
        super().__init__(f'range {start}-{"" if end is None else end} not satisfiable for length {length}')
