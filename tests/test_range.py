import pytest

from byterange import ByteRange, RangeNotSatisfiableError, parse_range_header


class TestHeaderValue:
    def test_closed_range(self):
        assert ByteRange(0, 499).to_header_value(1000) == 'bytes 0-499/1000'
        assert ByteRange(990, 999).to_header_value(1000) == 'bytes 990-999/1000'

    def test_open_range(self):
        assert ByteRange(0, None).to_header_value(1000) == ''
        assert parse_range_header('bytes=500-').to_header_value(1000) == ''

    def test_no_validation(self):
        assert ByteRange(10, 0).to_header_value(5) == 'bytes 10-0/5'
        assert ByteRange(0, 5000).to_header_value(1000) == 'bytes 0-5000/1000'


class TestApply:
    def test_closed_range(self, data):
        assert ByteRange(0, 499).apply(data) == data[0:500]

    def test_end_clamped(self, data):
        result = ByteRange(990, 999).apply(data)
        assert result == data[990:1000]
        assert len(result) == 10

        assert ByteRange(990, 5000).apply(data) == data[990:]

    def test_int64_max_end(self, data):
        byte_range = parse_range_header('bytes=10-9223372036854775807')
        assert byte_range.apply(data) == data[10:]
        assert byte_range.to_header_value(len(data)) == 'bytes 10-9223372036854775807/1000'

    def test_open_range(self, data):
        assert ByteRange(500, None).apply(data) == data[500:1000]
        assert ByteRange(0, None).apply(data) == data

    def test_start_at_length(self, data):
        assert ByteRange(1000, None).apply(data) == b''
        assert ByteRange(1000, 1200).apply(data) == b''

    def test_start_out_of_bounds(self, data):
        with pytest.raises(RangeNotSatisfiableError) as exc:
            ByteRange(len(data) + 10, None).apply(data)
        assert exc.value.start == 1010
        assert exc.value.end is None
        assert exc.value.length == 1000

        with pytest.raises(IndexError):
            ByteRange(len(data) + 10, len(data) + 20).apply(data)

    def test_negative_start(self, data):
        with pytest.raises(RangeNotSatisfiableError):
            ByteRange(-1, None).apply(data)

    def test_inverted_range(self, data):
        with pytest.raises(RangeNotSatisfiableError):
            ByteRange(500, 10).apply(data)

    def test_unparsable_end(self, data):
        """A non-numeric end parses to 0, so any positive start gives an inverted range."""
        byte_range = parse_range_header('bytes=10-abc')
        assert byte_range.to_header_value(len(data)) == 'bytes 10-0/1000'
        with pytest.raises(RangeNotSatisfiableError):
            byte_range.apply(data)

        assert parse_range_header('bytes=0-abc').apply(data) == data[:1]

    def test_buffer_types(self, data):
        assert ByteRange(1, 3).apply(bytearray(data)) == bytearray(data[1:4])

        view = memoryview(data)
        result = ByteRange(1, 3).apply(view)
        assert isinstance(result, memoryview)
        assert result.tobytes() == data[1:4]

    def test_empty_buffer(self):
        assert ByteRange(0, None).apply(b'') == b''
        assert ByteRange(0, 10).apply(b'') == b''
        with pytest.raises(RangeNotSatisfiableError):
            ByteRange(1, None).apply(b'')

    @pytest.mark.parametrize(
        ('start', 'end'),
        ((0, 0), (0, 999), (1, 1), (250, 749), (998, 999), (999, 999)),
    )
    def test_length_matches_range(self, data, start, end):
        result = parse_range_header(f'bytes={start}-{end}').apply(data)
        assert len(result) == end - start + 1
        assert result == data[start : end + 1]
