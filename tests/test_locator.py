import io

import pytest

from riffwave.errors import DataChunkNotFoundError
from riffwave.locator import find_data_marker, DataMarkerScanner, scan_stream


def test_find_data_marker(make_wave):
    assert find_data_marker(make_wave(b'\x00\x00')) == 36

def test_find_data_marker_missing():
    assert find_data_marker(b'RIFF\x00\x00\x00\x00WAVEfmt ') == -1

def test_find_data_marker_first_occurrence():
    assert find_data_marker(b'xxdataxxdata') == 2

def test_scanner_states():
    scanner = DataMarkerScanner()
    results = [scanner.feed(b) for b in b'xdat']
    assert results == [False, False, False, False]
    assert scanner.state == DataMarkerScanner.SCANNING

    assert scanner.feed(ord('a'))
    assert scanner.state == DataMarkerScanner.FOUND
    assert scanner.consumed == 5

    # Nothing more is consumed once the marker has been found
    assert scanner.feed(ord('x'))
    assert scanner.consumed == 5

def test_scanner_partial_match_restarts():
    scanner = DataMarkerScanner()
    for b in b'dadata':
        found = scanner.feed(b)

    assert found
    assert scanner.consumed == 6

def test_scan_stream_leaves_position_after_marker():
    stream = io.BytesIO(b'RIFFjunkdata1234rest')
    assert scan_stream(stream) == 12
    assert stream.read() == b'1234rest'

def test_scan_stream_not_found():
    with pytest.raises(DataChunkNotFoundError):
        scan_stream(io.BytesIO(b'RIFF\x00\x00\x00\x00WAVEfmt dat'))

def test_scan_stream_reads_one_byte_at_a_time():
    sizes = []

    class RecordingStream(io.BytesIO):
        def read(self, size=-1):
            sizes.append(size)
            return super(RecordingStream, self).read(size)

    scan_stream(RecordingStream(b'abcdata'))
    assert sizes == [1] * 7
