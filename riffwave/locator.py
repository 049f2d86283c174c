import logging
from collections import deque

from riffwave.errors import DataChunkNotFoundError
from riffwave.header import DATA_MARKER

logger = logging.getLogger(__name__)


def find_data_marker(data):
    """
    Find the first occurrence of the 'data' marker in a buffer.

    This is a plain substring search, not a walk over chunk sizes, so an
    incidental 'data' sequence earlier in the buffer (e.g. inside another
    chunk) will be matched first.

    :param bytes data: Complete file contents
    :return: Byte offset of the marker, or -1 if it is not present
    :rtype: int
    """
    return data.find(DATA_MARKER)


class DataMarkerScanner(object):
    """
    Byte-at-a-time search for the 'data' marker. Only the last len(marker)
    bytes are kept; everything else fed in is counted and dropped.

    :ivar int state: SCANNING until the marker has been seen, then FOUND
    :ivar int consumed: Number of bytes fed in so far
    """
    SCANNING = 0
    FOUND = 1

    def __init__(self, marker=DATA_MARKER):
        self.marker = marker
        self.window = deque(maxlen=len(marker))
        self.consumed = 0
        self.state = self.SCANNING

    def feed(self, byte):
        """
        Consume a single byte.

        :param int byte: Byte value, 0-255
        :return: True if the marker has now been fully read
        :rtype: bool
        """
        if self.state == self.FOUND:
            return True

        self.window.append(byte)
        self.consumed += 1

        if bytes(self.window) == self.marker:
            self.state = self.FOUND

        return self.state == self.FOUND

    def __str__(self):
        state = "FOUND" if self.state == self.FOUND else "SCANNING"
        return "%s(state=%s, consumed=%d)" % (self.__class__.__name__,
                                               state, self.consumed)

    def __repr__(self):
        return self.__str__()


def scan_stream(stream):
    """
    Read from a stream one byte at a time until the 'data' marker has been
    read. The bytes read are discarded; the stream is left positioned just
    after the marker.

    :param stream: Readable binary stream
    :return: Number of bytes consumed, i.e. the offset of the end of the marker
    :rtype: int
    """
    scanner = DataMarkerScanner()

    while True:
        byte = stream.read(1)
        if not byte:
            raise DataChunkNotFoundError("'data' marker not found after reading "
                                         "%d bytes from stream" % scanner.consumed)

        if scanner.feed(byte[0]):
            break

    logger.debug("found 'data' marker in stream after %d bytes", scanner.consumed)
    return scanner.consumed
