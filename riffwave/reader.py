import logging
from array import array

from riffwave.codec import bytes_to_int16
from riffwave.errors import (InvalidReaderError, DataChunkNotFoundError,
                             WaveFormatError, MisalignedReadError)
from riffwave.header import parse_header, check_layout, DATA_CHUNK_HEADER_SIZE
from riffwave.locator import find_data_marker, scan_stream

logger = logging.getLogger(__name__)

SUPPORTED_BITS_PER_SAMPLE = (8, 16)


def decode_frame(data, index, header):
    """
    Decode a single frame of interleaved samples.

    8-bit samples are unsigned, 16-bit samples are signed little-endian. For
    any other bit depth the frame is returned filled with zeros.

    :param bytes data: Sample payload, starting at the first frame
    :param int index: Index of the frame to decode
    :param WaveHeader header: Header describing the sample layout
    :return: One value per channel, laid out as [ch0, ch1, ...]
    :rtype: [int]
    """
    channels = header.num_channels
    frame = [0] * channels

    for channel in range(channels):
        if header.bits_per_sample == 8:
            frame[channel] = data[index * channels + channel]
        elif header.bits_per_sample == 16:
            frame[channel] = bytes_to_int16(data, 2 * (index * channels + channel))

    return frame


class Wave(object):
    """
    Fully decoded RIFF/WAVE container. Header fields can be read directly
    from the Wave object, e.g. wave.sample_rate.

    :ivar WaveHeader header: Container header
    :ivar [[int]] data: Samples indexed by frame, then by channel
    """
    def __init__(self, header, data):
        self.header = header
        self.data = data

    def __getattr__(self, name):
        if name == 'header':
            raise AttributeError(name)

        return getattr(self.header, name)

    def _typed_view(self, bits_per_sample, typecode):
        if self.header.bits_per_sample != bits_per_sample:
            return None

        return [array(typecode, frame) for frame in self.data]

    @property
    def data8(self):
        """
        Samples as unsigned 8-bit arrays, one per frame, or None if this is not
        an 8-bit file. Built from self.data on each access.

        :rtype: [array.array]
        """
        return self._typed_view(8, 'B')

    @property
    def data16(self):
        """
        Samples as signed 16-bit arrays, one per frame, or None if this is not
        a 16-bit file. Built from self.data on each access.

        :rtype: [array.array]
        """
        return self._typed_view(16, 'h')

    def __str__(self):
        return "%s(%s)" % (self.__class__.__name__, self.header)

    def __repr__(self):
        return self.__str__()


def decode_wave(data):
    """
    Decode a complete RIFF/WAVE file held in memory.

    Bit depths other than 8 and 16 are not rejected; every sample of such a
    file decodes as 0 and both data8 and data16 are None.

    :param bytes data: Complete file contents
    :return: Decoded container
    :rtype: Wave
    """
    data_marker_offset = find_data_marker(data)
    if data_marker_offset == -1:
        raise DataChunkNotFoundError("'data' marker not found")

    header = parse_header(data, data_marker_offset)

    start = data_marker_offset + DATA_CHUNK_HEADER_SIZE
    payload = data[start:start + header.chunk_size]
    if len(payload) < header.chunk_size:
        raise WaveFormatError("truncated sample data: expected %d bytes, got %d"
                              % (header.chunk_size, len(payload)))

    if header.bits_per_sample not in SUPPORTED_BITS_PER_SAMPLE:
        logger.warning("unsupported bits per sample (%d), samples will be zero",
                       header.bits_per_sample)

    samples = [decode_frame(payload, i, header) for i in range(header.num_samples)]
    return Wave(header, samples)

def read_wave(reader):
    """
    Read an entire RIFF/WAVE file from a stream and decode it.

    :param reader: Readable binary stream
    :return: Decoded container
    :rtype: Wave
    """
    if reader is None:
        raise InvalidReaderError("invalid reader")

    return decode_wave(reader.read())


class StreamedWave(object):
    """
    Decodes frames from a stream on demand. The stream must be positioned at
    the start of the sample payload and is owned by this object from here
    on: it is closed by close(), or on leaving a 'with' block.

    Not safe to use from more than one thread, or after a read has failed.

    :ivar WaveHeader header: Container header
    :ivar stream: Readable binary stream that samples are read from
    """
    def __init__(self, header, stream):
        if stream is None:
            raise InvalidReaderError("invalid reader")

        check_layout(header)
        self.header = header
        self.stream = stream

    def read_samples(self, num_samples):
        """
        Read and decode the next batch of frames. Fewer frames than requested
        are returned if less data is available; an empty list means the end
        of the stream has been reached.

        :param int num_samples: Maximum number of frames to read
        :return: Decoded frames, each laid out as [ch0, ch1, ...]
        :rtype: [[int]]
        """
        if num_samples < 0:
            raise ValueError("number of samples must not be negative")

        block_align = self.header.block_align
        data = self.stream.read(num_samples * block_align)
        if data is None:
            data = b''

        if len(data) % block_align != 0:
            raise MisalignedReadError("read %d bytes, which is not a multiple of "
                                      "the block alignment (%d)"
                                      % (len(data), block_align))

        num_read = len(data) // block_align
        logger.debug("read %d of %d requested samples", num_read, num_samples)
        return [decode_frame(data, i, self.header) for i in range(num_read)]

    def close(self):
        self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __str__(self):
        return "%s(%s)" % (self.__class__.__name__, self.header)

    def __repr__(self):
        return self.__str__()


def stream_wave(stream):
    """
    Acquire the header of a RIFF/WAVE stream and return a StreamedWave for
    reading its samples.

    The stream is read one byte at a time until the 'data' marker has been
    consumed. A further block of (bytes consumed + 8) bytes is then read and
    validated as a header whose 'data' marker is at offset 0. The scanned
    bytes are not kept, so the block is whatever follows the marker in the
    stream. A conventionally laid out file does not pass this validation and
    raises WaveFormatError.

    :param stream: Readable binary stream
    :return: Streaming decoder that owns the stream
    :rtype: StreamedWave
    """
    if stream is None:
        raise InvalidReaderError("invalid reader")

    consumed = scan_stream(stream)
    block = stream.read(consumed + DATA_CHUNK_HEADER_SIZE) or b''
    header = parse_header(block, 0)

    return StreamedWave(header, stream)
