import logging

from riffwave.codec import bytes_to_uint16, bytes_to_uint32
from riffwave.errors import WaveFormatError

logger = logging.getLogger(__name__)

RIFF_MARKER = b'RIFF'
WAVE_MARKER = b'WAVE'
FMT_MARKER = b'fmt '
DATA_MARKER = b'data'

RIFF_MARKER_OFFSET = 0
WAVE_MARKER_OFFSET = 8
FMT_MARKER_OFFSET = 12

AUDIO_FORMAT_OFFSET = 20
NUM_CHANNELS_OFFSET = 22
SAMPLE_RATE_OFFSET = 24
BYTE_RATE_OFFSET = 28
BLOCK_ALIGN_OFFSET = 32
BITS_PER_SAMPLE_OFFSET = 34

# Fixed-offset fields of the 'fmt ' sub-chunk, relative to the start of the file
HEADER_FIELDS = (
    ('audio_format', AUDIO_FORMAT_OFFSET, bytes_to_uint16),
    ('num_channels', NUM_CHANNELS_OFFSET, bytes_to_uint16),
    ('sample_rate', SAMPLE_RATE_OFFSET, bytes_to_uint32),
    ('byte_rate', BYTE_RATE_OFFSET, bytes_to_uint32),
    ('block_align', BLOCK_ALIGN_OFFSET, bytes_to_uint16),
    ('bits_per_sample', BITS_PER_SAMPLE_OFFSET, bytes_to_uint16),
)

# Number of bytes needed to read every field in HEADER_FIELDS
HEADER_FIELDS_SIZE = BITS_PER_SAMPLE_OFFSET + 2

# 4-byte marker followed by the 4-byte sub-chunk size
DATA_CHUNK_HEADER_SIZE = 8


class WaveHeader(object):
    """
    Format information and layout of a RIFF/WAVE container

    :ivar int audio_format: Audio format tag (1 for PCM)
    :ivar int num_channels: Number of channels
    :ivar int sample_rate: Sample rate in Hz
    :ivar int byte_rate: Bytes per second of audio
    :ivar int block_align: Bytes per frame (num_channels * bytes per sample)
    :ivar int bits_per_sample: Bits per channel sample, 8 or 16 for decoding
    :ivar int chunk_size: Size of the 'data' sub-chunk payload, in bytes
    :ivar int num_samples: Number of frames, chunk_size // block_align
    :ivar int data_marker_offset: Offset of the 'data' marker in the parsed buffer
    """
    def __init__(self, audio_format=0, num_channels=0, sample_rate=0, byte_rate=0,
                 block_align=0, bits_per_sample=0, chunk_size=0, num_samples=0,
                 data_marker_offset=0):
        self.audio_format = audio_format
        self.num_channels = num_channels
        self.sample_rate = sample_rate
        self.byte_rate = byte_rate
        self.block_align = block_align
        self.bits_per_sample = bits_per_sample
        self.chunk_size = chunk_size
        self.num_samples = num_samples
        self.data_marker_offset = data_marker_offset

    def __eq__(self, other):
        if not isinstance(other, WaveHeader):
            return NotImplemented

        return vars(self) == vars(other)

    def __ne__(self, other):
        ret = self.__eq__(other)
        if ret is NotImplemented:
            return ret

        return not ret

    def __str__(self):
        return ("%s(channels=%d, sample_rate=%d, bits_per_sample=%d, samples=%d)"
                % (self.__class__.__name__, self.num_channels, self.sample_rate,
                   self.bits_per_sample, self.num_samples))

    def __repr__(self):
        return self.__str__()


def _check_marker(data, offset, marker):
    if data[offset:offset + len(marker)] != marker:
        name = marker.decode('ascii').strip()
        raise WaveFormatError("header does not contain '%s'" % name, marker)

def check_header(data, data_marker_offset):
    """
    Verify that the RIFF, WAVE, fmt and data markers are where they should be.

    :param bytes data: Buffer starting at the beginning of the container
    :param int data_marker_offset: Offset of the 'data' marker in data
    :raises WaveFormatError: if any of the markers does not match
    """
    _check_marker(data, RIFF_MARKER_OFFSET, RIFF_MARKER)
    _check_marker(data, WAVE_MARKER_OFFSET, WAVE_MARKER)
    _check_marker(data, FMT_MARKER_OFFSET, FMT_MARKER)
    _check_marker(data, data_marker_offset, DATA_MARKER)

def check_layout(header):
    """
    Verify that a frame of block_align bytes can hold one sample for every
    channel, so decoding never reads past the data.

    :param WaveHeader header: Header to check
    :raises WaveFormatError: if the channel count or block alignment is invalid
    """
    if header.num_channels == 0:
        raise WaveFormatError("invalid channel count of 0")

    min_block_align = header.num_channels * max(header.bits_per_sample // 8, 1)
    if header.block_align < min_block_align:
        raise WaveFormatError("invalid block alignment of %d for %d channel(s) "
                              "of %d bits" % (header.block_align, header.num_channels,
                                              header.bits_per_sample))

def parse_header(data, data_marker_offset):
    """
    Validate a container header and decode its format fields.

    :param bytes data: Buffer holding at least the fixed header fields and the\
        8 bytes at the 'data' marker
    :param int data_marker_offset: Offset of the 'data' marker in data
    :return: Decoded header
    :rtype: WaveHeader
    """
    check_header(data, data_marker_offset)

    required = max(HEADER_FIELDS_SIZE, data_marker_offset + DATA_CHUNK_HEADER_SIZE)
    if len(data) < required:
        raise WaveFormatError("truncated header: need %d bytes, got %d"
                              % (required, len(data)))

    fields = {}
    for name, offset, decode in HEADER_FIELDS:
        fields[name] = decode(data, offset)

    header = WaveHeader(data_marker_offset=data_marker_offset, **fields)
    check_layout(header)

    header.chunk_size = bytes_to_uint32(data, data_marker_offset + len(DATA_MARKER))
    header.num_samples = header.chunk_size // header.block_align

    logger.debug("parsed %s", header)
    return header
