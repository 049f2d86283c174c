import wave
import struct
import logging

from riffwave.errors import WaveFormatError

logger = logging.getLogger(__name__)

MONO_BITS_PER_SAMPLE = 16
MONO_CHANNELS = 1


def get_mono_data(wav):
    """
    Mix down the samples of a decoded file to a single channel, by averaging
    all channels in each frame.

    :param Wave wav: Decoded RIFF/WAVE file
    :return: One sample per frame
    :rtype: [float]
    """
    if wav.num_channels == 0:
        raise WaveFormatError("cannot mix down a file with no channels")

    if wav.num_channels == 1:
        return [float(frame[0]) for frame in wav.data]

    return [float(sum(frame)) / len(frame) for frame in wav.data]

def _pack_samples(data):
    # Truncate towards zero, then wrap into 16 bits
    values = [int(x) & 0xFFFF for x in data]
    return struct.pack("<%dH" % len(values), *values)

def write_mono(sink, data, sample_rate):
    """
    Write samples to a mono, 16-bit RIFF/WAVE file.

    :param sink: Filename, or writable binary file object, for output .wav file
    :param [float] data: Samples to write. Each value is truncated to an integer\
        and stored in 16 bits.
    :param int sample_rate: Sample rate in Hz
    """
    sampledata = _pack_samples(data)

    if isinstance(sink, str):
        with open(sink, "wb") as fh:
            _write_wav(fh, sampledata, len(data), sample_rate)
    else:
        _write_wav(sink, sampledata, len(data), sample_rate)

    logger.debug("wrote %d samples at %dHz", len(data), sample_rate)

def _write_wav(fh, sampledata, num_samples, sample_rate):
    with wave.open(fh, "wb") as wfh:
        wfh.setnchannels(MONO_CHANNELS)
        wfh.setsampwidth(MONO_BITS_PER_SAMPLE // 8)
        wfh.setframerate(sample_rate)
        wfh.setnframes(num_samples)
        wfh.writeframes(sampledata)
