import struct

import pytest

from tones import SINE_WAVE
from tones.mixer import Mixer

SAMPLE_RATE = 44100


def _make_wave(payload, num_channels=1, sample_rate=SAMPLE_RATE, bits_per_sample=16,
               chunk_size=None, extra_chunks=b''):
    block_align = num_channels * max(bits_per_sample // 8, 1)
    if chunk_size is None:
        chunk_size = len(payload)

    fmt = struct.pack('<HHIIHH', 1, num_channels, sample_rate,
                      sample_rate * block_align, block_align, bits_per_sample)

    body = (b'WAVE' + b'fmt ' + struct.pack('<I', len(fmt)) + fmt + extra_chunks
            + b'data' + struct.pack('<I', chunk_size) + payload)

    return b'RIFF' + struct.pack('<I', len(body)) + body


@pytest.fixture
def make_wave():
    """
    Returns a function that builds a RIFF/WAVE file around a sample payload
    """
    return _make_wave


@pytest.fixture
def tone_wav(tmp_path):
    """
    Writes a short 440Hz sine tone to a .wav file, returns the filename and
    the raw 16-bit sample data that was written
    """
    mixer = Mixer(SAMPLE_RATE, 0.5)
    mixer.create_track(0, wavetype=SINE_WAVE, attack=0.01, decay=0.01)
    mixer.add_tone(0, frequency=440.0, duration=0.1)
    sampledata = mixer.mix().serialize()

    filename = str(tmp_path / "tone.wav")
    Mixer(SAMPLE_RATE, 0.5).write_wav(filename, sampledata)
    return filename, sampledata
