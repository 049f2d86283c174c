__version__ = "0.1.0"

from riffwave.errors import (WaveError, InvalidReaderError, DataChunkNotFoundError,
                             WaveFormatError, MisalignedReadError)
from riffwave.header import WaveHeader, parse_header
from riffwave.reader import Wave, StreamedWave, decode_wave, read_wave, stream_wave
from riffwave.audio import get_mono_data, write_mono
