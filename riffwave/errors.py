class WaveError(Exception):
    """
    Base class for all errors raised while decoding RIFF/WAVE data
    """
    pass

class InvalidReaderError(WaveError):
    """
    Raised when no readable stream was supplied
    """
    pass

class DataChunkNotFoundError(WaveError):
    """
    Raised when the 'data' marker cannot be found in a buffer or stream
    """
    pass

class WaveFormatError(WaveError):
    """
    Raised when a mandatory marker is missing from the container, or when
    the container is too short to hold the fields it declares.

    :ivar bytes marker: The marker that failed validation, or None if the\
        data was truncated
    """
    def __init__(self, message, marker=None):
        super(WaveFormatError, self).__init__(message)
        self.marker = marker

class MisalignedReadError(WaveError):
    """
    Raised by StreamedWave when a read returns a byte count that is not a
    whole number of frames
    """
    pass
