import struct

# Callers must make sure the whole span fits in the buffer; struct.error is
# raised otherwise.

def bytes_to_uint32(data, offset):
    """
    Convert 4 little-endian bytes to an unsigned 32-bit integer.

    :param bytes data: Source buffer
    :param int offset: Index of the first byte
    :return: Decoded value
    :rtype: int
    """
    return struct.unpack_from('<I', data, offset)[0]

def bytes_to_uint16(data, offset):
    """
    Convert 2 little-endian bytes to an unsigned 16-bit integer.

    :param bytes data: Source buffer
    :param int offset: Index of the first byte
    :return: Decoded value
    :rtype: int
    """
    return struct.unpack_from('<H', data, offset)[0]

def bytes_to_int16(data, offset):
    """
    Convert 2 little-endian bytes to a signed 16-bit integer.

    :param bytes data: Source buffer
    :param int offset: Index of the first byte
    :return: Decoded value
    :rtype: int
    """
    return struct.unpack_from('<h', data, offset)[0]
