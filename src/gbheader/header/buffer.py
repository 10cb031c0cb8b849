"""
Byte-Range Access
=================

Bounds-checked helpers for pulling fixed-width fields and NUL-padded text
out of a cartridge image buffer.

Text Fields
-----------
Header text fields (title, manufacturer code, new licensee code) are
padded with 0x00 bytes. The value of a field is the strict UTF-8 decoding
of its bytes up to, but not including, the first NUL. A field made only
of NUL bytes decodes to the empty string.
"""

from gbheader.errors import ByteRangeError, TextDecodeError


def read_range(source: bytes, offset: int, length: int) -> bytes:
    """
    Read exactly ``length`` bytes starting at ``offset``.

    Args:
        source: The image buffer
        offset: Start offset of the range
        length: Number of bytes to copy

    Returns:
        A new bytes object of exactly ``length`` bytes

    Raises:
        ByteRangeError: If the range does not lie inside ``source``

    Example:
        >>> read_range(b"\\x00\\xC3\\x50\\x01", 1, 3)
        b'\\xc3P\\x01'
    """
    if offset < 0 or length < 0 or offset + length > len(source):
        raise ByteRangeError(offset, length, len(source))
    return bytes(source[offset:offset + length])


def decode_text(source: bytes, start: int, end: int) -> str:
    """
    Decode the NUL-padded text field ``source[start:end]``.

    Raises:
        ByteRangeError: If the range does not lie inside ``source``
        TextDecodeError: If the bytes before the first NUL are not UTF-8
    """
    raw = read_range(source, start, end - start)

    nul = raw.find(0)
    if nul != -1:
        raw = raw[:nul]

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise TextDecodeError(start, end, e.reason) from e
