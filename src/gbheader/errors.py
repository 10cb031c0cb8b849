"""
gbheader Error Hierarchy
========================

This module defines the exception hierarchy for the gbheader package.
All exceptions inherit from CartridgeError, allowing callers to catch all
library errors with a single except clause if desired.

Exception Hierarchy
-------------------
CartridgeError (base)
└── RomLoadError (loading a cartridge image)
    ├── RomIOError - the image could not be read
    └── FormatError - the image is not a valid cartridge header
        ├── ByteRangeError - byte range outside the image buffer
        └── TextDecodeError - header text field is not valid UTF-8

Checksum and logo mismatches are NOT errors. A header with a wrong
checksum is still a fully decodable record, so those are reported by the
boolean predicates on CartridgeHeader instead.
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class CartridgeError(Exception):
    """
    Base exception for all gbheader errors.

        try:
            header = decode_file("game.gb")
        except CartridgeError as e:
            print(f"Error: {e}")
    """
    pass


class RomLoadError(CartridgeError):
    """Base exception for failures while loading a cartridge image."""
    pass


# =============================================================================
# Loading Exceptions
# =============================================================================

class RomIOError(RomLoadError):
    """
    The cartridge image could not be read.

    Wraps the OSError reported by the byte source. The original exception
    is available both as ``cause`` and through ``__cause__``.
    """

    def __init__(self, message: str, cause: Optional[OSError] = None):
        self.cause = cause
        super().__init__(message)


class FormatError(RomLoadError):
    """
    The image does not hold a valid cartridge header.

    Raised when:
    - The image is too small to contain the header
    - An enumerated field holds a code outside its domain
    - A text field is not valid UTF-8

    Attributes:
        field: Name of the offending header field (None for size errors)
        code: The offending raw byte value (None when not applicable)
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: Optional[int] = None,
    ):
        self.field = field
        self.code = code
        super().__init__(message)


class ByteRangeError(FormatError):
    """
    Requested byte range lies outside the image buffer.

    Attributes:
        offset: Start of the requested range
        length: Number of bytes requested
        available: Length of the source buffer
    """

    def __init__(self, offset: int, length: int, available: int):
        self.offset = offset
        self.length = length
        self.available = available
        super().__init__(
            f"cannot read {length} bytes at 0x{offset:04X}: "
            f"buffer holds only {available} bytes"
        )


class TextDecodeError(FormatError):
    """Header text field is not valid UTF-8."""

    def __init__(self, start: int, end: int, reason: str):
        self.start = start
        self.end = end
        super().__init__(
            f"invalid text at 0x{start:04X}..0x{end:04X}: {reason}"
        )
