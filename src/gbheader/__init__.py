"""
gbheader - Game Boy Cartridge Header Toolkit
============================================

This package decodes and validates the metadata header embedded in Game
Boy and Game Boy Color cartridge (ROM) images.

Main Components
---------------
- **header**: Header decoding and validation
    Decodes the fixed-offset header into a typed, immutable record and
    checks the header checksum, global checksum and logo bitmap

- **cli**: Command-line tool (gbheader)
    Prints decoded header fields and validates images

Quick Start
-----------
Decode an image:
    >>> from gbheader import decode_file
    >>> header = decode_file("game.gb")
    >>> print(header.title, header.rom_size.get_description())

Check its integrity:
    >>> header.is_logo_valid()
    True
    >>> header.is_header_checksum_valid()
    True

Or use the command-line tool:
    $ gbheader info game.gb
    $ gbheader validate game.gb

Reference Documentation
-----------------------
- Pan Docs, The Cartridge Header: https://gbdev.io/pandocs/The_Cartridge_Header.html

Version History
---------------
1.0.0 - Initial release with header decoder, checksums and CLI
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from gbheader.errors import (
    CartridgeError,
    RomLoadError,
    RomIOError,
    FormatError,
    ByteRangeError,
    TextDecodeError,
)

from gbheader.header import (
    CartridgeHeader,
    ColorSupport,
    SuperSupport,
    CartridgeType,
    RomSize,
    RamSize,
    DestinationCode,
    ChecksumReport,
    VALID_LOGO,
    MIN_IMAGE_SIZE,
    decode,
    decode_file,
    decode_stream,
    calculate_header_checksum,
    calculate_global_checksum,
)

from gbheader.config import ToolConfig

__all__ = [
    # Version info
    "__version__",
    # Decoder
    "CartridgeHeader",
    "decode",
    "decode_file",
    "decode_stream",
    # Enums
    "ColorSupport",
    "SuperSupport",
    "CartridgeType",
    "RomSize",
    "RamSize",
    "DestinationCode",
    # Checksums and constants
    "ChecksumReport",
    "calculate_header_checksum",
    "calculate_global_checksum",
    "VALID_LOGO",
    "MIN_IMAGE_SIZE",
    # Configuration
    "ToolConfig",
    # Exception hierarchy
    "CartridgeError",
    "RomLoadError",
    "RomIOError",
    "FormatError",
    "ByteRangeError",
    "TextDecodeError",
]
