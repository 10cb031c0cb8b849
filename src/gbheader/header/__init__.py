"""
Cartridge Header Handling
=========================

This module provides decoding and validation of the header found in
every Game Boy and Game Boy Color cartridge image.

This module provides:
- **CartridgeHeader**: Immutable record of every header field
- **decode / decode_file / decode_stream**: Header decoding entry points
- **Code enums**: Closed domains for the single-byte header codes
- **Checksum utilities**: Header and global checksum calculation

Quick Start
-----------
    >>> from gbheader.header import decode_file
    >>> header = decode_file("game.gb")
    >>> header.title
    'POKEMON RED'
    >>> header.is_header_checksum_valid()
    True

Reference
---------
- Pan Docs, The Cartridge Header: https://gbdev.io/pandocs/The_Cartridge_Header.html
"""

# =============================================================================
# Public API Exports
# =============================================================================

# Layout constants and code enums
from gbheader.header.records import (
    # Enums
    HeaderCode,
    ColorSupport,
    SuperSupport,
    CartridgeType,
    RomSize,
    RamSize,
    DestinationCode,
    # Layout
    MIN_IMAGE_SIZE,
    NEW_FORMAT_FLAG,
    VALID_LOGO,
)

# Byte-range access
from gbheader.header.buffer import (
    read_range,
    decode_text,
)

# Checksum utilities
from gbheader.header.checksum import (
    ChecksumReport,
    calculate_header_checksum,
    calculate_global_checksum,
    verify_header_checksum,
    verify_global_checksum,
)

# Decoder
from gbheader.header.parser import (
    CartridgeHeader,
    decode,
    decode_file,
    decode_stream,
)

__all__ = [
    # Enums
    "HeaderCode",
    "ColorSupport",
    "SuperSupport",
    "CartridgeType",
    "RomSize",
    "RamSize",
    "DestinationCode",
    # Layout
    "MIN_IMAGE_SIZE",
    "NEW_FORMAT_FLAG",
    "VALID_LOGO",
    # Byte-range access
    "read_range",
    "decode_text",
    # Checksums
    "ChecksumReport",
    "calculate_header_checksum",
    "calculate_global_checksum",
    "verify_header_checksum",
    "verify_global_checksum",
    # Decoder
    "CartridgeHeader",
    "decode",
    "decode_file",
    "decode_stream",
]
