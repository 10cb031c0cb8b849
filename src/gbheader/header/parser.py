"""
Cartridge Header Decoder
========================

This module decodes the header of a Game Boy cartridge image into an
immutable CartridgeHeader record and exposes the header's integrity
checks.

Decoding
--------
Decoding is all-or-nothing. The image is first checked for size, then
the format version is determined from the old licensee code byte, then
every field is extracted in header order. The first invalid field raises
FormatError and no record is produced.

Validation
----------
A decoded record answers three questions without raising:

- ``is_header_checksum_valid()``: header checksum at 0x014D
- ``is_global_checksum_valid()``: global checksum at 0x014E
- ``is_logo_valid()``: logo bitmap at 0x0104

Usage Examples
--------------
Reading a cartridge image:
    >>> from gbheader.header import decode_file
    >>> header = decode_file("tetris.gb")
    >>> print(header.title, header.cartridge_type.get_description())
    TETRIS ROM ONLY

Decoding bytes already in memory:
    >>> header = decode(rom_bytes)
    >>> if not header.is_logo_valid():
    ...     print("The boot ROM would lock up on this cartridge")
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Union
import logging

from gbheader.errors import FormatError, RomIOError
from gbheader.header.buffer import read_range, decode_text
from gbheader.header.checksum import (
    ChecksumReport,
    calculate_header_checksum,
    calculate_global_checksum,
)
from gbheader.header.records import (
    ENTRY_POINT_ADDR,
    ENTRY_POINT_SIZE,
    LOGO_ADDR,
    LOGO_SIZE,
    TITLE_ADDR,
    MANUFACTURER_CODE_ADDR,
    COLOR_SUPPORT_ADDR,
    NEW_LICENSEE_CODE_ADDR,
    SUPER_SUPPORT_ADDR,
    CARTRIDGE_TYPE_ADDR,
    ROM_SIZE_ADDR,
    RAM_SIZE_ADDR,
    DESTINATION_CODE_ADDR,
    OLD_LICENSEE_CODE_ADDR,
    MASK_ROM_VERSION_ADDR,
    HEADER_CHECKSUM_ADDR,
    GLOBAL_CHECKSUM_ADDR,
    NEW_FORMAT_FLAG,
    VALID_LOGO,
    ColorSupport,
    SuperSupport,
    CartridgeType,
    RomSize,
    RamSize,
    DestinationCode,
)

# Logger for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Cartridge Header Record
# =============================================================================

@dataclass(frozen=True)
class CartridgeHeader:
    """
    Decoded header of a cartridge image.

    Instances are created by ``decode()`` (or ``CartridgeHeader.from_bytes``)
    and never change afterwards. The record keeps its own copy of the
    complete image so the checksums can be computed on demand.

    Attributes:
        entry_point: The 4 raw bytes at 0x0100
        logo_bitmap: The 48 logo bytes at 0x0104
        title: Game title (NUL padding removed)
        manufacturer_code: 4-character code, "" for old-style headers
        color_support_flag: Color support, NOT_SUPPORTED for old-style headers
        new_licensee_code: 2-character code, "" for old-style headers
        super_support_flag: Super Game Boy support
        cartridge_type: Memory bank controller and peripherals
        rom_size: ROM capacity
        ram_size: External RAM capacity
        destination_code: Japanese or non-Japanese market
        old_licensee_code: Raw old licensee byte (0x33 = new-style)
        mask_rom_version: Raw mask ROM version byte
        header_checksum: Stored header checksum byte
        global_checksum: Stored global checksum word
        is_new_format: True if the header uses the new-style layout
        rom_data: The complete image (not shown in repr)
    """
    entry_point: bytes
    logo_bitmap: bytes
    title: str
    manufacturer_code: str
    color_support_flag: ColorSupport
    new_licensee_code: str
    super_support_flag: SuperSupport
    cartridge_type: CartridgeType
    rom_size: RomSize
    ram_size: RamSize
    destination_code: DestinationCode
    old_licensee_code: int
    mask_rom_version: int
    header_checksum: int
    global_checksum: int
    is_new_format: bool
    rom_data: bytes = field(repr=False, compare=False)

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> "CartridgeHeader":
        """
        Decode a cartridge header from an in-memory image.

        Args:
            data: The complete cartridge image

        Returns:
            The decoded header record

        Raises:
            FormatError: If the image is too small or a field is invalid
        """
        data = bytes(data)

        # The image must reach past the last header byte
        if len(data) <= GLOBAL_CHECKSUM_ADDR + 1:
            raise FormatError(f"ROM image is too small: {len(data)} bytes")

        is_new_format = data[OLD_LICENSEE_CODE_ADDR] == NEW_FORMAT_FLAG
        title_end = MANUFACTURER_CODE_ADDR if is_new_format else NEW_LICENSEE_CODE_ADDR
        logger.debug(
            f"Decoding {'new' if is_new_format else 'old'}-style header "
            f"({len(data)} byte image)"
        )

        entry_point = read_range(data, ENTRY_POINT_ADDR, ENTRY_POINT_SIZE)
        logo_bitmap = read_range(data, LOGO_ADDR, LOGO_SIZE)

        title = decode_text(data, TITLE_ADDR, title_end)

        # Old-style headers spend these bytes on the title, so they are
        # never read as codes.
        if is_new_format:
            manufacturer_code = decode_text(data, MANUFACTURER_CODE_ADDR, COLOR_SUPPORT_ADDR)
            new_licensee_code = decode_text(data, NEW_LICENSEE_CODE_ADDR, SUPER_SUPPORT_ADDR)
            color_support_flag = ColorSupport.from_code(data[COLOR_SUPPORT_ADDR])
        else:
            manufacturer_code = ""
            new_licensee_code = ""
            color_support_flag = ColorSupport.NOT_SUPPORTED

        super_support_flag = SuperSupport.from_code(data[SUPER_SUPPORT_ADDR])
        cartridge_type = CartridgeType.from_code(data[CARTRIDGE_TYPE_ADDR])
        rom_size = RomSize.from_code(data[ROM_SIZE_ADDR])
        ram_size = RamSize.from_code(data[RAM_SIZE_ADDR])
        destination_code = DestinationCode.from_code(data[DESTINATION_CODE_ADDR])

        header = cls(
            entry_point=entry_point,
            logo_bitmap=logo_bitmap,
            title=title,
            manufacturer_code=manufacturer_code,
            color_support_flag=color_support_flag,
            new_licensee_code=new_licensee_code,
            super_support_flag=super_support_flag,
            cartridge_type=cartridge_type,
            rom_size=rom_size,
            ram_size=ram_size,
            destination_code=destination_code,
            old_licensee_code=data[OLD_LICENSEE_CODE_ADDR],
            mask_rom_version=data[MASK_ROM_VERSION_ADDR],
            header_checksum=data[HEADER_CHECKSUM_ADDR],
            global_checksum=(data[GLOBAL_CHECKSUM_ADDR] << 8) | data[GLOBAL_CHECKSUM_ADDR + 1],
            is_new_format=is_new_format,
            rom_data=data,
        )
        logger.debug(f"Decoded '{title}' ({cartridge_type.get_description()})")
        return header

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> "CartridgeHeader":
        """
        Read a cartridge image from disk and decode its header.

        Raises:
            RomIOError: If the file cannot be read
            FormatError: If the header is invalid
        """
        filepath = Path(filepath)
        try:
            data = filepath.read_bytes()
        except OSError as e:
            raise RomIOError(f"Cannot read ROM file '{filepath}': {e}", cause=e) from e
        logger.debug(f"Read {len(data)} bytes from {filepath}")
        return cls.from_bytes(data)

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> "CartridgeHeader":
        """
        Read a cartridge image from a binary file object and decode it.

        The stream is read to its end; it is not closed.

        Raises:
            RomIOError: If reading the stream fails
            FormatError: If the header is invalid
        """
        try:
            data = stream.read()
        except OSError as e:
            raise RomIOError(f"Cannot read ROM stream: {e}", cause=e) from e
        return cls.from_bytes(data)

    # =========================================================================
    # Validation
    # =========================================================================

    @property
    def calculated_header_checksum(self) -> int:
        """Header checksum computed from the image bytes."""
        return calculate_header_checksum(self.rom_data)

    @property
    def calculated_global_checksum(self) -> int:
        """Global checksum computed from the image bytes."""
        return calculate_global_checksum(self.rom_data)

    def is_header_checksum_valid(self) -> bool:
        """Check the stored header checksum against the image contents."""
        return self.calculated_header_checksum == self.header_checksum

    def is_global_checksum_valid(self) -> bool:
        """Check the stored global checksum against the image contents."""
        return self.calculated_global_checksum == self.global_checksum

    def is_logo_valid(self) -> bool:
        """Check that the logo bitmap is exactly the reference logo."""
        return self.logo_bitmap == VALID_LOGO

    def header_checksum_report(self) -> ChecksumReport:
        """Get stored and calculated header checksum values."""
        calculated = self.calculated_header_checksum
        report = ChecksumReport(
            is_valid=calculated == self.header_checksum,
            stored=self.header_checksum,
            calculated=calculated,
        )
        if not report.is_valid:
            logger.info(
                f"Header checksum mismatch: stored 0x{report.stored:02X}, "
                f"calculated 0x{report.calculated:02X}"
            )
        return report

    def global_checksum_report(self) -> ChecksumReport:
        """Get stored and calculated global checksum values."""
        calculated = self.calculated_global_checksum
        report = ChecksumReport(
            is_valid=calculated == self.global_checksum,
            stored=self.global_checksum,
            calculated=calculated,
        )
        if not report.is_valid:
            logger.info(
                f"Global checksum mismatch: stored 0x{report.stored:04X}, "
                f"calculated 0x{report.calculated:04X}"
            )
        return report

    # =========================================================================
    # Presentation
    # =========================================================================

    def get_info(self) -> dict:
        """
        Get every decoded field and validation result as plain values.

        Returns:
            Dictionary suitable for display or JSON output
        """
        header_report = self.header_checksum_report()
        global_report = self.global_checksum_report()

        return {
            "title": self.title,
            "new_format": self.is_new_format,
            "entry_point": self.entry_point.hex(),
            "manufacturer_code": self.manufacturer_code,
            "color_support": self.color_support_flag.get_description(),
            "new_licensee_code": self.new_licensee_code,
            "super_support": self.super_support_flag.get_description(),
            "cartridge_type": self.cartridge_type.get_description(),
            "rom_size": self.rom_size.get_description(),
            "rom_banks": self.rom_size.bank_count,
            "ram_size": self.ram_size.get_description(),
            "destination": self.destination_code.get_description(),
            "old_licensee_code": f"0x{self.old_licensee_code:02X}",
            "mask_rom_version": f"0x{self.mask_rom_version:02X}",
            "header_checksum": f"0x{header_report.stored:02X}",
            "header_checksum_valid": header_report.is_valid,
            "global_checksum": f"0x{global_report.stored:04X}",
            "global_checksum_valid": global_report.is_valid,
            "logo_valid": self.is_logo_valid(),
            "image_size": len(self.rom_data),
        }


# =============================================================================
# Convenience Functions
# =============================================================================

def decode(data: Union[bytes, bytearray, memoryview]) -> CartridgeHeader:
    """
    Decode a cartridge header from an in-memory image.

    This is a convenience function around ``CartridgeHeader.from_bytes``.

    Raises:
        FormatError: If the image is too small or a field is invalid
    """
    return CartridgeHeader.from_bytes(data)


def decode_file(filepath: Union[str, Path]) -> CartridgeHeader:
    """
    Decode the header of a cartridge image on disk.

    Raises:
        RomIOError: If the file cannot be read
        FormatError: If the header is invalid
    """
    return CartridgeHeader.from_file(filepath)


def decode_stream(stream: BinaryIO) -> CartridgeHeader:
    """
    Decode the header of a cartridge image read from a binary stream.

    Raises:
        RomIOError: If reading the stream fails
        FormatError: If the header is invalid
    """
    return CartridgeHeader.from_stream(stream)
