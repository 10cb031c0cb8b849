"""
Cartridge Checksum Calculations
===============================

This module provides the two checksum algorithms defined by the cartridge
header format.

Header Checksum
---------------
A single byte stored at 0x014D covering the header bytes 0x0134-0x014C
(title through mask ROM version):

    x = 0
    for each byte b in [0x0134, 0x014D):
        x = x - b - 1

Arithmetic wraps at 16 bits and only the low byte is compared. The boot
ROM refuses to start a cartridge whose header checksum does not match.

Global Checksum
---------------
A big-endian word stored at 0x014E-0x014F. It is the 16-bit wrapping sum
of every byte of the image except the two checksum bytes themselves.
Real hardware never verifies it, so many homebrew images leave it unset.
"""

from dataclasses import dataclass

from gbheader.header.records import (
    TITLE_ADDR,
    HEADER_CHECKSUM_ADDR,
    GLOBAL_CHECKSUM_ADDR,
)


@dataclass(frozen=True)
class ChecksumReport:
    """
    Stored and calculated value of one checksum.

    Attributes:
        is_valid: True if the stored value matches the calculated one
        stored: Checksum value read from the header
        calculated: Checksum value computed from the image bytes
    """
    is_valid: bool
    stored: int
    calculated: int


def calculate_header_checksum(data: bytes) -> int:
    """
    Calculate the 8-bit header checksum of an image.

    Args:
        data: The image (at least up to 0x014D)

    Returns:
        Checksum value (0x00 - 0xFF)

    Raises:
        ValueError: If the image does not reach the header checksum byte

    Example:
        >>> rom = bytearray(0x150)
        >>> hex(calculate_header_checksum(rom))
        '0xe7'
    """
    if len(data) < HEADER_CHECKSUM_ADDR:
        raise ValueError(
            f"Image too short for header checksum: need {HEADER_CHECKSUM_ADDR} "
            f"bytes, got {len(data)}"
        )

    checksum = 0
    for byte in data[TITLE_ADDR:HEADER_CHECKSUM_ADDR]:
        checksum = (checksum - byte) & 0xFFFF
        checksum = (checksum - 1) & 0xFFFF
    return checksum & 0xFF


def calculate_global_checksum(data: bytes) -> int:
    """
    Calculate the 16-bit global checksum of an image.

    Every byte is summed except the two stored checksum bytes at
    0x014E and 0x014F. Images too short to contain those bytes are
    summed in full.

    Returns:
        Checksum value (0x0000 - 0xFFFF)
    """
    checksum = 0
    for offset, byte in enumerate(data):
        if offset != GLOBAL_CHECKSUM_ADDR and offset != GLOBAL_CHECKSUM_ADDR + 1:
            checksum = (checksum + byte) & 0xFFFF
    return checksum


def verify_header_checksum(data: bytes) -> ChecksumReport:
    """Compare the stored header checksum against the calculated one."""
    stored = data[HEADER_CHECKSUM_ADDR]
    calculated = calculate_header_checksum(data)
    return ChecksumReport(stored == calculated, stored, calculated)


def verify_global_checksum(data: bytes) -> ChecksumReport:
    """Compare the stored global checksum against the calculated one."""
    stored = (data[GLOBAL_CHECKSUM_ADDR] << 8) | data[GLOBAL_CHECKSUM_ADDR + 1]
    calculated = calculate_global_checksum(data)
    return ChecksumReport(stored == calculated, stored, calculated)
