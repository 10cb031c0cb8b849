"""
Shared fixtures for the gbheader test suite.

``build_image()`` produces synthetic cartridge images with any header
field overridden, optionally patching both checksums so the result is a
fully valid image.
"""

import pytest

from gbheader.header.records import VALID_LOGO


def header_checksum_of(image: bytes) -> int:
    """Header checksum computed straight from the format definition."""
    x = 0
    for b in image[0x0134:0x014D]:
        x = (x - b - 1) % 65536
    return x % 256


def global_checksum_of(image: bytes) -> int:
    """Global checksum computed straight from the format definition."""
    return (sum(image) - image[0x014E] - image[0x014F]) % 65536


def build_image(
    size: int = 0x8000,
    title: bytes = b"TESTGAME",
    new_format: bool = False,
    manufacturer: bytes = b"ABCD",
    color: int = 0x80,
    licensee: bytes = b"01",
    sgb: int = 0x00,
    cart_type: int = 0x00,
    rom_size: int = 0x00,
    ram_size: int = 0x00,
    destination: int = 0x01,
    old_licensee: int = 0x01,
    version: int = 0x00,
    logo: bytes = VALID_LOGO,
    fix_checksums: bool = True,
) -> bytearray:
    """Create a cartridge image with the given header fields."""
    image = bytearray(size)
    image[0x0100:0x0104] = b"\x00\xC3\x50\x01"
    image[0x0104:0x0134] = logo

    if new_format:
        image[0x0134:0x0134 + len(title)] = title
        image[0x013F:0x0143] = manufacturer
        image[0x0143] = color
        image[0x0144:0x0146] = licensee
        old_licensee = 0x33
    else:
        image[0x0134:0x0134 + len(title)] = title

    image[0x0146] = sgb
    image[0x0147] = cart_type
    image[0x0148] = rom_size
    image[0x0149] = ram_size
    image[0x014A] = destination
    image[0x014B] = old_licensee
    image[0x014C] = version

    # Some program bytes so the global checksum covers more than the header
    for offset in range(0x0150, min(size, 0x0250)):
        image[offset] = offset & 0xFF

    if fix_checksums:
        image[0x014D] = header_checksum_of(image)
        total = global_checksum_of(image)
        image[0x014E] = total >> 8
        image[0x014F] = total & 0xFF

    return image


@pytest.fixture
def old_style_image() -> bytearray:
    """Valid old-style image with a 15-character title."""
    return build_image(title=b"SUPERMARIOLAND1", cart_type=0x01, rom_size=0x01)


@pytest.fixture
def new_style_image() -> bytearray:
    """Valid new-style Game Boy Color image."""
    return build_image(
        title=b"POKEMON",
        new_format=True,
        manufacturer=b"AAUE",
        color=0x80,
        licensee=b"01",
        sgb=0x03,
        cart_type=0x10,
        rom_size=0x06,
        ram_size=0x03,
    )


@pytest.fixture
def rom_path(tmp_path, new_style_image):
    """Path to a valid image written to disk."""
    path = tmp_path / "game.gbc"
    path.write_bytes(bytes(new_style_image))
    return path
