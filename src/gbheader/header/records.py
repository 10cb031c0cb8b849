"""
Cartridge Header Definitions
============================

This module defines the fixed layout of the Game Boy cartridge header and
the closed enumerated domains its single-byte codes map into.

Header Layout
-------------
All offsets are absolute within the image::

    Offset  Size    Description
    ------  ----    -----------
    0x0100  4       Entry point (usually NOP; JP $0150)
    0x0104  48      Logo bitmap
    0x0134  11/16   Title (16 bytes old-style, 11 bytes new-style)
    0x013F  4       Manufacturer code (new-style only)
    0x0143  1       Color support flag (new-style only)
    0x0144  2       New licensee code (new-style only)
    0x0146  1       Super support flag
    0x0147  1       Cartridge type
    0x0148  1       ROM size
    0x0149  1       RAM size
    0x014A  1       Destination code
    0x014B  1       Old licensee code (0x33 = new-style header)
    0x014C  1       Mask ROM version number
    0x014D  1       Header checksum
    0x014E  2       Global checksum (big-endian)

Old-style vs New-style
----------------------
Cartridges released after the Super Game Boy store 0x33 in the old
licensee code byte and move the real licensee into a two-character code
at 0x0144. These new-style headers also shorten the title to make room
for the manufacturer code and the color support flag.

Enumerated Fields
-----------------
Every code-carrying field is an IntEnum whose ``from_code()`` lookup is
total: a byte outside the domain raises FormatError naming the field and
the code. There is no "unknown" member.
"""

from enum import IntEnum

from gbheader.errors import FormatError


# =============================================================================
# Header Address Constants
# =============================================================================

ENTRY_POINT_ADDR = 0x0100
LOGO_ADDR = 0x0104
TITLE_ADDR = 0x0134
MANUFACTURER_CODE_ADDR = 0x013F
COLOR_SUPPORT_ADDR = 0x0143
NEW_LICENSEE_CODE_ADDR = 0x0144
SUPER_SUPPORT_ADDR = 0x0146
CARTRIDGE_TYPE_ADDR = 0x0147
ROM_SIZE_ADDR = 0x0148
RAM_SIZE_ADDR = 0x0149
DESTINATION_CODE_ADDR = 0x014A
OLD_LICENSEE_CODE_ADDR = 0x014B
MASK_ROM_VERSION_ADDR = 0x014C
HEADER_CHECKSUM_ADDR = 0x014D
GLOBAL_CHECKSUM_ADDR = 0x014E

ENTRY_POINT_SIZE = 4
LOGO_SIZE = 48

# Smallest image holding the complete header (up to the global checksum)
MIN_IMAGE_SIZE = GLOBAL_CHECKSUM_ADDR + 2

# Old licensee code value that marks a new-style header
NEW_FORMAT_FLAG = 0x33

# Logo bitmap the boot ROM compares against before starting a cartridge
VALID_LOGO = bytes([
    0xCE, 0xED, 0x66, 0x66, 0xCC, 0x0D, 0x00, 0x0B, 0x03, 0x73, 0x00, 0x83,
    0x00, 0x0C, 0x00, 0x0D, 0x00, 0x08, 0x11, 0x1F, 0x88, 0x89, 0x00, 0x0E,
    0xDC, 0xCC, 0x6E, 0xE6, 0xDD, 0xDD, 0xD9, 0x99, 0xBB, 0xBB, 0x67, 0x63,
    0x6E, 0x0E, 0xEC, 0xCC, 0xDD, 0xDC, 0x99, 0x9F, 0xBB, 0xB9, 0x33, 0x3E,
])


# =============================================================================
# Enumeration Types
# =============================================================================

class HeaderCode(IntEnum):
    """
    Base class for single-byte header code domains.

    Subclasses list every valid code as a member and override
    ``field_name()`` with the label used in error messages.
    """

    @classmethod
    def field_name(cls) -> str:
        """Get the field label used in error messages."""
        return cls.__name__

    @classmethod
    def from_code(cls, code: int):
        """
        Convert a raw header byte to an enum member.

        Raises:
            FormatError: If ``code`` is not part of this domain
        """
        try:
            return cls(code)
        except ValueError:
            raise FormatError(
                f"invalid {cls.field_name()} flag: 0x{code:02X}",
                field=cls.field_name(),
                code=code,
            ) from None

    def get_description(self) -> str:
        """Get a human-readable description of this code."""
        return self.name.replace("_", " ").title()


class ColorSupport(HeaderCode):
    """Game Boy Color support flag (0x0143, new-style headers only)."""
    NOT_SUPPORTED = 0x00    # Monochrome only
    SUPPORTED = 0x80        # Runs on both, with color enhancements
    EXCLUSIVE = 0xC0        # Game Boy Color only

    @classmethod
    def field_name(cls) -> str:
        return "color support"

    def get_description(self) -> str:
        descriptions = {
            ColorSupport.NOT_SUPPORTED: "No color support",
            ColorSupport.SUPPORTED: "Color supported (backwards compatible)",
            ColorSupport.EXCLUSIVE: "Color only",
        }
        return descriptions[self]


class SuperSupport(HeaderCode):
    """Super Game Boy support flag (0x0146)."""
    NOT_SUPPORTED = 0x00
    SUPPORTED = 0x03

    @classmethod
    def field_name(cls) -> str:
        return "super support"

    def get_description(self) -> str:
        if self is SuperSupport.SUPPORTED:
            return "Super Game Boy functions supported"
        return "No Super Game Boy functions"


class CartridgeType(HeaderCode):
    """
    Memory bank controller and peripherals fitted to the cartridge (0x0147).
    """
    ROM = 0x00
    MBC1 = 0x01
    MBC1_RAM = 0x02
    MBC1_RAM_BATTERY = 0x03
    MBC2 = 0x05
    MBC2_BATTERY = 0x06
    ROM_RAM = 0x08
    ROM_RAM_BATTERY = 0x09
    MMM01 = 0x0B
    MMM01_RAM = 0x0C
    MMM01_RAM_BATTERY = 0x0D
    MBC3_TIMER_BATTERY = 0x0F
    MBC3_TIMER_RAM_BATTERY = 0x10
    MBC3 = 0x11
    MBC3_RAM = 0x12
    MBC3_RAM_BATTERY = 0x13
    MBC4 = 0x15
    MBC4_RAM = 0x16
    MBC4_RAM_BATTERY = 0x17
    MBC5 = 0x19
    MBC5_RAM = 0x1A
    MBC5_RAM_BATTERY = 0x1B
    MBC5_RUMBLE = 0x1C
    MBC5_RUMBLE_RAM = 0x1D
    MBC5_RUMBLE_RAM_BATTERY = 0x1E
    MBC6 = 0x20
    MBC7_SENSOR_RUMBLE_RAM_BATTERY = 0x22
    POCKET_CAMERA = 0xFC
    BANDAI_TAMA5 = 0xFD
    HUC3 = 0xFE
    HUC1_RAM_BATTERY = 0xFF

    @classmethod
    def field_name(cls) -> str:
        return "cartridge type"

    def get_description(self) -> str:
        special = {
            CartridgeType.ROM: "ROM ONLY",
            CartridgeType.POCKET_CAMERA: "POCKET CAMERA",
            CartridgeType.BANDAI_TAMA5: "BANDAI TAMA5",
            CartridgeType.HUC3: "HuC3",
            CartridgeType.HUC1_RAM_BATTERY: "HuC1+RAM+BATTERY",
        }
        if self in special:
            return special[self]
        return self.name.replace("_", "+")

    @property
    def has_battery(self) -> bool:
        """True if the cartridge keeps RAM (or a clock) alive on battery."""
        return self.name.endswith("BATTERY")

    @property
    def has_ram(self) -> bool:
        """True if the cartridge carries external RAM."""
        return "RAM" in self.name.split("_")


class RomSize(HeaderCode):
    """
    ROM capacity (0x0148), named by the number of 16KB banks.
    """
    BANKS_2 = 0x00      # 32KB, no banking
    BANKS_4 = 0x01      # 64KB
    BANKS_8 = 0x02      # 128KB
    BANKS_16 = 0x03     # 256KB
    BANKS_32 = 0x04     # 512KB
    BANKS_64 = 0x05     # 1MB
    BANKS_128 = 0x06    # 2MB
    BANKS_256 = 0x07    # 4MB
    BANKS_72 = 0x52     # 1.1MB
    BANKS_80 = 0x53     # 1.2MB
    BANKS_96 = 0x54     # 1.5MB

    @classmethod
    def field_name(cls) -> str:
        return "ROM size"

    @property
    def bank_count(self) -> int:
        """Number of 16KB ROM banks."""
        return int(self.name.split("_")[1])

    @property
    def size_bytes(self) -> int:
        """Total ROM capacity in bytes."""
        return self.bank_count * 16 * 1024

    def get_description(self) -> str:
        descriptions = {
            RomSize.BANKS_2: "32KByte",
            RomSize.BANKS_4: "64KByte",
            RomSize.BANKS_8: "128KByte",
            RomSize.BANKS_16: "256KByte",
            RomSize.BANKS_32: "512KByte",
            RomSize.BANKS_64: "1MByte",
            RomSize.BANKS_128: "2MByte",
            RomSize.BANKS_256: "4MByte",
            RomSize.BANKS_72: "1.1MByte",
            RomSize.BANKS_80: "1.2MByte",
            RomSize.BANKS_96: "1.5MByte",
        }
        return descriptions[self]


class RamSize(HeaderCode):
    """External RAM capacity (0x0149)."""
    NONE = 0x00
    KB_2 = 0x01
    KB_8 = 0x02
    KB_32 = 0x03
    KB_128 = 0x04
    KB_64 = 0x05

    @classmethod
    def field_name(cls) -> str:
        return "RAM size"

    @property
    def size_bytes(self) -> int:
        """External RAM capacity in bytes (0 for NONE)."""
        if self is RamSize.NONE:
            return 0
        return int(self.name.split("_")[1]) * 1024

    def get_description(self) -> str:
        if self is RamSize.NONE:
            return "None"
        return f"{self.size_bytes // 1024}KByte"


class DestinationCode(HeaderCode):
    """Market the cartridge was sold in (0x014A)."""
    JAPANESE = 0x00
    NON_JAPANESE = 0x01

    @classmethod
    def field_name(cls) -> str:
        return "destination code"

    def get_description(self) -> str:
        return "Japanese" if self is DestinationCode.JAPANESE else "Non-Japanese"
