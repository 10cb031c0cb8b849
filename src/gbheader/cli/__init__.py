"""
gbheader Command-Line Interface
===============================

This package provides the ``gbheader`` command-line tool, a Click-based
application for inspecting and validating cartridge images:

- **info**: Print every decoded header field
- **validate**: Check logo and checksums, exit non-zero on failure
- **checksum**: Compare stored and calculated checksums
"""

__all__ = ["gbheader"]
