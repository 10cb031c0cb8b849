"""
gbheader - Cartridge Header Command-Line Interface
==================================================

This module implements the command-line interface for inspecting Game Boy
cartridge images.

Commands
--------
- **info**: Show every decoded header field
- **validate**: Validate logo and checksums
- **checksum**: Show stored and calculated checksums

Usage Examples
--------------
Show header information:
    $ gbheader info tetris.gb

Show header information as JSON:
    $ gbheader info --json tetris.gb

Validate an image (exit status 1 on failure):
    $ gbheader validate tetris.gb

Require the global checksum too:
    $ gbheader validate --strict tetris.gb

Environment
-----------
GBHEADER_LOG_LEVEL and GBHEADER_REQUIRE_* variables are read through
ToolConfig.from_env().
"""

import json
import logging
import sys
from pathlib import Path

import click

from gbheader import __version__
from gbheader.cli.errors import ExitCode, handle_cli_exception
from gbheader.config import ToolConfig
from gbheader.header import decode_file


# =============================================================================
# CLI Context
# =============================================================================

class Context:
    """
    Shared context for CLI commands.

    Stores the verbosity flag and the tool configuration.
    """

    def __init__(self) -> None:
        self.verbose: bool = False
        self.config: ToolConfig = ToolConfig()

    def setup_logging(self) -> None:
        """Configure logging based on verbosity and configuration."""
        level = logging.DEBUG if self.verbose else getattr(logging, self.config.log_level)
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.version_option(__version__, "--version", "-V", prog_name="gbheader")
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@pass_context
def main(ctx: Context, verbose: bool) -> None:
    """
    Game Boy cartridge header inspector.

    Decode and validate the header of Game Boy and Game Boy Color
    cartridge images (.gb, .gbc).

    \b
    Commands:
      info      Show decoded header fields
      validate  Validate logo and checksums
      checksum  Show stored and calculated checksums

    \b
    Examples:
      gbheader info tetris.gb
      gbheader validate --strict tetris.gb
    """
    ctx.verbose = verbose
    ctx.config = ToolConfig.from_env()
    ctx.setup_logging()


# =============================================================================
# Info Command
# =============================================================================

@main.command("info")
@click.argument(
    "rom_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print the header as JSON",
)
@pass_context
def cmd_info(ctx: Context, rom_file: Path, as_json: bool) -> None:
    """
    Show every decoded field of a cartridge header.

    \b
    Example:
      gbheader info tetris.gb
    """
    try:
        header = decode_file(rom_file)

        if as_json:
            click.echo(json.dumps(header.get_info(), indent=2))
            return

        header_report = header.header_checksum_report()
        global_report = header.global_checksum_report()

        click.echo(f"Cartridge Header: {rom_file}")
        click.echo("=" * 40)
        click.echo(f"Title:              {header.title}")
        click.echo(f"New style header:   {_yes_no(header.is_new_format)}")
        click.echo(f"Manufacturer code:  {header.manufacturer_code}")
        click.echo(f"Color support:      {header.color_support_flag.get_description()}")
        click.echo(f"New licensee code:  {header.new_licensee_code}")
        click.echo(f"Super support:      {header.super_support_flag.get_description()}")
        click.echo(f"Cartridge type:     {header.cartridge_type.get_description()}")
        click.echo(f"ROM size:           {header.rom_size.get_description()}")
        click.echo(f"RAM size:           {header.ram_size.get_description()}")
        click.echo(f"Destination:        {header.destination_code.get_description()}")
        click.echo(f"Old licensee code:  0x{header.old_licensee_code:02X}")
        click.echo(f"Mask ROM version:   0x{header.mask_rom_version:02X}")
        click.echo(
            f"Header checksum:    0x{header_report.stored:02X} "
            f"(valid: {_yes_no(header_report.is_valid)})"
        )
        click.echo(
            f"Global checksum:    0x{global_report.stored:04X} "
            f"(valid: {_yes_no(global_report.is_valid)})"
        )
        click.echo(f"Valid logo:         {_yes_no(header.is_logo_valid())}")

    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


# =============================================================================
# Validate Command
# =============================================================================

@main.command("validate")
@click.argument(
    "rom_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--strict",
    is_flag=True,
    help="Require the global checksum as well",
)
@pass_context
def cmd_validate(ctx: Context, rom_file: Path, strict: bool) -> None:
    """
    Validate a cartridge image.

    Checks:
    - Header structure
    - Logo bitmap
    - Header checksum
    - Global checksum (with --strict or GBHEADER_REQUIRE_GLOBAL_CHECKSUM)

    \b
    Example:
      gbheader validate tetris.gb
    """
    try:
        header = decode_file(rom_file)
        config = ctx.config.strict() if strict else ctx.config

        checks = [
            ("Logo bitmap", header.is_logo_valid(), config.require_logo),
            ("Header checksum", header.is_header_checksum_valid(),
             config.require_header_checksum),
            ("Global checksum", header.is_global_checksum_valid(),
             config.require_global_checksum),
        ]

        errors = []
        warnings = []
        for name, passed, required in checks:
            if passed:
                if ctx.verbose:
                    click.echo(f"  {name}: OK")
            elif required:
                errors.append(f"{name} mismatch")
            else:
                warnings.append(f"{name} mismatch")

        for warning in warnings:
            click.echo(f"Warning: {warning}")

        if errors:
            for error in errors:
                click.echo(f"Error: {error}", err=True)
            click.echo(f"\nValidation FAILED: {rom_file}")
            sys.exit(ExitCode.INVALID_ROM)

        click.echo(f"Validation passed: {rom_file}")

    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


# =============================================================================
# Checksum Command
# =============================================================================

@main.command("checksum")
@click.argument(
    "rom_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@pass_context
def cmd_checksum(ctx: Context, rom_file: Path) -> None:
    """
    Show stored and calculated checksums of a cartridge image.

    \b
    Example:
      gbheader checksum tetris.gb
    """
    try:
        header = decode_file(rom_file)
        header_report = header.header_checksum_report()
        global_report = header.global_checksum_report()

        click.echo(
            f"Header checksum: stored 0x{header_report.stored:02X}, "
            f"calculated 0x{header_report.calculated:02X} "
            f"({'OK' if header_report.is_valid else 'MISMATCH'})"
        )
        click.echo(
            f"Global checksum: stored 0x{global_report.stored:04X}, "
            f"calculated 0x{global_report.calculated:04X} "
            f"({'OK' if global_report.is_valid else 'MISMATCH'})"
        )

    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


if __name__ == "__main__":
    main()
