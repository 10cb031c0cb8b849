"""
gbheader CLI Tests
==================

Tests for the ``gbheader`` command-line tool, run through Click's
CliRunner.
"""

import json

import pytest
from click.testing import CliRunner

from gbheader import __version__
from gbheader.cli.errors import ExitCode
from gbheader.cli.gbheader import main

from conftest import build_image


@pytest.fixture
def runner(monkeypatch) -> CliRunner:
    for name in (
        "GBHEADER_LOG_LEVEL",
        "GBHEADER_REQUIRE_LOGO",
        "GBHEADER_REQUIRE_HEADER_CHECKSUM",
        "GBHEADER_REQUIRE_GLOBAL_CHECKSUM",
    ):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


@pytest.fixture
def bad_global_path(tmp_path):
    """Image whose only defect is a wrong global checksum."""
    image = build_image()
    image[0x014F] ^= 0xFF
    path = tmp_path / "bad_global.gb"
    path.write_bytes(bytes(image))
    return path


@pytest.fixture
def bad_logo_path(tmp_path):
    logo = bytearray(build_image()[0x0104:0x0134])
    logo[0] = 0x00
    path = tmp_path / "bad_logo.gb"
    path.write_bytes(bytes(build_image(logo=bytes(logo))))
    return path


class TestMain:
    """Tests for the command group."""

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        for command in ("info", "validate", "checksum"):
            assert command in result.output


class TestInfoCommand:
    """Tests for ``gbheader info``."""

    def test_info(self, runner, rom_path):
        result = runner.invoke(main, ["info", str(rom_path)])
        assert result.exit_code == 0, result.output
        assert "POKEMON" in result.output
        assert "MBC3+TIMER+RAM+BATTERY" in result.output
        assert "2MByte" in result.output
        assert "Valid logo:         yes" in result.output

    def test_info_json(self, runner, rom_path):
        result = runner.invoke(main, ["info", "--json", str(rom_path)])
        assert result.exit_code == 0, result.output
        info = json.loads(result.output)
        assert info["title"] == "POKEMON"
        assert info["manufacturer_code"] == "AAUE"
        assert info["logo_valid"] is True

    def test_info_invalid_rom(self, runner, tmp_path):
        path = tmp_path / "tiny.gb"
        path.write_bytes(bytes(0x100))
        result = runner.invoke(main, ["info", str(path)])
        assert result.exit_code == ExitCode.INVALID_ROM
        assert "too small" in result.output

    def test_info_invalid_code(self, runner, tmp_path):
        image = build_image(cart_type=0x04)
        path = tmp_path / "bad_type.gb"
        path.write_bytes(bytes(image))
        result = runner.invoke(main, ["info", str(path)])
        assert result.exit_code == ExitCode.INVALID_ROM
        assert "invalid cartridge type flag: 0x04" in result.output

    def test_info_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["info", str(tmp_path / "missing.gb")])
        assert result.exit_code == 2


class TestValidateCommand:
    """Tests for ``gbheader validate``."""

    def test_valid_image(self, runner, rom_path):
        result = runner.invoke(main, ["validate", str(rom_path)])
        assert result.exit_code == 0, result.output
        assert "Validation passed" in result.output

    def test_verbose_lists_checks(self, runner, rom_path):
        result = runner.invoke(main, ["-v", "validate", str(rom_path)])
        assert result.exit_code == 0, result.output
        assert "Logo bitmap: OK" in result.output
        assert "Global checksum: OK" in result.output

    def test_global_checksum_is_warning_by_default(self, runner, bad_global_path):
        result = runner.invoke(main, ["validate", str(bad_global_path)])
        assert result.exit_code == 0, result.output
        assert "Warning: Global checksum mismatch" in result.output

    def test_strict_requires_global_checksum(self, runner, bad_global_path):
        result = runner.invoke(main, ["validate", "--strict", str(bad_global_path)])
        assert result.exit_code == ExitCode.INVALID_ROM
        assert "Global checksum mismatch" in result.output

    def test_env_requires_global_checksum(self, runner, bad_global_path, monkeypatch):
        monkeypatch.setenv("GBHEADER_REQUIRE_GLOBAL_CHECKSUM", "yes")
        result = runner.invoke(main, ["validate", str(bad_global_path)])
        assert result.exit_code == ExitCode.INVALID_ROM

    def test_bad_logo_fails(self, runner, bad_logo_path):
        result = runner.invoke(main, ["validate", str(bad_logo_path)])
        assert result.exit_code == ExitCode.INVALID_ROM
        assert "Logo bitmap mismatch" in result.output

    def test_env_relaxes_logo(self, runner, bad_logo_path, monkeypatch):
        monkeypatch.setenv("GBHEADER_REQUIRE_LOGO", "0")
        result = runner.invoke(main, ["validate", str(bad_logo_path)])
        assert result.exit_code == 0, result.output
        assert "Warning: Logo bitmap mismatch" in result.output


class TestChecksumCommand:
    """Tests for ``gbheader checksum``."""

    def test_checksum_ok(self, runner, rom_path):
        result = runner.invoke(main, ["checksum", str(rom_path)])
        assert result.exit_code == 0, result.output
        assert result.output.count("(OK)") == 2

    def test_checksum_mismatch(self, runner, bad_global_path):
        result = runner.invoke(main, ["checksum", str(bad_global_path)])
        assert result.exit_code == 0, result.output
        assert "Global checksum" in result.output
        assert "MISMATCH" in result.output
