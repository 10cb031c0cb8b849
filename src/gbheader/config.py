"""
gbheader - Configuration
========================

Settings for the command-line tool. Configuration can come from:
- Default values (defined here)
- Environment variables

Which integrity checks are required decides the exit status of
``gbheader validate``. Real hardware only checks the logo and the header
checksum, so the global checksum is optional by default.
"""

from dataclasses import dataclass
from typing import Optional
import os


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(value: str) -> Optional[bool]:
    """Parse an environment flag, returning None for unrecognised values."""
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


@dataclass
class ToolConfig:
    """
    Configuration for the gbheader command-line tool.

    Attributes:
        log_level: Logging level name used when not in verbose mode
        require_logo: Logo bitmap must match for validation to pass
        require_header_checksum: Header checksum must match
        require_global_checksum: Global checksum must match
    """

    log_level: str = "WARNING"
    require_logo: bool = True
    require_header_checksum: bool = True
    require_global_checksum: bool = False

    @classmethod
    def from_env(cls) -> "ToolConfig":
        """
        Create ToolConfig from environment variables.

        Environment variables (all optional):
            GBHEADER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
            GBHEADER_REQUIRE_LOGO: 1/0, true/false, yes/no, on/off
            GBHEADER_REQUIRE_HEADER_CHECKSUM: same as above
            GBHEADER_REQUIRE_GLOBAL_CHECKSUM: same as above

        Returns:
            ToolConfig with values from environment variables
        """
        config = cls()

        if level := os.environ.get("GBHEADER_LOG_LEVEL"):
            level = level.strip().upper()
            if level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
                config.log_level = level

        flags = {
            "GBHEADER_REQUIRE_LOGO": "require_logo",
            "GBHEADER_REQUIRE_HEADER_CHECKSUM": "require_header_checksum",
            "GBHEADER_REQUIRE_GLOBAL_CHECKSUM": "require_global_checksum",
        }
        for env_name, attr in flags.items():
            if (raw := os.environ.get(env_name)) is not None:
                value = _parse_bool(raw)
                if value is not None:
                    setattr(config, attr, value)

        return config

    def strict(self) -> "ToolConfig":
        """Return a copy that requires every integrity check."""
        return ToolConfig(
            log_level=self.log_level,
            require_logo=True,
            require_header_checksum=True,
            require_global_checksum=True,
        )
