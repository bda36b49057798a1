"""Formatting preferences and service settings."""

import os
from typing import List, Literal, Mapping, Optional

from pydantic import BaseModel, Field

from colorcore.formats import ColorFormat, ColorStringFormat

ENV_PREFIX = "COLOR_SERVICE_"


class FormatPreferences(BaseModel):
    """How a caller wants color strings rendered."""

    uppercase_hex: bool = Field(default=False, description="Use uppercase hex digits")
    hash_prefix_in_hex: bool = Field(default=True, description="Prefix hex colors with '#'")
    legacy_color_syntax: bool = Field(
        default=False,
        description="Use comma-separated hsl()/rgb() instead of the modern space syntax",
    )
    preferred_color_format: ColorFormat = Field(
        default=ColorFormat.HEX, description="Format used when none is requested"
    )
    shown_color_formats: List[ColorFormat] = Field(
        default_factory=lambda: [
            ColorFormat.HEX,
            ColorFormat.HSL,
            ColorFormat.RGB,
            ColorFormat.LCH,
        ],
        description="Formats listed in color info responses, in order",
    )

    def resolve(self, fmt: Optional[ColorFormat] = None) -> ColorStringFormat:
        """Turn a plain format into the variant these preferences ask for."""
        fmt = fmt or self.preferred_color_format
        if fmt == ColorFormat.HEX:
            return ColorStringFormat.hex(
                is_uppercased=self.uppercase_hex, has_prefix=self.hash_prefix_in_hex
            )
        if self.legacy_color_syntax:
            if fmt == ColorFormat.HSL:
                fmt = ColorFormat.HSL_LEGACY
            elif fmt == ColorFormat.RGB:
                fmt = ColorFormat.RGB_LEGACY
        return ColorStringFormat(format=fmt)


class ServiceSettings(BaseModel):
    """HTTP/MCP server settings."""

    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8973, ge=1, le=65535, description="Port to listen on")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Root logging level"
    )
    mount_mcp: bool = Field(default=True, description="Expose the API as an MCP server")
    preferences: FormatPreferences = Field(default_factory=FormatPreferences)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceSettings":
        """
        Build settings from COLOR_SERVICE_* environment variables.

        COLOR_SERVICE_HOST, COLOR_SERVICE_PORT, COLOR_SERVICE_LOG_LEVEL and
        COLOR_SERVICE_MOUNT_MCP set the server fields; COLOR_SERVICE_UPPERCASE_HEX,
        COLOR_SERVICE_HASH_PREFIX_IN_HEX, COLOR_SERVICE_LEGACY_COLOR_SYNTAX and
        COLOR_SERVICE_PREFERRED_COLOR_FORMAT set the default preferences.
        Values are validated by pydantic; invalid ones raise ValidationError.
        """
        environ = os.environ if environ is None else environ

        def read(names):
            values = {}
            for name in names:
                raw = environ.get(ENV_PREFIX + name.upper())
                if raw is not None:
                    values[name] = raw.upper() if name == "log_level" else raw
            return values

        preferences = FormatPreferences.model_validate(
            read(
                [
                    "uppercase_hex",
                    "hash_prefix_in_hex",
                    "legacy_color_syntax",
                    "preferred_color_format",
                ]
            )
        )
        return cls.model_validate(
            {**read(["host", "port", "log_level", "mount_mcp"]), "preferences": preferences}
        )
