"""Command-line settings — one frozen object built from CLI flags.

There is no configuration file and no environment lookup: every value
comes from the command line or from the defaults below.
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Any

from pydantic import BaseModel, field_validator

from datematch.domain.zones import zone_from_name


class DatematchSettings(BaseModel):
    """Global CLI flags, frozen after construction.

    Attributes:
        timezone: IANA zone name used to build matchers and render dates,
            or None for the system local zone.
    """

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    timezone: str | None = None

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str | None) -> str | None:
        if value is not None:
            zone_from_name(value)
        return value

    @property
    def zone(self) -> tzinfo | None:
        """The resolved ``tzinfo`` for :attr:`timezone`."""
        if self.timezone is None:
            return None
        return zone_from_name(self.timezone)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> DatematchSettings:
        """Construct settings from the root command's flags."""
        return cls(**cli_flags)
