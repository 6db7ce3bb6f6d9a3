"""Runtime settings: CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``HEADR_*`` prefix
  3. Code defaults

Settings only steer diagnostics (log level and format). What gets printed
on stdout is decided by :class:`headr.config.models.HeadConfig` alone.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class HeadrSettings(BaseSettings):
    """Frozen runtime settings for the headr CLI.

    Attributes:
        debug: Emit DEBUG-level log events to stderr.
        log_json: Render log events as JSON lines instead of console text.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "HEADR_",
    }

    debug: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """No dotenv or secrets files; only kwargs and env vars."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> HeadrSettings:
        """Construct settings from CLI flags.

        Flags left at their off value are dropped so an env var can still
        switch them on.
        """
        overrides = {name: value for name, value in cli_flags.items() if value}
        return cls(**overrides)
