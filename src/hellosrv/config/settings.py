"""Process settings built from CLI flags and code defaults only.

Uses Pydantic Settings v2 with the source chain trimmed to init kwargs, so
environment variables and dotenv files never leak into the configuration.
The port is the only functional value; ``verbose`` and ``log_json`` only
shape log output.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from hellosrv.config.models import DEFAULT_PORT, Port
from hellosrv.errors import ConfigurationError

_INTEGER = re.compile(r"-?[0-9]+")


class HelloSettings(BaseSettings):
    """Frozen settings object built once at startup.

    Attributes:
        port: TCP port to listen on, 1..65535.
        verbose: Enable DEBUG-level lifecycle logging.
        log_json: Emit log records as JSON lines instead of console text.
    """

    model_config = {"frozen": True}

    port: Port = DEFAULT_PORT
    verbose: bool = False
    log_json: bool = False

    @field_validator("port", mode="before")
    @classmethod
    def _parse_port(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("port must be an integer")
        if isinstance(value, str):
            text = value.strip()
            if not _INTEGER.fullmatch(text):
                raise ValueError("port must be an integer")
            return int(text)
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only explicit keyword arguments count."""
        return (init_settings,)

    @classmethod
    def from_cli(cls, *, port: str | int | None = None, **cli_flags: Any) -> HelloSettings:
        """Construct settings from a CLI invocation.

        *port* is the raw flag text (or None when the flag was omitted).
        Raises :class:`ConfigurationError` when it is not a valid port.
        """
        kwargs: dict[str, Any] = dict(cli_flags)
        if port is not None:
            kwargs["port"] = port
        try:
            return cls(**kwargs)
        except ValidationError as exc:
            raise ConfigurationError(_describe(exc, port), value=port) from exc


def _describe(exc: ValidationError, raw_port: str | int | None) -> str:
    """Turn the first validation error into a one-line operator message."""
    for error in exc.errors():
        if error.get("loc") == ("port",):
            reason = str(error.get("msg", "invalid value")).removeprefix("Value error, ")
            return f"invalid port {raw_port!r}: {reason}"
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "settings"
    return f"invalid {field}: {first.get('msg', 'invalid value')}"
