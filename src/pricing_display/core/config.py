from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from pricing_display.core.exceptions import ConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean, got {raw!r}",
        code="INVALID_ENV",
        details={"variable": name, "value": raw},
    )


class DisplayConfig(BaseModel):
    default_precision: int = Field(default=2, ge=0, le=12)
    """Decimal places used when neither the currency nor the custom unit sets one."""
    group_thousands: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    json_logs: bool = True

    @classmethod
    def from_env(cls) -> DisplayConfig:
        """Create a :class:`DisplayConfig` from ``PRICING_DISPLAY_*`` environment variables.

        Reads the following env vars (all optional):

        * ``PRICING_DISPLAY_PRECISION`` → ``default_precision`` (integer, 0–12)
        * ``PRICING_DISPLAY_GROUP_THOUSANDS`` → ``group_thousands`` (``true``/``false``)
        * ``PRICING_DISPLAY_LOG_LEVEL`` → ``log_level`` (``DEBUG``, ``INFO``, ``WARNING``, ``ERROR``)
        * ``PRICING_DISPLAY_JSON_LOGS`` → ``json_logs`` (``true``/``false``)

        Any variable that is not set or is empty is left at its default value.

        Raises:
            ConfigurationError: If a variable is set to a value the field rejects.
        """
        kwargs: dict[str, Any] = {}

        precision = os.environ.get("PRICING_DISPLAY_PRECISION")
        if precision:
            try:
                kwargs["default_precision"] = int(precision)
            except ValueError as exc:
                raise ConfigurationError(
                    f"PRICING_DISPLAY_PRECISION must be an integer, got {precision!r}",
                    code="INVALID_ENV",
                    details={"variable": "PRICING_DISPLAY_PRECISION", "value": precision},
                ) from exc

        group = os.environ.get("PRICING_DISPLAY_GROUP_THOUSANDS")
        if group:
            kwargs["group_thousands"] = _parse_bool("PRICING_DISPLAY_GROUP_THOUSANDS", group)

        log_level = os.environ.get("PRICING_DISPLAY_LOG_LEVEL")
        if log_level:
            kwargs["log_level"] = log_level.upper()

        json_logs = os.environ.get("PRICING_DISPLAY_JSON_LOGS")
        if json_logs:
            kwargs["json_logs"] = _parse_bool("PRICING_DISPLAY_JSON_LOGS", json_logs)

        try:
            return cls(**kwargs)
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid pricing display configuration",
                code="INVALID_ENV",
                details={"errors": exc.errors(include_url=False)},
            ) from exc


DEFAULT_CONFIG = DisplayConfig()
