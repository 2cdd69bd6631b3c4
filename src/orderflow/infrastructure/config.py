"""Runtime settings, read from the environment.

Every value can be overridden by the matching CLI option.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.service.pricing_service import DiscountMode

_LEVELS_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def get_environment() -> str:
    return (os.getenv("ENVIRONMENT") or "development").lower()


def get_log_level() -> str:
    """Get log level based on environment."""
    return os.getenv("LOG_LEVEL", _LEVELS_BY_ENV.get(get_environment(), "INFO")).upper()


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8080
    catalog_file: Path | None = None
    discount_mode: DiscountMode = DiscountMode.COMPOUNDING
    log_level: str = "INFO"
    json_logs: bool = False

    @staticmethod
    def from_env() -> Settings:
        raw_port = os.getenv("ORDERFLOW_PORT", "8080")
        try:
            port = int(raw_port)
        except ValueError as exc:
            raise ValidationError(f"ORDERFLOW_PORT must be an integer, got {raw_port!r}") from exc
        if not 0 < port < 65536:
            raise ValidationError(f"ORDERFLOW_PORT out of range: {port}")

        catalog = os.getenv("ORDERFLOW_CATALOG_FILE")
        return Settings(
            host=os.getenv("ORDERFLOW_HOST", "127.0.0.1"),
            port=port,
            catalog_file=Path(catalog) if catalog else None,
            discount_mode=DiscountMode.parse(
                os.getenv("ORDERFLOW_DISCOUNT_MODE", DiscountMode.COMPOUNDING.value)
            ),
            log_level=get_log_level(),
            json_logs=get_environment() in ("production", "staging"),
        )

    def with_overrides(self, **overrides: object) -> Settings:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
