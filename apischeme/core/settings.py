from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional


def _env(environ: Mapping[str, str], key: str, default: str) -> str:
    return (environ.get(key) or default).strip()


# log level used when APISCHEME_LOG_LEVEL is unset
_DEFAULT_LOG_LEVEL = {"dev": "INFO", "prod": "WARNING"}


@dataclass(frozen=True)
class Settings:
    env: str = "dev"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8001
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Reads APISCHEME_* variables:
          APISCHEME_ENV           dev | prod (default dev)
          APISCHEME_LOG_LEVEL     logging level name (default INFO, WARNING in prod)
          APISCHEME_HOST / _PORT  bind address for `python -m apischeme.main`
          APISCHEME_CORS_ORIGINS  comma-separated origins (default "*")
        """
        e = os.environ if environ is None else environ

        env = _env(e, "APISCHEME_ENV", "dev").lower()
        level = _env(e, "APISCHEME_LOG_LEVEL", _DEFAULT_LOG_LEVEL.get(env, "INFO")).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"APISCHEME_LOG_LEVEL: unknown level {level!r}")

        port_raw = _env(e, "APISCHEME_PORT", "8001")
        try:
            port = int(port_raw)
        except ValueError:
            raise ValueError(f"APISCHEME_PORT must be an integer, got {port_raw!r}") from None

        origins_raw = _env(e, "APISCHEME_CORS_ORIGINS", "")
        origins = [o.strip() for o in origins_raw.split(",") if o.strip()] if origins_raw else ["*"]

        return cls(
            env=env,
            log_level=level,
            host=_env(e, "APISCHEME_HOST", "0.0.0.0"),
            port=port,
            cors_origins=origins,
        )

    def apply_logging(self) -> None:
        logging.getLogger("apischeme").setLevel(self.log_level)
