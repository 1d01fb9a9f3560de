import logging
import os
from dataclasses import dataclass

from speechlink.errors import ConfigError


@dataclass(frozen=True)
class Settings:
    bucket: str
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ

        bucket = environ.get("S3BUCKET", "").strip()
        if not bucket:
            raise ConfigError("S3BUCKET is not set")

        log_level = environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
        # getLevelName maps known names to ints and unknown ones to "Level X"
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"LOG_LEVEL {log_level!r} is not a logging level")

        return cls(bucket=bucket, log_level=log_level)
