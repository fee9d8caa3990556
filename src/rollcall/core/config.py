"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic_settings import BaseSettings


class CodecConfig(BaseSettings):
    """Line codec behaviour."""

    model_config = {"env_prefix": "ROLLCALL_CODEC_"}

    strict_gender: bool = False  # reject tags other than B/G instead of falling back to G
    encoding: str = "utf-8"


class DemoConfig(BaseSettings):
    """Paths and sizes for the roster demo script."""

    model_config = {"env_prefix": "ROLLCALL_DEMO_"}

    data_path: str = "data.csv"
    updated_path: str = "newData.csv"
    record_count: int = 5
    name_length: int = 19
    seed: Optional[int] = None


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "ROLLCALL_"}

    environment: Literal["dev", "test", "prod"] = "dev"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    diagnostics: Literal["log", "memory"] = "log"

    codec: CodecConfig = CodecConfig()
    demo: DemoConfig = DemoConfig()
