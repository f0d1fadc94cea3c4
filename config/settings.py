"""Environment-driven settings for the citytraffic command line."""

from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings

from .engine import EngineConfig


class Settings(BaseSettings):
    """Application-wide configuration."""

    log_level: str = Field(default="INFO")
    log_dir: str | None = Field(default=None)
    output_dir: str = Field(default="output")
    word_bits: int = Field(default=64, gt=0)
    reserve_zero_id: bool = Field(default=False)
    strict_tree: bool = Field(default=False)
    track_evaluations: bool = Field(default=True)

    class Config:
        env_prefix = "CITYTRAFFIC_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    def engine_config(self) -> EngineConfig:
        return EngineConfig(
            word_bits=self.word_bits,
            reserve_zero_id=self.reserve_zero_id,
            strict_tree=self.strict_tree,
            track_evaluations=self.track_evaluations,
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
