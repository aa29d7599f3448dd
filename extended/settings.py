from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from extended.kinds import KIND_NAMES


class BenchmarkSettings(BaseSettings):
    sample_size: int = Field(default=200_000, gt=0)
    min_value: int = Field(default=-1000)
    max_value: int = Field(default=1000)
    kind: str = Field(default="int64")
    seed: int | None = Field(default=None)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )

    @field_validator("kind")
    @classmethod
    def kind_must_be_known(cls, value: str) -> str:
        if value not in KIND_NAMES:
            raise ValueError(
                f"kind must be one of {', '.join(KIND_NAMES)}, got {value!r}"
            )
        return value

    class Config:
        env_prefix = "EXTENDED_BENCHMARK_"
