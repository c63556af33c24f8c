"""
Configuration settings for the serialization format benchmark.

Uses Pydantic Settings to load environment variables for logging, dataset
size, and output locations. Every field has a default so the benchmark runs
without any environment set up.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RECORDS = 1_000_000


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Benchmark defaults
    benchmark_records: int = Field(DEFAULT_RECORDS, ge=0, alias="BENCHMARK_RECORDS")
    benchmark_batch_size: int = Field(10_000, gt=0, alias="BENCHMARK_BATCH_SIZE")
    parquet_compression: str = Field("snappy", alias="PARQUET_COMPRESSION")

    # Output locations
    output_dir: str = Field(".", alias="BENCHMARK_OUTPUT_DIR")
    results_dir: str = Field("results", alias="BENCHMARK_RESULTS_DIR")
    persist_results: bool = Field(False, alias="PERSIST_RESULTS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_RECORDS", "Settings", "get_settings"]
