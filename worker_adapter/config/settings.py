"""Adapter configuration loading and validation."""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, ClassVar, Dict, Iterable, Literal

import yaml
from pydantic import Field, PositiveInt
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_LOCATIONS: tuple[Path, ...] = (
    Path("./config/worker-adapter.yaml"),
    Path("./config/worker-adapter.yml"),
)


class AdapterSettings(BaseSettings):
    """Validated settings for the gateway side of the worker protocol."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="WORKER_ADAPTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Local worker
    cache_dir: Path | None = Field(
        default=Path("./var/cache"),
        description="Directory holding locally cached action code; unset disables local execution.",
    )

    # Persistence
    database_url: str = Field(
        default="sqlite:///./var/data/gateway.db",
        description="SQLAlchemy URL of the connection store.",
    )

    # Remote workers
    worker_timeout_seconds: PositiveInt = Field(
        default=30,
        description="Timeout applied to every HTTP call against a worker.",
    )

    # Execution context
    tenant_id: str | None = Field(
        default=None,
        description="Tenant identifier forwarded in the execution context.",
    )
    base_url: str | None = Field(
        default=None,
        description="Public base URL forwarded to workers; defaults to the request base URL.",
    )

    # Process
    host: str = Field(default="127.0.0.1", description="Bind address for the gateway API.")
    port: PositiveInt = Field(default=8090, description="Port for the gateway API.")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum log level for the gateway process.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        if isinstance(value, str):
            return value.upper()
        return value

    config_path: Path | None = Field(
        default=None,
        description="Resolved path to the on-disk config that seeded the settings.",
        exclude=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[AdapterSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            init_settings,
            cls._yaml_settings_source,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    @staticmethod
    def _yaml_settings_source(settings_cls: type[AdapterSettings] | None = None) -> Dict[str, Any]:
        candidates: Iterable[Path] = AdapterSettings._resolve_candidate_paths()

        for path in candidates:
            data = AdapterSettings._load_file(path)
            if data is not None:
                data.setdefault("config_path", path)
                return data
        return {}

    @staticmethod
    def _resolve_candidate_paths() -> Iterable[Path]:
        explicit = os.getenv("WORKER_ADAPTER_CONFIG_FILE")
        if explicit:
            yield Path(explicit).expanduser()
        yield from DEFAULT_CONFIG_LOCATIONS

    @staticmethod
    def _load_file(path: Path) -> Dict[str, Any] | None:
        if not path.is_file():
            return None
        suffix = path.suffix.lower()
        try:
            with path.open("r", encoding="utf-8") as handle:
                if suffix in {".yaml", ".yml"}:
                    raw = yaml.safe_load(handle)
                elif suffix == ".json":
                    raw = json.load(handle)
                else:
                    return None
        except OSError as exc:
            raise RuntimeError(f"Failed to read adapter config file {path}") from exc
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ValueError(f"Invalid adapter config file {path}") from exc

        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ValueError(f"Adapter config file {path} must contain a mapping at top level.")
        return raw


@lru_cache()
def get_settings() -> AdapterSettings:
    """Return memoized adapter settings."""

    settings = AdapterSettings()
    # Ensure path fields are absolute for downstream use
    if settings.cache_dir is not None:
        settings.cache_dir = settings.cache_dir.expanduser().resolve()
    return settings
