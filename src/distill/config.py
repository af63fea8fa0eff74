"""Application configuration loaded from a TOML file and environment variables."""

import os
import tomllib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

DEFAULT_CONFIG_PATH = Path("config.toml")


class StorageConfig(BaseModel, frozen=True):
    """S3-compatible object storage configuration."""

    endpoint: str = "s3.amazonaws.com"
    access_key: str = ""
    secret_key: str = ""
    secure: bool = True
    default_region: str = "us-east-1"
    bucket_name: str = ""
    presigned_url_ttl_seconds: int = 3600


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    speaker_labels: bool = True


class GeminiConfig(BaseModel, frozen=True):
    """Gemini summarization configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash-lite"
    system_prompt_path: Path = Path("prompts/system.txt")


class NotificationConfig(BaseModel, frozen=True):
    """Outbound webhook configuration for the notification sink."""

    webhook_endpoint: str = ""
    payload_format: Literal["sections", "text"] = "sections"
    timeout_seconds: float = 30.0


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    storage: StorageConfig
    assemblyai: AssemblyAIConfig
    gemini: GeminiConfig
    notification: NotificationConfig


def _read_settings(path: Path) -> dict:
    """Reads the TOML settings file, returning an empty mapping if it is absent."""
    if not path.is_file():
        return {}
    with path.open("rb") as f:
        return tomllib.load(f)


def load_config(path: Path | None = None) -> AppConfig:
    """Loads configuration from the settings file, overridden by environment variables."""
    settings = _read_settings(path or DEFAULT_CONFIG_PATH)
    storage = settings.get("storage", {})
    notification = settings.get("notification", {})

    # Older settings files keep these values under [aws] and [slack].
    bucket_name = storage.get(
        "bucket_name", settings.get("aws", {}).get("s3_bucket_name", "")
    )
    webhook_endpoint = notification.get(
        "webhook_endpoint", settings.get("slack", {}).get("webhook_endpoint", "")
    )

    return AppConfig(
        storage=StorageConfig(
            endpoint=os.getenv(
                "STORAGE_ENDPOINT", storage.get("endpoint", "s3.amazonaws.com")
            ),
            access_key=os.getenv("STORAGE_ACCESS_KEY", ""),
            secret_key=os.getenv("STORAGE_SECRET_KEY", ""),
            secure=os.getenv("STORAGE_SECURE", str(storage.get("secure", True))).lower()
            == "true",
            default_region=os.getenv(
                "STORAGE_DEFAULT_REGION", storage.get("default_region", "us-east-1")
            ),
            bucket_name=os.getenv("DISTILL_BUCKET_NAME", bucket_name),
        ),
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
        ),
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite"),
        ),
        notification=NotificationConfig(
            webhook_endpoint=os.getenv("DISTILL_WEBHOOK_ENDPOINT", webhook_endpoint),
            payload_format=notification.get("payload_format", "sections"),
        ),
    )
