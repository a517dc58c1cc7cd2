from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

PLACEHOLDER_API_KEY = "inserisci_qui_la_tua_api_key"

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class ConfigurationError(RuntimeError):
    pass


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "SaberBot API Server"
    app_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 5000

    allowed_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    gemini_api_base: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout_seconds: float = 60
    # Retries are opt-in; 0 means a failed call is reported immediately.
    gemini_max_retries: int = Field(default=0, ge=0, le=5)
    gemini_retry_backoff_seconds: float = 0.5

    knowledge_base_path: str | None = None
    knowledge_base_filename: str = "saber_knowledge_base.txt"

    fail_fast_on_missing_key: bool = True

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def parse_allowed_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @property
    def api_key_configured(self) -> bool:
        key = self.gemini_api_key.strip()
        return bool(key) and key != PLACEHOLDER_API_KEY

    @property
    def masked_api_key(self) -> str:
        if not self.api_key_configured:
            return "<not set>"
        return f"****{self.gemini_api_key.strip()[-4:]}"

    def knowledge_base_candidates(self) -> list[Path]:
        """Paths probed for the knowledge base, in priority order."""
        candidates: list[Path] = []
        if self.knowledge_base_path:
            candidates.append(Path(self.knowledge_base_path).expanduser())
        candidates.append(Path.cwd() / self.knowledge_base_filename)
        candidates.append(PROJECT_ROOT / self.knowledge_base_filename)

        unique: list[Path] = []
        for path in candidates:
            if path not in unique:
                unique.append(path)
        return unique

    def require_api_key(self) -> None:
        if not self.api_key_configured:
            raise ConfigurationError(
                "GEMINI_API_KEY is not configured; copy .env.example to .env and set a real key"
            )


@lru_cache
def get_settings() -> Settings:
    return Settings()
