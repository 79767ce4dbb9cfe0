from pathlib import Path
from zoneinfo import ZoneInfo

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env from the project root so it loads regardless of cwd
_BACKEND_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _BACKEND_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(str(_ENV_FILE), ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Event source: "memory" serves the seeded demo store, "database" reads Postgres
    event_source: str = "memory"
    database_url: str = ""
    # Artificial latency of the in-memory store, mirrors the demo frontend
    mock_delay_ms: int = 500

    # CORS
    cors_origins: str = "http://localhost:3000"

    # Calendar rules
    clinic_timezone: str = "Asia/Riyadh"
    default_locale: str = "en"
    business_start_hour: int = 8
    business_end_hour: int = 20  # inclusive, last row is 20:00
    month_cell_event_limit: int = 3

    # Env
    env: str = "development"

    @field_validator("event_source")
    @classmethod
    def _check_event_source(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in {"memory", "database"}:
            raise ValueError(f"event_source must be 'memory' or 'database', got {v!r}")
        return v

    @field_validator("business_start_hour", "business_end_hour")
    @classmethod
    def _check_hour(cls, v: int) -> int:
        if not 0 <= v <= 23:
            raise ValueError(f"hour must be within 0-23, got {v}")
        return v

    @model_validator(mode="after")
    def _check_hour_order(self) -> "Settings":
        if self.business_start_hour > self.business_end_hour:
            raise ValueError(
                f"business_start_hour ({self.business_start_hour}) must not be after "
                f"business_end_hour ({self.business_end_hour})"
            )
        return self

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def hour_range(self) -> tuple[int, int]:
        return (self.business_start_hour, self.business_end_hour)

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.clinic_timezone)


settings = Settings()
