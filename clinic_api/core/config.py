import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


DEFAULT_CORS_ORIGINS = ("https://sl.pinkpulsehealth.info",)


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}.") from exc


def _get_required(name: str) -> str:
    value = (os.getenv(name) or "").strip()
    if not value:
        raise RuntimeError(f"{name} must be set before the server can start.")
    return value


def _get_list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
    if value is None:
        return default
    items = tuple(item.strip() for item in value.split(",") if item.strip())
    return items or default


@dataclass(frozen=True)
class AppConfig:
    """Process-wide settings, built once at startup and handed to the app."""

    database_url: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 60
    host: str = "0.0.0.0"
    port: int = 5038
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    rate_limit_max: int = 100
    rate_limit_window_seconds: int = 15 * 60
    clinic_requires_auth: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not self.database_url:
            raise RuntimeError("DATABASE_URL must be set before the server can start.")
        if not self.jwt_secret:
            raise RuntimeError("JWT_SECRET must be set before the server can start.")
        if self.jwt_expires_minutes <= 0:
            raise RuntimeError("JWT_EXPIRES_MINUTES must be positive.")
        if self.rate_limit_max <= 0 or self.rate_limit_window_seconds <= 0:
            raise RuntimeError("Rate limit settings must be positive.")


def load_config() -> AppConfig:
    load_dotenv()

    return AppConfig(
        database_url=_get_required("DATABASE_URL"),
        jwt_secret=_get_required("JWT_SECRET"),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        jwt_expires_minutes=_get_int("JWT_EXPIRES_MINUTES", 60),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_get_int("PORT", 5038),
        cors_origins=_get_list(os.getenv("CORS_ORIGINS"), DEFAULT_CORS_ORIGINS),
        rate_limit_max=_get_int("RATE_LIMIT_MAX", 100),
        rate_limit_window_seconds=_get_int("RATE_LIMIT_WINDOW_SECONDS", 15 * 60),
        clinic_requires_auth=_get_bool(os.getenv("CLINIC_REQUIRES_AUTH"), default=False),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
