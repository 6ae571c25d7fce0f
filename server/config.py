# server/config.py

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv


INSECURE_JWT_SECRET = "your-super-secret-jwt-key"


@dataclass(frozen=True)
class Settings:
    env: str = "development"
    jwt_secret: str = INSECURE_JWT_SECRET
    database_url: str = "sqlite:///./data/app.db"
    db_timeout: int = 10

    smtp_host: str = ""
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: str = ""
    smtp_from: str = ""
    smtp_use_tls: bool = True
    smtp_timeout: int = 10

    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.env in ("prod", "production")

    @property
    def uses_insecure_secret(self) -> bool:
        return not self.jwt_secret or self.jwt_secret == INSECURE_JWT_SECRET


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def load_settings() -> Settings:
    """
    Builds Settings from the process environment (and a .env file if present).
    """
    load_dotenv()
    origins = [o.strip() for o in _getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    return Settings(
        env=_getenv("ENV", "development").lower(),
        jwt_secret=_getenv("JWT_SECRET", INSECURE_JWT_SECRET),
        database_url=_getenv("DATABASE_URL", "sqlite:///./data/app.db"),
        db_timeout=int(_getenv("DB_TIMEOUT", "10")),
        smtp_host=_getenv("SMTP_HOST"),
        smtp_port=int(_getenv("SMTP_PORT", "587")),
        smtp_user=_getenv("SMTP_USER"),
        smtp_password=os.environ.get("SMTP_PASSWORD", ""),
        smtp_from=_getenv("SMTP_FROM"),
        smtp_use_tls=_getenv("SMTP_TLS", "1") == "1",
        smtp_timeout=int(_getenv("SMTP_TIMEOUT", "10")),
        cors_origins=origins or ["*"],
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
    )
