# claimcheck/config.py

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    database_url: str = "sqlite:///./data/app.db"
    jwt_secret_key: str | None = None
    jwt_algorithm: str = "HS256"
    session_token_expire_days: int = 7
    reset_token_expire_minutes: int = 60
    bcrypt_rounds: int = 12

    openai_api_key: str | None = None
    analysis_model: str = "gpt-4o-mini"
    analysis_temperature: float = 0.3

    sendgrid_api_key: str | None = None
    mail_sender: str | None = None
    frontend_url: str = "http://localhost:8501"

    port: int = 5000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    enable_accounts: bool = True
    require_auth_for_analyze: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL", "sqlite:///./data/app.db"),
            jwt_secret_key=os.getenv("JWT_SECRET_KEY"),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            session_token_expire_days=int(os.getenv("SESSION_TOKEN_EXPIRE_DAYS", "7")),
            reset_token_expire_minutes=int(os.getenv("RESET_TOKEN_EXPIRE_MINUTES", "60")),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "12")),
            openai_api_key=os.getenv("OPENAI_API_KEY"),
            analysis_model=os.getenv("ANALYSIS_MODEL", "gpt-4o-mini"),
            analysis_temperature=float(os.getenv("ANALYSIS_TEMPERATURE", "0.3")),
            sendgrid_api_key=os.getenv("SENDGRID_API_KEY"),
            mail_sender=os.getenv("MAIL_SENDER"),
            frontend_url=os.getenv("FRONTEND_URL", "http://localhost:8501"),
            port=int(os.getenv("PORT", "5000")),
            cors_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()],
            enable_accounts=_env_bool("ENABLE_ACCOUNTS", True),
            require_auth_for_analyze=_env_bool("REQUIRE_AUTH_FOR_ANALYZE", True),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    @property
    def analyze_requires_auth(self) -> bool:
        return self.enable_accounts and self.require_auth_for_analyze

    def validate(self):
        if self.enable_accounts and not self.jwt_secret_key:
            raise ValueError("JWT_SECRET_KEY must be set when accounts are enabled")
