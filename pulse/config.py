from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in (value or "").split(",") if item.strip()]


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./pulse.db"
    STORE_CONNECT_TIMEOUT_SECONDS: int = 5

    # Application
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "http://localhost:8501,http://localhost:8000,http://127.0.0.1:8000"

    # Reviews
    ALLOWED_EMAIL_DOMAINS: str = "spelman.edu,morehouse.edu"
    SEMESTERS: str = "Fall 2024,Spring 2024,Fall 2023,Spring 2023,Fall 2022,Spring 2022"
    REVIEW_TEXT_MAX_LENGTH: int = 5000
    LATEST_REVIEWS_DEFAULT_LIMIT: int = 10
    LATEST_REVIEWS_MAX_LIMIT: int = 50

    # Credential gateway ("local" or "hosted")
    CREDENTIAL_BACKEND: str = "local"
    AUTH_API_URL: Optional[str] = None
    AUTH_API_KEY: Optional[str] = None
    AUTH_TIMEOUT_SECONDS: int = 5
    VERIFICATION_CODE_TTL_MINUTES: int = 60

    # Summarization (OpenAI-compatible chat completions endpoint)
    SUMMARY_API_URL: str = "https://openrouter.ai/api/v1/chat/completions"
    SUMMARY_API_KEY: Optional[str] = None
    SUMMARY_MODEL: str = "meta-llama/llama-3.2-3b-instruct"
    SUMMARY_TEMPERATURE: float = 0.3
    SUMMARY_MAX_TOKENS: int = 300
    SUMMARY_TIMEOUT_SECONDS: int = 20
    SUMMARY_MAX_REVIEWS: int = 50
    SUMMARY_MAX_CHARS_PER_REVIEW: int = 2000

    # Email Configuration
    EMAIL_NOTIFICATIONS_ENABLED: bool = True
    SMTP_SERVER: Optional[str] = None
    SMTP_PORT: int = 587
    SMTP_USERNAME: Optional[str] = None
    EMAIL_FROM: Optional[str] = None
    EMAIL_PASSWORD: Optional[str] = None
    SMTP_USE_TLS: bool = True
    SMTP_TIMEOUT_SECONDS: int = 8

    # Frontend
    PULSE_API_URL: str = "http://localhost:8000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def allowed_email_domains(self) -> List[str]:
        return [domain.lower().lstrip("@") for domain in _split_csv(self.ALLOWED_EMAIL_DOMAINS)]

    @property
    def semesters(self) -> List[str]:
        return _split_csv(self.SEMESTERS)

    @property
    def cors_origins(self) -> List[str]:
        return _split_csv(self.CORS_ORIGINS)


settings = Settings()
