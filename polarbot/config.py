"""
Application configuration — reads all settings from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── App ──────────────────────────────────────────────
    APP_NAME: str = "Polar Bear Chatbot"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    # ── OpenRouter (OpenAI-compatible) ───────────────────
    OPENROUTER_API_KEY: str = ""
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"
    OPENROUTER_MODEL: str = "deepseek/deepseek-chat"
    APP_REFERER: str = "http://localhost:8000"
    MAX_TOKENS: int = 500
    TEMPERATURE: float = 0.8
    PRESENCE_PENALTY: float = 0.6
    FREQUENCY_PENALTY: float = 0.3
    HISTORY_WINDOW: int = 10
    AI_MODE: bool = False

    # ── Language ─────────────────────────────────────────
    DEFAULT_LANGUAGE: str = "en"
    SUPPORTED_LANGUAGES: str = "en,es"

    # ── Classification / Blueprint ───────────────────────
    FUZZY_THRESHOLD: float = 0.6
    BLUEPRINT_MAX_ITEMS: int = 3

    # ── Translation ──────────────────────────────────────
    TRANSLATION_MAX_TOKENS: int = 800
    TRANSLATION_TEMPERATURE: float = 0.2
    TRANSLATION_CACHE_SIZE: int = 256

    # ── History ──────────────────────────────────────────
    HISTORY_MAX_SESSIONS: int = 1000
    HISTORY_MAX_MESSAGES: int = 200

    # ── Rate Limiting ────────────────────────────────────
    RATE_LIMIT_PER_MINUTE: int = 60

    @property
    def supported_languages(self) -> tuple:
        return tuple(
            lang.strip().lower() for lang in self.SUPPORTED_LANGUAGES.split(",") if lang.strip()
        )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
