from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_ENV: str = "dev"
    API_VERSION: str = "v1.0.0"
    DATABASE_URL: str = "sqlite:///./campus_calm.db"

    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_TIMEOUT_SECONDS: float = 30

    CHAT_TEMPERATURE: float = 0.7
    CHAT_MAX_TOKENS: int = 1000

    # Optional YAML file replacing the bundled keyword lists
    KEYWORDS_FILE: str = ""

    # Tokens are issued by the hosted auth provider; we only verify them.
    AUTH_JWT_SECRET: str = "change_me_super_secret"
    AUTH_JWT_AUDIENCE: str = "authenticated"

    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
