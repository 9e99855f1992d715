from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    LOG_FILE: str | None = None
    LOG_LEVEL: str = "INFO"

    # 호스트 앱의 .env 에 있는 다른 키는 무시합니다.
    model_config = SettingsConfigDict(
        env_prefix="BLOCKKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
