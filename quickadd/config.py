from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./quickadd.sqlite"
    app_env: str = "dev"
    log_level: str = "INFO"
    # Timezone used for "now" when the caller doesn't pass one
    user_timezone: str = "UTC"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="", case_sensitive=False)


settings = Settings()
