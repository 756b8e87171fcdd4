from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = "sqlite:///./bloodwork_screenings.db"
    app_env: str = "dev"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"

    allowed_origins: str = "http://localhost:3000"
    max_upload_size_mb: int = 20
    upload_tmp_dir: str | None = None
    upload_rate_limit: str = "100/minute"
    extraction_timeout_seconds: float = 30.0
    verify_schema_on_startup: bool = True


settings = Settings()
