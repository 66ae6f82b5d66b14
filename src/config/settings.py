from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    site_url: str = "https://benjoquilario.vercel.app"
    site_title: str = "Benjo Quilario"
    site_description: str = "Articles on web development, tooling and the things I build."
    content_index_path: str = "content/articles.json"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"


settings = Settings()
