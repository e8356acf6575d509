from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Localization
    default_language: str = "sv"

    # Content ("" shows the first lesson in the catalog)
    lesson_id: str = ""

    # Presentation
    reveal_step_ms: int = 100

    # App
    app_name: str = "Lesson"
    log_level: str = "INFO"
    debug: bool = False


settings = Settings()
