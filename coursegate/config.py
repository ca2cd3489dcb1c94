from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Storage
    database_path: str = "coursegate.db"
    seed_demo_courses: bool = True

    # Admin
    admin_token: str = ""  # empty disables the admin API

    # Viewer clock fallback when the request carries neither `at` nor `tz`
    default_timezone: str | None = None

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
