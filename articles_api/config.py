from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Articles API"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    DEBUG: bool = False

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: int = 8888
    ARTICLES_PREFIX: str = "/articles"
    WELCOME_MESSAGE: str = "Hello Ghochu!"
    CORS_ORIGINS: list[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
