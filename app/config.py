from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./telecalling.db"
    SQLITE_BUSY_TIMEOUT: float = 30.0  # Seconds a writer waits for the SQLite lock

    # Application
    APP_NAME: str = "Telecalling Admin"
    DEBUG: bool = False
    ALLOWED_ORIGINS: str = "http://localhost:3000"
    LOG_DIR: str = "logs"  # Relative paths resolve against the working directory

    # Server
    # Default to 0.0.0.0 for development, use env var HOST in production
    HOST: str = "0.0.0.0"  # nosec: B104
    PORT: int = 8000

    # Administrative reset of the appointment counter and recycled pool.
    # Destructive, keep disabled in production.
    ALLOW_COUNTER_RESET: bool = False

    LOW_MEMORY_MODE: bool = True  # Enable reduced pool sizes

    @property
    def allowed_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=True, extra="ignore"
    )


settings = Settings()
