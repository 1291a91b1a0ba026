"""Application configuration."""

from typing import Literal

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Application
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./basic_repository.db"
    DATABASE_ECHO: bool = False
    DATABASE_POOL_PRE_PING: bool = True

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    @computed_field
    @property
    def engine_options(self) -> dict[str, object]:
        """Keyword arguments for ``create_engine``."""
        options: dict[str, object] = {
            "echo": self.DATABASE_ECHO,
            "pool_pre_ping": self.DATABASE_POOL_PRE_PING,
        }
        if self.is_sqlite:
            # sqlite connections are bound to the creating thread by default
            options["connect_args"] = {"check_same_thread": False}
        return options


settings = Settings()
