"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "jobly"
    postgres_password: str = "password"
    postgres_db: str = "jobly"

    # "test" switches to the <postgres_db>_test database
    jobly_env: str = "development"

    # JWT Auth
    secret_key: str = "secret-dev"
    jwt_algorithm: str = "HS256"

    # Password hashing (kept low under test for speed)
    bcrypt_work_factor: int = 12

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # App
    debug: bool = False

    @property
    def is_test(self) -> bool:
        return self.jobly_env == "test"

    @property
    def database_name(self) -> str:
        return f"{self.postgres_db}_test" if self.is_test else self.postgres_db

    @property
    def postgres_url(self) -> str:
        """Construct PostgreSQL connection URL"""
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.database_name}"
        )

    @property
    def bcrypt_rounds(self) -> int:
        return 4 if self.is_test else self.bcrypt_work_factor

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
