from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Database
    database_url: str = Field(validation_alias=AliasChoices("database_url", "postgres_url"))
    database_url_direct: str | None = Field(
        default=None,
        validation_alias=AliasChoices("database_url_direct", "postgres_url_non_pooling"),
    )
    database_ssl: Literal["require", "verify-ca", "verify-full", "disable"] = "require"

    # Seeding
    bcrypt_rounds: int = 10
    seed_rate_limit: str = "5/minute"

    # App
    app_name: str = "Invoice Dashboard Seeder"
    version: str = "1.0.0"
    debug: bool = False

    @property
    def seed_database_url(self) -> str:
        """Non-pooled URL when configured, otherwise the pooled one."""
        return self.database_url_direct or self.database_url


settings = Settings()
