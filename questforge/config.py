from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "questforge"

    default_npc: str = "Bartender"
    default_tier: int = 1
    placeholder_fetch_item: str = "Apple"

    json_indent: int = Field(default=2, ge=0)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="QUESTFORGE_", env_file=".env", extra="ignore")


settings = Settings()
