from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppSettings(BaseSettings):
    app_name: str = "clockcheck"
    version: str = "0.1.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000

    # Shared secret for /health; unset disables the gate
    auth_token: str | None = None

    # Feature toggles
    metrics_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    model_config = SettingsConfigDict(env_prefix="CLOCKCHECK_", env_file=".env", env_file_encoding="utf-8")

    @field_validator("auth_token")
    @classmethod
    def _empty_token_is_unset(cls, value: str | None) -> str | None:
        # CLOCKCHECK_AUTH_TOKEN= (empty) behaves like an absent variable
        if value == "":
            return None
        return value

# Load settings
settings = AppSettings()
