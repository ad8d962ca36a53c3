from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    secret_key: str = "dev-secret-key-change-in-production"
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"

    # Security
    allowed_origins: str = "http://localhost:3000,http://localhost:80,http://localhost"
    access_token_expire_minutes: int = 30

    # Permissions
    office_admin_role: str = "OfficeAdmin"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @model_validator(mode="after")
    def _validate_production(self):
        if self.environment == "production":
            if self.secret_key == "dev-secret-key-change-in-production":
                raise ValueError(
                    "Production requires a non-default SECRET_KEY"
                )
        if self.log_format not in ("text", "json"):
            raise ValueError("LOG_FORMAT must be 'text' or 'json'")
        return self


settings = Settings()
