from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_timeout: int = 10  # seconds, applied to every PostgREST call

    # Auth
    site_url: str = "http://localhost:5173"  # magic link redirect target
    phone_email_domain: str = "superconnector.app"

    # Matching
    match_strategy: str = "none"  # none | stored
    top_match_threshold: float = 0.5
    anonymous_name: str = "Anonymous"
    anonymous_bio: str = "No bio available"

    # App
    app_name: str = "superconnector"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        extra="ignore"
    )


settings = Settings()
