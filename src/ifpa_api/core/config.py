from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.ifpapinball.com/v1/"
DEFAULT_USER_AGENT = "IfpaApi/1.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ifpa_api_key: str | None = Field(default=None, repr=False)
    ifpa_base_url: str = DEFAULT_BASE_URL
    ifpa_user_agent: str = DEFAULT_USER_AGENT

    # httpx default for the overall timeout; connect is bounded separately.
    ifpa_timeout_s: float = 5.0
    ifpa_connect_timeout_s: float = 5.0

    # Only switch off against hosts with a broken certificate chain.
    ifpa_verify_tls: bool = True

    def require_ifpa_api_key(self) -> str:
        if not self.ifpa_api_key:
            raise RuntimeError("IFPA_API_KEY is not set. Set it in the environment or .env file.")
        return self.ifpa_api_key


settings = Settings()
