"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration — reads from environment / .env file."""

    # aviationstack
    aviationstack_api_key: str = ""
    aviationstack_base_url: str = "http://api.aviationstack.com/v1"
    upstream_timeout_seconds: int = 30
    flights_limit: int = 100

    # Cache
    cache_ttl_flights: int = 3600               # 1 hour
    cache_max_entries: int = 0                  # 0 = unbounded

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    allowed_origins: str = "*"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def has_api_key(self) -> bool:
        return bool(self.aviationstack_api_key)

    @property
    def masked_api_key(self) -> str:
        """Key as it may appear in logs: last four characters only."""
        if not self.has_api_key:
            return "NOT SET"
        return "***" + self.aviationstack_api_key[-4:]

    @property
    def cors_origins(self) -> list[str]:
        if self.allowed_origins == "*":
            return ["*"]
        return [o.strip() for o in self.allowed_origins.split(",")]
