import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, SecretStr

DEFAULT_DEEPSEEK_API_URL = "https://api.deepseek.com/v1/chat/completions"

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """Raised when a required environment variable is missing or invalid."""


class GatewaySettings(BaseModel):
    """
    Immutable gateway configuration.

    Built once at startup and handed to the app factory; the CORS evaluator
    and the `ask` resolver receive it explicitly on every request.
    """

    model_config = ConfigDict(frozen=True)

    deepseek_api_key: SecretStr
    trusted_domain: str
    environment: str = "development"
    strict_domain_match: bool = False
    deepseek_api_url: str = DEFAULT_DEEPSEEK_API_URL
    request_timeout_seconds: Optional[float] = None
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8787

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls) -> "GatewaySettings":
        # Load .env.gateway or .env if present
        for env_file in (".env.gateway", ".env"):
            if os.path.exists(env_file):
                load_dotenv(env_file)

        api_key = os.getenv("DEEPSEEK_API_KEY", "")
        if not api_key:
            raise ConfigError("DEEPSEEK_API_KEY is required")

        # DOAMIN is the variable name used by older deployments
        trusted_domain = os.getenv("DOMAIN") or os.getenv("DOAMIN") or ""
        if not trusted_domain:
            raise ConfigError("DOMAIN is required for CORS origin matching")

        timeout = os.getenv("DEEPSEEK_TIMEOUT_SECONDS")
        port = os.getenv("PORT", "8787")
        try:
            timeout_seconds = float(timeout) if timeout else None
            port_number = int(port)
        except ValueError as e:
            raise ConfigError(f"Invalid numeric setting: {e}") from e

        return cls(
            deepseek_api_key=SecretStr(api_key),
            trusted_domain=trusted_domain,
            environment=os.getenv("ENVIRONMENT", "development"),
            strict_domain_match=os.getenv("CORS_STRICT_DOMAIN", "").lower() in _TRUTHY,
            deepseek_api_url=os.getenv("DEEPSEEK_API_URL", DEFAULT_DEEPSEEK_API_URL),
            request_timeout_seconds=timeout_seconds,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            host=os.getenv("HOST", "127.0.0.1"),
            port=port_number,
        )
