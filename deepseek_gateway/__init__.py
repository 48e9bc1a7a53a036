"""GraphQL gateway exposing a single `ask` query backed by DeepSeek."""

from .app import create_app
from .config import ConfigError, GatewaySettings

__all__ = ["create_app", "ConfigError", "GatewaySettings"]
