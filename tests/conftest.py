"""Shared fixtures for the gateway tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from fastapi import FastAPI
from pydantic import SecretStr

from deepseek_gateway.app import create_app
from deepseek_gateway.config import DEFAULT_DEEPSEEK_API_URL, GatewaySettings

API_KEY = "sk-test-secret-key"
TRUSTED_DOMAIN = "example.com"
DEEPSEEK_URL = DEFAULT_DEEPSEEK_API_URL


def completion_body(content: str | None = "hi") -> dict:
    """A DeepSeek chat completion with a single choice."""
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "deepseek-chat",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 3, "completion_tokens": 1, "total_tokens": 4},
    }


@pytest.fixture
def make_settings() -> Callable[..., GatewaySettings]:
    def _make(**overrides) -> GatewaySettings:
        values = {
            "deepseek_api_key": SecretStr(API_KEY),
            "trusted_domain": TRUSTED_DOMAIN,
            "environment": "development",
        }
        values.update(overrides)
        return GatewaySettings(**values)

    return _make


@pytest.fixture
def settings(make_settings: Callable[..., GatewaySettings]) -> GatewaySettings:
    return make_settings()


@pytest.fixture
def create_test_app(
    make_settings: Callable[..., GatewaySettings],
) -> Callable[..., FastAPI]:
    def _create(**overrides) -> FastAPI:
        return create_app(make_settings(**overrides))

    return _create
