import logging
from typing import Any, List, Optional

import httpx
from pydantic import BaseModel, ValidationError

from .config import GatewaySettings

logger = logging.getLogger("deepseek-gateway")

DEEPSEEK_MODEL = "deepseek-chat"
NO_CONTENT_FALLBACK = "no content returned"


class UpstreamChatError(RuntimeError):
    """The DeepSeek call failed or returned something unusable."""


class ChatMessage(BaseModel):
    role: Any = None
    content: Optional[str] = None


class ChatChoice(BaseModel):
    index: Any = None
    message: Optional[ChatMessage] = None
    finish_reason: Any = None


class ChatCompletion(BaseModel):
    """
    Chat completion body.

    Only choices[0].message.content is read; the other fields are kept
    untyped so an unexpected value in them never fails the parse.
    """

    id: Any = None
    object: Any = None
    created: Any = None
    model: Any = None
    choices: Optional[List[ChatChoice]] = None
    usage: Any = None


def build_chat_payload(prompt: str) -> dict:
    return {
        "model": DEEPSEEK_MODEL,
        "messages": [{"role": "user", "content": prompt}],
    }


def extract_reply(completion: ChatCompletion) -> str:
    """Text of the first choice, or the fallback when there is none."""
    if completion.choices:
        message = completion.choices[0].message
        if message is not None and message.content is not None:
            return message.content
    return NO_CONTENT_FALLBACK


async def ask_deepseek(prompt: str, settings: GatewaySettings) -> str:
    """
    Send `prompt` as a single user message to DeepSeek and return the reply.

    Raises UpstreamChatError on transport errors, non-2xx statuses and bodies
    that are not a chat completion. Error messages never include the API key.
    """
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {settings.deepseek_api_key.get_secret_value()}",
    }
    payload = build_chat_payload(prompt)

    logger.info(
        "deepseek-gateway: Calling DeepSeek at %s with model=%s",
        settings.deepseek_api_url,
        DEEPSEEK_MODEL,
    )

    try:
        async with httpx.AsyncClient(timeout=settings.request_timeout_seconds) as client:
            resp = await client.post(settings.deepseek_api_url, json=payload, headers=headers)
    except httpx.HTTPError as e:
        logger.error("deepseek-gateway: DeepSeek request failed: %s", type(e).__name__)
        raise UpstreamChatError(f"DeepSeek request failed: {type(e).__name__}") from e

    logger.info("deepseek-gateway: DeepSeek HTTP %s", resp.status_code)
    if resp.is_error:
        raise UpstreamChatError(f"DeepSeek returned HTTP {resp.status_code}")

    try:
        completion = ChatCompletion.model_validate(resp.json())
    except ValueError as e:
        # json.JSONDecodeError and pydantic's ValidationError are both ValueErrors
        kind = "unexpected response shape" if isinstance(e, ValidationError) else "invalid JSON"
        logger.error("deepseek-gateway: Could not parse DeepSeek response: %s", kind)
        raise UpstreamChatError(f"Could not parse DeepSeek response: {kind}") from e

    return extract_reply(completion)
