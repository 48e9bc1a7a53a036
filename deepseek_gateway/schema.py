"""GraphQL schema: a single `ask` query proxied to DeepSeek."""

import logging

import strawberry
from strawberry.types import Info

from .deepseek import ask_deepseek

logger = logging.getLogger("deepseek-gateway")


@strawberry.type
class Query:
    @strawberry.field(description="Send a prompt to DeepSeek and return the first reply.")
    async def ask(self, info: Info, prompt: str) -> str:
        settings = info.context["settings"]
        logger.info("deepseek-gateway: ask called (prompt length=%d)", len(prompt))
        return await ask_deepseek(prompt, settings)


schema = strawberry.Schema(query=Query)
