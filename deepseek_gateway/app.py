import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from strawberry.fastapi import GraphQLRouter

from .config import GatewaySettings
from .cors import get_cors_headers
from .schema import schema

logger = logging.getLogger("deepseek-gateway")

GRAPHQL_PATH = "/graphql"


async def get_graphql_context(request: Request) -> dict:
    return {"settings": request.app.state.settings}


def create_app(settings: GatewaySettings) -> FastAPI:
    """
    Build the gateway app around an immutable settings value.

    Only /graphql is served: other paths get a bare 404 and preflight
    requests are answered here without reaching the GraphQL layer.
    """
    app = FastAPI(
        title="DeepSeek GraphQL Gateway",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    def cors_headers_for(request: Request) -> dict:
        return get_cors_headers(
            request.headers.get("origin"),
            settings.trusted_domain,
            strict=settings.strict_domain_match,
        )

    @app.middleware("http")
    async def _route_and_apply_cors(request: Request, call_next):
        logger.info("deepseek-gateway: Received request: %s %s", request.method, request.url.path)

        if request.url.path != GRAPHQL_PATH:
            logger.info(
                "deepseek-gateway: Path mismatch: %s, expected: %s",
                request.url.path,
                GRAPHQL_PATH,
            )
            return PlainTextResponse("Not Found", status_code=404)

        if request.method.upper() == "OPTIONS":
            return Response(status_code=204, headers=cors_headers_for(request))

        try:
            response = await call_next(request)
            for key, value in cors_headers_for(request).items():
                response.headers[key] = value
            logger.info(
                "deepseek-gateway: Completed request: %s %s -> %s",
                request.method,
                request.url.path,
                response.status_code,
            )
            return response
        except Exception as e:
            logger.exception("deepseek-gateway: Error handling GraphQL request: %s", e)
            return PlainTextResponse(
                f"Error handling request: {e}",
                status_code=500,
                headers=cors_headers_for(request),
            )

    graphql_router = GraphQLRouter(
        schema,
        context_getter=get_graphql_context,
        graphql_ide=None if settings.is_production else "graphiql",
    )
    app.include_router(graphql_router, prefix=GRAPHQL_PATH)

    return app
